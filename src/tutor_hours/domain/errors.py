"""Exceptions for unexpected infrastructure failures."""


class StoreUnavailableError(RuntimeError):
    """The persistent store could not be reached."""
