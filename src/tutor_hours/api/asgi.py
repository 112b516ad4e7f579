"""ASGI entrypoint for the tutor hours API."""

from tutor_hours.api.app import create_app
from tutor_hours.containers import build_container

app = create_app(build_container())
