"""ASGI entrypoint for the wellness log API."""

from wellness_log.api.app import create_app
from wellness_log.containers import build_container

app = create_app(build_container())
