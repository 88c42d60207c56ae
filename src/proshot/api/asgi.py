"""ASGI entrypoint for the ProShot API."""

from proshot.api.app import create_app
from proshot.containers import build_container

app = create_app(build_container())
