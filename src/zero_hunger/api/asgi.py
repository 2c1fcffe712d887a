"""ASGI entrypoint for the Zero Hunger API."""

from zero_hunger.api.app import create_app
from zero_hunger.containers import build_container

app = create_app(build_container())
