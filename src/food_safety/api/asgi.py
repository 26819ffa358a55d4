"""ASGI entrypoint for the food safety API."""

from food_safety.api.app import create_app
from food_safety.containers import build_container

app = create_app(build_container())
