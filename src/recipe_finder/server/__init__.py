"""ASGI application factory and dependencies for the Recipe Finder server."""

from recipe_finder.server.app import app, create_app

__all__ = ["app", "create_app"]
