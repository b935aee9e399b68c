"""ASGI application factory and dependencies for the Petits Plats server."""

from petitsplats.server.app import app, create_app

__all__ = ["app", "create_app"]
