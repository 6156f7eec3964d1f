"""
LanChat API package.

Provides the FastAPI application serving the translation proxy.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
