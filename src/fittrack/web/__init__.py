"""Web interface for fittrack."""

from .app import create_app

__all__ = ["create_app"]
