"""Command-line interface for nazuke."""

from .app import app

__all__ = ["app"]
