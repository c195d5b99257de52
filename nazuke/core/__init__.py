"""Core models and errors for nazuke."""

from .errors import NazukeError, InvalidGenderError, TableLoadError

__all__ = ["NazukeError", "InvalidGenderError", "TableLoadError"]
