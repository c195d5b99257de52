"""CLI commands for nazuke."""

from . import (
    generate,
    styles,
    config_cmd,
)

__all__ = [
    "generate",
    "styles",
    "config_cmd",
]
