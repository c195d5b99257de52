"""Japanese name generation.

Composes family + given names from bundled lookup tables, decorates the
literal meaning with a style template, and derives a pronunciation guide.
"""

from .composer import (
    compose_name,
    compose_names,
    generate_meaning,
    generate_pronunciation,
)
from .styles import (
    FALLBACK_STYLE,
    NAME_STYLES,
    STYLE_MEANING_PATTERNS,
    get_style,
    get_style_patterns,
    resolve_style,
    style_ids,
)
from .tables import get_tables, load_table, load_tables, reset_tables

__all__ = [
    "compose_name",
    "compose_names",
    "generate_meaning",
    "generate_pronunciation",
    "FALLBACK_STYLE",
    "NAME_STYLES",
    "STYLE_MEANING_PATTERNS",
    "get_style",
    "get_style_patterns",
    "resolve_style",
    "style_ids",
    "get_tables",
    "load_table",
    "load_tables",
    "reset_tables",
]
