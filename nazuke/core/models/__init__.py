"""Pydantic models for nazuke.

- names.py: lookup tables, style metadata and generated-name records
"""

from .names import (
    Gender,
    NameEntry,
    NameTableFile,
    NameTables,
    NameStyle,
    NameElement,
    GeneratedName,
    save_names,
    load_names,
)

__all__ = [
    "Gender",
    "NameEntry",
    "NameTableFile",
    "NameTables",
    "NameStyle",
    "NameElement",
    "GeneratedName",
    "save_names",
    "load_names",
]
