"""Loading of the bundled name tables.

Tables are JSON documents of the form ``{"names": [{kanji, romaji, meaning}]}``.
They are read once per process and shared read-only afterwards.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..core.errors import TableLoadError
from ..core.models.names import NameEntry, NameTableFile, NameTables

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

FEMALE_NAMES_FILE = "female-names.json"
MALE_NAMES_FILE = "male-names.json"
FAMILY_NAMES_FILE = "family-names.json"

# Lazy-loaded tables
_tables: NameTables | None = None


def bundled_data_dir() -> Path:
    """Directory holding the tables shipped with the package."""
    return _DATA_DIR


def load_table(path: Path | str) -> tuple[NameEntry, ...]:
    """Load and validate one name table file.

    Raises:
        TableLoadError: If the file is missing, not JSON, or has no valid entries.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise TableLoadError(path, "file not found") from None
    except json.JSONDecodeError as e:
        raise TableLoadError(path, f"invalid JSON ({e.msg} at line {e.lineno})") from e
    except OSError as e:
        raise TableLoadError(path, str(e)) from e

    try:
        table = NameTableFile.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(p) for p in first["loc"]) or "<root>"
        raise TableLoadError(path, f"{location}: {first['msg']}") from e

    logger.debug("Loaded %d names from %s", len(table.names), path)
    return tuple(table.names)


def load_tables(data_dir: Path | str | None = None) -> NameTables:
    """Load all three tables from a directory (bundled data by default)."""
    base = Path(data_dir) if data_dir else _DATA_DIR
    return NameTables(
        female=load_table(base / FEMALE_NAMES_FILE),
        male=load_table(base / MALE_NAMES_FILE),
        family=load_table(base / FAMILY_NAMES_FILE),
    )


def get_tables() -> NameTables:
    """Get the process-wide tables, loading them on first use.

    Honors ``data.dir`` from the active config.
    """
    global _tables
    if _tables is None:
        from ..config import get_config

        _tables = load_tables(get_config().data_dir)
        logger.info(
            "Name tables ready: %d female, %d male, %d family",
            len(_tables.female),
            len(_tables.male),
            len(_tables.family),
        )
    return _tables


def reset_tables() -> None:
    """Drop the cached tables (forces reload on next get_tables())."""
    global _tables
    _tables = None
