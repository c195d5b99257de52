"""Name table and generated-name models for nazuke.

This module contains the data shapes the generator works with:
- Gender: closed set of supported genders
- NameEntry / NameTables: read-only lookup tables loaded from JSON
- NameStyle: style tag metadata (id, label, description)
- NameElement / GeneratedName: the result of one composition
"""

import json
from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Lookup Table Models
# =============================================================================


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class NameEntry(BaseModel):
    """One row of a name table."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    # A single token each; composition joins family and given with one space.
    kanji: str = Field(min_length=1, pattern=r"^\S+$")
    romaji: str = Field(min_length=1, pattern=r"^\S+$")
    meaning: str = ""


class NameTableFile(BaseModel):
    """On-disk layout of a single name table document."""

    names: list[NameEntry] = Field(min_length=1)


class NameTables(BaseModel, frozen=True):
    """The three lookup tables, immutable once loaded."""

    female: tuple[NameEntry, ...] = Field(min_length=1)
    male: tuple[NameEntry, ...] = Field(min_length=1)
    family: tuple[NameEntry, ...] = Field(min_length=1)

    def given_names(self, gender: Gender) -> tuple[NameEntry, ...]:
        """Get the given-name table for a gender."""
        if gender == Gender.FEMALE:
            return self.female
        return self.male


class NameStyle(BaseModel, frozen=True):
    """A style tag offered to callers."""

    id: str
    label: str
    description: str


# =============================================================================
# Generated Name
# =============================================================================


class NameElement(BaseModel, frozen=True):
    part: str
    meaning: str


class GeneratedName(BaseModel, frozen=True):
    """A fully composed name.

    ``japanese`` and ``romaji`` both carry the romanized full name (family
    name first); ``kanji`` carries the script form. ``elements`` lists the
    given name first, then the family name.
    """

    japanese: str
    kanji: str
    romaji: str
    meaning: str
    pronunciation: str
    elements: tuple[NameElement, ...]

    @property
    def copy_text(self) -> str:
        """Text handed to a clipboard passthrough."""
        return f"{self.kanji} ({self.romaji})"


def save_names(names: list[GeneratedName], path: Path | str) -> Path:
    """Save a batch of generated names as YAML or JSON (by file suffix)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {"names": [name.model_dump(mode="json") for name in names]}

    if path.suffix.lower() == ".json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    else:
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(
                data, f, default_flow_style=False, sort_keys=False, allow_unicode=True
            )
    return path


def load_names(path: Path | str) -> list[GeneratedName]:
    """Load a batch written by save_names()."""
    path = Path(path)

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not data:
        return []
    return [GeneratedName.model_validate(item) for item in data.get("names", [])]
