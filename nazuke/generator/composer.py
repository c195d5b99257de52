"""Composition of Japanese names from the lookup tables.

A composed name is a family name followed by a given name, a style-flavored
meaning sentence, and a rough pronunciation guide derived from the romanized
given name.
"""

from __future__ import annotations

import logging
import random
from typing import Protocol, Sequence, TypeVar

from ..core.errors import InvalidGenderError
from ..core.models.names import (
    Gender,
    GeneratedName,
    NameElement,
    NameTables,
)
from .styles import get_style_patterns
from .tables import get_tables

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Applied in order, before characters are separated.
PRONUNCIATION_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    ("shi", "ši"),
    ("chi", "či"),
    ("tsu", "cu"),
)
PRONUNCIATION_SEPARATOR = "·"


class UniformSource(Protocol):
    """Anything that can draw an integer uniformly from [0, n)."""

    def randrange(self, n: int) -> int: ...


def _pick(options: Sequence[T], rng: UniformSource) -> T:
    """Pick one option uniformly at random."""
    return options[rng.randrange(len(options))]


def _normalize_gender(gender: Gender | str | None) -> Gender:
    """Map a gender selection to Gender; never defaults."""
    if isinstance(gender, Gender):
        return gender
    if not isinstance(gender, str):
        raise InvalidGenderError(gender)
    try:
        return Gender(gender.strip().lower())
    except ValueError:
        raise InvalidGenderError(gender) from None


def generate_pronunciation(romaji: str) -> str:
    """Build a pronunciation guide from a romanized name.

    Examples:
        "Yuki" → "y·u·k·i"
        "Shizuka" → "š·i·z·u·k·a"
        "Natsumi" → "n·a·c·u·m·i"
    """
    text = romaji.lower()
    for target, replacement in PRONUNCIATION_SUBSTITUTIONS:
        text = text.replace(target, replacement)
    return PRONUNCIATION_SEPARATOR.join(text)


def generate_meaning(style: str | None, meaning: str, *, rng: UniformSource) -> str:
    """Prefix a literal meaning with a random template sentence for the style."""
    pattern = _pick(get_style_patterns(style), rng)
    return f"{pattern}. {meaning}"


def _compose(
    gender: Gender,
    style: str | None,
    tables: NameTables,
    rng: UniformSource,
) -> GeneratedName:
    first_name = _pick(tables.given_names(gender), rng)
    last_name = _pick(tables.family, rng)

    full_romaji = f"{last_name.romaji} {first_name.romaji}"
    meaning = generate_meaning(
        style,
        f"{first_name.meaning} (given name) combined with "
        f"{last_name.meaning} (family name)",
        rng=rng,
    )

    name = GeneratedName(
        japanese=full_romaji,
        kanji=f"{last_name.kanji} {first_name.kanji}",
        romaji=full_romaji,
        meaning=meaning,
        pronunciation=generate_pronunciation(first_name.romaji),
        elements=(
            NameElement(part=first_name.kanji, meaning=first_name.meaning),
            NameElement(part=last_name.kanji, meaning=last_name.meaning),
        ),
    )
    logger.debug(
        "Composed %s (%s) for gender=%s style=%r",
        name.kanji,
        name.romaji,
        gender.value,
        style,
    )
    return name


def compose_name(
    gender: Gender | str,
    style: str | None = None,
    *,
    rng: UniformSource | None = None,
    seed: int | None = None,
    tables: NameTables | None = None,
) -> GeneratedName:
    """Compose one Japanese name.

    Args:
        gender: "male" or "female" (or a Gender). Required.
        style: Style id (e.g. "cute"). Empty or unknown ids use the
            ``unique`` templates.
        rng: Uniform random source with ``randrange(n)``. Defaults to
            ``random.Random(seed)``.
        seed: RNG seed for reproducibility (ignored when rng is given)
        tables: Name tables to draw from. Defaults to the bundled tables.

    Returns:
        A fully populated GeneratedName

    Raises:
        InvalidGenderError: If gender is not male or female.
    """
    norm_gender = _normalize_gender(gender)
    if rng is None:
        rng = random.Random(seed)
    if tables is None:
        tables = get_tables()
    return _compose(norm_gender, style, tables, rng)


def compose_names(
    gender: Gender | str,
    style: str | None = None,
    *,
    count: int,
    rng: UniformSource | None = None,
    seed: int | None = None,
    tables: NameTables | None = None,
) -> list[GeneratedName]:
    """Compose ``count`` independent names from one random source.

    Duplicates are possible; draws are not deduplicated.
    """
    norm_gender = _normalize_gender(gender)
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    if rng is None:
        rng = random.Random(seed)
    if tables is None:
        tables = get_tables()
    return [_compose(norm_gender, style, tables, rng) for _ in range(count)]
