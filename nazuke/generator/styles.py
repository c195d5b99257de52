"""Style tags and their meaning templates.

Each style maps to a handful of short flavor sentences; one is drawn at random
to prefix the literal meaning of a generated name. Unknown or empty style ids
resolve to the ``unique`` templates.
"""

from types import MappingProxyType

from ..core.models.names import NameStyle

FALLBACK_STYLE = "unique"

NAME_STYLES: tuple[NameStyle, ...] = (
    NameStyle(
        id="cute",
        label="Cute & Adorable",
        description="Names that sound sweet and endearing",
    ),
    NameStyle(
        id="elegant",
        label="Elegant & Graceful",
        description="Names with refined and sophisticated meanings",
    ),
    NameStyle(
        id="strong",
        label="Strong & Powerful",
        description="Names that convey strength and determination",
    ),
    NameStyle(
        id="nature",
        label="Nature & Harmony",
        description="Names inspired by natural elements",
    ),
    NameStyle(
        id="hope",
        label="Hope & Dreams",
        description="Names representing aspirations and bright futures",
    ),
    NameStyle(
        id="wisdom",
        label="Wisdom & Intelligence",
        description="Names associated with knowledge and insight",
    ),
    NameStyle(
        id="artistic",
        label="Artistic & Creative",
        description="Names reflecting artistic and creative qualities",
    ),
    NameStyle(
        id="peaceful",
        label="Peaceful & Serene",
        description="Names expressing tranquility and calmness",
    ),
    NameStyle(
        id="lucky",
        label="Lucky & Fortunate",
        description="Names believed to bring good fortune",
    ),
    NameStyle(
        id="unique",
        label="Unique & Special",
        description="Distinctive names with special meanings",
    ),
)

STYLE_MEANING_PATTERNS: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "cute": (
            "Brings joy and sweetness like spring flowers",
            "As delightful as morning dew",
            "Gentle and charming like cherry blossoms",
            "Sweet and precious like a treasured pearl",
        ),
        "elegant": (
            "Graceful as the autumn moon",
            "Refined like morning mist over mountains",
            "Noble as the imperial chrysanthemum",
            "Dignified as ancient traditions",
        ),
        "strong": (
            "Powerful as the ocean waves",
            "Strong as the mountain peaks",
            "Enduring as the ancient pine",
            "Mighty as the summer storm",
        ),
        "nature": (
            "Pure as mountain streams",
            "Vibrant as spring gardens",
            "Peaceful as forest depths",
            "Free as soaring birds",
        ),
        "hope": (
            "Bright as the morning star",
            "Promise of new beginnings",
            "Light that guides the way",
            "Dawn of possibilities",
        ),
        "wisdom": (
            "Deep as ancient knowledge",
            "Clear as still waters",
            "Wise as the sage's teachings",
            "Understanding as boundless as the sky",
        ),
        "artistic": (
            "Creative as flowing brush strokes",
            "Expressive as poetry in motion",
            "Beautiful as traditional arts",
            "Imaginative as spring dreams",
        ),
        "peaceful": (
            "Serene as temple gardens",
            "Tranquil as morning meditation",
            "Calm as moonlit waters",
            "Peaceful as gentle rain",
        ),
        "lucky": (
            "Fortunate as spring sunshine",
            "Blessed by ancient spirits",
            "Lucky as morning stars",
            "Prosperous as golden harvests",
        ),
        "unique": (
            "Special as the first snow",
            "Unique as mountain peaks",
            "Rare as precious gems",
            "Distinctive as morning glory",
        ),
    }
)

_STYLES_BY_ID = {style.id: style for style in NAME_STYLES}


def style_ids() -> list[str]:
    """Get all style ids in display order."""
    return [style.id for style in NAME_STYLES]


def get_style(style: str | None) -> NameStyle | None:
    """Look up style metadata by id; None if the id is not known."""
    if not style:
        return None
    return _STYLES_BY_ID.get(style.strip().lower())


def resolve_style(style: str | None) -> str:
    """Map a requested style to the id whose templates will be used."""
    if not style:
        return FALLBACK_STYLE
    key = style.strip().lower()
    if key in STYLE_MEANING_PATTERNS:
        return key
    return FALLBACK_STYLE


def get_style_patterns(style: str | None) -> tuple[str, ...]:
    """Get the template sentences for a style, falling back to ``unique``."""
    return STYLE_MEANING_PATTERNS[resolve_style(style)]
