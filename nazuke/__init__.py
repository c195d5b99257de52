"""nazuke: Japanese name generator.

Composes a family name and a given name from bundled lookup tables,
decorated with a style-flavored meaning and a pronunciation guide.

    from nazuke import compose_name
    name = compose_name("female", "cute")
    print(name.kanji, name.romaji, name.pronunciation)
"""

__version__ = "0.1.0"

from .core.errors import NazukeError, InvalidGenderError, TableLoadError
from .core.models import Gender, GeneratedName, NameElement, NameEntry, NameStyle
from .generator import (
    NAME_STYLES,
    compose_name,
    compose_names,
    generate_pronunciation,
)

__all__ = [
    "__version__",
    "NazukeError",
    "InvalidGenderError",
    "TableLoadError",
    "Gender",
    "GeneratedName",
    "NameElement",
    "NameEntry",
    "NameStyle",
    "NAME_STYLES",
    "compose_name",
    "compose_names",
    "generate_pronunciation",
]
