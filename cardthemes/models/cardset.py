"""
Cardset descriptor.

The validated, immutable description of one PySol cardset directory.

INVARIANTS (checked on construction, so every descriptor satisfies them):
- backs is non-empty
- default_back_index is a valid index into backs
- image_extension is non-empty
- deck_type is FRENCH and card_count is 52
"""

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import NamedTuple

from cardthemes.config import FRENCH_CARD_COUNT
from cardthemes.models.failure import CardsetParseError, FailureKind


class CardsetType(IntEnum):
    """PySol deck types, as declared in the config header."""

    FRENCH = 1  # 52 cards
    HANAFUDA = 2  # 48 cards
    TAROCK = 3  # 78 cards
    MAHJONGG = 4  # 42 tiles
    HEXADECK = 5  # 68 cards
    MUGHAL_GANJIFA = 6  # 96 cards
    NAVAGRAHA_GANJIFA = 7  # 108 cards
    DASHAVATARA_GANJIFA = 8  # 120 cards
    TRUMP_ONLY = 9  # variable


def describe_deck_type(value: int) -> str:
    try:
        return CardsetType(value).name.lower()
    except ValueError:
        return f"unknown type {value}"


class CardSize(NamedTuple):
    width: int
    height: int


@dataclass(frozen=True, slots=True)
class CardsetDescriptor:
    """
    Metadata of an accepted PySol cardset.

    Attributes:
        name: Human-readable cardset name
        base_path: Directory holding config.txt and the images
        image_extension: Extension of per-card images, with leading dot
        format_version: Version declared in the header line
        deck_type: Declared deck type (always FRENCH once accepted)
        card_count: Declared number of cards (always 52 once accepted)
        card_width: Card width in pixels
        card_height: Card height in pixels
        card_delta: Format-specific spacing value, carried through as-is
        backs: Available back image filenames, in declared order
        default_back_index: Index of the default back in backs
    """

    name: str
    base_path: Path
    image_extension: str
    format_version: int
    deck_type: int
    card_count: int
    card_width: int
    card_height: int
    card_delta: int
    backs: tuple[str, ...]
    default_back_index: int = 0

    def __post_init__(self) -> None:
        if self.deck_type != CardsetType.FRENCH or self.card_count != FRENCH_CARD_COUNT:
            raise CardsetParseError(
                FailureKind.UNSUPPORTED_DECK_TYPE,
                "Only the 52-card French deck is supported",
                detail=f"{describe_deck_type(self.deck_type)}, {self.card_count} cards",
            )
        if not self.image_extension:
            raise CardsetParseError(FailureKind.MISSING_EXTENSION, "No image extension")
        if not self.name:
            raise CardsetParseError(FailureKind.MISSING_NAME, "Cardset has no name")
        if not self.backs:
            raise CardsetParseError(FailureKind.NO_BACKS, "Cardset has no back images")
        if not 0 <= self.default_back_index < len(self.backs):
            raise CardsetParseError(
                FailureKind.INVARIANT_VIOLATION,
                "Default back index out of range",
                detail=f"{self.default_back_index} not in [0, {len(self.backs)})",
            )

    @property
    def card_size(self) -> CardSize:
        return CardSize(self.card_width, self.card_height)

    @property
    def card_aspect(self) -> float:
        """Width over height, 0.0 for a degenerate zero-height geometry."""
        if self.card_height == 0:
            return 0.0
        return self.card_width / self.card_height

    @property
    def default_back(self) -> str:
        return self.backs[self.default_back_index]


def create_cardset_descriptor(
    name: str,
    base_path: Path,
    image_extension: str | None,
    format_version: int,
    deck_type: int,
    card_count: int,
    geometry: tuple[int, int, int],
    backs: list[str] | tuple[str, ...],
    default_back: str = "",
) -> CardsetDescriptor:
    """
    Create a CardsetDescriptor from parsed config fields.

    The default back is given by name; a name that matches none of the
    backs selects the first one.

    Args:
        name: Cardset name
        base_path: Cardset directory
        image_extension: Declared extension, None if the header has none
        format_version: Header version
        deck_type: Header deck type
        card_count: Header card count
        geometry: (width, height, delta)
        backs: Back image filenames
        default_back: Filename of the preferred back

    Returns:
        Immutable CardsetDescriptor

    Raises:
        CardsetParseError: If any descriptor invariant does not hold
    """
    backs = tuple(backs)
    default_back_index = backs.index(default_back) if default_back in backs else 0
    width, height, delta = geometry

    return CardsetDescriptor(
        name=name,
        base_path=base_path,
        image_extension=image_extension or "",
        format_version=format_version,
        deck_type=deck_type,
        card_count=card_count,
        card_width=width,
        card_height=height,
        card_delta=delta,
        backs=backs,
        default_back_index=default_back_index,
    )
