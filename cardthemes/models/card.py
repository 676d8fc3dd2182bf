"""
Card identifiers.

An ordinary card is the integer ``suit * 13 + rank`` with suit 0-3 (clubs,
diamonds, hearts, spades) and rank 0-12 (ace to king). Suit 4 holds the
jokers. Non-playing assets use SpecialCard sentinels.
"""

from enum import Enum, IntEnum

CARDS_PER_SUIT = 13

# Four French suits plus the joker row
JOKER_SUIT = 4
MAX_CARD_ID = (JOKER_SUIT + 1) * CARDS_PER_SUIT


class Suit(IntEnum):
    """French suits in identifier order."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def char(self) -> str:
        """Single-letter code used in image filenames."""
        return "cdhs"[self]


class SpecialCard(Enum):
    """Sentinel identifiers for assets that are not playing cards."""

    SLOT = "slot"
    BACK = "back"


CardId = int | SpecialCard


def card_id(suit: Suit | int, rank: int) -> int:
    """
    Encode a suit and zero-based rank as a card identifier.

    Raises:
        ValueError: If suit or rank is out of range
    """
    if not 0 <= suit <= JOKER_SUIT:
        raise ValueError(f"Suit out of range: {suit}")
    if not 0 <= rank < CARDS_PER_SUIT:
        raise ValueError(f"Rank out of range: {rank}")
    return int(suit) * CARDS_PER_SUIT + rank


def split_card_id(value: int) -> tuple[int, int]:
    """
    Decode an integer identifier into (suit, rank).

    Raises:
        ValueError: If the identifier is outside the card range
    """
    if not 0 <= value < MAX_CARD_ID:
        raise ValueError(f"Card identifier out of range: {value}")
    return divmod(value, CARDS_PER_SUIT)


def is_joker(value: CardId) -> bool:
    if isinstance(value, SpecialCard):
        return False
    suit, _ = split_card_id(value)
    return suit == JOKER_SUIT


def describe_card(value: CardId) -> str:
    """Short human-readable name for log messages, e.g. ``4 of diamonds``."""
    if isinstance(value, SpecialCard):
        return value.value
    suit, rank = split_card_id(value)
    if suit == JOKER_SUIT:
        return f"joker {rank}"
    return f"{rank + 1} of {Suit(suit).name.lower()}"
