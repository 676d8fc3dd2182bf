"""
Card asset resolution.

Maps a card identifier to the image file that draws it in a cardset.
Pure path arithmetic: nothing here touches the filesystem.

Filenames:
- ordinary card: two-digit face value, suit letter, cardset extension
  (``04d.png`` is the four of diamonds)
- back: the cardset's default back filename
- empty slot: always ``bottom01.gif``, whatever the cardset extension
- joker: no image, reported as AssetUnavailable
"""

from pathlib import Path

from cardthemes.config import SLOT_IMAGE_FILENAME
from cardthemes.models.card import (
    CardId,
    SpecialCard,
    Suit,
    is_joker,
    split_card_id,
)
from cardthemes.models.cardset import CardsetDescriptor
from cardthemes.models.failure import AssetUnavailable


def card_filename(card_id: int, image_extension: str) -> str:
    """
    Filename of an ordinary card image.

    Raises:
        ValueError: If card_id is not an ordinary card
    """
    if is_joker(card_id):
        raise ValueError(f"Card identifier {card_id} is a joker")
    suit, rank = split_card_id(card_id)
    return f"{rank + 1:02d}{Suit(suit).char}{image_extension}"


def resolve_card_asset(
    descriptor: CardsetDescriptor,
    card_id: CardId,
) -> Path | AssetUnavailable:
    """
    Resolve a card identifier to its image path.

    Args:
        descriptor: Accepted cardset
        card_id: SpecialCard sentinel or ``suit * 13 + rank``

    Returns:
        Image path under descriptor.base_path, or AssetUnavailable for
        identifiers the cardset has no image for (jokers)

    Raises:
        ValueError: If an integer identifier is outside [0, 65)
    """
    if card_id is SpecialCard.SLOT:
        return descriptor.base_path / SLOT_IMAGE_FILENAME
    if card_id is SpecialCard.BACK:
        return descriptor.base_path / descriptor.default_back

    if is_joker(card_id):
        return AssetUnavailable(card_id=card_id, reason="PySol cardsets have no joker images")

    return descriptor.base_path / card_filename(card_id, descriptor.image_extension)
