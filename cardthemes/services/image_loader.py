"""
Card image loading.

Resolves a card to its image path and decodes it with Pillow. A card whose
image is missing or corrupt yields None and a warning; the rest of the deck
is unaffected.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from PIL import Image

from cardthemes.models.card import CardId, describe_card
from cardthemes.models.cardset import CardsetDescriptor
from cardthemes.models.failure import AssetUnavailable, FailureKind
from cardthemes.services.asset_resolver import resolve_card_asset

logger = logging.getLogger(__name__)

ImageDecoder = Callable[[Path], Image.Image]

# Errors Pillow raises for absent, unreadable or undecodable files
DECODE_ERRORS = (OSError, ValueError, Image.DecompressionBombError)


def decode_image(path: Path) -> Image.Image:
    """Decode an image file fully, releasing the file handle."""
    with Image.open(path) as image:
        image.load()
        return image.copy()


def load_card_image(
    descriptor: CardsetDescriptor,
    card_id: CardId,
    decoder: ImageDecoder = decode_image,
) -> Image.Image | None:
    """
    Load the image for one card.

    Args:
        descriptor: Accepted cardset
        card_id: SpecialCard sentinel or ``suit * 13 + rank``
        decoder: Turns a path into an image, raising on failure

    Returns:
        The decoded image, or None if the cardset has no image for this
        card or the file could not be decoded
    """
    resolved = resolve_card_asset(descriptor, card_id)

    if isinstance(resolved, AssetUnavailable):
        logger.debug(
            "No image for %s in %s: %s", describe_card(card_id), descriptor.name, resolved.reason
        )
        return None

    try:
        return decoder(resolved)
    except DECODE_ERRORS as e:
        logger.warning(
            "card_image_load_failed",
            extra={
                "kind": FailureKind.IMAGE_DECODE_FAILED.value,
                "card": describe_card(card_id),
                "path": str(resolved),
                "error": f"{type(e).__name__}: {e}",
            },
        )
        return None
