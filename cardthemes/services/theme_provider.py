"""
Card theme providers.

A CardThemeProvider is one loaded theme of a given on-disk format. Each
format implements the same capabilities: recognise a theme directory,
report card geometry and hand out card images. Formats are registered in
THEME_PROVIDERS and selected by the ThemeFormat tag of a CardThemeInfo.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar

from PIL import Image

from cardthemes.config import CARDSET_DIR_PREFIX, Settings
from cardthemes.models.card import CardId
from cardthemes.models.cardset import CardSize
from cardthemes.models.failure import CardsetParseError
from cardthemes.models.theme import CardThemeInfo, ThemeFormat, build_pysol_theme_info
from cardthemes.parsers.pysol_config import try_parse_cardset
from cardthemes.services.image_loader import ImageDecoder, decode_image, load_card_image

logger = logging.getLogger(__name__)


class CardThemeProvider(ABC):
    """Capabilities every card theme format provides."""

    format: ClassVar[ThemeFormat]

    def __init__(self, info: CardThemeInfo) -> None:
        if info.format != self.format:
            raise ValueError(f"{type(self).__name__} cannot load {info.format.value} themes")
        self.info = info

    @classmethod
    @abstractmethod
    def search_roots(cls, settings: Settings) -> list[Path]:
        """Directories to look for themes of this format in, in priority order."""

    @classmethod
    @abstractmethod
    def get_theme_info(
        cls,
        root: Path,
        subdirectory: str,
    ) -> CardThemeInfo | CardsetParseError | None:
        """
        Inspect one directory under a search root.

        Returns:
            CardThemeInfo if it holds an accepted theme, the parse failure
            if it looks like a theme but is malformed, None if it is not a
            theme of this format at all
        """

    @abstractmethod
    def load(self) -> bool:
        """Prepare the theme for drawing. Returns False on failure."""

    @abstractmethod
    def get_card_size(self) -> CardSize: ...

    @abstractmethod
    def set_card_size(self, width: int, height: int, proportion: float) -> bool:
        """Request a new card size. Returns True if the size changed."""

    @abstractmethod
    def get_card_aspect(self) -> float: ...

    @abstractmethod
    def get_card_image(self, card_id: CardId) -> Image.Image | None: ...

    @property
    def display_name(self) -> str:
        return self.info.display_name

    @property
    def pref_name(self) -> str:
        return self.info.pref_name


class PySolCardTheme(CardThemeProvider):
    """
    PySol cardset: one bitmap per card in a fixed size.

    Everything needed is in the descriptor parsed at discovery, so loading
    is a no-op and the card size never changes.
    """

    format = ThemeFormat.PYSOL

    def __init__(self, info: CardThemeInfo, decoder: ImageDecoder = decode_image) -> None:
        super().__init__(info)
        self._decoder = decoder

    @classmethod
    def search_roots(cls, settings: Settings) -> list[Path]:
        return settings.pysol_search_roots()

    @classmethod
    def get_theme_info(
        cls,
        root: Path,
        subdirectory: str,
    ) -> CardThemeInfo | CardsetParseError | None:
        if not subdirectory.startswith(CARDSET_DIR_PREFIX):
            return None

        result = try_parse_cardset(root, subdirectory)
        if isinstance(result, CardsetParseError):
            return result
        return build_pysol_theme_info(root, subdirectory, result)

    def load(self) -> bool:
        return True

    def get_card_size(self) -> CardSize:
        return self.info.descriptor.card_size

    def set_card_size(self, width: int, height: int, proportion: float) -> bool:
        # Bitmaps are drawn at their native size
        return False

    def get_card_aspect(self) -> float:
        return self.info.descriptor.card_aspect

    def get_card_image(self, card_id: CardId) -> Image.Image | None:
        return load_card_image(self.info.descriptor, card_id, decoder=self._decoder)


THEME_PROVIDERS: dict[ThemeFormat, type[CardThemeProvider]] = {
    ThemeFormat.PYSOL: PySolCardTheme,
}


def create_theme(info: CardThemeInfo) -> CardThemeProvider:
    """
    Instantiate the provider for a discovered theme.

    Raises:
        ValueError: If no provider is registered for the theme's format
    """
    provider_class = THEME_PROVIDERS.get(info.format)
    if provider_class is None:
        raise ValueError(f"No provider for theme format: {info.format.value}")

    theme = provider_class(info)
    logger.debug("Created %s theme %s", info.format.value, info.pref_name)
    return theme
