import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_prefix="CARDTHEMES_", env_file=".env")

    debug: bool = False

    # Extra PySol search roots, separated by os.pathsep
    pysol_theme_path: str = ""

    # Searched after the extra roots
    pysol_system_path: Path = Path("/usr/share/games/pysol")

    def pysol_search_roots(self) -> list[Path]:
        """Extra roots in declared order, then the system root."""
        roots = [Path(entry) for entry in self.pysol_theme_path.split(os.pathsep) if entry]
        roots.append(self.pysol_system_path)
        return roots


# =============================================================================
# PYSOL CARDSET FORMAT
# =============================================================================

CONFIG_FILENAME = "config.txt"

# Only subdirectories carrying this prefix are considered cardsets
CARDSET_DIR_PREFIX = "cardset-"

PYSOL_MAGIC = "PySol solitaire cardset"

# Header versions from here on carry extension, deck type and card count
HEADER_EXTENSION_VERSION = 3

DEFAULT_IMAGE_EXTENSION = ".gif"

# Always .gif, whatever extension the cardset declares
SLOT_IMAGE_FILENAME = "bottom01.gif"

FRENCH_CARD_COUNT = 52

MIN_CONFIG_LINES = 6
