"""
cardthemes services.

Theme discovery, card asset resolution and image loading.
"""

from cardthemes.services.asset_resolver import card_filename, resolve_card_asset
from cardthemes.services.discovery import (
    DiscoveryResult,
    ThemeRejection,
    discover_themes,
    list_subdirectories,
)
from cardthemes.services.image_loader import decode_image, load_card_image
from cardthemes.services.theme_provider import (
    THEME_PROVIDERS,
    CardThemeProvider,
    PySolCardTheme,
    create_theme,
)

__all__ = [
    "THEME_PROVIDERS",
    "CardThemeProvider",
    "DiscoveryResult",
    "PySolCardTheme",
    "ThemeRejection",
    "card_filename",
    "create_theme",
    "decode_image",
    "discover_themes",
    "list_subdirectories",
    "load_card_image",
    "resolve_card_asset",
]
