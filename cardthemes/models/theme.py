"""
Theme registration records.

A CardThemeInfo is what a theme list shows and stores: a display name for
people and a stable preference key for settings files.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from cardthemes.models.cardset import CardsetDescriptor


class ThemeFormat(str, Enum):
    """On-disk theme formats."""

    PYSOL = "pysol"


@dataclass(frozen=True, slots=True)
class CardThemeInfo:
    """
    A discovered, accepted card theme.

    Attributes:
        format: Theme format the entry was parsed as
        root: Search root the theme was found under
        subdirectory: Theme directory name within root
        display_name: Label for theme lists, e.g. "Standard (PySol)"
        pref_name: Stable preference key, e.g. "pysol:cardset-standard"
        descriptor: Parsed cardset metadata
    """

    format: ThemeFormat
    root: Path
    subdirectory: str
    display_name: str
    pref_name: str
    descriptor: CardsetDescriptor


def build_pysol_theme_info(
    root: Path,
    subdirectory: str,
    descriptor: CardsetDescriptor,
) -> CardThemeInfo:
    """Wrap an accepted PySol cardset with its display name and preference key."""
    return CardThemeInfo(
        format=ThemeFormat.PYSOL,
        root=root,
        subdirectory=subdirectory,
        display_name=f"{descriptor.name} (PySol)",
        pref_name=f"{ThemeFormat.PYSOL.value}:{subdirectory}",
        descriptor=descriptor,
    )
