from collections.abc import Callable
from pathlib import Path

import pytest

from cardthemes.models.cardset import CardsetDescriptor, create_cardset_descriptor

STANDARD_CONFIG = """PySol solitaire cardset;4;.gif;1;52;0
PYSOL_GENERIC;Standard
73 97 8
18 18 7 7
back02.gif
back01.gif;back02.gif;back03.gif
"""


@pytest.fixture
def make_cardset(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a cardset directory with the given config.txt content.

    Returns the cardset directory.
    """

    def _make(
        subdirectory: str = "cardset-standard",
        text: str = STANDARD_CONFIG,
        root: Path | None = None,
    ) -> Path:
        directory = (root or tmp_path) / subdirectory
        directory.mkdir(parents=True)
        (directory / "config.txt").write_text(text, encoding="utf-8")
        return directory

    return _make


@pytest.fixture
def png_descriptor(tmp_path: Path) -> CardsetDescriptor:
    """Accepted cardset using .png card images."""
    return create_cardset_descriptor(
        name="Neo",
        base_path=tmp_path / "cardset-neo",
        image_extension=".png",
        format_version=4,
        deck_type=1,
        card_count=52,
        geometry=(80, 120, 10),
        backs=["back01.png", "back02.png"],
        default_back="back02.png",
    )
