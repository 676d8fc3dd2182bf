import logging
from pathlib import Path

import pytest

from cardthemes.models.failure import FailureKind
from cardthemes.services.discovery import discover_themes, list_subdirectories
from cardthemes.services.theme_provider import PySolCardTheme

BROKEN_GEOMETRY = """PySol solitaire cardset;4;.gif;1;52
PYSOL_GENERIC;Broken
100 150
x
back01.gif
back01.gif
"""

TAROCK = """PySol solitaire cardset;4;.gif;3;78
PYSOL_GENERIC;Tarock
73 97 8
x
back01.gif
back01.gif
"""


class TestListSubdirectories:
    def test_lists_directories_only(self, tmp_path: Path) -> None:
        (tmp_path / "cardset-b").mkdir()
        (tmp_path / "cardset-a").mkdir()
        (tmp_path / "cardset-file").write_text("not a directory")

        assert list_subdirectories(tmp_path) == ["cardset-a", "cardset-b"]

    def test_missing_root(self, tmp_path: Path) -> None:
        assert list_subdirectories(tmp_path / "absent") == []


class TestDiscoverThemes:
    def test_finds_accepted_themes(self, make_cardset, tmp_path: Path) -> None:
        make_cardset("cardset-standard")
        make_cardset("cardset-other")

        result = discover_themes([tmp_path])

        assert [info.pref_name for info in result.themes] == [
            "pysol:cardset-other",
            "pysol:cardset-standard",
        ]
        assert result.rejected == []

    def test_non_prefixed_directories_skipped(self, make_cardset, tmp_path: Path) -> None:
        make_cardset("cardset-standard")
        make_cardset("standard-copy")
        (tmp_path / "misc").mkdir()

        result = discover_themes([tmp_path])

        assert len(result.themes) == 1
        assert result.skipped == 2

    def test_rejection_does_not_stop_discovery(
        self, make_cardset, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        make_cardset("cardset-a-broken", text=BROKEN_GEOMETRY)
        make_cardset("cardset-b-tarock", text=TAROCK)
        make_cardset("cardset-c-standard")

        with caplog.at_level(logging.WARNING, logger="cardthemes.services.discovery"):
            result = discover_themes([tmp_path])

        assert [info.subdirectory for info in result.themes] == ["cardset-c-standard"]
        assert [(r.subdirectory, r.failure.kind) for r in result.rejected] == [
            ("cardset-a-broken", FailureKind.BAD_GEOMETRY),
            ("cardset-b-tarock", FailureKind.UNSUPPORTED_DECK_TYPE),
        ]
        rejected_logs = [r for r in caplog.records if r.getMessage() == "cardset_rejected"]
        assert len(rejected_logs) == 2
        assert rejected_logs[0].kind == "bad_geometry"

    def test_missing_config_is_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "cardset-empty").mkdir()
        result = discover_themes([tmp_path])

        assert result.themes == []
        assert result.rejected[0].failure.kind == FailureKind.MISSING_FILE

    def test_earlier_root_shadows_later(self, make_cardset, tmp_path: Path) -> None:
        first = tmp_path / "first"
        second = tmp_path / "second"
        make_cardset("cardset-standard", root=first)
        make_cardset("cardset-standard", root=second)
        make_cardset("cardset-extra", root=second)

        result = discover_themes([first, second])

        assert len(result.themes) == 2
        assert result.find("pysol:cardset-standard").root == first
        assert result.find("pysol:cardset-extra").root == second

    def test_missing_root_is_ignored(self, make_cardset, tmp_path: Path) -> None:
        make_cardset("cardset-standard")
        result = discover_themes([tmp_path / "absent", str(tmp_path)])

        assert len(result.themes) == 1

    def test_find_unknown_pref_name(self, tmp_path: Path) -> None:
        assert discover_themes([tmp_path]).find("pysol:cardset-nope") is None

    def test_injected_directory_lister(self, make_cardset, tmp_path: Path) -> None:
        make_cardset("cardset-standard")
        make_cardset("cardset-hidden")
        listed: list[Path] = []

        def lister(root: Path) -> list[str]:
            listed.append(root)
            return ["cardset-standard", "readme"]

        result = discover_themes([tmp_path], list_directory=lister)

        assert listed == [tmp_path]
        assert [info.subdirectory for info in result.themes] == ["cardset-standard"]
        assert result.skipped == 1

    def test_explicit_providers(self, make_cardset, tmp_path: Path) -> None:
        make_cardset("cardset-standard")

        assert len(discover_themes([tmp_path], providers=[PySolCardTheme]).themes) == 1
        assert discover_themes([tmp_path], providers=[]).skipped == 1
