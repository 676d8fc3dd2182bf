import json
from pathlib import Path

import pytest

from cardthemes.config import Settings
from cardthemes.jobs.list_themes import configured_search_roots, main, run_listing

TAROCK = """PySol solitaire cardset;4;.gif;3;78
PYSOL_GENERIC;Tarock
73 97 8
x
back01.gif
back01.gif
"""


class TestConfiguredSearchRoots:
    def test_uses_provider_roots(self) -> None:
        settings = Settings(
            _env_file=None,
            pysol_theme_path="/extra",
            pysol_system_path=Path("/usr/share/games/pysol"),
        )
        assert configured_search_roots(settings) == [
            Path("/extra"),
            Path("/usr/share/games/pysol"),
        ]

    def test_duplicates_removed(self) -> None:
        settings = Settings(
            _env_file=None,
            pysol_theme_path="/same",
            pysol_system_path=Path("/same"),
        )
        assert configured_search_roots(settings) == [Path("/same")]


class TestRunListing:
    def test_text_listing(self, make_cardset, tmp_path: Path) -> None:
        make_cardset("cardset-standard")
        make_cardset("cardset-tarock", text=TAROCK)

        output = run_listing([tmp_path])

        assert "Themes (1):" in output
        assert "pysol:cardset-standard" in output
        assert "Standard (PySol)" in output
        assert "73x97.gif" in output
        assert "Rejected (1):" in output
        assert "unsupported_deck_type" in output

    def test_empty_listing(self, tmp_path: Path) -> None:
        assert "No themes found." in run_listing([tmp_path])

    def test_json_listing(self, make_cardset, tmp_path: Path) -> None:
        make_cardset("cardset-standard")
        make_cardset("cardset-tarock", text=TAROCK)

        report = json.loads(run_listing([tmp_path], as_json=True))

        assert report["search_roots"] == [str(tmp_path)]
        assert report["themes"][0]["pref_name"] == "pysol:cardset-standard"
        assert report["themes"][0]["default_back"] == "back02.gif"
        assert report["rejected"][0]["failure"]["kind"] == "unsupported_deck_type"


class TestMain:
    def test_root_argument(
        self, make_cardset, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        make_cardset("cardset-standard")

        main(["--root", str(tmp_path), "--json"])

        report = json.loads(capsys.readouterr().out)
        assert [theme["display_name"] for theme in report["themes"]] == ["Standard (PySol)"]

    def test_configured_roots(
        self,
        make_cardset,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        make_cardset("cardset-standard")
        monkeypatch.setenv("CARDTHEMES_PYSOL_THEME_PATH", str(tmp_path))
        monkeypatch.setenv("CARDTHEMES_PYSOL_SYSTEM_PATH", str(tmp_path / "absent"))

        main([])

        assert "pysol:cardset-standard" in capsys.readouterr().out
