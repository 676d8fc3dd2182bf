import os
import subprocess
import sys
from pathlib import Path

import pytest

from cardthemes.config import Settings

PROJECT_ROOT = Path(__file__).parent.parent


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CARDTHEMES_PYSOL_THEME_PATH", raising=False)
        monkeypatch.delenv("CARDTHEMES_PYSOL_SYSTEM_PATH", raising=False)
        settings = Settings(_env_file=None)

        assert settings.debug is False
        assert settings.pysol_search_roots() == [Path("/usr/share/games/pysol")]

    def test_extra_roots_from_environment(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        first = tmp_path / "first"
        second = tmp_path / "second"
        monkeypatch.setenv("CARDTHEMES_PYSOL_THEME_PATH", f"{first}{os.pathsep}{second}")
        monkeypatch.setenv("CARDTHEMES_PYSOL_SYSTEM_PATH", "/opt/pysol")

        settings = Settings(_env_file=None)

        assert settings.pysol_search_roots() == [first, second, Path("/opt/pysol")]

    def test_empty_entries_dropped(self) -> None:
        settings = Settings(
            _env_file=None,
            pysol_theme_path=f"{os.pathsep}/a{os.pathsep}{os.pathsep}",
            pysol_system_path=Path("/sys"),
        )
        assert settings.pysol_search_roots() == [Path("/a"), Path("/sys")]


class TestEnvironmentIsolation:
    def test_core_imports_ignore_bad_settings(self, tmp_path: Path) -> None:
        """Parser, resolver and discovery import without reading settings."""
        env = dict(os.environ)
        env["CARDTHEMES_DEBUG"] = "maybe"
        env["PYTHONPATH"] = os.pathsep.join(
            [str(PROJECT_ROOT), env.get("PYTHONPATH", "")]
        ).rstrip(os.pathsep)

        completed = subprocess.run(
            [
                sys.executable,
                "-c",
                "import cardthemes.parsers.pysol_config, "
                "cardthemes.services.asset_resolver, cardthemes.services.discovery",
            ],
            cwd=tmp_path,
            env=env,
            capture_output=True,
            text=True,
        )

        assert completed.returncode == 0, completed.stderr

    def test_bad_setting_fails_only_when_settings_are_built(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CARDTHEMES_DEBUG", "maybe")

        with pytest.raises(ValueError):
            Settings(_env_file=None)
