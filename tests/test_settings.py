"""Tests for teclado.core.settings – YAML presentation settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from teclado.core.errors import SettingsError
from teclado.core.settings import (
    LOG_LEVEL_ENV,
    SETTINGS_ENV,
    KeyboardSettings,
    default_settings_path,
    load_settings,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(SETTINGS_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "settings.yaml"
    path.write_text(content, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------

class TestDefaultPath:
    def test_home_default(self):
        assert default_settings_path() == Path.home() / ".teclado" / "settings.yaml"

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv(SETTINGS_ENV, str(tmp_path / "x.yaml"))
        assert default_settings_path() == tmp_path / "x.yaml"


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

class TestLoadSettings:
    def test_missing_file_gives_defaults(self, tmp_path: Path):
        assert load_settings(tmp_path / "absent.yaml") == KeyboardSettings()

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        assert load_settings(_write(tmp_path, "")) == KeyboardSettings()

    def test_reads_values(self, tmp_path: Path):
        path = _write(
            tmp_path,
            "key_height: 60\nfont_size: 20\nspacing: 2\nhighlight_color: '#ff8800'\nlog_level: debug\n",
        )
        settings = load_settings(path)
        assert settings == KeyboardSettings(
            key_height=60, font_size=20, spacing=2, highlight_color="#FF8800", log_level="DEBUG"
        )

    def test_partial_file_keeps_other_defaults(self, tmp_path: Path):
        settings = load_settings(_write(tmp_path, "font_size: 22\n"))
        assert settings.font_size == 22
        assert settings.key_height == KeyboardSettings().key_height

    def test_env_path_used_when_no_argument(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        path = _write(tmp_path, "spacing: 9\n")
        monkeypatch.setenv(SETTINGS_ENV, str(path))
        assert load_settings().spacing == 9

    def test_env_log_level_overrides_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv(LOG_LEVEL_ENV, "warning")
        settings = load_settings(_write(tmp_path, "log_level: DEBUG\n"))
        assert settings.log_level == "WARNING"


class TestInvalidSettings:
    @pytest.mark.parametrize(
        "content",
        [
            "- a\n- b\n",
            "colour: red\n",
            "key_height: tall\n",
            "key_height: -1\n",
            "font_size: true\n",
            "highlight_color: orange\n",
            "log_level: LOUD\n",
            "key_height: [1\n",
        ],
    )
    def test_rejected(self, tmp_path: Path, content: str):
        with pytest.raises(SettingsError):
            load_settings(_write(tmp_path, content))

    def test_error_names_file(self, tmp_path: Path):
        with pytest.raises(SettingsError, match="settings.yaml"):
            load_settings(_write(tmp_path, "nope: 1\n"))

    def test_bad_env_log_level(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        with pytest.raises(SettingsError):
            load_settings(tmp_path / "absent.yaml")

    def test_settings_error_is_value_error(self, tmp_path: Path):
        with pytest.raises(ValueError):
            load_settings(_write(tmp_path, "spacing: wide\n"))
