"""Tests for AppSettings and its environment overrides."""

import pytest

from raychess.settings import AppSettings


class TestAppSettings:
    def test_defaults(self) -> None:
        settings = AppSettings()
        assert settings.language == "English"
        assert settings.log_level == "WARNING"
        assert settings.use_color
        assert settings.clear_screen
        assert settings.show_legal_moves

    def test_from_env_empty(self) -> None:
        assert AppSettings.from_env({}) == AppSettings()

    def test_from_env_overrides(self) -> None:
        settings = AppSettings.from_env(
            {
                "RAYCHESS_LANGUAGE": "Russian",
                "RAYCHESS_LOG_LEVEL": "debug",
                "RAYCHESS_COLOR": "off",
                "RAYCHESS_CLEAR_SCREEN": "No",
            }
        )
        assert settings.language == "Russian"
        assert settings.log_level == "DEBUG"
        assert not settings.use_color
        assert not settings.clear_screen

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_truthy_values(self, value: str) -> None:
        assert AppSettings.from_env({"RAYCHESS_COLOR": value}).use_color

    def test_bad_boolean(self) -> None:
        with pytest.raises(ValueError, match="RAYCHESS_COLOR"):
            AppSettings.from_env({"RAYCHESS_COLOR": "maybe"})

    def test_bad_log_level(self) -> None:
        with pytest.raises(ValueError, match="RAYCHESS_LOG_LEVEL"):
            AppSettings.from_env({"RAYCHESS_LOG_LEVEL": "LOUD"})

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RAYCHESS_CLEAR_SCREEN", "0")
        assert not AppSettings.from_env().clear_screen
