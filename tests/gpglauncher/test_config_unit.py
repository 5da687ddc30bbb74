"""Tests for launcher configuration loading."""

import pytest
from pydantic import ValidationError

from gpglauncher.config import LauncherSettings, get_settings


class TestLauncherSettings:

    def test_defaults(self):
        settings = get_settings()

        assert settings.gpg_path == "gpg"
        assert settings.timeout_seconds is None
        assert settings.temp_dir is None
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"

    def test_load_from_env(self, monkeypatch):
        monkeypatch.setenv("GPGLAUNCHER_GPG_PATH", "/usr/local/bin/gpg2")
        monkeypatch.setenv("GPGLAUNCHER_TIMEOUT_SECONDS", "45")
        monkeypatch.setenv("GPGLAUNCHER_TEMP_DIR", "/var/tmp")
        monkeypatch.setenv("GPGLAUNCHER_LOG_LEVEL", "debug")
        monkeypatch.setenv("GPGLAUNCHER_LOG_FORMAT", "JSON")

        settings = get_settings()

        assert settings.gpg_path == "/usr/local/bin/gpg2"
        assert settings.timeout_seconds == 45
        assert settings.temp_dir == "/var/tmp"
        assert settings.log_level == "DEBUG"
        assert settings.log_format == "json"

    @pytest.mark.parametrize(
        "field,value",
        [
            ("gpg_path", "  "),
            ("timeout_seconds", 0),
            ("temp_dir", "relative/tmp"),
            ("log_level", "LOUD"),
            ("log_format", "xml"),
        ],
    )
    def test_invalid_values_rejected(self, field, value):
        with pytest.raises(ValidationError):
            LauncherSettings(**{field: value})
