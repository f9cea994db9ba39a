"""Test environment-driven settings."""
import pytest
from pydantic import ValidationError
from datebox.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DATEBOX_DEFAULT_LOCALE", "DATEBOX_LOG_LEVEL", "DATEBOX_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.default_locale == "en"
        assert settings.log_level == "INFO"
        assert settings.log_json is True

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("DATEBOX_DEFAULT_LOCALE", "da")
        monkeypatch.setenv("DATEBOX_LOG_JSON", "false")
        settings = Settings()
        assert settings.default_locale == "da"
        assert settings.log_json is False

    def test_log_level_normalised(self, monkeypatch):
        monkeypatch.setenv("DATEBOX_LOG_LEVEL", "debug")
        assert Settings().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_unknown_locale_rejected(self, monkeypatch):
        monkeypatch.setenv("DATEBOX_DEFAULT_LOCALE", "fr")
        with pytest.raises(ValidationError):
            Settings()
