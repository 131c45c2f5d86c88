"""Tests for settings loaded from FEEBOOK_* environment variables."""

from feebook.infrastructure import Settings, load_settings


def test_defaults(monkeypatch):
    for name in ("FEEBOOK_PHONE_REGION", "FEEBOOK_SAMPLE_DATA", "FEEBOOK_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    assert load_settings() == Settings(phone_region="SG", sample_data=True, log_level="INFO")


def test_overrides(monkeypatch):
    monkeypatch.setenv("FEEBOOK_PHONE_REGION", " us ")
    monkeypatch.setenv("FEEBOOK_SAMPLE_DATA", "no")
    monkeypatch.setenv("FEEBOOK_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.phone_region == "US"
    assert settings.sample_data is False
    assert settings.log_level == "DEBUG"
