"""Tests for the shared settings fields."""

import pytest
from pydantic import ValidationError

from bible_portal.configs import Settings


def test_log_level_is_normalized(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", " debug ")

    assert Settings().log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        Settings()


def test_process_fields_read_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.delenv("LOG_LEVEL", raising=False)

    settings = Settings()

    assert settings.environment == "production"
    assert settings.debug is True
    assert settings.log_level == "INFO"
