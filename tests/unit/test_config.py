"""Tests for environment-driven settings."""

import pytest

from botswarm.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "BOTSWARM_DEFAULT_PORT",
        "BOTSWARM_AUTH",
        "BOTSWARM_CREDENTIALS_ENCODING",
        "BOTSWARM_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.model_validate({})

    assert settings.default_port == 25565
    assert settings.auth is None
    assert settings.credentials_encoding == "utf-8"
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BOTSWARM_DEFAULT_PORT", "10005")
    monkeypatch.setenv("BOTSWARM_AUTH", "offline")
    monkeypatch.setenv("BOTSWARM_LOG_LEVEL", "debug")

    settings = Settings.model_validate({})

    assert settings.default_port == 10005
    assert settings.auth == "offline"
    assert settings.log_level == "DEBUG"


def test_unknown_log_level_falls_back_to_info(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """An unknown level name must not reach logging.basicConfig."""
    monkeypatch.setenv("BOTSWARM_LOG_LEVEL", "loud")

    settings = Settings.model_validate({})

    assert settings.log_level == "INFO"
    assert any("Unknown BOTSWARM_LOG_LEVEL 'loud'" in m for m in caplog.messages)
