"""Settings loaded from ``ACTUATOR_*`` environment variables."""

import logging

import pytest

from infrastructure.configuration import (
    Settings,
    configure_logging,
    load_settings,
    validate_settings,
)


def test_defaults(monkeypatch) -> None:
    for var in ("ACTUATOR_ENV", "ACTUATOR_DEBUG", "ACTUATOR_STRICT_BINDING", "ACTUATOR_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    settings = load_settings()
    assert settings == Settings()


def test_load_settings_env(monkeypatch) -> None:
    """Environment variables override defaults."""
    monkeypatch.setenv("ACTUATOR_ENV", "prod")
    monkeypatch.setenv("ACTUATOR_STRICT_BINDING", "yes")
    monkeypatch.setenv("ACTUATOR_LOG_LEVEL", "warning")
    settings = load_settings()
    assert settings.environment == "prod"
    assert settings.strict_binding is True
    assert settings.log_level == "WARNING"


def test_debug_lowers_default_log_level(monkeypatch) -> None:
    monkeypatch.setenv("ACTUATOR_DEBUG", "1")
    monkeypatch.delenv("ACTUATOR_LOG_LEVEL", raising=False)
    monkeypatch.delenv("ACTUATOR_ENV", raising=False)
    assert load_settings().log_level == "DEBUG"


@pytest.mark.parametrize(
    "settings",
    [
        Settings(environment="staging"),
        Settings(environment="prod", debug=True),
        Settings(log_level="LOUD"),
    ],
)
def test_invalid_settings(settings: Settings) -> None:
    with pytest.raises(ValueError):
        validate_settings(settings)


def test_configure_logging() -> None:
    logger = configure_logging(Settings(log_level="ERROR"))
    assert logger.name == "actuator"
    assert logger.level == logging.ERROR
    configure_logging(Settings())
