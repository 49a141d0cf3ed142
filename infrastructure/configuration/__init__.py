"""Environment-specific configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass


ALLOWED_ENVS = {"dev", "prod"}
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Runtime settings populated from the environment."""

    environment: str = "dev"
    debug: bool = False
    strict_binding: bool = False
    log_level: str = "INFO"


def validate_settings(settings: Settings) -> None:
    """Validate *settings* for safe operation.

    Raises
    ------
    ValueError
        If the environment is unsupported, the log level unknown, or if
        production settings are insecure.
    """

    env = settings.environment
    if env not in ALLOWED_ENVS:
        raise ValueError(f"Unsupported environment: {env}")
    if env == "prod" and settings.debug:
        raise ValueError("Debug must be disabled in production")
    if not isinstance(logging.getLevelName(settings.log_level), int):
        raise ValueError(f"Unknown log level: {settings.log_level}")


def load_settings() -> Settings:
    """Return configuration derived from `ACTUATOR_*` variables."""

    env = os.getenv("ACTUATOR_ENV", "dev").lower()
    debug = os.getenv("ACTUATOR_DEBUG", "0").lower() in _TRUTHY
    strict = os.getenv("ACTUATOR_STRICT_BINDING", "0").lower() in _TRUTHY
    level = os.getenv("ACTUATOR_LOG_LEVEL", "DEBUG" if debug else "INFO").upper()
    settings = Settings(
        environment=env, debug=debug, strict_binding=strict, log_level=level
    )
    validate_settings(settings)
    return settings


def configure_logging(settings: Settings) -> logging.Logger:
    """Apply the configured level to the ``actuator`` logger tree."""

    logger = logging.getLogger("actuator")
    logger.setLevel(settings.log_level)
    return logger


__all__ = [
    "ALLOWED_ENVS",
    "Settings",
    "configure_logging",
    "load_settings",
    "validate_settings",
]
