"""Configuration and observability support for Actuator."""

from __future__ import annotations

from .configuration import (
    ALLOWED_ENVS,
    Settings,
    configure_logging,
    load_settings,
    validate_settings,
)

__all__ = [
    "ALLOWED_ENVS",
    "Settings",
    "configure_logging",
    "load_settings",
    "validate_settings",
]
