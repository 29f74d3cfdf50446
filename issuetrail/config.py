"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from issuetrail.models.config import IssueTrailConfig, LedgerConfig, LogConfig, NotificationConfig
from issuetrail.observability.logging import LOG_FORMATS


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"ISSUETRAIL_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower())
    return val.lower() in ("true", "1", "yes")


def _env_int(key: str, default: int, min_val: int | None = None, max_val: int | None = None) -> int:
    val = int(_env(key, str(default)))
    if min_val is not None:
        val = max(val, min_val)
    if max_val is not None:
        val = min(val, max_val)
    return val


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _validate_log_format(value: str) -> str:
    if value.lower() not in LOG_FORMATS:
        raise ValueError(f"Invalid log format: {value}. Must be one of {LOG_FORMATS}")
    return value.lower()


def load_config() -> IssueTrailConfig:
    """Load configuration from ISSUETRAIL_* environment variables."""
    return IssueTrailConfig(
        ledger=LedgerConfig(
            max_entries=_env_int("LEDGER_MAX_ENTRIES", 100, min_val=1, max_val=10_000),
        ),
        notifications=NotificationConfig(
            enabled=_env_bool("NOTIFICATIONS_ENABLED", True),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "info")),
            format=_validate_log_format(_env("LOG_FORMAT", "json")),
        ),
    )
