"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class LedgerConfig:
    """Change ledger configuration."""

    max_entries: int = 100


@dataclass
class NotificationConfig:
    """Notification dispatch configuration."""

    enabled: bool = True


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "info"
    format: str = "json"


@dataclass
class IssueTrailConfig:
    """Top-level issuetrail configuration."""

    ledger: LedgerConfig = field(default_factory=LedgerConfig)
    notifications: NotificationConfig = field(default_factory=NotificationConfig)
    log: LogConfig = field(default_factory=LogConfig)
