"""Well-known values for issue severity, status and resolution."""

from __future__ import annotations

from enum import StrEnum


class Severity(StrEnum):
    """Issue severity, lowest first."""

    INFO = "INFO"
    MINOR = "MINOR"
    MAJOR = "MAJOR"
    CRITICAL = "CRITICAL"
    BLOCKER = "BLOCKER"


class Status(StrEnum):
    """Issue workflow status."""

    OPEN = "OPEN"
    CONFIRMED = "CONFIRMED"
    REOPENED = "REOPENED"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"


class Resolution(StrEnum):
    """Resolution of a resolved or closed issue."""

    FIXED = "FIXED"
    FALSE_POSITIVE = "FALSE-POSITIVE"
    REMOVED = "REMOVED"
