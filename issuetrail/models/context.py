"""Change context passed to every interactive issue update."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class IssueChangeContext:
    """Who changed the issue, and when.

    The updater only forwards these values to the diff set and the update
    date; it never inspects the login.
    """

    date: datetime
    login: str | None = None
    scan: bool = False

    @classmethod
    def create_user(cls, date: datetime, login: str | None) -> IssueChangeContext:
        return cls(date=date, login=login, scan=False)

    @classmethod
    def create_scan(cls, date: datetime) -> IssueChangeContext:
        """Context for changes applied by automated analysis (no login)."""
        return cls(date=date, login=None, scan=True)
