"""Notification payload built from a changed issue."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

from issuetrail.models.diffs import Diff
from issuetrail.models.issue import Issue


@dataclass(frozen=True)
class IssueNotification:
    """Emitted by the notification dispatcher, consumed by every channel."""

    issue_key: str
    changes: dict[str, Diff] = field(default_factory=dict)
    changed_by: str | None = None
    changed_at: datetime | None = None
    notification_id: str = field(default_factory=lambda: str(uuid4()))

    @classmethod
    def from_issue(cls, issue: Issue) -> IssueNotification:
        change = issue.current_change
        if change is None:
            return cls(issue_key=issue.key, changed_at=issue.update_date)
        return cls(
            issue_key=issue.key,
            changes=dict(change.diffs()),
            changed_by=change.user_login,
            changed_at=change.creation_date,
        )
