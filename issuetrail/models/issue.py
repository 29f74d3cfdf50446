"""The Issue entity and its per-transaction change tracking."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import uuid4

from issuetrail.models.context import IssueChangeContext
from issuetrail.models.diffs import FieldDiffs


@dataclass
class Issue:
    """Current field values of an issue plus its change bookkeeping.

    Field attributes are plain setters: assigning them never marks the issue
    as changed and never records a diff. Policy lives in ``IssueUpdater``,
    which drives the change marker, the diff set and the notification flag
    through the methods below.

    The notification flag can only be raised from the policy side
    (``request_notifications``); the notification collaborator clears it with
    ``notifications_sent`` once it has dispatched.
    """

    key: str = field(default_factory=lambda: str(uuid4()))
    component_key: str | None = None
    rule_key: str | None = None
    severity: str | None = None
    manual_severity: bool = False
    message: str | None = None
    line: int | None = None
    effort_to_fix: float | None = None
    debt: int | None = None  # work duration, seconds
    status: str | None = None
    resolution: str | None = None
    reporter: str | None = None
    assignee: str | None = None
    author_login: str | None = None
    action_plan_key: str | None = None
    creation_date: datetime | None = None
    update_date: datetime | None = None
    close_date: datetime | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    new: bool = True

    _changed: bool = field(default=False, init=False, repr=False)
    _send_notifications: bool = field(default=False, init=False, repr=False)
    _current_change: FieldDiffs | None = field(default=None, init=False, repr=False)
    _changes: list[FieldDiffs] = field(default_factory=list, init=False, repr=False)

    # ------------------------------------------------------------------
    # Ad-hoc attributes
    # ------------------------------------------------------------------

    def attribute(self, key: str) -> str | None:
        return self.attributes.get(key)

    def set_attribute(self, key: str, value: str | None) -> Issue:
        if value is None:
            self.attributes.pop(key, None)
        else:
            self.attributes[key] = value
        return self

    # ------------------------------------------------------------------
    # Change tracking
    # ------------------------------------------------------------------

    @property
    def current_change(self) -> FieldDiffs | None:
        """Diffs recorded since the last commit, or None if nothing changed."""
        return self._current_change

    @property
    def changes(self) -> tuple[FieldDiffs, ...]:
        """Every diff set recorded on this instance, oldest first."""
        return tuple(self._changes)

    def set_field_change(
        self,
        context: IssueChangeContext,
        field_key: str,
        old_value: Any,
        new_value: Any,
    ) -> Issue:
        """Record ``old_value -> new_value`` under *field_key* if they differ."""
        if old_value != new_value:
            if self._current_change is None:
                self._current_change = FieldDiffs(
                    user_login=context.login,
                    creation_date=context.date,
                )
                self._changes.append(self._current_change)
            self._current_change.set_diff(field_key, old_value, new_value)
        return self

    def clear_current_change(self) -> None:
        self._current_change = None

    def is_changed(self) -> bool:
        return self._changed

    def mark_changed(self) -> Issue:
        self._changed = True
        return self

    # ------------------------------------------------------------------
    # Notification flag
    # ------------------------------------------------------------------

    def must_send_notifications(self) -> bool:
        return self._send_notifications

    def request_notifications(self) -> Issue:
        self._send_notifications = True
        return self

    def notifications_sent(self) -> None:
        self._send_notifications = False
