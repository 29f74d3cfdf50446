"""Per-field update policy for issues.

IssueUpdater is stateless: each operation reads the issue's current value,
decides whether the new value is a change, and if so mutates the issue,
records the diff and raises the notification flag according to
``NOTIFICATION_POLICY``. Every operation returns True when it changed
something observable and False for a no-op.

Three shapes of operation exist:

* interactive updates (``assign``, ``set_status``, ...) which record diffs
  attributed to the change context;
* past updates (``set_past_*``) which replay a historical value without
  overriding the current one and never notify;
* ``set_manual_severity``, which pins the severity against later automatic
  reclassification.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from issuetrail.models.actors import ActionPlan, User
from issuetrail.models.context import IssueChangeContext
from issuetrail.models.diffs import UNUSED
from issuetrail.models.issue import Issue
from issuetrail.observability.logging import get_logger
from issuetrail.observability.metrics import field_changes_total, policy_violations_total
from issuetrail.updater.fields import (
    ACTION_PLAN,
    ASSIGNEE,
    ATTRIBUTE,
    AUTHOR,
    CLOSE_DATE,
    EFFORT_TO_FIX,
    LINE,
    MANUAL_SEVERITY,
    MESSAGE,
    RESOLUTION,
    SEVERITY,
    STATUS,
    TECHNICAL_DEBT,
    must_notify,
)

_logger = get_logger("updater")


class SeverityLockedError(RuntimeError):
    """Raised when an automatic path tries to change a manually set severity."""

    def __init__(self, issue_key: str) -> None:
        super().__init__("Severity can't be changed")
        self.issue_key = issue_key


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


class IssueUpdater:
    """Applies field updates to an Issue under the fixed notification policy."""

    # ------------------------------------------------------------------
    # Interactive updates
    # ------------------------------------------------------------------

    def assign(self, issue: Issue, user: User | None, context: IssueChangeContext) -> bool:
        """Assign *issue* to *user*, or unassign it when *user* is None.

        Users are compared by login; history shows the display name.
        """
        login = _blank_to_none(user.login) if user is not None else None
        if login == issue.assignee:
            return False
        name = user.name if user is not None else None
        issue.set_field_change(context, ASSIGNEE, UNUSED, name)
        issue.assignee = login
        self._applied(issue, ASSIGNEE, context)
        return True

    def set_severity(self, issue: Issue, severity: str | None, context: IssueChangeContext) -> bool:
        self._check_severity_unlocked(issue)
        if severity == issue.severity:
            return False
        issue.set_field_change(context, SEVERITY, issue.severity, severity)
        issue.severity = severity
        self._applied(issue, SEVERITY, context)
        return True

    def set_manual_severity(self, issue: Issue, severity: str | None, context: IssueChangeContext) -> bool:
        """Set severity as a human decision and pin it.

        Also applies when the value is unchanged but the severity was not yet
        manual: the pin itself is the change, and users are notified of it.
        """
        if issue.manual_severity and severity == issue.severity:
            return False
        issue.set_field_change(context, SEVERITY, issue.severity, severity)
        issue.severity = severity
        issue.manual_severity = True
        self._applied(issue, MANUAL_SEVERITY, context)
        return True

    def set_resolution(self, issue: Issue, resolution: str | None, context: IssueChangeContext) -> bool:
        if resolution == issue.resolution:
            return False
        issue.set_field_change(context, RESOLUTION, issue.resolution, resolution)
        issue.resolution = resolution
        self._applied(issue, RESOLUTION, context)
        return True

    def set_status(self, issue: Issue, status: str | None, context: IssueChangeContext) -> bool:
        if status == issue.status:
            return False
        issue.set_field_change(context, STATUS, issue.status, status)
        issue.status = status
        self._applied(issue, STATUS, context)
        return True

    def set_attribute(
        self,
        issue: Issue,
        key: str,
        value: str | None,
        context: IssueChangeContext,
    ) -> bool:
        """Set or clear (*value* None) an ad-hoc attribute.

        The diff is recorded under the attribute's own key.
        """
        old_value = issue.attribute(key)
        if value == old_value:
            return False
        issue.set_field_change(context, key, old_value, value)
        issue.set_attribute(key, value)
        self._applied(issue, ATTRIBUTE, context)
        return True

    def plan(self, issue: Issue, action_plan: ActionPlan | None, context: IssueChangeContext) -> bool:
        """Attach *issue* to *action_plan*, or detach it when None.

        Plans are compared by key; history shows the plan name.
        """
        plan_key = _blank_to_none(action_plan.key) if action_plan is not None else None
        if plan_key == issue.action_plan_key:
            return False
        plan_name = action_plan.name if action_plan is not None else None
        issue.set_field_change(context, ACTION_PLAN, UNUSED, plan_name)
        issue.action_plan_key = plan_key
        self._applied(issue, ACTION_PLAN, context)
        return True

    def set_author_login(self, issue: Issue, author_login: str | None, context: IssueChangeContext) -> bool:
        if author_login == issue.author_login:
            return False
        issue.set_field_change(context, AUTHOR, issue.author_login, author_login)
        issue.author_login = author_login
        self._applied(issue, AUTHOR, context)
        return True

    def set_technical_debt(self, issue: Issue, debt: int | None, context: IssueChangeContext) -> bool:
        if debt == issue.debt:
            return False
        issue.set_field_change(context, TECHNICAL_DEBT, issue.debt, debt)
        issue.debt = debt
        self._applied(issue, TECHNICAL_DEBT, context)
        return True

    def set_effort_to_fix(self, issue: Issue, effort: float | None, context: IssueChangeContext) -> bool:
        if effort == issue.effort_to_fix:
            return False
        issue.effort_to_fix = effort
        self._applied(issue, EFFORT_TO_FIX, context)
        return True

    def set_message(self, issue: Issue, message: str | None, context: IssueChangeContext) -> bool:
        if message == issue.message:
            return False
        issue.message = message
        self._applied(issue, MESSAGE, context)
        return True

    def set_line(self, issue: Issue, line: int | None) -> bool:
        if line == issue.line:
            return False
        issue.line = line
        self._applied(issue, LINE, None)
        return True

    def set_close_date(self, issue: Issue, close_date: datetime | None, context: IssueChangeContext) -> bool:
        """Set the close date, compared and stored at second precision."""
        truncated = close_date.replace(microsecond=0) if close_date is not None else None
        current = issue.close_date.replace(microsecond=0) if issue.close_date is not None else None
        if truncated == current:
            return False
        issue.close_date = truncated
        self._applied(issue, CLOSE_DATE, context)
        return True

    # ------------------------------------------------------------------
    # Past updates
    # ------------------------------------------------------------------

    def set_past_severity(
        self,
        issue: Issue,
        previous_severity: str | None,
        context: IssueChangeContext,
    ) -> bool:
        """Record that severity used to be *previous_severity*.

        The current severity is kept; only the history gains a diff.
        """
        self._check_severity_unlocked(issue)
        return self._backfill(issue, SEVERITY, previous_severity, issue.severity, context)

    def set_past_technical_debt(
        self,
        issue: Issue,
        previous_debt: int | None,
        context: IssueChangeContext,
    ) -> bool:
        """Record that debt used to be *previous_debt*, keeping the current debt."""
        return self._backfill(issue, TECHNICAL_DEBT, previous_debt, issue.debt, context)

    def set_past_line(self, issue: Issue, previous_line: int | None) -> bool:
        return previous_line != issue.line

    def set_past_effort_to_fix(
        self,
        issue: Issue,
        previous_effort: float | None,
        context: IssueChangeContext,
    ) -> bool:
        return previous_effort != issue.effort_to_fix

    def set_past_message(
        self,
        issue: Issue,
        previous_message: str | None,
        context: IssueChangeContext,
    ) -> bool:
        return previous_message != issue.message

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _backfill(
        self,
        issue: Issue,
        field_key: str,
        previous: Any,
        current: Any,
        context: IssueChangeContext,
    ) -> bool:
        if previous == current:
            return False
        issue.set_field_change(context, field_key, previous, current)
        self._applied(issue, field_key, context)
        return True

    def _check_severity_unlocked(self, issue: Issue) -> None:
        if issue.manual_severity:
            policy_violations_total.labels(field=SEVERITY).inc()
            _logger.warning(
                "severity_change_rejected",
                issue_key=issue.key,
                severity=issue.severity,
                reason="manual_severity",
            )
            raise SeverityLockedError(issue.key)

    def _applied(self, issue: Issue, policy_key: str, context: IssueChangeContext | None) -> None:
        """Common bookkeeping after a field changed."""
        if context is not None:
            issue.update_date = context.date
        issue.mark_changed()
        notify = must_notify(policy_key)
        if notify:
            issue.request_notifications()
        field_changes_total.labels(field=policy_key).inc()
        _logger.debug(
            "issue_field_changed",
            issue_key=issue.key,
            field=policy_key,
            notify=notify,
            login=context.login if context is not None else None,
            scan=context.scan if context is not None else False,
        )
