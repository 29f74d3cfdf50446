"""Tests for the component names bound on issuetrail's loggers."""

from __future__ import annotations

from datetime import UTC, datetime

from structlog.testing import capture_logs

from issuetrail.ledger import ChangeLedger
from issuetrail.models.config import NotificationConfig
from issuetrail.models.context import IssueChangeContext
from issuetrail.models.issue import Issue
from issuetrail.notifications import build_notification_dispatcher
from issuetrail.observability.logging import get_logger
from issuetrail.updater.issue_updater import IssueUpdater

_TS = datetime(2026, 2, 18, 12, 0, 0, tzinfo=UTC)
_CTX = IssueChangeContext.create_user(_TS, "emmerik")


def _event(logs: list[dict], name: str) -> dict:
    return next(e for e in logs if e["event"] == name)


class TestComponentBinding:
    def test_get_logger_binds_component(self) -> None:
        with capture_logs() as logs:
            get_logger("custom").info("something_happened", issue_key="ISSUE-1")

        assert logs == [
            {"component": "custom", "issue_key": "ISSUE-1", "event": "something_happened", "log_level": "info"}
        ]

    def test_updater_and_ledger_components(self) -> None:
        issue = Issue(key="ISSUE-1", status="OPEN")
        with capture_logs() as logs:
            IssueUpdater().set_status(issue, "CONFIRMED", _CTX)
            ChangeLedger().commit(issue)

        changed = _event(logs, "issue_field_changed")
        committed = _event(logs, "issue_changes_committed")
        assert changed["component"] == "updater"
        assert committed["component"] == "ledger"
        assert changed["issue_key"] == committed["issue_key"] == "ISSUE-1"
        assert committed["fields"] == ["status"]

    def test_notifications_component(self) -> None:
        with capture_logs() as logs:
            build_notification_dispatcher(NotificationConfig(enabled=False))

        assert _event(logs, "notifications_disabled")["component"] == "notifications"
