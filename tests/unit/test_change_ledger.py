"""Tests for the in-memory ChangeLedger."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from issuetrail.ledger import ChangeLedger
from issuetrail.models.config import LedgerConfig
from issuetrail.models.context import IssueChangeContext
from issuetrail.models.diffs import Diff
from issuetrail.models.issue import Issue

_TS = datetime(2026, 2, 18, 12, 0, 0, tzinfo=UTC)
_CTX = IssueChangeContext.create_user(_TS, "emmerik")


def _changed_issue(key: str = "ISSUE-1", status: str = "OPEN") -> Issue:
    issue = Issue(key=key)
    issue.set_field_change(_CTX, "status", None, status)
    return issue


class TestCommit:
    def test_commit_moves_current_change_to_history(self) -> None:
        ledger = ChangeLedger()
        issue = _changed_issue()
        change = issue.current_change

        assert ledger.commit(issue) is change
        assert issue.current_change is None
        assert issue.new is False
        assert ledger.history("ISSUE-1") == [change]
        assert ledger.latest("ISSUE-1") is change

    def test_commit_without_change(self) -> None:
        ledger = ChangeLedger()
        issue = Issue(key="ISSUE-1")

        assert ledger.commit(issue) is None
        assert issue.new is False
        assert ledger.history("ISSUE-1") == []
        assert ledger.latest("ISSUE-1") is None
        assert len(ledger) == 0

    def test_next_transaction_starts_fresh(self) -> None:
        ledger = ChangeLedger()
        issue = _changed_issue()
        ledger.commit(issue)
        issue.set_field_change(_CTX, "status", "OPEN", "CLOSED")
        ledger.commit(issue)

        assert ledger.field_history("ISSUE-1", "status") == [Diff(None, "OPEN"), Diff("OPEN", "CLOSED")]

    def test_issues_are_isolated(self) -> None:
        ledger = ChangeLedger()
        ledger.commit(_changed_issue("ISSUE-1"))
        ledger.commit(_changed_issue("ISSUE-2", "CLOSED"))

        assert len(ledger.history("ISSUE-1")) == 1
        assert ledger.field_history("ISSUE-2", "status") == [Diff(None, "CLOSED")]
        assert len(ledger) == 2


class TestBounds:
    def test_oldest_entries_dropped(self) -> None:
        ledger = ChangeLedger(max_entries=2)
        issue = Issue(key="ISSUE-1")
        for status in ("OPEN", "CONFIRMED", "RESOLVED"):
            issue.set_field_change(_CTX, "status", issue.status, status)
            issue.status = status
            ledger.commit(issue)

        assert [d.new_value for d in ledger.field_history("ISSUE-1", "status")] == ["CONFIRMED", "RESOLVED"]

    def test_invalid_max_entries(self) -> None:
        with pytest.raises(ValueError, match="max_entries"):
            ChangeLedger(max_entries=0)

    def test_from_config(self) -> None:
        ledger = ChangeLedger.from_config(LedgerConfig(max_entries=1))
        issue = _changed_issue()
        ledger.commit(issue)
        issue.set_field_change(_CTX, "status", "OPEN", "CLOSED")
        ledger.commit(issue)

        assert ledger.field_history("ISSUE-1", "status") == [Diff("OPEN", "CLOSED")]
