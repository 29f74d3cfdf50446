"""Shared fixtures for issuetrail integration tests.

Wires an updater, a change ledger and a notification dispatcher together
the way an embedding application does, so tests can run whole update
transactions end to end.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from issuetrail.ledger import ChangeLedger
from issuetrail.models.context import IssueChangeContext
from issuetrail.models.issue import Issue
from issuetrail.models.notifications import IssueNotification
from issuetrail.models.vocabulary import Severity, Status
from issuetrail.notifications import NotificationChannel, NotificationDispatcher
from issuetrail.updater import IssueUpdater

# ---------------------------------------------------------------------------
# Timestamp helpers
# ---------------------------------------------------------------------------

_NOW = datetime(2026, 2, 18, 12, 0, 0, tzinfo=UTC)
_1H_AGO = _NOW - timedelta(hours=1)


class InMemoryChannel(NotificationChannel):
    """Channel that keeps every notification it receives."""

    def __init__(self) -> None:
        self.received: list[IssueNotification] = []

    @property
    def channel_name(self) -> str:
        return "in_memory"

    async def send(self, notification: IssueNotification) -> bool:
        self.received.append(notification)
        return True


@pytest.fixture
def updater() -> IssueUpdater:
    return IssueUpdater()


@pytest.fixture
def ledger() -> ChangeLedger:
    return ChangeLedger(max_entries=10)


@pytest.fixture
def channel() -> InMemoryChannel:
    return InMemoryChannel()


@pytest.fixture
def dispatcher(channel: InMemoryChannel) -> NotificationDispatcher:
    return NotificationDispatcher(channels=[channel])


@pytest.fixture
def user_context() -> IssueChangeContext:
    return IssueChangeContext.create_user(_NOW, "emmerik")


@pytest.fixture
def scan_context() -> IssueChangeContext:
    return IssueChangeContext.create_scan(_1H_AGO)


@pytest.fixture
def loaded_issue() -> Issue:
    """An issue as the persistence layer would hand it over."""
    return Issue(
        key="ISSUE-42",
        component_key="project:src/main.py",
        rule_key="python:S1481",
        severity=Severity.MAJOR,
        status=Status.OPEN,
        message="Remove this unused local variable",
        line=12,
        debt=30 * 60,
        assignee="morgan",
        creation_date=_1H_AGO,
        new=False,
    )
