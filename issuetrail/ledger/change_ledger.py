"""In-memory per-issue history of committed diff sets."""

from __future__ import annotations

from collections import deque

from issuetrail.models.config import LedgerConfig
from issuetrail.models.diffs import Diff, FieldDiffs
from issuetrail.models.issue import Issue
from issuetrail.observability.logging import get_logger

_logger = get_logger("ledger")


class ChangeLedger:
    """Ring buffer of committed ``FieldDiffs`` per issue key.

    Once an issue holds more than ``max_entries`` committed diff sets, the
    oldest ones are dropped. Not thread-safe; callers serialise access per
    issue as they do for the updater.
    """

    def __init__(self, max_entries: int = 100) -> None:
        if max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        self._max_entries = max_entries
        self._entries: dict[str, deque[FieldDiffs]] = {}

    @classmethod
    def from_config(cls, config: LedgerConfig) -> ChangeLedger:
        return cls(max_entries=config.max_entries)

    def commit(self, issue: Issue) -> FieldDiffs | None:
        """Move the issue's transient diff set into history.

        Returns the committed diff set, or None when the issue recorded no
        diff since its last commit. Either way the issue is no longer new.
        """
        change = issue.current_change
        issue.new = False
        if change is None:
            return None
        buffer = self._entries.setdefault(issue.key, deque(maxlen=self._max_entries))
        if len(buffer) == self._max_entries:
            _logger.debug("ledger_entry_evicted", issue_key=issue.key)
        buffer.append(change)
        issue.clear_current_change()
        _logger.info(
            "issue_changes_committed",
            issue_key=issue.key,
            fields=list(change),
            login=change.user_login,
        )
        return change

    def history(self, issue_key: str) -> list[FieldDiffs]:
        """Committed diff sets for *issue_key*, oldest first."""
        return list(self._entries.get(issue_key, ()))

    def latest(self, issue_key: str) -> FieldDiffs | None:
        buffer = self._entries.get(issue_key)
        if not buffer:
            return None
        return buffer[-1]

    def field_history(self, issue_key: str, field_key: str) -> list[Diff]:
        """Every committed diff of one field, oldest first."""
        return [diff for diffs in self.history(issue_key) if (diff := diffs.get(field_key)) is not None]

    def __len__(self) -> int:
        return sum(len(buffer) for buffer in self._entries.values())
