"""Issue update policy engine.

Exports:
    IssueUpdater        -- One operation per mutable issue field.
    SeverityLockedError -- Raised when a manual severity would be overridden.
    NOTIFICATION_POLICY -- Static field -> notify table.
    must_notify         -- Lookup into NOTIFICATION_POLICY.
"""

from issuetrail.updater.fields import NOTIFICATION_POLICY, must_notify
from issuetrail.updater.issue_updater import IssueUpdater, SeverityLockedError

__all__ = [
    "NOTIFICATION_POLICY",
    "IssueUpdater",
    "SeverityLockedError",
    "must_notify",
]
