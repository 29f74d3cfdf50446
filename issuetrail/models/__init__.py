"""Core data structures for issuetrail."""

from issuetrail.models.actors import ActionPlan, User
from issuetrail.models.config import IssueTrailConfig
from issuetrail.models.context import IssueChangeContext
from issuetrail.models.diffs import UNUSED, Diff, FieldDiffs
from issuetrail.models.issue import Issue
from issuetrail.models.notifications import IssueNotification
from issuetrail.models.vocabulary import Resolution, Severity, Status

__all__ = [
    "UNUSED",
    "ActionPlan",
    "Diff",
    "FieldDiffs",
    "Issue",
    "IssueChangeContext",
    "IssueNotification",
    "IssueTrailConfig",
    "Resolution",
    "Severity",
    "Status",
    "User",
]
