"""Field keys and the per-field notification policy.

Diff keys are what ends up in an issue's change history. Policy keys name
the update paths of ``IssueUpdater``; most coincide with a diff key, but
manual severity shares the ``severity`` diff key and every ad-hoc attribute
shares the ``attribute`` policy.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

# Diff keys
SEVERITY: Final = "severity"
ASSIGNEE: Final = "assignee"
RESOLUTION: Final = "resolution"
STATUS: Final = "status"
AUTHOR: Final = "author"
ACTION_PLAN: Final = "actionPlan"
TECHNICAL_DEBT: Final = "technicalDebt"

# Policy-only keys
MANUAL_SEVERITY: Final = "manualSeverity"
ATTRIBUTE: Final = "attribute"
EFFORT_TO_FIX: Final = "effortToFix"
LINE: Final = "line"
MESSAGE: Final = "message"
CLOSE_DATE: Final = "closeDate"

NOTIFICATION_POLICY: Mapping[str, bool] = MappingProxyType(
    {
        ASSIGNEE: True,
        SEVERITY: False,
        MANUAL_SEVERITY: True,
        RESOLUTION: True,
        STATUS: True,
        ATTRIBUTE: False,
        ACTION_PLAN: True,
        # author changes come in bulk from SCM imports; notifying would spam
        AUTHOR: False,
        EFFORT_TO_FIX: False,
        TECHNICAL_DEBT: False,
        LINE: False,
        MESSAGE: False,
        CLOSE_DATE: False,
    }
)


def must_notify(policy_key: str) -> bool:
    """Return whether a change made through *policy_key* notifies users.

    Raises:
        KeyError: *policy_key* is not part of the policy table.
    """
    return NOTIFICATION_POLICY[policy_key]
