"""Prometheus counters for issue changes and notifications."""

from __future__ import annotations

from prometheus_client import Counter

field_changes_total = Counter(
    "issuetrail_field_changes_total",
    "Issue field changes applied by the updater",
    ["field"],
)

policy_violations_total = Counter(
    "issuetrail_policy_violations_total",
    "Updates rejected because they would override a manual decision",
    ["field"],
)

notifications_total = Counter(
    "issuetrail_notifications_total",
    "Issue notifications handed to a channel",
    ["channel", "success"],
)
