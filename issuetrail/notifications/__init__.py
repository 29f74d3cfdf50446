"""Notification collaborator for issuetrail.

Turns the notification flag raised by the update policy into an
IssueNotification delivered to one or more channels. Transports are left to
the embedding application, which registers its own channels.

Exports:
    NotificationChannel    -- Abstract base for all channel implementations.
    NotificationDispatcher -- Sends an issue's pending notification to all
                              registered channels and resets the flag.
    build_notification_dispatcher -- Factory used by the application bootstrap.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from issuetrail.notifications.manager import NotificationChannel, NotificationDispatcher

if TYPE_CHECKING:
    from issuetrail.models.config import NotificationConfig

_log = structlog.get_logger(component="notifications")

__all__ = [
    "NotificationChannel",
    "NotificationDispatcher",
    "build_notification_dispatcher",
]


def build_notification_dispatcher(
    config: NotificationConfig,
    channels: list[NotificationChannel] | None = None,
) -> NotificationDispatcher:
    """Build a NotificationDispatcher from configuration.

    With notifications disabled the dispatcher keeps its channels but never
    calls them, and leaves every issue's flag untouched.
    """
    channels = list(channels or [])
    if not config.enabled:
        _log.info("notifications_disabled")
    elif not channels:
        _log.info("no_notification_channels_configured")
    else:
        _log.info("notification_channels_enabled", channels=[c.channel_name for c in channels])
    return NotificationDispatcher(channels=channels, enabled=config.enabled)
