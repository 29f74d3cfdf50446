"""Notification dispatcher for changed issues.

NotificationChannel    -- ABC every channel must implement.
NotificationDispatcher -- Polls an issue's notification flag, fans the
                          notification out to all registered channels and
                          resets the flag once delivery succeeded.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod

import structlog

from issuetrail.models.issue import Issue
from issuetrail.models.notifications import IssueNotification
from issuetrail.observability.metrics import notifications_total

_log = structlog.get_logger(component="notifications.manager")


class NotificationChannel(ABC):
    """Abstract base class for all notification channels.

    Every concrete channel must implement ``send``, which should not raise;
    return ``False`` instead.
    """

    @property
    @abstractmethod
    def channel_name(self) -> str:
        """Human-readable channel identifier used in metrics and logs."""

    @abstractmethod
    async def send(self, notification: IssueNotification) -> bool:
        """Deliver *notification* via this channel.

        Returns:
            True  -- notification accepted by the channel.
            False -- delivery failed (already logged inside implementation).
        """


class NotificationDispatcher:
    """Sends the pending notification of an issue to every channel.

    * Does nothing unless ``issue.must_send_notifications()`` is True.
    * Channels are called concurrently; one failing channel never blocks
      the others.
    * The flag is reset when at least one channel accepted the notification,
      or when no channel is configured. If every channel failed the flag
      stays set so the caller can retry.
    """

    def __init__(self, channels: list[NotificationChannel], enabled: bool = True) -> None:
        self._channels = channels
        self._enabled = enabled

    @property
    def channels(self) -> list[NotificationChannel]:
        return list(self._channels)

    async def dispatch(self, issue: Issue) -> bool:
        """Deliver the pending notification of *issue*.

        Returns True when the notification was dispatched and the flag reset.
        """
        if not self._enabled or not issue.must_send_notifications():
            return False

        notification = IssueNotification.from_issue(issue)
        if not self._channels:
            _log.debug("notification_dropped", issue_key=issue.key, reason="no channels configured")
            issue.notifications_sent()
            return True

        results = await asyncio.gather(*(self._send_one(channel, notification) for channel in self._channels))
        if not any(results):
            _log.warning(
                "notification_undelivered",
                issue_key=issue.key,
                notification_id=notification.notification_id,
            )
            return False
        issue.notifications_sent()
        return True

    async def _send_one(self, channel: NotificationChannel, notification: IssueNotification) -> bool:
        """Deliver to a single channel, recording metrics regardless of outcome."""
        try:
            success = await channel.send(notification)
        except Exception as exc:  # noqa: BLE001
            _log.error(
                "notification_channel_unexpected_error",
                channel=channel.channel_name,
                notification_id=notification.notification_id,
                error=str(exc),
            )
            success = False

        label = "true" if success else "false"
        notifications_total.labels(channel=channel.channel_name, success=label).inc()

        if success:
            _log.info(
                "notification_sent",
                channel=channel.channel_name,
                notification_id=notification.notification_id,
                issue_key=notification.issue_key,
                fields=list(notification.changes),
            )
        else:
            _log.warning(
                "notification_failed",
                channel=channel.channel_name,
                notification_id=notification.notification_id,
            )
        return success
