"""Structured logging configuration using structlog.

issuetrail itself never calls ``setup_logging``; the embedding application
does, usually with the values from ``IssueTrailConfig.log``. Until then,
structlog's defaults apply.

Every module logs through a logger bound with a ``component`` key:

    updater                -- ``issue_field_changed`` (debug, one per applied
                              change, with ``field``, ``notify``, ``login`` and
                              ``scan``) and ``severity_change_rejected``
                              (warning).
    ledger                 -- ``issue_changes_committed`` (info) and
                              ``ledger_entry_evicted`` (debug).
    notifications          -- ``notifications_disabled``,
                              ``no_notification_channels_configured`` and
                              ``notification_channels_enabled`` when the
                              dispatcher is built.
    notifications.manager  -- per-channel ``notification_sent`` and
                              ``notification_failed``, plus
                              ``notification_dropped`` and
                              ``notification_undelivered`` for the issue.

All events carry ``issue_key`` where an issue is involved, so one issue's
transaction can be followed across components.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOG_FORMATS = ("json", "console")


def setup_logging(level: str = "info", fmt: str = "json") -> None:
    """Configure structlog output to stderr.

    ``fmt`` selects the renderer: ``json`` for log shippers, ``console`` for
    humans reading a terminal.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    renderer: structlog.types.Processor
    if fmt == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="ts"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Get a logger bound with a component name."""
    return structlog.get_logger(component=component)  # type: ignore[return-value]
