"""
User notification sinks.

The pipeline reports progress and outcomes as :class:`Notification` values.
Surfaces decide where they go: the CLI logs them, the HTTP and MCP surfaces
collect them and return them with the response.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from searchdocs.domain.entities import Notification

logger = logging.getLogger(__name__)


@runtime_checkable
class Notifier(Protocol):
    def notify(self, notification: Notification) -> None: ...


class LoggingNotifier:
    """Writes notifications to the log (destructive ones as warnings)."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def notify(self, notification: Notification) -> None:
        message = notification.title
        if notification.description:
            message = f"{message} - {notification.description}"
        if notification.destructive:
            self._log.warning(message)
        else:
            self._log.info(message)


class CollectingNotifier:
    """Keeps every notification in order; optionally forwards to another sink."""

    def __init__(self, forward_to: Notifier | None = None) -> None:
        self.notifications: list[Notification] = []
        self._forward_to = forward_to

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)
        if self._forward_to is not None:
            self._forward_to.notify(notification)

    def clear(self) -> None:
        self.notifications.clear()

    def to_list(self) -> list[dict]:
        return [n.to_dict() for n in self.notifications]
