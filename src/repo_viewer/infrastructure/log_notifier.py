"""Notifier that writes notifications to the application log."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """Default ``Notifier``: no desktop integration, just an INFO log line."""

    def notify(self, message: str) -> None:
        logger.info("Notification: %s", message)
