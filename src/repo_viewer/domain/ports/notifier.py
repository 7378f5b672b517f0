"""Port: notifier — receives user-facing messages about finished operations."""

from __future__ import annotations

from typing import Protocol


class Notifier(Protocol):
    """Abstract contract for delivering a short notification message."""

    def notify(self, message: str) -> None:
        ...
