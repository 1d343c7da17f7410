"""Collaborators the evaluation workflow talks to."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .notifications import Notification, Severity, TransientNotifier
from .persistence import InMemoryStore, JsonFileStore


@runtime_checkable
class KeyValueStore(Protocol):
    """String key-value persistence contract."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or ``None`` when the key is absent."""

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""


@runtime_checkable
class Notifier(Protocol):
    """Operator-facing message sink.

    Implementations display the message immediately and may dismiss it later;
    a newer message supersedes an older one.
    """

    def notify(self, message: str, severity: Severity = "info") -> object:
        """Show ``message`` with the given severity."""


__all__ = [
    "InMemoryStore",
    "JsonFileStore",
    "KeyValueStore",
    "Notification",
    "Notifier",
    "Severity",
    "TransientNotifier",
]
