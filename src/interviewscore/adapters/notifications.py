"""Transient operator notifications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Literal

import pendulum
import structlog

Severity = Literal["info", "success", "warning", "danger"]

DEFAULT_DISMISS_AFTER_MS = 3500


@dataclass(frozen=True, slots=True)
class Notification:
    message: str
    severity: Severity
    issued_at: pendulum.DateTime
    expires_at: pendulum.DateTime


class TransientNotifier:
    """Keeps the latest notification visible until it expires or is replaced.

    Expiry is checked when ``current()`` is read, against the injected clock.
    """

    def __init__(
        self,
        *,
        dismiss_after_ms: int | None = None,
        clock: Callable[[], pendulum.DateTime] = pendulum.now,
    ) -> None:
        self._dismiss_after_ms = dismiss_after_ms or DEFAULT_DISMISS_AFTER_MS
        self._dismiss_after = pendulum.duration(milliseconds=self._dismiss_after_ms)
        self._clock = clock
        self._current: Notification | None = None
        self.history: list[Notification] = []
        self._logger = structlog.get_logger(__name__)

    @property
    def dismiss_after_ms(self) -> int:
        return self._dismiss_after_ms

    def notify(self, message: str, severity: Severity = "info") -> Notification:
        issued_at = self._clock()
        notification = Notification(
            message=message,
            severity=severity,
            issued_at=issued_at,
            expires_at=issued_at + self._dismiss_after,
        )
        self._current = notification
        self.history.append(notification)
        self._logger.info("notification", message=message, severity=severity)
        return notification

    def current(self) -> Notification | None:
        if self._current is None:
            return None
        if self._clock() >= self._current.expires_at:
            self._current = None
        return self._current

    def clear(self) -> None:
        self._current = None
