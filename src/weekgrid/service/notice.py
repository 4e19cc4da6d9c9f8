# SPDX-License-Identifier: MIT

from time import monotonic
from typing import Callable, Optional


class Notice:
    """A transient user-facing message that expires after a few seconds."""

    def __init__(
        self, duration_seconds: float = 3, clock: Callable[[], float] = monotonic
    ) -> None:
        self.duration_seconds = duration_seconds
        self._clock = clock
        self._message: Optional[str] = None
        self._expires_at = 0.0

    def show(self, message: str) -> None:
        self._message = message
        self._expires_at = self._clock() + self.duration_seconds

    def clear(self) -> None:
        self._message = None

    @property
    def message(self) -> Optional[str]:
        if self._message is not None and self._clock() >= self._expires_at:
            self._message = None
        return self._message
