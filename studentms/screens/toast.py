"""
Self-clearing success messages.

A toast remembers when it was shown and reports nothing once its delay has
passed. The clock is injectable so tests do not need to sleep.
"""

from __future__ import annotations

import time
from typing import Callable, Optional

Clock = Callable[[], float]

TOAST_SECONDS = 3.0


class Toast:
    def __init__(self, clock: Optional[Clock] = None) -> None:
        self._clock = clock or time.monotonic
        self._message: Optional[str] = None
        self._expires_at = 0.0
        self.duration = TOAST_SECONDS

    def show(self, message: str, *, seconds: float = TOAST_SECONDS) -> None:
        self._message = message
        self.duration = seconds
        self._expires_at = self._clock() + seconds

    def clear(self) -> None:
        self._message = None

    @property
    def message(self) -> Optional[str]:
        if self._message is not None and self._clock() >= self._expires_at:
            self._message = None
        return self._message
