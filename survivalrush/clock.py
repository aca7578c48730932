"""Frame timing."""

from __future__ import annotations

import time
from typing import Optional


class FrameClock:
    """Measures the time between consecutive frames in seconds."""

    def __init__(self) -> None:
        self.delta_time: float = 0.0
        self._last_frame: Optional[float] = None

    def start(self, now: Optional[float] = None) -> None:
        """Mark the start of timing; ``now`` defaults to the monotonic clock."""
        self._last_frame = time.monotonic() if now is None else now

    def tick(self, now: Optional[float] = None) -> float:
        """Record a new frame and return the seconds since the previous one."""
        if self._last_frame is None:
            raise RuntimeError("frame clock has not been started")
        current = time.monotonic() if now is None else now
        self.delta_time = current - self._last_frame
        self._last_frame = current
        return self.delta_time