"""Delta-time measurement."""

from __future__ import annotations

import time
from typing import Callable


class DtWatch:
    """Measures seconds since it started and since the last reading."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.started_at: float | None = None
        self._last: float | None = None

    @property
    def is_started(self) -> bool:
        return self.started_at is not None

    def start(self) -> None:
        now = self._clock()
        self.started_at = now
        self._last = now

    def _require_started(self) -> None:
        if self.started_at is None or self._last is None:
            raise RuntimeError("DtWatch has not been started")

    def dt(self) -> float:
        """Seconds since the previous call to dt(), or since start()."""
        self._require_started()
        now = self._clock()
        elapsed = now - self._last  # type: ignore[operator]
        self._last = now
        return elapsed

    def dt_since_start(self) -> float:
        """Seconds since start()."""
        self._require_started()
        return self._clock() - self.started_at  # type: ignore[operator]