"""Frame clock: turns millisecond timestamps into a dimensionless ``dt``.

``dt == 1.0`` is one nominal 60 fps frame. Every per-frame quantity in the
engine (speeds, growth rates, spawn intervals) is expressed per nominal frame
and multiplied by ``dt``.
"""

from __future__ import annotations

from .constants import FRAME_MS, MAX_FRAME_DT


class FrameClock:
    """
    Measures elapsed time between rendered frames.

    The clock is reset whenever ticking (re)starts, e.g. on entering a round or
    resuming from pause, so time spent outside ``PLAYING`` is never integrated.
    """

    def __init__(self, frame_ms: float = FRAME_MS, max_dt: float = MAX_FRAME_DT) -> None:
        self.frame_ms = frame_ms
        self.max_dt = max_dt
        self.last_ms: float | None = None

    def reset(self, now_ms: float) -> None:
        """Start measuring from ``now_ms``; the next tick covers only what follows."""
        self.last_ms = now_ms

    def tick(self, now_ms: float) -> float:
        """
        Return ``dt`` for the frame ending at ``now_ms``.

        Parameters
        ----------
        now_ms : float
            Current time in milliseconds (e.g. ``pygame.time.get_ticks()``).

        Returns
        -------
        float
            Elapsed time in nominal frames, never negative and never above
            ``max_dt``. The first call after construction returns 0.
        """
        if self.last_ms is None:
            self.last_ms = now_ms
            return 0.0
        elapsed = now_ms - self.last_ms
        self.last_ms = max(self.last_ms, now_ms)
        if elapsed <= 0:
            return 0.0
        return min(self.max_dt, elapsed / self.frame_ms)
