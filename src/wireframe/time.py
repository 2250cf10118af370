from __future__ import annotations

import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class FrameClock:
    def __init__(self, now: Callable[[], float] = time.perf_counter) -> None:
        self._now = now
        self.last: Optional[float] = None
        self.delta = 0.0
        self.fps = 0.0

    def tick(self) -> float:
        now = self._now()
        # First frame has nothing to measure against; report zero, not time since startup.
        if self.last is None:
            self.last = now
        self.delta = now - self.last
        self.last = now
        if self.delta > 0:
            self.fps = 1.0 / self.delta
        return self.delta


class FrameLoop:
    """Calls ``tick(delta)`` once per frame until stopped.

    A frame whose tick or present raises is logged and counted once, and the
    next frame is still scheduled: one bad frame never ends the loop.
    """

    def __init__(self, tick: Callable[[float], None], clock: Optional[FrameClock] = None) -> None:
        self.tick = tick
        self.clock = clock or FrameClock()
        self.frames = 0
        self.failed_frames = 0
        self.running = False

    def step(self) -> bool:
        delta = self.clock.tick()
        self.frames += 1
        try:
            self.tick(delta)
        except Exception:
            self.failed_frames += 1
            logger.exception("Frame %d failed (delta=%.4fs)", self.frames, delta)
            return False
        return True

    def run(self, poll: Callable[[], bool], present: Callable[[], None]) -> None:
        self.running = True
        while self.running and poll():
            ok = False
            try:
                ok = self.step()
            finally:
                self._present(present, ok)
        self.running = False

    def _present(self, present: Callable[[], None], frame_ok: bool) -> None:
        try:
            present()
        except Exception:
            if frame_ok:
                self.failed_frames += 1
            logger.exception("Frame %d failed to present", self.frames)

    def stop(self) -> None:
        self.running = False
