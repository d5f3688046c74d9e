# fireworks/loop.py
"""
Single-threaded cooperative scheduler with a simulated millisecond clock.

Stands in for the display host: ``call_later`` / ``call_every`` are the
wall-clock timers, ``request_frame`` is the refresh callback.  Whoever drives
the display (FuncAnimation, a test) calls ``run_frame`` once per refresh.
"""
from __future__ import annotations
import heapq
import itertools
from typing import Callable, Dict, List, Optional


class Timer:
    __slots__ = ("due", "interval", "callback", "cancelled")

    def __init__(self, due: float, callback: Callable, interval: Optional[float] = None):
        self.due = due
        self.interval = interval
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class EventLoop:
    def __init__(self, frame_ms: float = 1000 / 60):
        self.now = 0.0
        self.frame_ms = frame_ms
        self._seq = itertools.count()
        self._heap: List = []               # (due, seq, Timer)
        self._frames: Dict[int, Callable] = {}

    # ── timers ──────────────────────────────────────────────────
    def call_later(self, delay_ms: float, callback: Callable) -> Timer:
        t = Timer(self.now + max(0.0, delay_ms), callback)
        heapq.heappush(self._heap, (t.due, next(self._seq), t))
        return t

    def call_every(self, interval_ms: float, callback: Callable) -> Timer:
        if interval_ms <= 0:
            raise ValueError(f"interval must be > 0, got {interval_ms}")
        t = Timer(self.now + interval_ms, callback, interval_ms)
        heapq.heappush(self._heap, (t.due, next(self._seq), t))
        return t

    @staticmethod
    def cancel(timer: Optional[Timer]):
        if timer is not None:
            timer.cancel()

    def pending(self) -> int:
        return sum(1 for _, _, t in self._heap if not t.cancelled)

    def advance(self, ms: float):
        """Move the clock forward, firing every timer that falls due."""
        end = self.now + ms
        while self._heap and self._heap[0][0] <= end:
            due, _, t = heapq.heappop(self._heap)
            if t.cancelled:
                continue
            self.now = due
            t.callback()
            if t.interval is not None and not t.cancelled:
                t.due = due + t.interval
                heapq.heappush(self._heap, (t.due, next(self._seq), t))
        self.now = end

    # ── frames ──────────────────────────────────────────────────
    def request_frame(self, callback: Callable) -> int:
        handle = next(self._seq)
        self._frames[handle] = callback
        return handle

    def cancel_frame(self, handle: Optional[int]):
        if handle is not None:
            self._frames.pop(handle, None)

    def run_frame(self, dt_ms: Optional[float] = None):
        """One display refresh: timers up to the new time, then frame callbacks."""
        self.advance(self.frame_ms if dt_ms is None else dt_ms)
        callbacks, self._frames = self._frames, {}
        for cb in callbacks.values():
            cb()

    def run(self, n_frames: int, dt_ms: Optional[float] = None):
        for _ in range(n_frames):
            self.run_frame(dt_ms)
