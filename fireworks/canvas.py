# fireworks/canvas.py
"""
Drawing-surface collaborator.

``Canvas`` keeps the small slice of the HTML canvas 2D API the engine needs:
path building (``begin_path`` / ``move_to`` / ``line_to`` / ``arc``), ``stroke``,
``fill``, ``clear_rect`` and the style attributes ``fill_style``,
``stroke_style``, ``line_width``, ``shadow_blur``, ``shadow_color``.
Only full-circle arcs are filled and ``clear_rect`` always wipes the whole
surface; the engine needs nothing more.
Subclasses implement the primitives ``_polyline``, ``_disc`` and ``_wipe``.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

Point = Tuple[float, float]
FULL_TURN = 2 * math.pi


def with_alpha(color: str, alpha: float) -> str:
    """'#RRGGBB' + two hex digits of floor(alpha*255), clamped to 00..ff."""
    a = min(255, max(0, int(math.floor(alpha * 255))))
    return f"{color[:7]}{a:02x}"


@dataclass
class FixedViewport:
    width: int
    height: int

    def size(self):
        return self.width, self.height


class _Arc:
    __slots__ = ("x", "y", "r", "start", "end")

    def __init__(self, x, y, r, start, end):
        self.x, self.y, self.r, self.start, self.end = x, y, r, start, end

    @property
    def full(self):
        return abs(self.end - self.start) >= FULL_TURN - 1e-9

    def points(self, n=32) -> List[Point]:
        th = np.linspace(self.start, self.end, n)
        return list(zip(self.x + self.r * np.cos(th), self.y + self.r * np.sin(th)))


class Canvas:
    def __init__(self, width: int = 0, height: int = 0):
        self.width = 0
        self.height = 0
        self.fill_style   = "#000000"
        self.stroke_style = "#000000"
        self.line_width   = 1.0
        self.shadow_blur  = 0.0
        self.shadow_color = "#000000"
        self._path: List = []
        self.resize(width, height)

    def resize(self, width, height):
        self.width  = max(0, int(width or 0))
        self.height = max(0, int(height or 0))

    @property
    def visible(self):
        return self.width > 0 and self.height > 0

    # ── path building ───────────────────────────────────────────
    def begin_path(self):
        self._path = []

    def move_to(self, x, y):
        self._path.append([(float(x), float(y))])

    def line_to(self, x, y):
        if not self._path or isinstance(self._path[-1], _Arc):
            self._path.append([])
        self._path[-1].append((float(x), float(y)))

    def arc(self, x, y, r, start, end):
        self._path.append(_Arc(float(x), float(y), max(0.0, float(r)), start, end))

    # ── painting ────────────────────────────────────────────────
    def stroke(self):
        if not self.visible:
            return
        for sub in self._path:
            pts = sub.points() if isinstance(sub, _Arc) else sub
            if len(pts) >= 2:
                self._polyline(pts, self.stroke_style, self.line_width)

    def fill(self):
        if not self.visible:
            return
        for sub in self._path:
            if isinstance(sub, _Arc) and sub.full:
                self._disc(sub.x, sub.y, sub.r, self.fill_style,
                           self.shadow_blur, self.shadow_color)

    def clear_rect(self, x, y, w, h):
        self._wipe()

    def clear(self):
        self.clear_rect(0, 0, self.width, self.height)

    # ── backend primitives ──────────────────────────────────────
    def _wipe(self):
        raise NotImplementedError

    def _polyline(self, points: List[Point], color: str, width: float):
        raise NotImplementedError

    def _disc(self, x, y, r, color: str, blur: float, shadow: str):
        raise NotImplementedError


class RecordingCanvas(Canvas):
    """
    Headless surface: keeps the drawn primitives in ``ops`` as tuples
      ('polyline', points, color, width)
      ('disc', x, y, r, color, blur, shadow_color)
    """
    def __init__(self, width: int = 0, height: int = 0):
        self.ops: List[tuple] = []
        super().__init__(width, height)

    def _wipe(self):
        self.ops.clear()

    def _polyline(self, points, color, width):
        self.ops.append(("polyline", list(points), color, width))

    def _disc(self, x, y, r, color, blur, shadow):
        self.ops.append(("disc", x, y, r, color, blur, shadow))

    def discs(self):
        return [op for op in self.ops if op[0] == "disc"]

    def polylines(self):
        return [op for op in self.ops if op[0] == "polyline"]
