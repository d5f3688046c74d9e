"""Shared fixtures for the fireworks tests."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from fireworks.canvas import FixedViewport, RecordingCanvas
from fireworks.loop import EventLoop
from fireworks.sim import FireworksSim


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def canvas():
    return RecordingCanvas()


@pytest.fixture
def loop():
    return EventLoop(frame_ms=1000 / 60)


@pytest.fixture
def sim(canvas, loop, rng):
    """800x600 engine drawing on a RecordingCanvas."""
    return FireworksSim(canvas=canvas, viewport=FixedViewport(800, 600),
                        rng=rng, loop=loop)
