# fireworks/shapes.py
"""
Explosion patterns.  Every generator maps a particle count ``n`` to two arrays
``(angles, speeds)`` of length ``n``; ``explode`` turns them into Particles.

    0  circle    evenly spaced angles, speed U[3,6)
    1  ring      evenly spaced angles, speed U[5,6)  (tight fast band)
    2  heart     angles / speeds taken from the heart curve
    3  star      10 slots, long points on even slots
    4  burst     random angle, speed U[2,6)
    5  (fallback, behaves as burst)
"""
from __future__ import annotations
from typing import Callable, Dict, List, Tuple

import numpy as np

from fireworks import Particle, PARTICLE_TRAIL

MIN_PARTICLES = 30
SPREAD        = 20          # count = floor(U*20) + 30

CIRCLE, RING, HEART, STAR, BURST = range(5)
N_SHAPES = 6                # index 5 falls through to burst

# ---------------- generators ------------------------------------------
def _even_angles(n):
    return 2 * np.pi * np.arange(n) / n

def circle(n, rng):
    return _even_angles(n), rng.random(n) * 3 + 3

def ring(n, rng):
    return _even_angles(n), rng.random(n) * 1 + 5

def heart_points(n):
    """Unit heart curve sampled at n even angles, flipped to point up."""
    theta = _even_angles(n)
    hx = np.cos(theta)
    hy = np.sin(theta) + np.abs(hx) * np.sqrt((8.0 - np.abs(hx)) / 50.0)
    return hx, -hy

def heart(n, rng=None):
    hx, hy = heart_points(n)
    return np.arctan2(hy, hx), 3.0 * np.hypot(hx, hy)

def star(n, rng):
    slot = np.arange(n) % 10
    angles = 2 * np.pi * slot / 10
    speeds = np.where(slot % 2 == 0, 5.0, 2.0) + rng.random(n)
    return angles, speeds

def burst(n, rng):
    return rng.random(n) * 2 * np.pi, rng.random(n) * 4 + 2

SHAPES: Dict[int, Callable] = {
    CIRCLE: circle,
    RING:   ring,
    HEART:  heart,
    STAR:   star,
    BURST:  burst,
}

def pick_shape(rng, force_heart=False):
    return HEART if force_heart else int(rng.integers(0, N_SHAPES))

def particle_count(rng):
    return int(np.floor(rng.random() * SPREAD)) + MIN_PARTICLES

# ---------------- factory ---------------------------------------------
def pattern(shape: int, n: int, rng) -> Tuple[np.ndarray, np.ndarray]:
    return SHAPES.get(shape, burst)(n, rng)

def explode(x, y, color, rng, force_heart=False,
            trail_len=PARTICLE_TRAIL) -> List[Particle]:
    """A batch of 30–50 sparks at (x, y), all in ``color``."""
    n = particle_count(rng)
    angles, speeds = pattern(pick_shape(rng, force_heart), n, rng)
    vx = np.cos(angles) * speeds
    vy = np.sin(angles) * speeds
    decay = rng.random(n) * 0.02 + 0.015
    size  = rng.random(n) * 2 + 1.5
    return [Particle(x, y, vx[i], vy[i], color, decay[i], size[i], trail_len)
            for i in range(n)]
