"""Tests for explosion pattern generation."""

from __future__ import annotations

import math

import numpy as np
import pytest

from fireworks import shapes


class TestParticleCount:
    def test_always_between_30_and_50(self, rng):
        counts = [shapes.particle_count(rng) for _ in range(2000)]
        assert min(counts) >= 30
        assert max(counts) <= 50

    def test_explode_batch_size(self, rng):
        for _ in range(200):
            batch = shapes.explode(10, 20, "#FFD700", rng)
            assert 30 <= len(batch) <= 50


class TestPickShape:
    def test_force_heart(self, rng):
        assert all(shapes.pick_shape(rng, force_heart=True) == shapes.HEART
                   for _ in range(100))

    def test_uniform_over_six_indexes(self, rng):
        seen = {shapes.pick_shape(rng) for _ in range(500)}
        assert seen == set(range(shapes.N_SHAPES))

    def test_unknown_index_falls_back_to_burst(self, rng):
        angles, speeds = shapes.pattern(5, 40, rng)
        assert len(angles) == 40
        assert np.all((angles >= 0) & (angles < 2 * np.pi))
        assert np.all((speeds >= 2) & (speeds < 6))


class TestGenerators:
    def test_circle_even_spacing(self, rng):
        angles, speeds = shapes.circle(40, rng)
        assert np.allclose(np.diff(angles), 2 * np.pi / 40)
        assert np.all((speeds >= 3) & (speeds < 6))

    def test_ring_is_tight_band(self, rng):
        angles, speeds = shapes.ring(36, rng)
        assert angles[0] == 0.0
        assert np.all((speeds >= 5) & (speeds < 6))

    def test_star_long_and_short_points(self, rng):
        angles, speeds = shapes.star(45, rng)
        slots = np.arange(45) % 10
        assert np.allclose(angles, 2 * np.pi * slots / 10)
        long_pts = speeds[slots % 2 == 0]
        short_pts = speeds[slots % 2 == 1]
        assert np.all((long_pts >= 5) & (long_pts < 6))
        assert np.all((short_pts >= 2) & (short_pts < 3))

    def test_burst_ranges(self, rng):
        angles, speeds = shapes.burst(1000, rng)
        assert np.all((angles >= 0) & (angles < 2 * np.pi))
        assert np.all((speeds >= 2) & (speeds < 6))

    def test_heart_curve_points(self):
        hx, hy = shapes.heart_points(4)
        # theta = 0, pi/2, pi, 3pi/2
        lift = math.sqrt(7.0 / 50.0)
        assert hx[0] == pytest.approx(1.0)
        assert hy[0] == pytest.approx(-lift)
        assert hy[1] == pytest.approx(-1.0)
        assert hy[3] == pytest.approx(1.0, abs=1e-12)

    def test_heart_is_deterministic(self, rng):
        a1, s1 = shapes.heart(37, rng)
        a2, s2 = shapes.heart(37, None)
        assert np.array_equal(a1, a2)
        assert np.array_equal(s1, s2)


class TestExplode:
    def test_forced_heart_particles_follow_curve(self, rng):
        for _ in range(20):
            batch = shapes.explode(100, 100, "#FF1493", rng, force_heart=True)
            angles, speeds = shapes.heart(len(batch))
            for p, a, s in zip(batch, angles, speeds):
                assert p.vx == pytest.approx(math.cos(a) * s)
                assert p.vy == pytest.approx(math.sin(a) * s)

    def test_particle_defaults(self, rng):
        batch = shapes.explode(5.0, 6.0, "#00E5FF", rng, trail_len=7)
        for p in batch:
            assert (p.x, p.y) == (5.0, 6.0)
            assert p.color == "#00E5FF"
            assert p.alpha == 1.0
            assert 0.015 <= p.decay < 0.035
            assert 1.5 <= p.size < 3.5
            assert len(p.trail) == 0
            assert p.trail.maxlen == 7
