"""Tests for the matplotlib surface and the GIF/PNG/CLI outputs (Agg backend)."""

from __future__ import annotations

import math

import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.collections import EllipseCollection, LineCollection

from fireworks import demo, viz
from fireworks.config import FireworksConfig


@pytest.fixture
def small_sim():
    sim, fig = viz.make_sim(200, 120, rng=np.random.default_rng(7), fps=20)
    yield sim
    plt.close(fig)


@pytest.fixture
def out_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path / viz.OUT_DIR


def test_make_sim_matches_figure_size(small_sim):
    assert (small_sim.width, small_sim.height) == (200, 120)
    ax = small_sim.canvas.ax
    assert ax.get_xlim() == (0, 200)
    assert ax.get_ylim() == (120, 0)      # y grows downward


def test_render_builds_collections(small_sim):
    c = small_sim.canvas
    c.stroke_style = "#FF1744"
    c.begin_path()
    c.move_to(10, 10)
    c.line_to(20, 20)
    c.line_to(30, 10)
    c.stroke()
    c.fill_style, c.shadow_blur, c.shadow_color = "#00E5FF80", 40, "#00E5FF"
    c.begin_path()
    c.arc(50, 50, 3, 0, 2 * math.pi)
    c.fill()
    artists = c.render()
    kinds = [type(a) for a in artists]
    assert kinds.count(EllipseCollection) == 2          # halo + spark
    assert kinds.count(LineCollection) == 1
    # trails sit under every disc
    assert isinstance(artists[0], LineCollection)
    assert len(artists[0].get_segments()) == 2
    assert isinstance(artists[-1], EllipseCollection)
    assert not c.empty


def test_render_replaces_previous_artists(small_sim):
    c = small_sim.canvas
    c.begin_path()
    c.arc(5, 5, 1, 0, 2 * math.pi)
    c.fill()
    c.render()
    c.clear()
    assert c.empty
    assert c.render() == []
    assert len(c.ax.collections) == 0


def test_frames_draw_through_engine(small_sim):
    small_sim.start()
    small_sim.loop.run(60)
    small_sim.canvas.render()
    assert small_sim.frame == 60
    small_sim.stop()
    assert small_sim.canvas.empty


def test_snapshot_writes_png(small_sim, out_dir):
    path = viz.snapshot(small_sim, seconds=1.0, fps=20, fname="shot.png")
    assert (out_dir / "shot.png").exists()
    assert path.endswith("shot.png")
    assert not small_sim.active


def test_animate_writes_gif(small_sim, out_dir):
    viz.animate(small_sim, seconds=0.5, fps=10, fname="short.gif")
    assert (out_dir / "short.gif").stat().st_size > 0


def test_demo_cli_snapshot(out_dir, capsys):
    demo.main(["--width", "160", "--height", "90", "--seconds", "0.5",
               "--fps", "10", "--seed", "3", "--snapshot", "--out", "cli.png"])
    assert (out_dir / "cli.png").exists()
    assert "[fireworks] saved" in capsys.readouterr().out


def test_demo_cli_uses_config(out_dir, tmp_path, monkeypatch):
    cfg_file = tmp_path / "show.txt"
    cfg_file.write_text("max_rockets = 4\n")
    seen = {}
    real = viz.make_sim

    def spy(*a, config=None, **kw):
        seen["config"] = config
        return real(*a, config=config, **kw)

    monkeypatch.setattr(viz, "make_sim", spy)
    demo.main(["--width", "80", "--height", "60", "--seconds", "0.2", "--fps", "10",
               "--snapshot", "--config", str(cfg_file)])
    assert isinstance(seen["config"], FireworksConfig)
    assert seen["config"].max_rockets == 4


def test_demo_cli_missing_config(out_dir):
    with pytest.raises(SystemExit, match="not found"):
        demo.main(["--config", "missing.txt"])


def test_demo_cli_rejects_bad_fps():
    with pytest.raises(SystemExit):
        demo.get_args(["--fps", "0"])


@pytest.mark.parametrize("size", [["--width", "0"], ["--height", "0"],
                                  ["--width", "0", "--height", "0"]])
def test_demo_cli_rejects_zero_size(size):
    with pytest.raises(SystemExit):
        demo.get_args(size)


@pytest.mark.parametrize("timing", [["--seconds", "0"], ["--seconds", "0.05", "--fps", "10"]])
def test_demo_cli_rejects_zero_frames(timing, out_dir):
    with pytest.raises(SystemExit):
        demo.main(timing + ["--width", "80", "--height", "60"])
    assert not out_dir.exists()
