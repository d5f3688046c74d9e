import os
import numpy as np, matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation
from matplotlib.collections import LineCollection, EllipseCollection
from matplotlib.colors import to_rgba
from tqdm.auto import tqdm

from fireworks.canvas import Canvas
from fireworks.loop import EventLoop
from fireworks.sim import FireworksSim
plt.style.use('dark_background')

OUT_DIR = "fireworks_output"
GLOW_ALPHA = 0.18        # opacity of the halo relative to the spark
GLOW_SCALE = 0.2         # halo radius grows by blur * GLOW_SCALE

# ---------------- surface ---------------------------------------------
class MplCanvas(Canvas):
    """
    Canvas backed by a matplotlib Axes in pixel coordinates (y down).
    Draw calls only buffer geometry; render() turns the buffers into three
    collections and returns them for FuncAnimation.
    """
    def __init__(self, ax, width=0, height=0):
        self.ax = ax
        self._artists = []
        self._reset()
        super().__init__(width, height)

    def _reset(self):
        self._segs, self._seg_cols, self._seg_w = [], [], []
        self._discs = []            # (x, y, r, rgba)
        self._glows = []

    def resize(self, width, height):
        super().resize(width, height)
        self.ax.set_xlim(0, max(1, self.width))
        self.ax.set_ylim(max(1, self.height), 0)

    def _wipe(self):
        self._reset()

    def _polyline(self, points, color, width):
        pts = np.asarray(points)
        self._segs.extend(np.stack([pts[:-1], pts[1:]], axis=1))
        self._seg_cols.extend([to_rgba(color)] * (len(pts) - 1))
        self._seg_w.extend([width] * (len(pts) - 1))

    def _disc(self, x, y, r, color, blur, shadow):
        rgba = to_rgba(color)
        self._discs.append((x, y, r, rgba))
        if blur > 0:
            halo = to_rgba(shadow, alpha=rgba[3] * GLOW_ALPHA)
            self._glows.append((x, y, r + blur * GLOW_SCALE, halo))

    @property
    def empty(self):
        return not (self._segs or self._discs or self._glows)

    def render(self):
        for a in self._artists:
            a.remove()
        self._artists = []
        ax = self.ax
        # canvas paint order: rocket trails under heads, halos and sparks
        if self._segs:
            lc = LineCollection(self._segs, colors=self._seg_cols,
                                linewidths=self._seg_w, capstyle='round')
            self._artists.append(ax.add_collection(lc))
        for discs in (self._glows, self._discs):
            if not discs:
                continue
            xy = np.array([(d[0], d[1]) for d in discs])
            d2 = np.array([2 * d[2] for d in discs])
            ec = EllipseCollection(d2, d2, np.zeros(len(discs)), units='xy',
                                   offsets=xy, offset_transform=ax.transData,
                                   facecolors=[d[3] for d in discs],
                                   edgecolors='none')
            self._artists.append(ax.add_collection(ec))
        return self._artists


class FigureViewport:
    """Pixel size of a matplotlib figure."""
    def __init__(self, fig):
        self.fig = fig

    def size(self):
        w, h = self.fig.get_size_inches() * self.fig.dpi
        return int(round(w)), int(round(h))


# ---------------- helper ----------------------------------------------
def make_sim(width=960, height=540, config=None, rng=None, dpi=100, fps=30):
    """Black full-bleed figure, MplCanvas on it and a FireworksSim drawing there."""
    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    fig.patch.set_facecolor('k')
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_facecolor('k'); ax.set_axis_off()
    canvas = MplCanvas(ax)
    sim = FireworksSim(canvas=canvas, viewport=FigureViewport(fig), config=config,
                       rng=rng, loop=EventLoop(frame_ms=1000 / fps))
    fig.canvas.mpl_connect('resize_event', lambda _evt: sim.resize())
    return sim, fig

def _frame_update(sim, dt):
    def update(_i):
        sim.loop.run_frame(dt)
        return sim.canvas.render()
    return update

# ---------------- animate ---------------------------------------------
def animate(sim, seconds=8.0, fps=30, fname="fireworks.gif"):
    fname = os.path.join(OUT_DIR, fname)
    os.makedirs(OUT_DIR, exist_ok=True)
    fig = sim.canvas.ax.figure
    frames = int(seconds * fps)
    dt = 1000.0 / fps
    sim.start()

    ani = FuncAnimation(fig, _frame_update(sim, dt), frames=frames,
                        init_func=sim.canvas.render, interval=dt, blit=False)
    with tqdm(total=frames, desc="encoding frames", unit="frame") as bar:
        ani.save(fname, writer='pillow', fps=fps,
                 progress_callback=lambda i, n: bar.update(1))
    plt.close(fig)
    sim.stop()
    return fname

# ---------------- snapshot --------------------------------------------
def snapshot(sim, seconds=3.0, fps=30, fname="fireworks.png"):
    fname = os.path.join(OUT_DIR, fname)
    os.makedirs(OUT_DIR, exist_ok=True)
    fig = sim.canvas.ax.figure
    sim.start()
    sim.loop.run(int(seconds * fps), 1000.0 / fps)
    sim.canvas.render()
    fig.savefig(fname, dpi=fig.dpi, facecolor='k')
    plt.close(fig)
    sim.stop()
    return fname

# ---------------- live ------------------------------------------------
def show(sim, fps=30):
    fig = sim.canvas.ax.figure
    dt = 1000.0 / fps
    sim.start()
    ani = FuncAnimation(fig, _frame_update(sim, dt), init_func=sim.canvas.render,
                        interval=dt, blit=False, cache_frame_data=False)
    plt.show()
    sim.stop()
    return ani
