# fireworks/sim.py
import math
import numpy as np

from fireworks import Rocket
from fireworks import shapes
from fireworks.canvas import with_alpha
from fireworks.config import FireworksConfig
from fireworks.loop import EventLoop

MAX_DECEL   = 0.15      # vy damping right at the target altitude
ROCKET_LINE = 2
ROCKET_HEAD = 2
HEAD_COLOR  = '#ffffff'

class FireworksSim:
    """
    Owns every rocket and particle, the launch timer and the frame loop.

    canvas    drawing surface (fireworks.canvas.Canvas) or None for headless
    viewport  anything with size() -> (w, h); defaults to the canvas size
    loop      EventLoop shared with whoever drives the display
    """
    def __init__(self, canvas=None, viewport=None, config=None, rng=None, loop=None):
        self.cfg      = config if config is not None else FireworksConfig()
        self.rng      = rng if rng is not None else np.random.default_rng()
        self.loop     = loop if loop is not None else EventLoop()
        self.canvas   = canvas
        self.viewport = viewport
        self.width = self.height = 0
        self.rockets   = []
        self.particles = []
        self.active = False
        self.frame  = 0
        self._frame_req    = None
        self._launch_timer = None
        self.resize()

    # ── viewport ────────────────────────────────────────────────
    def resize(self):
        """Re-read the viewport and match the drawing surface to it."""
        if self.viewport is not None:
            w, h = self.viewport.size()
        elif self.canvas is not None:
            w, h = self.canvas.width, self.canvas.height
        else:
            w, h = 0, 0
        self.width, self.height = max(0, int(w or 0)), max(0, int(h or 0))
        if self.canvas is not None:
            self.canvas.resize(self.width, self.height)

    # ── start / stop ────────────────────────────────────────────
    def start(self):
        if self.active:
            return
        self.active = True
        self._frame_req    = self.loop.request_frame(self._animate)
        self._launch_timer = self.loop.call_every(self.cfg.launch_interval_ms,
                                                  self._spawn_tick)

    def stop(self):
        self.active = False
        self.loop.cancel_frame(self._frame_req)
        self.loop.cancel(self._launch_timer)
        self._frame_req = self._launch_timer = None
        self.rockets   = []
        self.particles = []
        if self.canvas is not None:
            self.canvas.clear()

    def _animate(self):
        if not self.active:
            return
        self.step()
        self._frame_req = self.loop.request_frame(self._animate)

    # ── spawn scheduler ─────────────────────────────────────────
    def active_rockets(self):
        return sum(1 for rk in self.rockets if not rk.exploded)

    def launch_offsets(self, active_count):
        """Delays (ms) of the launches for one scheduler tick, lazily."""
        room = self.cfg.max_rockets - active_count
        if room <= 0:
            return
        count = min(int(self.rng.integers(self.cfg.burst_min, self.cfg.burst_max + 1)), room)
        for i in range(count):
            yield i * self.cfg.launch_stagger_ms

    def _spawn_tick(self):
        if not self.active:
            return
        for delay in self.launch_offsets(self.active_rockets()):
            self.loop.call_later(delay, self._launch_if_active)

    def _launch_if_active(self):
        # staggered launches may fire after stop() or once the cap is hit
        if self.active and self.active_rockets() < self.cfg.max_rockets:
            self.launch_rocket()

    def launch_rocket(self):
        r = self.rng.random
        w, h = self.width, self.height
        heart = bool(r() < self.cfg.heart_chance)
        palette = self.cfg.heart_colors if heart else self.cfg.colors
        rk = Rocket(x=r() * w * 0.6 + w * 0.2,
                    y=h,
                    vx=(r() - 0.5) * 2,
                    vy=-(r() * 3.9 + 18.6),
                    target_y=r() * h * 0.1 + h * 0.01,
                    color=palette[int(self.rng.integers(0, len(palette)))],
                    heart=heart,
                    trail_len=self.cfg.rocket_trail)
        self.rockets.append(rk)
        return rk

    def create_explosion(self, x, y, color, force_heart=False):
        sparks = shapes.explode(x, y, color, self.rng, force_heart,
                                trail_len=self.cfg.particle_trail)
        self.particles.extend(sparks)
        return sparks

    # ── physics ─────────────────────────────────────────────────
    def update_rockets(self):
        g = self.cfg.gravity
        half = self.height * 0.5
        survivors = []
        for rk in self.rockets:
            # fraction of the climb still ahead, 1 far below the target
            progress = min(1.0, max(0.0, (rk.y - rk.target_y) / half)) if half > 0 else 0.0
            decel = (1 - progress) * MAX_DECEL

            rk.x += rk.vx
            rk.y += rk.vy
            rk.vy += g
            rk.vy *= (1 - decel)
            rk.trail.append((rk.x, rk.y))

            if rk.y <= rk.target_y or rk.vy > 0:
                if not rk.exploded:
                    self.create_explosion(rk.x, rk.y, rk.color, rk.heart)
                    rk.exploded = True
                continue
            survivors.append(rk)
        self.rockets = survivors

    def update_particles(self):
        g, f = self.cfg.gravity, self.cfg.friction
        survivors = []
        for p in self.particles:
            p.x += p.vx
            p.y += p.vy
            p.vx *= f
            p.vy *= f
            p.vy += g
            p.trail.append((p.x, p.y, p.alpha))
            p.alpha -= p.decay
            if p.alive:
                survivors.append(p)
        self.particles = survivors

    # ── render ──────────────────────────────────────────────────
    def draw(self):
        c = self.canvas
        if c is None or not c.visible:
            return
        c.clear_rect(0, 0, c.width, c.height)
        c.shadow_blur = 0

        for rk in self.rockets:
            c.stroke_style = rk.color
            c.line_width = ROCKET_LINE
            c.begin_path()
            for i, (x, y) in enumerate(rk.trail):
                if i == 0:
                    c.move_to(x, y)
                else:
                    c.line_to(x, y)
            c.stroke()

            c.fill_style = HEAD_COLOR
            c.begin_path()
            c.arc(rk.x, rk.y, ROCKET_HEAD, 0, 2 * math.pi)
            c.fill()

        by_color = {}
        for p in self.particles:
            by_color.setdefault(p.color, []).append(p)

        for color, group in by_color.items():
            for p in group:
                n = len(p.trail)
                for k, (tx, ty, _) in enumerate(p.trail):
                    ta = (k / n) * p.alpha
                    c.fill_style = with_alpha(color, ta)
                    c.begin_path()
                    c.arc(tx, ty, p.size * (0.6 + ta * 0.4), 0, 2 * math.pi)
                    c.fill()

                c.fill_style = with_alpha(color, p.alpha)
                c.shadow_blur = self.cfg.glow_blur
                c.shadow_color = color
                c.begin_path()
                c.arc(p.x, p.y, p.size, 0, 2 * math.pi)
                c.fill()
                c.shadow_blur = 0

    def step(self):
        """One frame: rockets, then particles, then the draw pass."""
        self.update_rockets()
        self.update_particles()
        self.draw()
        self.frame += 1
