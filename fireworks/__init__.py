# fireworks/__init__.py
from collections import deque

GRAVITY  = 0.05          # px / frame²
FRICTION = 0.98          # per-frame velocity damping for sparks

ROCKET_TRAIL   = 8
PARTICLE_TRAIL = 15

class Rocket:
    """
    Attributes set once at launch
      x, y          [px]        surface position (y grows downward)
      vx, vy        [px/frame]  vy starts strongly negative (upward)
      target_y      [px]        altitude where the shell bursts
      color         '#RRGGBB'
      heart         bool        burst is forced to the heart shape

    Mutated every tick by FireworksSim: position, velocity, trail.
    """
    def __init__(self, x, y, vx, vy, target_y, color, heart=False,
                 trail_len=ROCKET_TRAIL):
        self.x, self.y   = float(x), float(y)
        self.vx, self.vy = float(vx), float(vy)
        self.target_y = float(target_y)
        self.color    = color
        self.heart    = heart
        self.exploded = False
        self.trail    = deque(maxlen=trail_len)     # (x, y), oldest first

    def __repr__(self):
        return (f"Rocket(x={self.x:.1f}, y={self.y:.1f}, vy={self.vy:.2f}, "
                f"target_y={self.target_y:.1f}, color={self.color!r})")

class Particle:
    """One spark of an explosion. Dies once alpha reaches 0."""
    def __init__(self, x, y, vx, vy, color, decay, size,
                 trail_len=PARTICLE_TRAIL):
        self.x, self.y   = float(x), float(y)
        self.vx, self.vy = float(vx), float(vy)
        self.color = color
        self.alpha = 1.0
        self.decay = float(decay)
        self.size  = float(size)
        self.trail = deque(maxlen=trail_len)        # (x, y, alpha), oldest first

    @property
    def alive(self):
        return self.alpha > 0

    def __repr__(self):
        return (f"Particle(x={self.x:.1f}, y={self.y:.1f}, "
                f"alpha={self.alpha:.3f}, color={self.color!r})")

from fireworks.config import FireworksConfig, load_config      # noqa: E402
from fireworks.sim import FireworksSim                        # noqa: E402

__all__ = ["Rocket", "Particle", "FireworksSim", "FireworksConfig",
           "load_config", "GRAVITY", "FRICTION"]
