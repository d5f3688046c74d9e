# fireworks/config.py
"""
Tunables for the fireworks engine and a loader for ``key = value`` files.

Example settings file::

    # slower, fewer shells
    launch_interval_ms = 1200
    max_rockets        = 8
    heart_chance       = 0.5
    colors             = #FFD700, #00E5FF, #76FF03
"""
from __future__ import annotations
import re
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, List

from fireworks import GRAVITY, FRICTION, ROCKET_TRAIL, PARTICLE_TRAIL

COLORS = [
    '#FFD700', '#FFF700', '#FFAA00',    # golds
    '#FF1744', '#FF0055', '#FF6E40',    # reds
    '#00E5FF', '#00BCD4', '#2196F3',    # blues
    '#76FF03', '#00E676', '#69F0AE',    # greens
    '#E040FB', '#D500F9', '#EA80FC',    # purples
    '#FF4081', '#F50057', '#FF80AB',    # pinks
]
HEART_COLORS = ['#FF1493', '#FF69B4', '#FF1744', '#FF0055', '#FF4081', '#F50057']

_HEX6    = re.compile(r"^#[0-9a-fA-F]{6}$")
# a '#' opens a comment unless it starts a hex color
_COMMENT = re.compile(r"#(?![0-9a-fA-F]{6}\b)")


@dataclass
class FireworksConfig:
    gravity: float            = GRAVITY
    friction: float           = FRICTION
    max_rockets: int          = 20
    launch_interval_ms: float = 800.0
    launch_stagger_ms: float  = 150.0
    burst_min: int            = 2
    burst_max: int            = 3
    heart_chance: float       = 0.33
    rocket_trail: int         = ROCKET_TRAIL
    particle_trail: int       = PARTICLE_TRAIL
    glow_blur: float          = 40.0
    colors: List[str]         = field(default_factory=lambda: list(COLORS))
    heart_colors: List[str]   = field(default_factory=lambda: list(HEART_COLORS))

    def __post_init__(self):
        self.validate()

    def validate(self):
        if self.launch_interval_ms <= 0:
            raise ValueError(f"launch_interval_ms must be > 0, got {self.launch_interval_ms}")
        if self.launch_stagger_ms < 0:
            raise ValueError(f"launch_stagger_ms must be >= 0, got {self.launch_stagger_ms}")
        if self.max_rockets < 0:
            raise ValueError(f"max_rockets must be >= 0, got {self.max_rockets}")
        if not 1 <= self.burst_min <= self.burst_max:
            raise ValueError(f"need 1 <= burst_min <= burst_max, got "
                             f"{self.burst_min}..{self.burst_max}")
        if not 0.0 <= self.heart_chance <= 1.0:
            raise ValueError(f"heart_chance must be in [0, 1], got {self.heart_chance}")
        if self.rocket_trail < 1 or self.particle_trail < 1:
            raise ValueError("trail lengths must be >= 1")
        for name in ("colors", "heart_colors"):
            palette = getattr(self, name)
            if not palette:
                raise ValueError(f"{name} must not be empty")
            for c in palette:
                if not _HEX6.match(c):
                    raise ValueError(f"bad color '{c}' in {name} (want #RRGGBB)")


# ──────────────────────────────────────────────────────────────────────────────
#   File IO
# ──────────────────────────────────────────────────────────────────────────────

def read_simple_kv(path: Path) -> Dict[str, str]:
    d = {}
    with Path(path).open() as f:
        for ln in f:
            ln = _COMMENT.split(ln, 1)[0].strip()
            if "=" in ln:
                k, v = [x.strip() for x in ln.split("=", 1)]
                d[k.lower()] = v
    return d

def _parse_value(key: str, raw: str, kind):
    if key in ("colors", "heart_colors"):
        return [c.strip() for c in raw.split(",") if c.strip()]
    try:
        if kind in (int, "int"):
            return int(raw)
        return float(raw)
    except ValueError:
        raise ValueError(f"setting '{key}': cannot parse '{raw}'") from None

def load_config(path) -> FireworksConfig:
    """Defaults overlaid with the settings in *path*."""
    kv = read_simple_kv(Path(path))
    known = {f.name: f.type for f in fields(FireworksConfig)}
    kwargs = {}
    for k, raw in kv.items():
        if k not in known:
            raise ValueError(f"unknown setting '{k}' in {path}")
        kwargs[k] = _parse_value(k, raw, known[k])
    cfg = FireworksConfig(**kwargs)
    print(f"[fireworks] loaded config: {path}")
    return cfg
