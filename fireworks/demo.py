#!/usr/bin/env python3
# fireworks/demo.py
"""
Run with  python -m fireworks.demo
GIF/PNG go to fireworks_output/  (viz.py handles the folder).

    python -m fireworks.demo --seconds 10 --fps 30          # fireworks.gif
    python -m fireworks.demo --snapshot                     # fireworks.png
    python -m fireworks.demo --show                         # live window
    python -m fireworks.demo --config settings.txt --seed 7
"""
import argparse, sys
from pathlib import Path

import numpy as np

from fireworks.config import FireworksConfig, load_config


def get_args(argv=None):
    p = argparse.ArgumentParser(
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        epilog="example: python -m fireworks.demo --seconds 10 --seed 3")
    p.add_argument("--width",   type=int,   default=960, help="surface width (px)")
    p.add_argument("--height",  type=int,   default=540, help="surface height (px)")
    p.add_argument("--fps",     type=int,   default=30,  help="frames per second")
    p.add_argument("--seconds", type=float, default=8.0, help="length of the show")
    p.add_argument("--seed",    type=int,   default=None, help="RNG seed")
    p.add_argument("--config",  default=None, help="key = value settings file")
    p.add_argument("--out",     default=None, help="output file name")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--show", action="store_true", help="open a live window")
    mode.add_argument("--snapshot", action="store_true",
                      help="single PNG after --seconds instead of a GIF")
    args = p.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        p.error("--width/--height must be > 0")
    if args.fps <= 0:
        p.error("--fps must be > 0")
    if int(args.seconds * args.fps) < 1:
        p.error("--seconds too short for one frame at --fps")
    return args


def main(argv=None):
    args = get_args(argv)
    if args.config is not None:
        if not Path(args.config).exists():
            sys.exit(f"config {args.config} not found")
        cfg = load_config(args.config)
    else:
        cfg = FireworksConfig()

    # matplotlib is only needed once we actually draw
    from fireworks import viz

    sim, _fig = viz.make_sim(args.width, args.height, config=cfg,
                             rng=np.random.default_rng(args.seed), fps=args.fps)
    if args.show:
        viz.show(sim, fps=args.fps)
        return
    if args.snapshot:
        out = viz.snapshot(sim, seconds=args.seconds, fps=args.fps,
                           fname=args.out or "fireworks.png")
    else:
        out = viz.animate(sim, seconds=args.seconds, fps=args.fps,
                          fname=args.out or "fireworks.gif")
    print(f"[fireworks] saved {out}")


if __name__ == "__main__":
    main()
