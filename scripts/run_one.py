#!/usr/bin/env python3
"""Runner for the Langton's ant simulator.

Builds a `SceneConfig` from the command line, creates the `Scene`, and
advances it for a number of steps. Every `--skip-render-frame` steps it logs
the ant positions and, with `--out`, saves a PNG frame.

Usage::

    python scripts/run_one.py --behavior 0 --ants 1 --steps 11000
"""
import argparse
import logging
import os
import sys

# Make `src` importable when running from repo root (scripts/ is sibling of src/)
script_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(script_dir, ".."))
src_dir = os.path.join(project_root, "src")
if src_dir not in sys.path:
    sys.path.insert(0, src_dir)

from langton.config import SceneConfig
from langton.state import Scene

logger = logging.getLogger("run_one")


def parse_args(argv=None):
    defaults = SceneConfig()
    parser = argparse.ArgumentParser(description="Run a Langton's ant scene.")
    parser.add_argument("--width", type=int, default=defaults.width)
    parser.add_argument("--height", type=int, default=defaults.height)
    parser.add_argument("--behavior", type=int, default=defaults.behavior_id, help="preset id (0..3)")
    parser.add_argument("--ants", type=int, default=defaults.agent_count, help="number of ants (1..3)")
    parser.add_argument("--steps", type=int, default=1000)
    parser.add_argument("--skip-render-frame", type=int, default=defaults.skip_render_frame)
    parser.add_argument("--scale", type=int, default=defaults.canvas_scale)
    parser.add_argument("--out", default=None, help="directory for PNG frames")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = SceneConfig(
        width=args.width,
        height=args.height,
        behavior_id=args.behavior,
        agent_count=args.ants,
        skip_render_frame=args.skip_render_frame,
        canvas_scale=args.scale,
    )
    try:
        scene = Scene.from_config(cfg)
    except ValueError as exc:
        logger.error("invalid configuration: %s", exc)
        return 1

    save_image = None
    if args.out:
        # matplotlib is only needed when frames are written
        from langton.render import save_image
        os.makedirs(args.out, exist_ok=True)

    print("Field:", scene.field.shape, scene.field.dtype)
    print("Behavior:", scene.behavior.rule_string)
    print("Ants:", scene.ant_positions)

    for _ in range(args.steps):
        scene.step()
        if scene.step_count % cfg.skip_render_frame == 0:
            logger.info("step=%d ants=%s", scene.step_count, scene.ant_positions)
            if save_image is not None:
                path = os.path.join(args.out, f"frame_{scene.step_count:07d}.png")
                save_image(scene, path, scale=cfg.canvas_scale)

    counts = scene.condition_counts()
    print(f"t={scene.step_count}: conditions={counts.tolist()}")
    print("  positions:", scene.ant_positions, "dirs:", [d.name for d in scene.ant_directions])
    return 0


if __name__ == "__main__":
    sys.exit(main())
