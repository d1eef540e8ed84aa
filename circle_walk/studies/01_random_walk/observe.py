"""
Study 01: Random Walk Observation

Run: python -m circle_walk.studies.01_random_walk.observe

Watch a few circles wander.
No hypotheses yet. Just observation.
"""

import argparse
import logging
import numpy as np

from circle_walk.config import load_config
from circle_walk.core.circle import CircleConfig
from circle_walk.core.color import ColorMode
from circle_walk.environments.universe import Config, Universe
from circle_walk.observations.svg import SvgRecorder
from circle_walk.observations.visualize import animate
from circle_walk.services.driver import FrameDriver


def run_study(
    frames: int = 500,
    n_circles: int = 4,
    color_mode: ColorMode = ColorMode.HSL,
    animate_frames: bool = False,
    svg_path: str = None,
    config_path: str = None,
    seed: int = 7
):
    """
    Observe a few circles.

    Watch:
    - Distance travelled versus max_position_delta
    - Color drift per channel
    - Circles pressed against the canvas edge
    """
    print("=" * 50)
    print("Study 01: Random Walk Observation")
    print("=" * 50)

    if config_path:
        config, circle_config = load_config(config_path)
    else:
        config = Config(
            radius=8.0,
            color_mode=color_mode,
            normal_width=400.0,
            normal_height=300.0,
            seed=seed,
        )
        circle_config = CircleConfig(width=400.0, height=300.0)

    universe = Universe(config, circle_config)
    for _ in range(n_circles):
        universe.add_circle()

    start_positions = universe.get_positions().copy()
    start_colors = universe.get_colors().copy()

    print(f"\nUniverse created: {universe}")
    print(f"Canvas: {circle_config.width:.0f}x{circle_config.height:.0f}, "
          f"max_position_delta={circle_config.max_position_delta}")
    print(f"\nRunning {frames} frames...")

    recorder = SvgRecorder(circle_config.width, circle_config.height) if svg_path else None
    driver = FrameDriver(universe, renderer=recorder)

    if animate_frames:
        animate(driver, frames=frames)
    else:
        for frame in range(frames):
            report = driver.frame()

            if frame % 100 == 0:
                print(f"  Frame {frame}: steps={report.steps}, time={universe.time}")

    # Analysis
    print("\n" + "=" * 50)
    print("Observations")
    print("=" * 50)

    positions = universe.get_positions()
    if len(positions) == 0:
        print("\nNo circles to observe.")
        return

    distances = np.linalg.norm(positions - start_positions, axis=1)
    print(f"\nNet displacement: mean={distances.mean():.2f}, max={distances.max():.2f}")

    drift = np.abs(universe.get_colors() - start_colors)
    print(f"Mean color drift (r, g, b, a): {np.round(drift.mean(axis=0), 3)}")

    radius = config.radius
    on_edge = np.sum(
        (positions[:, 0] < radius) | (positions[:, 0] > circle_config.width - radius) |
        (positions[:, 1] < radius) | (positions[:, 1] > circle_config.height - radius)
    )
    print(f"Circles overlapping the edge: {on_edge} / {len(positions)}")

    if recorder is not None:
        recorder.save(svg_path)
        print(f"\nSaved {recorder.count} disks to {svg_path}")

    print("\n" + "=" * 50)
    print("Study complete. What did you observe?")
    print("=" * 50)


def main():
    parser = argparse.ArgumentParser(description="Random Walk Observation Study")
    parser.add_argument("--frames", type=int, default=500, help="Frames to run")
    parser.add_argument("--circles", type=int, default=4, help="Number of circles")
    parser.add_argument("--color-mode", default="HSL", choices=["RGB", "HSL"])
    parser.add_argument("--animate", action="store_true", help="Show matplotlib window")
    parser.add_argument("--svg", default=None, help="Write the accumulated canvas to SVG")
    parser.add_argument("--config", default=None, help="YAML configuration file")
    parser.add_argument("--seed", type=int, default=7)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    run_study(
        frames=args.frames,
        n_circles=args.circles,
        color_mode=ColorMode[args.color_mode],
        animate_frames=args.animate,
        svg_path=args.svg,
        config_path=args.config,
        seed=args.seed,
    )


if __name__ == "__main__":
    main()
