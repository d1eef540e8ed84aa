"""
Study 02: Apple Bursts

Run: python -m circle_walk.studies.02_apple_bursts.observe

Drop apples into a running universe and watch the frame pacing.
"""

import argparse
import logging

from circle_walk.environments.universe import Config, Speed, Universe
from circle_walk.services.commands import Command, CommandType
from circle_walk.services.driver import FrameDriver


def run_study(
    frames: int = 30,
    n_circles: int = 3,
    n_apples: int = 2,
    apple_steps: int = 8000,
    speed: Speed = Speed.FAST,
    seed: int = 11
):
    """
    Observe the scheduler.

    Watch:
    - Ticks per frame while apples are alive (capped at step_cap)
    - The drop back to the circle budget once the last apple expires
    """
    print("=" * 50)
    print("Study 02: Apple Bursts")
    print("=" * 50)
    print("\nPrinciple: apples finish promptly, circles share the budget")
    print("-" * 50)

    config = Config(speed=speed, apple_steps=apple_steps, seed=seed)
    universe = Universe(config)
    driver = FrameDriver(universe)

    for _ in range(n_circles):
        driver.submit(Command(CommandType.ADD_CIRCLE))
    for _ in range(n_apples):
        driver.submit(Command(CommandType.ADD_APPLE))

    print(f"\nspeed={speed.name} ({speed.steps}), step_cap={config.step_cap}, "
          f"apple_steps={apple_steps}")
    print(f"\nRunning {frames} frames...")

    expired_at = None
    for frame in range(frames):
        report = driver.frame()
        print(f"  Frame {frame:3d}: steps={report.steps:5d} "
              f"apples={report.apples} "
              f"remaining={universe.remaining_apple_steps()}")
        if report.apples == 0 and expired_at is None and n_apples:
            expired_at = frame

    print("\n" + "=" * 50)
    print("Observations")
    print("=" * 50)

    if expired_at is not None:
        print(f"\nLast apple expired during frame {expired_at}")
    else:
        print("\nApples still alive at the end of the run")
    print(f"Total ticks: {universe.time}")
    print(f"Steady-state steps per frame: {universe.steps()}")

    print("\n" + "=" * 50)
    print("Study complete. What did you observe?")
    print("=" * 50)


def main():
    parser = argparse.ArgumentParser(description="Apple Burst Study")
    parser.add_argument("--frames", type=int, default=30, help="Frames to run")
    parser.add_argument("--circles", type=int, default=3)
    parser.add_argument("--apples", type=int, default=2)
    parser.add_argument("--apple-steps", type=int, default=8000)
    parser.add_argument("--speed", default="FAST", choices=["NORMAL", "FAST"])
    parser.add_argument("--seed", type=int, default=11)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    run_study(
        frames=args.frames,
        n_circles=args.circles,
        n_apples=args.apples,
        apple_steps=args.apple_steps,
        speed=Speed[args.speed],
        seed=args.seed,
    )


if __name__ == "__main__":
    main()
