from __future__ import annotations

import argparse

from endless_runner.sound.sound_utils import Sounds


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="endless-runner", description="Endless side-scrolling runner")
    parser.add_argument(
        "--smoke",
        type=int,
        metavar="FRAMES",
        default=None,
        help="Run this many frames and exit (for quick verification).",
    )
    parser.add_argument("--mute", action="store_true", help="Disable all sound.")
    parser.add_argument("--verbose", action="store_true", help="Print setup timings.")
    args = parser.parse_args(argv)

    if args.mute:
        Sounds.set_muted(True)

    # Imported late so --help works without a display
    from endless_runner.core.engine import Engine

    Engine(log=args.verbose).run(max_frames=args.smoke)


if __name__ == "__main__":
    main()
