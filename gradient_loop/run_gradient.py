"""CLI runner: render a looping two-color gradient GIF.

Example:
    python -m gradient_loop.run_gradient "#FF8000" "10, 20, 30" 320 64 4
writes gradient320x64_4.gif to the current directory.
"""
import argparse
import logging
import sys

from gradient_loop import __version__
from gradient_loop.colors import parse_color
from gradient_loop.config import AnimationParams
from gradient_loop.errors import GradientLoopError
from gradient_loop.pipeline import generate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gradient-loop",
        description="Render a horizontal two-color gradient that scrolls back and forth as a looping GIF",
    )
    p.add_argument("start_color", help="Start color: #RRGGBB, RRGGBB or \"R,G,B\"")
    p.add_argument("end_color", help="End color, same formats as start_color")
    p.add_argument("width", type=int, help="Output width in pixels")
    p.add_argument("height", type=int, help="Output height in pixels")
    p.add_argument("duration", type=int, help="Animation length in seconds")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging()

    # Validate everything before the output file exists
    try:
        params = AnimationParams.from_args(args)
        color1 = parse_color(args.start_color)
        color2 = parse_color(args.end_color)
    except GradientLoopError as e:
        logger.error(f"Invalid input: {e}")
        return 1

    try:
        out = generate(params, color1, color2)
    except GradientLoopError as e:
        logger.error(f"Failed to render gradient: {e}")
        return 1

    logger.info(f"Saved {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
