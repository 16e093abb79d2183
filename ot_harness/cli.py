"""
cli.py - Command line entry point

    ot-test <tracker> <inputvideo> <outputvideo> <logfile> [size_percent]
"""

import argparse
import logging
import sys

from .config import build_session_config, load_config, override_config_with_args
from .errors import HarnessError
from .pipeline import run_session
from .report import LOG_FORMATS
from .trackers import TrackerKind

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="ot-test",
        description="Track a clicked object through a video with an OpenCV tracker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
trackers: {', '.join(TrackerKind.names())}

examples:
  # click on the object in the window that opens
  ot-test KCF input.mp4 tracked.mp4 track.csv

  # 10% ROI, pixel-space log, no window
  ot-test MIL input.mp4 tracked.mp4 track.csv 10 --point 320,240 --no-display --log-format pixel
        """
    )

    parser.add_argument("tracker", help="tracking algorithm name")
    parser.add_argument("input", help="input video file")
    parser.add_argument("output", help="annotated output video file")
    parser.add_argument("log", help="CSV log file (overwritten)")
    # kept as text so the harness can reject anything but a plain decimal
    parser.add_argument("size_percent", nargs="?", default=None,
                        help="ROI side as a percentage of the smaller frame dimension (default: 5)")

    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("--log-format", choices=LOG_FORMATS, help="CSV row shape (default: normalized)")
    parser.add_argument("--point", help="initial point as X,Y instead of clicking")
    parser.add_argument("--no-display", action="store_true", help="do not open any window")
    parser.add_argument("--codec", help="FourCC of the output video (default: mp4v)")
    parser.add_argument("--verbose", action="store_true", help="log every ROI update")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = load_config(args.config)
        config = override_config_with_args(config, args)
        session_config = build_session_config(config)
        summary = run_session(session_config, args.input, args.output, args.log)
    except HarnessError as e:
        logger.error(str(e))
        return 1

    if summary.lost_at is not None:
        logger.info(f"Tracking was lost at frame {summary.lost_at}.")
    if summary.cancelled:
        logger.info("Stopped before the end of the video.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
