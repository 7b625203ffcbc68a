"""
Queue Validator CLI - Command Line Interface

Validates a queue (from a JSON file, or the built-in sample queue), prints
its validity state and optionally checks whether a candidate track can be
appended.
"""

import argparse
import logging
import sys
from typing import List, Optional

from src.logger import setup_logging

from . import __version__
from .config import ValidatorConfig
from .exceptions import ConfigurationError, ParseError
from .loader import load_track, load_tracks
from .models import Track
from .report import describe_track_list
from .samples import sample_queue
from .validator import QueueValidator

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """
    Create argument parser for CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="python -m src.queue_validator",
        description="Validate playback queue order against rotation rules",
        epilog="Example: python -m src.queue_validator --input queue.json --append next.json",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--input",
        type=str,
        metavar="FILE",
        help="JSON queue file (default: built-in sample queue)",
    )

    parser.add_argument(
        "--append",
        type=str,
        metavar="FILE",
        help="JSON file with a candidate track to test for appending",
    )

    # Threshold overrides (default: environment, then built-in values)
    parser.add_argument("--window-ms", type=int, metavar="MS", help="Window length in milliseconds")
    parser.add_argument("--max-artist", type=int, metavar="N", help="Max tracks per artist in a window")
    parser.add_argument("--max-album", type=int, metavar="N", help="Max tracks per album in a window")
    parser.add_argument(
        "--max-consecutive-artist", type=int, metavar="N",
        help="Max consecutive tracks by one artist",
    )
    parser.add_argument(
        "--max-consecutive-album", type=int, metavar="N",
        help="Max consecutive tracks from one album",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def build_config(args: argparse.Namespace) -> ValidatorConfig:
    """
    Build validator configuration from environment and CLI overrides.

    Args:
        args: Parsed arguments

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If thresholds are invalid
    """
    config = ValidatorConfig.from_environment()

    overrides = {
        "window_ms": args.window_ms,
        "max_artist_occurrences": args.max_artist,
        "max_album_occurrences": args.max_album,
        "max_consecutive_artist": args.max_consecutive_artist,
        "max_consecutive_album": args.max_consecutive_album,
    }
    for name, value in overrides.items():
        if value is not None:
            setattr(config, name, value)

    config.validate()
    return config


def display_summary(tracks: List[Track]) -> None:
    """
    Display queue validity listing and counts.

    Args:
        tracks: Validated queue
    """
    invalid_count = sum(1 for track in tracks if not track.is_valid_position)

    print(describe_track_list(tracks))
    print()
    print("=" * 70)
    print("VALIDATION SUMMARY")
    print("=" * 70)
    print(f"Total tracks:        {len(tracks)}")
    print(f"Valid:               {len(tracks) - invalid_count}")
    print(f"Invalid:             {invalid_count}")
    print("=" * 70)


def display_error(error: Exception) -> None:
    """
    Display error message with appropriate context.

    Args:
        error: Exception that occurred
    """
    print()
    print("=" * 70)
    print("ERROR")
    print("=" * 70)

    if isinstance(error, ParseError):
        print(f"Queue file could not be loaded: {error}")
        print()
        print("Queue files must be a JSON array of track objects with")
        print("catalog_id, queue_id, artist, album and duration_ms fields.")

    elif isinstance(error, ConfigurationError):
        print(f"Invalid configuration: {error}")
        print()
        print("Check the QUEUE_* environment variables and threshold options.")

    else:
        print(f"Unexpected error: {error}")
        print()
        print("Please check the logs for more details.")

    print("=" * 70)
    print()


def run(args: argparse.Namespace) -> int:
    """
    Validate the queue described by the arguments.

    Args:
        args: Parsed CLI arguments

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        config = build_config(args)

        if args.input:
            tracks = load_tracks(args.input)
        else:
            logger.info("No --input given, validating the sample queue")
            tracks = sample_queue()

        validator = QueueValidator(config)
        validator.validate(tracks)
        display_summary(tracks)

        if args.append:
            candidate = load_track(args.append)
            allowed = validator.can_append(candidate, tracks)
            verdict = "can" if allowed else "cannot"
            print(f"Track {candidate.queue_id} ({candidate.title}) {verdict} be appended")

        return 0

    except Exception as e:
        display_error(e)
        if args.verbose:
            logger.exception("Detailed error traceback:")
        return 1


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging("DEBUG" if args.verbose else None)

    try:
        return run(args)
    except KeyboardInterrupt:
        print()
        print("Validation cancelled by user")
        return 1


if __name__ == "__main__":
    sys.exit(main())
