"""Human-readable dump of queue validity state."""

import logging
from typing import Optional, Sequence

from .models import Track

VALID_MARK = "✓"
INVALID_MARK = "x"


def describe_track(track: Track) -> str:
    """Format one track as a single status line."""
    mark = VALID_MARK if track.is_valid_position else INVALID_MARK
    line = f"{mark} ID: {track.queue_id} ({track.title} / {track.album} by {track.artist})"
    if not track.is_valid_position and track.violation:
        line += f" [{track.violation}]"
    return line


def describe_track_list(tracks: Sequence[Track]) -> str:
    """Format a queue as a multi-line status listing.

    Args:
        tracks: Queue to describe

    Returns:
        "Track list:" header followed by one line per track
    """
    lines = ["Track list:"]
    lines.extend(describe_track(track) for track in tracks)
    return "\n".join(lines)


def log_track_list(tracks: Sequence[Track], logger: Optional[logging.Logger] = None) -> None:
    """Log the queue status listing at INFO level."""
    (logger or logging.getLogger(__name__)).info(describe_track_list(tracks))
