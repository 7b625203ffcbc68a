"""
Queue Validator Package.

Checks a playback queue against rotation rules over a rolling window of
broadcast time, marking every track as position-valid or position-invalid.

Core:
    - Track: Queue entry with its validity flag
    - ValidatorConfig: Window length and rotation caps
    - QueueValidator: Full-queue validation and append checks

Building blocks:
    - window_from: Rolling window extraction
    - find_violations: Ordered rule pipeline over one window
"""

from .config import (
    THREE_HOURS_MS,
    MAX_ARTIST_OCCURRENCES,
    MAX_ALBUM_OCCURRENCES,
    MAX_CONSECUTIVE_ARTIST,
    MAX_CONSECUTIVE_ALBUM,
    ValidatorConfig,
)
from .exceptions import (
    QueueValidatorError,
    InvalidTrackError,
    ConfigurationError,
    ParseError,
)
from .loader import load_tracks, load_track, parse_track
from .models import Track
from .report import describe_track, describe_track_list, log_track_list
from .rules import (
    RULES,
    find_violations,
    find_duplicate_tracks,
    find_artist_occurrence,
    find_album_occurrence,
    find_artist_consecutive_occurrences,
    find_album_consecutive_occurrences,
)
from .validator import QueueValidator
from .window import window_from

__version__ = "1.0.0"

__all__ = [
    # Constants
    "THREE_HOURS_MS",
    "MAX_ARTIST_OCCURRENCES",
    "MAX_ALBUM_OCCURRENCES",
    "MAX_CONSECUTIVE_ARTIST",
    "MAX_CONSECUTIVE_ALBUM",

    # Core
    "Track",
    "ValidatorConfig",
    "QueueValidator",

    # Building blocks
    "window_from",
    "RULES",
    "find_violations",
    "find_duplicate_tracks",
    "find_artist_occurrence",
    "find_album_occurrence",
    "find_artist_consecutive_occurrences",
    "find_album_consecutive_occurrences",

    # Loading and reporting
    "load_tracks",
    "load_track",
    "parse_track",
    "describe_track",
    "describe_track_list",
    "log_track_list",

    # Exceptions
    "QueueValidatorError",
    "InvalidTrackError",
    "ConfigurationError",
    "ParseError",
]
