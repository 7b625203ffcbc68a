"""Configuration management for queue validation.

This module holds the rotation thresholds used by the validator and loads
overrides from environment variables (NO .env files).
"""
import os
from dataclasses import dataclass
from typing import List

from .exceptions import ConfigurationError

# Rolling window of broadcast time the rules look at (3 hours)
THREE_HOURS_MS = 60 * 60 * 3 * 1000

# More than this many tracks by one artist in a window is a violation
MAX_ARTIST_OCCURRENCES = 4

# More than this many tracks from one album (same artist) in a window is a violation
MAX_ALBUM_OCCURRENCES = 3

# A track following this many consecutive tracks by its artist is a violation
MAX_CONSECUTIVE_ARTIST = 3

# A track following this many consecutive tracks from its album is a violation
MAX_CONSECUTIVE_ALBUM = 2


@dataclass
class ValidatorConfig:
    """Rotation thresholds for the queue validator."""

    window_ms: int = THREE_HOURS_MS
    max_artist_occurrences: int = MAX_ARTIST_OCCURRENCES
    max_album_occurrences: int = MAX_ALBUM_OCCURRENCES
    max_consecutive_artist: int = MAX_CONSECUTIVE_ARTIST
    max_consecutive_album: int = MAX_CONSECUTIVE_ALBUM

    @classmethod
    def from_environment(cls) -> 'ValidatorConfig':
        """Load configuration from environment variables (NO .env files).

        Unset variables fall back to the module defaults.

        Returns:
            ValidatorConfig: Loaded configuration object

        Raises:
            ConfigurationError: If a variable is set to a non-integer value
        """
        return cls(
            window_ms=_int_from_env('QUEUE_WINDOW_MS', THREE_HOURS_MS),
            max_artist_occurrences=_int_from_env(
                'QUEUE_MAX_ARTIST_OCCURRENCES', MAX_ARTIST_OCCURRENCES
            ),
            max_album_occurrences=_int_from_env(
                'QUEUE_MAX_ALBUM_OCCURRENCES', MAX_ALBUM_OCCURRENCES
            ),
            max_consecutive_artist=_int_from_env(
                'QUEUE_MAX_CONSECUTIVE_ARTIST', MAX_CONSECUTIVE_ARTIST
            ),
            max_consecutive_album=_int_from_env(
                'QUEUE_MAX_CONSECUTIVE_ALBUM', MAX_CONSECUTIVE_ALBUM
            ),
        )

    def validate(self) -> None:
        """Validate threshold values.

        Raises:
            ConfigurationError: If any threshold is out of range
        """
        errors: List[str] = []
        if self.window_ms <= 0:
            errors.append(f"window_ms must be > 0 (got {self.window_ms})")

        caps = {
            'max_artist_occurrences': self.max_artist_occurrences,
            'max_album_occurrences': self.max_album_occurrences,
            'max_consecutive_artist': self.max_consecutive_artist,
            'max_consecutive_album': self.max_consecutive_album,
        }
        for name, value in caps.items():
            if value < 1:
                errors.append(f"{name} must be >= 1 (got {value})")

        if errors:
            raise ConfigurationError(
                f"Invalid validator configuration: {'; '.join(errors)}"
            )


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(
            f"Environment variable {name} must be an integer (got '{raw}')"
        )
