"""
Core data model for queue validation.

Entities:
    - Track: One slot in a playback queue, carrying the grouping keys the
      rotation rules compare and the validity flag the validator writes.
"""

from dataclasses import dataclass, replace
from typing import Optional

from .exceptions import InvalidTrackError


@dataclass
class Track:
    """A single entry in a playback queue.

    Attributes:
        catalog_id: ID of the recording in the library; equal IDs mean the same recording
        title: Display title
        artist: Artist name (exact-match grouping key)
        album: Album name (exact-match grouping key, paired with artist)
        queue_id: ID of this occurrence in the queue, unique within one queue
        duration_ms: Playback time in milliseconds
        position: Order key kept in sync with the server, unused by validation
        is_valid_position: Whether the track may stay where it is in the queue
        violation: Name of the rule that invalidated the track, if any

    The validator correlates window entries with the full queue by
    ``queue_id``. Two entries sharing a ``queue_id`` in one queue is a caller
    error and is not detected.
    """

    catalog_id: int
    title: str
    artist: str
    album: str
    queue_id: int
    duration_ms: int
    position: int = 0
    is_valid_position: bool = True
    violation: Optional[str] = None

    def __post_init__(self):
        """Validate track data on initialization."""
        if self.duration_ms < 0:
            raise InvalidTrackError(
                f"duration_ms must be >= 0 (got {self.duration_ms} for queue entry {self.queue_id})"
            )

    def mark_invalid(self, rule: Optional[str] = None) -> None:
        """Flag the track as out of position.

        The first rule to invalidate a track is kept; later calls only
        re-assert the flag.

        Args:
            rule: Name of the rule reporting the violation
        """
        if self.is_valid_position:
            self.violation = rule
        self.is_valid_position = False

    def reset(self) -> None:
        """Clear the validity state before a fresh validation."""
        self.is_valid_position = True
        self.violation = None

    def copy(self) -> 'Track':
        """Return an independent track with the same content and state."""
        return replace(self)

    def same_artist(self, other: 'Track') -> bool:
        return self.artist == other.artist

    def same_album(self, other: 'Track') -> bool:
        # Albums are only comparable within one artist
        return self.album == other.album and self.artist == other.artist
