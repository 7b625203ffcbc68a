"""
Example queues for trying out the validator.

sample_queue() mixes a repeated recording, an artist run and an album run
over ten one-hour tracks. long_track_queue() sits on the 3 hour window
boundary.
"""

from typing import List, Tuple

from .models import Track

ONE_HOUR_MS = 60 * 60 * 1000


def sample_queue() -> List[Track]:
    """Ten one-hour tracks with duplicates and repeated artists/albums."""
    return [
        Track(1, "Name 1", "Artist 1", "Album 1", queue_id=0, duration_ms=ONE_HOUR_MS),
        Track(1, "Name 1", "Artist 1", "Album 1", queue_id=1, duration_ms=ONE_HOUR_MS),
        Track(1, "Name 1", "Artist 1", "Album 1", queue_id=2, duration_ms=ONE_HOUR_MS),
        Track(2, "Name 2", "Artist 2", "Album 1", queue_id=3, duration_ms=ONE_HOUR_MS),
        Track(1, "Name 1", "Artist 1", "Album 1", queue_id=4, duration_ms=ONE_HOUR_MS),
        Track(1, "Name 1", "Artist 1", "Album 1", queue_id=5, duration_ms=ONE_HOUR_MS),
        Track(4, "Name 4", "Artist 4", "Album 4", queue_id=6, duration_ms=ONE_HOUR_MS),
        Track(5, "Name 5", "Artist 4", "Album 4", queue_id=7, duration_ms=ONE_HOUR_MS),
        Track(6, "Name 6", "Artist 4", "Album 4", queue_id=8, duration_ms=ONE_HOUR_MS),
        Track(7, "Name 7", "Artist 4", "Album 4", queue_id=9, duration_ms=ONE_HOUR_MS),
    ]


def sample_candidates() -> Tuple[Track, Track]:
    """Return (valid, invalid) candidates for appending to sample_queue()."""
    valid = Track(10, "Name 10", "Artist 5", "Album 1", queue_id=10, duration_ms=300)
    invalid = Track(7, "Name 7", "Artist 4", "Album 4", queue_id=10, duration_ms=300)
    return valid, invalid


def long_track_queue() -> List[Track]:
    """Six distinct tracks whose durations straddle the 3 hour window."""
    durations = [3_000_000, 3_000_000, 3_000_000, 1_799_999, 1_000_000, 1_000_000]
    return [
        Track(i, f"Name {i}", f"Artist {i}", f"Album {i}", queue_id=i, duration_ms=duration)
        for i, duration in enumerate(durations)
    ]
