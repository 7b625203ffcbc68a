"""
Rotation rules applied to a queue window.

Each rule walks the window in order and marks offending tracks invalid. The
rules run as one ordered pipeline and every rule sees the flags left by the
rules before it:

1. Duplicate track: the same recording twice in a window
2. Artist occurrence: more than 4 tracks by one artist
3. Album occurrence: more than 3 tracks from one album
4. Consecutive artist: a 4th track in a row by one artist
5. Consecutive album: a 3rd track in a row from one album

The occurrence rules count every earlier track in the window, including
ones already invalidated. The consecutive rules walk backward past invalid
tracks without counting them or ending the run.
"""

import logging
from typing import Callable, List, Optional, Set, Tuple

from .config import ValidatorConfig
from .models import Track

logger = logging.getLogger(__name__)

DUPLICATE_TRACK = "duplicate_track"
ARTIST_OCCURRENCE = "artist_occurrence"
ALBUM_OCCURRENCE = "album_occurrence"
ARTIST_CONSECUTIVE = "artist_consecutive"
ALBUM_CONSECUTIVE = "album_consecutive"

Matcher = Callable[[Track, Track], bool]


def find_duplicate_tracks(tracks: List[Track]) -> List[Track]:
    """Invalidate every repeat of a recording after its first occurrence."""
    seen: Set[int] = set()

    for track in tracks:
        if track.catalog_id not in seen:
            seen.add(track.catalog_id)
            continue

        _invalidate(track, DUPLICATE_TRACK)

    return tracks


def find_artist_occurrence(
    tracks: List[Track], max_occurrences: int = 4
) -> List[Track]:
    """Invalidate tracks by an artist already heard max_occurrences times in the window."""
    return _cap_occurrences(tracks, max_occurrences, Track.same_artist, ARTIST_OCCURRENCE)


def find_album_occurrence(
    tracks: List[Track], max_occurrences: int = 3
) -> List[Track]:
    """Invalidate tracks from an album already heard max_occurrences times in the window."""
    return _cap_occurrences(tracks, max_occurrences, Track.same_album, ALBUM_OCCURRENCE)


def find_artist_consecutive_occurrences(
    tracks: List[Track], max_consecutive: int = 3
) -> List[Track]:
    """Invalidate a track that follows max_consecutive tracks by the same artist."""
    return _cap_consecutive(tracks, max_consecutive, Track.same_artist, ARTIST_CONSECUTIVE)


def find_album_consecutive_occurrences(
    tracks: List[Track], max_consecutive: int = 2
) -> List[Track]:
    """Invalidate a track that follows max_consecutive tracks from the same album."""
    return _cap_consecutive(tracks, max_consecutive, Track.same_album, ALBUM_CONSECUTIVE)


# Order matters: later rules read the flags written by earlier ones.
RULES: Tuple[Tuple[str, Callable[[List[Track], ValidatorConfig], List[Track]]], ...] = (
    (DUPLICATE_TRACK, lambda tracks, config: find_duplicate_tracks(tracks)),
    (ARTIST_OCCURRENCE, lambda tracks, config: find_artist_occurrence(
        tracks, config.max_artist_occurrences)),
    (ALBUM_OCCURRENCE, lambda tracks, config: find_album_occurrence(
        tracks, config.max_album_occurrences)),
    (ARTIST_CONSECUTIVE, lambda tracks, config: find_artist_consecutive_occurrences(
        tracks, config.max_consecutive_artist)),
    (ALBUM_CONSECUTIVE, lambda tracks, config: find_album_consecutive_occurrences(
        tracks, config.max_consecutive_album)),
)


def find_violations(
    tracks: List[Track], config: Optional[ValidatorConfig] = None
) -> List[Track]:
    """Run every rotation rule over a window, in order.

    Args:
        tracks: Window of tracks (see window_from)
        config: Rotation thresholds (defaults when omitted)

    Returns:
        The same window, with violating tracks marked invalid
    """
    if not tracks:
        return tracks

    config = config or ValidatorConfig()

    result = tracks
    for _name, rule in RULES:
        result = rule(result, config)

    return result


def _invalidate(track: Track, rule: str) -> None:
    logger.debug(f"Rule '{rule}' invalidated queue entry {track.queue_id} ({track.title})")
    track.mark_invalid(rule)


def _cap_occurrences(
    tracks: List[Track], max_occurrences: int, matches: Matcher, rule: str
) -> List[Track]:
    for i, track in enumerate(tracks):
        if not track.is_valid_position:
            continue

        # Count from window start to the current track, valid or not
        occurrence = sum(1 for previous in tracks[:i + 1] if matches(previous, track))

        if occurrence > max_occurrences:
            _invalidate(track, rule)

    return tracks


def _cap_consecutive(
    tracks: List[Track], max_consecutive: int, matches: Matcher, rule: str
) -> List[Track]:
    # The first max_consecutive tracks cannot follow a full run
    for i in range(max_consecutive, len(tracks)):
        track = tracks[i]

        if not track.is_valid_position:
            continue

        consecutive = 0
        for previous in reversed(tracks[:i]):
            if not previous.is_valid_position:
                continue

            if not matches(previous, track):
                break

            consecutive += 1
            if consecutive >= max_consecutive:
                _invalidate(track, rule)
                break

    return tracks
