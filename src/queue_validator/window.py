"""Rolling time window over a queue."""

from typing import List, Sequence

from .config import THREE_HOURS_MS
from .models import Track


def window_from(tracks: Sequence[Track], threshold_ms: int = THREE_HOURS_MS) -> List[Track]:
    """Collect the valid tracks that start within the window.

    Invalid tracks are skipped and take up no window time. A valid track is
    taken while the duration collected so far is below the threshold, so
    the track that crosses the threshold is included.

    Args:
        tracks: Queue slice, starting at the window start
        threshold_ms: Window length in milliseconds

    Returns:
        The same Track objects that make up the window, in queue order
    """
    window: List[Track] = []
    window_length = 0

    for track in tracks:
        if not track.is_valid_position:
            continue

        if window_length >= threshold_ms:
            break

        window.append(track)
        window_length += track.duration_ms

    return window
