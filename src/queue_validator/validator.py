"""
Queue Validator - rolling-window rotation checks for a playback queue

Marks every track in a queue as position-valid or position-invalid against
the rotation rules in rules.py, applied over a rolling window of broadcast
time starting at each queue position.

Invalidating a track frees window time, which can pull a later track into
the window of an earlier start position. Whenever a scan step invalidates
tracks, the scan steps back one position per invalidated track and
re-checks before moving on.

The validator mutates the Track objects it is given and keeps no state
between calls. Callers sharing a queue across threads must serialize
access themselves or validate a copy (as can_append does).
"""

import logging
from typing import List, Optional

from .config import ValidatorConfig
from .models import Track
from .rules import find_violations
from .window import window_from

logger = logging.getLogger(__name__)


class QueueValidator:
    """Validates track order in a queue against the rotation rules."""

    def __init__(self, config: Optional[ValidatorConfig] = None):
        """
        Initialize the validator.

        Args:
            config: Rotation thresholds (defaults when omitted)
        """
        self.config = config or ValidatorConfig()

    def validate(self, tracks: List[Track]) -> List[Track]:
        """Validate every position in the queue.

        Args:
            tracks: Full queue, in play order. queue_id must be unique.

        Returns:
            The same list, with is_valid_position set on every track
        """
        for track in tracks:
            track.reset()

        i = 0
        while i < len(tracks):
            window = window_from(tracks[i:], self.config.window_ms)
            validated = find_violations(window, self.config)

            # Step back to re-check earlier windows after an invalidation
            stepped_back = False

            for validated_track in validated:
                if validated_track.is_valid_position:
                    continue

                for track in tracks:
                    if track.queue_id != validated_track.queue_id:
                        continue

                    track.mark_invalid(validated_track.violation)
                    i = max(0, i - 1)
                    stepped_back = True

                    logger.debug(
                        f"Queue entry {track.queue_id} invalid ({track.violation}), "
                        f"rescanning from index {i}"
                    )

            if not stepped_back:
                i += 1

        invalid_count = sum(1 for track in tracks if not track.is_valid_position)
        logger.debug(
            f"Validated {len(tracks)} tracks: {len(tracks) - invalid_count} valid, "
            f"{invalid_count} invalid"
        )

        return tracks

    def can_append(self, track: Track, tracks: List[Track]) -> bool:
        """Check whether a track can be appended to a queue.

        Validates a copy of the queue with the track appended; neither the
        queue nor the candidate track is modified.

        Args:
            track: Candidate track
            tracks: Current queue

        Returns:
            True if the appended track would be in a valid position
        """
        new_list = [existing.copy() for existing in tracks]
        new_list.append(track.copy())

        new_list = self.validate(new_list)

        if new_list:
            return new_list[-1].is_valid_position

        return True
