"""
Tests for the rotation rules.

Tests each rule on its own and the ordered pipeline:
- Duplicate recordings
- Artist and album occurrence caps
- Consecutive artist and album runs
- Rule interaction through shared validity flags
"""
import pytest

from src.queue_validator.config import ValidatorConfig
from src.queue_validator.rules import (
    RULES,
    find_violations,
    find_duplicate_tracks,
    find_artist_occurrence,
    find_album_occurrence,
    find_artist_consecutive_occurrences,
    find_album_consecutive_occurrences,
)


def _flags(tracks):
    return [track.is_valid_position for track in tracks]


class TestFindDuplicateTracks:
    """Tests for find_duplicate_tracks()."""

    def test_repeat_recording_invalid(self, make_track):
        tracks = [make_track(catalog_id=1), make_track(catalog_id=1), make_track(catalog_id=2)]

        result = find_duplicate_tracks(tracks)

        assert result is tracks
        assert _flags(tracks) == [True, False, True]
        assert tracks[1].violation == "duplicate_track"

    def test_every_repeat_invalid(self, make_track):
        tracks = [make_track(catalog_id=7) for _ in range(4)]

        find_duplicate_tracks(tracks)

        assert _flags(tracks) == [True, False, False, False]

    def test_duplicate_with_different_metadata(self, make_track):
        tracks = [
            make_track(catalog_id=3, artist="A", album="X"),
            make_track(catalog_id=3, artist="B", album="Y"),
        ]

        find_duplicate_tracks(tracks)

        assert _flags(tracks) == [True, False]


class TestFindArtistOccurrence:
    """Tests for find_artist_occurrence()."""

    def _interleaved(self, make_track, count):
        tracks = []
        for _ in range(count):
            tracks.append(make_track(artist="A"))
            tracks.append(make_track())
        return tracks

    def test_fifth_track_by_artist_invalid(self, make_track):
        tracks = self._interleaved(make_track, 5)

        find_artist_occurrence(tracks)

        by_artist = [t for t in tracks if t.artist == "A"]
        assert _flags(by_artist) == [True, True, True, True, False]
        assert by_artist[4].violation == "artist_occurrence"

    def test_four_tracks_allowed(self, make_track):
        tracks = self._interleaved(make_track, 4)

        find_artist_occurrence(tracks)

        assert all(_flags(tracks))

    def test_invalid_tracks_still_counted(self, make_track):
        tracks = self._interleaved(make_track, 5)
        tracks[2].mark_invalid("duplicate_track")

        find_artist_occurrence(tracks)

        assert tracks[8].is_valid_position is False

    def test_custom_cap(self, make_track):
        tracks = self._interleaved(make_track, 2)

        find_artist_occurrence(tracks, max_occurrences=1)

        assert tracks[2].is_valid_position is False


class TestFindAlbumOccurrence:
    """Tests for find_album_occurrence()."""

    def test_fourth_track_from_album_invalid(self, make_track):
        tracks = []
        for _ in range(4):
            tracks.append(make_track(artist="A", album="M"))
            tracks.append(make_track())

        find_album_occurrence(tracks)

        from_album = [t for t in tracks if t.album == "M"]
        assert _flags(from_album) == [True, True, True, False]

    def test_same_album_name_other_artist_not_counted(self, make_track):
        tracks = [make_track(artist=f"A{i}", album="Greatest Hits") for i in range(5)]

        find_album_occurrence(tracks)

        assert all(_flags(tracks))


class TestFindArtistConsecutiveOccurrences:
    """Tests for find_artist_consecutive_occurrences()."""

    def test_fourth_in_a_row_invalid(self, make_track):
        tracks = [make_track(artist="A") for _ in range(4)]

        find_artist_consecutive_occurrences(tracks)

        assert _flags(tracks) == [True, True, True, False]
        assert tracks[3].violation == "artist_consecutive"

    def test_run_broken_by_other_artist(self, make_track):
        tracks = [
            make_track(artist="A"),
            make_track(artist="A"),
            make_track(artist="B"),
            make_track(artist="A"),
            make_track(artist="A"),
        ]

        find_artist_consecutive_occurrences(tracks)

        assert all(_flags(tracks))

    def test_invalid_tracks_are_transparent(self, make_track):
        tracks = [make_track(artist="A") for _ in range(4)]
        tracks[2].mark_invalid("duplicate_track")

        find_artist_consecutive_occurrences(tracks)

        # Only two valid predecessors in the run
        assert tracks[3].is_valid_position is True

    def test_invalid_other_artist_does_not_break_run(self, make_track):
        tracks = [
            make_track(artist="A"),
            make_track(artist="A"),
            make_track(artist="B"),
            make_track(artist="A"),
            make_track(artist="A"),
        ]
        tracks[2].mark_invalid("duplicate_track")

        find_artist_consecutive_occurrences(tracks)

        assert tracks[4].is_valid_position is False

    def test_short_window_untouched(self, make_track):
        tracks = [make_track(artist="A") for _ in range(3)]

        find_artist_consecutive_occurrences(tracks)

        assert all(_flags(tracks))


class TestFindAlbumConsecutiveOccurrences:
    """Tests for find_album_consecutive_occurrences()."""

    def test_third_in_a_row_invalid(self, make_track):
        tracks = [make_track(artist="A1", album="M1") for _ in range(3)]

        find_album_consecutive_occurrences(tracks)

        assert _flags(tracks) == [True, True, False]
        assert tracks[2].violation == "album_consecutive"

    def test_same_artist_other_album_breaks_run(self, make_track):
        tracks = [
            make_track(artist="A1", album="M1"),
            make_track(artist="A1", album="M2"),
            make_track(artist="A1", album="M1"),
        ]

        find_album_consecutive_occurrences(tracks)

        assert all(_flags(tracks))

    def test_empty_and_short_windows(self, make_track):
        assert find_album_consecutive_occurrences([]) == []

        tracks = [make_track(artist="A1", album="M1") for _ in range(2)]
        find_album_consecutive_occurrences(tracks)
        assert all(_flags(tracks))


class TestFindViolations:
    """Tests for the ordered rule pipeline."""

    def test_rule_order(self):
        assert [name for name, _rule in RULES] == [
            "duplicate_track",
            "artist_occurrence",
            "album_occurrence",
            "artist_consecutive",
            "album_consecutive",
        ]

    def test_empty_window(self):
        window = []

        assert find_violations(window) is window

    def test_returns_same_window(self, make_track):
        tracks = [make_track() for _ in range(3)]

        assert find_violations(tracks) is tracks

    def test_duplicate_rule_runs_before_album_run(self, make_track):
        tracks = [
            make_track(catalog_id=1, artist="A", album="M"),
            make_track(catalog_id=1, artist="A", album="M"),
            make_track(catalog_id=2, artist="A", album="M"),
        ]

        find_violations(tracks)

        # The repeat is invalid first, so the third track follows a run of one
        assert _flags(tracks) == [True, False, True]
        assert tracks[1].violation == "duplicate_track"

    def test_first_rule_wins_violation_name(self, make_track):
        tracks = [make_track(catalog_id=1, artist="A", album="M") for _ in range(3)]

        find_violations(tracks)

        assert [t.violation for t in tracks] == [None, "duplicate_track", "duplicate_track"]

    @pytest.mark.parametrize(
        "config, expected",
        [
            (ValidatorConfig(), [True, True, True, False]),
            # Index 3 still follows two valid tracks by A once index 2 is skipped
            (ValidatorConfig(max_consecutive_artist=2), [True, True, False, False]),
        ],
    )
    def test_uses_config_caps(self, make_track, config, expected):
        tracks = [make_track(artist="A") for _ in range(4)]

        find_violations(tracks, config)

        assert _flags(tracks) == expected
