"""Load queues from JSON files.

A queue file holds a JSON array of track objects:

    [{"catalog_id": 1, "queue_id": 0, "title": "Name 1",
      "artist": "Artist 1", "album": "Album 1", "duration_ms": 3600000}]

title and position are optional.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from .exceptions import InvalidTrackError, ParseError
from .models import Track

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("catalog_id", "queue_id", "artist", "album", "duration_ms")


def parse_track(data: Dict[str, Any]) -> Track:
    """Build a Track from one decoded JSON object.

    Raises:
        ParseError: If fields are missing or have the wrong type
    """
    if not isinstance(data, dict):
        raise ParseError(f"Track entry must be an object, got {type(data).__name__}")

    missing = [name for name in REQUIRED_FIELDS if name not in data]
    if missing:
        raise ParseError(f"Track entry missing required fields: {', '.join(missing)}")

    try:
        return Track(
            catalog_id=int(data["catalog_id"]),
            title=str(data.get("title", "")),
            artist=str(data["artist"]),
            album=str(data["album"]),
            queue_id=int(data["queue_id"]),
            duration_ms=int(data["duration_ms"]),
            position=int(data.get("position", 0)),
        )
    except InvalidTrackError as e:
        raise ParseError(str(e)) from e
    except (TypeError, ValueError) as e:
        raise ParseError(f"Invalid track entry {data!r}: {e}") from e


def load_tracks(path: Union[str, Path]) -> List[Track]:
    """Load a queue from a JSON file.

    Args:
        path: Path to a JSON array of track objects

    Returns:
        Tracks in file order

    Raises:
        ParseError: If the file cannot be read or decoded
    """
    entries = _read_json(path)
    if not isinstance(entries, list):
        raise ParseError(f"{path}: expected a JSON array of tracks")

    tracks = []
    for index, entry in enumerate(entries):
        try:
            tracks.append(parse_track(entry))
        except ParseError as e:
            raise ParseError(f"{path}: entry {index}: {e}") from e

    logger.debug(f"Loaded {len(tracks)} tracks from {path}")
    return tracks


def load_track(path: Union[str, Path]) -> Track:
    """Load a single track from a JSON object or one-element array."""
    data = _read_json(path)
    if isinstance(data, list):
        if len(data) != 1:
            raise ParseError(f"{path}: expected exactly one track, found {len(data)}")
        data = data[0]

    try:
        return parse_track(data)
    except ParseError as e:
        raise ParseError(f"{path}: {e}") from e


def _read_json(path: Union[str, Path]) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise ParseError(f"Cannot read queue file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ParseError(f"{path}: invalid JSON: {e}") from e
