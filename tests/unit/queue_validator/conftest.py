"""
Pytest fixtures for queue validator unit tests.

This module provides a track factory and small synthetic thresholds so
windows can be reasoned about with unit durations.
"""

import itertools
from typing import Callable

import pytest

from src.queue_validator.config import ValidatorConfig
from src.queue_validator.models import Track


@pytest.fixture
def make_track() -> Callable[..., Track]:
    """Factory for tracks with unique queue IDs and distinct defaults."""
    counter = itertools.count()

    def _make_track(
        catalog_id=None,
        artist=None,
        album=None,
        duration_ms=1,
        title=None,
        queue_id=None,
    ) -> Track:
        n = next(counter)
        return Track(
            catalog_id=n if catalog_id is None else catalog_id,
            title=title or f"Name {n}",
            artist=artist or f"Artist {n}",
            album=album or f"Album {n}",
            queue_id=n if queue_id is None else queue_id,
            duration_ms=duration_ms,
        )

    return _make_track


@pytest.fixture
def unit_config() -> ValidatorConfig:
    """Default caps with a window of three unit-length tracks."""
    return ValidatorConfig(window_ms=3)