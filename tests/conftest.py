from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

import pytest

from quakecache.models.quake import Location, Quake


def _make_quake(
    quake_id: str,
    magnitude: float = 1.0,
    *,
    time: datetime | None = None,
    name: str = "10 km N of Somewhere, CA",
    longitude: float = -120.0,
    latitude: float = 37.0,
) -> Quake:
    return Quake(
        id=quake_id,
        magnitude=magnitude,
        time=time or datetime(2024, 1, 1, 12, 0, tzinfo=UTC),
        location=Location(name=name, longitude=longitude, latitude=latitude),
    )


@pytest.fixture
def make_quake() -> Callable[..., Quake]:
    return _make_quake
