"""Synthetic earthquake records for demos and load testing."""

from __future__ import annotations

import dataclasses
import logging
import random
import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from quakecache._constants import DEFAULT_ADD_COUNT, RANDOM_LOCATION_NAME
from quakecache.exceptions import QuakeStoreError
from quakecache.models.quake import Location, Quake
from quakecache.state.store import QuakeStore

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclasses.dataclass(frozen=True)
class AddResult:
    """Outcome of :func:`add_quakes`."""

    inserted: int
    dropped: int

    @property
    def requested(self) -> int:
        return self.inserted + self.dropped


def generate_quake(
    *,
    rng: random.Random | None = None,
    clock: Callable[[], datetime] = _utcnow,
) -> Quake:
    """Return a quake with random magnitude and coordinates, stamped now."""
    rand = rng or random
    return Quake(
        id=str(uuid.uuid4()).upper(),
        magnitude=rand.uniform(0.0, 10.0),
        time=clock(),
        location=Location(
            name=RANDOM_LOCATION_NAME,
            longitude=rand.uniform(-180.0, 180.0),
            latitude=rand.uniform(-90.0, 90.0),
        ),
    )


def add_quakes(
    store: QuakeStore,
    count: int = DEFAULT_ADD_COUNT,
    *,
    rng: random.Random | None = None,
    clock: Callable[[], datetime] = _utcnow,
    suppress_errors: bool = True,
) -> AddResult:
    """Generate *count* quakes and insert them one at a time.

    With ``suppress_errors`` a rejected insert is logged and skipped.
    Otherwise the first :class:`QuakeStoreError` propagates and the
    records inserted before it stay in the store.
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    inserted = 0
    dropped = 0
    for _ in range(count):
        quake = generate_quake(rng=rng, clock=clock)
        try:
            store.insert(quake)
        except QuakeStoreError as exc:
            if not suppress_errors:
                raise
            dropped += 1
            _logger.warning("Dropped generated quake id=%s: %s", quake.id, exc)
            continue
        inserted += 1
    _logger.debug("Generated %d quakes (%d dropped)", inserted, dropped)
    return AddResult(inserted=inserted, dropped=dropped)
