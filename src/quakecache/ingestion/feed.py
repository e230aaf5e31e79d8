"""Feed ingestion: GeoJSON feature collection -> record store."""

from __future__ import annotations

import dataclasses
import logging
from typing import Any

from pydantic import ValidationError

from quakecache._transport import Transport
from quakecache.exceptions import QuakeFeedError
from quakecache.models.feature import GeoFeatureCollection
from quakecache.state.store import QuakeStore

_logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True)
class RefreshResult:
    """Counts from applying one feed to the store."""

    created: int = 0
    updated: int = 0
    skipped: int = 0

    @property
    def received(self) -> int:
        return self.created + self.updated + self.skipped


def parse_feature_collection(payload: Any) -> GeoFeatureCollection:
    """Validate *payload* as a GeoJSON ``FeatureCollection``."""
    if not isinstance(payload, dict) or payload.get("type") != "FeatureCollection":
        raise QuakeFeedError("payload is not a GeoJSON FeatureCollection")
    try:
        return GeoFeatureCollection.model_validate(payload)
    except ValidationError as exc:
        raise QuakeFeedError(f"invalid feature collection: {exc}") from exc


async def fetch_feature_collection(url: str, transport: Transport) -> GeoFeatureCollection:
    """Fetch and parse the feed at *url*."""
    payload = await transport.get_json(url)
    return parse_feature_collection(payload)


def apply_feature_collection(store: QuakeStore, collection: GeoFeatureCollection) -> RefreshResult:
    """Upsert every complete feature of *collection* into *store*."""
    quakes, skipped = collection.quakes()
    created = 0
    for quake in quakes:
        if store.upsert(quake):
            created += 1
    result = RefreshResult(created=created, updated=len(quakes) - created, skipped=skipped)
    if skipped:
        _logger.debug("Skipped %d incomplete features", skipped)
    _logger.debug("Applied feed: created=%d updated=%d", result.created, result.updated)
    return result
