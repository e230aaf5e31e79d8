"""Data models for earthquake records and feed payloads."""

from quakecache.models.feature import GeoFeature, GeoFeatureCollection
from quakecache.models.query import SORT_CYCLE, QueryOptions, SortKey, SortOrder, next_sort
from quakecache.models.quake import Location, Quake

__all__ = [
    "SORT_CYCLE",
    "GeoFeature",
    "GeoFeatureCollection",
    "Location",
    "Quake",
    "QueryOptions",
    "SortKey",
    "SortOrder",
    "next_sort",
]
