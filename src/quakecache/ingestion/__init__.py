"""Ingestion layer.

This package contains adapters that turn the USGS GeoJSON feed into
:class:`quakecache.models.Quake` records and apply them to the store.
"""

__all__: list[str] = []
