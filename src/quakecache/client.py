"""Async client for the USGS earthquake feed."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from quakecache._transport import HttpTransport, Transport
from quakecache.config import QuakeConfig
from quakecache.exceptions import QuakeError
from quakecache.ingestion.feed import RefreshResult, apply_feature_collection, fetch_feature_collection
from quakecache.models.feature import GeoFeatureCollection
from quakecache.state.store import QuakeStore

_logger = logging.getLogger(__name__)


class QuakeFeedClient:
    """Fetches the configured feed and applies it to a store.

    Usage::

        async with QuakeFeedClient(config) as client:
            result = await client.refresh(store)
    """

    def __init__(
        self,
        config: QuakeConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> QuakeFeedClient:
        if self._transport is None:
            if self._http_session is None:
                timeout = aiohttp.ClientTimeout(total=self._config.request_timeout)
                self._http_session = aiohttp.ClientSession(timeout=timeout)
            self._transport = HttpTransport(self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise QuakeError("Client not initialized. Use 'async with QuakeFeedClient(...) as client:'")
        return self._transport

    async def fetch(self) -> GeoFeatureCollection:
        """Fetch and parse the feed without touching any store."""
        return await fetch_feature_collection(self._config.feed_url, self._require_transport())

    async def refresh(self, store: QuakeStore) -> RefreshResult:
        """Fetch the feed, then upsert its records into *store*."""
        collection = await self.fetch()
        result = apply_feature_collection(store, collection)
        _logger.info(
            "Refreshed from %s: %d new, %d updated, %d skipped",
            self._config.feed_url,
            result.created,
            result.updated,
            result.skipped,
        )
        return result
