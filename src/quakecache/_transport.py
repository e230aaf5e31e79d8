"""HTTP transport for fetching the GeoJSON feed."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp

from quakecache._constants import USER_AGENT
from quakecache.exceptions import QuakeTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the ingestion layer.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, url: str) -> Any: ...


class HttpTransport:
    """Fetches JSON documents over HTTP with an aiohttp session."""

    def __init__(self, http_session: aiohttp.ClientSession) -> None:
        self._http = http_session

    async def get_json(self, url: str) -> Any:
        headers = {
            "accept": "application/geo+json, application/json",
            "user-agent": USER_AGENT,
        }

        _logger.debug("GET %s", url)

        try:
            async with self._http.get(url, headers=headers) as resp:
                text = await resp.text()
                if resp.status != 200:
                    raise QuakeTransportError(
                        f"HTTP {resp.status} from {url}: {text[:200]}",
                        status_code=resp.status,
                        url=url,
                    )
        except QuakeTransportError:
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise QuakeTransportError(f"Request to {url} failed: {exc}", url=url) from exc

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise QuakeTransportError(f"Invalid JSON from {url}: {text[:200]}", url=url) from exc
