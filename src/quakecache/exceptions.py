"""Custom exception hierarchy for quakecache."""

from __future__ import annotations


class QuakeError(Exception):
    """Base exception for all quakecache errors."""


class QuakeConfigError(QuakeError):
    """Invalid or missing configuration."""


class QuakeStoreError(QuakeError):
    """The record store rejected an operation.

    Raised for duplicate identifiers on insert and for unreadable or
    malformed store files.
    """

    def __init__(self, message: str, *, quake_id: str | None = None) -> None:
        self.quake_id = quake_id
        super().__init__(message)


class QuakeTransportError(QuakeError):
    """HTTP-level failure (network, non-200, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class QuakeFeedError(QuakeError):
    """The feed payload is not a GeoJSON feature collection."""
