"""Application configuration for quakecache."""

from __future__ import annotations

import dataclasses
import os
from datetime import UTC, timezone
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from quakecache._constants import DEFAULT_ADD_COUNT, FEED_URL
from quakecache.exceptions import QuakeConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_number(env_key: str, value: str, kind: type[int] | type[float]) -> int | float:
    try:
        return kind(value)
    except ValueError as exc:
        raise QuakeConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class QuakeConfig:
    """Application configuration.

    Parameters
    ----------
    feed_url : str
        GeoJSON feature collection fetched by refresh. Defaults to the
        USGS "all earthquakes, past day" summary feed.
    store_path : str or None
        JSON file backing the record store. ``None`` keeps the store
        in memory only.
    add_count : int
        Number of random records the add command generates.
    suppress_insert_errors : bool
        Log and skip records the store rejects instead of raising.
    request_timeout : float
        Total HTTP timeout in seconds for a refresh.
    time_zone : str
        IANA time zone used to resolve the calendar day of a date search.
    platform : str or None
        Host platform used to pick the toolbar provider. ``None`` means
        the running interpreter's platform.
    """

    feed_url: str = FEED_URL
    store_path: str | None = None
    add_count: int = DEFAULT_ADD_COUNT
    suppress_insert_errors: bool = True
    request_timeout: float = 30.0
    time_zone: str = "UTC"
    platform: str | None = None

    def __post_init__(self) -> None:
        if self.add_count < 0:
            raise QuakeConfigError(f"add_count must be >= 0, got {self.add_count}")
        if self.request_timeout <= 0:
            raise QuakeConfigError(f"request_timeout must be > 0, got {self.request_timeout}")
        if self.time_zone == "UTC":
            return
        try:
            ZoneInfo(self.time_zone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise QuakeConfigError(f"unknown time zone {self.time_zone!r}") from exc

    @property
    def tzinfo(self) -> ZoneInfo | timezone:
        if self.time_zone == "UTC":
            return UTC
        return ZoneInfo(self.time_zone)

    @classmethod
    def from_env(cls, **overrides: Any) -> QuakeConfig:
        """Create configuration from environment variables.

        Reads the optional ``QUAKE_*`` variables. Explicit keyword
        arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        QuakeConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "QUAKE_FEED_URL": "feed_url",
            "QUAKE_STORE_PATH": "store_path",
            "QUAKE_TIME_ZONE": "time_zone",
            "QUAKE_PLATFORM": "platform",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        count_env = env.get("QUAKE_ADD_COUNT")
        if count_env is not None and "add_count" not in overrides:
            config_kwargs["add_count"] = _env_number("QUAKE_ADD_COUNT", count_env, int)

        timeout_env = env.get("QUAKE_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_number("QUAKE_REQUEST_TIMEOUT", timeout_env, float)

        if "suppress_insert_errors" not in overrides:
            config_kwargs["suppress_insert_errors"] = _env_bool(
                env.get("QUAKE_SUPPRESS_INSERT_ERRORS"),
                True,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
