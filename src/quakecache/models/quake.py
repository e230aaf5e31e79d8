"""Earthquake record model."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quakecache._constants import magnitude_category


class Location(BaseModel):
    """Where an earthquake happened."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    """Human-readable place, e.g. ``"10 km SSW of Idyllwild, CA"``."""
    longitude: float = Field(ge=-180.0, le=180.0)
    latitude: float = Field(ge=-90.0, le=90.0)


class Quake(BaseModel):
    """A single earthquake observation.

    Records are immutable. ``id`` comes from the feed's ``code`` field
    (or a generated UUID) and is unique within a store.

    Parameters
    ----------
    id : str
        Stable unique identifier.
    magnitude : float
        Magnitude as reported. Must be finite; the range is not validated.
    time : datetime
        Time of the event, normalised to UTC.
    location : Location
        Place name and coordinates.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(min_length=1)
    magnitude: float = Field(allow_inf_nan=False)
    time: datetime
    location: Location

    @field_validator("id")
    @classmethod
    def _strip_id(cls, value: str) -> str:
        quake_id = value.strip()
        if not quake_id:
            raise ValueError("id must be non-empty")
        return quake_id

    @field_validator("time")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)

    @property
    def magnitude_string(self) -> str:
        """Magnitude with one fractional digit (``"7.5"``)."""
        return f"{self.magnitude:.1f}"

    @property
    def full_date(self) -> str:
        """Long form date, e.g. ``"Monday, January 1, 2024 at 09:30:00 UTC"``."""
        t = self.time
        return f"{t:%A, %B} {t.day}, {t:%Y} at {t:%H:%M:%S %Z}"

    @property
    def magnitude_category(self) -> str:
        return magnitude_category(self.magnitude)
