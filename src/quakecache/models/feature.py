"""GeoJSON feature models for the USGS summary feed."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from quakecache.ingestion.normalize import parse_epoch_timestamp, safe_float, safe_str
from quakecache.models.quake import Location, Quake


class GeoFeature(BaseModel):
    """One feature of a USGS GeoJSON feature collection.

    ``properties`` and ``geometry`` are flattened before validation so
    fields map directly. Any field the feed leaves out (or sends as
    ``null``) is ``None``.

    Parameters
    ----------
    code : str or None
        Network-assigned event code; becomes :attr:`Quake.id`.
    magnitude : float or None
        ``properties.mag``.
    place : str or None
        ``properties.place``.
    time : datetime or None
        ``properties.time`` (epoch milliseconds) as UTC.
    longitude, latitude, depth : float or None
        ``geometry.coordinates`` in GeoJSON order.
    raw : dict
        The original feature dict.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    code: str | None = Field(default=None, validation_alias=AliasChoices("code", "id"))
    magnitude: float | None = Field(default=None, validation_alias=AliasChoices("mag", "magnitude"))
    place: str | None = Field(default=None, validation_alias=AliasChoices("place", "title"))
    time: datetime | None = None
    longitude: float | None = None
    latitude: float | None = None
    depth: float | None = None
    raw: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _flatten_feature(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        merged: dict[str, Any] = {}
        properties = values.get("properties")
        if isinstance(properties, dict):
            merged.update({k: v for k, v in properties.items() if v is not None})
        geometry = values.get("geometry")
        coordinates = geometry.get("coordinates") if isinstance(geometry, dict) else None
        if isinstance(coordinates, list | tuple):
            for key, value in zip(("longitude", "latitude", "depth"), coordinates, strict=False):
                merged[key] = value
        merged.setdefault("raw", values)
        return merged

    @field_validator("magnitude", "longitude", "latitude", "depth", mode="before")
    @classmethod
    def _coerce_floats(cls, value: Any) -> float | None:
        return safe_float(value)

    @field_validator("code", "place", mode="before")
    @classmethod
    def _coerce_strings(cls, value: Any) -> str | None:
        return safe_str(value)

    @field_validator("time", mode="before")
    @classmethod
    def _coerce_time(cls, value: Any) -> datetime | None:
        return parse_epoch_timestamp(value)

    @property
    def is_complete(self) -> bool:
        """Whether every field a :class:`Quake` needs is present and in range."""
        if self.code is None or self.magnitude is None or self.place is None or self.time is None:
            return False
        if self.longitude is None or self.latitude is None:
            return False
        return -180.0 <= self.longitude <= 180.0 and -90.0 <= self.latitude <= 90.0

    def to_quake(self) -> Quake | None:
        """Build a :class:`Quake`, or ``None`` when the feature is incomplete."""
        if not self.is_complete:
            return None
        # is_complete guarantees the optionals below are set.
        return Quake(
            id=self.code,  # type: ignore[arg-type]
            magnitude=self.magnitude,  # type: ignore[arg-type]
            time=self.time,  # type: ignore[arg-type]
            location=Location(
                name=self.place,  # type: ignore[arg-type]
                longitude=self.longitude,  # type: ignore[arg-type]
                latitude=self.latitude,  # type: ignore[arg-type]
            ),
        )


class GeoFeatureCollection(BaseModel):
    """A parsed GeoJSON ``FeatureCollection``.

    Features are validated one by one; entries that are not objects are
    dropped so one malformed feature cannot reject the whole feed.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str = "FeatureCollection"
    features: list[GeoFeature] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("features", mode="before")
    @classmethod
    def _drop_non_objects(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [item for item in value if isinstance(item, dict)]
        return value

    def quakes(self) -> tuple[list[Quake], int]:
        """Return the complete features as quakes plus the count skipped."""
        quakes: list[Quake] = []
        skipped = 0
        for feature in self.features:
            quake = feature.to_quake()
            if quake is None:
                skipped += 1
                continue
            quakes.append(quake)
        return quakes, skipped
