"""Tests for the Pydantic record, query and feed models."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from quakecache.models import GeoFeature, GeoFeatureCollection, Location, Quake, QueryOptions, SortKey, SortOrder
from quakecache.models.query import SORT_CYCLE, next_sort

# ------------------------------------------------------------------
# Quake
# ------------------------------------------------------------------


class TestQuake:
    def test_naive_time_is_treated_as_utc(self) -> None:
        quake = Quake(
            id="ci123",
            magnitude=2.0,
            time=datetime(2024, 1, 1, 9, 30),
            location=Location(name="Here", longitude=0.0, latitude=0.0),
        )
        assert quake.time.tzinfo is UTC

    def test_aware_time_is_converted_to_utc(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        quake = Quake(
            id="ci123",
            magnitude=2.0,
            time=datetime(2024, 1, 1, 11, 30, tzinfo=plus_two),
            location=Location(name="Here", longitude=0.0, latitude=0.0),
        )
        assert quake.time == datetime(2024, 1, 1, 9, 30, tzinfo=UTC)
        assert quake.time.utcoffset() == timedelta(0)

    def test_blank_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Quake(
                id="   ",
                magnitude=2.0,
                time=datetime(2024, 1, 1, tzinfo=UTC),
                location=Location(name="Here", longitude=0.0, latitude=0.0),
            )

    @pytest.mark.parametrize("magnitude", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_magnitude_rejected(self, magnitude: float) -> None:
        with pytest.raises(ValidationError):
            Quake(
                id="ci123",
                magnitude=magnitude,
                time=datetime(2024, 1, 1, tzinfo=UTC),
                location=Location(name="Here", longitude=0.0, latitude=0.0),
            )

    @pytest.mark.parametrize(("longitude", "latitude"), [(180.5, 0.0), (-181.0, 0.0), (0.0, 90.1), (0.0, -91.0)])
    def test_coordinates_out_of_range_rejected(self, longitude: float, latitude: float) -> None:
        with pytest.raises(ValidationError):
            Location(name="Nowhere", longitude=longitude, latitude=latitude)

    def test_records_are_immutable(self, make_quake) -> None:
        quake = make_quake("a")
        with pytest.raises(ValidationError):
            quake.magnitude = 3.0  # type: ignore[misc]

    def test_display_properties(self, make_quake) -> None:
        quake = make_quake("a", 7.46, time=datetime(2024, 1, 1, 9, 30, tzinfo=UTC))
        assert quake.magnitude_string == "7.5"
        assert quake.full_date == "Monday, January 1, 2024 at 09:30:00 UTC"
        assert quake.magnitude_category == "major"

    @pytest.mark.parametrize(
        ("magnitude", "category"),
        [(0.0, "minor"), (2.99, "minor"), (3.0, "light"), (5.5, "moderate"), (6.0, "strong"), (8.0, "great")],
    )
    def test_magnitude_category(self, make_quake, magnitude: float, category: str) -> None:
        assert make_quake("a", magnitude).magnitude_category == category


# ------------------------------------------------------------------
# QueryOptions
# ------------------------------------------------------------------


class TestQueryOptions:
    def test_defaults(self) -> None:
        options = QueryOptions()
        assert options.search_text == ""
        assert options.search_date is None
        assert options.sort_key == SortKey.TIME
        assert options.sort_order == SortOrder.DESCENDING

    def test_search_text_keeps_whitespace(self) -> None:
        assert QueryOptions(search_text=" of ").search_text == " of "
        assert QueryOptions(search_text="   ").search_text == "   "
        assert QueryOptions(search_text=None).search_text == ""  # type: ignore[arg-type]

    def test_string_values_coerce_to_enums(self) -> None:
        options = QueryOptions.model_validate(
            {"sort_key": "magnitude", "sort_order": "asc", "search_date": "2024-03-01"}
        )
        assert options.sort_key == SortKey.MAGNITUDE
        assert options.sort_order == SortOrder.ASCENDING
        assert options.search_date == date(2024, 3, 1)

    def test_next_sort_walks_the_full_cycle(self) -> None:
        options = QueryOptions(search_text="ca")
        seen = []
        for _ in range(len(SORT_CYCLE)):
            options = next_sort(options)
            seen.append((options.sort_key, options.sort_order))
        assert seen == [*SORT_CYCLE[1:], SORT_CYCLE[0]]
        assert options.search_text == "ca"


# ------------------------------------------------------------------
# GeoJSON features
# ------------------------------------------------------------------

SAMPLE_FEATURE: dict = {
    "type": "Feature",
    "properties": {
        "mag": 1.7,
        "place": "8 km NW of The Geysers, CA",
        "time": 1700000000000,
        "updated": 1700000100000,
        "code": "73950001",
        "net": "nc",
        "title": "M 1.7 - 8 km NW of The Geysers, CA",
    },
    "geometry": {"type": "Point", "coordinates": [-122.8, 38.8, 2.1]},
    "id": "nc73950001",
}


class TestGeoFeature:
    def test_flattens_properties_and_geometry(self) -> None:
        feature = GeoFeature.model_validate(SAMPLE_FEATURE)
        assert feature.code == "73950001"
        assert feature.magnitude == pytest.approx(1.7)
        assert feature.place == "8 km NW of The Geysers, CA"
        assert feature.time == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)
        assert feature.longitude == pytest.approx(-122.8)
        assert feature.latitude == pytest.approx(38.8)
        assert feature.depth == pytest.approx(2.1)
        assert feature.raw == SAMPLE_FEATURE

    def test_to_quake(self) -> None:
        quake = GeoFeature.model_validate(SAMPLE_FEATURE).to_quake()
        assert quake is not None
        assert quake.id == "73950001"
        assert quake.location.name == "8 km NW of The Geysers, CA"

    def test_string_numbers_are_coerced(self) -> None:
        payload = {
            "properties": {"mag": "4.2", "place": "Offshore", "time": "1700000000", "code": "x1"},
            "geometry": {"coordinates": ["10.5", "-3.25"]},
        }
        feature = GeoFeature.model_validate(payload)
        assert feature.magnitude == pytest.approx(4.2)
        assert feature.time == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)
        assert feature.depth is None
        assert feature.to_quake() is not None

    @pytest.mark.parametrize("missing", ["mag", "place", "time", "code"])
    def test_incomplete_feature_is_not_a_quake(self, missing: str) -> None:
        properties = {k: v for k, v in SAMPLE_FEATURE["properties"].items() if k != missing}
        if missing == "place":
            properties.pop("title")
        payload = {**SAMPLE_FEATURE, "properties": properties}
        feature = GeoFeature.model_validate(payload)
        assert not feature.is_complete
        assert feature.to_quake() is None

    def test_null_magnitude_is_not_a_quake(self) -> None:
        payload = {**SAMPLE_FEATURE, "properties": {**SAMPLE_FEATURE["properties"], "mag": None}}
        assert GeoFeature.model_validate(payload).to_quake() is None

    def test_missing_geometry_is_not_a_quake(self) -> None:
        payload = {k: v for k, v in SAMPLE_FEATURE.items() if k != "geometry"}
        assert GeoFeature.model_validate(payload).to_quake() is None


class TestGeoFeatureCollection:
    def test_quakes_counts_skipped_features(self) -> None:
        broken = {**SAMPLE_FEATURE, "properties": {"place": "No magnitude"}}
        collection = GeoFeatureCollection.model_validate(
            {"type": "FeatureCollection", "features": [SAMPLE_FEATURE, broken, "junk"]}
        )
        quakes, skipped = collection.quakes()
        assert [q.id for q in quakes] == ["73950001"]
        assert skipped == 1
