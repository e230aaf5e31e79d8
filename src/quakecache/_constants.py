"""Internal constants shared across the library."""

FEED_URL = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary/all_day.geojson"
USER_AGENT = "quakecache/0.1 (+https://earthquake.usgs.gov)"

#: Number of records the "add" toolbar command generates.
DEFAULT_ADD_COUNT = 10000

#: Location name given to generated records.
RANDOM_LOCATION_NAME = "Random Location"

PLACEHOLDER_PROMPT = "Select an Earthquake"
DEFAULT_TITLE = "Earthquakes"

# ------------------------------------------------------------------
# Magnitude buckets  (upper bound, exclusive -> label)
# ------------------------------------------------------------------

MAGNITUDE_CATEGORIES: tuple[tuple[float, str], ...] = (
    (3.0, "minor"),
    (5.0, "light"),
    (6.0, "moderate"),
    (7.0, "strong"),
    (8.0, "major"),
)
GREAT_CATEGORY = "great"


def magnitude_category(magnitude: float) -> str:
    """Return the descriptive bucket for *magnitude* (``"minor"`` .. ``"great"``)."""
    for upper, label in MAGNITUDE_CATEGORIES:
        if magnitude < upper:
            return label
    return GREAT_CATEGORY
