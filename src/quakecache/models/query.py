"""Query configuration passed to the record store."""

from __future__ import annotations

from datetime import date
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator


class SortKey(StrEnum):
    TIME = "time"
    MAGNITUDE = "magnitude"


class SortOrder(StrEnum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class QueryOptions(BaseModel):
    """Search and sort parameters for :meth:`QuakeStore.query_all`.

    ``search_text`` is matched as a literal substring, whitespace included.
    Only the empty string matches every location. ``search_date``
    restricts results to one calendar day.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    search_text: str = ""
    search_date: date | None = None
    sort_key: SortKey = SortKey.TIME
    sort_order: SortOrder = SortOrder.DESCENDING

    @field_validator("search_text", mode="before")
    @classmethod
    def _none_matches_all(cls, value: object) -> object:
        return "" if value is None else value


#: Order in which the sort toolbar command steps through sort settings.
SORT_CYCLE: tuple[tuple[SortKey, SortOrder], ...] = (
    (SortKey.TIME, SortOrder.DESCENDING),
    (SortKey.TIME, SortOrder.ASCENDING),
    (SortKey.MAGNITUDE, SortOrder.DESCENDING),
    (SortKey.MAGNITUDE, SortOrder.ASCENDING),
)


def next_sort(options: QueryOptions) -> QueryOptions:
    """Return *options* advanced to the next entry of :data:`SORT_CYCLE`."""
    current = (options.sort_key, options.sort_order)
    try:
        index = SORT_CYCLE.index(current)
    except ValueError:
        index = -1
    sort_key, sort_order = SORT_CYCLE[(index + 1) % len(SORT_CYCLE)]
    return options.model_copy(update={"sort_key": sort_key, "sort_order": sort_order})
