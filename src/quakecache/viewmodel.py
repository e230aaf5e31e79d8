"""Query parameters and derived store summary shared by the views."""

from __future__ import annotations

import logging
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict

from quakecache.models.query import QueryOptions, SortKey, SortOrder, next_sort
from quakecache.state.store import QuakeStore

_logger = logging.getLogger(__name__)


class StoreSummary(BaseModel):
    """Aggregates recomputed from the store contents."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    earliest: datetime | None = None
    latest: datetime | None = None
    largest: float | None = None


def summarize(store: QuakeStore) -> StoreSummary:
    quakes = store.all()
    if not quakes:
        return StoreSummary()
    times = [quake.time for quake in quakes]
    return StoreSummary(
        total=len(quakes),
        earliest=min(times),
        latest=max(times),
        largest=max(quake.magnitude for quake in quakes),
    )


class ViewModel:
    """Current search/sort options plus the last recomputed summary.

    The options object is immutable; setters replace it.
    """

    def __init__(self, options: QueryOptions | None = None) -> None:
        self.options = options or QueryOptions()
        self.summary = StoreSummary()

    def set_search_text(self, text: str) -> None:
        self.options = self.options.model_copy(update={"search_text": text or ""})

    def set_search_date(self, day: date | None) -> None:
        self.options = self.options.model_copy(update={"search_date": day})

    def set_sort(self, sort_key: SortKey, sort_order: SortOrder) -> None:
        self.options = self.options.model_copy(update={"sort_key": sort_key, "sort_order": sort_order})

    def cycle_sort(self) -> QueryOptions:
        self.options = next_sort(self.options)
        return self.options

    def update(self, store: QuakeStore) -> StoreSummary:
        """Recompute the summary from *store* (no network access)."""
        self.summary = summarize(store)
        _logger.debug("Recomputed summary: total=%d", self.summary.total)
        return self.summary
