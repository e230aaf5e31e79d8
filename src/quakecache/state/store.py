"""In-memory record store with optional JSON-file persistence.

This is the only component allowed to mutate the set of known quakes.
"""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime, timedelta, tzinfo
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from quakecache.exceptions import QuakeStoreError
from quakecache.models.quake import Quake
from quakecache.models.query import QueryOptions, SortKey, SortOrder

_logger = logging.getLogger(__name__)

_QUAKE_LIST = TypeAdapter(list[Quake])


def _day_bounds(options: QueryOptions, tz: tzinfo) -> tuple[datetime, datetime] | None:
    if options.search_date is None:
        return None
    start = datetime.combine(options.search_date, datetime.min.time(), tzinfo=tz)
    return start, start + timedelta(days=1)


def matches(quake: Quake, options: QueryOptions, tz: tzinfo) -> bool:
    """Return ``True`` when *quake* passes the text and date filters."""
    needle = options.search_text.casefold()
    if needle and needle not in quake.location.name.casefold():
        return False
    bounds = _day_bounds(options, tz)
    if bounds is None:
        return True
    start, end = bounds
    return start <= quake.time < end


def sort_quakes(quakes: list[Quake], sort_key: SortKey, sort_order: SortOrder) -> list[Quake]:
    """Sort *quakes* in place and return them.

    Ties on the sort field fall back to ``id`` so the ordering is total:
    descending is always the exact reverse of ascending.
    """
    if sort_key == SortKey.MAGNITUDE:
        quakes.sort(key=lambda q: (q.magnitude, q.id), reverse=sort_order == SortOrder.DESCENDING)
    else:
        quakes.sort(key=lambda q: (q.time, q.id), reverse=sort_order == SortOrder.DESCENDING)
    return quakes


class QuakeStore:
    """Queryable collection of :class:`Quake` records keyed by ``id``.

    The store lives in memory. When it was opened with a path,
    :meth:`save` writes the records back as JSON.
    """

    def __init__(self, *, path: str | os.PathLike[str] | None = None, tz: tzinfo | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._tz = tz
        self._quakes: dict[str, Quake] = {}
        self._dirty = False

    @classmethod
    def open(cls, path: str | os.PathLike[str], *, tz: tzinfo | None = None) -> QuakeStore:
        """Open a store backed by *path*, loading it if the file exists."""
        store = cls(path=path, tz=tz)
        store.load()
        return store

    @property
    def path(self) -> Path | None:
        return self._path

    @property
    def dirty(self) -> bool:
        """Whether there are changes not yet written by :meth:`save`."""
        return self._dirty

    def __len__(self) -> int:
        return len(self._quakes)

    def __contains__(self, quake_id: object) -> bool:
        return quake_id in self._quakes

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def insert(self, quake: Quake) -> None:
        """Add a new record.

        Raises :class:`QuakeStoreError` if a record with the same id exists.
        """
        if quake.id in self._quakes:
            raise QuakeStoreError(f"duplicate quake id {quake.id!r}", quake_id=quake.id)
        self._quakes[quake.id] = quake
        self._dirty = True

    def upsert(self, quake: Quake) -> bool:
        """Insert or replace a record. Returns ``True`` if it was new."""
        created = quake.id not in self._quakes
        self._quakes[quake.id] = quake
        self._dirty = True
        return created

    def delete(self, quake_id: str) -> bool:
        """Remove the record with *quake_id*. Unknown ids are ignored."""
        removed = self._quakes.pop(quake_id, None)
        if removed is None:
            return False
        self._dirty = True
        _logger.debug("Deleted quake id=%s", quake_id)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, quake_id: str | None) -> Quake | None:
        if quake_id is None:
            return None
        return self._quakes.get(quake_id)

    def all(self) -> list[Quake]:
        """All records, in insertion order."""
        return list(self._quakes.values())

    def query_all(self, options: QueryOptions | None = None, *, tz: tzinfo | None = None) -> list[Quake]:
        """Return the records matching *options*, sorted as requested."""
        if options is None:
            options = QueryOptions()
        zone = tz or self._tz or UTC
        result = [quake for quake in self._quakes.values() if matches(quake, options, zone)]
        return sort_quakes(result, options.sort_key, options.sort_order)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> int:
        """Replace the contents with the records stored at :attr:`path`.

        A missing file loads as an empty store. Returns the record count.
        """
        if self._path is None:
            raise QuakeStoreError("store has no backing path")
        self._quakes.clear()
        self._dirty = False
        if not self._path.exists():
            _logger.debug("Store file %s does not exist yet", self._path)
            return 0
        try:
            quakes = _QUAKE_LIST.validate_json(self._path.read_bytes())
        except (OSError, ValidationError) as exc:
            raise QuakeStoreError(f"cannot read store file {self._path}: {exc}") from exc
        for quake in quakes:
            self._quakes[quake.id] = quake
        _logger.debug("Loaded %d quakes from %s", len(self._quakes), self._path)
        return len(self._quakes)

    def save(self) -> None:
        """Write all records to :attr:`path` (temp file + atomic rename)."""
        if self._path is None:
            raise QuakeStoreError("store has no backing path")
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(f"{self._path.name}.tmp")
        try:
            tmp_path.write_bytes(_QUAKE_LIST.dump_json(self.all()))
            os.replace(tmp_path, self._path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise QuakeStoreError(f"cannot write store file {self._path}: {exc}") from exc
        self._dirty = False
        _logger.debug("Saved %d quakes to %s", len(self._quakes), self._path)
