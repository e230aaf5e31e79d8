"""Top-level composition of store, selection, view model and toolbar."""

from __future__ import annotations

import logging
import random
from enum import StrEnum

from quakecache.client import QuakeFeedClient
from quakecache.config import QuakeConfig
from quakecache.detail import DetailView, render_detail
from quakecache.generator import AddResult, add_quakes
from quakecache.ingestion.feed import RefreshResult
from quakecache.models.quake import Quake
from quakecache.models.query import QueryOptions
from quakecache.state.events import SelectionUpdate
from quakecache.state.selection import SelectionCoordinator
from quakecache.state.store import QuakeStore
from quakecache.toolbar import ToolbarCommand, ToolbarProvider, toolbar_for_platform
from quakecache.viewmodel import ViewModel

_logger = logging.getLogger(__name__)


class ScenePhase(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    BACKGROUND = "background"


class QuakeApp:
    """The earthquake list, its selection and its toolbar commands.

    All state is owned by one instance and mutated only from the calling
    thread. :meth:`refresh` is the only coroutine.
    """

    def __init__(
        self,
        store: QuakeStore,
        *,
        config: QuakeConfig | None = None,
        feed_client: QuakeFeedClient | None = None,
        toolbar: ToolbarProvider | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.config = config or QuakeConfig()
        self.store = store
        self.selection = SelectionCoordinator()
        self.view_model = ViewModel()
        self.toolbar = toolbar or toolbar_for_platform(self.config.platform)
        self._feed_client = feed_client
        self._rng = rng
        self._scene_phase = ScenePhase.ACTIVE
        self.view_model.update(store)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def visible_quakes(self) -> list[Quake]:
        """The list contents for the current search and sort options."""
        return self.store.query_all(self.view_model.options, tz=self.config.tzinfo)

    def detail(self, *, wide: bool | None = None) -> DetailView:
        """Render the detail pane for the primary selection."""
        if wide is None:
            wide = self.toolbar.wide_layout
        return render_detail(self.store.all(), self.selection.primary, wide=wide)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_from_list(self, quake_id: str | None) -> SelectionUpdate | None:
        return self.selection.select_from_list(quake_id)

    def select_from_map(self, quake_id: str | None) -> SelectionUpdate | None:
        return self.selection.select_from_map(quake_id)

    # ------------------------------------------------------------------
    # Toolbar commands
    # ------------------------------------------------------------------

    async def refresh(self) -> RefreshResult:
        """Pull the feed into the store, then recompute the summary.

        Transport and feed errors propagate to the caller.
        """
        if self._feed_client is None:
            async with QuakeFeedClient(self.config) as client:
                result = await client.refresh(self.store)
        else:
            result = await self._feed_client.refresh(self.store)
        self.view_model.update(self.store)
        return result

    def delete_selected(self) -> Quake | None:
        """Delete the selected quake and clear the selection."""
        quake = self.store.get(self.selection.primary)
        if quake is None:
            return None
        self.store.delete(quake.id)
        self.selection.reset()
        self.view_model.update(self.store)
        return quake

    def cycle_sort(self) -> QueryOptions:
        return self.view_model.cycle_sort()

    def add_random(self, count: int | None = None) -> AddResult:
        result = add_quakes(
            self.store,
            self.config.add_count if count is None else count,
            rng=self._rng,
            suppress_errors=self.config.suppress_insert_errors,
        )
        self.view_model.update(self.store)
        return result

    async def perform(self, command: ToolbarCommand) -> object:
        """Run a toolbar command and return its command-specific result."""
        _logger.debug("Toolbar command %s", command)
        if command == ToolbarCommand.REFRESH:
            return await self.refresh()
        if command == ToolbarCommand.DELETE:
            return self.delete_selected()
        if command == ToolbarCommand.SORT:
            return self.cycle_sort()
        if command == ToolbarCommand.ADD:
            return self.add_random()
        raise ValueError(f"unknown toolbar command {command!r}")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def scene_phase(self) -> ScenePhase:
        return self._scene_phase

    def on_scene_phase(self, phase: ScenePhase) -> bool:
        """Track the host's scene phase. Returns ``True`` if a recompute ran.

        Becoming active resyncs the summary from the store; it does not
        refresh from the network.
        """
        previous, self._scene_phase = self._scene_phase, phase
        if phase == ScenePhase.ACTIVE and previous != ScenePhase.ACTIVE:
            self.view_model.update(self.store)
            return True
        return False

    def save(self) -> None:
        """Persist the store if it is file-backed and has changes."""
        if self.store.path is not None and self.store.dirty:
            self.store.save()
