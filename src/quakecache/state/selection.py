"""Selection coordinator.

Keeps the list-driven and map-driven selection slots consistent. The
propagation rule lives in :func:`propagate` so it can be used without a
coordinator instance.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from quakecache.state.events import SelectionChanged, SelectionSource, SelectionState, SelectionUpdate

_logger = logging.getLogger(__name__)

SelectionListener = Callable[[SelectionUpdate], None]


def propagate(state: SelectionState, event: SelectionChanged) -> SelectionState:
    """Apply *event* to *state*: the driving slot takes the value and the
    other slot follows it."""
    if event.source == SelectionSource.LIST:
        return state.model_copy(update={"primary": event.quake_id, "secondary": event.quake_id})
    return state.model_copy(update={"secondary": event.quake_id, "primary": event.quake_id})


class SelectionCoordinator:
    """Owns the selection pair and notifies listeners when it changes.

    Updates are change-detected: an event that would leave the pair as it
    is returns ``None`` and notifies nobody, so two surfaces echoing each
    other's selection settle after one round.
    """

    def __init__(self, state: SelectionState | None = None) -> None:
        self._state = state or SelectionState()
        self._listeners: list[SelectionListener] = []

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def primary(self) -> str | None:
        return self._state.primary

    @property
    def secondary(self) -> str | None:
        return self._state.secondary

    def subscribe(self, listener: SelectionListener) -> Callable[[], None]:
        """Register *listener*; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def apply(self, event: SelectionChanged) -> SelectionUpdate | None:
        """Apply a selection event. Returns the update, or ``None`` if nothing changed."""
        new_state = propagate(self._state, event)
        if new_state == self._state:
            return None
        update = SelectionUpdate(state=new_state, previous=self._state, driver=event.source)
        self._state = new_state
        _logger.debug(
            "Selection changed by %s at %s: primary=%s secondary=%s",
            event.source,
            event.observed_at.isoformat(),
            new_state.primary,
            new_state.secondary,
        )
        for listener in list(self._listeners):
            try:
                listener(update)
            except Exception:
                _logger.debug("Selection listener failed", exc_info=True)
        return update

    def select_from_list(self, quake_id: str | None) -> SelectionUpdate | None:
        return self.apply(SelectionChanged(source=SelectionSource.LIST, quake_id=quake_id))

    def select_from_map(self, quake_id: str | None) -> SelectionUpdate | None:
        return self.apply(SelectionChanged(source=SelectionSource.MAP, quake_id=quake_id))

    def reset(self) -> SelectionUpdate | None:
        """Clear both slots."""
        return self.select_from_list(None)
