from __future__ import annotations

import logging
from datetime import UTC, datetime

import pytest

from quakecache.state.events import SelectionChanged, SelectionSource, SelectionState, SelectionUpdate
from quakecache.state.selection import SelectionCoordinator, propagate


def test_initial_state_has_no_selection() -> None:
    coordinator = SelectionCoordinator()
    assert coordinator.state == SelectionState(primary=None, secondary=None)


@pytest.mark.parametrize("source", list(SelectionSource))
def test_propagate_assigns_both_slots(source: SelectionSource) -> None:
    state = propagate(SelectionState(primary="a", secondary="a"), SelectionChanged(source=source, quake_id="b"))
    assert state == SelectionState(primary="b", secondary="b")


def test_list_selection_propagates_to_map_slot() -> None:
    coordinator = SelectionCoordinator()
    update = coordinator.select_from_list("X")

    assert update is not None
    assert coordinator.primary == "X"
    assert coordinator.secondary == "X"
    assert coordinator.state.is_consistent
    assert update.driver == SelectionSource.LIST
    assert update.previous == SelectionState()
    assert not update.scroll_list


def test_identical_assignment_is_idempotent() -> None:
    coordinator = SelectionCoordinator()
    seen: list[SelectionUpdate] = []
    coordinator.subscribe(seen.append)

    coordinator.select_from_list("X")
    assert coordinator.select_from_list("X") is None
    # The map echoing the same value back is not a change either.
    assert coordinator.select_from_map("X") is None
    assert len(seen) == 1
    assert coordinator.state == SelectionState(primary="X", secondary="X")


def test_map_selection_overrides_list_selection() -> None:
    coordinator = SelectionCoordinator()
    coordinator.select_from_list("B")
    update = coordinator.select_from_map("A")

    assert coordinator.state == SelectionState(primary="A", secondary="A")
    assert update is not None
    assert update.driver == SelectionSource.MAP
    assert update.scroll_list


def test_clearing_from_map_does_not_request_scroll() -> None:
    coordinator = SelectionCoordinator()
    coordinator.select_from_list("B")
    update = coordinator.select_from_map(None)
    assert update is not None
    assert not update.scroll_list
    assert coordinator.state == SelectionState()


def test_blank_id_clears_selection() -> None:
    coordinator = SelectionCoordinator()
    coordinator.select_from_list("B")
    coordinator.select_from_list("   ")
    assert coordinator.primary is None


def test_reset_clears_both_slots() -> None:
    coordinator = SelectionCoordinator(SelectionState(primary="a", secondary="a"))
    assert coordinator.reset() is not None
    assert coordinator.state == SelectionState()
    assert coordinator.reset() is None


def test_echoing_listener_does_not_loop() -> None:
    coordinator = SelectionCoordinator()
    calls: list[SelectionUpdate] = []

    def _map_surface(update: SelectionUpdate) -> None:
        calls.append(update)
        # A bound map view writes back whatever it was told to show.
        coordinator.select_from_map(update.state.secondary)

    coordinator.subscribe(_map_surface)
    coordinator.select_from_list("Q")

    assert len(calls) == 1
    assert coordinator.state == SelectionState(primary="Q", secondary="Q")


def test_failing_listener_does_not_block_others() -> None:
    coordinator = SelectionCoordinator()
    seen: list[str | None] = []

    def _broken(_update: SelectionUpdate) -> None:
        raise RuntimeError("boom")

    coordinator.subscribe(_broken)
    coordinator.subscribe(lambda update: seen.append(update.state.primary))
    coordinator.select_from_list("Q")

    assert seen == ["Q"]


def test_unsubscribe() -> None:
    coordinator = SelectionCoordinator()
    seen: list[SelectionUpdate] = []
    unsubscribe = coordinator.subscribe(seen.append)
    unsubscribe()
    unsubscribe()
    coordinator.select_from_list("Q")
    assert seen == []


def test_change_log_includes_observation_time(caplog: pytest.LogCaptureFixture) -> None:
    coordinator = SelectionCoordinator()
    observed_at = datetime(2024, 1, 1, 9, 30, tzinfo=UTC)

    with caplog.at_level(logging.DEBUG, logger="quakecache.state.selection"):
        coordinator.apply(SelectionChanged(source=SelectionSource.MAP, quake_id="X", observed_at=observed_at))

    assert "2024-01-01T09:30:00+00:00" in caplog.text
