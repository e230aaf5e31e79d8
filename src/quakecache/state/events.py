"""Selection events.

Each interaction surface (the list and the map) reports selection
changes as :class:`SelectionChanged` events. Only the coordinator is
allowed to turn them into a new :class:`SelectionState`.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SelectionSource(StrEnum):
    LIST = "list"
    MAP = "map"


class SelectionChanged(BaseModel):
    """A surface selected a quake (or cleared its selection)."""

    model_config = ConfigDict(frozen=True)

    source: SelectionSource
    quake_id: str | None = Field(default=None, description="Selected quake id, None to clear")
    observed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("quake_id")
    @classmethod
    def _normalize_id(cls, value: str | None) -> str | None:
        if value is None:
            return None
        quake_id = value.strip()
        return quake_id or None


class SelectionState(BaseModel):
    """The two synchronized selection slots.

    ``primary`` is driven by the list, ``secondary`` by the map.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    primary: str | None = None
    secondary: str | None = None

    @property
    def is_consistent(self) -> bool:
        return self.primary == self.secondary


class SelectionUpdate(BaseModel):
    """Result of applying a :class:`SelectionChanged` that changed state."""

    model_config = ConfigDict(frozen=True)

    state: SelectionState
    previous: SelectionState
    driver: SelectionSource

    @property
    def scroll_list(self) -> bool:
        """The map drove this change, so the list should scroll to it."""
        return self.driver == SelectionSource.MAP and self.state.primary is not None
