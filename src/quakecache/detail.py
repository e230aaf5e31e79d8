"""Detail pane projection."""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict

from quakecache._constants import DEFAULT_TITLE, PLACEHOLDER_PROMPT
from quakecache.models.quake import Quake


class DetailView(BaseModel):
    """What the detail pane shows for the current selection."""

    model_config = ConfigDict(frozen=True)

    title: str
    subtitle: str = ""
    body: str
    quake_id: str | None = None

    @property
    def has_selection(self) -> bool:
        return self.quake_id is not None


def find_quake(quakes: Iterable[Quake], quake_id: str | None) -> Quake | None:
    if quake_id is None:
        return None
    return next((quake for quake in quakes if quake.id == quake_id), None)


def render_detail(quakes: Iterable[Quake], selected_id: str | None, *, wide: bool = False) -> DetailView:
    """Render the detail pane for *selected_id*.

    A selection that matches no record (never set, or deleted since)
    renders the placeholder prompt.
    """
    quake = find_quake(quakes, selected_id)
    if quake is None:
        return DetailView(title=DEFAULT_TITLE if wide else "", body=PLACEHOLDER_PROMPT)
    return DetailView(
        title=quake.location.name,
        subtitle=quake.full_date if wide else "",
        body=f"Magnitude: {quake.magnitude_string}",
        quake_id=quake.id,
    )
