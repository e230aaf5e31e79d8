"""Toolbar command providers.

The command set differs per host platform: desktop hosts get an explicit
refresh button, touch hosts refresh with pull-to-refresh instead. A
provider is picked once at startup by :func:`toolbar_for_platform`.
"""

from __future__ import annotations

import sys
from enum import StrEnum
from typing import Protocol

_TOUCH_PLATFORMS: frozenset[str] = frozenset({"ios", "ipados", "android"})


class ToolbarCommand(StrEnum):
    REFRESH = "refresh"
    DELETE = "delete"
    SORT = "sort"
    ADD = "add"


class ToolbarProvider(Protocol):
    """Capabilities of the host's toolbar."""

    name: str
    pull_to_refresh: bool
    wide_layout: bool

    def commands(self) -> tuple[ToolbarCommand, ...]: ...


class DesktopToolbar:
    name = "desktop"
    pull_to_refresh = False
    wide_layout = True

    def commands(self) -> tuple[ToolbarCommand, ...]:
        return (ToolbarCommand.REFRESH, ToolbarCommand.DELETE, ToolbarCommand.SORT, ToolbarCommand.ADD)


class MobileToolbar:
    name = "mobile"
    pull_to_refresh = True
    wide_layout = False

    def commands(self) -> tuple[ToolbarCommand, ...]:
        return (ToolbarCommand.DELETE, ToolbarCommand.SORT, ToolbarCommand.ADD)


def toolbar_for_platform(platform: str | None = None) -> ToolbarProvider:
    """Return the provider for *platform* (default: ``sys.platform``)."""
    name = (platform or sys.platform).strip().lower()
    if name in _TOUCH_PLATFORMS or name == MobileToolbar.name:
        return MobileToolbar()
    return DesktopToolbar()
