"""quakecache - earthquake list core with a local record store."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("quakecache")
except PackageNotFoundError:
    __version__ = "0+local"
from quakecache.app import QuakeApp, ScenePhase
from quakecache.client import QuakeFeedClient
from quakecache.config import QuakeConfig
from quakecache.detail import DetailView, render_detail
from quakecache.exceptions import (
    QuakeConfigError,
    QuakeError,
    QuakeFeedError,
    QuakeStoreError,
    QuakeTransportError,
)
from quakecache.generator import AddResult, add_quakes, generate_quake
from quakecache.models import Location, Quake, QueryOptions, SortKey, SortOrder
from quakecache.state.events import SelectionChanged, SelectionSource, SelectionState, SelectionUpdate
from quakecache.state.selection import SelectionCoordinator, propagate
from quakecache.state.store import QuakeStore
from quakecache.toolbar import DesktopToolbar, MobileToolbar, ToolbarCommand, ToolbarProvider, toolbar_for_platform
from quakecache.viewmodel import StoreSummary, ViewModel

__all__ = [
    "__version__",
    "AddResult",
    "DesktopToolbar",
    "DetailView",
    "Location",
    "MobileToolbar",
    "Quake",
    "QuakeApp",
    "QuakeConfig",
    "QuakeConfigError",
    "QuakeError",
    "QuakeFeedClient",
    "QuakeFeedError",
    "QuakeStore",
    "QuakeStoreError",
    "QuakeTransportError",
    "QueryOptions",
    "ScenePhase",
    "SelectionChanged",
    "SelectionCoordinator",
    "SelectionSource",
    "SelectionState",
    "SelectionUpdate",
    "SortKey",
    "SortOrder",
    "StoreSummary",
    "ToolbarCommand",
    "ToolbarProvider",
    "ViewModel",
    "add_quakes",
    "generate_quake",
    "propagate",
    "render_detail",
]
