"""State/store layer.

This package is the single source of truth for how rover data fetched
from the proxy is folded into the dashboard's immutable snapshots.
"""

from marsdash.state.events import LoadingFailed, RoverPhotosLoaded, RoversLoaded, StoreEvent
from marsdash.state.store import (
    Store,
    StoreHolder,
    find_rover,
    find_rover_or_raise,
    reduce,
    rover_index,
    update_rover_photos,
    update_rovers,
)

__all__ = [
    "LoadingFailed",
    "RoverPhotosLoaded",
    "RoversLoaded",
    "Store",
    "StoreEvent",
    "StoreHolder",
    "find_rover",
    "find_rover_or_raise",
    "reduce",
    "rover_index",
    "update_rover_photos",
    "update_rovers",
]
