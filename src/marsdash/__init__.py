"""marsdash - Async Mars rover dashboard over the rover photo proxy."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("marsdash")
except PackageNotFoundError:
    __version__ = "0+local"
from marsdash.client import ProxyClient
from marsdash.config import DashboardConfig
from marsdash.dashboard import Dashboard
from marsdash.exceptions import (
    MarsDashApiError,
    MarsDashConfigError,
    MarsDashError,
    MarsDashTransportError,
    RoverNotFoundError,
)
from marsdash.models import Camera, Photo, Rover
from marsdash.state import Store, StoreHolder
from marsdash.view.surface import Root

__all__ = [
    "__version__",
    "Camera",
    "Dashboard",
    "DashboardConfig",
    "MarsDashApiError",
    "MarsDashConfigError",
    "MarsDashError",
    "MarsDashTransportError",
    "Photo",
    "ProxyClient",
    "Root",
    "Rover",
    "RoverNotFoundError",
    "Store",
    "StoreHolder",
]
