"""Data models for rover proxy responses."""

from marsdash.models._base import MarsBaseModel, safe_int, safe_str
from marsdash.models.responses import PhotosResponse, ProxyEnvelope, RoverResponse, RoversResponse
from marsdash.models.rover import Camera, Photo, Rover

__all__ = [
    "Camera",
    "MarsBaseModel",
    "Photo",
    "PhotosResponse",
    "ProxyEnvelope",
    "Rover",
    "RoverResponse",
    "RoversResponse",
    "safe_int",
    "safe_str",
]
