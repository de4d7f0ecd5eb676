"""State transition events.

Every change to the dashboard store is expressed as one of these events
and folded in by :func:`marsdash.state.store.reduce`.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from marsdash.models.rover import Photo, Rover


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class RoversLoaded(_Event):
    """The rover list arrived from the proxy."""

    rovers_charged: bool
    rovers: tuple[Rover, ...] = ()


class RoverPhotosLoaded(_Event):
    """A rover's latest photo set arrived from the proxy."""

    rover_name: str
    photos: tuple[Photo, ...] = ()


class LoadingFailed(_Event):
    """A fetch chain failed; carries a short reason for logs."""

    reason: str = ""


StoreEvent = RoversLoaded | RoverPhotosLoaded | LoadingFailed
