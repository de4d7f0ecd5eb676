"""Immutable dashboard store and its transitions.

Snapshots are frozen values: a transition never changes a snapshot in
place, it builds a new one. :class:`StoreHolder` is the only component
allowed to publish a new current snapshot.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from marsdash.exceptions import RoverNotFoundError
from marsdash.models.rover import Photo, Rover
from marsdash.state.events import LoadingFailed, RoverPhotosLoaded, RoversLoaded, StoreEvent

_logger = logging.getLogger(__name__)


class Store(BaseModel):
    """Everything the dashboard knows about the rovers at one point in time."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    rovers_charged: bool = False
    """True once the rover list has been fetched this session."""
    loading_error: bool = False
    """Set when a fetch chain failed. Informational only."""
    rovers: tuple[Rover, ...] = ()
    """Rovers in the order the proxy returned them."""


def rover_index(state: Store, name: str | None) -> int:
    """Index of the first rover called *name*, or ``-1``."""
    for index, rover in enumerate(state.rovers):
        if rover.name == name:
            return index
    return -1


def find_rover(state: Store, name: str | None) -> Rover | None:
    index = rover_index(state, name)
    return state.rovers[index] if index >= 0 else None


def find_rover_or_raise(state: Store, name: str) -> Rover:
    rover = find_rover(state, name)
    if rover is None:
        raise RoverNotFoundError(name)
    return rover


def update_rovers(state: Store, update: RoversLoaded) -> Store:
    """Replace ``rovers_charged`` and ``rovers``; nothing is validated."""
    return state.model_copy(update={"rovers_charged": update.rovers_charged, "rovers": tuple(update.rovers)})


def update_rover_photos(state: Store, rover_name: str, photos: tuple[Photo, ...]) -> Store:
    """Set the photos of the first rover called *rover_name*.

    An unknown rover leaves the store as it was.
    """
    index = rover_index(state, rover_name)
    if index < 0:
        _logger.warning("Ignoring photos for unknown rover %r", rover_name)
        return state

    rover = state.rovers[index].model_copy(update={"photos": tuple(photos)})
    rovers = state.rovers[:index] + (rover,) + state.rovers[index + 1 :]
    return state.model_copy(update={"rovers": rovers})


def reduce(state: Store, event: StoreEvent) -> Store:
    """Fold one event into *state*, returning the next snapshot."""
    if isinstance(event, RoversLoaded):
        return update_rovers(state, event)
    if isinstance(event, RoverPhotosLoaded):
        return update_rover_photos(state, event.rover_name, event.photos)
    if isinstance(event, LoadingFailed):
        return state.model_copy(update={"loading_error": True})
    raise TypeError(f"Unsupported store event: {type(event).__name__}")


class StoreHolder:
    """Single-writer owner of the current store snapshot.

    Readers take ``current`` and keep it as long as they like; publishing
    only rebinds the holder, so an old snapshot never changes under them.
    """

    def __init__(self, initial: Store | None = None) -> None:
        self._current = initial if initial is not None else Store()
        self._version = 0

    @property
    def current(self) -> Store:
        return self._current

    @property
    def version(self) -> int:
        """Number of snapshots published since creation."""
        return self._version

    def apply(self, event: StoreEvent) -> Store:
        """Reduce *event* against the current snapshot and publish the result."""
        new_state = reduce(self._current, event)
        if new_state is not self._current:
            self._current = new_state
            self._version += 1
            _logger.debug("Published store v%d after %s", self._version, type(event).__name__)
        return new_state
