"""Render-or-fetch decisions.

The functions here only look at a snapshot and say what should happen
next; :class:`marsdash.dashboard.Dashboard` carries it out. Actions are
frozen values, so deciding twice on the same snapshot yields equal
actions.
"""

from __future__ import annotations

from dataclasses import dataclass

from marsdash.models.rover import Rover
from marsdash.state.store import Store, find_rover


@dataclass(frozen=True, slots=True)
class RenderRovers:
    rovers: tuple[Rover, ...]


@dataclass(frozen=True, slots=True)
class FetchRovers:
    pass


@dataclass(frozen=True, slots=True)
class RenderRover:
    rover: Rover


@dataclass(frozen=True, slots=True)
class FetchRoverPhotos:
    rover_name: str
    earth_date: str | None


@dataclass(frozen=True, slots=True)
class RenderError:
    reason: str


Action = RenderRovers | FetchRovers | RenderRover | FetchRoverPhotos | RenderError


def try_render_rovers(store: Store) -> RenderRovers | FetchRovers:
    """Render the list from cache once it was fetched, otherwise fetch it."""
    if store.rovers_charged:
        return RenderRovers(store.rovers)
    return FetchRovers()


def try_render_rover(store: Store, rover: Rover | str) -> RenderRover | FetchRoverPhotos | RenderError:
    """Render a rover's detail page from cache, or fetch its photos first.

    The rover is looked up by name in *store*, so a stale ``Rover`` value
    passed by the caller is never rendered.
    """
    name = rover if isinstance(rover, str) else rover.name
    current = find_rover(store, name)
    if current is None:
        return RenderError(f"Unknown rover: {name!r}")
    if current.has_photos:
        return RenderRover(current)
    return FetchRoverPhotos(rover_name=name or "", earth_date=current.max_date)
