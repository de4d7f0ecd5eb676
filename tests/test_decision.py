from __future__ import annotations

from marsdash.models import Photo, Rover
from marsdash.state import RoverPhotosLoaded, RoversLoaded, Store, reduce
from marsdash.view.decision import (
    FetchRoverPhotos,
    FetchRovers,
    RenderError,
    RenderRover,
    RenderRovers,
    try_render_rover,
    try_render_rovers,
)


def _loaded_store() -> Store:
    rovers = (
        Rover(id=5, name="Curiosity", status="active", max_date="2021-01-01"),
        Rover(id=7, name="Spirit", status="complete", max_date="2010-03-21"),
    )
    return reduce(Store(), RoversLoaded(rovers_charged=True, rovers=rovers))


def test_uncharged_store_asks_to_fetch_rovers() -> None:
    assert try_render_rovers(Store()) == FetchRovers()


def test_charged_store_renders_rovers() -> None:
    store = _loaded_store()

    assert try_render_rovers(store) == RenderRovers(store.rovers)


def test_decision_is_deterministic() -> None:
    store = _loaded_store()

    assert try_render_rovers(store) == try_render_rovers(store)
    assert try_render_rover(store, "Spirit") == try_render_rover(store, "Spirit")


def test_rover_without_photos_asks_for_latest_photos() -> None:
    action = try_render_rover(_loaded_store(), "Curiosity")

    assert action == FetchRoverPhotos(rover_name="Curiosity", earth_date="2021-01-01")


def test_rover_with_photos_renders_from_cache() -> None:
    store = reduce(
        _loaded_store(),
        RoverPhotosLoaded(rover_name="Curiosity", photos=(Photo(img_src="https://mars.nasa.gov/1.jpg"),)),
    )

    action = try_render_rover(store, "Curiosity")

    assert isinstance(action, RenderRover)
    assert action.rover.name == "Curiosity"
    assert len(action.rover.photos) == 1


def test_stale_rover_argument_is_resolved_against_store() -> None:
    stale = _loaded_store().rovers[0]
    store = reduce(
        _loaded_store(),
        RoverPhotosLoaded(rover_name="Curiosity", photos=(Photo(img_src="https://mars.nasa.gov/1.jpg"),)),
    )

    action = try_render_rover(store, stale)

    assert isinstance(action, RenderRover)
    assert action.rover.has_photos


def test_unknown_rover_renders_error() -> None:
    action = try_render_rover(_loaded_store(), "Zhurong")

    assert isinstance(action, RenderError)
    assert "Zhurong" in action.reason
