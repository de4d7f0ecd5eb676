from __future__ import annotations

import logging

import pytest

from marsdash.exceptions import RoverNotFoundError
from marsdash.models import Photo, Rover
from marsdash.state import (
    LoadingFailed,
    RoverPhotosLoaded,
    RoversLoaded,
    Store,
    StoreHolder,
    find_rover,
    find_rover_or_raise,
    reduce,
    rover_index,
    update_rover_photos,
    update_rovers,
)


def _rovers() -> tuple[Rover, ...]:
    return (
        Rover(id=5, name="Curiosity", status="active", max_date="2021-01-01"),
        Rover(id=7, name="Spirit", status="complete", max_date="2010-03-21"),
        Rover(id=6, name="Opportunity", status="complete", max_date="2018-06-11"),
    )


def _photos(count: int) -> tuple[Photo, ...]:
    return tuple(
        Photo(img_src=f"https://mars.nasa.gov/{i}.jpg", sol=3004, earth_date="2021-01-01", camera=20)
        for i in range(count)
    )


def test_initial_store_is_empty() -> None:
    store = Store()

    assert store.rovers_charged is False
    assert store.loading_error is False
    assert store.rovers == ()


def test_update_rovers_replaces_flag_and_list_preserving_order() -> None:
    prior = Store()
    new = update_rovers(prior, RoversLoaded(rovers_charged=True, rovers=_rovers()))

    assert new.rovers_charged is True
    assert [rover.name for rover in new.rovers] == ["Curiosity", "Spirit", "Opportunity"]
    # The prior snapshot is untouched.
    assert prior.rovers_charged is False
    assert prior.rovers == ()


def test_update_rover_photos_targets_rover_by_name() -> None:
    prior = update_rovers(Store(), RoversLoaded(rovers_charged=True, rovers=_rovers()))
    new = update_rover_photos(prior, "Spirit", _photos(2))

    assert len(find_rover(new, "Spirit").photos) == 2  # type: ignore[union-attr]
    assert find_rover(new, "Curiosity").photos == ()  # type: ignore[union-attr]
    assert find_rover(prior, "Spirit").photos == ()  # type: ignore[union-attr]
    assert new.rovers[0] is prior.rovers[0]


def test_update_rover_photos_is_idempotent() -> None:
    prior = update_rovers(Store(), RoversLoaded(rovers_charged=True, rovers=_rovers()))
    photos = _photos(3)

    once = update_rover_photos(prior, "Curiosity", photos)
    twice = update_rover_photos(once, "Curiosity", photos)

    assert once == twice
    assert find_rover(twice, "Curiosity").photos == photos  # type: ignore[union-attr]
    assert find_rover(prior, "Curiosity").photos == ()  # type: ignore[union-attr]


def test_update_rover_photos_unknown_rover_is_noop(caplog: pytest.LogCaptureFixture) -> None:
    prior = update_rovers(Store(), RoversLoaded(rovers_charged=True, rovers=_rovers()))

    with caplog.at_level(logging.WARNING, logger="marsdash.state.store"):
        new = update_rover_photos(prior, "Zhurong", _photos(1))

    assert new is prior
    assert "Zhurong" in caplog.text


def test_lookup_uses_first_match() -> None:
    duplicated = (Rover(id=1, name="Spirit", status="first"), Rover(id=2, name="Spirit", status="second"))
    store = Store(rovers_charged=True, rovers=duplicated)

    assert rover_index(store, "Spirit") == 0
    assert find_rover(store, "Spirit").status == "first"  # type: ignore[union-attr]
    assert rover_index(store, "Zhurong") == -1
    assert find_rover(store, "Zhurong") is None
    with pytest.raises(RoverNotFoundError):
        find_rover_or_raise(store, "Zhurong")


def test_loading_failed_only_sets_error_flag() -> None:
    store = reduce(Store(), LoadingFailed(reason="Network Error"))

    assert store.loading_error is True
    assert store.rovers_charged is False
    assert store.rovers == ()


def test_holder_publishes_new_snapshots() -> None:
    holder = StoreHolder()
    before = holder.current

    holder.apply(RoversLoaded(rovers_charged=True, rovers=_rovers()))
    after = holder.apply(RoverPhotosLoaded(rover_name="Curiosity", photos=_photos(2)))

    assert holder.current is after
    assert holder.version == 2
    assert before.rovers == ()
    assert len(find_rover(after, "Curiosity").photos) == 2  # type: ignore[union-attr]


def test_holder_does_not_bump_version_for_noop() -> None:
    holder = StoreHolder()
    holder.apply(RoverPhotosLoaded(rover_name="Curiosity", photos=_photos(2)))

    assert holder.version == 0
