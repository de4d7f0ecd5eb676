"""Rover, camera and photo models."""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, Field, field_validator

from marsdash.models._base import MarsBaseModel, as_tuple, safe_int, safe_str


class Camera(MarsBaseModel):
    """A camera mounted on a rover (pass-through, not rendered)."""

    id: int | None = None
    name: str | None = None
    """Abbreviated camera name (e.g. ``"FHAZ"``)."""
    full_name: str | None = None
    rover_id: int | None = None

    @field_validator("id", "rover_id", mode="before")
    @classmethod
    def _coerce_ints(cls, value: Any) -> int | None:
        return safe_int(value)

    @field_validator("name", "full_name", mode="before")
    @classmethod
    def _coerce_strs(cls, value: Any) -> str | None:
        return safe_str(value)


class Photo(MarsBaseModel):
    """A single rover photo as projected by the proxy."""

    img_src: str | None = None
    sol: int | None = None
    """Martian solar day the photo was taken on."""
    earth_date: str | None = Field(default=None, validation_alias=AliasChoices("earth_date", "earth_day"))
    camera: int | None = None
    """Id of the camera that took the photo."""

    @field_validator("camera", mode="before")
    @classmethod
    def _camera_id(cls, value: Any) -> int | None:
        # Raw upstream records carry the full camera object.
        if isinstance(value, dict):
            value = value.get("id")
        return safe_int(value)

    @field_validator("sol", mode="before")
    @classmethod
    def _coerce_sol(cls, value: Any) -> int | None:
        return safe_int(value)

    @field_validator("img_src", "earth_date", mode="before")
    @classmethod
    def _coerce_strs(cls, value: Any) -> str | None:
        return safe_str(value)


class Rover(MarsBaseModel):
    """A rover's mission metadata plus its currently loaded photo set.

    ``photos`` is empty until the detail view has been opened once, and
    then holds the full set for ``max_date``.
    """

    id: int | None = None
    name: str | None = None
    """Unique human-facing key used for lookups and routing."""
    landing_date: str | None = None
    launch_date: str | None = None
    status: str | None = None
    """Free-text mission status (e.g. ``"active"``, ``"complete"``)."""
    max_sol: int | None = None
    max_date: str | None = None
    """Latest earth date with photos; drives the lazy photo query."""
    total_photos: int | None = None
    cameras: tuple[Camera, ...] = ()
    photos: tuple[Photo, ...] = ()

    @property
    def has_photos(self) -> bool:
        return len(self.photos) > 0

    @field_validator("id", "max_sol", "total_photos", mode="before")
    @classmethod
    def _coerce_ints(cls, value: Any) -> int | None:
        return safe_int(value)

    @field_validator("name", "landing_date", "launch_date", "status", "max_date", mode="before")
    @classmethod
    def _coerce_strs(cls, value: Any) -> str | None:
        return safe_str(value)

    @field_validator("cameras", "photos", mode="before")
    @classmethod
    def _coerce_sequences(cls, value: Any) -> Any:
        return as_tuple(value)
