"""Proxy response envelopes.

The proxy wraps every answer as ``{"success": bool, ...}`` and reports
upstream failures in-band as
``{"success": false, "code": 500, "message": "Internal Server Error"}``.
"""

from __future__ import annotations

from typing import Any

from pydantic import field_validator

from marsdash.models._base import MarsBaseModel, as_tuple, safe_int, safe_str
from marsdash.models.rover import Photo, Rover


class ProxyEnvelope(MarsBaseModel):
    success: bool = False
    code: int | None = None
    message: str | None = None

    @field_validator("success", mode="before")
    @classmethod
    def _coerce_success(cls, value: Any) -> bool:
        return value is True

    @field_validator("code", mode="before")
    @classmethod
    def _coerce_code(cls, value: Any) -> int | None:
        return safe_int(value)

    @field_validator("message", mode="before")
    @classmethod
    def _coerce_message(cls, value: Any) -> str | None:
        return safe_str(value)


class RoversResponse(ProxyEnvelope):
    """``GET /rovers``."""

    rovers: tuple[Rover, ...] = ()

    @field_validator("rovers", mode="before")
    @classmethod
    def _coerce_rovers(cls, value: Any) -> Any:
        return as_tuple(value)


class RoverResponse(ProxyEnvelope):
    """``GET /rovers/:name``."""

    rover: Rover | None = None

    @field_validator("rover", mode="before")
    @classmethod
    def _unwrap_rover(cls, value: Any) -> Any:
        # Upstream answers {"rover": {...}} and the proxy wraps it once more.
        if isinstance(value, dict) and isinstance(value.get("rover"), dict):
            return value["rover"]
        return value


class PhotosResponse(ProxyEnvelope):
    """``GET /rovers/:name/latestphotos?earth_date=...``."""

    photos: tuple[Photo, ...] = ()

    @field_validator("photos", mode="before")
    @classmethod
    def _coerce_photos(cls, value: Any) -> Any:
        return as_tuple(value)
