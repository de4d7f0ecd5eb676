"""Base model and lenient coercion helpers for proxy payloads.

Every proxy model inherits from :class:`MarsBaseModel` which provides:

* ``frozen=True`` so snapshots built from these models can be shared
  between readers without any of them observing a later change.
* ``extra="ignore"`` so additional upstream fields are dropped.
* Lenient fields: the proxy passes the upstream payload through without
  validation, so every field is optional and malformed values coerce to
  ``None`` instead of failing the whole response.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    parsed = safe_float(value)
    if parsed is None:
        return None
    return int(parsed)


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (dict, list)):
        return None
    text = str(value)
    return text if text else None


def as_tuple(value: Any) -> Any:
    """Normalize a missing sequence to an empty tuple."""
    if value is None:
        return ()
    if isinstance(value, list):
        return tuple(value)
    return value


class MarsBaseModel(BaseModel):
    """Base for proxy payload models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )
