"""Shared helpers for proxy endpoint modules.

It is internal to marsdash and may change at any time.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeVar

from pydantic import ValidationError

from marsdash._transport import Transport
from marsdash.exceptions import MarsDashApiError
from marsdash.models.responses import ProxyEnvelope

TEnvelope = TypeVar("TEnvelope", bound=ProxyEnvelope)


async def get_envelope(
    *,
    endpoint: str,
    transport: Transport,
    model: type[TEnvelope],
    params: Mapping[str, str] | None = None,
) -> TEnvelope:
    """GET an endpoint and parse its envelope.

    ``success: false`` is raised as :class:`MarsDashApiError` so callers
    treat in-band proxy failures the same way as transport failures.
    """
    body = await transport.get_json(endpoint, params)
    try:
        envelope = model.model_validate(body)
    except ValidationError as exc:
        raise MarsDashApiError(
            f"{endpoint} returned an unexpected payload: {exc.error_count()} validation error(s)",
            endpoint=endpoint,
        ) from exc

    if not envelope.success:
        raise MarsDashApiError(
            f"{endpoint} failed: code={envelope.code} message={envelope.message}",
            code=envelope.code,
            endpoint=endpoint,
        )
    return envelope
