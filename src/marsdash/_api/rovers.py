"""Rover endpoints.

Endpoints:
  - /rovers
  - /rovers/:name
  - /rovers/:name/latestphotos?earth_date=YYYY-MM-DD
"""

from __future__ import annotations

import logging
from urllib.parse import quote

from marsdash._api._common import get_envelope
from marsdash._constants import LATEST_PHOTOS_ENDPOINT, ROVER_ENDPOINT, ROVERS_ENDPOINT
from marsdash._transport import Transport
from marsdash.models.responses import PhotosResponse, RoverResponse, RoversResponse

_logger = logging.getLogger(__name__)


def latest_photos_endpoint(name: str) -> str:
    return LATEST_PHOTOS_ENDPOINT.format(name=quote(name, safe=""))


async def fetch_rover_list(transport: Transport) -> RoversResponse:
    """Fetch every rover known to the proxy, photos left empty."""
    response = await get_envelope(endpoint=ROVERS_ENDPOINT, transport=transport, model=RoversResponse)
    _logger.debug("Rover list response decoded count=%d", len(response.rovers))
    return response


async def fetch_rover(transport: Transport, name: str) -> RoverResponse:
    """Fetch a single rover's mission manifest."""
    endpoint = ROVER_ENDPOINT.format(name=quote(name, safe=""))
    return await get_envelope(endpoint=endpoint, transport=transport, model=RoverResponse)


async def fetch_latest_photos(transport: Transport, name: str, earth_date: str | None) -> PhotosResponse:
    """Fetch a rover's photos taken on *earth_date* (normally its ``max_date``)."""
    params = {"earth_date": earth_date} if earth_date else None
    response = await get_envelope(
        endpoint=latest_photos_endpoint(name),
        transport=transport,
        model=PhotosResponse,
        params=params,
    )
    _logger.debug("Photos for %s on %s decoded count=%d", name, earth_date, len(response.photos))
    return response
