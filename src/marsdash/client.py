"""High-level async client for the rover proxy."""

from __future__ import annotations

from typing import Any

import aiohttp

from marsdash._api import rovers as _rovers_api
from marsdash._transport import HttpTransport, Transport
from marsdash.config import DashboardConfig
from marsdash.exceptions import MarsDashError, RoverNotFoundError
from marsdash.models.rover import Photo, Rover


class ProxyClient:
    """Async client for the rover proxy.

    Usage::

        async with ProxyClient(config) as client:
            rovers = await client.get_rovers()
    """

    def __init__(
        self,
        config: DashboardConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport

    @property
    def config(self) -> DashboardConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> ProxyClient:
        if self._transport is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise MarsDashError("Client not initialized. Use 'async with ProxyClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def get_rovers(self) -> tuple[bool, tuple[Rover, ...]]:
        """Return ``(success, rovers)`` from ``GET /rovers``."""
        response = await _rovers_api.fetch_rover_list(self._require_transport())
        return response.success, response.rovers

    async def get_rover(self, name: str) -> Rover:
        """Return a single rover's manifest from ``GET /rovers/:name``."""
        response = await _rovers_api.fetch_rover(self._require_transport(), name)
        if response.rover is None:
            raise RoverNotFoundError(name)
        return response.rover

    async def get_latest_photos(self, name: str, earth_date: str | None) -> tuple[Photo, ...]:
        """Return the photos *name* took on *earth_date*."""
        response = await _rovers_api.fetch_latest_photos(self._require_transport(), name, earth_date)
        return response.photos
