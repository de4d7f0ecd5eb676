"""Custom exception hierarchy for marsdash."""

from __future__ import annotations


class MarsDashError(Exception):
    """Base exception for all marsdash errors."""


class MarsDashConfigError(MarsDashError):
    """Invalid or missing configuration."""


class MarsDashTransportError(MarsDashError):
    """HTTP-level failure (network, non-200, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class MarsDashApiError(MarsDashError):
    """Proxy answered with ``success: false``.

    The proxy reports upstream failures in-band with HTTP 200 and a body
    of ``{"success": false, "code": 500, "message": "..."}``.
    """

    def __init__(
        self,
        message: str,
        *,
        code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.code = code
        self.endpoint = endpoint
        super().__init__(message)


class RoverNotFoundError(MarsDashError):
    """No rover with the given name is known."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown rover: {name!r}")
