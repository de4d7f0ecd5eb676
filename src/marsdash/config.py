"""Client configuration for marsdash."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from marsdash._constants import BASE_URL, DEFAULT_IMAGE_DIR, DEFAULT_REQUEST_TIMEOUT, USER_AGENT
from marsdash.exceptions import MarsDashConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class DashboardConfig:
    """Dashboard configuration.

    Parameters
    ----------
    base_url : str
        Base URL of the rover proxy. Defaults to the proxy's local port.
    request_timeout : float
        Total timeout in seconds for a single proxy request.
    dedupe_requests : bool
        Collapse concurrent fetches for the same key (the rover list, or
        one rover's photos) into a single in-flight request. When off,
        every click starts its own fetch chain and the last one to
        complete wins.
    image_dir : str
        Directory prefix of the static rover card images
        (``{image_dir}/{rover.name}.jpg``).
    user_agent : str
        User-Agent header sent to the proxy.
    """

    base_url: str = BASE_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    dedupe_requests: bool = False
    image_dir: str = DEFAULT_IMAGE_DIR
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        base_url = (self.base_url or "").strip()
        if not base_url:
            raise MarsDashConfigError("base_url must be non-empty")
        object.__setattr__(self, "base_url", base_url.rstrip("/"))
        if self.request_timeout <= 0:
            raise MarsDashConfigError(f"request_timeout must be positive, got {self.request_timeout}")

    @classmethod
    def from_env(cls, **overrides: Any) -> DashboardConfig:
        """Create configuration from environment variables.

        Reads ``MARSDASH_BASE_URL``, ``MARSDASH_REQUEST_TIMEOUT``,
        ``MARSDASH_DEDUPE_REQUESTS`` and ``MARSDASH_IMAGE_DIR``.
        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        DashboardConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "MARSDASH_BASE_URL": "base_url",
            "MARSDASH_IMAGE_DIR": "image_dir",
            "MARSDASH_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # request_timeout is numeric, handle separately
        timeout_env = env.get("MARSDASH_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise MarsDashConfigError(f"MARSDASH_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        if "dedupe_requests" not in overrides:
            config_kwargs["dedupe_requests"] = _env_bool(env.get("MARSDASH_DEDUPE_REQUESTS"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
