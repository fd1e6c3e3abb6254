"""Client configuration for pyparkir."""

from __future__ import annotations

import dataclasses
import os
from datetime import date, datetime, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pyparkir._constants import (
    BASE_URL,
    BASELINE_KEY,
    CSE_PATH,
    DEFAULT_APPLICATION,
    DEFAULT_DEVICE,
    DEFAULT_POLL_INTERVAL,
    DEFAULT_REQUEST_TIMEOUT,
)
from pyparkir.exceptions import ParkirConfigError


def _env_float(env_key: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise ParkirConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class AntaresConfig:
    """Client configuration.

    Parameters
    ----------
    api_key : str
        Antares access key, sent as the ``X-M2M-Origin`` header.
    base_url : str
        Antares platform URL. Defaults to the public HTTPS endpoint.
    application : str
        Antares application name holding the device.
    device : str
        Antares device whose latest content instance carries the counters.
    poll_interval : float
        Seconds between two fetch cycles.
    request_timeout : float
        Total timeout for one HTTP request in seconds.
    time_zone : str or None
        IANA time zone used to decide which calendar day it is.  ``None``
        uses the host's local time.
    baseline_path : str or None
        JSON file the daily baseline is persisted to.  ``None`` keeps the
        baseline in memory only.
    baseline_key : str
        Record name of the baseline inside the store.
    """

    api_key: str
    base_url: str = BASE_URL
    application: str = DEFAULT_APPLICATION
    device: str = DEFAULT_DEVICE
    poll_interval: float = DEFAULT_POLL_INTERVAL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    time_zone: str | None = None
    baseline_path: str | None = None
    baseline_key: str = BASELINE_KEY

    def __post_init__(self) -> None:
        if not self.api_key or not self.api_key.strip():
            raise ParkirConfigError("api_key must be non-empty")
        if self.poll_interval <= 0:
            raise ParkirConfigError(f"poll_interval must be positive, got {self.poll_interval}")
        if self.request_timeout <= 0:
            raise ParkirConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        if self.time_zone is not None:
            try:
                ZoneInfo(self.time_zone)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise ParkirConfigError(f"unknown time_zone {self.time_zone!r}") from exc

    @property
    def latest_path(self) -> str:
        """Path of the device's latest content instance (oneM2M ``la``)."""
        return f"{CSE_PATH}/{self.application}/{self.device}/la"

    @property
    def tz(self) -> tzinfo | None:
        return ZoneInfo(self.time_zone) if self.time_zone else None

    def today(self) -> date:
        """Current calendar date in the configured time zone."""
        return datetime.now(self.tz).date()

    @classmethod
    def from_env(cls, **overrides: Any) -> AntaresConfig:
        """Create configuration from environment variables.

        Reads ``ANTARES_API_KEY`` and the optional ``ANTARES_*`` variables
        below.  Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        AntaresConfig
            Populated configuration.

        Raises
        ------
        ParkirConfigError
            If the API key is missing or a numeric variable is not a number.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "ANTARES_API_KEY": "api_key",
            "ANTARES_BASE_URL": "base_url",
            "ANTARES_APPLICATION": "application",
            "ANTARES_DEVICE": "device",
            "ANTARES_TIME_ZONE": "time_zone",
            "ANTARES_BASELINE_PATH": "baseline_path",
            "ANTARES_BASELINE_KEY": "baseline_key",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        # numeric fields, handled separately
        for env_key, field_name in (
            ("ANTARES_POLL_INTERVAL", "poll_interval"),
            ("ANTARES_REQUEST_TIMEOUT", "request_timeout"),
        ):
            val = env.get(env_key)
            if val is not None and field_name not in overrides:
                config_kwargs[field_name] = _env_float(env_key, val)

        config_kwargs.update(overrides)

        if "api_key" not in config_kwargs:
            raise ParkirConfigError("ANTARES_API_KEY is not set")

        return cls(**config_kwargs)
