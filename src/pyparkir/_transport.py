"""HTTP transport for the Antares oneM2M REST API."""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import aiohttp

from pyparkir._constants import ORIGIN_HEADER
from pyparkir._redact import redact_for_log
from pyparkir.config import AntaresConfig
from pyparkir.exceptions import ParkirTransportError

_logger = logging.getLogger(__name__)


def _preview(payload: bytes, limit: int = 200) -> str:
    return payload[:limit].decode("utf-8", errors="replace")


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`AntaresTransport`) concrete.
    """

    async def get_json(self, endpoint: str) -> dict[str, Any]:
        ...


class AntaresTransport:
    """HTTP transport that authenticates with the static Antares access key."""

    def __init__(
        self,
        config: AntaresConfig,
        http_session: aiohttp.ClientSession,
    ) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    def _headers(self) -> dict[str, str]:
        return {
            ORIGIN_HEADER: self._config.api_key,
            "Accept": "application/json",
        }

    async def get_json(self, endpoint: str) -> dict[str, Any]:
        """GET *endpoint* and return the decoded JSON object.

        Raises
        ------
        ParkirTransportError
            On network failure, timeout, a non-200 status, or a body that
            is not a UTF-8 JSON object.
        """
        url = f"{self._config.base_url}{endpoint}"
        headers = self._headers()

        _logger.debug("GET %s headers=%s", url, redact_for_log(headers))

        try:
            async with self._http.get(url, headers=headers, timeout=self._timeout) as resp:
                payload = await resp.read()
                if resp.status != 200:
                    raise ParkirTransportError(
                        f"HTTP {resp.status} from {endpoint}: {_preview(payload)}",
                        status_code=resp.status,
                        endpoint=endpoint,
                    )
        except ParkirTransportError:
            raise
        except TimeoutError as exc:
            raise ParkirTransportError(
                f"Request to {endpoint} timed out after {self._config.request_timeout}s",
                endpoint=endpoint,
            ) from exc
        except aiohttp.ClientError as exc:
            raise ParkirTransportError(
                f"Request to {endpoint} failed: {exc}",
                endpoint=endpoint,
            ) from exc

        try:
            body: Any = json.loads(payload.decode("utf-8"))
        except ValueError as exc:
            # UnicodeDecodeError and JSONDecodeError both land here.
            raise ParkirTransportError(
                f"Invalid JSON from {endpoint}: {_preview(payload)}",
                status_code=200,
                endpoint=endpoint,
            ) from exc

        if not isinstance(body, dict):
            raise ParkirTransportError(
                f"Expected a JSON object from {endpoint}, got {type(body).__name__}",
                status_code=200,
                endpoint=endpoint,
            )

        _logger.debug("Response %s: %s", endpoint, redact_for_log(body))
        return body
