"""Custom exception hierarchy for pyparkir."""

from __future__ import annotations


class ParkirError(Exception):
    """Base exception for all pyparkir errors."""


class ParkirConfigError(ParkirError):
    """Invalid or missing configuration."""


class ParkirTransportError(ParkirError):
    """HTTP-level failure (network, timeout, non-200, invalid JSON body)."""

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


class ParkirDataFormatError(ParkirError):
    """Payload could not be turned into counters.

    Raised for structural problems only: a missing content instance, a
    ``con`` field that is not JSON, or a counter that is not a
    non-negative integer.  An individually absent counter is not an
    error; it defaults to ``0``.
    """

    def __init__(self, message: str, *, endpoint: str = "") -> None:
        self.endpoint = endpoint
        super().__init__(message)
