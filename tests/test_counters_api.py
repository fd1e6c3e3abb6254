from __future__ import annotations

import json
from datetime import UTC, datetime
from typing import Any

import pytest

from pyparkir._api._envelope import unwrap_content
from pyparkir._api.counters import fetch_latest_counters, parse_counters
from pyparkir.config import AntaresConfig
from pyparkir.exceptions import ParkirDataFormatError


class _StaticTransport:
    def __init__(self, response: dict[str, Any]) -> None:
        self._response = response
        self.endpoints: list[str] = []

    async def get_json(self, endpoint: str) -> dict[str, Any]:
        self.endpoints.append(endpoint)
        return self._response


def _config() -> AntaresConfig:
    return AntaresConfig(api_key="key:secret")


def _envelope(con: Any, **extra: Any) -> dict[str, Any]:
    return {"m2m:cin": {"rn": "cin_1", "ct": "20261019T080000", "con": con, **extra}}


# ------------------------------------------------------------------
# parse_counters
# ------------------------------------------------------------------


def test_parse_counters_from_json_string() -> None:
    raw = parse_counters(json.dumps({"carMasuk": 8, "carKeluar": 3, "slotTersisa": 5}))

    assert raw.vehicles_in_total == 8
    assert raw.vehicles_out_total == 3
    assert raw.slots_remaining_reported == 5


def test_parse_counters_accepts_decoded_dict() -> None:
    raw = parse_counters({"carMasuk": 2})

    assert raw.vehicles_in_total == 2
    assert raw.vehicles_out_total == 0


def test_parse_counters_non_json_raises() -> None:
    with pytest.raises(ParkirDataFormatError):
        parse_counters("carMasuk=5;carKeluar=2")


@pytest.mark.parametrize("content", ["[1, 2]", "42", '"text"', "null"])
def test_parse_counters_non_object_raises(content: str) -> None:
    with pytest.raises(ParkirDataFormatError):
        parse_counters(content)


@pytest.mark.parametrize(
    "content",
    ['{"carMasuk": "lots"}', '{"carMasuk": true}', '{"carMasuk": "7"}', '{"carKeluar": 5.0}'],
)
def test_parse_counters_invalid_value_raises(content: str) -> None:
    with pytest.raises(ParkirDataFormatError) as exc_info:
        parse_counters(content, endpoint="/la")

    assert exc_info.value.endpoint == "/la"


def test_parse_counters_empty_object_defaults_to_zero() -> None:
    raw = parse_counters("{}")

    assert raw.vehicles_in_total == 0
    assert raw.vehicles_out_total == 0
    assert raw.slots_remaining_reported is None


# ------------------------------------------------------------------
# unwrap_content
# ------------------------------------------------------------------


def test_unwrap_content_missing_cin_raises() -> None:
    with pytest.raises(ParkirDataFormatError):
        unwrap_content({"m2m:dbg": "Resource does not exist"})


def test_unwrap_content_missing_con_raises() -> None:
    with pytest.raises(ParkirDataFormatError):
        unwrap_content({"m2m:cin": {"rn": "cin_1"}})


# ------------------------------------------------------------------
# fetch_latest_counters
# ------------------------------------------------------------------


@pytest.mark.asyncio
async def test_fetch_latest_counters_requests_latest_path() -> None:
    transport = _StaticTransport(_envelope('{"carMasuk": 11, "carKeluar": 6}'))

    raw = await fetch_latest_counters(_config(), transport)

    assert transport.endpoints == ["/~/antares-cse/antares-id/ParkiranSistem/slotParkir/la"]
    assert raw.vehicles_in_total == 11
    assert raw.vehicles_out_total == 6
    assert raw.observed_at == datetime(2026, 10, 19, 8, 0, 0, tzinfo=UTC)


@pytest.mark.asyncio
async def test_fetch_latest_counters_malformed_content_raises() -> None:
    transport = _StaticTransport(_envelope("{not json"))

    with pytest.raises(ParkirDataFormatError) as exc_info:
        await fetch_latest_counters(_config(), transport)

    assert exc_info.value.endpoint.endswith("/la")
