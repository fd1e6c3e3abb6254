"""Tests for pydantic model parsing of counters, baselines and envelopes."""

from __future__ import annotations

import locale
from datetime import UTC, date, datetime

import pytest
from pydantic import ValidationError

from pyparkir.models.baseline import DailyBaseline
from pyparkir.models.counters import ContentInstance, RawCounters
from pyparkir.models.status import DashboardState, DerivedStatus

# ------------------------------------------------------------------
# RawCounters
# ------------------------------------------------------------------


class TestRawCounters:
    def test_wire_keys(self) -> None:
        raw = RawCounters.model_validate({"carMasuk": 12, "carKeluar": 4, "slotTersisa": 2})

        assert raw.vehicles_in_total == 12
        assert raw.vehicles_out_total == 4
        assert raw.slots_remaining_reported == 2

    def test_missing_and_null_counters_default(self) -> None:
        raw = RawCounters.model_validate({"carKeluar": None})

        assert raw.vehicles_in_total == 0
        assert raw.vehicles_out_total == 0
        assert raw.slots_remaining_reported is None

    def test_empty_string_counter_defaults(self) -> None:
        raw = RawCounters.model_validate({"carMasuk": 7, "carKeluar": ""})

        assert raw.vehicles_in_total == 7
        assert raw.vehicles_out_total == 0

    @pytest.mark.parametrize("value", [True, "7", 5.0, 5.5])
    def test_non_integer_counter_rejected(self, value: object) -> None:
        with pytest.raises(ValidationError):
            RawCounters.model_validate({"carMasuk": value})

    def test_non_integer_reported_slots_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RawCounters.model_validate({"slotTersisa": "3"})

    def test_raw_payload_stashed(self) -> None:
        payload = {"carMasuk": 1, "extra": "x"}
        raw = RawCounters.model_validate(payload)

        assert raw.raw == payload

    def test_negative_counter_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RawCounters.model_validate({"carMasuk": -1})

    def test_non_numeric_counter_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RawCounters.model_validate({"carMasuk": "many"})


# ------------------------------------------------------------------
# DailyBaseline
# ------------------------------------------------------------------


class TestDailyBaseline:
    def test_record_round_trip_uses_wire_keys(self) -> None:
        baseline = DailyBaseline(baseline_in=50, baseline_out=47, for_date=date(2026, 10, 19))

        record = baseline.to_record()

        assert record == {"carMasuk": 50, "carKeluar": 47, "date": "2026-10-19"}
        assert DailyBaseline.from_record(record) == baseline

    def test_browser_date_string_accepted(self) -> None:
        baseline = DailyBaseline.from_record({"carMasuk": 3, "carKeluar": 1, "date": "Mon Oct 19 2026"})

        assert baseline.for_date == date(2026, 10, 19)

    def test_browser_date_string_ignores_host_locale(self) -> None:
        previous = locale.setlocale(locale.LC_TIME)
        try:
            locale.setlocale(locale.LC_TIME, "de_DE.UTF-8")
        except locale.Error:
            pytest.skip("de_DE.UTF-8 locale not installed")
        try:
            baseline = DailyBaseline.from_record({"carMasuk": 3, "carKeluar": 1, "date": "Thu Dec 31 2026"})
        finally:
            locale.setlocale(locale.LC_TIME, previous)

        assert baseline.for_date == date(2026, 12, 31)

    @pytest.mark.parametrize("text", ["Mon Okt 19 2026", "Mo Oct 19 2026", "Mon Oct 32 2026", "Mon Oct 19"])
    def test_malformed_browser_date_rejected(self, text: str) -> None:
        with pytest.raises(ValidationError):
            DailyBaseline.from_record({"carMasuk": 3, "carKeluar": 1, "date": text})

    def test_unknown_date_format_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DailyBaseline.from_record({"carMasuk": 3, "carKeluar": 1, "date": "yesterday"})

    def test_missing_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            DailyBaseline.from_record({"carMasuk": 3, "date": "2026-10-19"})


# ------------------------------------------------------------------
# ContentInstance
# ------------------------------------------------------------------


class TestContentInstance:
    SAMPLE_CIN: dict = {
        "rn": "cin_8a1b2c",
        "ty": 4,
        "ri": "/antares-cse/cin-8a1b2c",
        "pi": "/antares-cse/cnt-123",
        "ct": "20261019T101500",
        "lt": "20261019T101500",
        "st": 0,
        "cnf": "text/plain:0",
        "cs": 47,
        "con": '{"carMasuk":5,"carKeluar":2,"slotTersisa":7}',
    }

    def test_parses_metadata(self) -> None:
        cin = ContentInstance.model_validate(self.SAMPLE_CIN)

        assert cin.resource_name == "cin_8a1b2c"
        assert cin.content_info == "text/plain:0"
        assert cin.created_at == datetime(2026, 10, 19, 10, 15, 0, tzinfo=UTC)
        assert isinstance(cin.content, str)

    def test_fractional_timestamp(self) -> None:
        cin = ContentInstance.model_validate({**self.SAMPLE_CIN, "ct": "20261019T101500,123456"})

        assert cin.created_at == datetime(2026, 10, 19, 10, 15, 0, tzinfo=UTC)

    def test_bad_timestamp_is_none(self) -> None:
        cin = ContentInstance.model_validate({**self.SAMPLE_CIN, "ct": "not-a-time"})

        assert cin.created_at is None

    def test_content_required(self) -> None:
        payload = dict(self.SAMPLE_CIN)
        del payload["con"]

        with pytest.raises(ValidationError):
            ContentInstance.model_validate(payload)


# ------------------------------------------------------------------
# DashboardState
# ------------------------------------------------------------------


def test_dashboard_state_defaults() -> None:
    state = DashboardState()

    assert state.status is None
    assert state.loading is False
    assert state.error is None
    assert state.last_update is None


def test_derived_status_is_frozen() -> None:
    status = DerivedStatus(
        vehicles_in_today=1,
        vehicles_out_today=0,
        slots_occupied=1,
        slots_available=9,
        is_full=False,
    )

    with pytest.raises(ValidationError):
        status.slots_occupied = 5  # type: ignore[misc]
