"""Tests for the forecast normalizer (semidaily and hourly)."""

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from nwsclient.errors import ErrorKind, MissingIdentity
from nwsclient.ingest.forecast_parser import parse_forecast
from nwsclient.models.common import EMPTY_VALUE, ValueUnit

FIXTURE_DIR = Path(__file__).parent.parent / "fixtures"
NOW = datetime(2019, 8, 28, 23, 0, tzinfo=UTC)


def _load(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


def _hourly_payload(count: int, missing_start: int) -> dict:
    start = datetime(2019, 8, 28, 22, 0, tzinfo=UTC)
    periods = []
    for i in range(count):
        period = {
            "number": i + 1,
            "name": "",
            "startTime": (start + timedelta(hours=i)).isoformat(),
            "endTime": (start + timedelta(hours=i + 1)).isoformat(),
            "isDaytime": True,
            "temperature": 70,
            "temperatureUnit": "F",
            "windSpeed": "5 mph",
            "windDirection": "NW",
            "shortForecast": "Sunny",
            "detailedForecast": "",
        }
        if i == missing_start:
            del period["startTime"]
        periods.append(period)
    return {"properties": {"updateTime": "2019-08-28T21:47:15+00:00", "periods": periods}}


class TestParseForecast:
    def test_semidaily_fixture(self):
        forecast = parse_forecast((FIXTURE_DIR / "forecast.json").read_bytes(), now=NOW)
        assert forecast.update_time == datetime(2019, 8, 28, 21, 47, 15, tzinfo=UTC)
        assert forecast.retrieval_time == NOW
        assert [p.number for p in forecast.periods] == [1, 2, 3, 4]

    def test_period_fields(self):
        forecast = parse_forecast((FIXTURE_DIR / "forecast.json").read_bytes(), now=NOW)
        first, second = forecast.periods[0], forecast.periods[1]
        assert first.name == "This Afternoon"
        assert first.is_daytime is True
        assert first.temperature == ValueUnit(98, "F")
        assert first.temperature_trend == ""
        assert first.wind_speed_min == ValueUnit(5, "mph")
        assert first.wind_speed_max == ValueUnit(5, "mph")
        assert first.wind_direction == "NW"
        assert first.short_forecast == "Sunny"
        assert second.is_daytime is False
        assert second.temperature_trend == "rising"
        assert second.wind_speed_min == ValueUnit(2, "mph")
        assert second.wind_speed_max == ValueUnit(7, "mph")

    def test_best_effort_fields(self):
        forecast = parse_forecast((FIXTURE_DIR / "forecast.json").read_bytes(), now=NOW)
        thursday, thursday_night = forecast.periods[2], forecast.periods[3]
        # unit "K" is not accepted
        assert thursday.temperature == EMPTY_VALUE
        assert thursday.wind_speed_min == EMPTY_VALUE
        assert thursday.wind_speed_max == EMPTY_VALUE
        assert thursday_night.wind_speed_min == ValueUnit(3, "")
        assert thursday_night.wind_speed_max == ValueUnit(8, "")

    def test_hourly_fixture_skips_period_without_start(self):
        raw = _load("forecast_hourly.json")
        forecast = parse_forecast(json.dumps(raw), now=NOW)
        assert len(forecast.periods) == len(raw["properties"]["periods"]) - 1
        assert 3 not in [p.number for p in forecast.periods]
        starts = [p.start for p in forecast.periods]
        assert starts == sorted(starts)

    def test_hourly_numeric_temperature(self):
        forecast = parse_forecast((FIXTURE_DIR / "forecast_hourly.json").read_bytes())
        assert forecast.periods[0].temperature == ValueUnit(97, "F")

    def test_large_hourly_payload(self):
        payload = _hourly_payload(104, missing_start=40)
        forecast = parse_forecast(json.dumps(payload), now=NOW)
        assert len(forecast.periods) == 103
        starts = [p.start for p in forecast.periods]
        assert all(a < b for a, b in zip(starts, starts[1:]))

    @pytest.mark.parametrize(
        "field, value",
        [("number", "one"), ("number", None), ("number", "1_2"), ("startTime", "soon"),
         ("startTime", "2019-08-28"), ("endTime", None)],
    )
    def test_identity_fields_skip_period(self, field: str, value):
        payload = _hourly_payload(3, missing_start=-1)
        payload["properties"]["periods"][1][field] = value
        forecast = parse_forecast(json.dumps(payload), now=NOW)
        assert [p.number for p in forecast.periods] == [1, 3]

    @pytest.mark.parametrize("update_time", [None, "", "yesterday", "2019-08-28"])
    def test_bad_update_time_fails(self, update_time):
        payload = _load("forecast.json")
        payload["properties"]["updateTime"] = update_time
        with pytest.raises(MissingIdentity) as exc:
            parse_forecast(json.dumps(payload), now=NOW)
        assert exc.value.kind == ErrorKind.MISSING_IDENTITY

    def test_missing_update_time_fails(self):
        payload = _load("forecast.json")
        del payload["properties"]["updateTime"]
        with pytest.raises(MissingIdentity):
            parse_forecast(json.dumps(payload))

    def test_no_periods(self):
        forecast = parse_forecast(
            json.dumps({"properties": {"updateTime": "2019-08-28T21:47:15+00:00"}})
        )
        assert forecast.periods == ()
