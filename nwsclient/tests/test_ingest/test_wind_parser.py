"""Tests for forecast wind speed text decoding."""

import pytest

from nwsclient.ingest.wind_parser import parse_wind_speed
from nwsclient.models.common import EMPTY_VALUE, ValueUnit
from nwsclient.models.forecast import WindSpeedForm


class TestParseWindSpeed:
    def test_single(self):
        ws = parse_wind_speed("5 mph")
        assert ws.form == WindSpeedForm.SINGLE
        assert ws.minimum == ValueUnit(5, "mph")
        assert ws.maximum == ValueUnit(5, "mph")

    def test_range(self):
        ws = parse_wind_speed("2 to 7 mph")
        assert ws.form == WindSpeedForm.RANGE
        assert ws.minimum == ValueUnit(2, "mph")
        assert ws.maximum == ValueUnit(7, "mph")

    def test_extra_whitespace(self):
        ws = parse_wind_speed("  10   to 15  mph ")
        assert ws.minimum == ValueUnit(10, "mph")
        assert ws.maximum == ValueUnit(15, "mph")

    @pytest.mark.parametrize("text", ["calm", "", "10 to 15 mph with gusts", "to mph gusty"])
    def test_unrecognized(self, text: str):
        ws = parse_wind_speed(text)
        assert ws.form == WindSpeedForm.UNRECOGNIZED
        assert ws.minimum == EMPTY_VALUE
        assert ws.maximum == EMPTY_VALUE

    def test_foreign_unit_keeps_magnitude(self):
        ws = parse_wind_speed("3 to 8 km/h")
        assert ws.minimum == ValueUnit(3, "")
        assert ws.maximum == ValueUnit(8, "")

    def test_single_foreign_unit(self):
        ws = parse_wind_speed("12 kt")
        assert ws.minimum == ValueUnit(12, "")
        assert ws.maximum is ws.minimum

    def test_non_numeric_magnitude(self):
        ws = parse_wind_speed("light mph")
        assert ws.form == WindSpeedForm.SINGLE
        assert ws.minimum == EMPTY_VALUE

    def test_range_partial_numeric(self):
        ws = parse_wind_speed("x to 9 mph")
        assert ws.minimum == EMPTY_VALUE
        assert ws.maximum == ValueUnit(9, "mph")
