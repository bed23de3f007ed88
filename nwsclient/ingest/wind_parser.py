"""Decode forecast wind speed text such as "5 mph" or "2 to 7 mph"."""

from nwsclient.ingest.envelope import as_float
from nwsclient.models.common import EMPTY_VALUE, ValueUnit
from nwsclient.models.forecast import WindSpeed, WindSpeedForm

WIND_SPEED_UNIT = "mph"


def _measure(magnitude: str, unit: str) -> ValueUnit:
    """Build a ValueUnit, keeping the magnitude even if the unit is foreign."""
    value = as_float(magnitude)
    if value is None:
        return EMPTY_VALUE
    return ValueUnit(value, unit if unit == WIND_SPEED_UNIT else "")


def parse_wind_speed(text: str) -> WindSpeed:
    """Tokenize on whitespace and match the two known shapes.

    "<value> <unit>" gives a single speed used for both bounds,
    "<min> to <max> <unit>" gives a range. Anything else is unrecognized
    and both bounds stay empty.
    """
    tokens = text.split() if isinstance(text, str) else []

    if len(tokens) == 2:
        speed = _measure(tokens[0], tokens[1])
        return WindSpeed(WindSpeedForm.SINGLE, speed, speed)

    if len(tokens) == 4:
        low, _, high, unit = tokens
        return WindSpeed(
            WindSpeedForm.RANGE,
            _measure(low, unit),
            _measure(high, unit),
        )

    return WindSpeed(WindSpeedForm.UNRECOGNIZED)
