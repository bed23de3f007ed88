"""Forecast data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from nwsclient.models.common import EMPTY_VALUE, ValueUnit, utc_now


class WindSpeedForm(StrEnum):
    SINGLE = "single"  # "5 mph"
    RANGE = "range"  # "2 to 7 mph"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class WindSpeed:
    form: WindSpeedForm
    minimum: ValueUnit = EMPTY_VALUE
    maximum: ValueUnit = EMPTY_VALUE


@dataclass(frozen=True)
class Period:
    number: int
    start: datetime
    end: datetime
    name: str = ""
    is_daytime: bool = False
    temperature: ValueUnit = EMPTY_VALUE
    temperature_trend: str = ""
    wind_speed_min: ValueUnit = EMPTY_VALUE
    wind_speed_max: ValueUnit = EMPTY_VALUE
    wind_direction: str = ""
    short_forecast: str = ""
    detailed_forecast: str = ""


@dataclass(frozen=True)
class Forecast:
    """A semidaily or hourly forecast; both share this shape."""

    update_time: datetime
    periods: tuple[Period, ...] = ()
    retrieval_time: datetime = field(default_factory=utc_now)
