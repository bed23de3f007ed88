"""Station observation model."""

from dataclasses import dataclass, field
from datetime import datetime

from nwsclient.models.common import EMPTY_VALUE, ValueUnit, utc_now


@dataclass(frozen=True)
class Observation:
    station_id: str
    observed_time: datetime
    retrieval_time: datetime = field(default_factory=utc_now)

    temperature: ValueUnit = EMPTY_VALUE
    dewpoint: ValueUnit = EMPTY_VALUE
    wind_direction: ValueUnit = EMPTY_VALUE
    wind_speed: ValueUnit = EMPTY_VALUE
    wind_gust: ValueUnit = EMPTY_VALUE
    barometric_pressure: ValueUnit = EMPTY_VALUE
    sea_level_pressure: ValueUnit = EMPTY_VALUE
    visibility: ValueUnit = EMPTY_VALUE
    temperature_last_24h_min: ValueUnit = EMPTY_VALUE
    temperature_last_24h_max: ValueUnit = EMPTY_VALUE
    precipitation_last_hour: ValueUnit = EMPTY_VALUE
    precipitation_last_3h: ValueUnit = EMPTY_VALUE
    precipitation_last_6h: ValueUnit = EMPTY_VALUE
    relative_humidity: ValueUnit = EMPTY_VALUE
    wind_chill: ValueUnit = EMPTY_VALUE
    heat_index: ValueUnit = EMPTY_VALUE

    raw_message: str = ""  # METAR text, not decoded
