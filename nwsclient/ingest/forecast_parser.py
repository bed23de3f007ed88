"""Normalize semidaily and hourly forecast responses.

Both endpoints return the same shape; they differ only in period length
and in the request path.
"""

import logging
from datetime import datetime
from typing import Any

from nwsclient.errors import MissingIdentity
from nwsclient.ingest.envelope import (
    as_float,
    as_int,
    as_text,
    decode_envelope,
    parse_timestamp,
    properties_of,
)
from nwsclient.ingest.wind_parser import parse_wind_speed
from nwsclient.models.common import EMPTY_VALUE, ValueUnit, utc_now
from nwsclient.models.forecast import Forecast, Period

logger = logging.getLogger(__name__)

TEMPERATURE_UNITS = frozenset({"F", "C"})


def parse_forecast(body: bytes | str, now: datetime | None = None) -> Forecast:
    """Build a Forecast; raises MissingIdentity without a valid updateTime.

    Periods without a valid number, start or end are skipped. Every other
    period field is best effort.
    """
    if now is None:
        now = utc_now()

    props = properties_of(decode_envelope(body))
    update_time = parse_timestamp(props.get("updateTime"))
    if update_time is None:
        raise MissingIdentity(
            f'forecast updateTime is missing or invalid: "{props.get("updateTime")}"'
        )

    raw_periods = props.get("periods")
    if not isinstance(raw_periods, list):
        raw_periods = []

    periods: list[Period] = []
    for raw in raw_periods:
        period = _parse_period(raw) if isinstance(raw, dict) else None
        if period is None:
            logger.debug("Skipping malformed forecast period: %r", raw)
            continue
        periods.append(period)

    if len(periods) < len(raw_periods):
        logger.info(
            "Kept %d of %d forecast periods", len(periods), len(raw_periods)
        )
    return Forecast(update_time=update_time, periods=tuple(periods), retrieval_time=now)


def _parse_period(raw: dict[str, Any]) -> Period | None:
    number = as_int(raw.get("number"))
    start = parse_timestamp(raw.get("startTime"))
    end = parse_timestamp(raw.get("endTime"))
    if number is None or start is None or end is None:
        return None

    wind = parse_wind_speed(as_text(raw.get("windSpeed")))
    return Period(
        number=number,
        start=start,
        end=end,
        name=as_text(raw.get("name")),
        is_daytime=raw.get("isDaytime") is True,
        temperature=_temperature(raw.get("temperature"), raw.get("temperatureUnit")),
        temperature_trend=as_text(raw.get("temperatureTrend")),
        wind_speed_min=wind.minimum,
        wind_speed_max=wind.maximum,
        wind_direction=as_text(raw.get("windDirection")),
        short_forecast=as_text(raw.get("shortForecast")),
        detailed_forecast=as_text(raw.get("detailedForecast")),
    )


def _temperature(value: Any, unit: Any) -> ValueUnit:
    magnitude = as_float(value)
    unit = as_text(unit)
    if magnitude is None or unit not in TEMPERATURE_UNITS:
        return EMPTY_VALUE
    return ValueUnit(magnitude, unit)
