"""Normalize a latest-observation response into an Observation."""

import logging
import re
from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any

from nwsclient.errors import MissingIdentity
from nwsclient.ingest.envelope import (
    as_float,
    as_text,
    decode_envelope,
    parse_timestamp,
    properties_of,
)
from nwsclient.models.common import EMPTY_VALUE, ValueUnit, utc_now
from nwsclient.models.observation import Observation

logger = logging.getLogger(__name__)

STATION_PATH = re.compile(r"/stations/([^/]*)", re.IGNORECASE)

# Upstream unit codes → canonical labels. The service has moved from the
# "unit:" prefix to "wmoUnit:"; both are accepted.
_UNIT_LABELS = {
    "degC": "C",
    "degree_(angle)": "degrees true",
    "m_s-1": "m/s",
    "km_h-1": "km/h",
    "Pa": "Pa",
    "m": "m",
    "percent": "percent",
}
OBSERVATION_UNIT_CODES: Mapping[str, str] = MappingProxyType({
    f"{prefix}:{code}": label
    for prefix in ("unit", "wmoUnit")
    for code, label in _UNIT_LABELS.items()
})

# Observation attribute → upstream property name.
MEASURED_FIELDS: Mapping[str, str] = MappingProxyType({
    "temperature": "temperature",
    "dewpoint": "dewpoint",
    "wind_direction": "windDirection",
    "wind_speed": "windSpeed",
    "wind_gust": "windGust",
    "barometric_pressure": "barometricPressure",
    "sea_level_pressure": "seaLevelPressure",
    "visibility": "visibility",
    "temperature_last_24h_min": "minTemperatureLast24Hours",
    "temperature_last_24h_max": "maxTemperatureLast24Hours",
    "precipitation_last_hour": "precipitationLastHour",
    "precipitation_last_3h": "precipitationLast3Hours",
    "precipitation_last_6h": "precipitationLast6Hours",
    "relative_humidity": "relativeHumidity",
    "wind_chill": "windChill",
    "heat_index": "heatIndex",
})


def parse_measurement(raw_value: Any, raw_unit_code: Any) -> ValueUnit:
    """Accept a quantity only if it is numeric and its unit code is known."""
    value = as_float(raw_value)
    label = OBSERVATION_UNIT_CODES.get(as_text(raw_unit_code))
    if value is None or label is None:
        return EMPTY_VALUE
    return ValueUnit(value, label)


def station_id_from_url(url: str) -> str:
    """Station id from a station URL on any host, or a bare id."""
    match = STATION_PATH.search(url)
    if match:
        return match.group(1)
    return url.strip("/")


def parse_observation(body: bytes | str, now: datetime | None = None) -> Observation:
    """Build an Observation; station id and observed time are required.

    Measured fields that are null, malformed or in an unknown unit are left
    empty without affecting the rest of the observation.
    """
    if now is None:
        now = utc_now()

    props = properties_of(decode_envelope(body))

    station = as_text(props.get("station"))
    station_id = station_id_from_url(station)
    if not station_id:
        raise MissingIdentity(f'station string invalid: "{station}"')

    observed = parse_timestamp(props.get("timestamp"))
    if observed is None:
        raise MissingIdentity(
            f'observation timestamp is missing or invalid: "{props.get("timestamp")}"'
        )

    measurements: dict[str, ValueUnit] = {}
    for attr, key in MEASURED_FIELDS.items():
        raw = props.get(key)
        if not isinstance(raw, dict):
            continue
        measurement = parse_measurement(raw.get("value"), raw.get("unitCode"))
        if measurement.is_empty:
            if raw.get("value") is not None:
                logger.debug(
                    "Station %s: ignoring %s=%r (%r)",
                    station_id, key, raw.get("value"), raw.get("unitCode"),
                )
            continue
        measurements[attr] = measurement

    return Observation(
        station_id=station_id.upper(),
        observed_time=observed,
        retrieval_time=now,
        raw_message=as_text(props.get("rawMessage")),
        **measurements,
    )
