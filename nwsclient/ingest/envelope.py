"""Decoding helpers for api.weather.gov GeoJSON envelopes.

Upstream types are loose: numbers arrive as JSON numbers or as strings,
optional fields are missing or null. These helpers coerce a raw value or
return None, leaving the keep-or-skip decision to the caller.
"""

import json
import math
import re
from datetime import UTC, datetime
from typing import Any

from nwsclient.errors import MalformedEnvelope

# Full date and time of day; a bare date is not a timestamp.
_DATETIME_SHAPE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}")
_INTEGER_SHAPE = re.compile(r"[+-]?[0-9]+")


def decode_envelope(body: bytes | str) -> dict[str, Any]:
    """Decode a response body into its top-level JSON object."""
    try:
        doc = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedEnvelope(f"response is not valid JSON: {e}") from e
    if not isinstance(doc, dict):
        raise MalformedEnvelope(
            f"expected a JSON object, got {type(doc).__name__}"
        )
    return doc


def properties_of(doc: dict[str, Any]) -> dict[str, Any]:
    """Return the `properties` object of a singular-endpoint document."""
    props = doc.get("properties")
    if props is None:
        return {}
    if not isinstance(props, dict):
        raise MalformedEnvelope("`properties` must be a JSON object")
    return props


def features_of(doc: dict[str, Any]) -> list[dict[str, Any]]:
    """Return the feature list of a collection document.

    Entries that are not objects are dropped here; the caller never sees them.
    """
    features = doc.get("features")
    if features is None:
        return []
    if not isinstance(features, list):
        raise MalformedEnvelope("`features` must be a JSON array")
    return [f for f in features if isinstance(f, dict)]


def nested(obj: Any, *keys: str) -> Any:
    """Walk nested objects, returning None as soon as a level is missing."""
    for key in keys:
        if not isinstance(obj, dict):
            return None
        obj = obj.get(key)
    return obj


def as_text(value: Any) -> str:
    if value is None or isinstance(value, dict | list):
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def as_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return result if math.isfinite(result) else None


def as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        digits = value.strip()
        if not _INTEGER_SHAPE.fullmatch(digits):
            return None
        return int(digits)
    return None


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an RFC 3339 / ISO 8601 timestamp. Naive times are taken as UTC."""
    if not isinstance(value, str) or not _DATETIME_SHAPE.match(value):
        return None
    try:
        dt = datetime.fromisoformat(value)
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt
