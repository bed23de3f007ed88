"""Common types and helpers shared across models."""

import math
from dataclasses import dataclass
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal

# api.weather.gov rejects (301-redirects) coordinates finer than this.
COORDINATE_DECIMALS = 4
_QUANTUM = Decimal(1).scaleb(-COORDINATE_DECIMALS)


def utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class ValueUnit:
    """A measured quantity. An empty unit means the value is absent."""

    magnitude: float = 0.0
    unit: str = ""

    @property
    def is_empty(self) -> bool:
        return self.unit == ""


EMPTY_VALUE = ValueUnit()


def round_coordinate(value: float) -> float:
    """Round to four decimal places, halves away from zero."""
    if not math.isfinite(value):
        return value
    rounded = Decimal(repr(float(value))).quantize(_QUANTUM, rounding=ROUND_HALF_UP)
    return float(rounded)


@dataclass(frozen=True)
class Point:
    """A WGS 84 coordinate, rounded to four decimals at construction."""

    latitude: float = 0.0
    longitude: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "latitude", round_coordinate(self.latitude))
        object.__setattr__(self, "longitude", round_coordinate(self.longitude))

    def as_query(self) -> str:
        """Format as the "lat,lon" pair used in request paths and queries."""
        return f"{self.latitude},{self.longitude}"
