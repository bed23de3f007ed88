"""Freshness checks for forecasts, based on their upstream update time."""

from datetime import UTC, datetime

from nwsclient.models.forecast import Forecast


def forecast_age_hours(forecast: Forecast, now: datetime | None = None) -> float:
    """Hours elapsed since the forecast was last updated upstream."""
    if now is None:
        now = datetime.now(UTC)
    return (now - forecast.update_time).total_seconds() / 3600


def is_forecast_stale(
    forecast: Forecast, max_age_minutes: int, now: datetime | None = None
) -> bool:
    """Check if a forecast is older than max_age_minutes (equal is fresh)."""
    if now is None:
        now = datetime.now(UTC)
    age_minutes = (now - forecast.update_time).total_seconds() / 60
    return age_minutes > max_age_minutes
