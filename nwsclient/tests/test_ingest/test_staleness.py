"""Tests for forecast staleness checks with boundary conditions."""

from datetime import UTC, datetime

from nwsclient.ingest.staleness import forecast_age_hours, is_forecast_stale
from nwsclient.models.forecast import Forecast


def _forecast(updated: datetime) -> Forecast:
    return Forecast(update_time=updated)


class TestIsForecastStale:
    def test_fresh(self):
        now = datetime(2026, 2, 10, 12, 0, 0, tzinfo=UTC)
        forecast = _forecast(datetime(2026, 2, 10, 10, 0, 0, tzinfo=UTC))
        assert is_forecast_stale(forecast, 360, now) is False

    def test_stale(self):
        now = datetime(2026, 2, 10, 20, 0, 0, tzinfo=UTC)
        forecast = _forecast(datetime(2026, 2, 10, 10, 0, 0, tzinfo=UTC))
        assert is_forecast_stale(forecast, 360, now) is True

    def test_boundary_exact(self):
        now = datetime(2026, 2, 10, 12, 30, 0, tzinfo=UTC)
        forecast = _forecast(datetime(2026, 2, 10, 12, 0, 0, tzinfo=UTC))
        # Exactly 30 minutes = not stale (>30 is stale)
        assert is_forecast_stale(forecast, 30, now) is False


class TestForecastAgeHours:
    def test_calculation(self):
        now = datetime(2026, 2, 10, 18, 0, 0, tzinfo=UTC)
        forecast = _forecast(datetime(2026, 2, 10, 12, 0, 0, tzinfo=UTC))
        assert forecast_age_hours(forecast, now) == 6.0
