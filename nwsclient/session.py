"""Client session for a single point on Earth.

A Session resolves its point to a gridpoint and station catalog when it is
constructed, then keeps the most recently fetched alerts, forecasts and
observations alongside the time each was retrieved.
"""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Protocol

from nwsclient.config.schema import ClientConfig
from nwsclient.errors import NoStationsAvailable, UnknownStation
from nwsclient.ingest.alert_parser import parse_alerts
from nwsclient.ingest.forecast_parser import parse_forecast
from nwsclient.ingest.nws_client import (
    ALERTS_ACTIVE_ENDPOINT,
    NwsClient,
    alerts_query,
    forecast_endpoint,
    hourly_forecast_endpoint,
    observation_endpoint,
    point_endpoint,
    stations_endpoint,
)
from nwsclient.ingest.observation_parser import parse_observation
from nwsclient.ingest.point_parser import parse_gridpoint
from nwsclient.ingest.station_parser import parse_stations
from nwsclient.models.alert import Alert
from nwsclient.models.common import Point, utc_now
from nwsclient.models.forecast import Forecast
from nwsclient.models.location import Gridpoint, Station
from nwsclient.models.observation import Observation

logger = logging.getLogger(__name__)


class Transport(Protocol):
    def fetch(self, endpoint: str, query: Mapping[str, str] | None = None) -> bytes: ...


class Session:
    """Weather data for one point, fetched on demand.

    Construction is fail-fast: it raises if the gridpoint or station catalog
    cannot be resolved, or if the catalog is empty. Sessions are not
    thread-safe; callers sharing one across threads must serialize access.
    """

    def __init__(
        self,
        latitude: float,
        longitude: float,
        transport: Transport,
        now: Callable[[], datetime] = utc_now,
    ):
        self.transport = transport
        self._now = now
        self._point = Point(latitude, longitude)

        self._gridpoint = parse_gridpoint(
            self.transport.fetch(point_endpoint(self._point))
        )
        self._stations: list[Station] = parse_stations(
            self.transport.fetch(stations_endpoint(self._gridpoint))
        )
        if not self._stations:
            raise NoStationsAvailable(
                f"no stations listed for gridpoint {self._gridpoint.office}/"
                f"{self._gridpoint.grid_x},{self._gridpoint.grid_y}"
            )
        self._default_station_id = self._stations[0].id

        self._alerts: list[Alert] = []
        self._alerts_last_retrieved: datetime | None = None
        self._semidaily_forecast: Forecast | None = None
        self._hourly_forecast: Forecast | None = None
        self._observations: dict[str, Observation] = {}

        logger.info(
            "Session ready for %s: gridpoint %s/%d,%d, %d stations, default %s",
            self._point.as_query(), self._gridpoint.office,
            self._gridpoint.grid_x, self._gridpoint.grid_y,
            len(self._stations), self._default_station_id,
        )

    @classmethod
    def from_config(
        cls, config: ClientConfig, latitude: float, longitude: float
    ) -> "Session":
        transport = NwsClient(
            base_url=config.base_url,
            user_agent=config.user_agent,
            timeout=config.timeout,
            max_retries=config.max_retries,
            retry_base_delay=config.retry_base_delay,
        )
        return cls(latitude, longitude, transport)

    @property
    def point(self) -> Point:
        return self._point

    @property
    def gridpoint(self) -> Gridpoint:
        return self._gridpoint

    @property
    def stations(self) -> tuple[Station, ...]:
        """Stations in upstream order, which appears to be nearest first."""
        return tuple(self._stations)

    @property
    def default_station_id(self) -> str:
        return self._default_station_id

    def station(self, station_id: str) -> Station:
        wanted = station_id.upper()
        for s in self._stations:
            if s.id == wanted:
                return s
        raise UnknownStation(f"station {station_id!r} is not near this point")

    def set_default_station_id(self, station_id: str) -> None:
        self._default_station_id = self.station(station_id).id

    # Last-fetched snapshots

    @property
    def alerts(self) -> list[Alert]:
        return list(self._alerts)

    @property
    def alerts_last_retrieved(self) -> datetime | None:
        return self._alerts_last_retrieved

    @property
    def semidaily_forecast(self) -> Forecast | None:
        return self._semidaily_forecast

    @property
    def semidaily_forecast_last_retrieved(self) -> datetime | None:
        if self._semidaily_forecast is None:
            return None
        return self._semidaily_forecast.retrieval_time

    @property
    def hourly_forecast(self) -> Forecast | None:
        return self._hourly_forecast

    @property
    def hourly_forecast_last_retrieved(self) -> datetime | None:
        if self._hourly_forecast is None:
            return None
        return self._hourly_forecast.retrieval_time

    def observation(self, station_id: str | None = None) -> Observation | None:
        """Last fetched observation for a station (default station if omitted)."""
        return self._observations.get((station_id or self._default_station_id).upper())

    def observation_last_retrieved(self, station_id: str | None = None) -> datetime | None:
        obs = self.observation(station_id)
        return obs.retrieval_time if obs is not None else None

    # Fetch operations

    def update_alerts(self) -> list[Alert]:
        """Replace the alert list with the currently active alerts."""
        body = self.transport.fetch(ALERTS_ACTIVE_ENDPOINT, alerts_query(self._point))
        now = self._now()
        self._alerts = parse_alerts(body, now=now)
        self._alerts_last_retrieved = now
        logger.info("Fetched %d active alerts", len(self._alerts))
        return list(self._alerts)

    def update_semidaily_forecast(self) -> Forecast:
        body = self.transport.fetch(forecast_endpoint(self._gridpoint))
        self._semidaily_forecast = parse_forecast(body, now=self._now())
        logger.info(
            "Fetched semidaily forecast with %d periods",
            len(self._semidaily_forecast.periods),
        )
        return self._semidaily_forecast

    def update_hourly_forecast(self) -> Forecast:
        body = self.transport.fetch(hourly_forecast_endpoint(self._gridpoint))
        self._hourly_forecast = parse_forecast(body, now=self._now())
        logger.info(
            "Fetched hourly forecast with %d periods",
            len(self._hourly_forecast.periods),
        )
        return self._hourly_forecast

    def update_observation(self, station_id: str) -> Observation:
        """Fetch the latest observation for any station id."""
        station_id = station_id.upper()
        body = self.transport.fetch(observation_endpoint(station_id))
        obs = parse_observation(body, now=self._now())
        # Keyed by the requested id so lookups match what callers asked for.
        self._observations[station_id] = obs
        logger.info("Fetched observation for %s at %s", station_id, obs.observed_time)
        return obs

    def update_default_observation(self) -> Observation:
        return self.update_observation(self._default_station_id)
