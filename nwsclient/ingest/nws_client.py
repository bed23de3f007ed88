"""api.weather.gov transport with retry and rate limit handling."""

import logging
import time
from collections.abc import Mapping

import httpx

from nwsclient.errors import TransportError
from nwsclient.models.common import Point
from nwsclient.models.location import Gridpoint

logger = logging.getLogger(__name__)

NWS_BASE_URL = "https://api.weather.gov"
DEFAULT_USER_AGENT = "nwsclient/0.1.0"

ALERTS_ACTIVE_ENDPOINT = "alerts/active"


def point_endpoint(point: Point) -> str:
    return f"points/{point.as_query()}"


def stations_endpoint(gridpoint: Gridpoint) -> str:
    return f"gridpoints/{gridpoint.office}/{gridpoint.grid_x},{gridpoint.grid_y}/stations"


def forecast_endpoint(gridpoint: Gridpoint) -> str:
    return f"gridpoints/{gridpoint.office}/{gridpoint.grid_x},{gridpoint.grid_y}/forecast"


def hourly_forecast_endpoint(gridpoint: Gridpoint) -> str:
    return forecast_endpoint(gridpoint) + "/hourly"


def observation_endpoint(station_id: str) -> str:
    return f"stations/{station_id}/observations/latest"


def alerts_query(point: Point) -> dict[str, str]:
    return {"point": point.as_query()}


class NwsClient:
    """Performs GETs against the NWS API and returns raw 2xx bodies.

    The User-Agent doubles as the caller's identification with the service,
    so it should be unique to the application and ideally carry a contact.
    """

    def __init__(
        self,
        base_url: str = NWS_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_base_delay: float = 5.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def fetch(self, endpoint: str, query: Mapping[str, str] | None = None) -> bytes:
        """GET an endpoint relative to the base URL.

        Retries on 503/429 and on network errors with exponential backoff.
        Any other non-2xx status raises TransportError immediately.
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        headers = {"User-Agent": self.user_agent, "Accept": "application/geo+json"}
        params = dict(query) if query else None

        for attempt in range(self.max_retries + 1):
            try:
                resp = httpx.get(
                    url,
                    params=params,
                    headers=headers,
                    timeout=self.timeout,
                    follow_redirects=True,
                )
            except httpx.RequestError as e:
                if attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logger.warning(
                        "NWS request error, retrying in %.1fs: %s", delay, e
                    )
                    time.sleep(delay)
                    continue
                raise TransportError(f"request to {url} failed: {e}") from e

            if resp.status_code in (503, 429) and attempt < self.max_retries:
                delay = self.retry_base_delay * (2**attempt)
                logger.warning(
                    "NWS %s returned %d, retrying in %.1fs (attempt %d/%d)",
                    url, resp.status_code, delay, attempt + 1, self.max_retries,
                )
                time.sleep(delay)
                continue
            if not resp.is_success:
                raise TransportError(
                    f"{resp.status_code} {resp.reason_phrase}",
                    status_code=resp.status_code,
                )
            return resp.content

        raise TransportError(f"request to {url} exhausted retries")
