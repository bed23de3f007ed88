"""Shared test fixtures."""

import json
from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from nwsclient.ingest.nws_client import NwsClient

FIXTURE_DIR = Path(__file__).parent / "fixtures"

FIXED_NOW = datetime(2019, 8, 28, 23, 0, 0, tzinfo=UTC)


def load_fixture(name: str) -> bytes:
    return (FIXTURE_DIR / name).read_bytes()


def load_fixture_json(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def transport() -> MagicMock:
    """A transport that serves fixture bodies keyed by endpoint path."""
    routes = {
        "points/45.458,-122.6636": load_fixture("point.json"),
        "gridpoints/PQR/112,99/stations": load_fixture("stations.json"),
        "gridpoints/PQR/112,99/forecast": load_fixture("forecast.json"),
        "gridpoints/PQR/112,99/forecast/hourly": load_fixture("forecast_hourly.json"),
        "alerts/active": load_fixture("alerts.json"),
        "stations/KPDX/observations/latest": load_fixture("observation.json"),
        "stations/KTTD/observations/latest": load_fixture("observation.json").replace(
            b"stations/KPDX", b"stations/KTTD"
        ),
    }

    def fetch(endpoint: str, query=None) -> bytes:
        return routes[endpoint]

    mock = MagicMock(spec=NwsClient)
    mock.fetch.side_effect = fetch
    mock.routes = routes
    return mock
