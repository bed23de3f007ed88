"""Parse the stations-near-gridpoint catalog."""

import logging

from nwsclient.ingest.envelope import (
    as_float,
    as_text,
    decode_envelope,
    features_of,
    nested,
)
from nwsclient.models.common import Point
from nwsclient.models.location import Station

logger = logging.getLogger(__name__)


def parse_stations(body: bytes | str) -> list[Station]:
    """Parse a station catalog, preserving upstream order.

    Upstream appears to order stations by proximity to the gridpoint; that
    order is kept as-is and never re-derived.
    """
    stations: list[Station] = []
    features = features_of(decode_envelope(body))
    for feature in features:
        station_id = as_text(nested(feature, "properties", "stationIdentifier"))
        if not station_id:
            logger.debug("Dropping station feature without an identifier")
            continue
        stations.append(
            Station(
                id=station_id.upper(),
                name=as_text(nested(feature, "properties", "name")),
                location=_station_location(nested(feature, "geometry", "coordinates")),
            )
        )

    logger.debug("Parsed %d of %d station features", len(stations), len(features))
    return stations


def _station_location(coordinates: object) -> Point:
    # GeoJSON order is (longitude, latitude).
    if not isinstance(coordinates, list) or len(coordinates) != 2:
        return Point()
    return Point(
        latitude=as_float(coordinates[1]) or 0.0,
        longitude=as_float(coordinates[0]) or 0.0,
    )
