"""Resolve a point-lookup response into the gridpoint that contains it."""

import logging

from nwsclient.errors import InvalidGridAddress
from nwsclient.ingest.envelope import (
    as_int,
    as_text,
    decode_envelope,
    nested,
    properties_of,
)
from nwsclient.models.location import Gridpoint

logger = logging.getLogger(__name__)


def parse_gridpoint(body: bytes | str) -> Gridpoint:
    """Build a Gridpoint from a `points/{lat},{lon}` response body.

    The office code and grid coordinates are required; city and state are
    display-only and copied through as given.
    """
    props = properties_of(decode_envelope(body))

    # The forecast office is published as both cwa and gridId; they agree.
    office = as_text(props.get("cwa") or props.get("gridId"))
    if len(office) != 3:
        raise InvalidGridAddress(
            f'office code must be three characters: "{office}" is {len(office)} characters'
        )

    grid_x = as_int(props.get("gridX"))
    if grid_x is None:
        raise InvalidGridAddress(f'gridX must be an integer: "{props.get("gridX")}"')
    grid_y = as_int(props.get("gridY"))
    if grid_y is None:
        raise InvalidGridAddress(f'gridY must be an integer: "{props.get("gridY")}"')

    relative = nested(props, "relativeLocation", "properties")
    gridpoint = Gridpoint(
        office=office.upper(),
        grid_x=grid_x,
        grid_y=grid_y,
        city=as_text(nested(relative, "city")),
        state=as_text(nested(relative, "state")),
    )
    logger.debug(
        "Resolved gridpoint %s/%d,%d (%s, %s)",
        gridpoint.office, grid_x, grid_y, gridpoint.city, gridpoint.state,
    )
    return gridpoint
