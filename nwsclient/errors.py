"""Error taxonomy for NWS client operations."""

from enum import StrEnum


class ErrorKind(StrEnum):
    TRANSPORT = "transport"
    MALFORMED_ENVELOPE = "malformed_envelope"
    INVALID_GRID_ADDRESS = "invalid_grid_address"
    MISSING_IDENTITY = "missing_identity"
    # Absorbed per field, never raised.
    FIELD_UNAVAILABLE = "field_unavailable"
    UNKNOWN_STATION = "unknown_station"


class NwsError(Exception):
    """Base exception for all client errors."""

    kind: ErrorKind


class TransportError(NwsError):
    """Network or HTTP-layer failure. Never retried above the transport."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedEnvelope(NwsError):
    """Response body is not JSON or not the expected top-level shape."""

    kind = ErrorKind.MALFORMED_ENVELOPE


class InvalidGridAddress(NwsError):
    """Office code or grid coordinates failed validation."""

    kind = ErrorKind.INVALID_GRID_ADDRESS


class MissingIdentity(NwsError):
    """A load-bearing identity or time field is absent or unparseable."""

    kind = ErrorKind.MISSING_IDENTITY


class NoStationsAvailable(MissingIdentity):
    """The station catalog is empty, so no default station can be chosen."""


class UnknownStation(NwsError):
    """A station id is not part of the session's catalog."""

    kind = ErrorKind.UNKNOWN_STATION
