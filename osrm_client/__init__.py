"""
Lightweight async client for the HTTP services of an OSRM backend.

Encodes typed request configurations into OSRM URLs and query strings, and
decodes the JSON response envelope into typed payloads or typed errors.
"""

from .config import Config, ConfigurationError, load_config
from .errors import OSRMError, TransportError, ProtocolError, DecodeError
from .clients import OSRMClient, RequestDescriptor
from .models import (
    TransportationMode,
    Location,
    SingleCoordinate,
    MultiCoordinates,
    Polyline,
    Polyline6,
    StatusCode,
    NearestRequest,
    RouteRequest,
    TableRequest,
    MatchRequest,
    TripRequest,
    TileRequest,
)

__version__ = "0.2.0"

__all__ = [
    "Config",
    "ConfigurationError",
    "load_config",
    "OSRMError",
    "TransportError",
    "ProtocolError",
    "DecodeError",
    "OSRMClient",
    "RequestDescriptor",
    "TransportationMode",
    "Location",
    "SingleCoordinate",
    "MultiCoordinates",
    "Polyline",
    "Polyline6",
    "StatusCode",
    "NearestRequest",
    "RouteRequest",
    "TableRequest",
    "MatchRequest",
    "TripRequest",
    "TileRequest",
]
