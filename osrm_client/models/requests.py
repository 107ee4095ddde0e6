"""
Request configurations, one per OSRM service.

A request knows its service name, the response payload it decodes to, and
the declarative list of service-specific options appended after the options
shared by every service.
"""

import math
from typing import ClassVar, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

from .common import (
    Approach,
    BearingRequest,
    Coordinates,
    FallbackCoordinate,
    GapHandling,
    Geometries,
    Hint,
    OverviewRequest,
    Radius,
    RouteAnnotations,
    Service,
    Snapping,
    TableAnnotations,
    TransportationMode,
    TripDestination,
    TripSource,
)
from .options import GENERAL_OPTIONS, OptionField, OptionKind, build_options
from .responses import (
    MatchResponse,
    NearestResponse,
    ResponseModel,
    RouteResponse,
    TableResponse,
    TripResponse,
)


class BaseServiceRequest(BaseModel):
    """Profile, coordinates and the general options accepted by every service."""
    model_config = ConfigDict(frozen=True)

    service: ClassVar[Service]
    response_model: ClassVar[type[ResponseModel]]
    service_options: ClassVar[tuple[OptionField, ...]] = ()

    profile: TransportationMode = TransportationMode.CAR
    coordinates: Coordinates
    bearings: Optional[list[BearingRequest]] = None
    radiuses: Optional[list[Radius]] = None
    generate_hints: bool = True
    hints: Optional[list[Hint]] = None
    approaches: Optional[list[Approach]] = None
    exclude: Optional[list[str]] = Field(default=None, description="Classes to avoid, order does not matter")
    snapping: Optional[Snapping] = None
    skip_waypoints: bool = False

    def options(self) -> list[tuple[str, str]]:
        """Query parameters: general options first, then service-specific ones."""
        return build_options(self, GENERAL_OPTIONS + self.service_options)

    def url(self, base_url: str, version: str) -> str:
        """Request URL without query string: {base}/{service}/{version}/{profile}/{coordinates}."""
        # Polylines may hold characters that are not valid in a URL path
        coordinates = quote(self.coordinates.to_wire(), safe=",;()")
        return f"{base_url}/{self.service.value}/{version}/{self.profile.value}/{coordinates}"


class NearestRequest(BaseServiceRequest):
    """Snap a coordinate to the street network and return the nearest matches."""
    service: ClassVar[Service] = Service.NEAREST
    response_model: ClassVar[type[ResponseModel]] = NearestResponse
    service_options: ClassVar[tuple[OptionField, ...]] = (
        OptionField("number"),
    )

    number: Optional[int] = Field(default=None, description="Number of nearest segments to return")


class RouteRequest(BaseServiceRequest):
    """Fastest route between coordinates in the supplied order."""
    service: ClassVar[Service] = Service.ROUTE
    response_model: ClassVar[type[ResponseModel]] = RouteResponse
    service_options: ClassVar[tuple[OptionField, ...]] = (
        OptionField("alternatives"),
        OptionField("steps", OptionKind.FLAG),
        OptionField("annotations"),
        OptionField("geometries"),
        OptionField("overview"),
        OptionField("continue_straight"),
        OptionField("waypoints", OptionKind.LIST),
    )

    alternatives: Optional[Union[bool, int]] = Field(
        default=None,
        description="true/false, or the maximum number of alternatives to search for",
    )
    steps: bool = False
    annotations: Optional[RouteAnnotations] = None
    geometries: Optional[Geometries] = None
    overview: Optional[OverviewRequest] = None
    # Service default depends on the profile
    continue_straight: Optional[bool] = None
    waypoints: Optional[list[int]] = Field(default=None, description="Indices of coordinates treated as waypoints")


class TableRequest(BaseServiceRequest):
    """Durations and/or distances between all pairs of sources and destinations."""
    service: ClassVar[Service] = Service.TABLE
    response_model: ClassVar[type[ResponseModel]] = TableResponse
    service_options: ClassVar[tuple[OptionField, ...]] = (
        OptionField("sources", OptionKind.LIST),
        OptionField("destinations", OptionKind.LIST),
        OptionField("annotations"),
        OptionField("fallback_speed"),
        OptionField("fallback_coordinate"),
        OptionField("scale_factor"),
    )

    sources: Optional[list[int]] = None
    destinations: Optional[list[int]] = None
    annotations: Optional[TableAnnotations] = None
    fallback_speed: Optional[float] = Field(
        default=None,
        description="Speed used to estimate durations for pairs without a route",
    )
    fallback_coordinate: Optional[FallbackCoordinate] = None
    scale_factor: Optional[float] = None


class MatchRequest(BaseServiceRequest):
    """Snap a noisy GPS trace to the road network."""
    service: ClassVar[Service] = Service.MATCH
    response_model: ClassVar[type[ResponseModel]] = MatchResponse
    service_options: ClassVar[tuple[OptionField, ...]] = (
        OptionField("steps", OptionKind.FLAG),
        OptionField("geometries"),
        OptionField("annotations"),
        OptionField("overview"),
        OptionField("timestamps", OptionKind.LIST),
        OptionField("gaps"),
        OptionField("tidy", OptionKind.FLAG),
        OptionField("waypoints", OptionKind.LIST),
    )

    steps: bool = False
    geometries: Optional[Geometries] = None
    annotations: Optional[RouteAnnotations] = None
    overview: Optional[OverviewRequest] = None
    timestamps: Optional[list[int]] = Field(
        default=None,
        description="Seconds since UNIX epoch, monotonically increasing",
    )
    gaps: Optional[GapHandling] = None
    tidy: bool = False
    waypoints: Optional[list[int]] = None


class TripRequest(BaseServiceRequest):
    """Approximate travelling salesman tour through the coordinates."""
    service: ClassVar[Service] = Service.TRIP
    response_model: ClassVar[type[ResponseModel]] = TripResponse
    service_options: ClassVar[tuple[OptionField, ...]] = (
        OptionField("roundtrip", OptionKind.FLAG),
        OptionField("source"),
        OptionField("destination"),
        OptionField("steps", OptionKind.FLAG),
        OptionField("geometries"),
        OptionField("annotations"),
        OptionField("overview"),
    )

    roundtrip: bool = True
    source: Optional[TripSource] = None
    destination: Optional[TripDestination] = None
    steps: bool = False
    geometries: Optional[Geometries] = None
    annotations: Optional[RouteAnnotations] = None
    overview: Optional[OverviewRequest] = None

    def is_supported(self) -> bool:
        """
        Whether the service implements this roundtrip/source/destination combination.

        Round trips accept any combination; one-way trips need both ends fixed.
        Unset source and destination mean "any".
        """
        if self.roundtrip:
            return True
        return self.source is TripSource.FIRST and self.destination is TripDestination.LAST


# Web map that renders the routing graph tiles
DEBUG_VIEWER_URL = "http://map.project-osrm.org/debug"


class TileRequest(BaseModel):
    """A Mapbox Vector Tile of the routing graph (zoom 12 and above)."""
    model_config = ConfigDict(frozen=True)

    service: ClassVar[Service] = Service.TILE

    profile: TransportationMode = TransportationMode.CAR
    x: int = Field(description="Slippy map tile column")
    y: int = Field(description="Slippy map tile row")
    zoom: int = Field(description="Zoom level")

    def options(self) -> list[tuple[str, str]]:
        return []

    def url(self, base_url: str, version: str) -> str:
        return (
            f"{base_url}/{self.service.value}/{version}/{self.profile.value}"
            f"/tile({self.x},{self.y},{self.zoom}).mvt"
        )

    def center(self) -> tuple[float, float]:
        """(latitude, longitude) of the tile center, slippy-map tile numbering."""
        tiles = 2 ** self.zoom
        longitude = (self.x + 0.5) / tiles * 360.0 - 180.0
        latitude = math.degrees(math.atan(math.sinh(math.pi * (1 - 2 * (self.y + 0.5) / tiles))))
        return latitude, longitude

    def show_url(self, viewer_url: str = DEBUG_VIEWER_URL) -> str:
        """Link to the tile in the OSRM debug map viewer."""
        latitude, longitude = self.center()
        return f"{viewer_url}/#{self.zoom}/{latitude:.6f}/{longitude:.6f}"
