"""
Response payload models - the service-specific part of a response envelope.

Fields the service only sends under some request options (or never promises)
are Optional and stay None when absent; they are never filled with zeros or
empty defaults.
"""

from typing import Annotated, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from .common import DirectionChange, DrivingSide, Hint, Location, ManeuverType
from .geometry import Geometry


def _open_enum(enum_cls):
    """Convert known tokens to enum members, keep unknown tokens as plain strings."""
    def convert(value):
        try:
            return enum_cls(value)
        except ValueError:
            return value
    return BeforeValidator(convert)


Modifier = Annotated[Union[DirectionChange, str], _open_enum(DirectionChange)]
Maneuver = Annotated[Union[ManeuverType, str], _open_enum(ManeuverType)]


class ResponseModel(BaseModel):
    """Base for all decoded response objects: immutable, extra keys ignored."""
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class Waypoint(ResponseModel):
    """A coordinate snapped onto the routable network."""
    name: str = Field(description="Name of the street the coordinate snapped to")
    location: Location = Field(description="Snapped [longitude, latitude]")
    distance: float = Field(description="Distance in meters from the input coordinate")
    hint: Optional[Hint] = Field(
        default=None,
        description="Replayable snapping hint, absent when generate_hints=false",
    )
    nodes: Optional[list[int]] = Field(default=None, description="OpenStreetMap node ids")


class Lane(ResponseModel):
    """A turn lane at the corresponding turn location."""
    indications: list[Modifier]
    valid: bool


class Intersection(ResponseModel):
    """A cross-way passed along a route step."""
    location: Location
    bearings: list[int]
    entry: list[bool]
    classes: Optional[list[str]] = None
    # Not supplied for depart maneuvers
    in_index: Optional[int] = Field(default=None, alias="in")
    # Not supplied for arrive maneuvers
    out_index: Optional[int] = Field(default=None, alias="out")
    lanes: Optional[list[Lane]] = None


class StepManeuver(ResponseModel):
    location: Location
    bearing_before: int
    bearing_after: int
    maneuver_type: Maneuver = Field(alias="type")
    modifier: Optional[Modifier] = None
    exit: Optional[int] = None


class RouteStep(ResponseModel):
    """A maneuver followed by travel along a single way."""
    distance: float
    duration: float
    geometry: Geometry
    weight: float
    name: str
    mode: str = Field(description="Mode of transportation, e.g. driving, walking, ferry")
    maneuver: StepManeuver
    intersections: Optional[list[Intersection]] = None
    reference: Optional[str] = Field(default=None, alias="ref")
    pronunciation: Optional[str] = None
    destinations: Optional[str] = None
    exits: Optional[str] = None
    rotary_name: Optional[str] = None
    rotary_pronunciation: Optional[str] = None
    driving_side: Optional[DrivingSide] = None


class AnnotationMetadata(ResponseModel):
    datasource_names: Optional[list[str]] = None


class Annotation(ResponseModel):
    """
    Fine-grained data for each segment of a route leg.

    Each array is only present when the matching annotation was requested.
    """
    distance: Optional[list[float]] = None
    duration: Optional[list[float]] = None
    datasources: Optional[list[int]] = None
    nodes: Optional[list[int]] = None
    weight: Optional[list[float]] = None
    speed: Optional[list[float]] = None
    metadata: Optional[AnnotationMetadata] = None


class RouteLeg(ResponseModel):
    """A route between two waypoints."""
    distance: float
    duration: float
    weight: float
    summary: Optional[str] = None
    steps: Optional[list[RouteStep]] = None
    annotation: Optional[Annotation] = None


class Route(ResponseModel):
    """A route through (potentially multiple) waypoints."""
    distance: float
    duration: float
    weight: float
    weight_name: str
    legs: list[RouteLeg]
    # Absent when overview=false
    geometry: Optional[Geometry] = None


class MatchingWaypoint(Waypoint):
    matchings_index: int
    waypoint_index: int
    alternatives_count: int


class MatchingRoute(Route):
    confidence: float = Field(description="Matching confidence between 0 and 1")


class TripWaypoint(Waypoint):
    trips_index: int
    waypoint_index: int


# ----- Service payloads -----
class NearestResponse(ResponseModel):
    # Sorted by distance to the input coordinate; absent with skip_waypoints
    waypoints: Optional[list[Waypoint]] = None


class RouteResponse(ResponseModel):
    routes: list[Route]
    waypoints: Optional[list[Waypoint]] = None


class TableResponse(ResponseModel):
    """
    Duration/distance matrices in row-major order, indexed [source][destination].

    A None cell means no route exists between that pair.
    """
    durations: Optional[list[list[Optional[float]]]] = None
    distances: Optional[list[list[Optional[float]]]] = None
    sources: Optional[list[Waypoint]] = None
    destinations: Optional[list[Waypoint]] = None
    fallback_speed_cells: Optional[list[tuple[int, int]]] = None


class MatchResponse(ResponseModel):
    matchings: list[MatchingRoute]
    # Outliers dropped by the matcher are null entries
    tracepoints: Optional[list[Optional[MatchingWaypoint]]] = None


class TripResponse(ResponseModel):
    trips: list[Route]
    waypoints: Optional[list[TripWaypoint]] = None
