"""Pydantic models for OSRM requests and responses."""

from .common import (
    Service,
    TransportationMode,
    Geometries,
    Approach,
    Snapping,
    OverviewRequest,
    RouteAnnotations,
    TableAnnotations,
    FallbackCoordinate,
    GapHandling,
    TripSource,
    TripDestination,
    DirectionChange,
    ManeuverType,
    DrivingSide,
    StatusCode,
    Location,
    Hint,
    Radius,
    UNLIMITED,
    BearingRequest,
    SingleCoordinate,
    MultiCoordinates,
    Polyline,
    Polyline6,
    Coordinates,
)
from .geometry import (
    RegularPoint,
    ElevatedPoint,
    GeoJsonPoint,
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeoJsonGeometry,
    EncodedGeometry,
    Geometry,
    decode_geometry,
    decode_geojson_point,
)
from .responses import (
    Waypoint,
    Lane,
    Intersection,
    StepManeuver,
    RouteStep,
    AnnotationMetadata,
    Annotation,
    RouteLeg,
    Route,
    MatchingWaypoint,
    MatchingRoute,
    TripWaypoint,
    NearestResponse,
    RouteResponse,
    TableResponse,
    MatchResponse,
    TripResponse,
)
from .options import OptionField, OptionKind, build_options, to_wire
from .requests import (
    BaseServiceRequest,
    NearestRequest,
    RouteRequest,
    TableRequest,
    MatchRequest,
    TripRequest,
    TileRequest,
)

__all__ = [
    # Wire tokens
    "Service",
    "TransportationMode",
    "Geometries",
    "Approach",
    "Snapping",
    "OverviewRequest",
    "RouteAnnotations",
    "TableAnnotations",
    "FallbackCoordinate",
    "GapHandling",
    "TripSource",
    "TripDestination",
    "DirectionChange",
    "ManeuverType",
    "DrivingSide",
    "StatusCode",
    # Geo primitives
    "Location",
    "Hint",
    "Radius",
    "UNLIMITED",
    "BearingRequest",
    "SingleCoordinate",
    "MultiCoordinates",
    "Polyline",
    "Polyline6",
    "Coordinates",
    # Geometry
    "RegularPoint",
    "ElevatedPoint",
    "GeoJsonPoint",
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeoJsonGeometry",
    "EncodedGeometry",
    "Geometry",
    "decode_geometry",
    "decode_geojson_point",
    # Responses
    "Waypoint",
    "Lane",
    "Intersection",
    "StepManeuver",
    "RouteStep",
    "AnnotationMetadata",
    "Annotation",
    "RouteLeg",
    "Route",
    "MatchingWaypoint",
    "MatchingRoute",
    "TripWaypoint",
    "NearestResponse",
    "RouteResponse",
    "TableResponse",
    "MatchResponse",
    "TripResponse",
    # Requests
    "OptionField",
    "OptionKind",
    "build_options",
    "to_wire",
    "BaseServiceRequest",
    "NearestRequest",
    "RouteRequest",
    "TableRequest",
    "MatchRequest",
    "TripRequest",
    "TileRequest",
]
