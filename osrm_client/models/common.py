"""Shared OSRM data: geo primitives, fixed wire tokens and status codes."""

from decimal import Decimal
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Service(str, Enum):
    """Services exposed by an OSRM backend (first URL path segment)."""
    ROUTE = "route"
    NEAREST = "nearest"
    TABLE = "table"
    MATCH = "match"
    TRIP = "trip"
    TILE = "tile"


class TransportationMode(str, Enum):
    """Routing profile selecting the graph variant."""
    CAR = "car"
    BIKE = "bike"
    FOOT = "foot"


class Geometries(str, Enum):
    """Returned route geometry format (influences overview and per step)."""
    POLYLINE = "polyline"
    POLYLINE6 = "polyline6"
    GEOJSON = "geojson"


class Approach(str, Enum):
    """Keep waypoints on curb side."""
    UNRESTRICTED = "unrestricted"
    CURB = "curb"


class Snapping(str, Enum):
    """Default snapping avoids is_startpoint edges, any snaps to any edge."""
    DEFAULT = "default"
    ANY = "any"


class OverviewRequest(str, Enum):
    """Overview geometry: full, simplified to the highest zoom level, or none."""
    NO_OVERVIEW = "false"
    SIMPLIFIED = "simplified"
    FULL = "full"


class RouteAnnotations(str, Enum):
    """Per-coordinate metadata requested from route/match/trip."""
    NO_ANNOTATIONS = "false"
    ALL = "true"
    NODES = "nodes"
    DISTANCE = "distance"
    DURATION = "duration"
    DATASOURCES = "datasources"
    WEIGHT = "weight"
    SPEED = "speed"


class TableAnnotations(str, Enum):
    """Matrices returned by the table service."""
    DISTANCE = "distance"
    DURATION = "duration"
    BOTH = "duration,distance"


class FallbackCoordinate(str, Enum):
    """Coordinate used for as-the-crow-flies fallback distances."""
    INPUT = "input"
    SNAPPED = "snapped"


class GapHandling(str, Enum):
    """Whether large timestamp gaps split a trace."""
    SPLIT = "split"
    IGNORE = "ignore"


class TripSource(str, Enum):
    FIRST = "first"
    ANY = "any"


class TripDestination(str, Enum):
    LAST = "last"
    ANY = "any"


class DirectionChange(str, Enum):
    """Lane indication or maneuver modifier."""
    NONE = "none"
    UTURN = "uturn"
    SHARP_RIGHT = "sharp right"
    RIGHT = "right"
    SLIGHT_RIGHT = "slight right"
    STRAIGHT = "straight"
    SLIGHT_LEFT = "slight left"
    LEFT = "left"
    SHARP_LEFT = "sharp left"


class ManeuverType(str, Enum):
    """
    Type of a step maneuver.

    New identifiers may be introduced without an API version change, so
    response models also accept unknown tokens as plain strings.
    """
    TURN = "turn"
    NEW_NAME = "new name"
    DEPART = "depart"
    ARRIVE = "arrive"
    MERGE = "merge"
    RAMP = "ramp"
    ON_RAMP = "on ramp"
    OFF_RAMP = "off ramp"
    FORK = "fork"
    END_OF_ROAD = "end of road"
    USE_LANE = "use lane"
    CONTINUE = "continue"
    ROUNDABOUT = "roundabout"
    ROTARY = "rotary"
    ROUNDABOUT_TURN = "roundabout turn"
    NOTIFICATION = "notification"
    EXIT_ROUNDABOUT = "exit roundabout"
    EXIT_ROTARY = "exit rotary"


class DrivingSide(str, Enum):
    """Legal driving side at a location."""
    LEFT = "left"
    RIGHT = "right"


_STATUS_DESCRIPTIONS = {
    "Ok": "everything went ok",
    "InvalidUrl": "url string is invalid",
    "InvalidService": "service name is invalid",
    "InvalidVersion": "version is not found",
    "InvalidOptions": "options are invalid",
    "InvalidQuery": "the query string is syntactically malformed",
    "InvalidValue": "the successfully parsed query parameters are invalid",
    "NoSegment": "one of the supplied input coordinates could not snap to street segment",
    "TooBig": "the request size violates one of the service specific request size restrictions",
    "NoRoute": "no route found",
    "NoTable": "no route found between the requested sources and destinations",
    "NoMatch": "no matchings found",
    "NoTrips": "no trips found because input coordinates are not connected",
    "NotImplemented": "this request is not supported",
}


class StatusCode(str, Enum):
    """Value of the "code" field of every response envelope."""
    OK = "Ok"
    INVALID_URL = "InvalidUrl"
    INVALID_SERVICE = "InvalidService"
    INVALID_VERSION = "InvalidVersion"
    INVALID_OPTIONS = "InvalidOptions"
    INVALID_QUERY = "InvalidQuery"
    INVALID_VALUE = "InvalidValue"
    NO_SEGMENT = "NoSegment"
    TOO_BIG = "TooBig"
    NO_ROUTE = "NoRoute"
    NO_TABLE = "NoTable"
    NO_MATCH = "NoMatch"
    NO_TRIPS = "NoTrips"
    NOT_IMPLEMENTED = "NotImplemented"

    @property
    def description(self) -> str:
        """Stable human-readable phrase for logs and error messages."""
        return _STATUS_DESCRIPTIONS[self.value]


def format_decimal(value: float) -> str:
    """Shortest round-tripping digits of a float, never in exponent notation."""
    return format(Decimal(repr(value)), "f")


class Location(BaseModel):
    """A point on earth, longitude first. Decodes from a [lon, lat] array."""
    model_config = ConfigDict(frozen=True)

    longitude: float
    latitude: float

    @model_validator(mode="before")
    @classmethod
    def _from_array(cls, data):
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(f"location must be a [longitude, latitude] pair, got {len(data)} values")
            return {"longitude": data[0], "latitude": data[1]}
        return data

    def to_wire(self) -> str:
        return f"{format_decimal(self.longitude)},{format_decimal(self.latitude)}"


# Opaque, base64-like snapping token returned in waypoints. Sent back verbatim.
Hint = str

UNLIMITED = "unlimited"

# Search radius in meters, or "unlimited"
Radius = Union[Literal["unlimited"], float]


class BearingRequest(BaseModel):
    """Limits snapping to segments with the given bearing (degrees from true north)."""
    model_config = ConfigDict(frozen=True)

    value: int = Field(description="Bearing in the range 0..360")
    range: int = Field(description="Allowed deviation in the range 0..180")

    def to_wire(self) -> str:
        return f"{self.value},{self.range}"


class SingleCoordinate(BaseModel):
    """A single {longitude},{latitude} coordinate."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["single"] = "single"
    location: Location

    def to_wire(self) -> str:
        return self.location.to_wire()


class MultiCoordinates(BaseModel):
    """A sequence of coordinates, semicolon separated on the wire."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["multi"] = "multi"
    locations: tuple[Location, ...]

    def to_wire(self) -> str:
        return ";".join(location.to_wire() for location in self.locations)


class Polyline(BaseModel):
    """Coordinates as a precision-5 encoded polyline."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["polyline"] = "polyline"
    value: str

    def to_wire(self) -> str:
        return f"polyline({self.value})"


class Polyline6(BaseModel):
    """Coordinates as a precision-6 encoded polyline."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["polyline6"] = "polyline6"
    value: str

    def to_wire(self) -> str:
        return f"polyline6({self.value})"


Coordinates = Annotated[
    Union[SingleCoordinate, MultiCoordinates, Polyline, Polyline6],
    Field(discriminator="kind"),
]
