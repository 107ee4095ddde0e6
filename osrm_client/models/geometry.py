"""
Route geometry models.

OSRM returns a geometry either as an encoded polyline string or as an explicit
GeoJSON object, depending on the `geometries` request option. Neither shape
carries a tag telling them apart, and neither do GeoJSON positions (2 values
for a plain point, 3 when elevation is present), so both are decoded by
inspecting the JSON shape explicitly.
"""

from numbers import Real
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PlainValidator, TypeAdapter

from .common import Location


class RegularPoint(BaseModel):
    """GeoJSON position [longitude, latitude]."""
    model_config = ConfigDict(frozen=True)

    longitude: float
    latitude: float

    @classmethod
    def from_location(cls, location: Location) -> "RegularPoint":
        return cls(longitude=location.longitude, latitude=location.latitude)

    @property
    def elevation(self) -> Optional[float]:
        return None

    def location(self) -> Location:
        return Location(longitude=self.longitude, latitude=self.latitude)

    def coordinates(self) -> tuple[float, ...]:
        return (self.longitude, self.latitude)


class ElevatedPoint(BaseModel):
    """GeoJSON position [longitude, latitude, elevation]."""
    model_config = ConfigDict(frozen=True)

    longitude: float
    latitude: float
    elevation: float

    def location(self) -> Location:
        return Location(longitude=self.longitude, latitude=self.latitude)

    def coordinates(self) -> tuple[float, ...]:
        return (self.longitude, self.latitude, self.elevation)


def _is_number(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def decode_geojson_point(value) -> Union[RegularPoint, ElevatedPoint]:
    """Pick the point variant from the array arity: 2 is regular, 3 is elevated."""
    if isinstance(value, (RegularPoint, ElevatedPoint)):
        return value
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"GeoJSON position must be an array, got {type(value).__name__}")
    if not all(_is_number(v) for v in value):
        raise ValueError("GeoJSON position must only contain numbers")
    if len(value) == 2:
        return RegularPoint(longitude=value[0], latitude=value[1])
    if len(value) == 3:
        return ElevatedPoint(longitude=value[0], latitude=value[1], elevation=value[2])
    raise ValueError(f"GeoJSON position must have 2 or 3 values, got {len(value)}")


GeoJsonPoint = Annotated[Union[RegularPoint, ElevatedPoint], PlainValidator(decode_geojson_point)]


# ----- GeoJSON geometry types -----
class Point(BaseModel):
    model_config = ConfigDict(frozen=True)
    type: Literal["Point"] = "Point"
    coordinates: GeoJsonPoint


class LineString(BaseModel):
    model_config = ConfigDict(frozen=True)
    type: Literal["LineString"] = "LineString"
    coordinates: list[GeoJsonPoint]


class Polygon(BaseModel):
    model_config = ConfigDict(frozen=True)
    type: Literal["Polygon"] = "Polygon"
    coordinates: list[list[GeoJsonPoint]]


class MultiPoint(BaseModel):
    model_config = ConfigDict(frozen=True)
    type: Literal["MultiPoint"] = "MultiPoint"
    coordinates: list[GeoJsonPoint]


class MultiLineString(BaseModel):
    model_config = ConfigDict(frozen=True)
    type: Literal["MultiLineString"] = "MultiLineString"
    coordinates: list[list[GeoJsonPoint]]


class MultiPolygon(BaseModel):
    model_config = ConfigDict(frozen=True)
    type: Literal["MultiPolygon"] = "MultiPolygon"
    coordinates: list[list[list[GeoJsonPoint]]]


GEOJSON_TYPES = (Point, LineString, Polygon, MultiPoint, MultiLineString, MultiPolygon)
GEOJSON_KINDS = frozenset(cls.model_fields["type"].default for cls in GEOJSON_TYPES)

GeoJsonGeometry = Annotated[
    Union[Point, LineString, Polygon, MultiPoint, MultiLineString, MultiPolygon],
    Field(discriminator="type"),
]

_GEOJSON_ADAPTER = TypeAdapter(GeoJsonGeometry)


class EncodedGeometry(BaseModel):
    """Geometry encoded as a polyline or polyline6 string."""
    model_config = ConfigDict(frozen=True)

    polyline: str


def decode_geometry(value):
    """
    Decode a geometry value without knowing the requested format.

    A JSON string is an encoded polyline; an object whose "type" is one of
    the six GeoJSON geometry kinds is an explicit geometry. Any other shape
    is rejected.
    """
    if isinstance(value, (EncodedGeometry, *GEOJSON_TYPES)):
        return value
    if isinstance(value, str):
        return EncodedGeometry(polyline=value)
    if isinstance(value, dict) and isinstance(value.get("type"), str) and value["type"] in GEOJSON_KINDS:
        return _GEOJSON_ADAPTER.validate_python(value)
    raise ValueError(f"unrecognized geometry shape: {type(value).__name__}")


Geometry = Annotated[
    Union[EncodedGeometry, Point, LineString, Polygon, MultiPoint, MultiLineString, MultiPolygon],
    PlainValidator(decode_geometry),
]
