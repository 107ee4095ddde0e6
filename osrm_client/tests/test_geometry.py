"""
Test geometry decoding: encoded polylines vs explicit GeoJSON, and point arity.
"""

from pydantic import TypeAdapter, ValidationError

from ..models.geometry import (
    ElevatedPoint,
    EncodedGeometry,
    Geometry,
    GeoJsonPoint,
    LineString,
    MultiPolygon,
    Point,
    Polygon,
    RegularPoint,
    decode_geojson_point,
    decode_geometry,
)

geometry_adapter = TypeAdapter(Geometry)
point_adapter = TypeAdapter(GeoJsonPoint)

ENCODED = "slluHq`qZ~eChbDtcFfzCpzAulD~vBsfAbh@}j@|cAs~CxpCkoDtuA}sE|f@wcAxiAi{@nbB{n@jMd_@bk@i]xCvLyL|GjH`O"


def test_encoded_geometry():
    """Test that a plain string decodes to an encoded geometry, untouched."""
    print("\n=== Testing Encoded Geometry ===")

    geometry = geometry_adapter.validate_python(ENCODED)
    assert isinstance(geometry, EncodedGeometry)
    assert geometry.polyline == ENCODED

    print("✓ Encoded geometry decoded")


def test_explicit_linestring():
    """Test that a GeoJSON LineString decodes with regular points."""
    print("\n=== Testing Explicit LineString ===")

    geometry = geometry_adapter.validate_json(
        '{"type":"LineString","coordinates":[[-1.3,44.1],[-1.0,44.0]]}'
    )
    assert isinstance(geometry, LineString)
    assert len(geometry.coordinates) == 2
    assert all(isinstance(p, RegularPoint) for p in geometry.coordinates)
    assert geometry.coordinates[0].longitude == -1.3
    assert geometry.coordinates[0].latitude == 44.1
    assert geometry.coordinates[1].coordinates() == (-1.0, 44.0)

    print("✓ LineString decoded")


def test_every_geojson_kind():
    """Test the six GeoJSON geometry kinds."""
    print("\n=== Testing GeoJSON Kinds ===")

    point = decode_geometry({"type": "Point", "coordinates": [4.35, 50.84]})
    assert isinstance(point, Point)
    assert isinstance(point.coordinates, RegularPoint)

    ring = [[0, 0], [1, 0], [1, 1], [0, 0]]
    polygon = decode_geometry({"type": "Polygon", "coordinates": [ring]})
    assert isinstance(polygon, Polygon)
    assert len(polygon.coordinates[0]) == 4

    multi = decode_geometry({"type": "MultiPolygon", "coordinates": [[ring], [ring]]})
    assert isinstance(multi, MultiPolygon)
    assert multi.coordinates[1][0][2].coordinates() == (1.0, 1.0)

    for kind, coordinates in [
        ("MultiPoint", [[0, 0], [1, 1]]),
        ("MultiLineString", [[[0, 0], [1, 1]], [[2, 2], [3, 3]]]),
    ]:
        geometry = decode_geometry({"type": kind, "coordinates": coordinates})
        assert geometry.type == kind

    print("✓ All GeoJSON kinds decoded")


def test_point_arity():
    """Test that 2 values never carry elevation and 3 values keep it exactly."""
    print("\n=== Testing Point Arity ===")

    regular = point_adapter.validate_python([4.35, 50.84])
    assert isinstance(regular, RegularPoint)
    assert regular.elevation is None

    elevated = point_adapter.validate_python([4.35, 50.84, 112.837])
    assert isinstance(elevated, ElevatedPoint)
    assert elevated.elevation == 112.837
    assert elevated.location() == regular.location()
    assert elevated.coordinates() == (4.35, 50.84, 112.837)

    for bad in ([], [1.0], [1.0, 2.0, 3.0, 4.0], ["1", "2"], [True, 2.0], "4.35,50.84", {"lon": 1}):
        try:
            decode_geojson_point(bad)
            assert False, f"{bad!r} should not decode as a point"
        except ValueError:
            pass

    print("✓ Point arity respected")


def test_unrecognized_geometry_rejected():
    """Test that shapes matching neither variant fail instead of defaulting."""
    print("\n=== Testing Unrecognized Geometry ===")

    for bad in (
        42,
        None,
        ["slluHq"],
        {"coordinates": [[0, 0]]},
        {"type": "Feature", "geometry": None},
        {"type": ["LineString"], "coordinates": []},
        {"type": "LineString", "coordinates": [[0, 0, 0, 0]]},
    ):
        try:
            geometry_adapter.validate_python(bad)
            assert False, f"{bad!r} should be rejected"
        except ValidationError:
            pass

    print("✓ Unrecognized shapes rejected")


def run_all_tests():
    """Run all geometry tests."""
    print("\n" + "=" * 60)
    print("GEOMETRY DECODING - TEST SUITE")
    print("=" * 60)

    test_encoded_geometry()
    test_explicit_linestring()
    test_every_geojson_kind()
    test_point_arity()
    test_unrecognized_geometry_rejected()

    print("\n" + "=" * 60)
    print("✅ ALL GEOMETRY TESTS PASSED!")
    print("=" * 60)


if __name__ == "__main__":
    run_all_tests()
