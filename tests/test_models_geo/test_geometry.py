"""
Tests for geometry models.
"""

import pytest
from pydantic import ValidationError
from shapely.geometry import LineString as ShapelyLineString
from shapely.geometry import MultiPolygon as ShapelyMultiPolygon
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon

from spatially.core.wkt import parse_wkt
from spatially.models.geometry import (
    BaseGeometryModel,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    format_number,
    geometry_from_geojson,
)

SQUARE = ((0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (0.0, 0.0))
HOLE = ((2.0, 2.0), (4.0, 2.0), (4.0, 4.0), (2.0, 4.0), (2.0, 2.0))


class TestCoordinateValidation:
    """Tests for coordinate and ring validation on construction."""

    def test_valid_point(self) -> None:
        """Test creating a valid point."""
        point = Point(coordinates=(1.5, 2.5))
        assert point.type == "Point"
        assert point.x == 1.5
        assert point.y == 2.5

    def test_point_from_list(self) -> None:
        """Test that list coordinates are stored as tuples."""
        point = Point(coordinates=[1, 2])  # type: ignore[arg-type]
        assert point.coordinates == (1.0, 2.0)

    def test_arity_too_small(self) -> None:
        """Test that a 1D coordinate is rejected."""
        with pytest.raises(ValidationError, match="2 to 4 elements"):
            Point(coordinates=(1.0,))

    def test_arity_too_large(self) -> None:
        """Test that a 5D coordinate is rejected."""
        with pytest.raises(ValidationError, match="2 to 4 elements"):
            LineString(coordinates=((1.0, 2.0, 3.0, 4.0, 5.0),))

    def test_non_finite_rejected(self) -> None:
        """Test that NaN coordinates are rejected."""
        with pytest.raises(ValidationError, match="finite"):
            Point(coordinates=(float("nan"), 1.0))

    def test_empty_linestring_rejected(self) -> None:
        """Test that a line needs at least one point."""
        with pytest.raises(ValidationError):
            LineString(coordinates=())

    def test_unclosed_polygon_rejected(self) -> None:
        """Test that polygon rings must be closed."""
        with pytest.raises(ValidationError, match="closed"):
            Polygon(coordinates=(SQUARE[:-1],))

    def test_short_ring_rejected(self) -> None:
        """Test that polygon rings need 4 points."""
        with pytest.raises(ValidationError, match="at least 4"):
            Polygon(coordinates=(((0.0, 0.0), (1.0, 1.0), (0.0, 0.0)),))

    def test_multipolygon_rings_validated(self) -> None:
        """Test that rings inside multipolygons are validated."""
        with pytest.raises(ValidationError):
            MultiPolygon(coordinates=((SQUARE,), (SQUARE[:-1],)))

    def test_frozen(self) -> None:
        """Test that geometry values are immutable."""
        point = Point(coordinates=(1.0, 2.0))
        with pytest.raises(ValidationError):
            point.coordinates = (3.0, 4.0)  # type: ignore[misc]

    def test_structural_equality(self) -> None:
        """Test that equal coordinates give equal values."""
        assert Polygon(coordinates=(SQUARE,)) == Polygon(coordinates=(SQUARE,))
        assert Point(coordinates=(1.0, 2.0)) != Point(coordinates=(2.0, 1.0))

    def test_base_model_is_abstract(self) -> None:
        """Test that the shared base cannot be instantiated without to_wkt."""
        with pytest.raises(TypeError, match="abstract"):
            BaseGeometryModel()


class TestGeoJSON:
    """Tests for GeoJSON conversion."""

    def test_point_to_geojson(self) -> None:
        """Test point conversion uses lists."""
        assert Point(coordinates=(1.0, 2.0)).to_geojson() == {
            "type": "Point",
            "coordinates": [1.0, 2.0],
        }

    def test_polygon_to_geojson(self) -> None:
        """Test nested list conversion for polygons."""
        data = Polygon(coordinates=(SQUARE, HOLE)).to_geojson()
        assert data["type"] == "Polygon"
        assert data["coordinates"][1][0] == [2.0, 2.0]
        assert isinstance(data["coordinates"][0], list)

    def test_from_geojson(self) -> None:
        """Test validating GeoJSON dictionaries into models."""
        geometry = geometry_from_geojson(
            {"type": "MultiPoint", "coordinates": [[1, 2], [3, 4]]}
        )
        assert geometry == MultiPoint(coordinates=((1.0, 2.0), (3.0, 4.0)))

    def test_from_geojson_unknown_type(self) -> None:
        """Test that unsupported types are rejected."""
        with pytest.raises(ValidationError):
            geometry_from_geojson({"type": "GeometryCollection", "geometries": []})

    def test_from_geojson_invalid_ring(self) -> None:
        """Test that GeoJSON input gets ring validation too."""
        with pytest.raises(ValidationError):
            geometry_from_geojson(
                {"type": "Polygon", "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 1]]]}
            )

    def test_geojson_round_trip(self) -> None:
        """Test that every kind survives to_geojson/from_geojson."""
        geometries = [
            Point(coordinates=(1.0, 2.0, 3.0)),
            MultiPoint(coordinates=((1.0, 2.0),)),
            LineString(coordinates=((1.0, 2.0), (3.0, 4.0))),
            MultiLineString(coordinates=(((1.0, 2.0), (3.0, 4.0)), ((5.0, 6.0),))),
            Polygon(coordinates=(SQUARE, HOLE)),
            MultiPolygon(coordinates=((SQUARE,), (SQUARE, HOLE))),
        ]
        for geometry in geometries:
            assert geometry_from_geojson(geometry.to_geojson()) == geometry


class TestWKTSerialization:
    """Tests for to_wkt output."""

    def test_format_number(self) -> None:
        """Test number formatting drops a trailing .0."""
        assert format_number(1.0) == "1"
        assert format_number(-71.0641) == "-71.0641"
        assert format_number(1e-7) == "1e-07"

    def test_point(self) -> None:
        """Test POINT output."""
        assert Point(coordinates=(-71.0641, 42.3586)).to_wkt() == "POINT(-71.0641 42.3586)"
        assert str(Point(coordinates=(1.0, 2.0))) == "POINT(1 2)"

    def test_multipoint(self) -> None:
        """Test MULTIPOINT output uses wrapped members."""
        geometry = MultiPoint(coordinates=((1.0, 2.0), (3.0, 4.0)))
        assert geometry.to_wkt() == "MULTIPOINT((1 2),(3 4))"

    def test_linestring(self) -> None:
        """Test LINESTRING output."""
        geometry = LineString(coordinates=((1.0, 2.0), (3.0, 4.0), (5.0, 6.0)))
        assert geometry.to_wkt() == "LINESTRING(1 2,3 4,5 6)"

    def test_polygon(self) -> None:
        """Test POLYGON output."""
        geometry = Polygon(coordinates=(SQUARE,))
        assert geometry.to_wkt() == "POLYGON((0 0,10 0,10 10,0 10,0 0))"

    def test_wkt_round_trip(self) -> None:
        """Test that every kind re-parses to an equal value."""
        texts = [
            "POINT(-71.0641 42.3586)",
            "POINT(1 2 3 4)",
            "MULTIPOINT((1 2),(3 4))",
            "LINESTRING(1 2,3 4,5 6)",
            "MULTILINESTRING((1 2,3 4),(5 6,7 8))",
            "POLYGON((-71.06 42.36,-71.05 42.35,-71.06 42.35,-71.06 42.36))",
            "MULTIPOLYGON(((0 0,10 0,10 10,0 0)),((0 0,1 0,1 1,0 0),(0.2 0.1,0.5 0.1,0.5 0.4,0.2 0.1)))",
        ]
        for text in texts:
            geometry = parse_wkt(text)
            assert geometry.to_wkt() == text
            assert parse_wkt(geometry.to_wkt()) == geometry


class TestShapely:
    """Tests for Shapely conversion."""

    def test_point(self) -> None:
        """Test point conversion."""
        shapely_point = Point(coordinates=(1.0, 2.0)).to_shapely()
        assert isinstance(shapely_point, ShapelyPoint)
        assert (shapely_point.x, shapely_point.y) == (1.0, 2.0)

    def test_point_drops_measure(self) -> None:
        """Test that a 4D point keeps x, y, z."""
        shapely_point = Point(coordinates=(1.0, 2.0, 3.0, 4.0)).to_shapely()
        assert shapely_point.has_z
        assert shapely_point.z == 3.0

    def test_linestring(self) -> None:
        """Test line conversion."""
        line = LineString(coordinates=((0.0, 0.0), (3.0, 4.0))).to_shapely()
        assert isinstance(line, ShapelyLineString)
        assert line.length == pytest.approx(5.0)

    def test_polygon_with_hole(self) -> None:
        """Test polygon conversion keeps holes."""
        polygon = Polygon(coordinates=(SQUARE, HOLE)).to_shapely()
        assert isinstance(polygon, ShapelyPolygon)
        assert len(polygon.interiors) == 1
        assert polygon.area == pytest.approx(96.0)

    def test_multipolygon(self) -> None:
        """Test multipolygon conversion."""
        multi = MultiPolygon(coordinates=((SQUARE,), (HOLE,))).to_shapely()
        assert isinstance(multi, ShapelyMultiPolygon)
        assert len(multi.geoms) == 2
