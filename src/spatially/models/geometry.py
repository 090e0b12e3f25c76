"""
Pydantic models for GeoJSON-style geometry values.

Each geometry kind is a frozen model with a ``type`` discriminator and a
``coordinates`` field shaped exactly like its GeoJSON counterpart. The
``Geometry`` union is closed: consumers dispatch on ``geometry.type``.
"""

import math
from abc import abstractmethod
from typing import Annotated, Any, Dict, List, Literal, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from shapely.geometry import shape
from shapely.geometry.base import BaseGeometry

# x, y, optional z, optional m
Coordinate = Tuple[float, ...]

MIN_COORDINATE_ARITY = 2
MAX_COORDINATE_ARITY = 4
MIN_RING_LENGTH = 4


def check_coordinate(coordinate: Coordinate) -> Coordinate:
    """
    Validate coordinate arity and that every component is finite.

    Raises:
        ValueError: If the coordinate has fewer than 2 or more than 4
            components, or contains NaN/infinity
    """
    if not MIN_COORDINATE_ARITY <= len(coordinate) <= MAX_COORDINATE_ARITY:
        raise ValueError(
            f"Coordinate must have 2 to 4 elements, got {len(coordinate)}"
        )
    if not all(math.isfinite(value) for value in coordinate):
        raise ValueError(f"Coordinate values must be finite: {coordinate}")
    return coordinate


def check_ring(ring: Tuple[Coordinate, ...]) -> Tuple[Coordinate, ...]:
    """
    Validate that a polygon ring has at least 4 coordinates and is closed.

    Raises:
        ValueError: If the ring is too short or its endpoints differ
    """
    if len(ring) < MIN_RING_LENGTH:
        raise ValueError(f"A polygon ring must have at least 4 points, got {len(ring)}")
    if ring[0] != ring[-1]:
        raise ValueError("A polygon ring must be closed")
    return ring


def format_number(value: float) -> str:
    """Shortest round-tripping text for a coordinate component."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _coordinate_wkt(coordinate: Coordinate) -> str:
    return " ".join(format_number(value) for value in coordinate)


def _coordinate_list_wkt(coordinates: Tuple[Coordinate, ...]) -> str:
    return "(" + ",".join(_coordinate_wkt(c) for c in coordinates) + ")"


def _ring_list_wkt(rings: Tuple[Tuple[Coordinate, ...], ...]) -> str:
    return "(" + ",".join(_coordinate_list_wkt(ring) for ring in rings) + ")"


def _as_lists(value: Any) -> Any:
    if isinstance(value, tuple):
        return [_as_lists(item) for item in value]
    return value


class BaseGeometryModel(BaseModel):
    """
    Shared behavior for all geometry models.

    Subclasses define ``type``, ``coordinates`` and ``to_wkt``.
    """

    model_config = ConfigDict(frozen=True)

    def to_geojson(self) -> Dict[str, Any]:
        """
        Convert to a GeoJSON geometry dictionary.

        Returns:
            Dictionary with ``type`` and nested-list ``coordinates``
        """
        return {"type": self.type, "coordinates": _as_lists(self.coordinates)}  # type: ignore[attr-defined]

    def to_shapely(self) -> BaseGeometry:
        """
        Convert to the equivalent Shapely geometry.

        Shapely has no measure dimension, so 4D coordinates keep x, y, z only.
        """
        return shape(_drop_measure(self.to_geojson()))

    @abstractmethod
    def to_wkt(self) -> str:
        """Serialize to Well-Known-Text."""

    def __str__(self) -> str:
        return self.to_wkt()


def _drop_measure(geojson: Dict[str, Any]) -> Dict[str, Any]:
    def trim(value: Any) -> Any:
        if value and isinstance(value[0], (int, float)):
            return value[:3]
        return [trim(item) for item in value]

    return {"type": geojson["type"], "coordinates": trim(geojson["coordinates"])}


class Point(BaseGeometryModel):
    """A single position."""

    type: Literal["Point"] = "Point"
    coordinates: Coordinate

    @field_validator("coordinates")
    @classmethod
    def validate_coordinates(cls, v: Coordinate) -> Coordinate:
        return check_coordinate(v)

    @property
    def x(self) -> float:
        return self.coordinates[0]

    @property
    def y(self) -> float:
        return self.coordinates[1]

    def to_wkt(self) -> str:
        return f"POINT({_coordinate_wkt(self.coordinates)})"


class MultiPoint(BaseGeometryModel):
    """An ordered collection of positions."""

    type: Literal["MultiPoint"] = "MultiPoint"
    coordinates: Tuple[Coordinate, ...] = Field(..., min_length=1)

    @field_validator("coordinates")
    @classmethod
    def validate_coordinates(cls, v: Tuple[Coordinate, ...]) -> Tuple[Coordinate, ...]:
        for coordinate in v:
            check_coordinate(coordinate)
        return v

    def to_wkt(self) -> str:
        members = ",".join(f"({_coordinate_wkt(c)})" for c in self.coordinates)
        return f"MULTIPOINT({members})"


class LineString(BaseGeometryModel):
    """An ordered path of positions; no closure requirement."""

    type: Literal["LineString"] = "LineString"
    coordinates: Tuple[Coordinate, ...] = Field(..., min_length=1)

    @field_validator("coordinates")
    @classmethod
    def validate_coordinates(cls, v: Tuple[Coordinate, ...]) -> Tuple[Coordinate, ...]:
        for coordinate in v:
            check_coordinate(coordinate)
        return v

    def to_wkt(self) -> str:
        return f"LINESTRING{_coordinate_list_wkt(self.coordinates)}"


class MultiLineString(BaseGeometryModel):
    """An ordered collection of line strings."""

    type: Literal["MultiLineString"] = "MultiLineString"
    coordinates: Tuple[Tuple[Coordinate, ...], ...] = Field(..., min_length=1)

    @field_validator("coordinates")
    @classmethod
    def validate_coordinates(
        cls, v: Tuple[Tuple[Coordinate, ...], ...]
    ) -> Tuple[Tuple[Coordinate, ...], ...]:
        for line in v:
            if not line:
                raise ValueError("A line string must have at least 1 point")
            for coordinate in line:
                check_coordinate(coordinate)
        return v

    def to_wkt(self) -> str:
        return f"MULTILINESTRING{_ring_list_wkt(self.coordinates)}"


class Polygon(BaseGeometryModel):
    """
    A polygon given as closed rings.

    The first ring is the exterior boundary, the rest are holes. Each ring
    has at least 4 coordinates and ends where it starts.
    """

    type: Literal["Polygon"] = "Polygon"
    coordinates: Tuple[Tuple[Coordinate, ...], ...] = Field(..., min_length=1)

    @field_validator("coordinates")
    @classmethod
    def validate_coordinates(
        cls, v: Tuple[Tuple[Coordinate, ...], ...]
    ) -> Tuple[Tuple[Coordinate, ...], ...]:
        for ring in v:
            for coordinate in ring:
                check_coordinate(coordinate)
            check_ring(ring)
        return v

    @property
    def exterior(self) -> Tuple[Coordinate, ...]:
        return self.coordinates[0]

    @property
    def holes(self) -> Tuple[Tuple[Coordinate, ...], ...]:
        return self.coordinates[1:]

    def to_wkt(self) -> str:
        return f"POLYGON{_ring_list_wkt(self.coordinates)}"


class MultiPolygon(BaseGeometryModel):
    """An ordered collection of polygons, each a sequence of rings."""

    type: Literal["MultiPolygon"] = "MultiPolygon"
    coordinates: Tuple[Tuple[Tuple[Coordinate, ...], ...], ...] = Field(..., min_length=1)

    @field_validator("coordinates")
    @classmethod
    def validate_coordinates(
        cls, v: Tuple[Tuple[Tuple[Coordinate, ...], ...], ...]
    ) -> Tuple[Tuple[Tuple[Coordinate, ...], ...], ...]:
        for polygon in v:
            if not polygon:
                raise ValueError("A polygon must have at least 1 ring")
            for ring in polygon:
                for coordinate in ring:
                    check_coordinate(coordinate)
                check_ring(ring)
        return v

    @property
    def polygons(self) -> List[Polygon]:
        return [Polygon(coordinates=rings) for rings in self.coordinates]

    def to_wkt(self) -> str:
        members = ",".join(_ring_list_wkt(rings) for rings in self.coordinates)
        return f"MULTIPOLYGON({members})"


Geometry = Annotated[
    Union[Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon],
    Field(discriminator="type"),
]

_geometry_adapter: TypeAdapter = TypeAdapter(Geometry)


def geometry_from_geojson(data: Mapping[str, Any]) -> Geometry:
    """
    Validate a GeoJSON geometry mapping into a typed geometry value.

    Args:
        data: Mapping with ``type`` and ``coordinates``

    Returns:
        The matching geometry model

    Raises:
        pydantic.ValidationError: If the type is unsupported or the
            coordinates are malformed
    """
    return _geometry_adapter.validate_python(dict(data))
