"""
Data models and schemas.
"""

from .geometry import (
    Coordinate,
    Geometry,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    geometry_from_geojson,
)
from .feature import Feature, FeatureCollection

__all__ = [
    # Geometry models
    "Coordinate",
    "Geometry",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "geometry_from_geojson",
    # Feature models
    "Feature",
    "FeatureCollection",
]
