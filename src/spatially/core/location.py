"""
Point location extraction.

Analytics lookups take a single location given as WKT and send it as
latitude/longitude query parameters. This module holds the shared
parse-and-extract step.
"""

import logging
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from spatially.core.errors import GeometryError
from spatially.core.wkt import parse_wkt
from spatially.models.geometry import Geometry

logger = logging.getLogger(__name__)


class PointLocation(BaseModel):
    """
    A geographic location read from a Point geometry.

    Attributes:
        lon: Longitude (the point's x component)
        lat: Latitude (the point's y component)
    """

    lon: float = Field(..., description="Longitude")
    lat: float = Field(..., description="Latitude")

    model_config = ConfigDict(frozen=True)

    def to_query_params(self) -> Dict[str, str]:
        """Render as ``lat``/``lon`` query parameters."""
        return {"lat": repr(self.lat), "lon": repr(self.lon)}


def point_coordinates(geometry: Geometry) -> Tuple[float, float]:
    """
    Read the (lon, lat) pair out of a Point geometry.

    Any z or m component is ignored.

    Args:
        geometry: Parsed geometry value

    Returns:
        Tuple of (lon, lat)

    Raises:
        GeometryError: If the geometry is not a Point
    """
    if geometry.type != "Point":
        raise GeometryError(
            f"Location must be a point, got {geometry.type}",
            geometry_type=geometry.type,
            suggestions=["Pass a WKT POINT, e.g. 'POINT(-71.0641 42.3586)'"],
        )
    lon, lat = geometry.coordinates[0], geometry.coordinates[1]
    return lon, lat


def location_from_wkt(wkt: str) -> PointLocation:
    """
    Parse a WKT location and return its latitude/longitude.

    Args:
        wkt: WKT literal, expected to be a POINT

    Returns:
        PointLocation for the point

    Raises:
        WKTParseError: If the WKT is malformed (propagated unchanged)
        GeometryError: If the WKT is valid but not a POINT
    """
    lon, lat = point_coordinates(parse_wkt(wkt))
    logger.debug(f"Resolved location lat={lat} lon={lon}")
    return PointLocation(lon=lon, lat=lat)
