"""
Well-Known-Text parsing.

Converts WKT geometry literals into the typed geometry models in
``spatially.models.geometry``.
"""

from .parser import (
    parse_wkt,
    read_geometry,
    read_point_list,
    read_polygon_list,
    read_ring_list,
)
from .scanner import Scanner

__all__ = [
    "Scanner",
    "parse_wkt",
    "read_geometry",
    "read_point_list",
    "read_ring_list",
    "read_polygon_list",
]
