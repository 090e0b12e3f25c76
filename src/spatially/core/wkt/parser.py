"""
Well-Known-Text geometry parser.

Single-pass recursive readers built bottom-up on the scanner:
point-list -> ring-list -> polygon-list. The leading keyword alone decides
which reader runs; nothing already consumed is re-examined, and the first
failure aborts the whole parse.
"""

import logging
from typing import List, Optional, Tuple, Union

from spatially.core.config import settings
from spatially.core.errors import (
    ArityMismatchError,
    ExpectedTokenError,
    RingTooShortError,
    TrailingInputError,
    UnclosedRingError,
    UnknownGeometryTypeError,
    WKTParseError,
)
from spatially.core.wkt.scanner import Scanner
from spatially.models.geometry import (
    MAX_COORDINATE_ARITY,
    MIN_COORDINATE_ARITY,
    MIN_RING_LENGTH,
    Coordinate,
    Geometry,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

logger = logging.getLogger(__name__)

PointList = List[Coordinate]
RingList = List[PointList]


def _read_coordinate(scanner: Scanner) -> Tuple[Coordinate, bool]:
    start = scanner.position
    coordinate, comma = scanner.read_numeric_tuple()
    if len(coordinate) < MIN_COORDINATE_ARITY:
        raise ArityMismatchError(
            f"Point must be at least 2d, got {len(coordinate)} elements",
            position=start,
            details={"arity": len(coordinate)},
        )
    if len(coordinate) > MAX_COORDINATE_ARITY:
        raise ArityMismatchError(
            f"Point can be at most 4d, got {len(coordinate)} elements",
            position=start,
            details={"arity": len(coordinate)},
        )
    return coordinate, comma


def read_point_list(scanner: Scanner, multi: bool = False) -> PointList:
    """
    Read a parenthesized list of coordinates.

    With ``multi`` set, each coordinate may be wrapped in its own group,
    as in ``((1 2), (3 4))``; when the first member is not wrapped the
    bare ``(1 2, 3 4)`` form is read instead.

    Args:
        scanner: Scanner positioned before the opening parenthesis
        multi: Whether members are individually parenthesized

    Returns:
        Ordered list of coordinates (at least one)
    """
    scanner.expect_open_paren()
    wrapped = multi and scanner.peek() == "("
    if wrapped:
        scanner.expect_open_paren()

    points: PointList = []
    while True:
        coordinate, comma = _read_coordinate(scanner)
        points.append(coordinate)
        if not wrapped:
            if comma:
                continue
            return points

        if comma:
            # A member group holds exactly one coordinate
            raise ExpectedTokenError("')'", "','", position=scanner.position - 1)
        if not scanner.expect_comma_or_close():
            return points
        scanner.expect_open_paren()


def read_ring_list(scanner: Scanner, is_polygon: bool = False) -> RingList:
    """
    Read a parenthesized list of point lists.

    Args:
        scanner: Scanner positioned before the opening parenthesis
        is_polygon: Enforce polygon ring rules (at least 4 points, closed)

    Returns:
        Ordered list of rings or line strings

    Raises:
        RingTooShortError: If a polygon ring has fewer than 4 points
        UnclosedRingError: If a polygon ring's first and last points differ
    """
    scanner.expect_open_paren()
    rings: RingList = []
    while True:
        start = scanner.position
        points = read_point_list(scanner)
        if is_polygon:
            if len(points) < MIN_RING_LENGTH:
                raise RingTooShortError(len(points), position=start)
            if points[0] != points[-1]:
                raise UnclosedRingError(position=start)
        rings.append(points)
        if not scanner.expect_comma_or_close():
            return rings


def read_polygon_list(scanner: Scanner) -> List[RingList]:
    """
    Read a parenthesized list of polygons, each a list of closed rings.

    Args:
        scanner: Scanner positioned before the opening parenthesis

    Returns:
        Ordered list of polygons
    """
    scanner.expect_open_paren()
    polygons: List[RingList] = []
    while True:
        polygons.append(read_ring_list(scanner, is_polygon=True))
        if not scanner.expect_comma_or_close():
            return polygons


def read_geometry(scanner: Scanner, legacy_multilinestring: bool = False) -> Geometry:
    """
    Read one geometry, dispatching on its leading keyword.

    Args:
        scanner: Scanner positioned before the keyword
        legacy_multilinestring: Return only the first line of a
            MULTILINESTRING, as a LineString

    Returns:
        The parsed geometry value
    """
    start = scanner.position
    keyword = scanner.read_identifier()

    if keyword in ("POINT", "MULTIPOINT", "LINESTRING"):
        points = read_point_list(scanner, multi=keyword == "MULTIPOINT")
        if keyword == "POINT":
            if len(points) != 1:
                raise ArityMismatchError(
                    f"Expected 1 got {len(points)} points",
                    position=start,
                    details={"geometry_type": keyword, "count": len(points)},
                )
            return Point(coordinates=points[0])
        if keyword == "MULTIPOINT":
            return MultiPoint(coordinates=points)
        return LineString(coordinates=points)

    if keyword == "POLYGON":
        return Polygon(coordinates=read_ring_list(scanner, is_polygon=True))

    if keyword == "MULTILINESTRING":
        lines = read_ring_list(scanner, is_polygon=False)
        if legacy_multilinestring:
            return LineString(coordinates=lines[0])
        return MultiLineString(coordinates=lines)

    if keyword == "MULTIPOLYGON":
        return MultiPolygon(coordinates=read_polygon_list(scanner))

    raise UnknownGeometryTypeError(keyword, position=start)


def parse_wkt(
    text: Union[str, bytes],
    strict: Optional[bool] = None,
    legacy_multilinestring: Optional[bool] = None,
) -> Geometry:
    """
    Parse a Well-Known-Text literal into a geometry value.

    Supported keywords are POINT, MULTIPOINT, LINESTRING, POLYGON,
    MULTILINESTRING and MULTIPOLYGON (upper-case). Whitespace between
    tokens is insignificant.

    Args:
        text: WKT geometry literal
        strict: Reject non-whitespace after the geometry
            (default: ``settings.wkt_strict``)
        legacy_multilinestring: Collapse MULTILINESTRING to its first line
            (default: ``settings.wkt_legacy_multilinestring``)

    Returns:
        The parsed geometry

    Raises:
        WKTParseError: On the first malformed token; the specific subclass
            identifies the failure kind

    Examples:
        >>> parse_wkt("POINT(-71.0641 42.3586)")
        Point(type='Point', coordinates=(-71.0641, 42.3586))
    """
    if strict is None:
        strict = settings.wkt_strict
    if legacy_multilinestring is None:
        legacy_multilinestring = settings.wkt_legacy_multilinestring

    try:
        scanner = Scanner(text)
        geometry = read_geometry(scanner, legacy_multilinestring=legacy_multilinestring)
        if strict and not scanner.at_end():
            raise TrailingInputError(scanner.remainder(), position=scanner.position)
    except WKTParseError as e:
        logger.debug(f"WKT parse failed: {e.error_code} at position {e.position}")
        raise

    logger.debug(f"Parsed {geometry.type} from {len(scanner.text)} characters of WKT")
    return geometry
