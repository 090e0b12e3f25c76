"""
Custom exception hierarchy for spatially.

This module defines the base exception shared by the package and the
WKT parse error kinds raised by the scanner and geometry readers.
"""

from typing import Any, Dict, List, Optional


class SpatiallyException(Exception):
    """
    Base exception for all spatially errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        status_code: HTTP status code the error maps to
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for API responses.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}', "
            f"status_code={self.status_code})"
        )


class GeometryError(SpatiallyException):
    """
    Raised when a geometry value cannot be used for the requested operation.

    Used when a caller needs a specific geometry kind (e.g. a Point location)
    and receives another. Maps to HTTP 422 Unprocessable Entity.
    """

    def __init__(
        self,
        message: str,
        geometry_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        error_details = details or {}
        if geometry_type:
            error_details["geometry_type"] = geometry_type

        super().__init__(
            message=message,
            error_code="GEOMETRY_ERROR",
            status_code=422,
            details=error_details,
            suggestions=suggestions or ["Verify the geometry type matches the operation"],
        )


class ConfigurationError(SpatiallyException):
    """
    Raised when package configuration is invalid.

    Maps to HTTP 500 Internal Server Error.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            status_code=500,
            details=error_details,
            suggestions=suggestions or ["Check SPATIALLY_* environment variables"],
        )


class WKTParseError(SpatiallyException):
    """
    Base class for Well-Known-Text parse failures.

    Every parse failure is terminal: the whole parse is aborted and no
    partial geometry is returned. The character offset into the decoded text
    at which the failure was detected is recorded in ``details["position"]``
    and on ``self.position``. ``InvalidEncodingError`` is the one exception:
    decoding never produced text, so its position is a byte offset.
    Maps to HTTP 422 Unprocessable Entity.
    """

    error_code = "WKT_PARSE_ERROR"

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        error_details = details or {}
        if position is not None:
            error_details["position"] = position
        self.position = position

        super().__init__(
            message=message,
            error_code=type(self).error_code,
            status_code=422,
            details=error_details,
            suggestions=suggestions or ["Verify the value is valid Well-Known-Text"],
        )


class UnknownGeometryTypeError(WKTParseError):
    """Leading keyword is not a supported geometry type."""

    error_code = "UNKNOWN_GEOMETRY_TYPE"

    def __init__(self, geometry_type: str, position: Optional[int] = None):
        self.geometry_type = geometry_type
        super().__init__(
            f"Unknown or unimplemented geometry '{geometry_type}'",
            position=position,
            details={"geometry_type": geometry_type},
            suggestions=[
                "Use one of POINT, MULTIPOINT, LINESTRING, POLYGON, "
                "MULTILINESTRING, MULTIPOLYGON",
                "Geometry keywords are case-sensitive and must be upper-case",
            ],
        )


class MissingIdentifierError(WKTParseError):
    """A geometry keyword was expected but none was found."""

    error_code = "MISSING_IDENTIFIER"

    def __init__(self, found: str, position: Optional[int] = None):
        self.found = found
        super().__init__(
            f"Expected a geometry keyword, got {found}",
            position=position,
            details={"found": found},
        )


class ExpectedTokenError(WKTParseError):
    """A required punctuation token was missing."""

    error_code = "EXPECTED_TOKEN"

    def __init__(self, expected: str, found: str, position: Optional[int] = None):
        self.expected = expected
        self.found = found
        super().__init__(
            f"Expected {expected} got {found}",
            position=position,
            details={"expected": expected, "found": found},
        )


class InvalidNumberError(WKTParseError):
    """A numeric literal could not be parsed where one was expected."""

    error_code = "INVALID_NUMBER"

    def __init__(self, found: str, position: Optional[int] = None):
        self.found = found
        super().__init__(
            f"Expected a number, got {found}",
            position=position,
            details={"found": found},
        )


class ArityMismatchError(WKTParseError):
    """A coordinate or a POINT has the wrong number of elements."""

    error_code = "ARITY_MISMATCH"


class RingTooShortError(WKTParseError):
    """A polygon ring has fewer than four coordinates."""

    error_code = "RING_TOO_SHORT"

    def __init__(self, count: int, position: Optional[int] = None):
        self.count = count
        super().__init__(
            f"A polygon ring must have at least 4 points, got {count}",
            position=position,
            details={"count": count},
        )


class UnclosedRingError(WKTParseError):
    """A polygon ring's first and last coordinates differ."""

    error_code = "UNCLOSED_RING"

    def __init__(self, position: Optional[int] = None):
        super().__init__(
            "A polygon ring must be closed",
            position=position,
            suggestions=["Repeat the first coordinate at the end of each ring"],
        )


class TrailingInputError(WKTParseError):
    """Non-whitespace input remains after a complete geometry (strict mode)."""

    error_code = "TRAILING_INPUT"

    def __init__(self, remainder: str, position: Optional[int] = None):
        self.remainder = remainder
        super().__init__(
            f"Unexpected trailing input {remainder!r}",
            position=position,
            details={"remainder": remainder},
        )


class InvalidEncodingError(WKTParseError):
    """Bytes input is not valid UTF-8."""

    error_code = "INVALID_ENCODING"

    def __init__(self, reason: str, position: Optional[int] = None):
        super().__init__(
            f"WKT bytes are not valid UTF-8: {reason}",
            position=position,
            details={"reason": reason},
            suggestions=["Encode WKT input as UTF-8, or pass it as str"],
        )
