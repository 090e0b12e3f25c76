"""
Cursor-based scanner over a Well-Known-Text literal.

The scanner owns nothing but an integer position into the immutable input
text. One scanner is created per parse call and discarded afterwards, so
concurrent parses never share state.
"""

import math
import re
from typing import List, Tuple, Union

from spatially.core.errors import (
    ExpectedTokenError,
    InvalidEncodingError,
    InvalidNumberError,
    MissingIdentifierError,
)

WHITESPACE = frozenset(" \t\r\n")

_IDENTIFIER = re.compile(r"[A-Za-z]+")
_NUMBER = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

END_OF_INPUT = "end of input"


class Scanner:
    """
    Stateful cursor over WKT text.

    Attributes:
        text: The input being scanned
        position: Offset of the next unread character
    """

    def __init__(self, text: Union[str, bytes]):
        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError as e:
                raise InvalidEncodingError(e.reason, position=e.start) from e
        self.text = text
        self.position = 0

    def __repr__(self) -> str:
        return f"Scanner(position={self.position}, length={len(self.text)})"

    def _describe(self) -> str:
        if self.position >= len(self.text):
            return END_OF_INPUT
        return repr(self.text[self.position])

    def at_end(self) -> bool:
        """True once only whitespace remains."""
        self.skip_whitespace()
        return self.position >= len(self.text)

    def remainder(self) -> str:
        return self.text[self.position:]

    def skip_whitespace(self) -> None:
        """Advance over space, tab, carriage return and newline."""
        text = self.text
        while self.position < len(text) and text[self.position] in WHITESPACE:
            self.position += 1

    def peek(self) -> str:
        """
        Return the next non-whitespace character without consuming it.

        Returns:
            The character, or an empty string at end of input
        """
        self.skip_whitespace()
        return self.text[self.position:self.position + 1]

    def read_identifier(self) -> str:
        """
        Read a run of ASCII letters.

        Raises:
            MissingIdentifierError: If the next non-whitespace character is
                not a letter
        """
        self.skip_whitespace()
        match = _IDENTIFIER.match(self.text, self.position)
        if match is None:
            raise MissingIdentifierError(self._describe(), position=self.position)
        self.position = match.end()
        return match.group()

    def expect_open_paren(self) -> None:
        """
        Consume a ``(``.

        Raises:
            ExpectedTokenError: If the next non-whitespace character is not ``(``
        """
        if self.peek() != "(":
            raise ExpectedTokenError("'('", self._describe(), position=self.position)
        self.position += 1

    def expect_comma_or_close(self) -> bool:
        """
        Consume a ``,`` or ``)``.

        Returns:
            True if a comma was consumed, False for a closing parenthesis

        Raises:
            ExpectedTokenError: If the next character is neither
        """
        token = self.peek()
        if token not in (",", ")"):
            raise ExpectedTokenError(
                "',' or ')'", self._describe(), position=self.position
            )
        self.position += 1
        return token == ","

    def read_number(self) -> float:
        """
        Read one floating-point literal.

        Raises:
            InvalidNumberError: If no literal starts here or it overflows
        """
        start = self.position
        match = _NUMBER.match(self.text, start)
        if match is None:
            raise InvalidNumberError(self._describe(), position=start)
        value = float(match.group())
        if math.isinf(value):
            raise InvalidNumberError(repr(match.group()), position=start)
        self.position = match.end()
        return value

    def read_numeric_tuple(self) -> Tuple[Tuple[float, ...], bool]:
        """
        Read whitespace-separated numbers up to a ``,`` or ``)``.

        The terminator is consumed. Arity is not checked here; callers
        validate it against the geometry being read.

        Returns:
            The components read and whether the terminator was a comma

        Raises:
            InvalidNumberError: If a component is not a valid number
        """
        components: List[float] = []
        self.skip_whitespace()
        while True:
            components.append(self.read_number())
            token = self.peek()
            if token in (",", ")"):
                self.position += 1
                return tuple(components), token == ","
            if not token:
                raise ExpectedTokenError(
                    "',' or ')'", END_OF_INPUT, position=self.position
                )
