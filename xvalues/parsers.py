"""
Parse command-line numbers into unsigned 64-bit integers.

Accepted forms:
    - Binary literals: 0b1010, 0B11 (up to 64 bits)
    - C-style integer literals with base detection: 42, 0x2a, 052
    - Integer literals with one magnitude suffix: 4K, 0x10m, 2G, 1e (powers of 1024)
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import re
from typing import Iterable

# Local ----------------------------------------------------------------------------------------------------------------
from .units import BANDS, MagnitudeBand, U64_MAX

log = logging.getLogger(__name__)

BINARY_MAX_LEN = 66  # 0b prefix + 64 bits

# strtoull() grammar with base 0: C whitespace, sign, then hex, octal or decimal digits
_INT_LITERAL = re.compile(
    r"[ \t\n\v\f\r]*(?P<sign>[+-]?)"
    r"(?:0[xX](?P<hex>[0-9a-fA-F]+)|(?P<oct>0[0-7]*)|(?P<dec>[1-9][0-9]*))"
)

SUFFIX_MULTIPLIERS = {
    spec.suffix: spec.multiplier for band, spec in BANDS.items() if band is not MagnitudeBand.BYTE
}


# Classes --------------------------------------------------------------------------------------------------------------

class ValueParseError(ValueError):
    """Base class for malformed value arguments."""

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text


class BinaryTooLong(ValueParseError):
    def __init__(self, text: str):
        super().__init__("Binary number too big, max 64 bits.", text)


class InvalidBinaryDigit(ValueParseError):
    def __init__(self, text: str):
        super().__init__("Binary numbers can only contain 0 or 1.", text)


class InvalidSuffix(ValueParseError):
    """Unrecognized trailing character after an integer literal, offset is its index in text."""

    def __init__(self, text: str, offset: int):
        super().__init__(f"Error in value {text}:{offset}", text)
        self.offset = offset


# Methods --------------------------------------------------------------------------------------------------------------

def is_binary_literal(text: str) -> bool:
    """Check for a 0b/0B prefix followed by at least one character."""
    return len(text) > 2 and text[0] == "0" and text[1] in "bB"


def parse_binary(text: str) -> int:
    """
    Parse a 0b-prefixed binary literal, most significant bit first.

    Raises:
        BinaryTooLong: If the literal holds more than 64 digits.
        InvalidBinaryDigit: If a character after the prefix is not 0 or 1.
    """
    if len(text) > BINARY_MAX_LEN:
        raise BinaryTooLong(text)

    value = 0
    for ch in text[2:]:
        if ch not in "01":
            raise InvalidBinaryDigit(text)
        value = (value << 1) | (ch == "1")
    return value


def parse_value(text: str) -> int:
    """
    Parse a single value argument into an unsigned 64-bit integer.

    Integer literals follow the unsigned C conversion: magnitudes above 2**64 - 1
    saturate to 2**64 - 1 regardless of sign, otherwise a minus sign negates
    modulo 2**64. One trailing magnitude letter
    (K, M, G, T, P, E in either case) multiplies by the matching power of 1024,
    and the product wraps modulo 2**64.

    Args:
        text: The argument as typed on the command line.

    Returns:
        int: Value in range [0, 2**64 - 1].

    Raises:
        TypeError: If text is not a str.
        BinaryTooLong: Binary literal with more than 64 digits.
        InvalidBinaryDigit: Binary literal with a digit other than 0 or 1.
        InvalidSuffix: Anything else that is not a literal with an optional magnitude letter.

    Examples:
        >>> parse_value("0x10")
        16
        >>> parse_value("4k")
        4096
        >>> parse_value("0b101")
        5
    """
    if not isinstance(text, str):
        raise TypeError(f"value text must be a str, but found {type(text).__name__}")

    if is_binary_literal(text):
        return parse_binary(text)

    match = _INT_LITERAL.match(text)
    if match is None:
        raise InvalidSuffix(text, 0)

    if match["hex"] is not None:
        value = int(match["hex"], 16)
    elif match["oct"] is not None:
        value = int(match["oct"], 8)
    else:
        value = int(match["dec"], 10)

    # Overflow saturates before the sign is applied
    if value > U64_MAX:
        value = U64_MAX
    elif match["sign"] == "-":
        value = -value & U64_MAX

    end = match.end()
    rest = text[end:]
    if not rest:
        return value

    multiplier = SUFFIX_MULTIPLIERS.get(rest[0].upper())
    if multiplier is None:
        raise InvalidSuffix(text, end)
    if len(rest) > 1:
        raise InvalidSuffix(text, end + 1)

    log.debug("value %r: suffix %r multiplies by %d", text, rest, multiplier)
    return (value * multiplier) & U64_MAX


def parse_values(texts: Iterable[str]) -> list[int]:
    """Parse every argument in order, failing on the first malformed one."""
    return [parse_value(t) for t in texts]
