"""
Render unsigned 64-bit values as aligned hex, decimal, magnitude and bit columns.

The hex and decimal columns are padded to a shared display width band so that
several values line up; the magnitude column is always computed from the value's
own band.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from enum import StrEnum, unique

# Local ----------------------------------------------------------------------------------------------------------------
from .units import MagnitudeBand, band_spec, classify, check_u64

BIT_LENGTHS = (4, 8, 16, 32, 64)


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class ZeroFill(StrEnum):
    """
    Glyphs for clear bits in the binary column.

    Attributes:
        BLANK (str) : Space - only set bits are visible
        DOT (str)   : Dot - set by the -b mode flag
        ZERO (str)  : Zero digit - set by the -B mode flag
    """
    BLANK = " "
    DOT = "."
    ZERO = "0"


@dataclass(frozen=True)
class DisplayOptions:
    """
    Output options of a single invocation.

    Attributes:
        show_bin (bool) : Append the binary column
        zero_fill (str) : Glyph for clear bits, one character
    """
    show_bin: bool = False
    zero_fill: str = ZeroFill.BLANK

    def __post_init__(self):
        _check_zero_fill(self.zero_fill)


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_hex(value: int, width: MagnitudeBand = MagnitudeBand.EXA) -> str:
    """
    Format value as 0x-prefixed lowercase hex, zero-padded to the width band's digit count.

    Examples:
        >>> fmt_hex(255, MagnitudeBand.BYTE)
        '0x00ff'
    """
    check_u64(value)
    return f"0x{value:0{band_spec(width).width_hex}x}"


def fmt_dec(value: int, width: MagnitudeBand = MagnitudeBand.EXA) -> str:
    """
    Format value as decimal, right-aligned in the width band's field.

    Examples:
        >>> fmt_dec(1024, MagnitudeBand.KILO)
        '   1024'
    """
    check_u64(value)
    return f"{value:{band_spec(width).width_dec}d}"


def fmt_size(value: int) -> str:
    """
    Format value in units of its own band with one decimal, e.g. '   1.5K'.

    The band is always classify(value); a wider display width shared with
    other values does not change this column.
    """
    spec = band_spec(classify(value))
    return f"{value / spec.multiplier:6.1f}{spec.suffix}"


def bit_length(value: int) -> int:
    """Return the smallest of 4, 8, 16, 32 or 64 bits that can hold value."""
    check_u64(value)
    for length in BIT_LENGTHS:
        if value < 1 << length:
            return length
    return BIT_LENGTHS[-1]


def fmt_binary(value: int, zero_fill: str = ZeroFill.BLANK) -> str:
    """
    Format value as a fixed-width bit string, most significant bit first.

    Args:
        value: Integer in range [0, 2**64 - 1].
        zero_fill: Glyph for clear bits, set bits are always '1'.

    Returns:
        str: Bit string of bit_length(value) characters.

    Raises:
        ValueError: If zero_fill is not a single character.

    Examples:
        >>> fmt_binary(5, ".")
        '.1.1'
        >>> fmt_binary(5, "0")
        '0101'
    """
    _check_zero_fill(zero_fill)
    bits = f"{value:0{bit_length(value)}b}"
    return bits.replace("0", str(zero_fill))


def fmt_number(value: int,
               width: MagnitudeBand = MagnitudeBand.EXA,
               options: DisplayOptions | None = None) -> str:
    """
    Format one output line: hex, decimal and magnitude columns, optionally followed by bits.

    Args:
        value: Integer in range [0, 2**64 - 1].
        width: Band whose field widths pad the hex and decimal columns.
        options: Display options, binary column off by default.

    Returns:
        str: The line without a trailing newline.

    Examples:
        >>> fmt_number(5, MagnitudeBand.BYTE)
        '0x0005    5    5.0b'
        >>> fmt_number(5, MagnitudeBand.BYTE, DisplayOptions(show_bin=True, zero_fill="."))
        '0x0005    5    5.0b  .1.1'
    """
    options = DisplayOptions() if options is None else options
    line = f"{fmt_hex(value, width)} {fmt_dec(value, width)} {fmt_size(value)}"
    if options.show_bin:
        line += f"  {fmt_binary(value, options.zero_fill)}"
    return line


# Private methods ------------------------------------------------------------------------------------------------------

def _check_zero_fill(zero_fill: str) -> None:
    if not isinstance(zero_fill, str) or len(zero_fill) != 1:
        raise ValueError(f"zero_fill must be a single character, but found {zero_fill!r}")
