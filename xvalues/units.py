#
# XValues Magnitude Bands
#

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from enum import IntEnum, unique
from types import MappingProxyType
from typing import Iterable

log = logging.getLogger(__name__)

# @formatter:off
KB = 1024
MB = 1024 * KB
GB = 1024 * MB
TB = 1024 * GB
PB = 1024 * TB
EB = 1024 * PB

U64_MAX = 2**64 - 1
# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class MagnitudeBand(IntEnum):
    """
    Magnitude classes of an unsigned 64-bit value, ordered from smallest to largest.

    The order is meaningful: the display width of several values is the max() of their bands.
    """
    BYTE = 0
    KILO = 1
    MEGA = 2
    GIGA = 3
    TERA = 4
    PETA = 5
    EXA = 6


@dataclass(frozen=True)
class BandSpec:
    """
    Display metadata of a magnitude band.

    Attributes:
        suffix (str)     : Human-readable unit letter - b, K, M, G, T, P, E
        width_hex (int)  : Hex digits used when the band is the display width
        width_dec (int)  : Decimal field width used when the band is the display width
        multiplier (int) : Power of 1024 the band starts at
    """
    suffix: str
    width_hex: int
    width_dec: int
    multiplier: int


# @formatter:off
BANDS = MappingProxyType({
    MagnitudeBand.BYTE: BandSpec("b",  4,  4, 1),
    MagnitudeBand.KILO: BandSpec("K",  8,  7, KB),
    MagnitudeBand.MEGA: BandSpec("M",  8, 10, MB),
    MagnitudeBand.GIGA: BandSpec("G", 12, 13, GB),
    MagnitudeBand.TERA: BandSpec("T", 16, 16, TB),
    MagnitudeBand.PETA: BandSpec("P", 16, 19, PB),
    MagnitudeBand.EXA:  BandSpec("E", 16, 20, EB),
})
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def band_spec(band: MagnitudeBand | int) -> BandSpec:
    """Return display metadata for a band, accepting the enum or its integer index."""
    return BANDS[MagnitudeBand(band)]


def classify(value: int) -> MagnitudeBand:
    """
    Map an unsigned 64-bit value to its magnitude band.

    Values below 1 KiB are BYTE, values at or above 1 EiB are EXA, everything in
    between goes to the band with the largest multiplier not exceeding the value.

    Args:
        value: Integer in range [0, 2**64 - 1].

    Returns:
        MagnitudeBand: The natural band of the value.

    Raises:
        TypeError: If value is not an int (bool excluded).
        ValueError: If value is negative or does not fit into 64 bits.

    Examples:
        >>> classify(1023)
        <MagnitudeBand.BYTE: 0>
        >>> classify(1024)
        <MagnitudeBand.KILO: 1>
        >>> classify(2**64 - 1)
        <MagnitudeBand.EXA: 6>
    """
    check_u64(value)
    for band in reversed(MagnitudeBand):
        if value >= BANDS[band].multiplier:
            return band
    # value == 0
    return MagnitudeBand.BYTE


def max_band(values: Iterable[int]) -> MagnitudeBand:
    """Return the widest band among values, BYTE if there are none."""
    width = max((classify(v) for v in values), default=MagnitudeBand.BYTE)
    log.debug("display width: %s", width.name)
    return width


def check_u64(value: int) -> None:
    """Raise TypeError for non-int values and ValueError for values outside [0, 2**64 - 1]."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"value must be an int, but found {type(value).__name__}")
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"value must fit into an unsigned 64-bit integer, but found {value}")
