"""
XValues CLI

Usage:
    xvalues                  Print a table of representative magnitudes
    xvalues 4096 0x1f 2M     Print the given values with aligned columns
    xvalues -b 0b1010 5      Same, with a bit column ('.' for clear bits)
    xvalues -B 5             Same, with a bit column ('0' for clear bits)
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import sys
from typing import Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .formatters import DisplayOptions, ZeroFill, fmt_number
from .parsers import ValueParseError, parse_values
from .units import KB, MB, GB, TB, PB, EB, MagnitudeBand, max_band

log = logging.getLogger(__name__)

# @formatter:off
MODE_FLAGS = {
    "-b": DisplayOptions(show_bin=True, zero_fill=ZeroFill.DOT),
    "-B": DisplayOptions(show_bin=True, zero_fill=ZeroFill.ZERO),
}

DEMO_VALUES = (
    8, 16, 64, 128, 256, 512,
    1 * KB, 4 * KB, 16 * KB, 64 * KB,
    1 * MB, 16 * MB, 64 * MB, 256 * MB, 512 * MB,
    1 * GB, 4 * GB,
    1 * TB,
    1 * PB,
    1 * EB,
)
# @formatter:on


# Methods --------------------------------------------------------------------------------------------------------------

def parse_mode(argv: Sequence[str]) -> tuple[DisplayOptions, list[str]]:
    """
    Split an optional leading mode flag from the value arguments.

    Only the first argument can be a mode flag, and only its first two characters
    are compared, so '-b' and '-bits' both select the dotted bit column.

    Returns:
        tuple: Display options and the remaining value arguments.
    """
    args = list(argv)
    if args:
        options = MODE_FLAGS.get(args[0][:2])
        if options is not None:
            return options, args[1:]
    return DisplayOptions(), args


def demo_lines(options: DisplayOptions | None = None) -> list[str]:
    """Render the demonstration table at the widest display width."""
    return [fmt_number(v, MagnitudeBand.EXA, options) for v in DEMO_VALUES]


def value_lines(texts: Sequence[str], options: DisplayOptions | None = None) -> list[str]:
    """
    Parse all arguments, then render them with hex and decimal columns aligned to the widest value.

    Raises:
        ValueParseError: On the first malformed argument, before anything is rendered.
    """
    values = parse_values(texts)
    width = max_band(values)
    return [fmt_number(v, width, options) for v in values]


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point, returns the process exit status."""
    argv = sys.argv[1:] if argv is None else argv
    options, texts = parse_mode(argv)
    log.debug("options: %s, values: %s", options, texts)

    if not texts:
        lines = demo_lines(options)
    else:
        try:
            lines = value_lines(texts, options)
        except ValueParseError as exc:
            print(exc, file=sys.stderr)
            return 1

    for line in lines:
        print(line)
    return 0
