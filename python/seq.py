#!/usr/bin/env python3
"""
Name: seq
Description: print a numeric sequence
Author: Michael Mikonos (Original Perl Author)
License: artistic2

A Python port of the 'seq' utility.

Prints the numbers from 'first' to 'last' in steps of 'incr', each one
followed by a separator. Every number is printed with as many fractional
digits as the most precise argument, so 'seq 1 0.25 2' prints 1.00, 1.25
and so on. With -w the numbers are zero-padded to a common width.
"""

import sys
import argparse
import math
import re
from typing import NamedTuple, Optional

__version__ = "1.3"

PROGRAM = "seq"
USAGE = f"Usage: {PROGRAM} [-w] [-f format] [-s string] [-t string] [first [incr]] last"

# Optional sign, digits with an optional fraction (or a bare fraction),
# optional exponent. ASCII only, so 'inf', 'nan' and '1_000' are refused.
FLOAT_RE = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$', re.ASCII)


class SeqError(Exception):
    """Base class for errors reported by seq."""


class UsageError(SeqError):
    def __init__(self):
        super().__init__(USAGE)


class InvalidNumberError(SeqError):
    def __init__(self, literal: str):
        self.literal = literal
        super().__init__(f"{PROGRAM}: invalid floating point argument: {literal}")


class InvalidIncrementError(SeqError):
    pass


class OptionParseError(SeqError):
    pass


class Sequence(NamedTuple):
    first: float
    increment: float
    last: float
    precision: int


def get_float(num_str: str) -> float:
    """
    Validates that a string is a valid floating point number and returns it.
    Raises InvalidNumberError naming the original string otherwise.
    """
    if not FLOAT_RE.match(num_str.strip()):
        raise InvalidNumberError(num_str)
    num = float(num_str)
    if not math.isfinite(num):  # '1e999' overflows to inf
        raise InvalidNumberError(num_str)
    return num


def get_precision(args: list) -> int:
    """
    Returns the largest number of characters after the decimal point among
    the arguments. Arguments without a decimal point count as zero.
    """
    precision = 0
    for num_str in args:
        num_str = num_str.strip()
        if '.' in num_str:
            precision = max(precision, len(num_str) - num_str.index('.') - 1)
    return precision


def resolve_increment(first: float, increment: Optional[float], last: float,
                      precision: int) -> Sequence:
    """Builds the final Sequence, filling in an unset increment from the direction."""
    if increment is None:
        increment = 1.0 if first <= last else -1.0
    return Sequence(first, increment, last, precision)


def parse_sequence(args: list) -> Sequence:
    """
    Turns the free arguments '[first [incr]] last' into a Sequence.

    One argument counts up from 1. Two arguments count up or down by one
    depending on which end is larger. With three arguments the increment
    must point from 'first' towards 'last'.
    """
    num_args = len(args)
    if num_args == 0 or num_args > 3:
        raise UsageError()

    if num_args == 1:
        first, increment, last = 1.0, 1.0, get_float(args[0])
    elif num_args == 2:
        first, increment, last = get_float(args[0]), None, get_float(args[1])
    else:
        first, increment, last = (get_float(a) for a in args)

        if increment == 0:
            way = "in" if first < last else "de"
            raise InvalidIncrementError(f"{PROGRAM}: zero {way}crement")
        if increment <= 0 and first < last:
            raise InvalidIncrementError(f"{PROGRAM}: needs positive increment")
        if increment >= 0 and first > last:
            raise InvalidIncrementError(f"{PROGRAM}: needs negative decrement")

    return resolve_increment(first, increment, last, get_precision(args))


def format_number(num: float, precision: int, width: int = 1) -> str:
    """Fixed-point rendering, zero-padded on the left of the whole string."""
    return f"{num:.{precision}f}".rjust(width, '0')


def equal_width(seq: Sequence) -> int:
    """The width of the wider of the two end points."""
    return max(len(format_number(seq.first, seq.precision)),
               len(format_number(seq.last, seq.precision)))


def emit_sequence(out, seq: Sequence, separator: str, width: int,
                  terminator: Optional[str], format_str: Optional[str] = None):
    """
    Writes every number of the sequence to 'out', each followed by the
    separator, then the terminator if there is one.
    """
    ascending = seq.first <= seq.last

    # An increment pointing away from 'last' yields nothing (e.g. 'seq 0').
    if (seq.last - seq.first) * seq.increment >= 0:
        cur = seq.first
        i = 0
        while (cur <= seq.last) if ascending else (cur >= seq.last):
            if format_str is not None:
                out.write(format_str % cur)
            else:
                out.write(format_number(cur, seq.precision, width))
            out.write(separator)
            # Recompute from the origin so rounding errors don't accumulate.
            i += 1
            cur = seq.first + seq.increment * i

    if terminator is not None:
        out.write(terminator)


class SeqArgumentParser(argparse.ArgumentParser):
    """An ArgumentParser that raises OptionParseError instead of exiting."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # Anything like '-8', '-.5' or '-1e1' is a number, not a flag.
        self._negative_number_matcher = re.compile(r'^-\.?\d')

    def error(self, message):
        raise OptionParseError(f"{PROGRAM}: {message}\n{USAGE}")


def build_parser() -> SeqArgumentParser:
    parser = SeqArgumentParser(
        prog=PROGRAM,
        description="Print a sequence of numbers.",
        usage="%(prog)s [-w] [-f format] [-s string] [-t string] [first [incr]] last"
    )
    parser.add_argument('-V', '--version', action='version',
                        version=f'%(prog)s {__version__}')
    parser.add_argument('-w', '--equal-width', action='store_true',
                        help="equalize width by padding with leading zeroes")
    parser.add_argument('-f', '--format', dest='format_str', metavar='format',
                        help="use printf style floating-point format")
    parser.add_argument('-s', '--separator', default="\n", metavar='string',
                        help="use string to separate numbers (default: \\n)")
    parser.add_argument('-t', '--terminator', metavar='string',
                        help="print string after the last number")
    parser.add_argument('numbers', nargs='*', metavar='[first [incr]] last',
                        help="the sequence bounds and step")
    return parser


def parse_options(argv: list) -> argparse.Namespace:
    """
    Parses flags and numbers, which may be given in any order.
    Everything after '--' is taken as a number.
    """
    parser = build_parser()

    rest = []
    if '--' in argv:
        split = argv.index('--')
        argv, rest = argv[:split], argv[split + 1:]

    args = parser.parse_intermixed_args(argv)
    args.numbers = list(args.numbers or []) + rest

    if args.format_str is not None:
        if args.equal_width:
            parser.error("format string may not be specified when printing equal width strings")
        try:
            args.format_str % 1.0
        except (TypeError, ValueError):
            parser.error(f"invalid format string: '{args.format_str}'")

    return args


def run(out, argv: list):
    """Parses the command line and writes the sequence to 'out'."""
    args = parse_options(argv)

    seq = parse_sequence(args.numbers)
    width = equal_width(seq) if args.equal_width else 1

    emit_sequence(out, seq, args.separator, width, args.terminator, args.format_str)


def main(argv=None):
    """Runs seq on the process arguments and exits with its status."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        run(sys.stdout, argv)
        sys.stdout.flush()
    except SeqError as e:
        print(e, file=sys.stderr)
        sys.exit(2)
    except (IOError, KeyboardInterrupt):
        # Broken pipe (e.g. 'seq 1000000 | head') or Ctrl+C.
        sys.stderr.close()
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
