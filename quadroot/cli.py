import argparse
import logging
import re
import sys
from typing import List, Optional, Tuple

from . import __version__
from . import solver
from .errors import QuadrootError, InvalidArguments

logger = logging.getLogger(__name__)

# Leading whitespace as C's isspace() sees it, an optional sign, then digits.
_ATOI_PATTERN = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def parse_coefficient(string: str) -> float:
    """
    Read the leading integer of `string` the permissive way C's atoi()
    does and return it as a float. Parsing stops at the first character
    that is not a digit, and a string without leading digits gives 0.0.
    Integers too large for a double give inf or -inf.

    Examples
    --------
    >>> parse_coefficient("12abc")
    12.0

    >>> parse_coefficient("abc")
    0.0
    """
    match = _ATOI_PATTERN.match(string)
    if match is None:
        return 0.0

    # float() of the digits, not of an int, so huge values round to inf.
    value = float(match.group(1))

    # Integers have no negative zero.
    return value if value != 0.0 else 0.0


def _parse_coefficients(arguments: List[str]) -> Tuple[float, float, float]:
    if len(arguments) < 3:
        raise InvalidArguments(
            f"Expected three coefficients `a b c`, got {len(arguments)}."
        )
    if len(arguments) > 3:
        logger.warning("Ignoring extra arguments: %s", " ".join(arguments[3:]))

    a, b, c = (parse_coefficient(arg) for arg in arguments[:3])
    logger.debug("Coefficients: a=%r, b=%r, c=%r", a, b, c)
    return a, b, c


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quadroot",
        description="Computes a real root of the quadratic equation "
        "a*x**2 + b*x + c = 0 and prints it.",
        epilog="Negative numbers such as -3 are read as coefficients, but any "
        "other argument starting with '-' (for example -x) is read as an "
        "option. Put such coefficients after '--': quadroot -- 1 -x 2. "
        "Options go before or after the coefficients, not between them.",
    )
    parser.add_argument(
        "coefficients",
        nargs="*",
        metavar="coefficient",
        help="Integer coefficients a, b and c; anything after the leading "
        "digits is ignored",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a is zero or the discriminant is negative "
        "instead of printing inf or nan",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def _setup_logging(verbose: bool = False) -> None:
    package_logger = logging.getLogger("quadroot")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        a, b, c = _parse_coefficients(args.coefficients)
        result = solver.solve(a, b, c, strict=args.strict)
    except QuadrootError as err:
        print(f"{parser.prog}: error: {err}", file=sys.stderr)
        return 1

    logger.debug("Result: %r", result)
    print("%f" % result)
    return 0


def _main() -> None:
    sys.exit(main())
