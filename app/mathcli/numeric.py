"""
Numeric Module

Parsing input lines into floats and rendering the final result.

Python's float() is more lenient than a plain decimal literal: it takes
digit-group underscores and non-ASCII digits. parse_number() checks the
literal first so only sign, digits, fraction and exponent get through
(plus inf/infinity/nan).
"""

import math
import re
from decimal import Decimal

_FLOAT_LITERAL = re.compile(
    r"""
    [+-]?
    (?:
        (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?
        | inf(?:inity)?
        | nan
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


def parse_number(text: str) -> float:
    """
    Parse a decimal floating-point literal.

    Args:
        text: Trimmed line content

    Returns:
        The parsed value

    Raises:
        ValueError: If text is not a float literal
    """
    if not text:
        raise ValueError("cannot parse float from empty string")
    if not _FLOAT_LITERAL.fullmatch(text):
        raise ValueError(f"invalid float literal: {text!r}")
    return float(text)


def format_result(value: float) -> str:
    """
    Render a result the way it is printed on stdout.

    Whole numbers print without a trailing ".0" (9, not 9.0). Other
    values use the shortest digits that round-trip, written out in
    positional notation (0.0000001, not 1e-07).

    Examples:
        >>> format_result(9.0)
        '9'
        >>> format_result(7 / 3)
        '2.3333333333333335'
        >>> format_result(float("nan"))
        'NaN'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value.is_integer():
        if value == 0 and math.copysign(1.0, value) < 0:
            return "-0"
        return str(int(value))
    return format(Decimal(repr(value)), "f")
