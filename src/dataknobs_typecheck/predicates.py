"""Primitive-kind predicates used by the validators.

These map the loosely-typed kinds found in JSON-like data (string, number,
boolean, array, object, function, nil) onto Python types:

- number: any ``numbers.Real`` except ``bool`` (``nan`` and ``inf`` included)
- array: ``list`` or ``tuple``
- object: ``dict``
- nil: ``None``

It also provides the loose numeric parse and the canonical number formatting
that the strict-number classifier relies on.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from numbers import Real
from typing import Any

# Longest numeric prefix accepted by the loose parse.
_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_function(value: Any) -> bool:
    return callable(value)


def is_plain_object(value: Any) -> bool:
    return isinstance(value, dict)


def is_nil(value: Any) -> bool:
    return value is None


def is_present(value: Any) -> bool:
    """Default warning rule: absent values are expected, present ones are not."""
    return value is not None


def parse_float(value: Any) -> float:
    """Parse a value as a float the loose way.

    Numbers convert directly. Anything else is turned into text with ``str()``
    and the longest numeric prefix after leading whitespace is parsed, so
    ``"12px"`` gives ``12.0``. When no prefix matches the result is ``nan``.

    Args:
        value: Any value

    Returns:
        The parsed float, or ``nan``
    """
    if is_number(value):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf

    match = _FLOAT_PREFIX.match(str(value).lstrip())
    if match is None:
        return math.nan
    return float(match.group(0))


def format_number(number: float) -> str:
    """Format a number as canonical text.

    Uses the shortest digit string that round-trips, written as a plain
    decimal while the decimal point position ``n`` stays within
    ``-6 < n <= 21``, and in exponential form (``1e+21``, ``1.5e-7``)
    outside of it. Both zeros format as ``"0"``.

    Example:
        ```python
        format_number(7.0)
        # '7'
        format_number(0.000015)
        # '0.000015'
        format_number(1e21)
        # '1e+21'
        ```
    """
    x = float(number)
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if x == 0:
        return "0"

    sign = "-" if x < 0 else ""
    decimal_tuple = Decimal(repr(abs(x))).as_tuple()
    digits = "".join(str(d) for d in decimal_tuple.digits).lstrip("0")
    exponent = int(decimal_tuple.exponent)
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    k = len(digits)
    n = exponent + k

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        e_sign = "+" if e >= 0 else "-"
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{e_sign}{abs(e)}"

    return sign + text


__all__ = [
    "is_string",
    "is_number",
    "is_boolean",
    "is_array",
    "is_function",
    "is_plain_object",
    "is_nil",
    "is_present",
    "parse_float",
    "format_number",
]
