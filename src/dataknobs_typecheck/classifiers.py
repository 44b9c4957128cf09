"""Value classifiers built on the primitive-kind predicates."""

from __future__ import annotations

import inspect
import math
from typing import Any, Callable, Tuple, Union

from .predicates import format_number, is_boolean, is_number, is_string, parse_float

Primitive = Union[str, int, float, bool]
AlphanumericValue = Union[str, int, float]
ClassLike = Callable[..., Any]


class Alphanumeric:
    """Marker that can be used as an identifier for the alphanumeric type."""


def is_alphanumeric(value: Any) -> bool:
    """Check if a value is a string or can be read as a number.

    The numeric part uses the loose parse, so any object whose text starts
    with a number passes as well.

    Args:
        value: Value to classify

    Returns:
        True for strings and for values with a numeric text prefix
    """
    return not math.isnan(parse_float(value)) or is_string(value)


def parse_number_strict(value: Any) -> int | float | None:
    """Parse a value as a number, accepting canonically formatted text only.

    Numbers are returned unchanged. Strings are parsed and then formatted
    back; if the text differs from the input (``"007"``, ``"1.0"``,
    ``" 7"``) there is no match.

    Args:
        value: Value to parse

    Returns:
        The number (``int`` when integral and below ``1e21``), or ``None``
        when the value is not a canonical numeric string

    Example:
        ```python
        parse_number_strict("7")
        # 7
        parse_number_strict("007") is None
        # True
        ```
    """
    if is_number(value):
        return value
    if not is_string(value):
        return None

    as_number = parse_float(value)
    if math.isnan(as_number):
        return None
    if format_number(as_number) != value:
        return None

    if as_number.is_integer() and abs(as_number) < 1e21:
        return int(as_number)
    return as_number


def is_primitive(value: Any) -> bool:
    """Check if a value is a primitive (string/number/boolean)."""
    return is_string(value) or is_number(value) or is_boolean(value)


def is_class(value: Any) -> bool:
    """Check if a value is a class (or any other callable)."""
    return callable(value)


def ancestors_of(value: Any) -> Tuple[Any, ...]:
    """Get the inheritance chain of a class-like value, excluding itself.

    Plain callables have no ancestors.
    """
    if not inspect.isclass(value):
        return ()
    return inspect.getmro(value)[1:]


def is_subclass(value: Any, parent: Any, include_identity: bool = True) -> bool:
    """Check if a value is a subclass of the given parent class.

    Args:
        value: Value to check
        parent: Parent class
        include_identity: Whether ``parent`` itself counts as a subclass

    Returns:
        True if ``parent`` is among the ancestors of ``value``, or if
        ``value is parent`` and identity is included
    """
    if not is_class(value):
        return False

    return parent in ancestors_of(value) or (include_identity and value is parent)


__all__ = [
    "Alphanumeric",
    "AlphanumericValue",
    "ClassLike",
    "Primitive",
    "is_alphanumeric",
    "parse_number_strict",
    "is_primitive",
    "is_class",
    "ancestors_of",
    "is_subclass",
]
