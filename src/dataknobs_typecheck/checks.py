"""Value checks with default fallback.

``check`` validates a value with a predicate. When the value does not pass,
a default can be substituted (with a warning on the ``"validation"`` logger)
instead of raising ``ValidationError``.

Example:
    ```python
    from dataknobs_typecheck import check, is_number, is_string

    port = check(raw_port, is_number, "number", "port", default_value=8080)
    label = check(raw_label, is_string, "string", "label",
                  default_value=lambda bad: str(bad))
    ```

``check_type`` is the older registry-based entry point, kept for existing
callers.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any, Callable, TypeVar

from .exceptions import ValidationError, name_prefix, value_type
from .log import log
from .predicates import is_present
from .registry import get_validator_optional
from .type_spec import ClassRef, PredicateRef, RegistryKey, to_type_spec

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING: Any = object()


def _resolve_default(default_value: Any, value: Any) -> Any:
    if callable(default_value):
        return default_value(value)
    return default_value


def _warn(message: str, *args: Any) -> None:
    """Log a default-substitution warning; a failing log handler never changes the result."""
    try:
        log.warning(message, *args)
    except Exception:
        logger.debug("Failed to emit validation warning", exc_info=True)


def check(
    value: Any,
    validator: Callable[[Any], bool],
    expected: str,
    name: str | None = None,
    *,
    default_value: T | Callable[[Any], T] | None = None,
    warn_if: Callable[[Any], bool] | None = None,
) -> T:
    """Check a value with a validator, falling back to a default.

    Args:
        value: The value to check
        validator: Predicate deciding whether the value is valid
        expected: Description of the expected value, used in messages
        name: Optional name of the checked subject, used in messages
        default_value: Value to return when the check fails. If callable, it
            is called with the invalid value to produce the default. Falsy
            defaults (``0``, ``""``, ``False``, ``None``) count as no default.
        warn_if: Decides whether substituting the default logs a warning.
            By default, a warning is logged unless the value was ``None``.

    Returns:
        The value if valid, otherwise the resolved default

    Raises:
        ValidationError: If the value is invalid and there is no default
    """
    if validator(value):
        return value

    if default_value:
        default_value = _resolve_default(default_value, value)
        should_warn = warn_if or is_present
        if should_warn(value):
            _warn(ValidationError.get_message(value, expected, name))
        return default_value  # type: ignore[return-value]

    raise ValidationError(value, expected, name)


def check_type(
    value: Any,
    type_: Any,
    name: str | None,
    default_value: Any = _MISSING,
    warn_if: Callable[[Any], bool] = is_present,
) -> Any:
    """Check the type of the given value.

    .. deprecated::
        Use :func:`check` instead.

    Raises ``ValidationError`` if the type is not correct and no default is
    provided. Unlike ``check``, any default passed explicitly is used, even
    ``None``, ``0`` or ``False``.

    A type key that has no registered validator makes this return ``False``
    without checking the value. Since ``False`` is also a valid result for a
    boolean value that passed, callers checking booleans cannot tell the two
    apart.

    Args:
        value: The value to check
        type_: A registered type key, a class (value must be an instance),
            or a predicate function
        name: The name of the variable, used in error and warning messages
        default_value: The default to use if the value does not match. If
            callable, it is called with the invalid value.
        warn_if: If a default is applied, a warning is logged when this
            returns True for the value. By default no warning is logged for
            ``None``.

    Returns:
        The value, the resolved default, or ``False`` for an unknown type key

    Raises:
        ValidationError: If the value is invalid and no default is given
    """
    warnings.warn(
        "check_type is deprecated, use check instead",
        DeprecationWarning,
        stacklevel=2,
    )

    spec = to_type_spec(type_)
    valid = False
    expected = str(spec.raw)

    if isinstance(spec, ClassRef):
        valid = isinstance(value, spec.cls)
        expected = f"instance of {spec.cls.__name__}"
    elif isinstance(spec, RegistryKey):
        validator = get_validator_optional(spec.key)
        if validator is None:
            return False
        valid = validator(value)
        expected = validator.name
    elif isinstance(spec, PredicateRef):
        valid = bool(spec.predicate(value))
        expected = str(value_type(spec.predicate))

    if valid:
        return value

    if default_value is _MISSING:
        raise ValidationError(value, expected, name)

    default_value = _resolve_default(default_value, value)
    if warn_if(value):
        _warn(
            "%sExpected %s, %s given. Using default: %r",
            name_prefix(name),
            spec.raw,
            value_type(value),
            default_value,
        )
    return default_value


__all__ = ["check", "check_type"]
