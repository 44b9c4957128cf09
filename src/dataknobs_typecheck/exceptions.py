"""Exception hierarchy for dataknobs-typecheck.

Follows the dataknobs convention of a single root exception carrying an
optional context dictionary, so failures can be caught broadly and inspected
for structured details.

Example:
    ```python
    from dataknobs_typecheck.exceptions import ValidationError

    try:
        check(value, is_string, "string", "username")
    except ValidationError as e:
        logger.error(f"Error: {e}")
        logger.error(f"Context: {e.context}")
    ```

A message can be previewed without raising:
    ```python
    ValidationError.get_message(42, "string", "username")
    # 'username: Expected string, 42 given.'
    ```
"""

from typing import Any, Dict


class DataknobsError(Exception):
    """Base exception for dataknobs-typecheck.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context
        details: Alternative to context (takes precedence when both are given)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


def name_prefix(name: str | None = None) -> str:
    """Render the ``"<name>: "`` prefix of a message, or nothing without a name."""
    if not name:
        return ""
    return f"{name}: "


def value_type(value: Any) -> Any:
    """Render a value for a message.

    Callables are shown by name; anything else is returned as-is so that
    string formatting decides its text.
    """
    if callable(value):
        return getattr(value, "__name__", type(value).__name__)
    return value


class ValidationError(DataknobsError):
    """Raised when a value fails its check and no usable default was given.

    The message is computed once at construction from the observed value,
    the expected-type description and the optional subject name.

    Attributes:
        value: The value that failed validation
        expected: Description of what was expected
        name: Subject name used as message prefix, if any

    Example:
        ```python
        error = ValidationError("bad", "primitive", "x")
        str(error)
        # 'x: Expected primitive, bad given.'
        error.context
        # {'value': 'bad', 'expected': 'primitive', 'name': 'x'}
        ```
    """

    @staticmethod
    def get_message(value: Any, expected: str, name: str | None = None) -> str:
        """Build the validation message without constructing an error.

        Args:
            value: The observed value
            expected: Description of the expected type
            name: Optional subject name

        Returns:
            ``"<name>: Expected <expected>, <value> given."``
        """
        return f"{name_prefix(name)}Expected {expected}, {value_type(value)} given."

    def __init__(self, value: Any, expected: str, name: str | None = None):
        super().__init__(
            ValidationError.get_message(value, expected, name),
            context={"value": value, "expected": expected, "name": name},
        )
        self.value = value
        self.expected = expected
        self.name = name


class NotFoundError(DataknobsError):
    """Raised when a validator is looked up by a key that is not registered."""

    pass


class OperationError(DataknobsError):
    """Raised when a registry operation is not allowed, such as a duplicate key."""

    pass


class ConfigurationError(DataknobsError):
    """Raised when typecheck settings are invalid or cannot be loaded.

    Example:
        ```python
        raise ConfigurationError(
            "Validator function could not be imported",
            context={"type_key": "email", "function": "myapp.checks.is_email"}
        )
        ```
    """

    pass


__all__ = [
    "DataknobsError",
    "ValidationError",
    "NotFoundError",
    "OperationError",
    "ConfigurationError",
    "name_prefix",
    "value_type",
]
