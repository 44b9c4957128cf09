"""Registry of named validators.

A validator pairs a display name with a predicate. Validators are registered
under a type key and looked up by that key from ``check_type``. The process
registry is seeded at import with the built-in kinds and is only changed by
explicit calls.

Example:
    ```python
    from dataknobs_typecheck.registry import set_validator

    set_validator("even", lambda v: isinstance(v, int) and v % 2 == 0)
    set_validator("email", is_email, "e-mail address")
    ```

Registry access is guarded by a lock, so registration from several threads
is safe; an overwrite replaces the whole validator at once.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Iterator, List, TypeVar

from .classifiers import is_alphanumeric
from .exceptions import NotFoundError, OperationError
from .predicates import (
    is_array,
    is_boolean,
    is_function,
    is_number,
    is_plain_object,
    is_string,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

ValidatorFunction = Callable[[Any], bool]


@dataclass(frozen=True)
class Validator:
    """A named predicate.

    Attributes:
        name: Label shown in messages instead of the registry key
        function: Predicate deciding whether a value conforms
    """

    name: str
    function: ValidatorFunction

    def __call__(self, value: Any) -> bool:
        return bool(self.function(value))


class Registry(Generic[T]):
    """Thread-safe registry of items by unique key.

    Args:
        name: Name for this registry instance

    Example:
        ```python
        registry = Registry[str]("my_registry")
        registry.register("key1", "value1")
        registry.get("key1")
        # 'value1'
        ```
    """

    def __init__(self, name: str):
        self._name = name
        self._items: Dict[str, T] = {}
        self._lock = threading.RLock()

    @property
    def name(self) -> str:
        """Get registry name."""
        return self._name

    def register(self, key: str, item: T, allow_overwrite: bool = False) -> None:
        """Register an item by key.

        Args:
            key: Unique identifier for the item
            item: Item to register
            allow_overwrite: Whether to replace an existing item

        Raises:
            OperationError: If the key exists and allow_overwrite is False
        """
        with self._lock:
            if not allow_overwrite and key in self._items:
                raise OperationError(
                    f"Item '{key}' already registered in {self._name}",
                    context={"key": key, "registry": self._name},
                )
            self._items[key] = item

    def get(self, key: str) -> T:
        """Get an item by key.

        Raises:
            NotFoundError: If item not found
        """
        with self._lock:
            if key not in self._items:
                raise NotFoundError(
                    f"Item not found: {key}",
                    context={
                        "key": key,
                        "registry": self._name,
                        "available_keys": list(self._items.keys()),
                    },
                )
            return self._items[key]

    def get_optional(self, key: str) -> T | None:
        with self._lock:
            return self._items.get(key)

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._items

    def list_keys(self) -> List[str]:
        with self._lock:
            return list(self._items.keys())

    def items(self) -> List[tuple[str, T]]:
        with self._lock:
            return list(self._items.items())

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __iter__(self) -> Iterator[T]:
        with self._lock:
            return iter(list(self._items.values()))


BUILTIN_VALIDATORS: Dict[str, ValidatorFunction] = {
    "alphanumeric": is_alphanumeric,
    "array": is_array,
    "boolean": is_boolean,
    "function": is_function,
    "number": is_number,
    "object": is_plain_object,
    "string": is_string,
}


class ValidatorRegistry(Registry[Validator]):
    """Registry of validators, seeded with the built-in kinds."""

    def __init__(self, name: str = "validators", seed: bool = True):
        super().__init__(name)
        if seed:
            self.seed()

    def seed(self) -> None:
        """Reset the registry to the built-in validators only."""
        with self._lock:
            self.clear()
            for type_key, function in BUILTIN_VALIDATORS.items():
                self.register(type_key, Validator(type_key, function))

    def set_validator(
        self, type_key: str, validator: ValidatorFunction, name: str | None = None
    ) -> Validator:
        """Register or replace the validator for a type key.

        Args:
            type_key: Key the validator is looked up by
            validator: Predicate function
            name: Display name for messages; defaults to ``type_key``

        Returns:
            The registered Validator
        """
        if name is None:
            name = type_key
        entry = Validator(name, validator)
        with self._lock:
            replaced = self.has(type_key)
            self.register(type_key, entry, allow_overwrite=True)
        if replaced:
            logger.debug(f"Replaced validator for type '{type_key}'")
        return entry


_validators = ValidatorRegistry()


def get_registry() -> ValidatorRegistry:
    """Get the process-wide validator registry."""
    return _validators


def set_validator(type_key: str, validator: ValidatorFunction, name: str | None = None) -> None:
    """Set a validator for a given type.

    The validator can then be used from ``check_type`` with the type key.

    Args:
        type_key: The name of the type
        validator: Validator function
        name: Optional name, displayed in messages instead of the type key
    """
    _validators.set_validator(type_key, validator, name)


def has_validator(type_key: str) -> bool:
    return _validators.has(type_key)


def get_validator(type_key: str) -> Validator:
    """Get the validator registered for a type key.

    Raises:
        NotFoundError: If no validator is registered under the key
    """
    return _validators.get(type_key)


def get_validator_optional(type_key: str) -> Validator | None:
    return _validators.get_optional(type_key)


def list_validators() -> List[str]:
    return _validators.list_keys()


def reset_validators() -> None:
    """Drop all custom validators and restore the built-in ones."""
    _validators.seed()


__all__ = [
    "BUILTIN_VALIDATORS",
    "Registry",
    "Validator",
    "ValidatorFunction",
    "ValidatorRegistry",
    "get_registry",
    "get_validator",
    "get_validator_optional",
    "has_validator",
    "list_validators",
    "reset_validators",
    "set_validator",
]
