"""Builders for reusable class-based validators.

Example:
    ```python
    from dataknobs_typecheck import check, instance_of, sub_class

    plugin_cls = check(cls, sub_class(Plugin), "subclass of Plugin", "plugin")
    handler = check(obj, instance_of(Handler), "instance of Handler", "handler")
    ```
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .classifiers import is_subclass
from .exceptions import value_type


@runtime_checkable
class Predicate(Protocol):
    """Protocol for validator predicates."""

    def __call__(self, value: Any) -> bool: ...


class SubClassOf:
    """Predicate that passes for subclasses of a parent class.

    Args:
        parent: Parent class
        include_identity: Whether ``parent`` itself passes
    """

    def __init__(self, parent: Any, include_identity: bool = True):
        self.parent = parent
        self.include_identity = include_identity

    @property
    def description(self) -> str:
        return f"subclass of {value_type(self.parent)}"

    def __call__(self, value: Any) -> bool:
        return is_subclass(value, self.parent, self.include_identity)

    def __repr__(self) -> str:
        return (
            f"SubClassOf({value_type(self.parent)}, "
            f"include_identity={self.include_identity})"
        )


class InstanceOf:
    """Predicate that passes for instances of a class."""

    def __init__(self, cls: type):
        self.cls = cls

    @property
    def description(self) -> str:
        return f"instance of {value_type(self.cls)}"

    def __call__(self, value: Any) -> bool:
        return isinstance(value, self.cls)

    def __repr__(self) -> str:
        return f"InstanceOf({value_type(self.cls)})"


def sub_class(parent: Any, include_identity: bool = True) -> SubClassOf:
    """Return a validator that checks if its argument is a subclass of ``parent``.

    Args:
        parent: Parent class
        include_identity: Whether ``parent`` itself counts as a subclass
            (defaults to True)

    Returns:
        A new predicate on every call
    """
    return SubClassOf(parent, include_identity)


def instance_of(cls: type) -> InstanceOf:
    """Return a validator that checks if its argument is an instance of ``cls``."""
    return InstanceOf(cls)


__all__ = ["Predicate", "SubClassOf", "InstanceOf", "sub_class", "instance_of"]
