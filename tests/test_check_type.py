"""Tests for the deprecated check_type entry point."""

import logging

import pytest

from dataknobs_typecheck import (
    LOG_CHANNEL,
    ClassRef,
    RegistryKey,
    ValidationError,
    check_type,
    set_validator,
)
from typecheck_helpers import Animal, Dog, Puppy, Rock, is_even

pytestmark = pytest.mark.filterwarnings("ignore::DeprecationWarning")


def is_even_number(value):
    return isinstance(value, int) and value % 2 == 0


class TestDeprecation:
    """Test the deprecation notice."""

    def test_emits_deprecation_warning(self):
        with pytest.deprecated_call():
            check_type("s", "string", "name")


class TestRegistryKeys:
    """Test checks against registered type keys."""

    @pytest.mark.parametrize(
        "type_key, value",
        [
            ("alphanumeric", "abc"),
            ("alphanumeric", 12),
            ("array", [1, 2]),
            ("boolean", False),
            ("function", len),
            ("number", 1.5),
            ("object", {"a": 1}),
            ("string", "s"),
        ],
    )
    def test_builtin_keys_return_value(self, type_key, value):
        assert check_type(value, type_key, "subject") is value

    @pytest.mark.parametrize(
        "type_key, value",
        [
            ("alphanumeric", None),
            ("array", "abc"),
            ("boolean", 0),
            ("function", 1),
            ("number", "1"),
            ("object", []),
            ("string", 1),
        ],
    )
    def test_builtin_keys_raise(self, type_key, value):
        with pytest.raises(ValidationError):
            check_type(value, type_key, "subject")

    def test_unknown_key_returns_false(self):
        assert check_type("anything", "nonexistent-key", "x") is False
        assert check_type(None, "nonexistent-key", "x") is False

    def test_unknown_key_ignores_default(self):
        assert check_type("anything", "nonexistent-key", "x", "fallback") is False

    def test_custom_validator(self):
        set_validator("even", is_even_number)

        assert check_type(4, "even", "n") == 4
        with pytest.raises(ValidationError) as exc_info:
            check_type(3, "even", "n")
        assert str(exc_info.value) == "n: Expected even, 3 given."

    def test_display_name_used_in_error(self):
        set_validator("even", is_even_number, "even number")

        with pytest.raises(ValidationError) as exc_info:
            check_type(3, "even", "n")
        assert str(exc_info.value) == "n: Expected even number, 3 given."

    def test_overwritten_validator_is_used(self):
        set_validator("even", is_even_number)
        set_validator("even", lambda v: True)

        assert check_type(3, "even", "n") == 3

    def test_tagged_registry_key(self):
        assert check_type("s", RegistryKey("string"), "name") == "s"


class TestClasses:
    """Test checks against classes."""

    def test_instance_passes(self):
        dog = Dog()
        assert check_type(dog, Animal, "pet") is dog
        assert check_type(Puppy(), Dog, "pet")

    def test_non_instance_raises(self):
        with pytest.raises(ValidationError) as exc_info:
            check_type("rex", Animal, "pet")
        assert str(exc_info.value) == "pet: Expected instance of Animal, rex given."

    def test_class_itself_is_not_an_instance(self):
        with pytest.raises(ValidationError) as exc_info:
            check_type(Dog, Animal, "pet")
        assert str(exc_info.value) == "pet: Expected instance of Animal, Dog given."

    def test_tagged_class_ref(self):
        rock = Rock()
        assert check_type(rock, ClassRef(Rock), "stone") is rock


class TestPredicatesAndUnsupported:
    """Test predicate and unsupported type arguments."""

    def test_predicate_applied(self):
        assert check_type(4, is_even, "n") == 4

    def test_predicate_failure_names_predicate(self):
        with pytest.raises(ValidationError) as exc_info:
            check_type(3, is_even, "n")
        assert str(exc_info.value) == "n: Expected is_even, 3 given."

    def test_unsupported_type_never_passes(self):
        with pytest.raises(ValidationError) as exc_info:
            check_type(1, 42, "n")
        assert str(exc_info.value) == "n: Expected 42, 1 given."


class TestDefaults:
    """Test default substitution."""

    def test_default_returned_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger=LOG_CHANNEL):
            result = check_type("x", "number", "n", 5)

        assert result == 5
        assert [r.getMessage() for r in caplog.records] == [
            "n: Expected number, x given. Using default: 5"
        ]

    def test_warning_uses_raw_type_argument(self, caplog):
        set_validator("even", is_even_number, "even number")

        with caplog.at_level(logging.WARNING, logger=LOG_CHANNEL):
            check_type(3, "even", "n", 0)

        assert caplog.records[0].getMessage() == "n: Expected even, 3 given. Using default: 0"

    def test_warning_for_class_shows_class(self, caplog):
        with caplog.at_level(logging.WARNING, logger=LOG_CHANNEL):
            check_type("rex", Animal, "pet", "default")

        message = caplog.records[0].getMessage()
        assert message.startswith("pet: Expected <class ")
        assert "Animal" in message
        assert message.endswith("rex given. Using default: 'default'")

    @pytest.mark.parametrize("default", [0, False, ""])
    def test_falsy_defaults_are_honored(self, default):
        assert check_type("x", "number", "n", default) is default

    def test_none_default_is_honored(self):
        assert check_type("x", "number", "n", None) is None

    def test_none_value_does_not_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger=LOG_CHANNEL):
            result = check_type(None, "string", "s", "fallback")

        assert result == "fallback"
        assert caplog.records == []

    def test_custom_warn_if(self, caplog):
        with caplog.at_level(logging.WARNING, logger=LOG_CHANNEL):
            check_type(None, "string", "s", "fallback", lambda v: True)
            check_type(1, "string", "s", "fallback", lambda v: False)

        assert [r.getMessage() for r in caplog.records] == [
            "s: Expected string, None given. Using default: 'fallback'"
        ]

    def test_callable_default(self):
        assert check_type("3", "number", "n", lambda v: float(v)) == 3.0

    def test_message_without_name(self, caplog):
        with caplog.at_level(logging.WARNING, logger=LOG_CHANNEL):
            check_type(1, "string", None, "x")
        assert caplog.records[0].getMessage() == "Expected string, 1 given. Using default: 'x'"

    def test_failing_log_handler_does_not_change_result(self, failing_log_handler):
        assert check_type("x", "number", "n", 5) == 5
        assert check_type(None, "string", "s", "fallback", lambda v: True) == "fallback"
