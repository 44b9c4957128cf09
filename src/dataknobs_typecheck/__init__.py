"""Runtime value checks with default fallback for dataknobs packages.

This package validates values whose types are only known at runtime, such as
data read from JSON, YAML or environment variables:

- **Checks**: ``check`` a value against a predicate, substituting a default
  or raising ``ValidationError``; the deprecated ``check_type`` works with
  registered type keys and classes
- **Registry**: named validators registered with ``set_validator``
- **Classifiers**: ``is_alphanumeric``, ``parse_number_strict``,
  ``is_primitive``, ``is_class``, ``is_subclass``
- **Combinators**: ``sub_class`` and ``instance_of`` build reusable predicates
- **Settings**: log level and extra validators from YAML, JSON or environment

Example:
    ```python
    from dataknobs_typecheck import ValidationError, check, is_primitive, sub_class

    value = check(raw, is_primitive, "primitive", "threshold", default_value=1)

    try:
        check(cls, sub_class(Plugin), "subclass of Plugin", "plugin")
    except ValidationError as e:
        print(e)
        # plugin: Expected subclass of Plugin, Other given.
    ```
"""

from dataknobs_typecheck.checks import check, check_type
from dataknobs_typecheck.classifiers import (
    Alphanumeric,
    AlphanumericValue,
    ClassLike,
    Primitive,
    ancestors_of,
    is_alphanumeric,
    is_class,
    is_primitive,
    is_subclass,
    parse_number_strict,
)
from dataknobs_typecheck.combinators import (
    InstanceOf,
    Predicate,
    SubClassOf,
    instance_of,
    sub_class,
)
from dataknobs_typecheck.exceptions import (
    ConfigurationError,
    DataknobsError,
    NotFoundError,
    OperationError,
    ValidationError,
)
from dataknobs_typecheck.log import LOG_CHANNEL, configure_logging, log
from dataknobs_typecheck.predicates import (
    format_number,
    is_array,
    is_boolean,
    is_function,
    is_nil,
    is_number,
    is_plain_object,
    is_present,
    is_string,
    parse_float,
)
from dataknobs_typecheck.registry import (
    Registry,
    Validator,
    ValidatorFunction,
    ValidatorRegistry,
    get_registry,
    get_validator,
    get_validator_optional,
    has_validator,
    list_validators,
    reset_validators,
    set_validator,
)
from dataknobs_typecheck.settings import TypecheckSettings, apply_settings, load_function
from dataknobs_typecheck.type_spec import (
    ClassRef,
    PredicateRef,
    RegistryKey,
    TypeSpec,
    UnsupportedSpec,
    to_type_spec,
)

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Checks
    "check",
    "check_type",
    # Classifiers
    "Alphanumeric",
    "AlphanumericValue",
    "ClassLike",
    "Primitive",
    "ancestors_of",
    "is_alphanumeric",
    "is_class",
    "is_primitive",
    "is_subclass",
    "parse_number_strict",
    # Combinators
    "Predicate",
    "SubClassOf",
    "InstanceOf",
    "sub_class",
    "instance_of",
    # Exceptions
    "DataknobsError",
    "ValidationError",
    "NotFoundError",
    "OperationError",
    "ConfigurationError",
    # Logging
    "LOG_CHANNEL",
    "log",
    "configure_logging",
    # Predicates
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
    # Registry
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
    # Settings
    "TypecheckSettings",
    "apply_settings",
    "load_function",
    # Type specs
    "TypeSpec",
    "RegistryKey",
    "ClassRef",
    "PredicateRef",
    "UnsupportedSpec",
    "to_type_spec",
]
