"""Settings for dataknobs-typecheck.

Settings can be given as a dictionary, loaded from a YAML or JSON file, or
read from ``DATAKNOBS_TYPECHECK_*`` environment variables. Besides the log
level of the validation channel, they can declare extra validators by the
dotted import path of their predicate function.

Example configuration file:
    ```yaml
    log_level: WARNING
    validators:
      email:
        function: myapp.checks.is_email
        name: e-mail address
      even:
        function: myapp.checks.is_even
    ```

Usage:
    ```python
    from dataknobs_typecheck.settings import TypecheckSettings, apply_settings

    settings = TypecheckSettings.from_file("typecheck.yaml").merged_with_env()
    apply_settings(settings)
    ```
"""

from __future__ import annotations

import importlib
import json
import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Dict, Union

import yaml  # type: ignore[import-untyped]

from .checks import check
from .exceptions import ConfigurationError, ValidationError
from .log import configure_logging
from .predicates import is_nil, is_plain_object, is_string
from .registry import ValidatorRegistry, get_registry

logger = logging.getLogger(__name__)

ENV_PREFIX = "DATAKNOBS_TYPECHECK_"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}


def _is_log_level(value: Any) -> bool:
    return is_nil(value) or (is_string(value) and value.upper() in _LOG_LEVELS)


@dataclass
class TypecheckSettings:
    """Typecheck settings.

    Attributes:
        log_level: Level for the ``"validation"`` logger, or None to leave it
        validators: Type key -> ``{"function": dotted path, "name": label}``
    """

    log_level: str | None = None
    validators: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TypecheckSettings":
        """Create settings from a dictionary.

        Args:
            data: Settings dictionary

        Returns:
            Settings object

        Raises:
            ConfigurationError: If the dictionary has an invalid shape
        """
        try:
            data = check(data, is_plain_object, "mapping", "settings")
            log_level = check(
                data.get("log_level"), _is_log_level, "log level name", "log_level"
            )
            validators = data.get("validators")
            if is_nil(validators):
                validators = {}
            validators = check(validators, is_plain_object, "mapping", "validators")
            for type_key, entry in validators.items():
                entry = check(entry, is_plain_object, "mapping", f"validators.{type_key}")
                check(entry.get("function"), is_string, "dotted path",
                      f"validators.{type_key}.function")
                check(entry.get("name", type_key), is_string, "string",
                      f"validators.{type_key}.name")
        except ValidationError as e:
            raise ConfigurationError(f"Invalid typecheck settings: {e}", context=e.context) from e

        unknown = set(data) - {"log_level", "validators"}
        if unknown:
            logger.warning(f"Ignoring unknown typecheck settings: {sorted(unknown)}")

        return cls(
            log_level=log_level.upper() if log_level else None,
            validators={key: dict(entry) for key, entry in validators.items()},
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "TypecheckSettings":
        """Load settings from a YAML or JSON file.

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        path = Path(path).resolve()

        if not path.exists():
            raise ConfigurationError(
                f"Settings file not found: {path}", context={"path": str(path)}
            )

        suffix = path.suffix.lower()
        try:
            with open(path, encoding="utf-8") as f:
                if suffix in [".yaml", ".yml"]:
                    data = yaml.safe_load(f)
                elif suffix == ".json":
                    data = json.load(f)
                else:
                    raise ConfigurationError(
                        f"Unsupported file format: {suffix}", context={"path": str(path)}
                    )
        except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            raise ConfigurationError(
                f"Failed to read or parse settings file {path}: {e}", context={"path": str(path)}
            ) from e

        return cls.from_dict(data or {})

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "TypecheckSettings":
        """Read settings from environment variables.

        Recognized variables:
            ``<prefix>LOG_LEVEL``: level for the validation logger
        """
        data: Dict[str, Any] = {}
        log_level = os.environ.get(f"{prefix}LOG_LEVEL")
        if log_level:
            data["log_level"] = log_level
        return cls.from_dict(data)

    def merged_with_env(self, prefix: str = ENV_PREFIX) -> "TypecheckSettings":
        """Return a copy with environment variable overrides applied."""
        overrides = TypecheckSettings.from_env(prefix)
        if overrides.log_level is None:
            return replace(self, validators=dict(self.validators))
        return replace(self, log_level=overrides.log_level, validators=dict(self.validators))


def load_function(path: str) -> Callable[..., Any]:
    """Import a callable from a dotted path.

    Args:
        path: Full path to the callable (e.g., ``"mymodule.is_email"``)

    Returns:
        The callable

    Raises:
        ConfigurationError: If the path is malformed, cannot be imported,
            or does not name a callable
    """
    if "." not in path:
        raise ConfigurationError(f"Invalid function path: {path}", context={"path": path})

    module_path, attr_name = path.rsplit(".", 1)
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise ConfigurationError(f"Failed to import {path}: {e}", context={"path": path}) from e

    function = getattr(module, attr_name, None)
    if function is None:
        raise ConfigurationError(
            f"{attr_name} not found in {module_path}", context={"path": path}
        )
    if not callable(function):
        raise ConfigurationError(f"{path} is not callable", context={"path": path})
    return function


def apply_settings(
    settings: TypecheckSettings, registry: ValidatorRegistry | None = None
) -> ValidatorRegistry:
    """Configure logging and register the configured validators.

    Args:
        settings: Settings to apply
        registry: Registry to add validators to; defaults to the process registry

    Returns:
        The registry the validators were added to
    """
    if registry is None:
        registry = get_registry()

    configure_logging(settings=settings)

    for type_key, entry in settings.validators.items():
        function = load_function(entry["function"])
        registry.set_validator(type_key, function, entry.get("name"))
        logger.debug(f"Registered validator '{type_key}' from {entry['function']}")

    return registry


__all__ = [
    "ENV_PREFIX",
    "TypecheckSettings",
    "apply_settings",
    "load_function",
]
