"""Configuration utilities for annotation conversion.

This module loads YAML configuration for annotationdb converters, resolves
environment variables, sets up logging and extracts the conversion settings
that the converter facade binds.

Environment Variable Syntax:
    - ${VAR}: Substitute with environment variable VAR, empty string if unset
    - ${VAR:-default}: Substitute with VAR if set, otherwise use 'default'

Expected layout:

    logging:
      name: annotationdb
      level: ${LOG_LEVEL:-INFO}
    annotations:
      convert_bools: true
      sort: true
      index_keys: [username, department]

Usage:
    >>> from annotationdb.utils.config import load_config, get_conversion_settings
    >>> config = load_config("annotations.yaml")
    >>> settings = get_conversion_settings(config)
"""

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

import yaml

from annotationdb.types import InvalidConfigError
from annotationdb.utils.logging import LoggerFactory


_TRUE_STRINGS = ("true", "yes", "on", "1")
_FALSE_STRINGS = ("false", "no", "off", "0")


@dataclass(frozen=True)
class ConversionSettings:
    """Flags shared by the annotation encoders and decoders.

    Attributes:
        convert_bools: Decode "true"/"false" strings to booleans.
        sort: Sort list values before joining and after splitting.
        index_keys: Record fields promoted to annotations by ``pack``.
    """

    convert_bools: bool = True
    sort: bool = True
    index_keys: tuple[str, ...] = field(default_factory=tuple)


def resolve_env_vars(value: Any) -> Any:
    """Resolve environment variables in configuration values.

    Supports both simple ${VAR} and ${VAR:-default} syntax, including
    multiple substitutions within a single string.

    Args:
        value: The value to resolve, can be a string, dict, or list.

    Returns:
        The resolved value with environment variables expanded.
    """
    if isinstance(value, str):
        pattern = r"\$\{([^}]+)\}"

        def replacer(match: re.Match[str]) -> str:
            expr = match.group(1)
            if ":-" in expr:
                var, default = expr.split(":-", 1)
                return os.environ.get(var, default)
            return os.environ.get(expr, "")

        return re.sub(pattern, replacer, value)
    if isinstance(value, dict):
        return {k: resolve_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [resolve_env_vars(item) for item in value]
    return value


def load_config(config_or_path: Union[dict[str, Any], str, Path]) -> dict[str, Any]:
    """Load configuration from a YAML file or dict with env var resolution.

    Args:
        config_or_path: Configuration dict or path to a YAML file.

    Returns:
        Configuration dictionary with environment variables resolved. An empty
        YAML file yields an empty dict.

    Raises:
        FileNotFoundError: If the configuration file does not exist.
        yaml.YAMLError: If the YAML file is malformed.
    """
    if isinstance(config_or_path, dict):
        return resolve_env_vars(config_or_path)

    with open(config_or_path) as f:
        config = yaml.safe_load(f)
    return resolve_env_vars(config or {})


def setup_logger(config: dict[str, Any]) -> logging.Logger:
    """Set up a logger based on the ``logging`` config section.

    The default name is the package root, so the level applies to every
    annotationdb module logger.
    """
    logging_config = config.get("logging", {})
    logger_name = logging_config.get("name", "annotationdb")
    log_level_str = str(logging_config.get("level", "INFO"))
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    factory = LoggerFactory(logger_name, log_level=log_level)
    logger = factory.get_logger()
    # Module loggers under this name inherit the configured level
    logger.setLevel(log_level)
    return logger


def _as_bool(section: dict[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if isinstance(value, bool):
        return value
    # Env var substitution always produces strings
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    msg = f"annotations.{key} must be a boolean, got {value!r}"
    raise InvalidConfigError(msg)


def get_conversion_settings(config: dict[str, Any]) -> ConversionSettings:
    """Extract conversion settings from the ``annotations`` config section.

    Args:
        config: Loaded configuration dictionary.

    Returns:
        ConversionSettings with defaults for any missing key.

    Raises:
        InvalidConfigError: If the section or one of its values has the wrong type.
    """
    section = config.get("annotations") or {}
    if not isinstance(section, dict):
        msg = f"annotations section must be a mapping, got {type(section).__name__}"
        raise InvalidConfigError(msg)

    index_keys = section.get("index_keys") or []
    if not isinstance(index_keys, list):
        msg = f"annotations.index_keys must be a list, got {index_keys!r}"
        raise InvalidConfigError(msg)

    return ConversionSettings(
        convert_bools=_as_bool(section, "convert_bools", True),
        sort=_as_bool(section, "sort", True),
        index_keys=tuple(str(key) for key in index_keys),
    )
