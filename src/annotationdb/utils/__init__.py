"""Utility modules for annotation conversion.

Utilities Provided:
    - Configuration: YAML config loading, environment variable resolution,
      conversion settings
    - ID Management: Entity key resolution for stored documents
    - Logging: Logger factory with environment-based configuration

Usage:
    >>> from annotationdb.utils import LoggerFactory, load_config
"""

from annotationdb.utils.config import (
    ConversionSettings,
    get_conversion_settings,
    load_config,
    resolve_env_vars,
    setup_logger,
)
from annotationdb.utils.ids import coerce_id, get_entity_key
from annotationdb.utils.logging import LoggerFactory


__all__ = [
    # Config
    "ConversionSettings",
    "get_conversion_settings",
    "load_config",
    "resolve_env_vars",
    "setup_logger",
    # IDs
    "coerce_id",
    "get_entity_key",
    # Logging
    "LoggerFactory",
]
