"""Logging utilities for the annotationdb package.

This module provides a centralized logging factory so that every annotationdb
module logs with the same format. Logging is initialized only once per process,
which keeps repeated factory construction from stacking duplicate handlers.

Key Features:
    - One-time ``logging.basicConfig`` initialization
    - Environment variable-based configuration via ANNOTATIONDB_LOG_LEVEL
    - Consistent formatting across converters and adapters

Usage:
    >>> from annotationdb.utils.logging import LoggerFactory
    >>> logger = LoggerFactory(__name__).get_logger()
    >>> logger.debug("Encoded 4 annotations")

    # Or configure from environment
    >>> factory = LoggerFactory.configure_from_env("annotationdb")
    >>> logger = factory.get_logger()
"""

import logging
import os


DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV_VAR = "ANNOTATIONDB_LOG_LEVEL"


class LoggerFactory:
    """Factory class to set up and configure a named logger.

    Attributes:
        logger_name (str): The name of the logger to create.
        log_level (int): The logging level (e.g., logging.INFO, logging.DEBUG).
        log_format (str): The format for log messages.
        logger (logging.Logger): The configured logger instance.
    """

    _is_logger_initialized: bool = False

    def __init__(
        self,
        logger_name: str,
        log_level: int = logging.INFO,
        log_format: str = DEFAULT_LOG_FORMAT,
    ) -> None:
        """Initialize the LoggerFactory instance with the given configuration.

        Args:
            logger_name (str): The name of the logger to create.
            log_level (int, optional): The logging level (default is logging.INFO).
            log_format (str, optional): The format for log messages.
        """
        self.logger_name = logger_name
        self.log_level = log_level
        self.log_format = log_format
        self.logger = self._initialize_logger()

    def _initialize_logger(self) -> logging.Logger:
        """Configure root logging once and return the named logger."""
        if not LoggerFactory._is_logger_initialized:
            logging.basicConfig(level=self.log_level, format=self.log_format)
            LoggerFactory._is_logger_initialized = True

        return logging.getLogger(self.logger_name)

    def get_logger(self) -> logging.Logger:
        """Return the configured logger instance."""
        return self.logger

    @staticmethod
    def configure_from_env(
        logger_name: str, env_var: str = LOG_LEVEL_ENV_VAR
    ) -> "LoggerFactory":
        """Configure the logger based on an environment variable.

        The level is applied to the named logger, so configuring the package
        root ("annotationdb") reaches every module logger beneath it.

        Args:
            logger_name (str): The name of the logger to create.
            env_var (str, optional): The environment variable for log level.

        Returns:
            LoggerFactory: A LoggerFactory instance with the configured log level.
        """
        log_level_str = os.getenv(env_var, "INFO").upper()
        # Default to INFO if invalid level
        log_level = getattr(logging, log_level_str, logging.INFO)
        if not isinstance(log_level, int):
            log_level = logging.INFO
        factory = LoggerFactory(logger_name, log_level=log_level)
        factory.logger.setLevel(log_level)
        return factory
