"""Logging configuration for the import action."""

import logging
import os
import sys


def setup_logger(
    name: str, level: str = "INFO", json_output: bool = False
) -> logging.Logger:
    """
    Set up logger with appropriate handlers.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_output: If True, send logs to stderr to keep stdout for the document

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    logger.handlers.clear()
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = logging.StreamHandler(sys.stderr if json_output else sys.stdout)
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)
    logger.propagate = False

    return logger


def get_logger(name: str, json_output: bool = True) -> logging.Logger:
    """Get or create a module logger under the ``apim_import`` namespace.

    Module loggers write to stderr by default so that rendered documents
    printed on stdout stay clean.
    """
    level = os.environ.get("APIM_LOG_LEVEL", "INFO")
    return setup_logger(f"apim_import.{name}", level, json_output)
