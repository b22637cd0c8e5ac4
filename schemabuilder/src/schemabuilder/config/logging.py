"""Logging configuration for Schema Builder."""

import logging
import sys
from pathlib import Path
from typing import Optional
from .settings import LOG_LEVELS, get_settings

DEFAULT_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(message)s"
)


def resolve_level(name: str) -> int:
    """
    Map a level name to its logging constant.

    Raises:
        ValueError: If the name isn't one of DEBUG, INFO, WARNING, ERROR, CRITICAL
    """
    key = name.strip().upper()
    if key not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{name}'. Use one of: {', '.join(LOG_LEVELS)}")
    return logging.getLevelName(key)


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
) -> None:
    """
    Configure the ``schemabuilder`` logger: stdout always, a file if configured.

    Args:
        level: Logging level name; defaults to the log_level setting
        log_file: Optional file path; defaults to the log_file setting
        format_string: Optional custom format string

    Raises:
        ValueError: If the level name is unknown
    """
    settings = get_settings()
    log_level = resolve_level(level or settings.log_level)
    log_file_path = log_file or settings.log_file
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    root_logger = logging.getLogger("schemabuilder")
    root_logger.setLevel(log_level)
    # Repeated setup (one per CLI command) replaces handlers rather than stacking them
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file_path:
        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance under the ``schemabuilder`` hierarchy
    """
    if not logging.getLogger("schemabuilder").handlers:
        setup_logging()

    if name.startswith("schemabuilder"):
        return logging.getLogger(name)
    return logging.getLogger(f"schemabuilder.{name}")
