# -*- coding: utf-8 -*-
"""
Centralized logging configuration for network comparison runs

Provides one logging setup shared by all modules, with optional file output. Entry
points call setup_logging() once; modules then use logger = logging.getLogger(__name__).
The default level comes from the LOG_LEVEL environment variable (see utils.config).

Examples:
# In an entry script
    from netcompare.utils.logger import setup_logging
    setup_logging(log_file="logs/comparison.log")

    # In any module
    import logging
    logger = logging.getLogger(__name__)
    logger.info("Comparing networks")

"""
# Standard library
import logging
import sys
from pathlib import Path
from typing import Optional, Union

# Config imports (direct)
from netcompare.utils.config import LOG_LEVEL

# Global flag to prevent duplicate configuration
_logging_configured = False

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _resolve_level(level: Union[int, str, None]) -> int:
    """Accept logging constants, level names ('DEBUG') or None (environment)."""
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        return resolved
    return level


def setup_logging(
    level: Union[int, str, None] = None,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT,
    force: bool = False,
) -> None:
    """
    Configure logging for the application.

    Sets up console output and optional file output with one format. Safe to call
    multiple times: only the first call configures unless force is set.

    Args:
        level: Logging level, level name, or None to read LOG_LEVEL
        log_file: Optional path to a log file; parent directories are created
        format_string: Log message format
        force: Reconfigure even if logging was already set up

    Example:
        >>> setup_logging(level="DEBUG")
        >>> logging.getLogger(__name__).debug("Enumerating paths")
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    level = _resolve_level(level)
    formatter = logging.Formatter(format_string)
    handlers = []

    # Console handler (always included)
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    # File handler (optional)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    logging.basicConfig(
        level=level,
        handlers=handlers,
        force=True  # Override any existing configuration
    )

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Same as logging.getLogger(name); kept so scripts can import one helper.
    """
    return logging.getLogger(name)
