"""
logging_config.py — Centralized Logging Configuration for the Order Service

This module configures unified logging behavior for the entire application.
It ensures that all modules log messages consistently.

Features:
    • Console output on stdout, optional file output
    • Process ID tagging for multi-process visibility
    • Standardized log format for all modules
    • Reduced verbosity for external dependencies (e.g., uvicorn access log)
"""

import logging
import sys

from .config import LOG_FILE, LOG_LEVEL

LOG_FORMAT = '%(asctime)s - %(levelname)s - [PID:%(process)d] - %(message)s'


def setup_logging(level=None, log_file=None):
    """
    Configures the global logging system for the application.

    Args:
        level (str | int, optional): Log level. Defaults to ORDER_SERVICE_LOG_LEVEL (INFO).
        log_file (str, optional): Path of a persistent log file. Defaults to
            ORDER_SERVICE_LOG_FILE; no file handler is installed when it is empty.

    Notes:
        - Calling this more than once is harmless: logging.basicConfig is a no-op
          once the root logger has handlers.
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    log_file = log_file if log_file is not None else LOG_FILE
    if log_file:
        handlers.insert(0, logging.FileHandler(log_file))

    logging.basicConfig(
        level=level or LOG_LEVEL,
        format=LOG_FORMAT,
        handlers=handlers,
    )

    # Reduce verbosity from external libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def get_logger(name):
    """
    Returns a logger instance for a given module or component name.

    Args:
        name (str): The logger name, typically the module's __name__.

    Returns:
        logging.Logger: A logger that follows the global format and handlers.
    """
    return logging.getLogger(name)
