"""Logging setup for the docstore CLI; library modules only call get_logger"""

import logging
import sys


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(log_level: str = "WARNING") -> None:
    """Route the docstore logger tree to stderr at the given level; stdout carries command output."""
    root_logger = logging.getLogger("docstore")
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.WARNING))

    # Clear existing handlers so repeated CLI invocations don't duplicate output
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module."""
    return logging.getLogger(name)
