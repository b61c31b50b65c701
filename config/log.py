"""Logging configuration."""
import logging
import sys

from .env import DEFAULT_LOG_FORMAT


def setup_logging(log_level: str = "INFO", log_format: str = DEFAULT_LOG_FORMAT) -> None:
    """Configure root logging to standard output."""
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        print(f"Invalid log level: {log_level}, defaulting to INFO")
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        stream=sys.stdout,
        force=True,
    )
