"""Logging configuration for the harness.

This module provides centralized logging configuration.
Import `get_logger` to create loggers in other modules.
"""

import logging
import sys
from functools import lru_cache


def configure_logging(debug: bool = False) -> None:
    """Configure logging for the harness.

    This should be called once at startup. Diagnostics go to stderr so
    the per-test lines on stdout stay readable.

    Args:
        debug: Emit request-level DEBUG records when True
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,  # Override any existing configuration
    )

    logging.getLogger("disney_smoke").setLevel(
        logging.DEBUG if debug else logging.INFO
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@lru_cache(maxsize=None)
def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given module name.

    Args:
        name: The module name, typically __name__

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
