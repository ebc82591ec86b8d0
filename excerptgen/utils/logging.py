"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
excerptgen package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the excerptgen package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    # Determine log level
    if level is None:
        level = os.environ.get("EXCERPTGEN_LOG_LEVEL", "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger("excerptgen")
    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "excerptgen" or name.startswith("excerptgen."):
        return logging.getLogger(name)
    return logging.getLogger(f"excerptgen.{name}")


class GenerationLogger:
    """
    Logging helpers for a single source generation pass.

    Wraps a package logger with methods for the events the rendering
    driver reports: pass start, static member ordering, skipped
    capabilities and failures.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_generation_start(self, excerpt_count: int, static_count: int) -> None:
        """
        Log the beginning of a rendering pass.

        Args:
            excerpt_count: Number of body excerpts to render
            static_count: Number of static excerpts to sort and render
        """
        self.logger.debug(
            f"Rendering {excerpt_count} excerpts and {static_count} static excerpts"
        )

    def log_static_order(self, excerpts: list) -> None:
        """
        Log the placement order chosen for static excerpts.

        Args:
            excerpts: Static excerpts in their sorted order
        """
        order = [f"{excerpt.type.name}:{excerpt.name}" for excerpt in excerpts]
        self.logger.debug(f"Static excerpt order: {order}")

    def log_capability_missing(self, feature: str, excerpt: object) -> None:
        """
        Log that an optional capability was absent and output was omitted.

        Args:
            feature: Name of the queried capability
            excerpt: Excerpt whose output was skipped
        """
        self.logger.debug(f"Capability '{feature}' unavailable, omitting {excerpt!r}")

    def log_generation_failed(self, reason: str) -> None:
        """
        Log a failed rendering pass whose buffer was discarded.

        Args:
            reason: Description of the failure
        """
        self.logger.error(f"Source generation failed, discarding buffer: {reason}")


# Initialize logging on module import
setup_logging()
