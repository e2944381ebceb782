"""
Logging utilities for knossos.

Usage:
    >>> from knossos.utils.maze_logging import get_logger, configure_logging
    >>> logger = get_logger(__name__)
    >>> configure_logging(level="DEBUG")
    >>> logger.debug("Carving passages...")
"""

from __future__ import annotations

from .logger import (
    LoggedOperation,
    LoggingSettings,
    MazeFormatter,
    MazeLogger,
    configure_development_logging,
    configure_logging,
    configure_production_logging,
    get_logger,
    log_generation_completion,
    log_generation_start,
    log_pathfinding_result,
    log_performance_metric,
    log_validation_error,
)

__all__ = [
    # Core logging
    "configure_logging",
    "get_logger",
    "MazeFormatter",
    "LoggingSettings",
    "MazeLogger",
    # Environment configurations
    "configure_development_logging",
    "configure_production_logging",
    # Structured logging helpers
    "log_generation_completion",
    "log_generation_start",
    "log_pathfinding_result",
    "log_performance_metric",
    "log_validation_error",
    # Classes
    "LoggedOperation",
]
