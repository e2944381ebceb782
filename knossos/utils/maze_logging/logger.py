"""
Logging for knossos.

Loggers handed out by :func:`get_logger` share one set of handler settings
held by :class:`MazeLogger`. Reconfiguring replaces the handlers of every
logger created so far, so modules may grab their logger at import time.
"""

from __future__ import annotations

import logging
import sys
import threading
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, ClassVar

import colorlog

_FORMAT = "%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s"
_LOCATION = " [%(filename)s:%(lineno)d]"
_DATEFMT = "%Y-%m-%d %H:%M:%S"
_LEVEL_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "red,bg_white",
}


class MazeFormatter(logging.Formatter):
    """Plain or colour formatter, optionally with the emitting file and line."""

    def __init__(self, use_colors: bool = False, include_location: bool = False):
        self.use_colors = use_colors
        self.include_location = include_location

        fmt = _FORMAT + (_LOCATION if include_location else "")
        super().__init__(fmt, datefmt=_DATEFMT)

        self.colored_formatter: colorlog.ColoredFormatter | None = None
        if use_colors:
            self.colored_formatter = colorlog.ColoredFormatter(
                "%(log_color)s" + fmt, datefmt=_DATEFMT, log_colors=_LEVEL_COLORS
            )

    def format(self, record: logging.LogRecord) -> str:
        if self.colored_formatter is not None:
            return self.colored_formatter.format(record)
        return super().format(record)


@dataclass
class LoggingSettings:
    """Handler settings shared by every knossos logger."""

    level: int = logging.WARNING
    use_colors: bool = True
    include_location: bool = False
    log_file: Path | None = None


class MazeLogger:
    """
    Process-wide registry of configured loggers.

    A single instance exists (``__new__`` returns it); all state lives on the
    class. Registry updates take a lock, and lookups of already-registered
    names skip it.
    """

    _instance = None
    _lock: ClassVar[threading.Lock] = threading.Lock()
    _loggers: ClassVar[dict[str, logging.Logger]] = {}
    settings: ClassVar[LoggingSettings] = LoggingSettings()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def configure(
        cls,
        level: str | int = "INFO",
        log_to_file: bool = False,
        log_file_path: str | Path | None = None,
        use_colors: bool = True,
        include_location: bool = False,
    ):
        """
        Replace the shared settings and re-apply them to existing loggers.

        Args:
            level: Level name or number
            log_to_file: Also write records to a file
            log_file_path: Target file; a timestamped file under ``./logs``
                when omitted
            use_colors: Colour console output with colorlog
            include_location: Append ``[file:line]`` to each record
        """
        numeric_level = getattr(logging, level.upper()) if isinstance(level, str) else level

        log_file = None
        if log_to_file:
            if log_file_path is None:
                stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
                log_file = Path.cwd() / "logs" / f"knossos_{stamp}.log"
            else:
                log_file = Path(log_file_path)
            log_file.parent.mkdir(parents=True, exist_ok=True)

        with cls._lock:
            cls.settings = LoggingSettings(
                level=numeric_level,
                use_colors=use_colors,
                include_location=include_location,
                log_file=log_file,
            )
            for logger in cls._loggers.values():
                cls._apply(logger)

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """Registered logger for ``name``, created and configured on first use."""
        logger = cls._loggers.get(name)
        if logger is not None:
            return logger

        with cls._lock:
            if name not in cls._loggers:
                logger = logging.getLogger(name)
                # Keep handlers an application attached itself
                if not logger.handlers:
                    cls._apply(logger)
                cls._loggers[name] = logger
            return cls._loggers[name]

    @classmethod
    def _apply(cls, logger: logging.Logger):
        settings = cls.settings
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        logger.setLevel(settings.level)

        handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
        handlers[0].setFormatter(MazeFormatter(settings.use_colors, settings.include_location))
        if settings.log_file is not None:
            file_handler = logging.FileHandler(settings.log_file)
            file_handler.setFormatter(MazeFormatter(False, settings.include_location))
            handlers.append(file_handler)

        for handler in handlers:
            handler.setLevel(settings.level)
            logger.addHandler(handler)

        # Own handlers only; a configured root logger would print each record twice
        logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Logger for a knossos module.

    Args:
        name: Logger name; defaults to the calling module's ``__name__``
    """
    if name is None:
        import inspect

        caller = inspect.currentframe()
        caller = caller.f_back if caller is not None else None
        name = caller.f_globals.get("__name__", "knossos") if caller is not None else "knossos"

    return MazeLogger.get_logger(name)


def configure_logging(**kwargs):
    """Shortcut for :meth:`MazeLogger.configure`."""
    MazeLogger.configure(**kwargs)


def configure_development_logging(include_location: bool = True):
    """DEBUG output in colour on the console."""
    configure_logging(level="DEBUG", use_colors=True, include_location=include_location)
    get_logger("knossos.development").info("Development logging enabled")


def configure_production_logging(log_file: str | Path | None = None) -> str:
    """
    WARNING and above, written to a dated file as well as the console.

    Returns:
        Path of the log file
    """
    if log_file is None:
        log_file = Path("production_logs") / f"knossos_production_{datetime.now():%Y%m%d}.log"

    configure_logging(level="WARNING", log_to_file=True, log_file_path=log_file, use_colors=False)
    return str(log_file)


def log_generation_start(logger: logging.Logger, algorithm_name: str, config: dict[str, Any]):
    logger.info(f"Generating maze with {algorithm_name}")
    logger.debug(f"Generation configuration: {config}")


def log_generation_completion(
    logger: logging.Logger,
    algorithm_name: str,
    width: int,
    height: int,
    ends_count: int,
    execution_time: float,
):
    logger.info(
        f"{algorithm_name} completed - {width}x{height} grid, {ends_count} ends, time: {execution_time:.3f}s"
    )


def log_pathfinding_result(logger: logging.Logger, start: Any, goal: Any, cost: int | None):
    """DEBUG for a found path, WARNING when ``cost`` is None."""
    if cost is None:
        logger.warning(f"No path from {tuple(start)} to {tuple(goal)}")
    else:
        logger.debug(f"Path from {tuple(start)} to {tuple(goal)} - cost: {cost}")


def log_validation_error(logger: logging.Logger, component: str, error_msg: str, suggestion: str | None = None):
    logger.error(f"Validation error in {component}: {error_msg}")
    if suggestion:
        logger.info(f"Suggestion: {suggestion}")


def log_performance_metric(
    logger: logging.Logger,
    operation: str,
    duration: float,
    additional_metrics: dict[str, Any] | None = None,
):
    extra = ""
    if additional_metrics:
        extra = " (" + ", ".join(f"{k}: {v}" for k, v in additional_metrics.items()) + ")"
    logger.info(f"Performance - {operation}: {duration:.3f}s{extra}")


class LoggedOperation:
    """
    Time a block and log its start, completion or failure.

    Exceptions raised inside the block are logged and re-raised. The elapsed
    time is available as ``duration`` after the block exits.
    """

    def __init__(self, logger: logging.Logger, operation_name: str, log_level: int = logging.INFO):
        self.logger = logger
        self.operation_name = operation_name
        self.log_level = log_level
        self.duration: float | None = None
        self._started = 0.0

    def __enter__(self) -> LoggedOperation:
        self.logger.log(self.log_level, f"Starting {self.operation_name}")
        self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.perf_counter() - self._started
        if exc_type is None:
            self.logger.log(self.log_level, f"Completed {self.operation_name} in {self.duration:.3f}s")
        else:
            self.logger.error(f"Failed {self.operation_name} after {self.duration:.3f}s: {exc_val}")
        return False
