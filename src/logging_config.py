"""
Logging Configuration for the Scout Career Engine

Engine modules only ever call logging.getLogger(__name__); they never
attach handlers. Entry points (the season service's host application,
test harnesses, scripts) call setup_logging() once.

Provides:
- Colored console output
- Rotating file handlers for main, debug and error logs
- Per-package level overrides for the engine packages

Usage Example:
    from logging_config import setup_logging, get_logger

    setup_logging(level="INFO", log_dir="logs", enable_file=False)

    logger = get_logger(__name__)
    logger.info("Season 2025 opened")

Log Files Created (when enable_file=True):
- logs/scout_career.log: Main log (INFO+)
- logs/scout_career_debug.log: Debug log (DEBUG+)
- logs/scout_career_error.log: Error log (ERROR+)
"""

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Dict, Optional


DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
)

SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_PREFIX = "scout_career"

ENGINE_PACKAGES = (
    "scouting_core",
    "career_progression",
    "npc_network",
    "club_relations",
    "career_analytics",
    "season_events",
    "season_cycle",
)


class ColoredFormatter(logging.Formatter):
    """
    Colored formatter for console output.

    Adds ANSI color codes to the level name. The record is copied first so
    file handlers sharing the record never see the escape codes.
    """

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
        'RESET': '\033[0m'
    }

    def format(self, record):
        """Add color to levelname"""
        record = logging.makeLogRecord(record.__dict__)
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = (
                f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
            )
        return super().format(record)


def _rotating_handler(
    log_dir: str,
    suffix: str,
    level: int,
    log_format: str,
    max_bytes: int,
    backup_count: int
) -> logging.Handler:
    """Build one rotating file handler for the given level."""
    handler = logging.handlers.RotatingFileHandler(
        filename=os.path.join(log_dir, f"{LOG_FILE_PREFIX}{suffix}.log"),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: str = "INFO",
    log_dir: str = "logs",
    enable_console: bool = True,
    enable_file: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    format_style: str = "detailed"
) -> None:
    """
    Setup application-wide logging configuration.

    Call once at application startup.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files
        enable_console: Whether to log to console
        enable_file: Whether to log to file
        max_bytes: Maximum size per log file before rotation
        backup_count: Number of rotated files to keep
        format_style: "detailed" or "simple"
    """
    numeric_level = getattr(logging, level.upper())

    if enable_file:
        Path(log_dir).mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()

    log_format = DETAILED_FORMAT if format_style == "detailed" else SIMPLE_FORMAT

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(console_handler)

    if enable_file:
        root_logger.addHandler(_rotating_handler(
            log_dir, "", logging.INFO, log_format, max_bytes, backup_count
        ))
        root_logger.addHandler(_rotating_handler(
            log_dir, "_debug", logging.DEBUG, DETAILED_FORMAT, max_bytes, backup_count
        ))
        root_logger.addHandler(_rotating_handler(
            log_dir, "_error", logging.ERROR, DETAILED_FORMAT, max_bytes, backup_count
        ))

    root_logger.info(
        f"Logging initialized - Level: {level}, "
        f"Console: {enable_console}, File: {enable_file}"
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (typically __name__)
    """
    return logging.getLogger(name)


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "ERROR"
) -> None:
    """
    Log an exception with full traceback and context.

    Args:
        logger: Logger instance
        exception: Exception to log
        context: Additional context (scout_id, season, week, ...)
        level: Log level (default: ERROR)

    Example:
        >>> try:
        ...     service.close_season(state)
        ... except CareerEngineError as e:
        ...     log_exception(logger, e, context={"season": 2025})
        ...     raise
    """
    log_level = getattr(logging, level.upper())

    context_str = ""
    if context:
        context_items = [f"{k}={v}" for k, v in context.items()]
        context_str = f" [{', '.join(context_items)}]"

    logger.log(
        log_level,
        f"Exception occurred{context_str}: {type(exception).__name__}: {str(exception)}",
        exc_info=True
    )


def configure_module_logger(
    module_name: str,
    level: Optional[str] = None,
    propagate: bool = True
) -> logging.Logger:
    """
    Configure logging for a specific module or package.

    Args:
        module_name: Module name (e.g., "npc_network.scouting_week")
        level: Log level for this module (None = inherit from root)
        propagate: Whether to propagate to parent loggers
    """
    logger = logging.getLogger(module_name)

    if level:
        logger.setLevel(getattr(logging, level.upper()))

    logger.propagate = propagate

    return logger


def setup_engine_logging(levels: Optional[Dict[str, str]] = None) -> None:
    """
    Apply per-package levels to the engine packages.

    The NPC network logs every generated report at DEBUG, so it defaults
    to INFO even when the root is at DEBUG.

    Args:
        levels: Package name -> level overrides

    Example:
        >>> setup_engine_logging({"club_relations": "DEBUG"})
    """
    defaults = {package: None for package in ENGINE_PACKAGES}
    defaults["npc_network"] = "INFO"
    if levels:
        defaults.update(levels)

    for package, level in defaults.items():
        configure_module_logger(package, level=level)


# Quick setup presets

def setup_logging_from_settings(settings=None) -> None:
    """
    Setup logging from the CareerSettings class (or a subclass).

    Reads LOG_LEVEL, LOG_DIR and LOG_TO_FILE, then applies the
    per-package engine levels.
    """
    if settings is None:
        from config.career_settings import CareerSettings
        settings = CareerSettings

    setup_logging(
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        enable_console=True,
        enable_file=settings.LOG_TO_FILE,
        format_style="simple"
    )
    setup_engine_logging()


def setup_testing_logging() -> None:
    """
    Setup logging for the test suite.

    Console only at WARNING so pytest output stays readable.
    """
    setup_logging(
        level="WARNING",
        enable_console=True,
        enable_file=False,
        format_style="simple"
    )
