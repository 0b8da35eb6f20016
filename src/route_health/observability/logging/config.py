"""Logging configuration and setup."""

import logging
import sys
from enum import Enum
from typing import Any

import structlog
from structlog.stdlib import LoggerFactory

from .correlation import CorrelationIDProcessor
from .formatters import ConsoleFormatter, JSONFormatter, StructuredFormatter


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Logging formats."""

    JSON = "json"
    CONSOLE = "console"
    STRUCTURED = "structured"


def _handler(log_file: str | None) -> logging.Handler:
    if log_file:
        return logging.FileHandler(log_file)
    return logging.StreamHandler(sys.stdout)


def _formatter(format_type: LogFormat, colors: bool) -> Any:
    if format_type == LogFormat.CONSOLE:
        return ConsoleFormatter(colors=colors)
    if format_type == LogFormat.STRUCTURED:
        return StructuredFormatter()
    return JSONFormatter()


def setup_logging(
    level: LogLevel = LogLevel.INFO,
    format_type: LogFormat = LogFormat.JSON,
    log_file: str | None = None,
    colors: bool = True,
    caller_info: bool = False,
) -> None:
    """Route structlog events through stdlib logging in the given format.

    Args:
        level: Minimum level emitted by the root logger
        format_type: Renderer placed at the end of the processor chain
        log_file: Write to this file instead of stdout
        colors: Colorize console output
        caller_info: Add file, function and line of the call site
    """
    numeric_level = getattr(logging, level.value)
    logging.basicConfig(
        level=numeric_level, format="%(message)s", handlers=[_handler(log_file)]
    )
    logging.getLogger().setLevel(numeric_level)

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        CorrelationIDProcessor(),
    ]
    if caller_info:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            )
        )
    processors.append(structlog.processors.TimeStamper(fmt="ISO"))
    processors.append(_formatter(format_type, colors))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    logger = structlog.get_logger(name)
    return logger  # type: ignore[no-any-return]


def configure_from_settings(
    log_level: str, log_format: str, log_file: str | None = None
) -> None:
    """Setup logging from the observability settings values."""
    level = LogLevel(log_level)
    format_type = LogFormat(log_format)
    setup_logging(
        level=level,
        format_type=format_type,
        log_file=log_file,
        colors=format_type == LogFormat.CONSOLE and log_file is None,
        caller_info=level == LogLevel.DEBUG,
    )
