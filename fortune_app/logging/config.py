"""
Centralized logging configuration for the fortune engine.

This module provides standardized logging configuration using structlog
for all components. Loggers never receive the raw name input; only derived
signals such as zodiac sign, table index and level are logged.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    # Log output goes to stderr so rendered readings on stdout stay clean
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s"
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_composer_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for fortune composition decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for the composer
    """
    return structlog.get_logger(name, subsystem="composer")


def log_level_adjustment(
    logger: FilteringBoundLogger,
    period: str,
    from_level: str,
    to_level: str,
    current_month: int,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a seasonal level adjustment with standardized format.

    Args:
        logger: Structlog logger instance
        period: Requested period value
        from_level: Level of the selected base fortune
        to_level: Level after the adjustment
        current_month: Calendar month the adjustment was evaluated in
        context: Additional context data
    """
    bound_logger = logger.bind(
        period=period,
        from_level=from_level,
        to_level=to_level,
        current_month=current_month,
        adjusted=from_level != to_level,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Seasonal level adjustment")
