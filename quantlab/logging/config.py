"""
Centralized logging configuration for the quantlab toolkit.

This module provides standardized logging configuration using structlog
for all components. The pure metric functions never log; the analysis
layer, the engine and the reporters log through loggers obtained here.
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

    # Log to stderr so report output on stdout stays clean
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
        processors.append(structlog.processors.JSONRenderer())
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


def get_analysis_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound with analysis-pipeline context.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for analysis steps
    """
    return get_logger(name).bind(subsystem="analysis")


def log_analysis_step(
    logger: FilteringBoundLogger,
    step: str,
    completed: bool,
    reason: str = "",
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of an analysis step with standardized format.

    Args:
        logger: Structlog logger instance
        step: Name of the analysis step
        completed: Whether the step produced a result
        reason: Why the step was skipped, if it was
        context: Additional context data
    """
    bound_logger = logger.bind(
        step=step,
        step_result="COMPLETED" if completed else "SKIPPED",
    )

    if reason:
        bound_logger = bound_logger.bind(reason=reason)

    if context:
        bound_logger = bound_logger.bind(context=context)

    if completed:
        bound_logger.info("Analysis step completed")
    else:
        bound_logger.warning("Analysis step skipped")
