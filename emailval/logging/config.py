"""
Centralized logging configuration for emailval.

This module provides standardized logging configuration using structlog.
Log output goes to stderr so it never interleaves with the interactive
prompt transcript on stdout.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    stream: Any = None,
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        stream: Output stream for log records (defaults to stderr)
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stderr,
        format="%(message)s",  # structlog will handle formatting
        force=True,
    )

    # Drop below-level events before any other processing
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    # Caller-supplied processors run just before rendering
    if extra_processors:
        processors.extend(extra_processors)

    # One JSON object per line, or plain key=value text for terminals
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


def get_prompt_logger(name: str) -> FilteringBoundLogger:
    """Get a logger bound to the interactive prompt subsystem."""
    return get_logger(name).bind(subsystem="prompt")


def log_validation_attempt(
    logger: FilteringBoundLogger,
    attempt: int,
    accepted: bool,
    rule: Optional[str] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log one prompt attempt with standardized format.

    Args:
        logger: Structlog logger instance
        attempt: 1-based attempt number
        accepted: Whether the entered address was accepted
        rule: Name of the rule that rejected the input, if any
        context: Additional context data
    """
    bound_logger = logger.bind(
        attempt=attempt,
        result="ACCEPTED" if accepted else "REJECTED",
    )

    if rule is not None:
        bound_logger = bound_logger.bind(rule=rule)

    if context:
        bound_logger = bound_logger.bind(context=context)

    if accepted:
        bound_logger.info("Email address accepted")
    else:
        bound_logger.info("Email address rejected")
