"""
Centralized logging configuration for the tickbook record engine.

This module provides standardized logging configuration using structlog
for all components. Ingestion diagnostics (skipped lines, unreadable
sources, load summaries) go through the helpers defined here so that the
operator sees the same event shapes regardless of caller.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from ..config.defaults import LoggingParams


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
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper())

    # Diagnostics go to stderr, query results are the caller's business
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s",
        force=True,
    )

    # Build processor chain
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

    # Add final formatting processor
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


def configure_logging_from(params: LoggingParams, **kwargs: Any) -> None:
    """
    Configure structlog from configuration-file logging parameters.

    Args:
        params: Logging parameters, e.g. from ConfigLoader.load_logging_params
        **kwargs: Further configure_logging arguments (include_caller, ...)
    """
    configure_logging(level=params.level, format_json=params.format_json, **kwargs)


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_ingest_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the ingestion subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for ingestion diagnostics
    """
    return get_logger(name).bind(subsystem="ingest")


def log_skipped_line(
    logger: FilteringBoundLogger,
    source: str,
    line_number: Optional[int],
    reason: str,
    raw_line: Optional[str] = None,
) -> None:
    """
    Log a malformed input line that was skipped.

    Args:
        logger: Structlog logger instance
        source: Identifier of the source being read
        line_number: 1-based line number of the offending line
        reason: Why the line was rejected
        raw_line: The offending line, if available
    """
    bound_logger = logger.bind(
        source=source,
        line_number=line_number,
        reason=reason,
    )

    if raw_line is not None:
        bound_logger = bound_logger.bind(raw_line=raw_line)

    bound_logger.warning("Skipped malformed record")


def log_load_summary(
    logger: FilteringBoundLogger,
    source: str,
    stats: dict[str, Any],
) -> None:
    """
    Log the outcome of one ingestion run.

    Args:
        logger: Structlog logger instance
        source: Identifier of the source that was read
        stats: Load statistics (see LoadResult.get_stats)
    """
    bound_logger = logger.bind(source=source, **stats)

    if stats.get("source_available", True):
        bound_logger.info("Loaded records")
    else:
        bound_logger.warning("Loaded records from unavailable source")
