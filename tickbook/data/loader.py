"""
Fault-tolerant ingestion of record sources.

Reads a source line by line, parses each non-blank line and keeps the
records that parse. A malformed line is logged and skipped; it never aborts
the load. A source that cannot be opened yields an empty result with the
error attached instead of raising.
"""

import time
from pathlib import Path
from typing import Iterable, Optional, Union

from ..config.defaults import IngestParams
from ..errors import MalformedRecordError, SourceUnavailableError
from ..logging.config import get_ingest_logger, log_load_summary, log_skipped_line
from .models import LoadResult, Record
from .parsers import parse_record_line

SourceType = Union[str, Path]


def ingest_lines(lines: Iterable[str], source: str = "<lines>",
                 params: Optional[IngestParams] = None) -> tuple[list[Record], LoadResult]:
    """
    Parse an iterable of raw lines into records, isolating bad lines.

    Args:
        lines: Raw text lines, with or without line terminators
        source: Source identifier used in diagnostics
        params: Ingestion parameters, defaults to IngestParams()

    Returns:
        Tuple of (accepted records in source order, load result)
    """
    params = params or IngestParams()
    logger = get_ingest_logger(__name__)
    start_time = time.perf_counter()

    records: list[Record] = []
    errors: list[MalformedRecordError] = []
    blank = 0

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            blank += 1
            continue

        try:
            record = parse_record_line(
                line,
                delimiter=params.delimiter,
                strict_side=params.strict_side,
                timestamp_format=params.timestamp_format,
            )
        except MalformedRecordError as e:
            e.with_location(line_number, line.rstrip("\r\n"))
            # Kept for the whole session via LoadResult, drop the frames
            e.with_traceback(None)
            errors.append(e)
            log_skipped_line(logger, source, line_number, e.reason, e.raw_line)
            continue

        records.append(record)

    result = LoadResult(
        source=source,
        loaded=len(records),
        skipped=len(errors),
        blank=blank,
        errors=tuple(errors),
        duration_ms=(time.perf_counter() - start_time) * 1000,
    )
    log_load_summary(logger, source, result.get_stats())
    return records, result


def ingest_source(source: SourceType,
                  params: Optional[IngestParams] = None) -> tuple[list[Record], LoadResult]:
    """
    Open a record file and ingest it.

    Undecodable bytes are replaced rather than raised, so they can only
    spoil the line they appear on.

    Args:
        source: Path of the record file
        params: Ingestion parameters, defaults to IngestParams()

    Returns:
        Tuple of (accepted records, load result). If the file cannot be
        opened the record list is empty and result.source_error is set.
    """
    params = params or IngestParams()
    source_name = str(source)
    start_time = time.perf_counter()

    try:
        f = open(source, encoding=params.encoding, errors="replace", newline="")
    except OSError as e:
        error = SourceUnavailableError(f"Could not open source {source_name}: {e}", source=source_name)
        logger = get_ingest_logger(__name__)
        logger.error("Could not open source", source=source_name, error=str(e))
        result = LoadResult.unavailable(
            source_name, error, duration_ms=(time.perf_counter() - start_time) * 1000
        )
        log_load_summary(logger, source_name, result.get_stats())
        return [], result

    with f:
        return ingest_lines(f, source=source_name, params=params)


def load_records(source: SourceType, out: list[Record],
                 params: Optional[IngestParams] = None) -> int:
    """
    Replace the contents of out with the records loaded from source.

    Args:
        source: Path of the record file
        out: Destination list, cleared before loading
        params: Ingestion parameters

    Returns:
        Number of records loaded (0 if the source could not be opened)
    """
    out.clear()
    records, result = ingest_source(source, params)
    out.extend(records)
    return result.loaded


def read_records(source: SourceType, params: Optional[IngestParams] = None) -> list[Record]:
    """Load a record file into a new list."""
    records, _ = ingest_source(source, params)
    return records
