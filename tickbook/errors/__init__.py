"""
Error classification for record ingestion and querying.

This module provides the exception hierarchy for problems encountered while
loading market records. Per-line data quality issues are absorbed by the
loader; an unavailable source degrades the store to an empty index.
"""

from .data_quality import (
    DataQualityError,
    MalformedRecordError,
)
from .recovery import (
    GracefulDegradationError,
    SourceUnavailableError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedRecordError",
    # Recovery Categories
    "GracefulDegradationError",
    "SourceUnavailableError",
]
