"""
Data quality error classifications for market record ingestion.

These exceptions describe a single input line that could not be turned into
a record. They are always recoverable: the loader skips the line and moves on.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""
    
    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MalformedRecordError(DataQualityError):
    """A line has too few fields, an unparseable number or a bad token."""
    
    def __init__(self, message: str, raw_line: Optional[str] = None,
                 line_number: Optional[int] = None, field: Optional[str] = None,
                 **kwargs):
        super().__init__(message, **kwargs)
        self.raw_line = raw_line
        self.line_number = line_number
        self.field = field

    @property
    def reason(self) -> str:
        """Failure reason without line annotation."""
        return str(self.args[0]) if self.args else ""

    def with_location(self, line_number: int, raw_line: str) -> "MalformedRecordError":
        """Attach the source position of the offending line."""
        self.line_number = line_number
        self.raw_line = raw_line
        return self
