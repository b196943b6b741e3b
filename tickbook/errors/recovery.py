"""
Recovery strategy classifications for error handling.

Errors here allow continued operation with reduced functionality: the
caller keeps working against an empty or partially loaded store.
"""

from typing import Optional


class GracefulDegradationError(Exception):
    """Mixin for errors that allow continued operation with reduced functionality."""
    
    def __init__(self, message: str, degraded_functionality: Optional[str] = None, 
                 fallback_strategy: Optional[str] = None, **kwargs):
        super().__init__(message)
        self.degraded_functionality = degraded_functionality
        self.fallback_strategy = fallback_strategy
        self.allows_degradation = True


class SourceUnavailableError(GracefulDegradationError):
    """The ingestion source could not be opened."""

    def __init__(self, message: str, source: Optional[str] = None, **kwargs):
        kwargs.setdefault("degraded_functionality", "record_index")
        kwargs.setdefault("fallback_strategy", "empty_store")
        super().__init__(message, **kwargs)
        self.source = source
        self.recoverable = True
