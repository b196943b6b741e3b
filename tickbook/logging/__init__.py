"""
Logging configuration and utilities for the tickbook record engine.
"""
from .config import configure_logging, configure_logging_from, get_ingest_logger, get_logger

__all__ = ["configure_logging", "configure_logging_from", "get_ingest_logger", "get_logger"]
