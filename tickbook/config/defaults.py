"""Default configuration parameters for record ingestion and logging."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class IngestParams:
    """Delimited-text ingestion parameters."""
    delimiter: str = ","                           # Single field separator character
    encoding: str = "utf-8"                        # Source file text encoding
    strict_side: bool = True                       # Reject side tokens other than bid/ask
    timestamp_format: Optional[str] = None         # strptime format to enforce, None = opaque


@dataclass(frozen=True)
class LoggingParams:
    """Diagnostic channel parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    ingest: IngestParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        ingest=IngestParams(),
        logging=LoggingParams(),
    )
