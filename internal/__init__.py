from utils.timestamp import now_millis, format_timestamp
from internal.logging import LogLevel, StructuredLogger, configure_logging, get_logger

__all__ = [
    "now_millis",
    "format_timestamp",
    "LogLevel",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]
