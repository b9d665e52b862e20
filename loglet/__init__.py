"""
Loglet

A minimal structured logging facade: leveled records fanned out to
subscribed handlers.
"""

from .config import LogFormat, LogletConfig, configure_logging, setup_default_logging
from .handlers import (
    BunyanHandler,
    JsonHandler,
    PrettyHandler,
    write_bunyan,
    write_json,
    write_pretty,
)
from .level import LogLevel
from .logger import Logger, get_logger, reset_logger
from .record import build_record, format_message

__version__ = "0.1.0"

__all__ = [
    "LogLevel",
    "Logger",
    "get_logger",
    "reset_logger",
    "build_record",
    "format_message",
    "JsonHandler",
    "BunyanHandler",
    "PrettyHandler",
    "write_json",
    "write_bunyan",
    "write_pretty",
    "LogFormat",
    "LogletConfig",
    "configure_logging",
    "setup_default_logging",
]
