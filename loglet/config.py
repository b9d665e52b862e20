"""
Loglet Config Module

Picks an output format and subscribes the matching handler to a logger.
"""

from enum import Enum
from typing import Optional, TextIO, Union

from .handlers import BunyanHandler, JsonHandler, PrettyHandler, StreamHandler
from .handlers.bunyan_handler import DEFAULT_NAME
from .logger import Logger, get_logger


class LogFormat(Enum):
    """Enumeration for log output formats."""

    JSON = "json"
    BUNYAN = "bunyan"
    PRETTY = "pretty"

    @classmethod
    def parse(cls, value: Union["LogFormat", str]) -> "LogFormat":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Invalid log format: {value!r}")


class LogletConfig:
    """Configuration class for Loglet output."""

    def __init__(
        self,
        format_type: Union[LogFormat, str] = LogFormat.PRETTY,
        stream: Optional[TextIO] = None,
        name: str = DEFAULT_NAME,
        color: Optional[bool] = None,
        fail_fast: bool = False,
    ):
        """Initialize logger configuration.

        Args:
            format_type: Output format (LogFormat enum or its name)
            stream: Text sink to write to, stdout when None
            name: Logger name for Bunyan output
            color: Force ANSI colors on/off for pretty output, autodetect when None
            fail_fast: Propagate handler exceptions out of `log()`
        """
        self.format_type = LogFormat.parse(format_type)
        self.stream = stream
        self.name = name
        self.color = color
        self.fail_fast = fail_fast

    def create_handler(self) -> StreamHandler:
        """Create the handler for the configured format."""
        if self.format_type == LogFormat.JSON:
            return JsonHandler(self.stream)
        if self.format_type == LogFormat.BUNYAN:
            return BunyanHandler(self.stream, name=self.name)
        return PrettyHandler(self.stream, color=self.color)


def configure_logging(config: LogletConfig, logger: Optional[Logger] = None) -> StreamHandler:
    """Subscribe the configured handler.

    Args:
        config: Output configuration
        logger: Logger to configure, the shared one when None

    Returns:
        The subscribed handler, for a later `logger.off(handler)`.
    """
    logger = logger or get_logger()
    logger.fail_fast = config.fail_fast
    handler = config.create_handler()
    logger.on(handler)
    return handler


def setup_default_logging(
    format_type: Union[LogFormat, str] = LogFormat.PRETTY,
    stream: Optional[TextIO] = None,
    name: str = DEFAULT_NAME,
    color: Optional[bool] = None,
    fail_fast: bool = False,
) -> StreamHandler:
    """Set up output on the shared logger.

    Args:
        format_type: Output format
        stream: Optional text sink, stdout when None
        name: Logger name for Bunyan output
        color: Force ANSI colors on/off for pretty output
        fail_fast: Propagate handler exceptions out of `log()`
    """
    config = LogletConfig(
        format_type=format_type,
        stream=stream,
        name=name,
        color=color,
        fail_fast=fail_fast,
    )
    return configure_logging(config)
