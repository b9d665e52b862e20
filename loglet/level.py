"""
Loglet Levels

The closed set of severities a record can carry. Higher rank means more severe.
"""

from enum import IntEnum
from typing import Union


class LogLevel(IntEnum):
    """Enumeration for log levels."""

    # Very detailed logging, external libraries, etc.
    TRACE = 10
    # More detailed than info.
    DEBUG = 20
    # Detail on regular operation.
    INFO = 30
    # A potential problem that should be looked at eventually.
    WARN = 40
    # An error affecting the current operation, the application keeps going.
    ERROR = 50
    # The whole application is broken.
    FATAL = 60

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: Union["LogLevel", str, int]) -> "LogLevel":
        """Normalize a level given as member, rank or name.

        Args:
            value: A LogLevel, one of the integer ranks, or a level name

        Returns:
            The matching LogLevel.

        Raises:
            ValueError: If the value does not name a level.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Invalid log level: {value!r}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise ValueError(f"Invalid log level: {value!r}") from None
        raise ValueError(f"Invalid log level: {value!r}")
