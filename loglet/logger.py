"""
Loglet Logger Module

A broadcast hub for structured log records. A Logger holds no output
configuration of its own: it builds one record per call and hands it to every
subscribed handler, synchronously and in subscription order.
"""

import logging
import threading
from typing import Any, List, NamedTuple, Optional, Tuple, Union

from .level import LogLevel
from .record import MISSING, Clock, build_record
from .types import LogHandler, LogRecord

_log = logging.getLogger(__name__)


class Subscription(NamedTuple):
    handler: LogHandler
    once: bool


class Logger:
    """Structured logger publishing records to its handlers."""

    def __init__(self, fail_fast: bool = False, clock: Optional[Clock] = None):
        """Initialize the logger.

        Args:
            fail_fast: Let a handler's exception propagate out of `log()`,
                skipping the handlers after it. By default the failure is
                reported and dispatch continues.
            clock: Time source for the `time` field, UTC now by default
        """
        self.fail_fast = fail_fast
        self._clock = clock
        self._subscriptions: List[Subscription] = []

    def on(self, handler: LogHandler) -> "Logger":
        """Run `handler` for every subsequent record."""
        self._subscriptions.append(Subscription(handler, once=False))
        _log.debug(f"Subscribed handler {handler!r}")
        return self

    def once(self, handler: LogHandler) -> "Logger":
        """Run `handler` for the next record only."""
        self._subscriptions.append(Subscription(handler, once=True))
        _log.debug(f"Subscribed one-shot handler {handler!r}")
        return self

    def off(self, handler: LogHandler) -> "Logger":
        """Remove the most recent subscription of `handler`, if any."""
        for index in range(len(self._subscriptions) - 1, -1, -1):
            if self._subscriptions[index].handler == handler:
                del self._subscriptions[index]
                _log.debug(f"Unsubscribed handler {handler!r}")
                break
        return self

    def clear(self) -> None:
        self._subscriptions.clear()

    def handlers(self) -> Tuple[LogHandler, ...]:
        return tuple(subscription.handler for subscription in self._subscriptions)

    def handler_count(self) -> int:
        return len(self._subscriptions)

    def log(self, level: Union[LogLevel, str, int], payload: Any = MISSING, *args: Any) -> None:
        """Log a mapping, an exception, or a printf-style message.

        Args:
            level: Level of the record (member, rank or name)
            payload: Mapping of fields, an error, or a message template
            *args: Values for the template placeholders, if any
        """
        record = build_record(LogLevel.parse(level), payload, *args, clock=self._clock)
        self._dispatch(record)

    def _dispatch(self, record: LogRecord) -> None:
        subscriptions = list(self._subscriptions)
        for subscription in subscriptions:
            if subscription.once:
                self._remove(subscription)
            if self.fail_fast:
                subscription.handler(record)
                continue
            try:
                subscription.handler(record)
            except Exception:
                _log.exception(f"Log handler {subscription.handler!r} failed")

    def _remove(self, subscription: Subscription) -> None:
        # Identity match, equal NamedTuples may belong to other subscriptions.
        for index, current in enumerate(self._subscriptions):
            if current is subscription:
                del self._subscriptions[index]
                return

    def trace(self, payload: Any = MISSING, *args: Any) -> None:
        self.log(LogLevel.TRACE, payload, *args)

    def debug(self, payload: Any = MISSING, *args: Any) -> None:
        self.log(LogLevel.DEBUG, payload, *args)

    def info(self, payload: Any = MISSING, *args: Any) -> None:
        self.log(LogLevel.INFO, payload, *args)

    def warn(self, payload: Any = MISSING, *args: Any) -> None:
        self.log(LogLevel.WARN, payload, *args)

    def error(self, payload: Any = MISSING, *args: Any) -> None:
        self.log(LogLevel.ERROR, payload, *args)

    def fatal(self, payload: Any = MISSING, *args: Any) -> None:
        self.log(LogLevel.FATAL, payload, *args)

    @classmethod
    def default(cls) -> "Logger":
        """The process-wide shared instance."""
        return get_logger()


_instance: Optional[Logger] = None
_lock = threading.Lock()


def get_logger() -> Logger:
    """Get the process-wide Logger, creating it on first use."""
    global _instance
    if _instance is None:
        with _lock:
            if _instance is None:
                _instance = Logger()
    return _instance


def reset_logger() -> None:
    """Drop the process-wide Logger; the next `get_logger()` creates a new one."""
    global _instance
    with _lock:
        _instance = None
