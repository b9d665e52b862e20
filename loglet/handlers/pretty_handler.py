"""Human-oriented console output: glyph, timestamp, colored level, message, extra fields."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any, Optional, Set, TextIO

from ..level import LogLevel
from ..types import LogRecord
from .base import StreamHandler, supports_color
from .constants import ANSI, LEVEL_STYLES, SYMBOLS, paint

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

SKIPPED_KEYS = ("level", "time", "message")

# Nested values longer than this break onto indented lines.
LINE_WIDTH = 72

INDENT = "  "


def format_timestamp(value: Any) -> str:
    if isinstance(value, datetime):
        return value.astimezone().strftime(TIME_FORMAT)
    return str(value)


def _is_structured(value: Any) -> bool:
    return isinstance(value, (Mapping, list, tuple, set, frozenset))


def _scalar(value: Any, color: bool) -> str:
    if isinstance(value, str):
        return paint(repr(value), ANSI["GREEN"], color)
    if isinstance(value, bool) or value is None:
        return paint(repr(value), ANSI["BOLD"], color)
    if isinstance(value, (int, float)):
        return paint(repr(value), ANSI["YELLOW"], color)
    return repr(value)


def _brackets(value: Any) -> tuple:
    if isinstance(value, Mapping):
        return "{", "}"
    if isinstance(value, list):
        return "[", "]"
    if isinstance(value, tuple):
        return "(", ")"
    if isinstance(value, frozenset):
        return "frozenset({", "})"
    return "{", "}"


def _render_items(value: Any, color: bool, level: int, seen: Set[int]) -> list:
    if isinstance(value, Mapping):
        return [
            f"{_scalar(key, color)}: {dump_value(item, color, level + 1, seen)}"
            for key, item in value.items()
        ]
    return [dump_value(item, color, level + 1, seen) for item in value]


def dump_value(value: Any, color: bool = False, level: int = 0, seen: Optional[Set[int]] = None) -> str:
    """Render nested data at any depth, one line when it fits.

    Args:
        value: Value to render
        color: Colorize scalars (strings green, numbers yellow, booleans/None bold)
        level: Current nesting level, for indentation
        seen: ids of the containers being rendered, to cut cycles

    Returns:
        The rendered text.
    """
    if not _is_structured(value):
        return _scalar(value, color)

    seen = set() if seen is None else seen
    if id(value) in seen:
        return paint("[Circular]", ANSI["CYAN"], color)
    seen.add(id(value))
    try:
        items = _render_items(value, color, level, seen)
        plain = _render_items(value, False, level, seen) if color else list(items)
    finally:
        seen.discard(id(value))

    opening, closing = _brackets(value)
    if isinstance(value, tuple) and len(items) == 1:
        items[0] += ","
        plain[0] += ","
    if not items and isinstance(value, (set, frozenset)):
        return f"{type(value).__name__}()"

    one_line = ", ".join(plain)
    if "\n" not in one_line and len(one_line) + len(INDENT) * level <= LINE_WIDTH:
        return opening + ", ".join(items) + closing

    inner = INDENT * (level + 1)
    body = ",\n".join(inner + item for item in items)
    return f"{opening}\n{body}\n{INDENT * level}{closing}"


class PrettyHandler(StreamHandler):
    """Writes a colorized single-line summary per record.

    :param stream: text sink, `sys.stdout` at write time when None
    :param color: force colors on/off; None detects from the sink and environment
    """

    def __init__(self, stream: Optional[TextIO] = None, color: Optional[bool] = None):
        super().__init__(stream)
        self.color = color

    def format(self, record: LogRecord) -> str:
        color = supports_color(self.stream, self.color)
        level = LogLevel.parse(record["level"])
        symbol_name, level_color = LEVEL_STYLES[level]
        symbol, symbol_color = SYMBOLS[symbol_name]

        line = (
            f"{paint(symbol, symbol_color, color)} "
            f"[{format_timestamp(record['time'])}] "
            f"{paint(level.label, level_color, color)} "
        )
        if record.get("message"):
            line += f"{record['message']} "

        for key, value in record.items():
            if key in SKIPPED_KEYS:
                continue
            line += f"\n\t{paint(f'{key}:', ANSI['CYAN'], color)} "
            if _is_structured(value):
                line += dump_value(value, color)
            else:
                line += str(value)
        return line


write_pretty = PrettyHandler()
