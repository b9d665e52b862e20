"""ANSI codes, status glyphs and per-level styles for console output."""

from ..level import LogLevel

ANSI = {
    "RESET": "\033[0m",
    "BOLD": "\033[1m",
    "RED": "\033[31m",
    "GREEN": "\033[32m",
    "YELLOW": "\033[33m",
    "BLUE": "\033[34m",
    "CYAN": "\033[36m",
    "GRAY": "\033[90m",
}

SYMBOLS = {
    "info": ("ℹ", ANSI["BLUE"]),
    "success": ("✔", ANSI["GREEN"]),
    "warning": ("⚠", ANSI["YELLOW"]),
    "error": ("✖", ANSI["RED"]),
}

# level -> (symbol name, label color)
LEVEL_STYLES = {
    LogLevel.TRACE: ("info", ANSI["BLUE"]),
    LogLevel.DEBUG: ("info", ANSI["GRAY"]),
    LogLevel.INFO: ("success", ANSI["GREEN"]),
    LogLevel.WARN: ("warning", ANSI["YELLOW"]),
    LogLevel.ERROR: ("error", ANSI["RED"]),
    LogLevel.FATAL: ("error", ANSI["BOLD"] + ANSI["RED"]),
}


def paint(text: str, color: str, enabled: bool = True) -> str:
    if not enabled or not color:
        return text
    return f"{color}{text}{ANSI['RESET']}"


__all__ = ["ANSI", "SYMBOLS", "LEVEL_STYLES", "paint"]
