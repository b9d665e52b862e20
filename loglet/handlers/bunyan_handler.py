"""Bunyan-compatible JSON output (`msg`, `pid` and `name` fields)."""

import os
from typing import Optional, TextIO

from ..types import LogRecord
from .json_handler import JsonHandler

PID = os.getpid()

DEFAULT_NAME = "default"


def to_bunyan(record: LogRecord, name: str = DEFAULT_NAME, pid: int = PID) -> LogRecord:
    """Rename `message` to `msg` and add the process fields."""
    fields = {key: value for key, value in record.items() if key != "message"}
    fields["msg"] = record.get("message") or "object"
    fields["pid"] = pid
    fields["name"] = name
    return fields


class BunyanHandler(JsonHandler):
    """Writes records in the field layout Bunyan tooling expects."""

    def __init__(self, stream: Optional[TextIO] = None, name: str = DEFAULT_NAME):
        super().__init__(stream)
        self.name = name

    def format(self, record: LogRecord) -> str:
        return super().format(to_bunyan(record, self.name))


write_bunyan = BunyanHandler()
