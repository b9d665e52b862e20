"""One-line JSON output, keys in record order."""

import json
import math
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Set

from ..types import LogRecord
from .base import StreamHandler


def format_time(value: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. 2026-10-19T08:15:02.123Z."""
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def json_default(value: Any) -> Any:
    if isinstance(value, datetime):
        return format_time(value)
    if isinstance(value, Enum):
        return value.value
    return str(value)


def finite(value: Any, seen: Optional[Set[int]] = None) -> Any:
    """Copy of `value` with NaN and infinities replaced by None, as JSON has no such numbers."""
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if not isinstance(value, (dict, list, tuple)):
        return value
    seen = set() if seen is None else seen
    if id(value) in seen:
        # Left as is, json reports the cycle.
        return value
    seen.add(id(value))
    try:
        if isinstance(value, dict):
            return {key: finite(item, seen) for key, item in value.items()}
        return [finite(item, seen) for item in value]
    finally:
        seen.discard(id(value))


def encode_record(record: LogRecord) -> str:
    # IntEnum members are ints to json, levels come out as their rank.
    try:
        return json.dumps(record, default=json_default, ensure_ascii=False, allow_nan=False)
    except ValueError:
        return json.dumps(finite(record), default=json_default, ensure_ascii=False, allow_nan=False)


class JsonHandler(StreamHandler):
    """Writes each record as a single JSON object per line."""

    def format(self, record: LogRecord) -> str:
        return encode_record(record)


write_json = JsonHandler()
