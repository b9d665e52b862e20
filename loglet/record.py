"""
Loglet Record Module

Turns the arguments of a log call into a normalized record:
- a mapping, pydantic model or dataclass is used as the field set (copied)
- an exception (or anything with `message` and `stack`) becomes `message` + `stack`
- a string is a printf-style template formatted with the remaining arguments

Every record gets the reserved `level` (first key) and `time` (last key) fields.
"""

import dataclasses
import json
import re
import traceback
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional, Tuple, Union

from pydantic import BaseModel

from .level import LogLevel
from .types import LogRecord

Clock = Callable[[], datetime]

RESERVED_KEYS = ("level", "time")

# Stands for "no payload given", so that None can still be logged.
MISSING: Any = object()

_PLACEHOLDER = re.compile(r"%[sdifjoOc%]")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class StructuredPayload(BaseModel):
    data: Dict[Any, Any]

    def to_fields(self) -> Dict[Any, Any]:
        return dict(self.data)


class FormatMessage(BaseModel):
    template: str
    args: Tuple[Any, ...] = ()

    def to_fields(self) -> Dict[Any, Any]:
        return {"message": format_message(self.template, *self.args)}


class ErrorValue(BaseModel):
    message: str
    stack: str

    def to_fields(self) -> Dict[Any, Any]:
        return {"message": self.message, "stack": self.stack}


LogInput = Union[StructuredPayload, FormatMessage, ErrorValue]


def is_error_like(value: Any) -> bool:
    """Exceptions, or foreign error objects exposing `message` and `stack`."""
    if isinstance(value, BaseException):
        return True
    return hasattr(value, "message") and hasattr(value, "stack")


def _error_value(error: Any) -> ErrorValue:
    if isinstance(error, BaseException):
        lines = traceback.format_exception(type(error), error, error.__traceback__)
        return ErrorValue(message=str(error), stack="".join(lines).rstrip("\n"))
    return ErrorValue(message=str(error.message), stack=str(error.stack))


def classify(payload: Any = MISSING, args: Tuple[Any, ...] = ()) -> LogInput:
    """Resolve the arguments of a log call into one input variant.

    Args:
        payload: First argument of the log call, MISSING for a call without arguments
        args: Remaining positional arguments

    Returns:
        The StructuredPayload, FormatMessage or ErrorValue to build from.
    """
    if payload is MISSING:
        return StructuredPayload(data={})
    if isinstance(payload, str):
        return FormatMessage(template=payload, args=args)
    if isinstance(payload, BaseException):
        return _error_value(payload)
    if isinstance(payload, BaseModel):
        return StructuredPayload(data=payload.model_dump())
    if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
        return StructuredPayload(data=dataclasses.asdict(payload))
    if isinstance(payload, Mapping):
        return StructuredPayload(data=dict(payload))
    if is_error_like(payload):
        return _error_value(payload)
    # Anything else is logged as its text, like a lone `%s`.
    return FormatMessage(template="%s", args=(payload,) + tuple(args))


def build_record(
    level: LogLevel, payload: Any = MISSING, *args: Any, clock: Optional[Clock] = None
) -> LogRecord:
    """Build a fresh record for one log call.

    The caller's fields keep their order between `level` and `time`;
    caller-supplied `level`/`time` values are replaced by the builder's.
    """
    fields = classify(payload, args).to_fields()
    for key in RESERVED_KEYS:
        fields.pop(key, None)
    record: LogRecord = {"level": level}
    record.update(fields)
    record["time"] = (clock or utcnow)()
    return record


def inspect_value(value: Any) -> str:
    """Plain text of a value: strings as-is, everything else as its repr."""
    if isinstance(value, str):
        return value
    return repr(value)


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _format_decimal(value: Any) -> str:
    # Only %d reads None as zero; %i and %f give NaN.
    number = 0 if value is None else _number(value)
    if number is None or number != number:
        return "NaN"
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)


def _format_integer(value: Any) -> str:
    number = _number(value)
    if number is None or number != number or abs(number) == float("inf"):
        return "NaN"
    return str(int(number))


def _format_float(value: Any) -> str:
    number = _number(value)
    if number is None:
        return "NaN"
    return str(float(number))


def _to_json(value: Any) -> str:
    try:
        return json.dumps(value, default=str, ensure_ascii=False)
    except ValueError:
        return "[Circular]"


_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "s": str,
    "d": _format_decimal,
    "i": _format_integer,
    "f": _format_float,
    "j": _to_json,
    "o": repr,
    "O": repr,
    "c": lambda value: "",
}


def format_message(template: str, *args: Any) -> str:
    """printf-style formatting.

    Placeholders without an argument stay as written; surplus arguments are
    appended, separated by spaces.
    """
    if not args:
        return template

    remaining = list(args)

    def substitute(match: "re.Match[str]") -> str:
        token = match.group(0)
        if token == "%%":
            return "%"
        if not remaining:
            return token
        return _CONVERSIONS[token[1]](remaining.pop(0))

    message = _PLACEHOLDER.sub(substitute, template)
    if remaining:
        message = " ".join([message] + [inspect_value(arg) for arg in remaining])
    return message
