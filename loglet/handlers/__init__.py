"""
Loglet Handlers Package

Ready-made record handlers writing JSON, Bunyan-compatible JSON, or a
colorized human-readable line to a text sink.
"""

from .base import StreamHandler, supports_color
from .bunyan_handler import BunyanHandler, to_bunyan, write_bunyan
from .json_handler import JsonHandler, encode_record, write_json
from .pretty_handler import PrettyHandler, dump_value, write_pretty

__all__ = [
    "StreamHandler",
    "JsonHandler",
    "BunyanHandler",
    "PrettyHandler",
    "write_json",
    "write_bunyan",
    "write_pretty",
    "encode_record",
    "to_bunyan",
    "dump_value",
    "supports_color",
]
