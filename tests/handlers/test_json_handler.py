"""
Unit tests for the JSON handler.
"""

import io
import json
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from loglet.handlers.json_handler import JsonHandler, encode_record, format_time, write_json
from loglet.level import LogLevel


@pytest.fixture
def record():
    return {
        "level": LogLevel.INFO,
        "message": "hello",
        "user": {"name": "bob", "roles": ["admin"]},
        "count": 3,
        "time": datetime(2026, 10, 19, 8, 15, 2, 123456, tzinfo=timezone.utc),
    }


class TestJsonHandler:
    """Test cases for JsonHandler."""

    def test_single_line(self, record):
        stream = io.StringIO()
        JsonHandler(stream)(record)
        output = stream.getvalue()
        assert output.endswith("\n")
        assert output.count("\n") == 1

    def test_level_and_time(self, record):
        stream = io.StringIO()
        JsonHandler(stream)(record)
        parsed = json.loads(stream.getvalue())
        assert parsed["level"] == record["level"] == 30
        assert parsed["time"] == "2026-10-19T08:15:02.123Z"

    def test_round_trip(self, record):
        """Test that parsing the output gives back the record's fields."""
        parsed = json.loads(encode_record(record))
        assert parsed == {**record, "level": 30, "time": format_time(record["time"])}

    def test_key_order(self, record):
        parsed = json.loads(encode_record(record))
        assert list(parsed) == ["level", "message", "user", "count", "time"]

    def test_one_write_per_record(self, record):
        stream = MagicMock()
        JsonHandler(stream)(record)
        stream.write.assert_called_once()
        stream.flush.assert_called_once()

    def test_unserializable_values_use_str(self):
        class Token:
            def __str__(self):
                return "token-1"

        parsed = json.loads(encode_record({"level": LogLevel.DEBUG, "token": Token()}))
        assert parsed["token"] == "token-1"

    def test_non_finite_floats_become_null(self):
        """Test that NaN and infinities are written as null, keeping the output standard JSON."""

        def reject(token):
            raise ValueError(f"non-standard JSON token {token}")

        record = {
            "level": LogLevel.INFO,
            "ratio": float("nan"),
            "limits": {"cap": float("inf"), "floor": [float("-inf"), 1.5]},
            "time": datetime(2026, 1, 1, tzinfo=timezone.utc),
        }
        stream = io.StringIO()
        JsonHandler(stream)(record)
        parsed = json.loads(stream.getvalue(), parse_constant=reject)
        assert parsed["ratio"] is None
        assert parsed["limits"] == {"cap": None, "floor": [None, 1.5]}
        assert list(parsed) == ["level", "ratio", "limits", "time"]

    def test_circular_payload_still_raises(self):
        data = {"x": float("nan")}
        data["self"] = data
        with pytest.raises(ValueError):
            encode_record({"level": LogLevel.INFO, "data": data})

    def test_non_ascii(self):
        assert "héllo" in encode_record({"message": "héllo"})

    def test_default_writes_stdout(self, record, capsys):
        write_json(record)
        parsed = json.loads(capsys.readouterr().out)
        assert parsed["message"] == "hello"


class TestFormatTime:
    """Test cases for timestamp serialization."""

    def test_utc(self):
        value = datetime(2026, 1, 2, 3, 4, 5, 6000, tzinfo=timezone.utc)
        assert format_time(value) == "2026-01-02T03:04:05.006Z"

    def test_converts_to_utc(self):
        from datetime import timedelta

        value = datetime(2026, 1, 2, 5, 4, 5, tzinfo=timezone(timedelta(hours=2)))
        assert format_time(value) == "2026-01-02T03:04:05.000Z"
