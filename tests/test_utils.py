"""Unit tests for utility modules."""

import json
import sys
from datetime import datetime, timedelta, timezone

import pytest

from flexid.utils import crash
from flexid.utils.timestamp import (
    MICROSECOND,
    SECOND,
    UNIX_EPOCH,
    format_timestamp,
    from_nanos,
    now_micros,
    now_nanos,
    to_duration_nanos,
    to_nanos,
    to_utc,
)


class TestTimestamp:
    """Tests for timestamp utilities."""

    def test_format_timestamp_iso_format(self):
        """Timestamp is ISO 8601 format."""
        ts = format_timestamp()
        assert "T" in ts
        assert ts.endswith("Z")

    def test_format_timestamp_has_microseconds(self):
        """Timestamp includes microseconds."""
        ts = format_timestamp()
        decimal_part = ts.split(".")[1].rstrip("Z")
        assert len(decimal_part) == 6

    def test_format_timestamp_exact(self):
        """Explicit microseconds are formatted exactly."""
        assert format_timestamp(1_577_836_800_000_001) == "2020-01-01T00:00:00.000001Z"

    def test_now_micros_returns_int(self):
        """now_micros returns integer."""
        assert isinstance(now_micros(), int)

    def test_now_nanos_reasonable_value(self):
        """now_nanos is after 2020-01-01."""
        assert now_nanos() > 1_577_836_800 * SECOND

    def test_to_utc_naive(self):
        """Naive datetimes are labelled UTC without shifting."""
        assert to_utc(datetime(2020, 1, 1, 12)) == datetime(2020, 1, 1, 12, tzinfo=timezone.utc)

    def test_to_utc_aware(self):
        """Aware datetimes are converted to UTC."""
        local = datetime(2020, 1, 1, 12, tzinfo=timezone(timedelta(hours=-5)))
        assert to_utc(local).hour == 17
        assert to_utc(local).tzinfo is timezone.utc

    def test_to_nanos(self):
        """Datetimes and ints convert to nanoseconds since Unix epoch."""
        assert to_nanos(UNIX_EPOCH) == 0
        assert to_nanos(UNIX_EPOCH + timedelta(microseconds=3)) == 3 * MICROSECOND
        assert to_nanos(datetime(1970, 1, 1, 0, 0, 1)) == SECOND
        assert to_nanos(12345) == 12345

    def test_to_nanos_rejects_other_types(self):
        """Floats are not timestamps."""
        with pytest.raises(TypeError):
            to_nanos(1.5)

    def test_from_nanos(self):
        """Nanoseconds convert back to a UTC datetime."""
        assert from_nanos(SECOND + 999) == UNIX_EPOCH + timedelta(seconds=1)

    def test_to_duration_nanos(self):
        """Durations convert from timedelta, name and int."""
        assert to_duration_nanos(timedelta(milliseconds=5)) == 5_000_000
        assert to_duration_nanos("minute") == 60 * SECOND
        assert to_duration_nanos(3) == 3


class TestCrashHandler:
    """Tests for crash handling utilities."""

    def test_configure_sets_path(self):
        """configure() sets crash log path."""
        original = crash._crash_log

        crash.configure("/tmp/test_crash.log")
        assert crash._crash_log == "/tmp/test_crash.log"

        crash.configure(original)

    def test_install_crash_handler(self):
        """install_crash_handler sets sys.excepthook."""
        original_hook = sys.excepthook
        crash.install_crash_handler()

        assert sys.excepthook == crash.log_crash

        sys.excepthook = original_hook

    def test_log_crash_writes_record(self, tmp_path, capsys):
        """log_crash writes a JSON line and a stderr banner."""
        original = crash._crash_log
        crash.configure(str(tmp_path / "logs" / "crash.log"))
        try:
            try:
                raise RuntimeError("boom")
            except RuntimeError as exc:
                crash.log_crash(type(exc), exc, exc.__traceback__)
        finally:
            crash.configure(original)

        record = json.loads((tmp_path / "logs" / "crash.log").read_text().strip())
        assert record["type"] == "RuntimeError"
        assert record["msg"] == "boom"
        assert "Traceback" in record["traceback"]
        assert record["id"] != "unknown"
        assert "CRASH [" in capsys.readouterr().err

    def test_log_crash_records_error_chain(self, tmp_path, capsys):
        """Crashes from must-style calls name the wrapped error and its context."""
        from flexid.config import new_config
        from flexid.core.errors import FatalError
        from flexid.core.generator import must_create_generator

        original = crash._crash_log
        crash.configure(str(tmp_path / "crash.log"))
        try:
            try:
                must_create_generator(new_config().with_alphabet("abca"))
            except FatalError as exc:
                crash.log_crash(type(exc), exc, exc.__traceback__)
        finally:
            crash.configure(original)

        record = json.loads((tmp_path / "crash.log").read_text().strip())
        assert record["chain"] == ["FatalError", "DuplicateAlphabetCharacterError"]
        assert record["context"] == {"character": "a"}
        assert "FatalError <- DuplicateAlphabetCharacterError" in capsys.readouterr().err

    def test_crash_record_plain_exception(self):
        """Non-flexid exceptions carry no chain or context."""
        record = crash.crash_record(KeyError, KeyError("x"), None)
        assert record["type"] == "KeyError"
        assert "chain" not in record
        assert "context" not in record
