import json
import sys
import threading
from enum import IntEnum

from flexid.utils.timestamp import format_timestamp


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40


_logger = None
_logger_lock = threading.Lock()


class StructuredLogger:
    """One JSON object per line on stderr."""

    def __init__(self, level=LogLevel.INFO, stream=None):
        self.level = level
        self.stream = stream

    def _emit(self, level, message, error=None, **kwargs):
        if level < self.level:
            return
        record = {"timestamp": format_timestamp(), "level": level.name, "msg": message, **kwargs}
        if error:
            record["err"] = str(error)
        try:
            print(json.dumps(record, default=str), file=self.stream or sys.stderr, flush=True)
        except (OSError, ValueError):
            # closed or broken stream
            pass

    def debug(self, message, **kwargs):
        self._emit(LogLevel.DEBUG, message, **kwargs)

    def info(self, message, **kwargs):
        self._emit(LogLevel.INFO, message, **kwargs)

    def warn(self, message, error=None, **kwargs):
        self._emit(LogLevel.WARN, message, error, **kwargs)

    def error(self, message, error=None, **kwargs):
        self._emit(LogLevel.ERROR, message, error, **kwargs)

    @classmethod
    def configure(cls, min_level=LogLevel.INFO, stream=None):
        global _logger
        with _logger_lock:
            _logger = cls(min_level, stream)
        return _logger


def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger


def parse_level(name):
    """LogLevel for a config string such as ``"debug"`` or ``"WARNING"``."""
    key = name.upper()
    if key == "WARNING":
        key = "WARN"
    try:
        return LogLevel[key]
    except KeyError:
        raise ValueError(f"unknown log level {name!r}") from None
