"""Crash records for uncaught flexid failures.

A record names the chain of flexid errors behind the crash (for example a
FatalError raised by must_generate() over an EpochNotReachedError) together
with their merged context, so a dead process still says which generator
setting or source failed.
"""

import json
import os
import sys
import traceback

from flexid.core.errors import FlexIdError
from flexid.core.generator import get_default_generator
from flexid.utils.timestamp import format_timestamp

# Default crash log path, can be overridden by configure()
_crash_log = "logs/crash.log"


def configure(crash_file):
    """Set crash log file path from config."""
    global _crash_log
    _crash_log = crash_file


def _crash_id():
    try:
        return get_default_generator().generate()
    except FlexIdError:
        return "unknown"


def error_chain(exc):
    """``exc`` and the flexid errors it wraps, outermost first."""
    chain = []
    while isinstance(exc, FlexIdError) and exc not in chain:
        chain.append(exc)
        exc = exc.cause if exc.cause is not None else exc.__cause__
    return chain


def crash_record(exc_type, exc_value, exc_tb):
    """JSON-ready description of an uncaught exception."""
    record = {
        "id": _crash_id(),
        "timestamp": format_timestamp(),
        "type": exc_type.__name__ if exc_type else "Unknown",
        "msg": str(exc_value) if exc_value else "",
        "traceback": "".join(traceback.format_exception(exc_type, exc_value, exc_tb)),
    }
    chain = error_chain(exc_value)
    if chain:
        context = {}
        # inner errors win; they name the setting that failed
        for error in chain:
            context.update(error.context)
        record["chain"] = [type(error).__name__ for error in chain]
        record["context"] = context
    return record


def _write_crash(record):
    """Append record to the crash file. Never raises."""
    try:
        log_dir = os.path.dirname(_crash_log)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        with open(_crash_log, "a") as f:
            f.write(json.dumps(record, default=str) + "\n")
    except (OSError, TypeError, ValueError):
        pass


def log_crash(exc_type, exc_value, exc_tb):
    """Log uncaught exception to stderr and file. Never raises."""
    record = crash_record(exc_type, exc_value, exc_tb)
    heading = " <- ".join(record.get("chain", [])) or record["type"]

    sys.stderr.write(f"\n{'=' * 60}\nCRASH [{record['id']}] {record['timestamp']}\n{'=' * 60}\n")
    sys.stderr.write(f"{heading}: {record['msg']}\n{'-' * 60}\n{record['traceback']}{'=' * 60}\n\n")
    _write_crash(record)


def install_crash_handler():
    """Install global sync exception handler."""
    sys.excepthook = log_crash
