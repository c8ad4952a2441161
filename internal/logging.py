"""Structured logging for the life simulator.

Diagnostics go to stderr as one JSON object per line so they never mix with
the board frames the engine writes to stdout. Per-generation timing records
go to a separate JSON-lines file through FileRecorder.
"""

import json
import os
import sys
import threading
from enum import IntEnum
from core.errors import ConfigError
from utils.timestamp import format_timestamp

class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @classmethod
    def parse(cls, name):
        """Level from a config name such as "info" or "warning"."""
        key = str(name).upper()
        if key == "WARNING":
            key = "WARN"
        try:
            return cls[key]
        except KeyError as exc:
            raise ConfigError(f"unknown log level: {name}", context={"level": name}, cause=exc) from exc

# process-wide logger, replaced by StructuredLogger.configure()
_logger = None
_logger_lock = threading.Lock()

class StructuredLogger:
    """JSON-lines logger; World and LifeEngine fetch it through get_logger()."""

    def __init__(self, level=LogLevel.INFO, stream=None):
        self.level = level
        # None: sys.stderr, looked up per record
        self.stream = stream

    def _emit(self, level, message, error=None, **kwargs):
        if level < self.level:
            return
        try:
            record = {"timestamp": format_timestamp(), "level": level.name, "msg": message, **kwargs}
            if error:
                record["err"] = str(error)
                error_id = getattr(error, "error_id", None)
                if error_id:
                    record["error_id"] = error_id
            print(json.dumps(record, default=str), file=self.stream or sys.stderr, flush=True)
        except Exception:
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

def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger


class FileRecorder:
    """Appends one JSON record per line to a file."""

    def __init__(self, file_path):
        self.path = file_path
        self.written = 0
        self._file = None

    def open(self):
        if self._file:
            return self
        dir_path = os.path.dirname(self.path)
        if dir_path:
            os.makedirs(dir_path, exist_ok=True)
        self._file = open(self.path, "a")
        return self

    def close(self):
        if self._file:
            self._file.close()
            self._file = None

    def __enter__(self):
        return self.open()

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def record(self, kind, data):
        if not self._file:
            self.open()
        self._file.write(json.dumps({"timestamp": format_timestamp(), "kind": kind, "data": data}, default=str) + "\n")
        self._file.flush()
        self.written += 1

    def get_stats(self):
        return {"path": self.path, "written": self.written}
