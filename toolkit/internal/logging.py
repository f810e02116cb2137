import json
import sys
import threading
from enum import IntEnum

from toolkit.core.errors import ConfigError
from toolkit.utils.timestamp import format_timestamp


class LogLevel(IntEnum):
    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40

    @classmethod
    def parse(cls, name):
        """Level from a config string, case-insensitive; WARNING maps to WARN."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().upper()
        if key == "WARNING":
            key = "WARN"
        try:
            return cls[key]
        except KeyError as exc:
            raise ConfigError(f"unknown log level {name!r}", key="logging.level", cause=exc) from exc


_logger = None
_logger_lock = threading.Lock()


class StructuredLogger:
    """One JSON object per line, written to stderr unless a stream is given."""

    def __init__(self, level=LogLevel.INFO, stream=None, name="toolkit"):
        self.level = level
        self.stream = stream
        self.name = name

    def _emit(self, level, message, error=None, **kwargs):
        if level < self.level:
            return
        try:
            record = {"timestamp": format_timestamp(), "level": level.name, "logger": self.name, "msg": message, **kwargs}
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
            _logger = cls(LogLevel.parse(min_level), stream)
        return _logger


def get_logger():
    global _logger
    if _logger is None:
        with _logger_lock:
            if _logger is None:
                _logger = StructuredLogger()
    return _logger
