"""Toolkit errors with tracking IDs."""

import itertools

from toolkit.utils.timestamp import format_timestamp, now_micros

# Seeded from the clock so IDs do not repeat across restarts or workers
_error_sequence = itertools.count(now_micros())


def _next_error_id():
    # Imported here because the encoder raises these errors itself
    from toolkit.encoding.shortid import encode_short_id
    return encode_short_id(next(_error_sequence))


class ToolkitError(Exception):
    """Base error with short tracking ID and timestamp."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = _next_error_id()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"


class PreconditionViolation(ToolkitError, ValueError):
    """An input did not satisfy a documented precondition."""

    def __init__(self, message, argument=None, value=None, **kwargs):
        context = dict(kwargs.pop("context", None) or {})
        if argument:
            context["argument"] = argument
            context["value"] = value
        super().__init__(message, context=context, **kwargs)
        self.argument = argument
        self.value = value


class ConfigError(ToolkitError):
    """Unusable configuration (bad alphabet, delimiter or log level)."""

    def __init__(self, message, key=None, **kwargs):
        context = dict(kwargs.pop("context", None) or {})
        if key:
            context["key"] = key
        super().__init__(message, context=context, **kwargs)
        self.key = key
