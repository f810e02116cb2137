from toolkit.app import Toolkit, create_toolkit
from toolkit.config import Config, load_config
from toolkit.core.errors import ConfigError, PreconditionViolation, ToolkitError
from toolkit.encoding.shortid import DEFAULT_ALPHABET, encode_short_id
from toolkit.formatting.relative_time import format_relative_time
from toolkit.utils.text import stringify_keys

__all__ = [
    "DEFAULT_ALPHABET",
    "encode_short_id",
    "format_relative_time",
    "stringify_keys",
    "ToolkitError",
    "PreconditionViolation",
    "ConfigError",
    "Toolkit",
    "create_toolkit",
    "Config",
    "load_config",
]
