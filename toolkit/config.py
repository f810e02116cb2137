import json
import os
from pathlib import Path

from toolkit.core.errors import ConfigError
from toolkit.encoding.shortid import DEFAULT_ALPHABET

_DEFAULT_CONFIG = Path("toolkit.json")
_CONFIG_ENV = "TOOLKIT_CONFIG"


class EncoderConfig:
    __slots__ = ("alphabet",)

    def __init__(self, alphabet=DEFAULT_ALPHABET):
        self.alphabet = tuple(alphabet)


class FormatterConfig:
    __slots__ = ("delimiter",)

    def __init__(self, delimiter=","):
        self.delimiter = delimiter


class LoggingConfig:
    __slots__ = ("level",)

    def __init__(self, level="INFO"):
        self.level = level


class Config:
    __slots__ = ("encoder", "formatter", "logging")

    def __init__(self, encoder=None, formatter=None, logging=None):
        self.encoder = encoder or EncoderConfig()
        self.formatter = formatter or FormatterConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        if not isinstance(d, dict):
            raise ConfigError("config must be a JSON object")
        return cls(
            _section(EncoderConfig, d, "encoder"),
            _section(FormatterConfig, d, "formatter"),
            _section(LoggingConfig, d, "logging"),
        )

    def to_dict(self):
        return {
            "encoder": {"alphabet": list(self.encoder.alphabet)},
            "formatter": {"delimiter": self.formatter.delimiter},
            "logging": {"level": self.logging.level},
        }


def _section(section_cls, d, name):
    values = d.get(name) or {}
    if not isinstance(values, dict):
        raise ConfigError(f"{name} must be a JSON object", key=name)
    try:
        return section_cls(**values)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid {name} config: {exc}", key=name, cause=exc) from exc


def load_config(path=None):
    """Read JSON config from `path`, $TOOLKIT_CONFIG, or ./toolkit.json.

    Missing file means defaults.
    """
    if path:
        config_path = Path(path)
    elif os.environ.get(_CONFIG_ENV):
        config_path = Path(os.environ[_CONFIG_ENV])
    else:
        config_path = _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        try:
            data = json.load(file)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"{config_path} is not valid JSON: {exc}", cause=exc) from exc
    return Config.from_dict(data)
