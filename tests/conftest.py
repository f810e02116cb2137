"""Pytest fixtures for all tests."""

import io
import json

import pytest

from toolkit.config import Config, EncoderConfig, FormatterConfig
from toolkit.internal.logging import LogLevel, StructuredLogger


@pytest.fixture
def vowels():
    """Five-symbol alphabet."""
    return ["a", "e", "i", "o", "u"]


@pytest.fixture
def log_stream():
    """In-memory stream capturing logger output."""
    return io.StringIO()


@pytest.fixture
def logger(log_stream):
    """Debug-level logger writing to log_stream."""
    return StructuredLogger(level=LogLevel.DEBUG, stream=log_stream)


@pytest.fixture
def vowel_config(vowels):
    """Config with the vowel alphabet and a dash delimiter."""
    return Config(EncoderConfig(alphabet=vowels), FormatterConfig(delimiter="-"))


@pytest.fixture
def config_file(tmp_path):
    """Write a toolkit.json and return its path."""
    path = tmp_path / "toolkit.json"
    path.write_text(json.dumps({
        "encoder": {"alphabet": ["a", "e", "i", "o", "u"]},
        "formatter": {"delimiter": "."},
        "logging": {"level": "debug"},
    }))
    return path


@pytest.fixture
def log_records(log_stream):
    """Parse JSON log lines written so far."""
    def read():
        return [json.loads(line) for line in log_stream.getvalue().splitlines() if line]
    return read
