"""Toolkit factory: config-bound access to the encoder and formatter."""

from toolkit.config import Config, load_config
from toolkit.core.errors import ConfigError
from toolkit.encoding.shortid import encode_short_id
from toolkit.formatting.relative_time import format_relative_time
from toolkit.internal.logging import StructuredLogger, get_logger
from toolkit.utils.timestamp import elapsed_seconds


class Toolkit:
    """Encoder and formatter bound to one alphabet and one delimiter."""

    def __init__(self, config=None, logger=None):
        self.config = config or Config()
        self._log = logger or get_logger()
        self.alphabet = tuple(self.config.encoder.alphabet)
        self.delimiter = self.config.formatter.delimiter
        self._validate()

    def _validate(self):
        if not self.alphabet:
            self._fail("alphabet must not be empty", "encoder.alphabet")
        if len(self.alphabet) < 2:
            self._fail("alphabet needs at least two symbols", "encoder.alphabet")
        if len(set(self.alphabet)) != len(self.alphabet):
            self._fail("alphabet symbols must be distinct", "encoder.alphabet")
        if not isinstance(self.delimiter, str):
            self._fail("delimiter must be a string", "formatter.delimiter")

    def _fail(self, message, key):
        error = ConfigError(message, key=key)
        self._log.error("invalid toolkit config", error=error, key=key)
        raise error

    @property
    def base(self):
        return len(self.alphabet)

    def short_id(self, value):
        return encode_short_id(value, self.alphabet)

    def time_ago(self, seconds):
        return format_relative_time(seconds, self.delimiter)

    def time_since(self, epoch_s, now=None):
        """Phrase for the time between `epoch_s` and `now` (default: the clock).

        A future `epoch_s` is a PreconditionViolation, same as negative seconds.
        """
        return self.time_ago(elapsed_seconds(epoch_s, now))


def create_toolkit(path=None):
    """Load config, set up logging from it, and build a Toolkit."""
    try:
        config = load_config(path)
        logger = StructuredLogger.configure(min_level=config.logging.level)
    except ConfigError as exc:
        get_logger().error("invalid toolkit config", error=exc, key=exc.key)
        raise
    toolkit = Toolkit(config, logger=logger)
    logger.info("toolkit ready", base=toolkit.base, delimiter=toolkit.delimiter)
    return toolkit
