"""Unit tests for utility modules."""

import pytest

from toolkit.utils.text import group_digits, pluralize, stringify_keys
from toolkit.utils.timestamp import elapsed_seconds, format_timestamp, now_micros


class TestPluralize:
    """Tests for pluralize."""

    def test_singular_only_for_one(self):
        """Count of exactly 1 keeps the noun singular."""
        assert pluralize(1, "day") == "day"

    @pytest.mark.parametrize("count", [0, 2, 11, 1_000_000])
    def test_plural_otherwise(self, count):
        """Zero and counts above one are plural."""
        assert pluralize(count, "day") == "days"


class TestGroupDigits:
    """Tests for group_digits."""

    def test_default_comma(self):
        """Thousands separated by commas."""
        assert group_digits(1447489) == "1,447,489"

    def test_custom_delimiter(self):
        """Any string can separate the groups."""
        assert group_digits(1447489, " ") == "1 447 489"

    def test_small_number_untouched(self):
        """Below one thousand there is nothing to group."""
        assert group_digits(999, "-") == "999"


class TestStringifyKeys:
    """Tests for stringify_keys."""

    def test_mixed_keys(self):
        """Non-string keys become strings, values untouched."""
        assert stringify_keys({1: "a", "b": 2}) == {"1": "a", "b": 2}

    def test_nested_values_not_converted(self):
        """Only the top-level keys change."""
        result = stringify_keys({2: {3: "x"}})
        assert result == {"2": {3: "x"}}

    def test_empty(self):
        """Empty mapping stays empty."""
        assert stringify_keys({}) == {}


class TestTimestamp:
    """Tests for timestamp utilities."""

    def test_format_timestamp_fixed_value(self):
        """Known epoch formats to ISO 8601 UTC."""
        assert format_timestamp(1_500_000_000_000_000) == "2017-07-14T02:40:00.000000Z"

    def test_format_timestamp_has_microseconds(self):
        """Timestamp includes six fractional digits."""
        ts = format_timestamp()
        decimal_part = ts.split(".")[1].rstrip("Z")
        assert len(decimal_part) == 6

    def test_now_micros_reasonable_value(self):
        """now_micros returns an int after 2020."""
        micros = now_micros()
        assert isinstance(micros, int)
        assert micros > 1577836800000000

    def test_elapsed_seconds_floors(self):
        """Partial seconds are dropped."""
        assert elapsed_seconds(100.0, now=190.9) == 90

    def test_elapsed_seconds_future(self):
        """A future start gives a negative delta."""
        assert elapsed_seconds(200, now=100) == -100

    def test_elapsed_seconds_uses_clock(self):
        """Without now, the current time is used."""
        assert elapsed_seconds(0) > 1_577_836_800
