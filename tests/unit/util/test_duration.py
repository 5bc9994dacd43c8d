"""Unit tests for duration parsing."""

from datetime import timedelta

import pytest

from inkwell.util.duration import parse_duration
from inkwell.util.error import ConfigurationError


class TestParseDuration:
    """Tests for parse_duration."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("1h", timedelta(hours=1)),
            ("30m", timedelta(minutes=30)),
            ("7d", timedelta(days=7)),
            ("45s", timedelta(seconds=45)),
            ("2w", timedelta(weeks=2)),
            ("3600", timedelta(seconds=3600)),
            (" 1h ", timedelta(hours=1)),
        ],
    )
    def test_accepts_supported_formats(self, value, expected):
        assert parse_duration(value) == expected

    @pytest.mark.parametrize("value", ["", "h", "1y", "-1h", "1.5h", "one hour"])
    def test_rejects_invalid_values(self, value):
        with pytest.raises(ConfigurationError):
            parse_duration(value)

    def test_rejects_zero(self):
        with pytest.raises(ConfigurationError):
            parse_duration("0s")

    def test_configuration_error_is_value_error(self):
        """Pydantic validators surface it as a normal validation error."""
        with pytest.raises(ValueError):
            parse_duration("soon")
