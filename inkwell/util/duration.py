"""Duration strings used by JWT_EXPIRES_IN."""

import re
from datetime import timedelta

from inkwell.util.error import ConfigurationError

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhdw]?)\s*$", re.IGNORECASE)

_UNIT_SECONDS = {
    "": 1,
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 24 * 60 * 60,
    "w": 7 * 24 * 60 * 60,
}


def parse_duration(value: str) -> timedelta:
    """Parse a duration such as ``"1h"``, ``"30m"``, ``"7d"`` or ``"3600"``.

    A bare number is read as seconds.

    Args:
        value: Duration string

    Returns:
        Parsed duration

    Raises:
        ConfigurationError: If the value is not a positive duration
    """
    match = _DURATION_RE.match(value)
    if not match:
        raise ConfigurationError(f"Invalid duration: {value!r}")

    amount, unit = int(match.group(1)), match.group(2).lower()
    if amount <= 0:
        raise ConfigurationError(f"Duration must be positive: {value!r}")

    return timedelta(seconds=amount * _UNIT_SECONDS[unit])
