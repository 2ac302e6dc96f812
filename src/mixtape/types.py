"""Shared type definitions and default providers for injected callables."""

import random
import string
import time
from collections.abc import Callable
from datetime import UTC, datetime

# Callable type aliases for dependency injection
type Clock = Callable[[], datetime]
type IdGenerator = Callable[[], str]

_BASE36_DIGITS = string.digits + string.ascii_lowercase


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(UTC)


def generate_entry_id() -> str:
    """Generate an opaque entry ID.

    Combines a random component with the current time in milliseconds, both
    base36-encoded. IDs are uniqueness keys only, so the random part does
    not need to be cryptographically strong.

    Returns:
        ID string such as ``"k3v9x0q2mdlp7m1z8a"``.
    """
    random_part = _to_base36(random.getrandbits(52)).rjust(11, "0")
    time_part = _to_base36(time.time_ns() // 1_000_000)
    return random_part + time_part
