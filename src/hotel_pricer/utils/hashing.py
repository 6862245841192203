"""Deterministic string hashing for the simulated lookups."""
from __future__ import annotations

import math

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000
INT32_MIN = -(1 << 31)


def stable_hash(value: str) -> int:
    """Return the signed 32-bit ``31 * h + ord(ch)`` hash of ``value``.

    Unlike :func:`hash`, the result does not depend on ``PYTHONHASHSEED`` and
    matches the string hash used by the upstream pricing service, so mocked
    prices and availability line up across implementations.
    """
    result = 0
    for char in value:
        result = (31 * result + ord(char)) & _INT32_MASK
    if result & _INT32_SIGN:
        result -= 1 << 32
    return result


def int32_abs(value: int) -> int:
    """Absolute value with 32-bit overflow: ``INT32_MIN`` stays negative."""
    if value == INT32_MIN:
        return value
    return abs(value)


def int32_mod(value: int, divisor: int) -> int:
    """Remainder truncated toward zero, so it carries the sign of ``value``."""
    return int(math.fmod(value, divisor))
