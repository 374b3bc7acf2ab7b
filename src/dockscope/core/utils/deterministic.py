#!/usr/bin/env python3
# src/dockscope/core/utils/deterministic.py

"""
Reproducible hashing and pseudo-random draws.

Everything that looks random in the modelling path is derived from these
functions so that equal inputs give equal outputs across processes.
"""

import math
from typing import Iterator

_UINT32_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000


def _to_int32(value: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    value &= _UINT32_MASK
    return value - (1 << 32) if value & _SIGN_BIT else value


def _code_units(text: str) -> Iterator[int]:
    """UTF-16 code units of ``text`` (surrogate pairs for astral characters)."""
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def stable_hash(text: str) -> int:
    """
    Rolling 32-bit string hash.

    Computes ``h = ((h << 5) - h) + c`` over the UTF-16 code units, wrapping to
    a signed 32-bit integer at every step, and returns the absolute value.

    Args:
        text: Input string

    Returns:
        Non-negative integer; 0 for the empty string
    """
    h = 0
    for unit in _code_units(text or ""):
        h = _to_int32((h << 5) - h + unit)
    return abs(h)


def djb2_hash(text: str) -> int:
    """djb2 variant (seed 5381, multiplier 33) wrapped to 32 bits, absolute."""
    h = 5381
    for unit in _code_units(text or ""):
        h = _to_int32((h << 5) + h + unit)
    return abs(h)


def seeded_random(seed: float) -> float:
    """
    Pseudo-random value in [0, 1) determined entirely by ``seed``.

    Args:
        seed: Any finite number

    Returns:
        Fractional part of ``sin(seed) * 10000``
    """
    x = math.sin(seed) * 10000
    value = x - math.floor(x)
    # x slightly below an integer can round up to exactly 1.0
    return value if value < 1.0 else 0.0


def compound_identifier(formula: str) -> str:
    """Offline compound identifier derived from the formula's djb2 hash."""
    return f"PC_{djb2_hash(formula) % 100000000}"
