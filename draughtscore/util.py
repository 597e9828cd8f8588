"""Small numeric, bit and stream helpers."""

from __future__ import annotations

import math
import random
from typing import BinaryIO


def round_half_up(x: float) -> int:
    """Round to the nearest integer, halves going up."""
    return int(math.floor(x + 0.5))


def div_round(a: int, b: int) -> int:
    """Integer division of ``a`` by positive ``b``, rounded to nearest (halves up)."""
    if b <= 0:
        raise ValueError("divisor must be positive")
    return (a + b // 2) // b


def rand_bool(p: float, rng: random.Random | None = None) -> bool:
    """Return True with probability ``p``."""
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"probability out of range: {p}")
    source = rng if rng is not None else random
    return source.random() < p


def bit_first(b: int) -> int:
    """Index of the lowest set bit."""
    if b == 0:
        raise ValueError("no bit set")
    return (b & -b).bit_length() - 1


def bit_count(b: int) -> int:
    return bin(b).count("1")


def read_bytes(stream: BinaryIO, size: int) -> int:
    """Read ``size`` bytes as a big-endian unsigned integer."""
    if not 0 <= size <= 8:
        raise ValueError(f"size out of range: {size}")
    data = stream.read(size)
    if len(data) != size:
        raise EOFError("unable to read from file")
    return int.from_bytes(data, "big")


def ftos(x: float, decimals: int) -> str:
    """Format with a fixed number of decimals."""
    return f"{x:.{decimals}f}"


def trim(s: str) -> str:
    """Strip trailing whitespace."""
    return s.rstrip(" \t\n\v\f\r")