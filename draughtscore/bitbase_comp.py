"""Run-length compressed endgame tables with random access by position index."""

from __future__ import annotations

import itertools
import os
from bisect import bisect_right
from pathlib import Path

from .util import round_half_up

RLE_SIZE = 255 // 3
BLOCK_SIZE = 1 << 8

# Run lengths grow geometrically; the slot past the last one stays empty.
_RLE = [round_half_up(1.2**i) for i in range(RLE_SIZE)] + [0]
_CODE_VALUE = tuple(byte % 3 for byte in range(256))
_CODE_LENGTH = tuple(_RLE[byte // 3] for byte in range(256))


def code_value(byte: int) -> int:
    """The value (0, 1 or 2) that a code byte repeats."""
    return _CODE_VALUE[byte]


def code_length(byte: int) -> int:
    """How many entries a code byte stands for."""
    return _CODE_LENGTH[byte]


class CompressedTable:
    """A table of small values stored as run-length codes, one byte per run."""

    def __init__(self, data: bytes, size: int) -> None:
        self._table = bytes(data)
        self._size = size
        self._starts: list[int] = []

        total = 0
        for block_start in range(0, len(self._table), BLOCK_SIZE):
            self._starts.append(total)
            block = self._table[block_start:block_start + BLOCK_SIZE]
            total += sum(_CODE_LENGTH[byte] for byte in block)

        if total != size:
            raise ValueError(f"unmatched uncompressed size: {size} -> {total}")

    @classmethod
    def from_bytes(cls, data: bytes, size: int) -> CompressedTable:
        """Build a table from compressed bytes that expand to ``size`` entries."""
        return cls(data, size)

    @classmethod
    def load(cls, path: str | os.PathLike[str], size: int) -> CompressedTable:
        """Read a compressed table from a file."""
        data = Path(path).read_bytes()
        try:
            return cls(data, size)
        except ValueError as exc:
            raise ValueError(f"{path}: {exc}") from exc

    def __len__(self) -> int:
        return self._size

    def __getitem__(self, pos: int) -> int:
        if not 0 <= pos < self._size:
            raise IndexError(f"index out of range: {pos}")

        block = bisect_right(self._starts, pos) - 1
        offset = pos - self._starts[block]

        for byte in itertools.islice(self._table, block * BLOCK_SIZE, None):
            length = _CODE_LENGTH[byte]
            if offset < length:
                return _CODE_VALUE[byte]
            offset -= length

        raise IndexError(f"index out of range: {pos}")