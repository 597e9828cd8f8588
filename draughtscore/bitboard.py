"""Bitboards over the sparse square layout and the attack tables built on them."""

from __future__ import annotations

from collections.abc import Iterator

from .board import (
    DIR_SIZE,
    FILE_SIZE,
    RANK_SIZE,
    Side,
    Variant,
    dir_inc,
    square_file,
    square_is_ok,
    square_rank,
)
from .util import bit_count, bit_first

SQUARES = 0x7DF3EF9F7CFBE7DF
WM_SQUARES = 0x7DF3EF9F7CFBE7C0
BM_SQUARES = 0x01F3EF9F7CFBE7DF

RANKS_012 = 0x000000000003E7DF
RANKS_345 = 0x0000001F7CF80000
RANKS_678 = 0x01F3EF8000000000
RANKS_123 = 0x0000000000FBE7C0
RANKS_456 = 0x00000F9F7C000000
RANKS_789 = 0x7DF3E00000000000


def is_ok(b: int) -> bool:
    """True if every set bit is a real square."""
    return (b & ~SQUARES) == 0


def bit(sq: int) -> int:
    return 1 << sq


def has(b: int, sq: int) -> bool:
    return (b >> sq) & 1 != 0


def is_incl(b0: int, b1: int) -> bool:
    return (b0 & ~b1) == 0


def count(b: int) -> int:
    return bit_count(b)


def first(b: int) -> int:
    return bit_first(b)


def iter_squares(b: int) -> Iterator[int]:
    """Yield the set squares in ascending order."""
    while b:
        low = b & -b
        yield low.bit_length() - 1
        b ^= low


def _ray_first(frm: int, inc: int) -> int:
    return bit(frm + inc) if square_is_ok(frm + inc) else 0


def _ray_last(frm: int, inc: int) -> int:
    sq = frm + inc
    if not square_is_ok(sq):
        return 0
    while square_is_ok(sq + inc):
        sq += inc
    return bit(sq)


def _ray_all(frm: int, inc: int) -> int:
    b = 0
    sq = frm + inc
    while square_is_ok(sq):
        b |= bit(sq)
        sq += inc
    return b


class BitTables:
    """Precomputed move and capture tables for one variant."""

    def __init__(self, variant: Variant = Variant.NORMAL) -> None:
        self.variant = variant
        self._file = [0] * FILE_SIZE
        self._rank = [0] * RANK_SIZE
        self._man_moves: dict[int, int] = {}
        self._king_moves: dict[int, int] = {}
        self._man_captures: dict[int, int] = {}
        self._king_captures: dict[int, int] = {}
        self._capture_mask: dict[tuple[int, int], int] = {}
        self._beyond: dict[tuple[int, int], int] = {}
        self._line_inc: dict[tuple[int, int], int] = {}

        frisian = variant == Variant.FRISIAN

        for sq in iter_squares(SQUARES):
            self._file[square_file(sq)] |= bit(sq)
            self._rank[square_rank(sq)] |= bit(sq)

        for frm in iter_squares(SQUARES):
            man_moves = king_moves = man_caps = king_caps = 0
            for direction in range(DIR_SIZE):
                inc = dir_inc(direction)
                first_sq = _ray_first(frm, inc)
                last_sq = _ray_last(frm, inc)
                ray = _ray_all(frm, inc)

                if direction < 4:
                    man_moves |= first_sq
                    king_moves |= ray

                if direction < 4 or frisian:
                    man_caps |= first_sq & ~last_sq
                    king_caps |= ray & ~last_sq

                for to in iter_squares(ray):
                    beyond = _ray_all(to, inc)
                    self._capture_mask[frm, to] = (
                        (ray & ~bit(to) & ~beyond) | _ray_first(to, inc)
                    )
                    self._beyond[frm, to] = beyond
                    self._line_inc[frm, to] = inc

            self._man_moves[frm] = man_moves
            self._king_moves[frm] = king_moves
            self._man_captures[frm] = man_caps
            self._king_captures[frm] = king_caps

    def file(self, fl: int) -> int:
        if not 0 <= fl < FILE_SIZE:
            raise ValueError(f"file out of range: {fl}")
        return self._file[fl]

    def rank(self, rk: int, side: Side | None = None) -> int:
        """Squares on a rank; relative to ``side`` when one is given."""
        if not 0 <= rk < RANK_SIZE:
            raise ValueError(f"rank out of range: {rk}")
        if side is not None and side != Side.BLACK:
            rk = (RANK_SIZE - 1) - rk
        return self._rank[rk]

    def _check_capture_line(self, frm: int, to: int) -> tuple[int, int]:
        if not has(self._king_captures.get(frm, 0), to):
            raise ValueError(f"no capture line from {frm} through {to}")
        return frm, to

    def capture_mask(self, frm: int, to: int) -> int:
        """Squares that must be empty for a king on ``frm`` to capture on ``to``."""
        return self._capture_mask[self._check_capture_line(frm, to)]

    def beyond(self, frm: int, to: int) -> int:
        return self._beyond[self._check_capture_line(frm, to)]

    def line_inc(self, frm: int, to: int) -> int:
        return self._line_inc[self._check_capture_line(frm, to)]

    def man_moves(self, frm: int) -> int:
        return self._man_moves[frm]

    def man_captures(self, frm: int) -> int:
        return self._man_captures[frm]

    def king_captures(self, frm: int, empty: int | None = None) -> int:
        """Capture targets of a king; limited by blockers when ``empty`` is given."""
        tos = self._king_captures[frm]
        if empty is None:
            return tos
        return self.attack(frm, tos, empty)

    def king_moves(self, frm: int, empty: int) -> int:
        return self.attack(frm, self._king_moves[frm], empty)

    def attack(self, frm: int, tos: int, empty: int) -> int:
        """Remove from ``tos`` every square hidden behind an occupied square."""
        for sq in iter_squares(tos & self._king_captures[frm] & ~empty):
            tos &= ~self._beyond[frm, sq]
        return tos