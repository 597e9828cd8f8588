"""Endgame table identifiers and the mapping from positions to table indices."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from .bitboard import BM_SQUARES, SQUARES, WM_SQUARES, count, has, is_incl, iter_squares
from .board import DENSE_SIZE, FILE_SIZE, Side, Variant

MAN_SQUARES = DENSE_SIZE - FILE_SIZE // 2
KING_SQUARES = DENSE_SIZE
N_MAX = DENSE_SIZE
P_MAX = 7
ID_SIZE = 1 << 12

Wolves = Mapping[Side, "tuple[int, int]"]


def tuple_size(p: int, n: int) -> int:
    """Number of ways to place ``p`` identical pieces on ``n`` squares."""
    if not 0 <= p <= P_MAX:
        raise ValueError(f"piece count out of range: {p}")
    if not 0 <= n <= N_MAX:
        raise ValueError(f"square count out of range: {n}")
    return math.comb(n, p)


def id_make(wm: int, bm: int, wk: int, bk: int) -> int:
    """Table identifier for the given piece counts (side to move first)."""
    if min(wm, bm, wk, bk) < 0 or wm + bm + wk + bk >= 8:
        raise ValueError("piece counts out of range")
    return (wm << 9) | (bm << 6) | (wk << 3) | bk


def id_wm(bb_id: int) -> int:
    return (bb_id >> 9) & 0o7


def id_bm(bb_id: int) -> int:
    return (bb_id >> 6) & 0o7


def id_wk(bb_id: int) -> int:
    return (bb_id >> 3) & 0o7


def id_bk(bb_id: int) -> int:
    return bb_id & 0o7


def id_is_illegal(bb_id: int, variant: Variant = Variant.NORMAL) -> bool:
    """True if the side not to move has no pieces, or the setup is impossible."""
    return (bb_id & 0o707) == 0 or (variant == Variant.BT and (bb_id & 0o070) != 0)


def id_is_end(bb_id: int, variant: Variant = Variant.NORMAL) -> bool:
    """True if the game is already decided for this material."""
    return (bb_id & 0o7070) == 0 or (variant == Variant.BT and (bb_id & 0o007) != 0)


def id_size(bb_id: int) -> int:
    return id_wm(bb_id) + id_bm(bb_id) + id_wk(bb_id) + id_bk(bb_id)


def id_name(bb_id: int) -> str:
    return f"{id_wm(bb_id)}{id_bm(bb_id)}{id_wk(bb_id)}{id_bk(bb_id)}"


def pos_id(pos: Any) -> int:
    """Identifier for a position, counted from the side to move."""
    nwm, nbm, nwk, nbk = count(pos.wm), count(pos.bm), count(pos.wk), count(pos.bk)
    if pos.turn == Side.WHITE:
        return id_make(nwm, nbm, nwk, nbk)
    return id_make(nbm, nwm, nbk, nwk)


def _bit_index(b: int, sq: int) -> int:
    if not has(b, sq):
        raise ValueError(f"square {sq} not in set")
    return count(b & ((1 << sq) - 1))


def _bit_index_rev(b: int, sq: int) -> int:
    if not has(b, sq):
        raise ValueError(f"square {sq} not in set")
    return count(b >> (sq + 1))


def _tuple_index(pieces: int, squares: int, p: int, n: int, reverse: bool) -> int:
    if count(pieces) != p or count(squares) != n or not is_incl(pieces, squares):
        raise ValueError("pieces do not match the table")
    placed = list(iter_squares(pieces))
    if reverse:
        placed.reverse()
        position = _bit_index_rev
    else:
        position = _bit_index
    return sum(tuple_size(i, position(squares, sq)) for i, sq in enumerate(placed, start=1))


def _wolf_size(men: int, kings: int, variant: Variant) -> int:
    if variant == Variant.FRISIAN and men != 0:
        return 1 + kings * 3
    return 1


def _wolf_index(pos: Any, wolves: Wolves | None, side: Side, reverse: bool, kings: int) -> int:
    moves, wolf = (wolves or {}).get(side, (0, 0))
    if not 0 <= moves <= 3:
        raise ValueError(f"wolf move count out of range: {moves}")
    index = moves
    if moves != 0:
        king = pos.wk if side == Side.WHITE else pos.bk
        index += 3 * (_bit_index_rev(king, wolf) if reverse else _bit_index(king, wolf))
    if index > kings * 3:
        raise ValueError("wolf does not match the table")
    return index


def pos_index(
    bb_id: int,
    pos: Any,
    variant: Variant = Variant.NORMAL,
    wolves: Wolves | None = None,
) -> int:
    """Index of a position within the table ``bb_id``.

    ``wolves`` maps a side to its (king move count, king square) pair; it is
    only used for Frisian draughts.
    """
    if bb_id != pos_id(pos):
        raise ValueError("position does not belong to this table")

    black_to_move = pos.turn != Side.WHITE
    if black_to_move:
        wm, bm, wk, bk = pos.bm, pos.wm, pos.bk, pos.wk
    else:
        wm, bm, wk, bk = pos.wm, pos.bm, pos.wk, pos.bk

    nwm, nbm, nwk, nbk = id_wm(bb_id), id_bm(bb_id), id_wk(bb_id), id_bk(bb_id)
    own_men = BM_SQUARES if black_to_move else WM_SQUARES
    opp_men = WM_SQUARES if black_to_move else BM_SQUARES

    parts = (
        (wm, own_men, nwm, MAN_SQUARES, not black_to_move),
        (bm, opp_men, nbm, MAN_SQUARES, black_to_move),
        (wk, SQUARES ^ wm ^ bm, nwk, KING_SQUARES - nwm - nbm, not black_to_move),
        (bk, SQUARES ^ wm ^ bm ^ wk, nbk, KING_SQUARES - nwm - nbm - nwk, black_to_move),
    )

    index = 0
    for pieces, squares, p, n, reverse in parts:
        index = index * tuple_size(p, n) + _tuple_index(pieces, squares, p, n, reverse)

    if variant == Variant.FRISIAN:
        mover = Side.BLACK if black_to_move else Side.WHITE
        other = Side.WHITE if black_to_move else Side.BLACK
        index = index * _wolf_size(nwm, nwk, variant) + _wolf_index(
            pos, wolves, mover, not black_to_move, nwk
        )
        index = index * _wolf_size(nbm, nbk, variant) + _wolf_index(
            pos, wolves, other, black_to_move, nbk
        )

    return index


def index_size(bb_id: int, variant: Variant = Variant.NORMAL) -> int:
    """Number of entries in the table ``bb_id``."""
    nwm, nbm, nwk, nbk = id_wm(bb_id), id_bm(bb_id), id_wk(bb_id), id_bk(bb_id)
    size = (
        tuple_size(nwm, MAN_SQUARES)
        * tuple_size(nbm, MAN_SQUARES)
        * tuple_size(nwk, KING_SQUARES - nwm - nbm)
        * tuple_size(nbk, KING_SQUARES - nwm - nbm - nwk)
    )
    if variant == Variant.FRISIAN:
        size *= _wolf_size(nwm, nwk, variant) * _wolf_size(nbm, nbk, variant)
    return size