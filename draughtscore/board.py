"""Board geometry for 10x10 international draughts and related variants.

Squares are stored in a sparse 63-slot layout: thirteen slots for every pair of
ranks, so diagonal neighbours are a fixed offset apart. Dense indices (0..49)
and standard notation (1..50) convert to and from it.
"""

from __future__ import annotations

import enum

FILE_SIZE = 10
RANK_SIZE = 10
DENSE_SIZE = FILE_SIZE * RANK_SIZE // 2
SQUARE_SIZE = 63
DIR_SIZE = 8
SIDE_SIZE = 2
PIECE_SIZE = 2
PIECE_SIDE_SIZE = 4
STAGE_SIZE = 300

# Square increments along the board directions.
I1 = 6
J1 = 7
I2 = I1 * 2
J2 = J1 * 2
K1 = 1
L1 = I1 + J1
K2 = K1 * 2
L2 = L1 * 2

ENGINE_NAME = "Scan"
ENGINE_VERSION = "3.1"


class BadInput(ValueError):
    """Raised when text describing a square or position is malformed."""


class Side(enum.IntEnum):
    WHITE = 0
    BLACK = 1


class Piece(enum.IntEnum):
    MAN = 0
    KING = 1


class PieceSide(enum.IntEnum):
    WHITE_MAN = 0
    BLACK_MAN = 1
    WHITE_KING = 2
    BLACK_KING = 3
    EMPTY = 4


class Variant(enum.Enum):
    NORMAL = "normal"
    KILLER = "killer"
    BT = "bt"
    FRISIAN = "frisian"
    LOSING = "losing"


_SQUARE_SPARSE = (
    0, 1, 2, 3, 4,
    6, 7, 8, 9, 10,
    13, 14, 15, 16, 17,
    19, 20, 21, 22, 23,
    26, 27, 28, 29, 30,
    32, 33, 34, 35, 36,
    39, 40, 41, 42, 43,
    45, 46, 47, 48, 49,
    52, 53, 54, 55, 56,
    58, 59, 60, 61, 62,
)

_SQUARE_DENSE = [-1] * SQUARE_SIZE
_SQUARE_FILE = [-1] * SQUARE_SIZE
_SQUARE_RANK = [-1] * SQUARE_SIZE

for _dense, _sq in enumerate(_SQUARE_SPARSE):
    _rk, _col = divmod(_dense, FILE_SIZE // 2)
    _SQUARE_DENSE[_sq] = _dense
    _SQUARE_RANK[_sq] = _rk
    _SQUARE_FILE[_sq] = 2 * _col + (1 if _rk % 2 == 0 else 0)

_DIR_INC = (-J1, -I1, +I1, +J1, -L1, -K1, +K1, +L1)

_SIDE_NAMES = {Side.WHITE: "white", Side.BLACK: "black"}


def square_is_dark(fl: int, rk: int) -> bool:
    """True for the playable (dark) squares."""
    return (fl + rk) % 2 != 0


def square_is_light(fl: int, rk: int) -> bool:
    return not square_is_dark(fl, rk)


def square_is_valid(fl: int, rk: int) -> bool:
    """True if file and rank are on the board and name a dark square."""
    return 0 <= fl < FILE_SIZE and 0 <= rk < RANK_SIZE and square_is_dark(fl, rk)


def square_is_ok(sq: int) -> bool:
    """True if a sparse index names a real square."""
    return 0 <= sq < SQUARE_SIZE and _SQUARE_DENSE[sq] >= 0


def square_make(fl: int, rk: int) -> int:
    if not square_is_valid(fl, rk):
        raise ValueError(f"no square at file {fl}, rank {rk}")
    return square_sparse((rk * FILE_SIZE + fl) // 2)


def square_sparse(dense: int) -> int:
    if not 0 <= dense < DENSE_SIZE:
        raise ValueError(f"dense index out of range: {dense}")
    return _SQUARE_SPARSE[dense]


def square_dense(sq: int) -> int:
    return _SQUARE_DENSE[sq]


def square_from_std(std: int) -> int:
    """Convert standard notation (1..50) to a sparse square."""
    if std < 1 or std > DENSE_SIZE:
        raise BadInput(f"square number out of range: {std}")
    return square_sparse(std - 1)


def square_to_std(sq: int) -> int:
    if not square_is_ok(sq):
        raise ValueError(f"not a square: {sq}")
    return square_dense(sq) + 1


def square_file(sq: int) -> int:
    return _SQUARE_FILE[sq]


def square_rank(sq: int, side: Side | None = None) -> int:
    """Rank of a square; relative to ``side`` when one is given."""
    rk = _SQUARE_RANK[sq]
    if side is None or side == Side.BLACK:
        return rk
    return (RANK_SIZE - 1) - rk


def square_opp(sq: int) -> int:
    """The square seen from the other side of the board."""
    opp = (SQUARE_SIZE - 1) - sq
    if not square_is_ok(opp):
        raise ValueError(f"not a square: {sq}")
    return opp


def square_is_promotion(sq: int, side: Side) -> bool:
    return square_rank(sq, side) == RANK_SIZE - 1


def square_to_string(sq: int) -> str:
    return str(square_to_std(sq))


def _is_nat(s: str) -> bool:
    return s != "" and all("0" <= c <= "9" for c in s)


def string_is_square(s: str) -> bool:
    return _is_nat(s) and 1 <= int(s) <= DENSE_SIZE


def square_from_string(s: str) -> int:
    if not _is_nat(s):
        raise BadInput(f"not a square: {s!r}")
    return square_from_std(int(s))


def dir_inc(direction: int) -> int:
    """Square increment for one of the eight directions."""
    if not 0 <= direction < DIR_SIZE:
        raise ValueError(f"direction out of range: {direction}")
    return _DIR_INC[direction]


def side_opp(side: Side) -> Side:
    return Side(side ^ 1)


def side_to_string(side: Side) -> str:
    """Lower-case name of a side."""
    return _SIDE_NAMES[Side(side)]


def piece_side_is_piece(ps: PieceSide, piece: Piece) -> bool:
    return ps != PieceSide.EMPTY and (ps >> 1) == piece


def piece_side_is_side(ps: PieceSide, side: Side) -> bool:
    return ps != PieceSide.EMPTY and (ps & 1) == side