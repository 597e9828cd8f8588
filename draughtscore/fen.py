"""Reading and writing positions in FEN and in the compact hub notation."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .bitboard import BM_SQUARES, SQUARES, WM_SQUARES, bit, count, has, is_incl, iter_squares
from .board import (
    DENSE_SIZE,
    BadInput,
    Piece,
    PieceSide,
    Side,
    Variant,
    piece_side_is_piece,
    piece_side_is_side,
    side_opp,
    square_from_std,
    string_is_square,
)

_HUB_SIDES = "WB"
_HUB_PIECES = "wbWBe"
_LEXEME_PATTERN = re.compile(r"\d+|\S")


@dataclass(frozen=True)
class Setup:
    """Piece placement and side to move."""

    turn: Side
    wm: int = 0
    bm: int = 0
    wk: int = 0
    bk: int = 0

    def piece_side(self, sq: int) -> PieceSide:
        if has(self.wm, sq):
            return PieceSide.WHITE_MAN
        if has(self.bm, sq):
            return PieceSide.BLACK_MAN
        if has(self.wk, sq):
            return PieceSide.WHITE_KING
        if has(self.bk, sq):
            return PieceSide.BLACK_KING
        return PieceSide.EMPTY


class _Lexer:
    def __init__(self, s: str) -> None:
        self._lexemes = _LEXEME_PATTERN.findall(s)
        self._index = 0

    def eos(self) -> bool:
        return self._index >= len(self._lexemes)

    def get(self) -> str:
        if self.eos():
            return ""
        lexeme = self._lexemes[self._index]
        self._index += 1
        return lexeme

    def unget(self) -> None:
        self._index -= 1


def _parse_side(lexer: _Lexer) -> Side:
    lexeme = lexer.get()
    if lexeme == "W":
        return Side.WHITE
    if lexeme == "B":
        return Side.BLACK
    raise BadInput(f"expected a side, got {lexeme!r}")


def _parse_pieces(lexer: _Lexer, pieces: dict[Piece, int]) -> None:
    while True:
        piece = Piece.MAN
        lexeme = lexer.get()
        if lexeme == ",":
            lexeme = lexer.get()
        if lexeme == "":
            return
        if lexeme == ":":
            lexer.unget()
            return
        if lexeme == "K":
            piece = Piece.KING
            lexeme = lexer.get()

        if not string_is_square(lexeme):
            raise BadInput(f"not a square: {lexeme!r}")
        frm = int(lexeme)

        lexeme = lexer.get()
        if lexeme != "-":
            if lexeme:
                lexer.unget()
            pieces[piece] |= bit(square_from_std(frm))
            continue

        lexeme = lexer.get()
        if not string_is_square(lexeme):
            raise BadInput(f"not a square: {lexeme!r}")
        to = int(lexeme)
        if to < frm:
            raise BadInput(f"empty square range {frm}-{to}")
        for std in range(frm, to + 1):
            pieces[piece] |= bit(square_from_std(std))


def _pos_from_pieces(turn: Side, wm: int, bm: int, wk: int, bk: int, variant: Variant) -> Setup:
    if count(wm | bm | wk | bk) != count(wm) + count(bm) + count(wk) + count(bk):
        raise BadInput("pieces overlap")
    if not is_incl(wm, WM_SQUARES):
        raise BadInput("white man on its promotion rank")
    if not is_incl(bm, BM_SQUARES):
        raise BadInput("black man on its promotion rank")
    sides = {Side.WHITE: wm | wk, Side.BLACK: bm | bk}
    if sides[side_opp(turn)] == 0:
        raise BadInput("side not to move has no pieces")
    if variant == Variant.BT and sides[turn] & (wk | bk):
        raise BadInput("side to move has a king")
    return Setup(turn, wm, bm, wk, bk)


def pos_from_fen(s: str, variant: Variant = Variant.NORMAL) -> Setup:
    """Parse a FEN string such as ``W:W31-50:B1-20``."""
    lexer = _Lexer(s)
    turn = _parse_side(lexer)
    placed = {side: {Piece.MAN: 0, Piece.KING: 0} for side in Side}

    while not lexer.eos():
        if lexer.get() != ":":
            raise BadInput("expected ':'")
        side = _parse_side(lexer)
        _parse_pieces(lexer, placed[side])

    return _pos_from_pieces(
        turn,
        placed[Side.WHITE][Piece.MAN],
        placed[Side.BLACK][Piece.MAN],
        placed[Side.WHITE][Piece.KING],
        placed[Side.BLACK][Piece.KING],
        variant,
    )


def _find(c: str, alphabet: str) -> int:
    index = alphabet.find(c)
    if index < 0:
        raise BadInput(f"unexpected character {c!r}")
    return index


def pos_from_hub(s: str, variant: Variant = Variant.NORMAL) -> Setup:
    """Parse the 51-character hub notation: side to move, then one char per square."""
    if len(s) != DENSE_SIZE + 1:
        raise BadInput(f"hub position must have {DENSE_SIZE + 1} characters")
    turn = Side(_find(s[0], _HUB_SIDES))
    boards = [0] * len(_HUB_PIECES)
    for sq, c in zip(iter_squares(SQUARES), s[1:]):
        boards[_find(c, _HUB_PIECES)] |= bit(sq)
    return _pos_from_pieces(
        turn,
        boards[PieceSide.WHITE_MAN],
        boards[PieceSide.BLACK_MAN],
        boards[PieceSide.WHITE_KING],
        boards[PieceSide.BLACK_KING],
        variant,
    )


def _run_string(ps: PieceSide, frm: int, to: int) -> str:
    prefix = "K" if piece_side_is_piece(ps, Piece.KING) else ""
    if to == frm:
        return f"{prefix}{frm}"
    if to == frm + 1:
        return f"{prefix}{frm},{prefix}{to}"
    return f"{prefix}{frm}-{to}"


def _pos_pieces(pos: Setup, side: Side) -> str:
    runs: list[str] = []
    current: PieceSide | None = None
    frm = to = 0

    for std in range(1, DENSE_SIZE + 1):
        ps = pos.piece_side(square_from_std(std))
        if ps == current:
            to += 1
            continue
        if current is not None:
            runs.append(_run_string(current, frm, to))
        if piece_side_is_side(ps, side):
            current, frm, to = ps, std, std
        else:
            current = None

    if current is not None:
        runs.append(_run_string(current, frm, to))
    return ",".join(runs)


def pos_fen(pos: Setup) -> str:
    turn = "W" if pos.turn == Side.WHITE else "B"
    return f"{turn}:W{_pos_pieces(pos, Side.WHITE)}:B{_pos_pieces(pos, Side.BLACK)}"


def pos_hub(pos: Setup) -> str:
    return _HUB_SIDES[pos.turn] + "".join(
        _HUB_PIECES[pos.piece_side(sq)] for sq in iter_squares(SQUARES)
    )