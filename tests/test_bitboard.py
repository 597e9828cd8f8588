import pytest

from draughtscore.bitboard import (
    BM_SQUARES,
    SQUARES,
    WM_SQUARES,
    BitTables,
    bit,
    count,
    first,
    has,
    is_incl,
    is_ok,
    iter_squares,
)
from draughtscore.board import (
    DENSE_SIZE,
    FILE_SIZE,
    RANK_SIZE,
    Side,
    Variant,
    dir_inc,
    square_sparse,
)


@pytest.fixture(scope="module")
def normal():
    return BitTables(Variant.NORMAL)


@pytest.fixture(scope="module")
def frisian():
    return BitTables(Variant.FRISIAN)


def test_square_set_matches_board():
    assert count(SQUARES) == DENSE_SIZE
    assert list(iter_squares(SQUARES)) == [square_sparse(d) for d in range(DENSE_SIZE)]
    assert first(SQUARES) == square_sparse(0)
    assert is_ok(SQUARES)
    assert not is_ok(bit(5))


def test_man_square_sets():
    assert is_incl(WM_SQUARES, SQUARES)
    assert is_incl(BM_SQUARES, SQUARES)
    assert not is_incl(SQUARES, WM_SQUARES)


def test_bit_and_has():
    for sq in iter_squares(SQUARES):
        assert has(SQUARES, sq)
        assert first(bit(sq)) == sq
    assert not has(SQUARES, 5)


def test_files_and_ranks_partition(normal):
    files = [normal.file(f) for f in range(FILE_SIZE)]
    ranks = [normal.rank(r) for r in range(RANK_SIZE)]
    for group in (files, ranks):
        union = 0
        for b in group:
            assert count(b) == 5
            assert union & b == 0
            union |= b
        assert union == SQUARES
    with pytest.raises(ValueError):
        normal.file(FILE_SIZE)


def test_relative_rank(normal):
    for r in range(RANK_SIZE):
        assert normal.rank(r, Side.BLACK) == normal.rank(r)
        assert normal.rank(r, Side.WHITE) == normal.rank(RANK_SIZE - 1 - r)


def test_man_moves_are_neighbours(normal):
    diag = {dir_inc(d) for d in range(4)}
    for sq in iter_squares(SQUARES):
        moves = normal.man_moves(sq)
        assert 1 <= count(moves) <= 4
        assert {to - sq for to in iter_squares(moves)} <= diag


def test_king_moves_empty_board_superset(normal):
    for sq in iter_squares(SQUARES):
        moves = normal.king_moves(sq, SQUARES)
        assert is_incl(normal.man_moves(sq), moves)
        assert is_incl(normal.king_captures(sq), moves)
        assert not has(moves, sq)


def test_blocker_cuts_ray(normal):
    frm = square_sparse(45)
    for blocker in iter_squares(normal.king_captures(frm)):
        empty = SQUARES & ~bit(blocker)
        moves = normal.king_moves(frm, empty)
        assert has(moves, blocker)
        assert moves & normal.beyond(frm, blocker) == 0
        mask = normal.capture_mask(frm, blocker)
        assert not has(mask, blocker)
        assert count(mask & normal.beyond(frm, blocker)) == 1
        assert normal.line_inc(frm, blocker) in {dir_inc(d) for d in range(4)}


def test_attack_leaves_unblocked(normal):
    frm = square_sparse(22)
    tos = normal.king_captures(frm)
    assert normal.attack(frm, tos, SQUARES) == tos
    assert normal.king_captures(frm, SQUARES) == tos


def test_invalid_capture_line(normal):
    frm = square_sparse(0)
    with pytest.raises(ValueError):
        normal.capture_mask(frm, frm)
    with pytest.raises(ValueError):
        normal.beyond(frm, square_sparse(49))


def test_frisian_adds_orthogonal_captures(normal, frisian):
    grew = False
    for sq in iter_squares(SQUARES):
        assert is_incl(normal.man_captures(sq), frisian.man_captures(sq))
        assert is_incl(normal.king_captures(sq), frisian.king_captures(sq))
        assert normal.man_moves(sq) == frisian.man_moves(sq)
        if frisian.man_captures(sq) != normal.man_captures(sq):
            grew = True
    assert grew