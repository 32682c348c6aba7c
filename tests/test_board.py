import pytest

from quarto_game.board import Board
from quarto_game.pieces import EMPTY_PAWN, Pawn

GRJE = Pawn("G", "R", "J", "E")
PCBT = Pawn("P", "C", "B", "T")
GRBT = Pawn("G", "R", "B", "T")
PCJE = Pawn("P", "C", "J", "E")
GCJT = Pawn("G", "C", "J", "T")
GRBE = Pawn("G", "R", "B", "E")
GCBE = Pawn("G", "C", "B", "E")


def fill_row(board, row, pawns):
    for column, pawn in enumerate(pawns):
        board.place(row, column, pawn)


def fill_column(board, column, pawns):
    for row, pawn in enumerate(pawns):
        board.place(row, column, pawn)


def test_new_board_is_empty():
    board = Board()
    assert board.size == 4
    assert all(pawn == EMPTY_PAWN for line in board.rows() for pawn in line)
    assert not board.is_occupied(2, 3)


def test_invalid_size_rejected():
    with pytest.raises(ValueError):
        Board(0)


def test_place_marks_square_occupied():
    board = Board()
    board.place(1, 2, GRJE)
    assert board.is_occupied(1, 2)
    assert board.rows()[1][2] == GRJE


def test_place_on_occupied_square_raises():
    board = Board()
    board.place(0, 0, GRJE)
    with pytest.raises(ValueError):
        board.place(0, 0, PCBT)
    assert board.rows()[0][0] == GRJE


def test_place_empty_pawn_raises():
    with pytest.raises(ValueError):
        Board().place(0, 0, EMPTY_PAWN)


@pytest.mark.parametrize("row, column", [(-1, 0), (4, 0), (0, 4), (0, -1)])
def test_out_of_range_square_raises(row, column):
    with pytest.raises(IndexError):
        Board().place(row, column, GRJE)


def test_row_and_column_fullness():
    board = Board()
    fill_row(board, 0, [GRJE, PCBT, GRBT])
    assert not board.row_is_full(0)
    board.place(0, 3, PCJE)
    assert board.row_is_full(0)
    assert not board.column_is_full(0)


def test_row_with_common_trait_wins():
    board = Board()
    fill_row(board, 2, [GRJE, GCJT, GRBE, GCBE])
    assert board.row_shares_trait(2)
    assert board.is_win(2, 3)


def test_row_without_common_trait_does_not_win():
    board = Board()
    fill_row(board, 1, [GRJE, PCBT, GRBT, PCJE])
    assert not board.row_shares_trait(1)
    assert not board.is_win(1, 0)


def test_incomplete_row_does_not_win():
    board = Board()
    fill_row(board, 0, [GRJE, GCJT, GRBE])
    assert not board.row_shares_trait(0)
    assert not board.is_win(0, 2)


def test_column_with_common_trait_wins():
    board = Board()
    fill_column(board, 1, [PCBT, GRBT, GRBE, GCBE])
    assert board.column_is_full(1)
    assert board.column_shares_trait(1)
    assert board.is_win(3, 1)


def test_column_without_common_trait_does_not_win():
    board = Board()
    fill_column(board, 3, [GRJE, PCBT, GRBT, PCJE])
    assert not board.column_shares_trait(3)
    assert not board.is_win(0, 3)


def test_render_shows_empty_and_filled_squares():
    board = Board()
    board.place(0, 0, GRJE)
    lines = board.render().splitlines()
    assert "GRJE VIDE VIDE VIDE " in lines
    assert lines.count("VIDE VIDE VIDE VIDE ") == 3
    assert "VIDE indique une case vide" in lines


def test_rows_is_a_snapshot():
    board = Board()
    snapshot = board.rows()
    board.place(3, 3, PCBT)
    assert snapshot[3][3] == EMPTY_PAWN
    assert board.rows()[3][3] == PCBT