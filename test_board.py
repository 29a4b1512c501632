"""
Tests for the board and rules: moves, validation and win/draw detection.
"""

from itertools import combinations

import pytest

from tictactoe.logic import (
    WINNING_LINES,
    Board,
    GameOutcome,
    InvalidMove,
    Player,
    apply_move,
    check_outcome,
    empty_indices,
    new_board,
    validate_move,
    winning_line,
)


def _has_line(cells, mark):
    return any(all(cells[i] == mark for i in line) for line in WINNING_LINES)


def test_new_board_is_empty():
    board = new_board()
    assert board.to_cells() == [""] * 9
    assert empty_indices(board) == list(range(9))
    assert check_outcome(board) == GameOutcome.in_progress()


@pytest.mark.parametrize("line", WINNING_LINES)
@pytest.mark.parametrize("player", [Player.X, Player.O])
def test_full_line_is_a_win(line, player):
    cells = ["" for _ in range(9)]
    for index in line:
        cells[index] = player.value
    board = Board.from_cells(cells)

    assert check_outcome(board) == GameOutcome.win(player)
    assert winning_line(board) == line


def test_every_full_board_without_a_line_is_a_draw():
    draws = 0
    for x_cells in combinations(range(9), 5):
        cells = ["X" if i in x_cells else "O" for i in range(9)]
        outcome = check_outcome(Board.from_cells(cells))
        if _has_line(cells, "X") or _has_line(cells, "O"):
            assert outcome.status.value == "win"
        else:
            draws += 1
            assert outcome == GameOutcome.draw()
    # 16 of the 126 full boards are draws
    assert draws == 16


def test_line_is_checked_before_fullness():
    board = Board.from_cells(["X", "O", "X", "O", "X", "O", "X", "O", "X"])

    assert empty_indices(board) == []
    assert check_outcome(board) == GameOutcome.win(Player.X)
    # Diagonal 0-4-8 comes before 2-4-6 in the table
    assert winning_line(board) == (0, 4, 8)


def test_partial_board_is_in_progress():
    board = Board.from_cells(["X", "O", "", "", "X", "", "", "", "O"])
    outcome = check_outcome(board)

    assert not outcome.is_terminal
    assert outcome.winner is None
    assert empty_indices(board) == [2, 3, 5, 6, 7]


def test_apply_move_returns_new_board():
    board = new_board()
    after = apply_move(board, 4, Player.X)

    assert after[4] == Player.X
    assert board[4] is None
    assert after.count(Player.X) == 1


@pytest.mark.parametrize("index", [0, 4, 8])
def test_apply_move_on_occupied_cell_fails_without_change(index):
    board = apply_move(new_board(), index, Player.O)
    before = board.to_cells()

    for player in Player:
        with pytest.raises(InvalidMove) as excinfo:
            apply_move(board, index, player)
        assert excinfo.value.index == index

    assert board.to_cells() == before


@pytest.mark.parametrize("index", [-1, 9, 100, "3", 1.5, None, True])
def test_apply_move_rejects_bad_index(index):
    with pytest.raises(InvalidMove):
        apply_move(new_board(), index, Player.X)


def test_validate_move_reports_reason():
    board = Board.from_cells(["X", "", "", "", "", "", "", "", ""])

    assert validate_move(board, 1).is_valid
    result = validate_move(board, 0)
    assert not result.is_valid
    assert "occupied by X" in result.error_message
    assert "Must be 0-8" in validate_move(board, 12).error_message


def test_invalid_move_is_a_value_error():
    assert issubclass(InvalidMove, ValueError)


def test_board_cells_are_read_only():
    board = new_board()
    with pytest.raises(ValueError):
        board.cells[0] = 1


def test_board_from_cells_validation():
    with pytest.raises(ValueError):
        Board.from_cells(["X"] * 8)
    with pytest.raises(ValueError):
        Board.from_cells(["Z"] + [""] * 8)

    board = Board.from_cells(["x", " ", None, Player.O, "", "", "", "", ""])
    assert board.to_cells() == ["X", "", "", "O", "", "", "", "", ""]


def test_board_equality_and_render():
    board = Board.from_cells(["X", "", "", "", "O", "", "", "", ""])

    assert board == apply_move(apply_move(new_board(), 0, Player.X), 4, Player.O)
    assert hash(board) == hash(Board.from_cells(board.to_cells()))
    assert board.render().splitlines()[0] == " X | 2 | 3"
    assert " O " in board.render()


def test_player_opposite():
    assert Player.X.opposite() == Player.O
    assert Player.O.opposite() == Player.X
