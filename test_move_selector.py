"""
Tests for the computer player at each difficulty.
"""

import random

import pytest

from tictactoe.logic import (
    BlockingStrategy,
    Board,
    Difficulty,
    EmptyBoardQuery,
    GameOutcome,
    MinimaxStrategy,
    Player,
    RandomStrategy,
    apply_move,
    check_outcome,
    new_board,
    select_move,
    strategy_for,
)


FULL_DRAW = ["X", "O", "X", "X", "O", "O", "O", "X", "X"]


def _random_position(rng, moves):
    board = new_board()
    player = Player.X
    for _ in range(moves):
        board = apply_move(board, rng.choice(board.empty_indices()), player)
        player = player.opposite()
    return board, player


# ---------------------------------------------------------------- easy

def test_easy_picks_with_injected_rng():
    board = Board.from_cells(["X", "", "O", "", "", "", "", "", "X"])

    for seed in range(10):
        expected = random.Random(seed).choice(board.empty_indices())
        assert select_move(board, Player.O, "easy", random.Random(seed)) == expected


def test_easy_reaches_every_empty_cell():
    board = Board.from_cells(["X", "", "O", "", "X", "", "", "", ""])
    strategy = RandomStrategy(random.Random(7))

    seen = {strategy.select_move(board, Player.O) for _ in range(200)}
    assert seen == set(board.empty_indices())


# ---------------------------------------------------------------- medium

def test_medium_blocks_row():
    board = Board.from_cells(["X", "X", "", "", "O", "", "", "", ""])
    assert select_move(board, Player.O, Difficulty.MEDIUM, random.Random(0)) == 2


@pytest.mark.parametrize("cells, expected", [
    (["X", "", "", "X", "O", "", "", "", ""], 6),     # column
    (["", "", "X", "", "X", "", "", "", "O"], 6),     # anti-diagonal
    (["", "", "", "O", "", "", "X", "", "X"], 7),     # middle of a row
])
def test_medium_blocks_any_line(cells, expected):
    strategy = BlockingStrategy(random.Random(0))
    assert strategy.select_move(Board.from_cells(cells), Player.O) == expected


def test_medium_first_line_in_table_order_wins_tie():
    # Threats on row 0 (cell 2) and column 0 (cell 6)
    board = Board.from_cells(["X", "X", "", "X", "O", "", "", "", "O"])
    assert BlockingStrategy(random.Random(0)).find_block(board, Player.O) == 2


def test_medium_blocks_for_either_side():
    board = Board.from_cells(["O", "", "", "", "O", "", "X", "", ""])
    assert BlockingStrategy(random.Random(0)).select_move(board, Player.X) == 8


def test_medium_does_not_complete_its_own_line():
    # O could win at 2 but nothing needs blocking
    board = Board.from_cells(["O", "O", "", "X", "", "", "", "", "X"])
    strategy = BlockingStrategy()

    assert strategy.find_block(board, Player.O) is None
    for seed in range(10):
        strategy.rng = random.Random(seed)
        expected = random.Random(seed).choice(board.empty_indices())
        assert strategy.select_move(board, Player.O) == expected


# ---------------------------------------------------------------- hard

def test_hard_blocks_diagonal():
    # X: 0, 4  O: 2. Anything but 8 lets X complete 0-4-8
    board = Board.from_cells(["X", "", "O", "", "X", "", "", "", ""])
    hard = MinimaxStrategy()

    assert hard.score_move(board, 8, Player.O) == 0
    for index in (1, 3, 5, 6, 7):
        assert hard.score_move(board, index, Player.O) == -1
    assert select_move(board, Player.O, Difficulty.HARD) == 8


def test_hard_lost_position_takes_lowest_index():
    # X: 0, 4 with O to move. Blocking at 8 still loses to X at 2 (fork on 1 and 6)
    board = Board.from_cells(["X", "", "", "", "X", "", "", "", ""])
    hard = MinimaxStrategy(use_alpha_beta=False)

    for index in board.empty_indices():
        assert hard.score_move(board, index, Player.O) == -1
    assert select_move(board, Player.O, Difficulty.HARD) == 1


def test_hard_prefers_win_over_block():
    board = Board.from_cells(["O", "O", "", "X", "X", "", "", "", ""])
    assert select_move(board, Player.O, "hard") == 2


def test_hard_on_empty_board_takes_lowest_index():
    # Every opening is a draw with best play
    assert select_move(new_board(), Player.X, "hard") == 0


def test_hard_vs_hard_is_a_draw():
    board = new_board()
    player = Player.X
    hard = MinimaxStrategy()

    while not check_outcome(board).is_terminal:
        board = apply_move(board, hard.select_move(board, player), player)
        player = player.opposite()

    assert check_outcome(board) == GameOutcome.draw()


def _play_out(board, to_move, computer, hard, outcomes):
    outcome = check_outcome(board)
    if outcome.is_terminal:
        outcomes.append(outcome)
        return

    if to_move == computer:
        index = hard.select_move(board, computer)
        _play_out(apply_move(board, index, computer), to_move.opposite(), computer, hard, outcomes)
    else:
        for index in board.empty_indices():
            _play_out(apply_move(board, index, to_move), to_move.opposite(), computer, hard, outcomes)


@pytest.mark.parametrize("first", [Player.X, Player.O])
def test_hard_never_loses(first):
    computer = Player.O
    outcomes = []
    _play_out(new_board(), first, computer, MinimaxStrategy(), outcomes)

    assert outcomes
    assert all(o in (GameOutcome.win(computer), GameOutcome.draw()) for o in outcomes)


def test_hard_does_not_modify_board():
    board = Board.from_cells(["X", "", "", "", "", "", "", "", ""])
    before = board.to_cells()

    select_move(board, Player.O, "hard")

    assert board.to_cells() == before


def test_hard_choice_is_first_best_index():
    rng = random.Random(3)
    hard = MinimaxStrategy()

    for _ in range(40):
        board, player = _random_position(rng, rng.randint(3, 5))
        if check_outcome(board).is_terminal:
            continue
        scores = [hard.score_move(board, i, player) for i in board.empty_indices()]
        expected = board.empty_indices()[scores.index(max(scores))]
        assert hard.select_move(board, player) == expected


def test_alpha_beta_does_not_change_the_move():
    rng = random.Random(11)
    pruned = MinimaxStrategy(use_alpha_beta=True)
    full = MinimaxStrategy(use_alpha_beta=False)

    for _ in range(40):
        board, player = _random_position(rng, 4)
        if check_outcome(board).is_terminal:
            continue
        assert pruned.select_move(board, player) == full.select_move(board, player)
        assert pruned.positions_evaluated <= full.positions_evaluated


# ---------------------------------------------------------------- shared

@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_full_board_raises(difficulty):
    with pytest.raises(EmptyBoardQuery):
        select_move(Board.from_cells(FULL_DRAW), Player.O, difficulty, random.Random(0))


@pytest.mark.parametrize("difficulty, strategy_type", [
    ("easy", RandomStrategy),
    ("medium", BlockingStrategy),
    ("hard", MinimaxStrategy),
])
def test_strategy_for(difficulty, strategy_type):
    strategy = strategy_for(difficulty)
    assert type(strategy) is strategy_type
    assert strategy.difficulty == Difficulty(difficulty)


def test_unknown_difficulty():
    with pytest.raises(ValueError):
        strategy_for("impossible")


def test_last_cell_is_taken():
    cells = list(FULL_DRAW)
    cells[8] = ""
    board = Board.from_cells(cells)
    for difficulty in Difficulty:
        assert select_move(board, Player.X, difficulty, random.Random(0)) == 8
