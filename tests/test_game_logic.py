import random

import pytest

from tictactoe.game_logic import (
    EMPTY_BOARD, Mark, MoveResult, RoundState, WINNING_LINES,
    apply_move, choose_ai_move, empty_cells, find_winning_line,
    index_of, new_round, result_of,
)

X, O = Mark.X, Mark.O


def board_from(s):
    # "XO.X....." -> board tuple
    return tuple(Mark(ch) if ch in "XO" else None for ch in s)


def play_all(*moves):
    state = new_round()
    for idx in moves:
        state = apply_move(state, idx)
    return state


def test_winning_lines_order():
    assert WINNING_LINES == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


@pytest.mark.parametrize("line", WINNING_LINES)
def test_each_line_detected(line):
    cells = [None] * 9
    for i in line:
        cells[i] = O
    assert find_winning_line(tuple(cells)) == line


def test_no_line_on_empty_or_mixed_board():
    assert find_winning_line(EMPTY_BOARD) is None
    assert find_winning_line(board_from("XOXXOOOXX")) is None
    assert find_winning_line(board_from("XX.OO....")) is None


def test_first_line_in_scan_order_wins():
    # top row and left column both X
    assert find_winning_line(board_from("XXXXOOXOO")) == (0, 1, 2)
    # middle column and main diagonal
    assert find_winning_line(board_from("XX.OXO.XX")) == (1, 4, 7)


def test_index_of_row_major():
    assert index_of(0, 0) == 0
    assert index_of(1, 2) == 5
    assert index_of(2, 1) == 7


def test_new_round_is_blank():
    state = new_round()
    assert state.board == EMPTY_BOARD
    assert state.current_mark is X
    assert state.is_over is False
    assert state.winning_line is None and state.winner is None


def test_move_places_mark_and_passes_turn():
    before = new_round()
    after = apply_move(before, 4)
    assert after.board[4] is X
    assert after.current_mark is O
    assert after.is_over is False
    assert result_of(before, after) is MoveResult.CONTINUE
    # pure: the old state is untouched
    assert before.board == EMPTY_BOARD


def test_occupied_cell_rejected():
    state = play_all(4)
    assert apply_move(state, 4) is state


@pytest.mark.parametrize("index", [-1, 9, 100, None, "4", 1.0, True])
def test_bad_index_rejected(index):
    state = new_round()
    assert apply_move(state, index) is state
    assert result_of(state, state) is MoveResult.INVALID


def test_top_row_win():
    state = play_all(0, 3, 1, 4, 2)
    assert state.is_over
    assert state.winner is X
    assert state.winning_line == (0, 1, 2)
    assert find_winning_line(state.board) == (0, 1, 2)


def test_move_after_win_rejected():
    state = play_all(0, 3, 1, 4, 2)
    assert apply_move(state, 8) is state


def test_full_board_draw():
    state = play_all(0, 1, 2, 4, 7, 6, 3, 5, 8)
    assert state.board == board_from("XOXXOOOXX")
    assert state.is_over
    assert state.winner is None
    assert state.winning_line is None


def test_win_on_last_cell_is_not_a_draw():
    before = play_all(0, 1, 2, 3, 4, 6, 7, 5)
    assert not before.is_over
    after = apply_move(before, 8)
    assert after.is_over and after.winner is X
    assert after.winning_line == (0, 4, 8)
    assert result_of(before, after) is MoveResult.WIN


def test_o_can_win():
    state = play_all(0, 2, 1, 4, 8, 6)
    assert state.winner is O
    assert state.winning_line == (2, 4, 6)


def test_empty_cells():
    assert empty_cells(EMPTY_BOARD) == list(range(9))
    assert empty_cells(board_from("X...O...X")) == [1, 2, 3, 5, 6, 7]
    assert empty_cells(board_from("XOXOXOOXX")) == []


def test_ai_move_none_on_full_board():
    assert choose_ai_move(board_from("XOXOXOOXX"), random.Random(0)) is None


def test_ai_move_only_free_cell():
    assert choose_ai_move(board_from("XOXOXOOX."), random.Random(0)) == 8


def test_ai_move_covers_every_free_cell():
    board = board_from("X...O...X")
    rng = random.Random(7)
    seen = {choose_ai_move(board, rng) for _ in range(500)}
    assert seen == {1, 2, 3, 5, 6, 7}


def test_round_state_is_frozen():
    state = RoundState()
    with pytest.raises(Exception):
        state.is_over = True
