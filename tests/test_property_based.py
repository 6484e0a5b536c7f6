from hypothesis import given, strategies as st

from tictactoe.game_logic import (
    Mark, WINNING_LINES, apply_move, find_winning_line, new_round,
)

cells = st.sampled_from([None, Mark.X, Mark.O])
boards = st.lists(cells, min_size=9, max_size=9).map(tuple)
move_seqs = st.lists(st.integers(min_value=0, max_value=8), max_size=20)


def complete_lines(board):
    return [line for line in WINNING_LINES
            if board[line[0]] is not None
            and board[line[0]] == board[line[1]] == board[line[2]]]


@given(boards)
def test_winning_line_iff_some_line_complete(board):
    lines = complete_lines(board)
    found = find_winning_line(board)
    if lines:
        # first one in scan order
        assert found == lines[0]
    else:
        assert found is None


@given(move_seqs)
def test_random_play_keeps_invariants(moves):
    state = new_round()
    for idx in moves:
        before = state
        state = apply_move(before, idx)
        if before.is_over or before.board[idx] is not None:
            # rejection leaves the state as it was
            assert state is before
            continue
        assert state.board[idx] is before.current_mark
        changed = [i for i in range(9) if state.board[i] != before.board[i]]
        assert changed == [idx]
        if state.is_over:
            line = find_winning_line(state.board)
            assert state.winning_line == line
            if line is None:
                assert None not in state.board and state.winner is None
            else:
                assert state.winner is before.current_mark
        else:
            assert state.current_mark is before.current_mark.opposite()
            assert find_winning_line(state.board) is None

    x = state.board.count(Mark.X); o = state.board.count(Mark.O)
    assert x - o in (0, 1)
