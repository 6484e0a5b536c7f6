import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

BOARD_SIZE = 3                          # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# rows, then cols, then main and anti diagonal
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

EMPTY_BOARD = (None,) * CELL_COUNT


class Mark(str, Enum):
    """
    player symbol placed on a cell
    """
    X = "X"
    O = "O"

    def opposite(self):
        return Mark.O if self is Mark.X else Mark.X


class MoveResult(str, Enum):
    """
    outcome of a move request
    """
    WIN = "win"
    DRAW = "draw"
    CONTINUE = "continue"
    INVALID = "invalid"


@dataclass(frozen=True)
class RoundState:
    """
    one round of play: board, whose turn, and the result once over
    """
    board: Tuple[Optional[Mark], ...] = EMPTY_BOARD
    current_mark: Mark = Mark.X
    is_over: bool = False
    winning_line: Optional[Tuple[int, int, int]] = None
    winner: Optional[Mark] = None       # None on draw


def new_round():
    """
    fresh round, X to move
    """
    return RoundState()


def index_of(row, col):
    # board is row-major
    return row * BOARD_SIZE + col


def find_winning_line(board) -> Optional[Tuple[int, int, int]]:
    """
    first line of three equal marks in scan order, or None
    """
    for line in WINNING_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return line
    return None


def empty_cells(board):
    """
    indices of the cells nobody has played
    """
    return [i for i, cell in enumerate(board) if cell is None]


def is_board_full(board):
    return all(cell is not None for cell in board)


def is_valid_move(state, index):
    """
    true if index is on the board, the cell is blank and the round is live
    """
    if state.is_over:
        return False
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    if not 0 <= index < CELL_COUNT:
        return False
    return state.board[index] is None


def apply_move(state: RoundState, index) -> RoundState:
    """
    place the current mark at index and settle the round.

    a rejected move returns the very same state object, so callers can
    tell acceptance apart with `is`.
    """
    if not is_valid_move(state, index):
        return state

    mark = state.current_mark
    board = list(state.board)
    board[index] = mark
    board = tuple(board)

    line = find_winning_line(board)
    if line is not None:
        return replace(state, board=board, is_over=True,
                       winning_line=line, winner=mark)
    if is_board_full(board):
        return replace(state, board=board, is_over=True, winner=None)
    return replace(state, board=board, current_mark=mark.opposite())


def result_of(before, after):
    """
    classify the transition made by apply_move
    """
    if after is before:
        return MoveResult.INVALID
    if after.is_over:
        return MoveResult.WIN if after.winner is not None else MoveResult.DRAW
    return MoveResult.CONTINUE


def choose_ai_move(board, rng=random) -> Optional[int]:
    """
    uniform pick among the empty cells, None when the board is full
    """
    free = empty_cells(board)
    if not free:
        return None
    return rng.choice(free)
