"""
Board logic for Tic-Tac-Toe: win/draw evaluation, status text, move validation
and the Board/Cell view models handed to the templates.

A board snapshot is a list of 9 values (None, "X" or "O"), row-major.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from app.projects.tic_tac_toe.core.constants import (
    BOARD_SIZE,
    CELL_COUNT,
    DRAW_TEXT,
    NEXT_PLAYER_PREFIX,
    O_MARK,
    SQUARE_CLASS,
    WIN_CLASS,
    WIN_LINES,
    WINNER_PREFIX,
    X_MARK,
)


@dataclass
class CellView:
    index: int
    value: Optional[str]
    css_class: str = SQUARE_CLASS

    @property
    def is_winning(self):
        return WIN_CLASS in self.css_class.split()


@dataclass
class BoardView:
    status: str
    rows: List[List[CellView]] = field(default_factory=list)
    winning_line: Optional[List[int]] = None

    @property
    def is_over(self):
        return self.winning_line is not None


def empty_board():
    """Return a fresh all-empty snapshot."""
    return [None] * CELL_COUNT


def mark_for_turn(x_is_next):
    return X_MARK if x_is_next else O_MARK


def calculate_winner(squares):
    """
    Return the first winning line on the board, or None.

    Lines are checked rows first, then columns, then diagonals; a line wins
    when its three cells hold the same non-empty mark.
    """
    for line in WIN_LINES:
        a, b, c = line
        if squares[a] and squares[a] == squares[b] and squares[a] == squares[c]:
            return list(line)
    return None


def is_board_filled(squares):
    return all(square for square in squares)


def game_status(squares, x_is_next):
    """Status line shown above the board."""
    win_line = calculate_winner(squares)
    if win_line:
        return WINNER_PREFIX + squares[win_line[0]]
    if is_board_filled(squares):
        return DRAW_TEXT
    return NEXT_PLAYER_PREFIX + mark_for_turn(x_is_next)


def next_squares(squares, index, x_is_next):
    """
    Compute the snapshot produced by clicking cell `index`.

    Returns None when the click must be ignored: the cell is already marked
    or the game already has a winner. Raises ValueError for an index that is
    not on the board.
    """
    if not 0 <= index < CELL_COUNT:
        raise ValueError(f"Cell index must be between 0 and {CELL_COUNT - 1}, got {index}")

    if squares[index] or calculate_winner(squares):
        return None

    result = list(squares)
    result[index] = mark_for_turn(x_is_next)
    return result


def build_board(squares, x_is_next):
    """Build the Board view model: status text plus 3 rows of 3 cells."""
    win_line = calculate_winner(squares)

    rows = [[] for _ in range(BOARD_SIZE)]
    for index, value in enumerate(squares):
        css_class = SQUARE_CLASS
        if win_line and index in win_line:
            css_class = " ".join([SQUARE_CLASS, WIN_CLASS])
        rows[index // BOARD_SIZE].append(CellView(index=index, value=value, css_class=css_class))

    return BoardView(
        status=game_status(squares, x_is_next),
        rows=rows,
        winning_line=win_line,
    )
