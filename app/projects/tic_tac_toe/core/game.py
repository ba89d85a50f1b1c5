"""
Game root for Tic-Tac-Toe.

Owns the authoritative state - the move history and the viewed move - and
exposes the only two ways to change it: commit a move and jump to a move.
Everything else (turn, status, winning line) is derived.
"""
import logging

from app.projects.tic_tac_toe.core.board import (
    calculate_winner,
    empty_board,
    game_status,
    next_squares,
)
from app.projects.tic_tac_toe.core.constants import CELL_COUNT, MARKS, O_MARK, X_MARK

logger = logging.getLogger(__name__)


class Game:
    def __init__(self, history=None, current_move=0):
        self.history = history if history is not None else [empty_board()]
        self.current_move = current_move

    # --- Derived state ---

    @property
    def x_is_next(self):
        return self.current_move % 2 == 0

    @property
    def current_squares(self):
        return self.history[self.current_move]

    @property
    def winning_line(self):
        return calculate_winner(self.current_squares)

    @property
    def status(self):
        return game_status(self.current_squares, self.x_is_next)

    # --- Commands ---

    def commit_move(self, squares):
        """
        Append a snapshot after the viewed move.

        Any moves after the current pointer are discarded first, so playing
        from the past starts a new branch.
        """
        self.history = self.history[:self.current_move + 1] + [list(squares)]
        self.current_move = len(self.history) - 1

    def jump_to(self, move):
        """View an earlier (or later) move without touching history."""
        if not 0 <= move < len(self.history):
            raise ValueError(f"Move must be between 0 and {len(self.history) - 1}, got {move}")
        self.current_move = move

    def play(self, index):
        """
        Click cell `index` on the viewed board.

        Returns True if a move was committed, False if the click was ignored.
        """
        squares = next_squares(self.current_squares, index, self.x_is_next)
        if squares is None:
            logger.debug(f"Ignored click on cell {index} at move {self.current_move}")
            return False
        self.commit_move(squares)
        return True

    # --- Session storage ---

    def to_dict(self):
        return {
            'history': [list(board) for board in self.history],
            'current_move': self.current_move,
        }

    @classmethod
    def from_dict(cls, data):
        """
        Rebuild a game from its stored form.

        Raises ValueError if the payload is not a well-formed history.
        """
        if not isinstance(data, dict):
            raise ValueError("Stored game must be a mapping")

        history = data.get('history')
        current_move = data.get('current_move')

        if not isinstance(history, list) or not history:
            raise ValueError("History must be a non-empty list")
        if not isinstance(current_move, int) or isinstance(current_move, bool):
            raise ValueError("Current move must be an integer")
        if not 0 <= current_move < len(history):
            raise ValueError(f"Current move {current_move} outside history of length {len(history)}")

        boards = []
        for board in history:
            if not isinstance(board, list) or len(board) != CELL_COUNT:
                raise ValueError(f"Each board must have {CELL_COUNT} cells")
            if any(cell is not None and cell not in MARKS for cell in board):
                raise ValueError("Cells must be empty, 'X' or 'O'")
            boards.append(list(board))

        if any(boards[0]):
            raise ValueError("History must start from an empty board")

        for move in range(1, len(boards)):
            _validate_step(boards[move - 1], boards[move], move)

        return cls(history=boards, current_move=current_move)


def _validate_step(previous_board, board, move):
    """Consecutive snapshots differ in exactly one cell, empty to the mover's mark."""
    changed = [i for i in range(CELL_COUNT) if previous_board[i] != board[i]]
    if len(changed) != 1 or previous_board[changed[0]] is not None:
        raise ValueError("Consecutive boards must differ by exactly one new mark")
    expected = X_MARK if move % 2 == 1 else O_MARK
    if board[changed[0]] != expected:
        raise ValueError(f"Move {move} must place {expected}")
