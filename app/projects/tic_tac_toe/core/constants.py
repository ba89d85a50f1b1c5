"""
Constants for Tic-Tac-Toe: marks, board geometry, winning lines, session keys.
Single source of truth for the core logic, routes and templates.
"""

X_MARK = "X"
O_MARK = "O"
MARKS = (X_MARK, O_MARK)

# 3x3 grid, row-major
BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# Rows top to bottom, columns left to right, then the two diagonals.
# Order matters: the first matching line wins.
WIN_LINES = [
    [0, 1, 2],
    [3, 4, 5],
    [6, 7, 8],
    [0, 3, 6],
    [1, 4, 7],
    [2, 5, 8],
    [0, 4, 8],
    [2, 4, 6],
]

# --- Status text ---
WINNER_PREFIX = "Winner: "
DRAW_TEXT = "Draw!"
NEXT_PLAYER_PREFIX = "Next player: "

# --- History panel labels ---
GAME_START_LABEL = "Go to game start"
ASCENDING_LABEL = "Ascending"
DESCENDING_LABEL = "Descending"

# --- CSS classes ---
SQUARE_CLASS = "square"
WIN_CLASS = "win"

# --- Session keys ---
SESSION_GAME_KEY = "tic_tac_toe_game"
SESSION_ORDER_KEY = "tic_tac_toe_ascending"
