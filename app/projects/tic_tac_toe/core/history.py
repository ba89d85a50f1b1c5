"""
History panel logic for Tic-Tac-Toe: move-location diffing between snapshots
and the list of time-travel entries shown beside the board.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from app.projects.tic_tac_toe.core.constants import (
    ASCENDING_LABEL,
    BOARD_SIZE,
    DESCENDING_LABEL,
    GAME_START_LABEL,
)


@dataclass
class HistoryEntry:
    move: int
    label: str
    is_current: bool
    location: Optional[Tuple[int, int]] = None
    mark: Optional[str] = None

    def to_dict(self):
        return {
            'move': self.move,
            'label': self.label,
            'is_current': self.is_current,
            'location': list(self.location) if self.location else None,
            'mark': self.mark,
        }


@dataclass
class HistoryPanelView:
    entries: List[HistoryEntry] = field(default_factory=list)
    ascending: bool = True

    @property
    def order_label(self):
        return ASCENDING_LABEL if self.ascending else DESCENDING_LABEL


def changed_cell(previous_board, current_board):
    """Index of the first cell that differs between two snapshots, or None."""
    for index, (before, after) in enumerate(zip(previous_board, current_board)):
        if before != after:
            return index
    return None


def move_location(index):
    """1-based (col, row) of a flat board index."""
    return (index % BOARD_SIZE + 1, index // BOARD_SIZE + 1)


def move_locations(history):
    """
    Location of the cell changed by each move, aligned with `history`.

    Entry 0 is always None: the starting board has nothing to diff against.
    """
    locations = [None]
    for move in range(1, len(history)):
        index = changed_cell(history[move - 1], history[move])
        locations.append(move_location(index) if index is not None else None)
    return locations


def placed_mark(history, move):
    """Mark placed by `move`, read from the cell it changed."""
    if move == 0:
        return None
    index = changed_cell(history[move - 1], history[move])
    if index is None:
        return None
    return history[move][index]


def entry_label(move, location, mark, is_current):
    if is_current:
        return f"You are at move #{move}"
    if move == 0:
        return GAME_START_LABEL
    col, row = location
    return f"Go to move #{move}: {mark} at ({col},{row})"


def build_history_panel(history, current_move, ascending=True):
    """
    Build the HistoryPanel view model.

    Every move gets an entry; the viewed move is a plain label, the others are
    jump targets. Descending order only reverses presentation.
    """
    locations = move_locations(history)

    entries = []
    for move in range(len(history)):
        is_current = move == current_move
        location = locations[move]
        mark = placed_mark(history, move)
        entries.append(HistoryEntry(
            move=move,
            label=entry_label(move, location, mark, is_current),
            is_current=is_current,
            location=location,
            mark=mark,
        ))

    if not ascending:
        entries.reverse()

    return HistoryPanelView(entries=entries, ascending=ascending)
