"""
Minesweeper board module.

Provides the rules and state of a Minesweeper board: cells, deferred
mine placement, flood-fill revealing and flagging. Rendering beyond
plain text and the input loop are left to the caller.
"""
from .cell import Cell, CellState
from .board import Board, BoardConfig, surrounding_indices
from .errors import (
    MinesweeperError,
    NotRevealableError,
    NotFlaggableError,
    NotGeneratedError,
)

__all__ = [
    "Cell",
    "CellState",
    "Board",
    "BoardConfig",
    "surrounding_indices",
    "MinesweeperError",
    "NotRevealableError",
    "NotFlaggableError",
    "NotGeneratedError",
]
