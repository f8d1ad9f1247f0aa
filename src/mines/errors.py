"""
Error types for the Minesweeper board.

These are the recoverable outcomes of normal play (clicking a flagged
cell, flagging a revealed one). Callers may report or ignore them.
Programming errors such as out-of-bounds indices raise the built-in
IndexError/ValueError instead.
"""
from typing import Optional


class MinesweeperError(Exception):
    """Base class for recoverable board errors."""

    default_message = "Invalid board action"

    def __init__(self, index: Optional[int] = None) -> None:
        self.index = index
        message = self.default_message
        if index is not None:
            message = f"{message} (index {index})"
        super().__init__(message)


class NotRevealableError(MinesweeperError):
    """Raised when revealing a flagged cell."""

    default_message = "Tried to reveal a cell that can't be revealed"


class NotFlaggableError(MinesweeperError):
    """Raised when flagging a revealed cell."""

    default_message = "Tried to flag a cell that can't be flagged"


class NotGeneratedError(MinesweeperError):
    """Raised when flagging before the first reveal placed the mines."""

    default_message = "Board has not been generated yet"
