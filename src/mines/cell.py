"""
Cell module for Minesweeper board.

Represents individual cells on the board with their state
(hidden/revealed/flagged) and content (bomb/number).
"""
from enum import Enum, auto
from dataclasses import dataclass

from .errors import NotFlaggableError, NotRevealableError


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


BOMB_SYMBOL = "*"
EMPTY_SYMBOL = "."
FLAGGED_SYMBOL = "!"
HIDDEN_SYMBOL = "?"


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_bomb: Whether this cell contains a bomb. Set once during
            board generation.
        adjacent_bombs: Count of bombs in neighboring cells (0-8). Only
            meaningful for non-bomb cells after generation.
        state: Current visual state (hidden, revealed, or flagged).
    """

    is_bomb: bool = False
    adjacent_bombs: int = 0
    state: CellState = CellState.HIDDEN

    def reveal(self) -> None:
        """
        Reveal this cell.

        Revealing an already revealed cell is a no-op.

        Raises:
            NotRevealableError: If the cell is flagged.
        """
        if self.state == CellState.FLAGGED:
            raise NotRevealableError()
        self.state = CellState.REVEALED

    def flag(self) -> None:
        """
        Toggle flag on this cell.

        Raises:
            NotFlaggableError: If the cell is already revealed.
        """
        if self.state == CellState.REVEALED:
            raise NotFlaggableError()
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    @property
    def is_empty(self) -> bool:
        """Check if cell is a non-bomb with no adjacent bombs."""
        return not self.is_bomb and self.adjacent_bombs == 0

    # ========================================================================
    # Rendering
    # ========================================================================

    def raw_symbol(self) -> str:
        """
        Debug view of the cell, ignoring its state.

        Returns:
            '*' for a bomb, the adjacent bomb count if nonzero, else '.'.
        """
        if self.is_bomb:
            return BOMB_SYMBOL
        if self.adjacent_bombs:
            return str(self.adjacent_bombs)
        return EMPTY_SYMBOL

    def symbol(self) -> str:
        """
        Player view of the cell.

        Returns:
            '!' if flagged, '?' if hidden, otherwise the debug view.
        """
        if self.state == CellState.FLAGGED:
            return FLAGGED_SYMBOL
        if self.state == CellState.HIDDEN:
            return HIDDEN_SYMBOL
        return self.raw_symbol()

    def __str__(self) -> str:
        return self.symbol()

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation value.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent bomb count
            9: Revealed bomb
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_bomb:
            return 9
        return self.adjacent_bombs
