"""
Board module for Minesweeper.

Implements the board as a flat, row-major list of cells with deferred
mine placement, adjacency counts, flood-fill revealing and flagging.
Index i maps to the coordinate (i % width, i // width).
"""
import random
from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

import numpy as np

from .cell import Cell
from .errors import NotGeneratedError


# ============================================================================
# Constants
# ============================================================================

# The first reveal and its (up to) eight neighbors are kept mine-free.
SAFE_ZONE_SIZE = 9


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 8
    height: int = 8
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 3 or self.height < 3:
            raise ValueError("Board must be at least 3x3")
        if self.width * self.height <= SAFE_ZONE_SIZE:
            raise ValueError(
                f"Board must have more than {SAFE_ZONE_SIZE} cells"
            )
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.width * self.height - SAFE_ZONE_SIZE - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def length(self) -> int:
        """Total number of cells."""
        return self.width * self.height


# ============================================================================
# Neighbor Utilities
# ============================================================================

def surrounding_indices(index: int, width: int, length: int) -> List[int]:
    """
    Get the indices of all cells surrounding a cell in a flat grid.

    Neighbors never wrap across a row boundary. The result is ordered
    row by row: up-left, up, up-right, left, right, down-left, down,
    down-right, skipping any that fall outside the grid.

    Args:
        index: Index of the center cell.
        width: Number of columns in the grid.
        length: Total number of cells in the grid.

    Returns:
        List of neighbor indices.

    Raises:
        ValueError: If the grid is too small.
        IndexError: If index is outside the grid.
    """
    if width < 1 or length < SAFE_ZONE_SIZE:
        raise ValueError(f"Grid of length {length} is too small")
    if not 0 <= index < length:
        raise IndexError(f"Index {index} out of bounds (length {length})")

    col = index % width
    indices = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            if not 0 <= col + delta_col < width:
                continue
            neighbor = index + delta_row * width + delta_col
            if 0 <= neighbor < length:
                indices.append(neighbor)
    return indices


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper board.

    Mines are not placed until the first reveal, so the first revealed
    cell and its neighbors are always safe. Win and loss are left to
    the caller.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: Optional[random.Random] = field(default=None, repr=False)
    _cells: List[Cell] = field(default_factory=list, repr=False)
    _generated: bool = False

    def __post_init__(self) -> None:
        """Initialize the cells after dataclass creation."""
        self._cells = [Cell() for _ in range(self.config.length)]

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        num_mines: int,
        rng: Optional[random.Random] = None,
    ) -> "Board":
        """Create a board from its dimensions and mine count."""
        return cls(BoardConfig(width, height, num_mines), rng=rng)

    # ========================================================================
    # Coordinates (Low-level)
    # ========================================================================

    def linear_index(self, x: int, y: int) -> int:
        """
        Convert an (x, y) coordinate to a cell index.

        Raises:
            IndexError: If the coordinate is outside the board.
        """
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Coordinate ({x}, {y}) out of bounds")
        return y * self.width + x

    def cartesian(self, index: int) -> Tuple[int, int]:
        """
        Convert a cell index to an (x, y) coordinate.

        Raises:
            IndexError: If index is outside the board.
        """
        self._check_index(index)
        return index % self.width, index // self.width

    def adjacent_indices(self, index: int) -> List[int]:
        """Get the indices of the cells surrounding index."""
        return surrounding_indices(index, self.width, self.length)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self.length:
            raise IndexError(
                f"Index {index} out of bounds (length {self.length})"
            )

    # ========================================================================
    # Generation (Low-level)
    # ========================================================================

    def generate(self, first_index: int) -> None:
        """
        Place mines and compute adjacency counts.

        Runs at most once per board. Called by the first reveal_tile.

        Args:
            first_index: Index of the first revealed cell, which is kept
                mine-free along with its neighbors.
        """
        self._check_index(first_index)
        if self._generated:
            return
        self._generated = True

        exclude = set(self.adjacent_indices(first_index))
        exclude.add(first_index)
        for index in self._choose_mine_indices(exclude):
            self._cells[index].is_bomb = True
        self._calculate_adjacent_bombs()

    def _choose_mine_indices(self, exclude: Set[int]) -> List[int]:
        """Pick num_mines distinct indices outside exclude at random."""
        positions = [
            index for index in range(self.length) if index not in exclude
        ]
        rng = self.rng if self.rng is not None else random
        return rng.sample(positions, self.num_mines)

    def _calculate_adjacent_bombs(self) -> None:
        """Calculate adjacent bomb counts for all non-bomb cells."""
        for index, cell in enumerate(self._cells):
            if not cell.is_bomb:
                cell.adjacent_bombs = self._count_adjacent_bombs(index)

    def _count_adjacent_bombs(self, index: int) -> int:
        """Count bombs adjacent to a specific cell."""
        return sum(
            1 for neighbor in self.adjacent_indices(index)
            if self._cells[neighbor].is_bomb
        )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal_tile(self, index: int) -> None:
        """
        Reveal the cell at index and flood-fill from it.

        On the first call, places mines avoiding this cell and its
        neighbors. Revealing an already revealed cell is harmless.

        Args:
            index: Index of the cell to reveal.

        Raises:
            IndexError: If index is outside the board.
            NotRevealableError: If the cell, or a cell reached by the
                flood-fill, is flagged. Cells revealed before the error
                stay revealed.
        """
        self._check_index(index)
        if not self._generated:
            self.generate(index)

        self._cells[index].reveal()
        self._flood_reveal(index)

    def _flood_reveal(self, index: int) -> None:
        """
        Reveal outward from index one breadth-first pass at a time.

        A neighbor is queued when it is not yet revealed and touches a
        revealed empty cell. This reveals a connected empty region plus
        its numbered border, and nothing past that border.
        """
        frontier = {index}
        while frontier:
            next_frontier: Set[int] = set()
            for current in sorted(frontier):
                self._cells[current].reveal()
                for neighbor in self.adjacent_indices(current):
                    if neighbor in next_frontier:
                        continue
                    if self._should_auto_reveal(neighbor):
                        next_frontier.add(neighbor)
            frontier = next_frontier

    def _should_auto_reveal(self, index: int) -> bool:
        """Check if a hidden cell touches a revealed empty cell."""
        if self._cells[index].is_revealed:
            return False
        for neighbor in self.adjacent_indices(index):
            cell = self._cells[neighbor]
            if cell.is_revealed and cell.is_empty:
                return True
        return False

    def flag_tile(self, index: int) -> None:
        """
        Toggle flag on the cell at index.

        Args:
            index: Index of the cell to flag or unflag.

        Raises:
            IndexError: If index is outside the board.
            NotGeneratedError: If no cell has been revealed yet.
            NotFlaggableError: If the cell is already revealed.
        """
        self._check_index(index)
        if not self._generated:
            raise NotGeneratedError(index)
        self._cells[index].flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @property
    def length(self) -> int:
        return self.config.length

    @property
    def generated(self) -> bool:
        """Check if mines have been placed."""
        return self._generated

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """All cells in row-major order."""
        return tuple(self._cells)

    def get_cell(self, index: int) -> Cell:
        """Get cell at index."""
        self._check_index(index)
        return self._cells[index]

    def cell_at(self, x: int, y: int) -> Cell:
        """Get cell at an (x, y) coordinate."""
        return self._cells[self.linear_index(x, y)]

    def bomb_indices(self) -> List[int]:
        """Indices of all bombs, empty before generation."""
        return [index for index, cell in enumerate(self._cells) if cell.is_bomb]

    def hidden_indices(self) -> List[int]:
        """Indices of all cells that are still hidden."""
        return [
            index for index, cell in enumerate(self._cells) if cell.is_hidden
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (height, width) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed bomb
        """
        obs = np.array(
            [cell.to_observation() for cell in self._cells], dtype=np.int8
        )
        return obs.reshape(self.height, self.width)

    # ========================================================================
    # Rendering
    # ========================================================================

    def render(self) -> str:
        """Player view: one line per row, hidden information masked."""
        return self._render_rows(Cell.symbol)

    def render_debug(self) -> str:
        """Debug view: one line per row, bombs and counts exposed."""
        return self._render_rows(Cell.raw_symbol)

    def _render_rows(self, to_symbol) -> str:
        lines = []
        for row in range(self.height):
            start = row * self.width
            row_cells = self._cells[start:start + self.width]
            lines.append("".join(to_symbol(cell) for cell in row_cells))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.render()
