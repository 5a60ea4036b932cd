"""Magic square board representation for any order."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional, Set, Sequence


class MagicBoard:
    """
    Represents an n x n magic square board.

    Cells hold the numbers 1..n^2; 0 marks an empty cell. The same class
    backs both a complete square and a partially filled puzzle board.
    """

    def __init__(self, size: int = 3, grid: Optional[np.ndarray] = None):
        """
        Initialize a board.

        Args:
            size: Order of the square (number of rows and columns).
            grid: Optional initial grid. If None, creates empty board.
        """
        if size < 1:
            raise ValueError(f"Size must be positive, got {size}")

        self.size = size
        self.max_value = size * size

        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (size, size):
                raise ValueError(f"Grid shape must be ({size}, {size})")
            if grid.size and (grid.min() < 0 or grid.max() > self.max_value):
                raise ValueError(f"Values must be 0-{self.max_value}")
            self.grid = grid.copy().astype(np.int32)
        else:
            self.grid = np.zeros((size, size), dtype=np.int32)

    def copy(self) -> MagicBoard:
        """Create a deep copy of the board."""
        new_board = MagicBoard(self.size)
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, row: int, col: int) -> Optional[int]:
        """Get value at position (row, col), or None if the cell is empty."""
        value = int(self.grid[row, col])
        return value if value != 0 else None

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > self.max_value:
            raise ValueError(f"Value must be 0-{self.max_value}, got {value}")
        self.grid[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.grid[row, col] = 0

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.grid[row, col] == 0

    def get_row(self, row: int) -> np.ndarray:
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self.grid[:, col]

    def get_diagonal(self) -> np.ndarray:
        """Main diagonal, top-left to bottom-right."""
        return np.diagonal(self.grid)

    def get_anti_diagonal(self) -> np.ndarray:
        """Anti-diagonal, top-right to bottom-left."""
        return np.diagonal(np.fliplr(self.grid))

    def placed_values(self) -> Set[int]:
        """Numbers currently on the board."""
        return {int(v) for v in self.grid.flat if v != 0}

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions."""
        rows, cols = np.nonzero(self.grid == 0)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def to_string(self) -> str:
        """
        Convert board to a compact string representation.

        Rows are separated by ';' and cells by ','. Empty cells are written
        as '.', e.g. "8,1,6;3,.,7;4,9,2".
        """
        rows = []
        for i in range(self.size):
            cells = []
            for j in range(self.size):
                val = self.grid[i, j]
                cells.append('.' if val == 0 else str(val))
            rows.append(','.join(cells))
        return ';'.join(rows)

    @classmethod
    def from_string(cls, s: str) -> MagicBoard:
        """
        Create a board from the representation produced by :meth:`to_string`.

        Args:
            s: Rows separated by ';' and cells by ','. '.', '0' or an empty
               field marks an empty cell.
        """
        rows = [row for row in s.strip().split(';') if row.strip()]
        data = []
        for row in rows:
            cells = []
            for token in row.split(','):
                token = token.strip()
                if token in ('', '.', '0'):
                    cells.append(0)
                else:
                    cells.append(int(token))
            data.append(cells)

        size = len(data)
        if size == 0 or any(len(row) != size for row in data):
            raise ValueError(f"Board string must describe a square grid, got {s!r}")

        board = cls(size)
        for i, row in enumerate(data):
            for j, val in enumerate(row):
                board.set(i, j, val)
        return board

    @classmethod
    def from_2d_list(cls, data: Sequence[Sequence[Optional[int]]]) -> MagicBoard:
        """Create a board from a 2D list; None marks an empty cell."""
        arr = np.array(
            [[0 if v is None else v for v in row] for row in data],
            dtype=np.int32,
        )
        size = arr.shape[0]
        return cls(size, arr)

    def to_2d_list(self) -> List[List[Optional[int]]]:
        """Convert to nested lists with None for empty cells."""
        return [[self.get(i, j) for j in range(self.size)] for i in range(self.size)]

    def __str__(self) -> str:
        """Pretty-print the board."""
        width = len(str(self.max_value))
        horizontal_sep = '+' + '-' * ((width + 1) * self.size + 1) + '+'

        lines = [horizontal_sep]
        for i in range(self.size):
            row_str = '|'
            for j in range(self.size):
                val = self.grid[i, j]
                cell = '.' if val == 0 else str(val)
                row_str += ' ' + cell.rjust(width)
            lines.append(row_str + ' |')
        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"MagicBoard(size={self.size}, filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MagicBoard):
            return False
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
