"""Sum and verification utilities for magic square boards."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple, Union
import numpy as np

from .board import MagicBoard

BoardLike = Union[MagicBoard, np.ndarray, Sequence[Sequence[Optional[int]]]]


class PuzzleStatus(Enum):
    """Solution state of a board."""
    INCOMPLETE = "incomplete"
    COMPLETE_INVALID = "complete_invalid"
    SOLVED = "solved"


@dataclass(frozen=True)
class LineSums:
    """
    Per-line sums of a board.

    A line whose cells are not all filled has a sum of None, so an
    incomplete line is never confused with one that sums to zero.
    """
    rows: Tuple[Optional[int], ...]
    cols: Tuple[Optional[int], ...]
    diag1: Optional[int]
    diag2: Optional[int]

    def all_lines(self) -> Tuple[Optional[int], ...]:
        return self.rows + self.cols + (self.diag1, self.diag2)

    def is_magic(self, target: int) -> bool:
        """True if every row, column and diagonal sums to target."""
        return all(total == target for total in self.all_lines())


def _as_grid(board: BoardLike) -> np.ndarray:
    """Normalize any supported board form to an int array with 0 for empty."""
    if isinstance(board, MagicBoard):
        return board.grid
    if isinstance(board, np.ndarray):
        return board
    return np.array(
        [[0 if v is None else v for v in row] for row in board],
        dtype=np.int64,
    )


def magic_constant(n: int) -> int:
    """
    The common line sum of an order-n magic square, n(n^2 + 1) / 2.

    Args:
        n: Order of the square.

    Returns:
        The magic constant.
    """
    if n < 1:
        raise ValueError(f"Order must be positive, got {n}")
    return n * (n * n + 1) // 2


def _line_sum(line: np.ndarray) -> Optional[int]:
    if np.any(line == 0):
        return None
    return int(line.sum())


def compute_sums(board: BoardLike) -> LineSums:
    """
    Compute row, column and diagonal sums of a (possibly partial) board.

    Args:
        board: The board to inspect.

    Returns:
        LineSums with None for every line that still has an empty cell.
    """
    grid = _as_grid(board)
    n = grid.shape[0]

    rows = tuple(_line_sum(grid[i, :]) for i in range(n))
    cols = tuple(_line_sum(grid[:, j]) for j in range(n))
    diag1 = _line_sum(np.diagonal(grid))
    diag2 = _line_sum(np.diagonal(np.fliplr(grid)))

    return LineSums(rows=rows, cols=cols, diag1=diag1, diag2=diag2)


def is_board_complete(board: BoardLike) -> bool:
    """True iff no cell is empty."""
    return not np.any(_as_grid(board) == 0)


def is_magic(board: BoardLike) -> bool:
    """
    Check whether a board is a completed magic square.

    Returns False for an incomplete board. Otherwise every row, column and
    both diagonals must sum to the magic constant for the board's order.
    """
    grid = _as_grid(board)
    if np.any(grid == 0):
        return False
    return compute_sums(grid).is_magic(magic_constant(grid.shape[0]))


def puzzle_status(board: BoardLike) -> PuzzleStatus:
    """Classify a board as incomplete, complete but wrong, or solved."""
    if not is_board_complete(board):
        return PuzzleStatus.INCOMPLETE
    if is_magic(board):
        return PuzzleStatus.SOLVED
    return PuzzleStatus.COMPLETE_INVALID


def is_valid_square(square: BoardLike) -> bool:
    """
    Check that a square uses each of 1..n^2 exactly once and is magic.

    Args:
        square: Candidate square.

    Returns:
        True for a normal magic square.
    """
    grid = _as_grid(square)
    n = grid.shape[0]
    if grid.shape != (n, n):
        return False
    if sorted(int(v) for v in grid.flat) != list(range(1, n * n + 1)):
        return False
    return is_magic(grid)


def validate_solution(puzzle: MagicBoard, fixed: np.ndarray, candidate: MagicBoard) -> bool:
    """
    Validate that a candidate board correctly solves a puzzle.

    Args:
        puzzle: The original puzzle board.
        fixed: Clue mask of the puzzle.
        candidate: The proposed solution.

    Returns:
        True if the candidate keeps every clue and is magic.
    """
    if puzzle.size != candidate.size:
        return False

    if not np.array_equal(puzzle.grid[fixed], candidate.grid[fixed]):
        return False

    return is_magic(candidate)
