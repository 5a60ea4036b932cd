"""Magic square generator and puzzle builder with configurable difficulty."""

from __future__ import annotations
import math
import numbers
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

import numpy as np

from ..core.board import MagicBoard
from ..core.exceptions import UnsupportedOrderError
from ..utils.logger import get_logger
from .variants import random_variant

logger = get_logger(__name__)

DEFAULT_FRACTION = 0.25

# Sizes offered to players; singly-even orders have no construction here.
SUPPORTED_ORDERS = (3, 4, 5, 7, 8, 9)


class Difficulty(Enum):
    """Difficulty levels for magic square puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def fraction(self) -> float:
        """Share of the n^2 cells given as clues."""
        fractions = {
            Difficulty.EASY: 0.40,
            Difficulty.MEDIUM: 0.25,
            Difficulty.HARD: 0.12,
        }
        return fractions[self]

    @classmethod
    def from_value(cls, value: Union[Difficulty, str]) -> Optional[Difficulty]:
        """Resolve an enum member or preset name; None if unrecognized."""
        if isinstance(value, Difficulty):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


DifficultySpec = Union[Difficulty, str, float]


@dataclass
class PuzzleState:
    """
    One puzzle instance.

    The solution and clue mask never change after creation; the board and
    available pool are the only parts mutated during play.
    """
    solution: MagicBoard
    board: MagicBoard
    fixed: np.ndarray
    available: List[int]
    difficulty: str = Difficulty.MEDIUM.value
    version: int = 0

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def clue_count(self) -> int:
        return int(np.sum(self.fixed))

    def copy(self) -> PuzzleState:
        return PuzzleState(
            solution=self.solution.copy(),
            board=self.board.copy(),
            fixed=self.fixed.copy(),
            available=list(self.available),
            difficulty=self.difficulty,
            version=self.version,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        return {
            "order": self.size,
            "difficulty": self.difficulty,
            "clues": self.clue_count,
            "puzzle": self.board.to_string(),
            "solution": self.solution.to_string(),
            "fixed": self.fixed.astype(int).tolist(),
            "available": list(self.available),
        }


class MagicSquareGenerator:
    """
    Generator for magic squares and puzzles derived from them.

    Algorithm:
    1. Build a deterministic magic square for the order
       (Siamese walk for odd n, diagonal complement for n divisible by 4)
    2. Apply a random rotation/mirror so solutions vary between games
    3. Reveal a random subset of cells as clues based on difficulty
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            seed: Random seed for reproducibility.
            rng: Random source to use instead of a seeded one. Takes
                 precedence over seed.
        """
        if rng is not None:
            self.rng = rng
        else:
            self.rng = random.Random(seed)

    @staticmethod
    def generate(n: int) -> MagicBoard:
        """
        Build the canonical magic square of order n.

        Args:
            n: Order of the square.

        Returns:
            A complete MagicBoard.

        Raises:
            UnsupportedOrderError: If n is even but not divisible by 4.
        """
        if n < 1:
            raise ValueError(f"Order must be positive, got {n}")

        if n % 2 == 1:
            grid = _siamese(n)
        elif n % 4 == 0:
            grid = _doubly_even(n)
        else:
            raise UnsupportedOrderError(n)

        logger.debug("Generated order-%d magic square", n)
        return MagicBoard(n, grid)

    def randomize(self, square: MagicBoard) -> MagicBoard:
        """Return a random dihedral variant of square."""
        return random_variant(square, self.rng)

    def build_puzzle(self, n: int, difficulty: DifficultySpec = Difficulty.MEDIUM) -> PuzzleState:
        """
        Generate a puzzle with the specified difficulty.

        Args:
            n: Order of the square.
            difficulty: A Difficulty, a preset name, or a clue fraction in
                        (0, 1]. Unknown preset names fall back to medium.

        Returns:
            A PuzzleState holding the solution, the clue board, the clue
            mask and the numbers still to place.
        """
        label, fraction = _resolve_difficulty(difficulty)

        # Step 1: Generate and randomize a solution
        solution = self.randomize(self.generate(n))

        # Step 2: Pick clue positions from a full shuffle
        total_cells = n * n
        clue_count = max(1, math.floor(total_cells * fraction))
        positions = list(range(total_cells))
        self.rng.shuffle(positions)

        board = MagicBoard(n)
        fixed = np.zeros((n, n), dtype=bool)
        for idx in positions[:clue_count]:
            row, col = divmod(idx, n)
            board.grid[row, col] = solution.grid[row, col]
            fixed[row, col] = True

        # Step 3: Everything not given as a clue is left to place
        used = board.placed_values()
        available = [v for v in range(1, total_cells + 1) if v not in used]

        logger.debug(
            "Built order-%d %s puzzle with %d clues", n, label, clue_count
        )
        return PuzzleState(
            solution=solution,
            board=board,
            fixed=fixed,
            available=available,
            difficulty=label,
        )

    def generate_batch(self, count: int, n: int,
                       difficulty: DifficultySpec = Difficulty.MEDIUM) -> List[PuzzleState]:
        """
        Generate multiple puzzles of the same order and difficulty.

        Args:
            count: Number of puzzles to generate.
            n: Order of the square.
            difficulty: Desired difficulty level.

        Returns:
            List of PuzzleState puzzles.
        """
        return [self.build_puzzle(n, difficulty) for _ in range(count)]


def generate_magic_square(n: int) -> MagicBoard:
    """Module-level shortcut for :meth:`MagicSquareGenerator.generate`."""
    return MagicSquareGenerator.generate(n)


def _resolve_difficulty(difficulty: DifficultySpec) -> Tuple[str, float]:
    """Map a difficulty spec to a (label, clue fraction) pair."""
    if isinstance(difficulty, numbers.Real) and not isinstance(difficulty, bool):
        fraction = float(difficulty)
        if not 0.0 < fraction <= 1.0:
            raise ValueError(f"Clue fraction must be in (0, 1], got {difficulty}")
        return "custom", fraction

    level = Difficulty.from_value(difficulty)
    if level is None:
        logger.warning(
            "Unknown difficulty %r, using %s clue fraction", difficulty, DEFAULT_FRACTION
        )
        return str(difficulty), DEFAULT_FRACTION
    return level.value, level.fraction


def _siamese(n: int) -> np.ndarray:
    """
    Odd order construction (De la Loubere).

    Start in the middle of the top row and step up-right with wrap-around;
    when that cell is taken, step straight down instead.
    """
    grid = np.zeros((n, n), dtype=np.int32)
    row, col = 0, n // 2

    for value in range(1, n * n + 1):
        grid[row, col] = value
        next_row = (row - 1) % n
        next_col = (col + 1) % n
        if grid[next_row, next_col] != 0:
            row = (row + 1) % n
        else:
            row, col = next_row, next_col

    return grid


def _doubly_even(n: int) -> np.ndarray:
    """
    Order divisible by 4.

    Fill 1..n^2 row by row, then complement (v -> n^2 + 1 - v) every cell on
    the diagonal or anti-diagonal of its 4x4 block.
    """
    grid = np.arange(1, n * n + 1, dtype=np.int32).reshape(n, n)
    mask = complement_mask(n)
    grid[mask] = n * n + 1 - grid[mask]
    return grid


def complement_mask(n: int) -> np.ndarray:
    """Cells complemented by the doubly-even construction."""
    r = np.arange(n)[:, None] % 4
    c = np.arange(n)[None, :] % 4
    return (r == c) | (r + c == 3)
