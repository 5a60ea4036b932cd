"""Game session: the player-facing moves on top of a puzzle."""

from __future__ import annotations
import bisect
from typing import List, Optional, Union

from ..core.exceptions import InvalidMoveError
from ..core.validator import LineSums, PuzzleStatus, compute_sums, magic_constant, puzzle_status
from ..generator.generator import Difficulty, MagicSquareGenerator, PuzzleState
from ..utils.logger import get_logger

logger = get_logger(__name__)


class GameSession:
    """
    Orchestrates a single player's game.

    Holds the active PuzzleState and the currently selected number. Moves
    never touch clue cells, and after every move the available pool and the
    board values together are exactly 1..n^2.
    """

    def __init__(self, n: int = 3, difficulty: Union[Difficulty, str, float] = Difficulty.MEDIUM,
                 seed: Optional[int] = None, generator: Optional[MagicSquareGenerator] = None):
        """
        Initialize a session and start the first game.

        Args:
            n: Order of the square.
            difficulty: Difficulty preset, preset name or clue fraction.
            seed: Random seed for reproducibility.
            generator: Generator to use instead of a seeded one.
        """
        self.generator = generator or MagicSquareGenerator(seed=seed)
        self.n = n
        self.difficulty = difficulty
        self.selected: Optional[int] = None
        self.state: Optional[PuzzleState] = None
        self._version = 0
        self.new_game()

    def new_game(self, n: Optional[int] = None,
                 difficulty: Union[Difficulty, str, float, None] = None) -> PuzzleState:
        """Replace the active puzzle with a fresh one."""
        if n is not None:
            self.n = n
        if difficulty is not None:
            self.difficulty = difficulty

        state = self.generator.build_puzzle(self.n, self.difficulty)
        self._version += 1
        state.version = self._version

        self.state = state
        self.selected = None
        logger.debug("Started game v%d: order %d, %s", state.version, self.n, state.difficulty)
        return state

    # -- moves ----------------------------------------------------------------

    def select(self, value: Optional[int]) -> Optional[int]:
        """
        Toggle the number to place next.

        Selecting the already selected number (or None) clears the selection.

        Returns:
            The new selection.
        """
        if value is None or value == self.selected:
            self.selected = None
            return None
        if value not in self.state.available:
            raise InvalidMoveError(f"{value} is not available")
        self.selected = value
        return value

    def click(self, row: int, col: int) -> bool:
        """
        Handle a click on a cell.

        A clue cell ignores the click, a filled cell is cleared, and an empty
        cell receives the selected number if there is one.

        Returns:
            True if the board changed.
        """
        if self.state.fixed[row, col]:
            return False
        if not self.state.board.is_empty(row, col):
            self.remove(row, col)
            return True
        if self.selected is not None:
            self.place(row, col, self.selected)
            self.selected = None
            return True
        return False

    def place(self, row: int, col: int, value: int) -> None:
        """
        Put an available number into an empty, non-clue cell.

        Raises:
            InvalidMoveError: If the cell is a clue or occupied, or the value
                              is not in the available pool.
        """
        board = self.state.board
        if self.state.fixed[row, col]:
            raise InvalidMoveError(f"Cell ({row}, {col}) is a clue")
        if not board.is_empty(row, col):
            raise InvalidMoveError(f"Cell ({row}, {col}) is already filled")
        if value not in self.state.available:
            raise InvalidMoveError(f"{value} is not available")

        board.set(row, col, value)
        self.state.available.remove(value)
        if value == self.selected:
            self.selected = None
        logger.debug("Placed %d at (%d, %d)", value, row, col)

    def remove(self, row: int, col: int) -> int:
        """
        Clear a non-clue cell and return its number to the pool.

        Returns:
            The removed number.
        """
        board = self.state.board
        if self.state.fixed[row, col]:
            raise InvalidMoveError(f"Cell ({row}, {col}) is a clue")
        value = board.get(row, col)
        if value is None:
            raise InvalidMoveError(f"Cell ({row}, {col}) is empty")

        board.clear(row, col)
        bisect.insort(self.state.available, value)
        logger.debug("Removed %d from (%d, %d)", value, row, col)
        return value

    def reset(self) -> None:
        """Clear every non-clue cell and rebuild the available pool."""
        state = self.state
        state.board.grid[~state.fixed] = 0
        used = state.board.placed_values()
        state.available = [v for v in range(1, state.board.max_value + 1) if v not in used]
        self.selected = None

    # -- queries --------------------------------------------------------------

    @property
    def available(self) -> List[int]:
        return self.state.available

    @property
    def target(self) -> int:
        return magic_constant(self.state.size)

    @property
    def sums(self) -> LineSums:
        return compute_sums(self.state.board)

    @property
    def status(self) -> PuzzleStatus:
        return puzzle_status(self.state.board)

    @property
    def is_won(self) -> bool:
        return self.status is PuzzleStatus.SOLVED
