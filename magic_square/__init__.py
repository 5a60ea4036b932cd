"""Magic square puzzle generator and verifier."""

from .core import (
    MagicBoard,
    MagicSquareError,
    UnsupportedOrderError,
    InvalidMoveError,
    LineSums,
    PuzzleStatus,
    magic_constant,
    compute_sums,
    is_board_complete,
    is_magic,
    puzzle_status,
)
from .generator import MagicSquareGenerator, Difficulty, PuzzleState, generate_magic_square, random_variant
from .game import GameSession

__version__ = "1.0.0"

__all__ = [
    "MagicBoard",
    "MagicSquareError",
    "UnsupportedOrderError",
    "InvalidMoveError",
    "LineSums",
    "PuzzleStatus",
    "magic_constant",
    "compute_sums",
    "is_board_complete",
    "is_magic",
    "puzzle_status",
    "MagicSquareGenerator",
    "Difficulty",
    "PuzzleState",
    "generate_magic_square",
    "random_variant",
    "GameSession",
]
