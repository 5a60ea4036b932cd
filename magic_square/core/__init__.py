"""Core module for magic square board representation and verification."""

from .board import MagicBoard
from .exceptions import MagicSquareError, UnsupportedOrderError, InvalidMoveError
from .validator import (
    LineSums,
    PuzzleStatus,
    magic_constant,
    compute_sums,
    is_board_complete,
    is_magic,
    puzzle_status,
    is_valid_square,
    validate_solution,
)

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
    "is_valid_square",
    "validate_solution",
]
