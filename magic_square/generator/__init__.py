"""Generator module for creating magic squares and puzzles."""

from .generator import (
    MagicSquareGenerator,
    Difficulty,
    PuzzleState,
    DEFAULT_FRACTION,
    SUPPORTED_ORDERS,
    generate_magic_square,
    complement_mask,
)
from .variants import random_variant, dihedral_variant, all_variants

__all__ = [
    "MagicSquareGenerator",
    "Difficulty",
    "PuzzleState",
    "DEFAULT_FRACTION",
    "SUPPORTED_ORDERS",
    "generate_magic_square",
    "complement_mask",
    "random_variant",
    "dihedral_variant",
    "all_variants",
]
