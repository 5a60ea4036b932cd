"""Dihedral symmetry transforms for magic squares.

Rotations and mirrors permute rows, columns and diagonals among themselves,
so every variant of a magic square is again magic.
"""

from __future__ import annotations
import random
from typing import List, Optional

import numpy as np

from ..core.board import MagicBoard

_default_rng = random.Random()


def rotate90(grid: np.ndarray) -> np.ndarray:
    """Rotate a grid 90 degrees clockwise."""
    return np.rot90(grid, k=-1).copy()


def reflect_horizontal(grid: np.ndarray) -> np.ndarray:
    """Mirror a grid left to right."""
    return np.fliplr(grid).copy()


def dihedral_variant(square: MagicBoard, rotations: int, mirror: bool) -> MagicBoard:
    """
    Apply a fixed symmetry to a square.

    Args:
        square: Source square, left untouched.
        rotations: Number of clockwise quarter turns (taken mod 4).
        mirror: Mirror left to right after rotating.

    Returns:
        A new MagicBoard.
    """
    grid = square.grid
    for _ in range(rotations % 4):
        grid = rotate90(grid)
    if mirror:
        grid = reflect_horizontal(grid)
    return MagicBoard(square.size, grid)


def all_variants(square: MagicBoard) -> List[MagicBoard]:
    """All 8 dihedral variants, identity first."""
    return [
        dihedral_variant(square, rotations, mirror)
        for mirror in (False, True)
        for rotations in range(4)
    ]


def random_variant(square: MagicBoard, rng: Optional[random.Random] = None) -> MagicBoard:
    """
    Pick one of the 8 dihedral variants at random.

    The rotation count is uniform over 0-3 and the mirror is an independent
    coin flip, so every variant has probability 1/8.

    Args:
        square: Source square.
        rng: Random source; a shared module-level instance by default.

    Returns:
        A new MagicBoard.
    """
    rng = rng or _default_rng
    rotations = rng.randrange(4)
    mirror = rng.random() < 0.5
    return dihedral_variant(square, rotations, mirror)
