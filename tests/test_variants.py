"""Unit tests for the dihedral variant randomizer."""

import random

import pytest
import numpy as np
from magic_square.core.board import MagicBoard
from magic_square.core.validator import is_valid_square
from magic_square.generator import generate_magic_square, random_variant, dihedral_variant, all_variants
from magic_square.generator.variants import rotate90, reflect_horizontal


class ScriptedRandom:
    """Random source returning a fixed rotation count and mirror draw."""

    def __init__(self, rotations, mirror_draw):
        self.rotations = rotations
        self.mirror_draw = mirror_draw

    def randrange(self, stop):
        assert stop == 4
        return self.rotations

    def random(self):
        return self.mirror_draw


class TestTransforms:
    """Tests for the individual transforms."""

    def test_rotate90_clockwise(self):
        """Test a clockwise quarter turn."""
        grid = np.array([[1, 2], [3, 4]])
        assert rotate90(grid).tolist() == [[3, 1], [4, 2]]

    def test_reflect_horizontal(self):
        """Test a left-to-right mirror."""
        grid = np.array([[1, 2], [3, 4]])
        assert reflect_horizontal(grid).tolist() == [[2, 1], [4, 3]]

    def test_four_rotations_is_identity(self):
        """Test that four quarter turns restore the square."""
        square = generate_magic_square(5)
        assert dihedral_variant(square, 4, False) == square

    def test_input_not_mutated(self):
        """Test that transforms leave the input untouched."""
        square = generate_magic_square(4)
        before = square.copy()
        dihedral_variant(square, 1, True)
        random_variant(square, random.Random(0))
        assert square == before


class TestRandomVariant:
    """Tests for random_variant."""

    @pytest.mark.parametrize("n", [3, 4, 5, 8])
    def test_all_variants_stay_magic(self, n):
        """Test that all 8 variants are magic."""
        for variant in all_variants(generate_magic_square(n)):
            assert is_valid_square(variant)

    def test_scripted_variant(self):
        """Test variants chosen by a scripted random source."""
        square = generate_magic_square(3)
        variant = random_variant(square, ScriptedRandom(1, 0.9))
        assert variant.to_2d_list() == [[4, 3, 8], [9, 5, 1], [2, 7, 6]]

        mirrored = random_variant(square, ScriptedRandom(0, 0.1))
        assert mirrored.to_2d_list() == [[6, 1, 8], [7, 5, 3], [2, 9, 4]]

    def test_every_variant_reachable(self):
        """All 4 rotations x 2 mirror choices give 8 distinct squares."""
        square = generate_magic_square(3)
        seen = set()
        for rotations in range(4):
            for draw in (0.1, 0.9):
                seen.add(random_variant(square, ScriptedRandom(rotations, draw)).to_string())
        assert len(seen) == 8

    def test_seeded_rng_reaches_all_variants(self):
        """Test that a seeded source reaches all 8 variants."""
        rng = random.Random(2024)
        square = generate_magic_square(4)
        seen = {random_variant(square, rng).to_string() for _ in range(400)}
        assert len(seen) == 8

    def test_default_rng(self):
        """Test the module-level random source."""
        assert is_valid_square(random_variant(generate_magic_square(7)))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
