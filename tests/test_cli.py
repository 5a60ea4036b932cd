"""Tests for the command-line interface."""

import json

import pytest
from magic_square.cli import build_parser, cmd_play, main
from magic_square.core.board import MagicBoard
from magic_square.core.validator import is_magic


class TestCommands:
    """Tests for the non-interactive commands."""

    def test_no_command(self, capsys):
        """Test that running without a command prints help."""
        assert main([]) == 1

    def test_generate(self, capsys):
        """Test printing a generated square with its sums."""
        assert main(["generate", "--order", "3"]) == 0
        out = capsys.readouterr().out
        assert "constant 15" in out
        assert "Row sums: 15, 15, 15" in out

    def test_generate_json(self, tmp_path):
        """Test saving a randomized square as JSON."""
        path = tmp_path / "square.json"
        assert main(["generate", "--order", "8", "--randomize", "--seed", "1",
                     "--output", str(path)]) == 0
        data = json.loads(path.read_text())
        assert data["magic_constant"] == 260
        assert is_magic(data["square"])

    def test_generate_unsupported_order(self, capsys):
        """Test that a singly-even order is reported as an error."""
        assert main(["generate", "--order", "6"]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_puzzle_json(self, tmp_path, capsys):
        """Test saving a batch of puzzles as JSON."""
        path = tmp_path / "puzzles.json"
        assert main(["puzzle", "--order", "4", "--difficulty", "easy", "--count", "2",
                     "--seed", "3", "--output", str(path)]) == 0
        data = json.loads(path.read_text())
        assert len(data) == 2
        for item in data:
            assert item["clues"] == 6
            assert is_magic(MagicBoard.from_string(item["solution"]))
        assert "Total puzzles generated: 2" in capsys.readouterr().out

    def test_puzzle_fraction(self, capsys):
        """Test that --fraction overrides the difficulty preset."""
        assert main(["puzzle", "--order", "3", "--fraction", "0.5", "--seed", "3"]) == 0
        assert "4 clues" in capsys.readouterr().out

    def test_puzzle_bad_fraction(self, capsys):
        """Test that an out-of-range fraction is reported as an error."""
        assert main(["puzzle", "--order", "3", "--fraction", "2"]) == 2

    def test_puzzle_png(self, tmp_path, capsys):
        """Test rendering puzzles to PNG files."""
        out_dir = tmp_path / "png"
        assert main(["puzzle", "--order", "3", "--seed", "4", "--png", str(out_dir)]) == 0
        assert (out_dir / "puzzle_3x3_1.png").exists()

    def test_verify_magic(self, capsys):
        """Test verifying a magic square."""
        assert main(["verify", "--square", "8,1,6;3,5,7;4,9,2"]) == 0
        assert "✓ Magic square" in capsys.readouterr().out

    def test_verify_not_magic(self, capsys):
        """Test verifying a complete non-magic square."""
        assert main(["verify", "--square", "1,2,3;4,5,6;7,8,9"]) == 1
        assert "not magic" in capsys.readouterr().out

    def test_verify_incomplete(self, capsys):
        """Test verifying a board with an empty cell."""
        assert main(["verify", "--square", "8,.,6;3,5,7;4,9,2"]) == 1
        out = capsys.readouterr().out
        assert "Incomplete" in out
        assert "—" in out

    def test_check(self, capsys):
        """Test checking every supported order up to 9."""
        assert main(["check", "--max-order", "9"]) == 0
        assert "7 orders x 8 variants verified" in capsys.readouterr().out


class TestPlay:
    """Tests for the terminal game loop."""

    @staticmethod
    def scripted(lines):
        feed = iter(lines)

        def input_fn(prompt):
            try:
                return next(feed)
            except StopIteration:
                raise EOFError
        return input_fn

    def test_quit(self, capsys):
        """Test leaving the game with quit."""
        args = build_parser().parse_args(["play", "--seed", "1"])
        assert cmd_play(args, self.scripted(["quit"])) == 0

    def test_selection_shown(self, capsys):
        """The prompt shows the selected number, and only while selected."""
        args = build_parser().parse_args(["play", "--seed", "1"])
        from magic_square.game import GameSession
        value = GameSession(3, "medium", seed=1).available[0]

        assert cmd_play(args, self.scripted([f"select {value}", f"select {value}", "quit"])) == 0
        out = capsys.readouterr().out
        assert out.count(f"[selected {value}]") == 1

    def test_eof_ends_game(self, capsys):
        """Test that end of input ends the game."""
        args = build_parser().parse_args(["play", "--seed", "1"])
        assert cmd_play(args, self.scripted([])) == 0

    def test_invalid_moves_reported(self, capsys):
        """Test that bad moves and commands are reported."""
        args = build_parser().parse_args(["play", "--seed", "1"])
        assert cmd_play(args, self.scripted(["select 99", "click 0 5", "bogus", "quit"])) == 0
        out = capsys.readouterr().out
        assert out.count("Invalid move") == 2
        assert "Commands" in out

    def test_play_to_solution(self, capsys):
        """Test playing a puzzle through to a solution."""
        args = build_parser().parse_args(["play", "--order", "3", "--seed", "11"])

        # Replay the same seed to learn the solution the session will use
        from magic_square.game import GameSession
        state = GameSession(3, "medium", seed=11).state

        moves = []
        for i in range(3):
            for j in range(3):
                if not state.fixed[i, j]:
                    moves.append(f"select {state.solution.get(i, j)}")
                    moves.append(f"click {i + 1} {j + 1}")
        moves.append("sums")
        assert cmd_play(args, self.scripted(moves)) == 0
        out = capsys.readouterr().out
        assert "Solved!" in out
        assert "Row sums: 15, 15, 15" in out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
