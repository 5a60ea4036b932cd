"""Text and image rendering of magic square boards."""

from __future__ import annotations
import os
from typing import Optional

import matplotlib.pyplot as plt
import matplotlib.patches as mpatches
import seaborn as sns
import numpy as np

from ..core.board import MagicBoard
from ..core.validator import LineSums, compute_sums, magic_constant, puzzle_status
from ..generator.generator import PuzzleState


def format_board(board: MagicBoard, fixed: Optional[np.ndarray] = None) -> str:
    """
    Plain-text grid with clues marked by '*' and empty cells by '.'.

    Args:
        board: Board to format.
        fixed: Optional clue mask.
    """
    width = len(str(board.max_value)) + 1
    lines = []
    for i in range(board.size):
        cells = []
        for j in range(board.size):
            value = board.get(i, j)
            text = '.' if value is None else str(value)
            if fixed is not None and fixed[i, j]:
                text += '*'
            cells.append(text.rjust(width))
        lines.append(' '.join(cells))
    return '\n'.join(lines)


def format_sums(sums: LineSums) -> str:
    """Row, column and diagonal sums, with '—' for incomplete lines."""
    def fmt(x: Optional[int]) -> str:
        return "—" if x is None else str(x)

    return (
        f"Row sums: {', '.join(fmt(x) for x in sums.rows)}\n"
        f"Col sums: {', '.join(fmt(x) for x in sums.cols)}\n"
        f"Diag sums: {fmt(sums.diag1)}, {fmt(sums.diag2)}"
    )


class BoardRenderer:
    """
    Draws puzzle boards as annotated heatmaps.

    Cell colour follows the placed number, clue cells are hatched, and the
    title carries the magic constant and solution status.
    """

    def __init__(self, output_dir: str = "boards"):
        """
        Initialize the renderer.

        Args:
            output_dir: Directory to save generated images.
        """
        self.output_dir = output_dir
        os.makedirs(output_dir, exist_ok=True)

        sns.set_theme(style="white")

    def render(self, state: PuzzleState, filename: str = "board.png") -> str:
        """
        Render a puzzle state to a PNG file.

        Args:
            state: Puzzle to draw.
            filename: Name of the file inside output_dir.

        Returns:
            Path to the saved image.
        """
        board = state.board
        n = board.size

        data = board.grid.astype(float)
        data[data == 0] = np.nan
        labels = np.array(
            [['' if v == 0 else str(v) for v in row] for row in board.grid]
        )

        fig, ax = plt.subplots(figsize=(1 + 0.8 * n, 1 + 0.8 * n))
        sns.heatmap(
            data, annot=labels, fmt='', cmap="viridis",
            vmin=1, vmax=board.max_value, cbar=False,
            linewidths=1, linecolor='black', square=True, ax=ax,
        )

        for i, j in zip(*np.nonzero(state.fixed)):
            ax.add_patch(mpatches.Rectangle(
                (j, i), 1, 1, fill=False, hatch='//', edgecolor='white', linewidth=0,
            ))

        status = puzzle_status(board).value.replace('_', ' ')
        ax.set_title(f'Order {n} | target {magic_constant(n)} | {status}',
                     fontsize=12, fontweight='bold')
        ax.set_xticks([])
        ax.set_yticks([])

        sums = compute_sums(board)
        ax.set_xlabel(' '.join('—' if s is None else str(s) for s in sums.cols), fontsize=9)

        plt.tight_layout()
        path = os.path.join(self.output_dir, filename)
        plt.savefig(path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return path
