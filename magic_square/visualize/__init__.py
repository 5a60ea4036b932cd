"""Rendering helpers for magic square boards."""

from .render import BoardRenderer, format_board, format_sums

__all__ = ["BoardRenderer", "format_board", "format_sums"]
