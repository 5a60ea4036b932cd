"""Exception hierarchy for magic square generation and play."""


class MagicSquareError(Exception):
    """Base exception for the magic square engine."""


class UnsupportedOrderError(MagicSquareError, ValueError):
    """Raised when no construction exists for the requested order."""

    def __init__(self, order: int):
        self.order = order
        super().__init__(
            f"Order {order} is singly-even; only odd orders and multiples of 4 are supported"
        )


class InvalidMoveError(MagicSquareError):
    """Raised when a move would overwrite a clue or break the available pool."""
