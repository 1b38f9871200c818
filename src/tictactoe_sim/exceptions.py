"""Tic-Tac-Toe simulator exception classes."""


class TicTacToeError(Exception):
    """Base exception for all simulator errors."""

    pass


class NoAvailableMoveError(TicTacToeError):
    """Raised when a move is requested from a board with no empty cell."""

    pass


class InvalidMoveError(TicTacToeError):
    """Raised when an agent returns an occupied or out-of-range cell."""

    pass


class ConfigurationError(TicTacToeError):
    """Raised when run configuration is invalid."""

    pass
