"""Protocol for Tic-Tac-Toe agents."""

from typing import Protocol

from tictactoe_sim.board import BoardState, Marker


class Agent(Protocol):
    """Protocol for Tic-Tac-Toe agents."""

    def select_move(self, board: BoardState, marker: Marker) -> int:
        """
        Select a move for the given marker.

        Args:
            board: Current board
            marker: Marker the agent plays this game

        Returns:
            Index (0-8) of an available cell
        """
        ...

    def on_win(self, marker: Marker, board: BoardState) -> None:
        """Notify the agent that it won with ``marker``."""
        ...

    def on_draw(self, board: BoardState) -> None:
        """Notify the agent that the game was drawn."""
        ...

    def on_loss(self, marker: Marker, board: BoardState) -> None:
        """Notify the agent that it lost while playing ``marker``."""
        ...

    def reset(self) -> None:
        """
        Reset per-game state at the start of a new game.

        Optional for stateless agents.
        """
        ...
