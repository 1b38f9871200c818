"""Random agent that plays uniformly at random among available cells."""

import numpy as np

from tictactoe_sim.board import BoardState, Marker
from tictactoe_sim.exceptions import NoAvailableMoveError


class RandomAgent:
    """Agent that selects moves uniformly at random from available cells."""

    def __init__(self, seed: int | None = None) -> None:
        """
        Initialize the random agent.

        Args:
            seed: Random seed for reproducibility (optional)
        """
        self.rng = np.random.default_rng(seed)

    def select_move(self, board: BoardState, marker: Marker) -> int:
        moves = board.available_moves()
        if not moves:
            raise NoAvailableMoveError("No available moves: board is full")
        return int(self.rng.choice(moves))

    def on_win(self, marker: Marker, board: BoardState) -> None:
        pass

    def on_draw(self, board: BoardState) -> None:
        pass

    def on_loss(self, marker: Marker, board: BoardState) -> None:
        pass

    def reset(self) -> None:
        """Reset agent state (no-op for stateless agent)."""
        pass
