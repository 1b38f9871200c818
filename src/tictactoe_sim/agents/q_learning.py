"""Tabular Q-learning agent for Tic-Tac-Toe."""

from typing import Dict, ItemsView

import numpy as np

from tictactoe_sim.board import BoardState, Marker
from tictactoe_sim.exceptions import NoAvailableMoveError

WIN_REWARD = 1.0
DRAW_REWARD = -0.5
LOSS_REWARD = -1.0

# Encoding of the empty board, doubles as "no state visited yet"
EMPTY_STATE = 0


class ValueTable:
    """
    Learned value per encoded board state.

    Unknown states read as ``default`` and are only stored once updated,
    so the table grows monotonically with the states an agent commits to.
    """

    def __init__(self, default: float = 0.0) -> None:
        self.default = default
        self._values: Dict[int, float] = {}

    def get(self, key: int) -> float:
        return self._values.get(key, self.default)

    def update(self, key: int, target: float, alpha: float) -> float:
        """
        Move the value of ``key`` a step of size ``alpha`` towards ``target``.

        Args:
            key: Encoded board state
            target: Observed reward or bootstrapped estimate
            alpha: Learning rate

        Returns:
            The updated value
        """
        current = self.get(key)
        value = current + alpha * (target - current)
        self._values[key] = value
        return value

    def items(self) -> ItemsView[int, float]:
        return self._values.items()

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)


class LearningAgent:
    """
    Tabular Q-learning agent valuing afterstates.

    Each candidate move is scored by the value of the board it produces.
    The agent plays greedily (ties go to the lowest index) except for an
    ``epsilon`` share of moves picked uniformly at random. Greedy moves and
    game outcomes apply a TD(0) update to the last state it committed to:

        V(s) <- V(s) + alpha * (target - V(s))

    where target is the best successor value mid-game, or the reward
    (+1 win, -0.5 draw, -1 loss) at the end. Exploratory moves skip the
    update and leave the previous state untouched.
    """

    def __init__(
        self,
        alpha: float = 0.1,
        epsilon: float = 0.01,
        seed: int | None = None,
        table: ValueTable | None = None,
    ) -> None:
        """
        Initialize the learning agent.

        Args:
            alpha: Learning rate
            epsilon: Probability of an exploratory random move
            seed: Random seed for reproducibility
            table: Value table to own (a fresh one if None)
        """
        self.alpha = alpha
        self.epsilon = epsilon
        self.rng = np.random.default_rng(seed)
        self.table = table if table is not None else ValueTable()
        self.previous_state = EMPTY_STATE

    def select_move(self, board: BoardState, marker: Marker) -> int:
        moves = board.available_moves()
        if not moves:
            raise NoAvailableMoveError("No available moves: board is full")

        best_move = moves[0]
        best_state = board.successor(best_move, marker)
        best_value = self.table.get(best_state)
        for move in moves[1:]:
            state = board.successor(move, marker)
            value = self.table.get(state)
            if value > best_value:
                best_move, best_state, best_value = move, state, value

        if self.rng.random() < self.epsilon:
            return int(self.rng.choice(moves))

        self._learn(best_value)
        self.previous_state = best_state
        return best_move

    def on_win(self, marker: Marker, board: BoardState) -> None:
        self._finish(WIN_REWARD)

    def on_draw(self, board: BoardState) -> None:
        self._finish(DRAW_REWARD)

    def on_loss(self, marker: Marker, board: BoardState) -> None:
        self._finish(LOSS_REWARD)

    def reset(self) -> None:
        """Forget the previous state at the start of a game."""
        self.previous_state = EMPTY_STATE

    def get_stats(self) -> Dict[str, int]:
        """Get statistics about the value table."""
        return {"num_states": len(self.table)}

    def _learn(self, target: float) -> None:
        self.table.update(self.previous_state, target, self.alpha)

    def _finish(self, reward: float) -> None:
        self._learn(reward)
        self.previous_state = EMPTY_STATE
