"""Self-play training and evaluation for Q-learning agents."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from rich.console import Console

from tictactoe_sim.agents.base import Agent
from tictactoe_sim.agents.interactive import InteractiveAgent
from tictactoe_sim.agents.q_learning import LearningAgent
from tictactoe_sim.agents.random import RandomAgent
from tictactoe_sim.board import GameOutcome
from tictactoe_sim.config import RunConfig
from tictactoe_sim.referee import play_game


class ResultTally:
    """Running count of game outcomes, with per-episode history."""

    def __init__(self) -> None:
        """Initialize empty tallies."""
        self.first_wins = 0
        self.second_wins = 0
        self.draws = 0
        self.total_moves = 0
        self.history: List[Dict[str, int]] = []

    @property
    def games(self) -> int:
        return self.first_wins + self.second_wins + self.draws

    def record(self, outcome: GameOutcome, num_moves: int = 0) -> None:
        """Count one finished game and append the cumulative totals."""
        if outcome is GameOutcome.FIRST_WINS:
            self.first_wins += 1
        elif outcome is GameOutcome.SECOND_WINS:
            self.second_wins += 1
        else:
            self.draws += 1
        self.total_moves += num_moves

        self.history.append({
            "episode": self.games,
            "first_wins": self.first_wins,
            "second_wins": self.second_wins,
            "draws": self.draws,
        })

    def rate(self, count: int) -> float:
        return count / self.games if self.games > 0 else 0.0

    def summary(self) -> str:
        return f"X wins: {self.first_wins}\t O wins: {self.second_wins}\t Draws: {self.draws}"

    def to_dict(self) -> Dict[str, float]:
        """Convert tallies to dictionary."""
        games = self.games
        return {
            "games": games,
            "first_wins": self.first_wins,
            "second_wins": self.second_wins,
            "draws": self.draws,
            "first_win_rate": self.rate(self.first_wins),
            "second_win_rate": self.rate(self.second_wins),
            "draw_rate": self.rate(self.draws),
            "avg_moves_per_game": self.total_moves / games if games > 0 else 0.0,
        }


@dataclass
class TrainingReport:
    """Outcome of a training run."""

    training: ResultTally
    evaluation: ResultTally
    first_table_size: int
    second_table_size: int


def self_play(
    first: LearningAgent,
    second: LearningAgent,
    num_episodes: int,
    report_interval: int = 1000,
    console: Optional[Console] = None,
) -> ResultTally:
    """
    Train two learning agents against each other.

    Each agent updates only its own value table.

    Args:
        first: Learning agent playing X
        second: Learning agent playing O
        num_episodes: Number of training games
        report_interval: Episodes between progress lines
        console: Print progress if given

    Returns:
        ResultTally of the training games
    """
    tally = ResultTally()

    for episode in range(1, num_episodes + 1):
        record = play_game(first, second)
        tally.record(record.outcome, record.num_moves)

        if console is not None and episode % report_interval == 0:
            stats = tally.to_dict()
            console.print(
                f"Episode {episode}/{num_episodes} | "
                f"X: {stats['first_win_rate']:.1%} | "
                f"O: {stats['second_win_rate']:.1%} | "
                f"Draw: {stats['draw_rate']:.1%} | "
                f"States: {len(first.table)}/{len(second.table)}"
            )

    return tally


def evaluate(
    first: Agent,
    second: Agent,
    num_episodes: int,
    console: Optional[Console] = None,
    verbose: bool = False,
) -> ResultTally:
    """
    Play evaluation games, reporting the running tally after each one.

    Args:
        first: Agent playing X
        second: Agent playing O
        num_episodes: Number of games to play
        console: Print the running tally if given
        verbose: Also print every move (requires console)

    Returns:
        ResultTally of the evaluation games
    """
    tally = ResultTally()

    for _ in range(num_episodes):
        record = play_game(first, second, console if verbose else None)
        tally.record(record.outcome, record.num_moves)
        if console is not None:
            console.print(tally.summary(), highlight=False)

    return tally


class TrainingDriver:
    """
    Train a pair of learning agents by self-play, then evaluate one of them.

    The two learners keep separate value tables; nothing learned by the
    X player is visible to the O player.
    """

    def __init__(self, config: RunConfig, console: Optional[Console] = None) -> None:
        self.config = config
        self.console = console

        first_seed, second_seed, opponent_seed = _derive_seeds(config.seed)
        self.first_learner = LearningAgent(
            alpha=config.alpha, epsilon=config.epsilon, seed=first_seed
        )
        self.second_learner = LearningAgent(
            alpha=config.alpha, epsilon=config.epsilon, seed=second_seed
        )
        self.opponent = self._build_opponent(opponent_seed)

    def run(self) -> TrainingReport:
        config = self.config

        if self.console is not None:
            self.console.print(
                f"[bold]Self-play training[/bold] ({config.training_episodes} episodes)"
            )
        training = self_play(
            self.first_learner,
            self.second_learner,
            config.training_episodes,
            report_interval=config.report_interval,
            console=self.console,
        )

        if config.learner_plays_first:
            first, second = self.first_learner, self.opponent
        else:
            first, second = self.opponent, self.second_learner

        if self.console is not None:
            self.console.print(
                f"[bold]Evaluation[/bold] vs {config.opponent} "
                f"({config.evaluation_episodes} episodes)"
            )
        evaluation = evaluate(
            first,
            second,
            config.evaluation_episodes,
            console=self.console,
            verbose=config.verbose,
        )

        return TrainingReport(
            training=training,
            evaluation=evaluation,
            first_table_size=len(self.first_learner.table),
            second_table_size=len(self.second_learner.table),
        )

    def _build_opponent(self, seed: int | None) -> Agent:
        if self.config.opponent == "interactive":
            return InteractiveAgent(console=self.console)
        return RandomAgent(seed=seed)


def _derive_seeds(
    seed: int | None,
) -> Tuple[Optional[int], Optional[int], Optional[int]]:
    """Give each agent its own reproducible stream."""
    if seed is None:
        return None, None, None
    return seed, seed + 1, seed + 2
