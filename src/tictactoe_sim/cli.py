"""Command line interface for the Tic-Tac-Toe simulator."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from tictactoe_sim.agents import InteractiveAgent, RandomAgent
from tictactoe_sim.config import load_config
from tictactoe_sim.exceptions import TicTacToeError
from tictactoe_sim.train import TrainingDriver, evaluate
from tictactoe_sim.visualize import plot_evaluation_curve, print_summary

console = Console()


@click.group()
def cli() -> None:
    """Tic-Tac-Toe simulator with self-play Q-learning.

    \b
    Examples:
        tictactoe-sim train                       # Train and evaluate vs random
        tictactoe-sim train --opponent interactive
        tictactoe-sim play --games 3              # Play against a random agent
    """


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to YAML configuration file",
)
@click.option("--episodes", type=int, help="Number of self-play training episodes")
@click.option("--eval-episodes", type=int, help="Number of evaluation episodes")
@click.option(
    "--opponent",
    type=click.Choice(["random", "interactive"]),
    help="Opponent for evaluation",
)
@click.option(
    "--learner-second",
    is_flag=True,
    help="Evaluate the learner playing O instead of X",
)
@click.option("--seed", type=int, help="Random seed")
@click.option("--verbose", "-v", is_flag=True, help="Print every evaluation move")
@click.option(
    "--save-plot",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to save the evaluation curve",
)
def train(
    config_path: Optional[Path],
    episodes: Optional[int],
    eval_episodes: Optional[int],
    opponent: Optional[str],
    learner_second: bool,
    seed: Optional[int],
    verbose: bool,
    save_plot: Optional[Path],
) -> None:
    """Train two learners by self-play, then evaluate one of them."""
    # Unset flags must not override the configuration file
    config = load_config(
        config_path,
        overrides={
            "training_episodes": episodes,
            "evaluation_episodes": eval_episodes,
            "opponent": opponent,
            "learner_plays_first": False if learner_second else None,
            "seed": seed,
            "verbose": True if verbose else None,
        },
    )

    report = TrainingDriver(config, console=console).run()
    print_summary(report, console)

    if save_plot:
        save_plot.parent.mkdir(parents=True, exist_ok=True)
        plot_evaluation_curve(
            report.evaluation,
            title=f"Q-Learning vs {config.opponent}",
            save_path=str(save_plot),
        )
        console.print(f"Saved plot to {save_plot}")


@cli.command()
@click.option("--games", type=click.IntRange(min=1), default=3, show_default=True, help="Number of games")
@click.option("--human-second", is_flag=True, help="Play O instead of X")
@click.option("--seed", type=int, help="Random seed for the computer player")
def play(games: int, human_second: bool, seed: Optional[int]) -> None:
    """Play against a random agent."""
    human = InteractiveAgent(console=console)
    computer = RandomAgent(seed=seed)

    if human_second:
        evaluate(computer, human, games, console=console)
    else:
        evaluate(human, computer, games, console=console)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except TicTacToeError as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)


if __name__ == "__main__":
    main()
