"""Plots and summary tables for training runs."""

from typing import Optional

import matplotlib.pyplot as plt
from rich.console import Console
from rich.table import Table

from tictactoe_sim.train import ResultTally, TrainingReport


def plot_evaluation_curve(
    tally: ResultTally,
    save_path: str,
    title: str = "Evaluation Results",
) -> None:
    """
    Plot cumulative X wins, O wins and draws per evaluation episode.

    Args:
        tally: Tally whose history is plotted
        save_path: Path to save figure
        title: Plot title
    """
    episodes = [entry["episode"] for entry in tally.history]

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(episodes, [e["first_wins"] for e in tally.history], label="X Wins", linewidth=2)
    ax.plot(episodes, [e["second_wins"] for e in tally.history], label="O Wins", linewidth=2)
    ax.plot(episodes, [e["draws"] for e in tally.history], label="Draws", linewidth=2)
    ax.set_xlabel("Episode")
    ax.set_ylabel("Count")
    ax.set_title(title, fontsize=14, fontweight="bold")
    ax.legend()
    ax.grid(True, alpha=0.3)

    plt.tight_layout()

    fig.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)


def print_summary(report: TrainingReport, console: Optional[Console] = None) -> None:
    """
    Print training and evaluation tallies as a table.

    Args:
        report: Report returned by TrainingDriver.run
        console: Console to print to
    """
    console = console or Console()

    table = Table(title="Training Summary")
    table.add_column("Phase", style="cyan")
    table.add_column("Games", justify="right")
    table.add_column("X Wins", justify="right")
    table.add_column("O Wins", justify="right")
    table.add_column("Draws", justify="right")
    table.add_column("Avg Moves", justify="right")

    for phase, tally in (("Self-play", report.training), ("Evaluation", report.evaluation)):
        stats = tally.to_dict()
        table.add_row(
            phase,
            str(stats["games"]),
            f"{stats['first_wins']} ({stats['first_win_rate']:.0%})",
            f"{stats['second_wins']} ({stats['second_win_rate']:.0%})",
            f"{stats['draws']} ({stats['draw_rate']:.0%})",
            f"{stats['avg_moves_per_game']:.1f}",
        )

    console.print(table)
    console.print(
        f"Value table sizes: X learner {report.first_table_size}, "
        f"O learner {report.second_table_size}"
    )
