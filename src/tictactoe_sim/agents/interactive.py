"""Human agent reading moves from the terminal."""

from typing import Callable, Optional

import click
from rich.console import Console

from tictactoe_sim.board import BoardState, Marker

PROMPT_TEXT = "Enter a number between 1 and 9"
INVALID_INPUT_MESSAGE = "Invalid input. Please enter a number between 1 and 9."
TAKEN_MESSAGE = "That space is taken. Try again."


def _prompt_line(text: str) -> str:
    # Blank lines must reach _parse so they are reported as invalid
    return click.prompt(text, type=str, default="", show_default=False, prompt_suffix=": ")


class InteractiveAgent:
    """
    Agent controlled by a person at the terminal.

    Cells are numbered 1-9 in row-major order. Bad input never consumes a
    turn: the board is shown again and the player is re-prompted.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        prompt: Optional[Callable[[str], str]] = None,
    ) -> None:
        """
        Initialize the interactive agent.

        Args:
            console: Console for board and message output
            prompt: Callable that shows a prompt and returns one line of input
        """
        self.console = console or Console()
        self.prompt = prompt or _prompt_line

    def select_move(self, board: BoardState, marker: Marker) -> int:
        while True:
            self._show(board)
            self.console.print(f"{marker.char} to move!")
            raw = self.prompt(PROMPT_TEXT)

            index = self._parse(raw)
            if index is None:
                self.console.print(INVALID_INPUT_MESSAGE, style="red")
                continue

            if not board.is_available(index):
                self.console.print(TAKEN_MESSAGE, style="yellow")
                continue

            return index

    def on_win(self, marker: Marker, board: BoardState) -> None:
        self._show(board)
        self.console.print(f"Player {marker.char} wins!", style="bold green")

    def on_draw(self, board: BoardState) -> None:
        self._show(board)
        self.console.print("It's a draw!", style="bold")

    def on_loss(self, marker: Marker, board: BoardState) -> None:
        self._show(board)
        self.console.print(f"Player {marker.char} loses!", style="bold red")

    def reset(self) -> None:
        """Reset agent state (no-op for stateless agent)."""
        pass

    def _show(self, board: BoardState) -> None:
        self.console.print(board.render(), highlight=False)

    @staticmethod
    def _parse(raw: str) -> Optional[int]:
        """Convert a 1-9 cell number to a zero-based index, or None."""
        try:
            number = int(raw.strip())
        except ValueError:
            return None
        if not 1 <= number <= 9:
            return None
        return number - 1
