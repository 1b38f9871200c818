"""Test doubles and builders shared across test modules."""

from typing import Iterable, List, Optional

from rich.console import Console

from tictactoe_sim.board import BoardState, Marker


def board_from_string(cells: str) -> BoardState:
    """Build a board from 9 characters of 'X', 'O' or '.'."""
    board = BoardState()
    for index, char in enumerate(cells):
        if char == "X":
            board.place(index, Marker.FIRST)
        elif char == "O":
            board.place(index, Marker.SECOND)
    return board


class ScriptedAgent:
    """Agent replaying a fixed list of moves and recording notifications."""

    def __init__(self, moves: Iterable[int]) -> None:
        self.moves: List[int] = list(moves)
        self.notifications: List[tuple] = []
        self.resets = 0

    def select_move(self, board: BoardState, marker: Marker) -> int:
        return self.moves.pop(0)

    def on_win(self, marker: Marker, board: BoardState) -> None:
        self.notifications.append(("win", marker))

    def on_draw(self, board: BoardState) -> None:
        self.notifications.append(("draw", None))

    def on_loss(self, marker: Marker, board: BoardState) -> None:
        self.notifications.append(("loss", marker))

    def reset(self) -> None:
        self.resets += 1


def console_output(console: Console) -> str:
    return console.file.getvalue()


def scripted_prompt(lines: Iterable[str], prompts: Optional[List[str]] = None):
    """Prompt callable returning ``lines`` one at a time."""
    remaining = list(lines)

    def prompt(text: str) -> str:
        if prompts is not None:
            prompts.append(text)
        return remaining.pop(0)

    return prompt
