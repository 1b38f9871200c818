"""Drive a single game between two agents."""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console

from tictactoe_sim.agents.base import Agent
from tictactoe_sim.board import CELL_COUNT, BoardState, GameOutcome, Marker
from tictactoe_sim.exceptions import InvalidMoveError

MARKERS = (Marker.FIRST, Marker.SECOND)


@dataclass
class GameRecord:
    """Result of one completed game."""

    outcome: GameOutcome
    num_moves: int
    board: BoardState


def play_game(
    first_agent: Agent,
    second_agent: Agent,
    console: Optional[Console] = None,
) -> GameRecord:
    """
    Play a single game between two agents.

    Agents alternate by move parity: even moves belong to ``first_agent``
    playing X, odd moves to ``second_agent`` playing O. After every move
    the mover's win is checked before the board is checked for fullness,
    so a move that completes a line on the last empty cell is a win.

    Args:
        first_agent: Agent playing X (moves first)
        second_agent: Agent playing O
        console: If given, print each move and the resulting board

    Returns:
        GameRecord with the outcome, number of moves and final board

    Raises:
        InvalidMoveError: If an agent picks an occupied or out-of-range cell
    """
    agents = (first_agent, second_agent)
    first_agent.reset()
    second_agent.reset()

    board = BoardState()

    # Each move fills one empty cell, so the game ends within CELL_COUNT moves
    for move_count in range(CELL_COUNT):
        turn = move_count % 2
        agent, other_agent = agents[turn], agents[1 - turn]
        marker = MARKERS[turn]

        move = agent.select_move(board, marker)
        if not 0 <= move < CELL_COUNT or not board.is_available(move):
            raise InvalidMoveError(
                f"{marker.char} chose cell {move}, which is not available"
            )
        board.place(move, marker)
        num_moves = move_count + 1

        if console is not None:
            console.print(f"Move {num_moves}: {marker.char} plays {move + 1}")
            console.print(board.render(), highlight=False)
            console.print()

        if board.has_winner(marker):
            agent.on_win(marker, board)
            other_agent.on_loss(marker.other, board)
            return GameRecord(GameOutcome.win_for(marker), num_moves, board)

        if board.is_full():
            agent.on_draw(board)
            other_agent.on_draw(board)
            return GameRecord(GameOutcome.DRAW, num_moves, board)

    raise InvalidMoveError("Game did not terminate after all cells were filled")
