"""Bit-packed Tic-Tac-Toe board."""

from enum import Enum
from typing import List, Optional

CELL_COUNT = 9

# Rows, columns, diagonals
WINNING_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

# High bit of every 2-bit cell field
OCCUPIED_MASK = 0b101010101010101010

EMPTY_CHAR = " "


class Marker(Enum):
    """
    Turn identity of a player.

    Each marker carries its display character and the 2-bit code written
    into a cell: the high bit marks the cell occupied, the low bit tells
    the first mover apart from the second.
    """

    FIRST = ("X", 0b11)
    SECOND = ("O", 0b10)

    def __init__(self, char: str, code: int) -> None:
        self.char = char
        self.code = code

    @property
    def other(self) -> "Marker":
        """The opposing marker."""
        return Marker.SECOND if self is Marker.FIRST else Marker.FIRST


class GameOutcome(Enum):
    """Result of a completed game."""

    FIRST_WINS = "first_wins"
    SECOND_WINS = "second_wins"
    DRAW = "draw"

    @classmethod
    def win_for(cls, marker: Marker) -> "GameOutcome":
        return cls.FIRST_WINS if marker is Marker.FIRST else cls.SECOND_WINS


class BoardState:
    """
    3x3 board packed into a single integer, two bits per cell.

    Cell ``i`` occupies bits ``2i`` and ``2i + 1``:
        00 = empty, 10 = O (second mover), 11 = X (first mover)

    The packed integer doubles as the key into a value table.
    """

    __slots__ = ("spaces",)

    def __init__(self, spaces: int = 0) -> None:
        self.spaces = spaces

    @property
    def encoding(self) -> int:
        return self.spaces

    def marker_at(self, index: int) -> Optional[Marker]:
        """
        Get the marker stored in a cell.

        X is tested first: O's code is a subset of X's, so an O-mask test
        would also match an X cell.

        Args:
            index: Board position (0-8)

        Returns:
            The marker in the cell, or None if the cell is empty
        """
        x_mask = Marker.FIRST.code << (index * 2)
        o_mask = Marker.SECOND.code << (index * 2)
        if self.spaces & x_mask == x_mask:
            return Marker.FIRST
        if self.spaces & o_mask == o_mask:
            return Marker.SECOND
        return None

    def char_at(self, index: int) -> str:
        marker = self.marker_at(index)
        return marker.char if marker is not None else EMPTY_CHAR

    def is_available(self, index: int) -> bool:
        mask = 0b11 << (index * 2)
        return self.spaces & mask == 0

    def available_moves(self) -> List[int]:
        """Indices of empty cells in ascending order."""
        return [i for i in range(CELL_COUNT) if self.is_available(i)]

    def place(self, index: int, marker: Marker) -> None:
        """
        Write a marker into a cell.

        The cell must be available; an occupied cell is not protected and
        would be corrupted by the OR.
        """
        self.spaces |= marker.code << (index * 2)

    def successor(self, index: int, marker: Marker) -> int:
        """Encoding of this board after placing ``marker`` at ``index``."""
        return self.spaces | (marker.code << (index * 2))

    def has_winner(self, marker: Marker) -> bool:
        return any(
            all(self.char_at(i) == marker.char for i in line)
            for line in WINNING_LINES
        )

    def is_full(self) -> bool:
        """
        Check whether every cell is occupied.

        A full board is only a draw once neither marker has a winning line.
        """
        return self.spaces & OCCUPIED_MASK == OCCUPIED_MASK

    def render(self) -> str:
        rows = [
            "|".join(self.char_at(row * 3 + col) for col in range(3))
            for row in range(3)
        ]
        return "\n-----\n".join(rows)

    def copy(self) -> "BoardState":
        return BoardState(self.spaces)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self.spaces == other.spaces

    def __hash__(self) -> int:
        return hash(self.spaces)

    def __repr__(self) -> str:
        return f"BoardState(0b{self.spaces:018b})"

    def __str__(self) -> str:
        return self.render()
