"""
Type definitions for the Brazilian draughts engine.

This module provides:
- Color and rank enumerations
- Immutable Piece and Move records
- The GameOutcome value returned by game-over evaluation
- Board geometry constants shared by every other module
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Tuple

# Basic type aliases
Square = Tuple[int, int]  # (row, col); playable iff (row + col) is even
Direction = Tuple[int, int]  # (d_row, d_col), each -1 or 1
PieceId = str

BOARD_SIZE: int = 8
PIECES_PER_PLAYER: int = 12

# Scan order used for every per-piece enumeration.
DIRECTIONS: List[Direction] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]


class Color(str, Enum):
    """Side of a piece. Values match the serialized record."""

    WHITE = "white"  # light, starts on rows 5..7, moves toward row 0
    RED = "red"      # dark, starts on rows 0..2, moves toward row 7

    @property
    def opponent(self) -> "Color":
        return Color.RED if self is Color.WHITE else Color.WHITE

    @property
    def forward(self) -> int:
        """Row delta of a non-capturing man move."""
        return 1 if self is Color.RED else -1

    @property
    def promotion_row(self) -> int:
        """Farthest row from this color's starting rows."""
        return BOARD_SIZE - 1 if self is Color.RED else 0


class Rank(str, Enum):
    MAN = "man"
    KING = "king"


@dataclass(frozen=True)
class Piece:
    """A piece on the board. ``square`` always matches its board key."""

    id: PieceId
    color: Color
    rank: Rank
    square: Square

    @property
    def is_king(self) -> bool:
        return self.rank is Rank.KING

    def moved_to(self, square: Square) -> "Piece":
        return replace(self, square=square)

    def promoted(self) -> "Piece":
        return replace(self, rank=Rank.KING)


@dataclass(frozen=True)
class Move:
    """A single ply: one step or one jump.

    ``captures`` lists the squares of the opposing pieces removed by this ply
    and is empty for non-capturing moves.
    """

    origin: Square
    target: Square
    captures: Tuple[Square, ...] = ()

    @property
    def is_capture(self) -> bool:
        return bool(self.captures)


@dataclass(frozen=True)
class GameOutcome:
    """Result of game-over evaluation: nothing yet, a winner, or a draw."""

    winner: Optional[Color] = None
    is_draw: bool = False

    @property
    def is_over(self) -> bool:
        return self.is_draw or self.winner is not None

    @classmethod
    def win(cls, color: Color) -> "GameOutcome":
        return cls(winner=color)

    @classmethod
    def draw(cls) -> "GameOutcome":
        return cls(is_draw=True)

    def label(self) -> Optional[str]:
        """Serialized form: the winning color value, ``"draw"`` or ``None``."""
        if self.is_draw:
            return "draw"
        if self.winner is not None:
            return self.winner.value
        return None


NO_OUTCOME = GameOutcome()
