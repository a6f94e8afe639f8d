"""
Exceptions raised by the engine and the match layer.

InvalidMoveError and its subclasses are recoverable: the caller rejects the
attempted move and the board is left untouched. StructuralInvariantViolation
means a caller bypassed legal-move generation and is a programming error.
"""
from __future__ import annotations

from typing import Optional

from .types import Color, PieceId, Square


class DamasError(Exception):
    """Base class for all engine errors."""


class InvalidMoveError(DamasError):
    """The proposed move is not in the current legal-move set."""

    def __init__(self, origin: Square, target: Square, reason: str = "not a legal move") -> None:
        self.origin = origin
        self.target = target
        self.reason = reason
        super().__init__(f"{origin} -> {target}: {reason}")


class IllegalContinuationError(InvalidMoveError):
    """A piece other than the forced capturer was moved mid-sequence."""

    def __init__(self, origin: Square, target: Square, forced_piece_id: PieceId) -> None:
        self.forced_piece_id = forced_piece_id
        super().__init__(origin, target, f"piece {forced_piece_id} must continue capturing")


class NotYourTurnError(InvalidMoveError):
    def __init__(self, origin: Square, target: Square, color: Color) -> None:
        self.color = color
        super().__init__(origin, target, f"it is not {color.value}'s turn")


class GameFinishedError(DamasError):
    """An action was attempted on a match that already has an outcome."""


class DrawOfferError(DamasError):
    def __init__(self, message: str, color: Optional[Color] = None) -> None:
        self.color = color
        super().__init__(message)


class StructuralInvariantViolation(DamasError):
    """apply_move received a move whose origin is empty or target is occupied."""
