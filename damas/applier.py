from __future__ import annotations

from typing import Dict, Optional

from .board import Board
from .errors import StructuralInvariantViolation
from .types import Move, Piece, Square


def promote_if_needed(piece: Piece) -> Piece:
    """Promote a man standing on its farthest row. Kings are returned as-is."""
    if not piece.is_king and piece.square[0] == piece.color.promotion_row:
        return piece.promoted()
    return piece


def apply_move(board: Board, move: Move) -> Board:
    """Apply a single ply and return the resulting board.

    The input board is never modified. Captured squares are cleared and the
    moving piece is promoted if it lands on its farthest row, including in
    the middle of a capture sequence.
    """
    piece = board.piece_at(move.origin)
    if piece is None:
        raise StructuralInvariantViolation(f"No piece on origin square {move.origin}")
    if not board.is_empty(move.target):
        raise StructuralInvariantViolation(f"Target square {move.target} is occupied or off the board")

    changes: Dict[Square, Optional[Piece]] = {move.origin: None}
    for sq in move.captures:
        changes[sq] = None
    changes[move.target] = promote_if_needed(piece.moved_to(move.target))
    return board.with_changes(changes)
