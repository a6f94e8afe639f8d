from __future__ import annotations

from typing import Optional

from .board import Board
from .moves import MoveGenerator
from .types import Color, GameOutcome, NO_OUTCOME


def evaluate_game_over(board: Board, side_to_move: Color,
                       generator: Optional[MoveGenerator] = None) -> GameOutcome:
    """Decide the outcome from the current position alone.

    The side to move loses when it has no legal move; otherwise a side with
    no pieces left loses. The core never reports a draw.
    """
    generator = generator or MoveGenerator()
    if not generator.legal_moves(board, side_to_move):
        return GameOutcome.win(side_to_move.opponent)
    if board.count(Color.WHITE) == 0:
        return GameOutcome.win(Color.RED)
    if board.count(Color.RED) == 0:
        return GameOutcome.win(Color.WHITE)
    return NO_OUTCOME


def is_terminal(board: Board, side_to_move: Color) -> bool:
    return evaluate_game_over(board, side_to_move).is_over
