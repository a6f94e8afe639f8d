"""
Functional engine API consumed by the match store and the presentation layer.

    initial_board() -> Board
    legal_moves(board, color, forced_piece_id=None) -> list of Move
    apply_move(board, move) -> Board
    evaluate_game_over(board, side_to_move) -> GameOutcome

Every call is pure: boards are immutable and nothing is retained between calls.
"""
from __future__ import annotations

from .applier import apply_move, promote_if_needed
from .board import Board, count_pieces, initial_board, piece_at
from .captures import captures_for_piece
from .gameover import evaluate_game_over, is_terminal
from .moves import legal_moves, regular_moves_for_piece, resolve_move
from .notation import move_to_str, parse_move_str, parse_square, square_name

__all__ = [
    "Board",
    "initial_board",
    "piece_at",
    "count_pieces",
    "legal_moves",
    "resolve_move",
    "regular_moves_for_piece",
    "captures_for_piece",
    "apply_move",
    "promote_if_needed",
    "evaluate_game_over",
    "is_terminal",
    "square_name",
    "parse_square",
    "move_to_str",
    "parse_move_str",
]
