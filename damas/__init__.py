"""Brazilian draughts engine.

Usage examples:
    from damas import initial_board, legal_moves, apply_move, Color
    from damas import Match
"""
from __future__ import annotations

# Engine API
from .engine import (
    Board,
    initial_board,
    piece_at,
    count_pieces,
    legal_moves,
    resolve_move,
    apply_move,
    evaluate_game_over,
    is_terminal,
    move_to_str,
    parse_move_str,
)

from .types import Color, Rank, Piece, Move, GameOutcome, Square
from .errors import (
    DamasError,
    InvalidMoveError,
    IllegalContinuationError,
    NotYourTurnError,
    GameFinishedError,
    DrawOfferError,
    StructuralInvariantViolation,
)

# Match state machine
from .match import Match, MatchPhase, MoveReport
