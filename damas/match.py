"""
Per-match turn management on top of the pure engine.

A Match owns one board and walks the state machine
AWAITING_MOVE -> FORCED_CONTINUATION -> ... -> AWAITING_MOVE[opponent],
ending in GAME_OVER. The owning service is expected to serialize calls per
match; the engine calls underneath are pure.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .applier import apply_move
from .board import Board, initial_board
from .errors import (
    DrawOfferError,
    GameFinishedError,
    IllegalContinuationError,
    InvalidMoveError,
    NotYourTurnError,
    StructuralInvariantViolation,
)
from .gameover import evaluate_game_over
from .moves import MoveGenerator, MoveValidator
from .notation import move_to_str
from .serialization import GameRecord, board_from_rows, board_to_rows
from .types import NO_OUTCOME, Color, GameOutcome, Move, PieceId, Square

logger = logging.getLogger(__name__)


class MatchPhase(str, Enum):
    AWAITING_MOVE = "awaiting_move"
    FORCED_CONTINUATION = "forced_continuation"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class MoveReport:
    """What happened after a successful ``Match.play`` call."""

    move: Move
    promoted: bool
    must_continue: bool
    outcome: GameOutcome


@dataclass
class Match:
    board: Board
    side_to_move: Color
    forced_piece_id: Optional[PieceId] = None
    outcome: GameOutcome = NO_OUTCOME
    draw_offered_by: Optional[Color] = None
    history: List[Move] = field(default_factory=list)
    allow_draw_offers: bool = True
    generator: MoveGenerator = field(default_factory=MoveGenerator, repr=False, compare=False)

    @classmethod
    def new(cls, first_to_move: Optional[Color] = None) -> "Match":
        from config import get_rules_settings
        rules = get_rules_settings()
        if first_to_move is None:
            first_to_move = Color(rules.first_to_move)
        return cls(board=initial_board(), side_to_move=first_to_move,
                   allow_draw_offers=rules.allow_draw_offers)

    @property
    def phase(self) -> MatchPhase:
        if self.outcome.is_over:
            return MatchPhase.GAME_OVER
        if self.forced_piece_id is not None:
            return MatchPhase.FORCED_CONTINUATION
        return MatchPhase.AWAITING_MOVE

    def legal_moves(self) -> List[Move]:
        if self.outcome.is_over:
            return []
        return self.generator.legal_moves(self.board, self.side_to_move, self.forced_piece_id)

    def _ensure_active(self) -> None:
        if self.outcome.is_over:
            raise GameFinishedError(f"match is over ({self.outcome.label()})")

    def play(self, color: Color, origin: Square, target: Square) -> MoveReport:
        """Resolve and apply one ply for ``color``.

        Raises GameFinishedError, NotYourTurnError, IllegalContinuationError or
        InvalidMoveError without touching the board.
        """
        self._ensure_active()
        if color != self.side_to_move:
            raise NotYourTurnError(origin, target, color)
        try:
            move = MoveValidator(self.generator).resolve(
                self.board, color, origin, target, self.forced_piece_id)
        except IllegalContinuationError:
            logger.warning("%s tried %s -> %s while %s must continue",
                           color.value, origin, target, self.forced_piece_id)
            raise
        except InvalidMoveError:
            logger.info("rejected %s move %s -> %s", color.value, origin, target)
            raise

        before = self.board.piece_at(origin)
        self.board = apply_move(self.board, move)
        self.history.append(move)
        piece = self.board.piece_at(target)
        if before is None or piece is None:
            raise StructuralInvariantViolation(f"no piece moved from {origin} to {target}")
        promoted = piece.is_king and not before.is_king

        must_continue = False
        if move.is_capture:
            follow_up = self.generator.legal_moves(self.board, color, piece.id)
            must_continue = bool(follow_up)

        if must_continue:
            self.forced_piece_id = piece.id
            logger.debug("%s must continue capturing with %s", color.value, piece.id)
        else:
            self.forced_piece_id = None
            self.side_to_move = color.opponent

        self.outcome = evaluate_game_over(self.board, self.side_to_move, self.generator)
        logger.info("%s played %s%s", color.value, move_to_str(move), " (promoted)" if promoted else "")
        if self.outcome.is_over:
            self.forced_piece_id = None
            logger.info("match over: %s", self.outcome.label())
        return MoveReport(move=move, promoted=promoted, must_continue=must_continue, outcome=self.outcome)

    def resign(self, color: Color) -> GameOutcome:
        self._ensure_active()
        self._finish(GameOutcome.win(color.opponent))
        logger.info("%s resigned", color.value)
        return self.outcome

    def offer_draw(self, color: Color) -> None:
        self._ensure_active()
        if not self.allow_draw_offers:
            raise DrawOfferError("draw offers are disabled", color)
        if self.draw_offered_by is not None:
            raise DrawOfferError(f"{self.draw_offered_by.value} already offered a draw", color)
        self.draw_offered_by = color
        logger.info("%s offered a draw", color.value)

    def accept_draw(self, color: Color) -> GameOutcome:
        self._ensure_active()
        if self.draw_offered_by is None:
            raise DrawOfferError("no draw offer is pending", color)
        if self.draw_offered_by == color:
            raise DrawOfferError("cannot accept your own draw offer", color)
        self._finish(GameOutcome.draw())
        logger.info("%s accepted the draw", color.value)
        return self.outcome

    def decline_draw(self, color: Color) -> None:
        self._ensure_active()
        if self.draw_offered_by is None or self.draw_offered_by == color:
            raise DrawOfferError("no draw offer to decline", color)
        self.draw_offered_by = None

    def _finish(self, outcome: GameOutcome) -> None:
        self.outcome = outcome
        self.forced_piece_id = None
        self.draw_offered_by = None

    # Persistence boundary

    def to_record(self) -> GameRecord:
        return GameRecord(
            board_state=board_to_rows(self.board),
            current_turn=self.side_to_move,
            must_continue_piece_id=self.forced_piece_id,
            winner=self.outcome.label(),
            draw_offered_by=self.draw_offered_by,
        )

    @classmethod
    def from_record(cls, record: GameRecord) -> "Match":
        board = board_from_rows(record.board_state)
        if record.must_continue_piece_id is not None:
            piece = board.find(record.must_continue_piece_id)
            if piece is None or piece.color != record.current_turn:
                raise ValueError(f"forced piece {record.must_continue_piece_id} is not a "
                                 f"{record.current_turn.value} piece on the board")
        if record.winner == "draw":
            outcome = GameOutcome.draw()
        elif record.winner is not None:
            outcome = GameOutcome.win(Color(record.winner))
        else:
            outcome = NO_OUTCOME
        from config import get_rules_settings
        match = cls(board=board, side_to_move=record.current_turn,
                    forced_piece_id=record.must_continue_piece_id, outcome=outcome,
                    draw_offered_by=record.draw_offered_by,
                    allow_draw_offers=get_rules_settings().allow_draw_offers)
        if match.phase is MatchPhase.FORCED_CONTINUATION and not match.legal_moves():
            raise ValueError(f"forced piece {record.must_continue_piece_id} has no capture left")
        return match
