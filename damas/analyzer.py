"""
Majority-law capture analysis ("Lei da Maioria").

Capturing is mandatory, and among all root captures of all of a player's
pieces only those whose total chain length equals the global maximum are
legal. The chain length of a root jump is one plus the best continuation the
same piece can reach from the resulting position.
"""
from __future__ import annotations

import logging
from typing import Dict, List, NamedTuple, Optional, Tuple

from .applier import apply_move
from .board import Board
from .captures import captures_for_piece
from .errors import StructuralInvariantViolation
from .types import Color, Move, Piece, PieceId

logger = logging.getLogger(__name__)


class ScoredCapture(NamedTuple):
    move: Move
    total: int  # this jump plus the best continuation


def _landed(board: Board, move: Move) -> Piece:
    piece = board.piece_at(move.target)
    if piece is None:
        raise StructuralInvariantViolation(f"nothing landed on {move.target}")
    return piece


class CaptureAnalyzer:
    """Recursive capture search over immutable boards.

    One analyzer is meant to serve a single legal-move query; its memo is
    keyed on ``(board, piece id)`` and is dropped with the instance.
    """

    def __init__(self, memoize: bool = True) -> None:
        self.memoize = bool(memoize)
        self._memo: Dict[Tuple[Board, PieceId], int] = {}
        self.nodes_visited: int = 0

    def continuation(self, board: Board, piece: Piece) -> int:
        """Longest number of further captures ``piece`` can make from ``board``."""
        key = (board, piece.id)
        if self.memoize and key in self._memo:
            return self._memo[key]
        self.nodes_visited += 1

        best = 0
        for move in captures_for_piece(board, piece):
            nb = apply_move(board, move)
            best = max(best, 1 + self.continuation(nb, _landed(nb, move)))

        if self.memoize:
            self._memo[key] = best
        return best

    def scored_captures(self, board: Board, color: Color,
                        forced_piece_id: Optional[PieceId] = None) -> List[ScoredCapture]:
        """All root captures for ``color`` with their chain totals, unfiltered."""
        scored: List[ScoredCapture] = []
        for piece in board.pieces(color):
            if forced_piece_id is not None and piece.id != forced_piece_id:
                continue
            for move in captures_for_piece(board, piece):
                nb = apply_move(board, move)
                scored.append(ScoredCapture(move, 1 + self.continuation(nb, _landed(nb, move))))
        return scored

    def best_captures(self, board: Board, color: Color,
                      forced_piece_id: Optional[PieceId] = None) -> List[Move]:
        """Root captures tying the global maximum chain length, in scan order."""
        scored = self.scored_captures(board, color, forced_piece_id)
        if not scored:
            return []
        top = max(s.total for s in scored)
        logger.debug("capture analysis for %s: %d roots, max chain %d, %d nodes",
                     color.value, len(scored), top, self.nodes_visited)
        return [s.move for s in scored if s.total == top]

    def max_chain(self, board: Board, color: Color,
                  forced_piece_id: Optional[PieceId] = None) -> int:
        scored = self.scored_captures(board, color, forced_piece_id)
        return max((s.total for s in scored), default=0)
