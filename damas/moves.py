from __future__ import annotations

from typing import List, Optional

from .analyzer import CaptureAnalyzer
from .board import Board, is_valid_pos
from .errors import IllegalContinuationError, InvalidMoveError
from .types import BOARD_SIZE, DIRECTIONS, Color, Move, Piece, PieceId, Square


# -----------------------------
# Regular (non-capturing) moves
# -----------------------------
def regular_moves_for_piece(board: Board, piece: Piece) -> List[Move]:
    r, c = piece.square
    moves: List[Move] = []
    if not piece.is_king:
        dr = piece.color.forward
        for dc in (1, -1):
            target = (r + dr, c + dc)
            if board.is_empty(target):
                moves.append(Move(piece.square, target))
        return moves

    for dr, dc in DIRECTIONS:
        for dist in range(1, BOARD_SIZE):
            tr, tc = r + dr * dist, c + dc * dist
            if not is_valid_pos(tr, tc) or board.piece_at((tr, tc)) is not None:
                break
            moves.append(Move(piece.square, (tr, tc)))
    return moves


def regular_moves(board: Board, color: Color) -> List[Move]:
    moves: List[Move] = []
    for piece in board.pieces(color):
        moves.extend(regular_moves_for_piece(board, piece))
    return moves


class MoveGenerator:
    """Assembles the legal-move set for one side.

    Captures are mandatory and filtered by the majority law. With a forced
    piece, only that piece's captures are considered and regular moves are
    never offered.
    """

    def __init__(self, memoize: Optional[bool] = None) -> None:
        if memoize is None:
            from config import get_engine_settings
            memoize = get_engine_settings().memoize_captures
        self.memoize = bool(memoize)

    def legal_moves(self, board: Board, color: Color,
                    forced_piece_id: Optional[PieceId] = None) -> List[Move]:
        analyzer = CaptureAnalyzer(memoize=self.memoize)
        captures = analyzer.best_captures(board, color, forced_piece_id)
        if captures:
            return captures
        if forced_piece_id is not None:
            return []
        return regular_moves(board, color)


class MoveValidator:
    """Resolves user input against the legal-move set."""

    def __init__(self, generator: Optional[MoveGenerator] = None) -> None:
        self.generator = generator or MoveGenerator()

    def is_legal(self, board: Board, color: Color, move: Move,
                 forced_piece_id: Optional[PieceId] = None) -> bool:
        return move in self.generator.legal_moves(board, color, forced_piece_id)

    def resolve(self, board: Board, color: Color, origin: Square, target: Square,
                forced_piece_id: Optional[PieceId] = None) -> Move:
        """Return the legal move matching ``origin -> target`` or raise."""
        if forced_piece_id is not None:
            piece = board.piece_at(origin)
            if piece is None or piece.id != forced_piece_id:
                raise IllegalContinuationError(origin, target, forced_piece_id)
        for move in self.generator.legal_moves(board, color, forced_piece_id):
            if move.origin == origin and move.target == target:
                return move
        raise InvalidMoveError(origin, target)


# Convenience functional API

def legal_moves(board: Board, color: Color, forced_piece_id: Optional[PieceId] = None,
                memoize: Optional[bool] = None) -> List[Move]:
    return MoveGenerator(memoize=memoize).legal_moves(board, color, forced_piece_id)


def resolve_move(board: Board, color: Color, origin: Square, target: Square,
                 forced_piece_id: Optional[PieceId] = None) -> Move:
    return MoveValidator().resolve(board, color, origin, target, forced_piece_id)
