"""
Single-ply capture detection.

Men capture one step in any of the four diagonal directions, backward
included. Kings fly: they may jump a lone opposing piece from any distance
along an empty diagonal and land on any empty square beyond it.
"""
from __future__ import annotations

from typing import List, Optional

from .board import Board, is_valid_pos
from .types import BOARD_SIZE, DIRECTIONS, Move, Piece, Square


def _man_captures(board: Board, piece: Piece) -> List[Move]:
    r, c = piece.square
    moves: List[Move] = []
    for dr, dc in DIRECTIONS:
        mid = (r + dr, c + dc)
        end = (r + 2 * dr, c + 2 * dc)
        victim = board.piece_at(mid)
        if victim is not None and victim.color != piece.color and board.is_empty(end):
            moves.append(Move(piece.square, end, (mid,)))
    return moves


def _king_captures(board: Board, piece: Piece) -> List[Move]:
    r, c = piece.square
    moves: List[Move] = []
    for dr, dc in DIRECTIONS:
        target: Optional[Square] = None
        for dist in range(1, BOARD_SIZE):
            tr, tc = r + dr * dist, c + dc * dist
            if not is_valid_pos(tr, tc):
                break
            occupant = board.piece_at((tr, tc))
            if target is None:
                if occupant is None:
                    continue
                if occupant.color == piece.color:
                    break
                target = (tr, tc)
            else:
                # second obstruction ends the ray
                if occupant is not None:
                    break
                moves.append(Move(piece.square, (tr, tc), (target,)))
    return moves


def captures_for_piece(board: Board, piece: Piece) -> List[Move]:
    """Every single-jump capture available to ``piece`` on ``board``."""
    if piece.is_king:
        return _king_captures(board, piece)
    return _man_captures(board, piece)
