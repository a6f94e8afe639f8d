"""
Human-readable square and move notation.

Files a..h are columns 0..7; rank is 8 - row, so white's back row reads as
rank 1. Regular moves print as ``c3-d4``, captures as ``c3xe5``.
"""
from __future__ import annotations

from typing import Optional, Tuple

from .board import is_valid_pos
from .types import BOARD_SIZE, Move, Square

FILES = "abcdefgh"


def square_name(square: Square) -> str:
    r, c = square
    return f"{FILES[c]}{BOARD_SIZE - r}"


def parse_square(s: str) -> Optional[Square]:
    s = s.strip().lower()
    if len(s) != 2 or s[0] not in FILES or not s[1].isdigit():
        return None
    r, c = BOARD_SIZE - int(s[1]), FILES.index(s[0])
    if not is_valid_pos(r, c):
        return None
    return (r, c)


def move_to_str(move: Move) -> str:
    sep = "x" if move.is_capture else "-"
    return f"{square_name(move.origin)}{sep}{square_name(move.target)}"


def parse_move_str(s: str) -> Optional[Tuple[Square, Square]]:
    """Parse ``"c3-d4"`` or ``"c3xe5"`` into ``(origin, target)``."""
    s = s.strip().lower().replace(" ", "")
    if not s:
        return None
    sep = "x" if "x" in s else "-"
    parts = [p for p in s.split(sep) if p]
    if len(parts) != 2:
        return None
    origin, target = parse_square(parts[0]), parse_square(parts[1])
    if origin is None or target is None:
        return None
    return origin, target
