from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .types import BOARD_SIZE, PIECES_PER_PLAYER, Color, Piece, PieceId, Rank, Square

Grid = Tuple[Tuple[Optional[Piece], ...], ...]


# -----------------------------
# Geometry
# -----------------------------
def is_valid_pos(r: int, c: int) -> bool:
    return 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE


def is_dark_square(r: int, c: int) -> bool:
    """Playable squares are the ones where row + col is even."""
    return (r + c) % 2 == 0


def dark_squares() -> List[Square]:
    return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE) if is_dark_square(r, c)]


@dataclass(frozen=True)
class Board:
    """Immutable 8x8 snapshot. New boards come from ``with_changes`` only."""

    grid: Grid

    def __post_init__(self) -> None:
        if len(self.grid) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in self.grid):
            raise ValueError(f"Board must be a {BOARD_SIZE}x{BOARD_SIZE} grid")
        seen: Set[PieceId] = set()
        per_color: Dict[Color, int] = {Color.WHITE: 0, Color.RED: 0}
        for r, row in enumerate(self.grid):
            for c, piece in enumerate(row):
                if piece is None:
                    continue
                if not is_dark_square(r, c):
                    raise ValueError(f"Piece {piece.id} sits on light square {(r, c)}")
                if piece.square != (r, c):
                    raise ValueError(f"Piece {piece.id} records {piece.square} but is stored at {(r, c)}")
                if piece.id in seen:
                    raise ValueError(f"Duplicate piece id {piece.id}")
                seen.add(piece.id)
                per_color[piece.color] += 1
        for color, n in per_color.items():
            if n > PIECES_PER_PLAYER:
                raise ValueError(f"{color.value} has {n} pieces, limit is {PIECES_PER_PLAYER}")

    @classmethod
    def empty(cls) -> "Board":
        return cls(tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE)))

    @classmethod
    def from_pieces(cls, pieces: List[Piece]) -> "Board":
        return cls.empty().with_changes({p.square: p for p in pieces})

    def piece_at(self, square: Square) -> Optional[Piece]:
        """Bounds-checked lookup; off-board coordinates read as empty."""
        r, c = square
        if not is_valid_pos(r, c):
            return None
        return self.grid[r][c]

    def is_empty(self, square: Square) -> bool:
        r, c = square
        return is_valid_pos(r, c) and self.grid[r][c] is None

    def pieces(self, color: Optional[Color] = None) -> Iterator[Piece]:
        """Yield pieces in row-major order, optionally filtered by color."""
        for row in self.grid:
            for piece in row:
                if piece is not None and (color is None or piece.color == color):
                    yield piece

    def find(self, piece_id: PieceId) -> Optional[Piece]:
        for piece in self.pieces():
            if piece.id == piece_id:
                return piece
        return None

    def count(self, color: Color) -> int:
        return sum(1 for _ in self.pieces(color))

    def with_changes(self, changes: Dict[Square, Optional[Piece]]) -> "Board":
        """Return a new board with the given squares overwritten."""
        rows = [list(row) for row in self.grid]
        for (r, c), piece in changes.items():
            if not is_valid_pos(r, c):
                raise ValueError(f"Square {(r, c)} is off the board")
            rows[r][c] = piece
        return Board(tuple(tuple(row) for row in rows))


def piece_at(board: Board, square: Square) -> Optional[Piece]:
    return board.piece_at(square)


def initial_board() -> Board:
    """Initial position: red men on rows 0..2, white men on rows 5..7."""
    pieces: List[Piece] = []
    for r, c in dark_squares():
        if r <= 2:
            pieces.append(Piece(f"red-{r}-{c}", Color.RED, Rank.MAN, (r, c)))
        elif r >= BOARD_SIZE - 3:
            pieces.append(Piece(f"white-{r}-{c}", Color.WHITE, Rank.MAN, (r, c)))
    return Board.from_pieces(pieces)


def count_pieces(board: Board) -> Tuple[int, int, int, int]:
    """Count pieces of each type on the board.

    Returns:
        Tuple of (white_pieces, red_pieces, white_kings, red_kings)
    """
    whites = board.count(Color.WHITE)
    reds = board.count(Color.RED)
    wk = sum(1 for p in board.pieces(Color.WHITE) if p.is_king)
    rk = sum(1 for p in board.pieces(Color.RED) if p.is_king)
    return whites, reds, wk, rk
