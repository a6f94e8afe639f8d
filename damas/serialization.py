"""
Serialized board and match records for the persistence/sync collaborator.

The board travels as an 8x8 matrix of nullable piece records
``{id, color, isKing, position: {r, c}}``; the match record adds the side to
move, the forced piece id, the winner and any pending draw offer. Records are
pydantic models, so malformed payloads fail with ``ValidationError`` (a
``ValueError``) and decoded boards are re-checked by ``Board`` itself.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from .board import Board
from .types import BOARD_SIZE, Color, Piece, Rank


class PositionRecord(BaseModel):
    r: int = Field(ge=0, lt=BOARD_SIZE)
    c: int = Field(ge=0, lt=BOARD_SIZE)


class PieceRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(min_length=1)
    color: Color
    is_king: bool = Field(default=False, alias="isKing")
    position: PositionRecord

    @classmethod
    def from_piece(cls, piece: Piece) -> "PieceRecord":
        r, c = piece.square
        return cls(id=piece.id, color=piece.color, is_king=piece.is_king,
                   position=PositionRecord(r=r, c=c))

    def to_piece(self) -> Piece:
        rank = Rank.KING if self.is_king else Rank.MAN
        return Piece(self.id, self.color, rank, (self.position.r, self.position.c))


BoardRows = List[List[Optional[PieceRecord]]]
_rows_adapter: TypeAdapter = TypeAdapter(BoardRows)


def _check_shape(rows: BoardRows) -> BoardRows:
    if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
        raise ValueError(f"board_state must be {BOARD_SIZE}x{BOARD_SIZE}")
    return rows


class GameRecord(BaseModel):
    """Everything the store keeps about one match besides clocks and players."""

    board_state: BoardRows
    current_turn: Color
    must_continue_piece_id: Optional[str] = None
    winner: Optional[Literal["white", "red", "draw"]] = None
    draw_offered_by: Optional[Color] = None

    @field_validator("board_state")
    @classmethod
    def validate_shape(cls, v: BoardRows) -> BoardRows:
        return _check_shape(v)


def board_to_rows(board: Board) -> BoardRows:
    return [[PieceRecord.from_piece(p) if p is not None else None for p in row] for row in board.grid]


def board_from_rows(rows: BoardRows) -> Board:
    """Rebuild a Board; raises ValueError when a record sits at the wrong key."""
    _check_shape(rows)
    return Board(tuple(tuple(rec.to_piece() if rec is not None else None for rec in row) for row in rows))


def board_to_data(board: Board) -> List[List[Optional[Dict[str, Any]]]]:
    return _rows_adapter.dump_python(board_to_rows(board), by_alias=True, mode="json")


def board_from_data(data: Any) -> Board:
    return board_from_rows(_rows_adapter.validate_python(data))


def board_to_json(board: Board) -> str:
    return _rows_adapter.dump_json(board_to_rows(board), by_alias=True).decode("utf-8")


def board_from_json(payload: str) -> Board:
    return board_from_rows(_rows_adapter.validate_json(payload))
