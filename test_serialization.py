import json

import pytest
from pydantic import ValidationError

from damas.board import Board, initial_board
from damas.serialization import (
    GameRecord,
    PieceRecord,
    board_from_data,
    board_from_json,
    board_from_rows,
    board_to_data,
    board_to_json,
    board_to_rows,
)
from damas.types import Color, Piece, Rank


def test_board_json_round_trip_preserves_pieces():
    board = initial_board().with_changes({
        (5, 1): None,
        (4, 0): Piece("white-5-1", Color.WHITE, Rank.KING, (4, 0)),
    })
    assert board_from_json(board_to_json(board)) == board


def test_serialized_shape_matches_store_record():
    data = board_to_data(initial_board())
    assert len(data) == 8 and all(len(row) == 8 for row in data)
    assert data[0][0] == {"id": "red-0-0", "color": "red", "isKing": False, "position": {"r": 0, "c": 0}}
    assert data[0][1] is None
    json.dumps(data)


def test_board_from_store_data():
    data = [[None] * 8 for _ in range(8)]
    data[3][3] = {"id": "w1", "color": "white", "isKing": True, "position": {"r": 3, "c": 3}}
    board = board_from_data(data)
    piece = board.piece_at((3, 3))
    assert piece.is_king and piece.color == Color.WHITE and piece.id == "w1"


def test_record_at_wrong_key_is_rejected():
    rows = board_to_rows(Board.empty())
    rows[2][2] = PieceRecord(id="r1", color=Color.RED, is_king=False, position={"r": 4, "c": 4})
    with pytest.raises(ValueError):
        board_from_rows(rows)


def test_bad_color_is_rejected():
    data = [[None] * 8 for _ in range(8)]
    data[0][0] = {"id": "x", "color": "blue", "isKing": False, "position": {"r": 0, "c": 0}}
    with pytest.raises(ValidationError):
        board_from_data(data)


def test_wrong_shape_is_rejected():
    with pytest.raises(ValueError):
        board_from_data([[None] * 8 for _ in range(7)])


def test_game_record_validation():
    rows = board_to_rows(initial_board())
    record = GameRecord(board_state=rows, current_turn="white")
    assert record.current_turn is Color.WHITE
    assert record.winner is None
    with pytest.raises(ValidationError):
        GameRecord(board_state=rows, current_turn="white", winner="nobody")
    with pytest.raises(ValidationError):
        GameRecord(board_state=rows[:4], current_turn="red")
