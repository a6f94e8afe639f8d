from damas.board import Board, initial_board
from damas.gameover import evaluate_game_over, is_terminal
from damas.types import NO_OUTCOME, Color, GameOutcome, Piece, Rank

WHITE = Color.WHITE
RED = Color.RED

# Helpers

def man(color, r, c):
    return Piece(f"{color.value}-{r}-{c}", color, Rank.MAN, (r, c))


def make_board(*pieces):
    return Board.from_pieces(list(pieces))


def test_initial_position_is_not_over():
    board = initial_board()
    assert evaluate_game_over(board, WHITE) == NO_OUTCOME
    assert not is_terminal(board, RED)


def test_side_without_pieces_loses():
    board = make_board(man(WHITE, 5, 1))
    assert evaluate_game_over(board, RED) == GameOutcome.win(WHITE)
    assert evaluate_game_over(board, WHITE) == GameOutcome.win(WHITE)


def test_blocked_side_loses():
    # White man on (1,1) cannot step into row 0 and cannot jump off the board.
    board = make_board(man(WHITE, 1, 1), man(RED, 0, 0), man(RED, 0, 2))
    outcome = evaluate_game_over(board, WHITE)
    assert outcome.winner == RED
    assert outcome.is_over
    assert not outcome.is_draw


def test_outcome_labels():
    assert NO_OUTCOME.label() is None
    assert GameOutcome.win(RED).label() == "red"
    assert GameOutcome.draw().label() == "draw"
