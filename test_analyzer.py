import pytest

from damas.analyzer import CaptureAnalyzer, _landed
from damas.applier import apply_move
from damas.board import Board
from damas.errors import StructuralInvariantViolation
from damas.moves import legal_moves
from damas.types import Color, Move, Piece, Rank

WHITE = Color.WHITE
RED = Color.RED

# Helpers

def man(color, r, c):
    return Piece(f"{color.value}-{r}-{c}", color, Rank.MAN, (r, c))


def king(color, r, c):
    return Piece(f"{color.value}-k-{r}-{c}", color, Rank.KING, (r, c))


def make_board(*pieces):
    return Board.from_pieces(list(pieces))


def one_vs_two_board():
    # (3,7) can take one piece; (7,7) can take two in a chain.
    return make_board(
        man(WHITE, 3, 7), man(RED, 2, 6),
        man(WHITE, 7, 7), man(RED, 6, 6), man(RED, 4, 4),
    )


def test_majority_law_keeps_only_longest_chain():
    board = one_vs_two_board()
    assert legal_moves(board, WHITE) == [Move((7, 7), (5, 5), ((6, 6),))]


def test_scored_captures_report_chain_totals():
    analyzer = CaptureAnalyzer()
    scored = {s.move.origin: s.total for s in analyzer.scored_captures(one_vs_two_board(), WHITE)}
    assert scored == {(3, 7): 1, (7, 7): 2}
    assert CaptureAnalyzer().max_chain(one_vs_two_board(), WHITE) == 2


def test_equal_chains_on_different_pieces_are_all_legal():
    board = make_board(
        man(WHITE, 3, 7), man(RED, 2, 6),
        man(WHITE, 5, 1), man(RED, 4, 2),
    )
    moves = legal_moves(board, WHITE)
    assert set(moves) == {
        Move((3, 7), (1, 5), ((2, 6),)),
        Move((5, 1), (3, 3), ((4, 2),)),
    }


def test_king_landing_restricted_to_squares_that_continue():
    board = make_board(king(WHITE, 0, 0), man(RED, 2, 2), man(RED, 5, 3))
    assert legal_moves(board, WHITE) == [Move((0, 0), (4, 4), ((2, 2),))]


def test_promotion_mid_capture_counts_toward_majority():
    # Jumping to (0,0) crowns the man, and the new king can then fly over (3,3).
    board = make_board(man(WHITE, 2, 2), man(RED, 1, 1), man(RED, 3, 3))
    assert legal_moves(board, WHITE) == [Move((2, 2), (0, 0), ((1, 1),))]


def test_forced_piece_restricts_to_its_captures():
    board = one_vs_two_board()
    after = apply_move(board, Move((7, 7), (5, 5), ((6, 6),)))
    mover = after.piece_at((5, 5))
    forced = legal_moves(after, WHITE, mover.id)
    assert forced == [Move((5, 5), (3, 3), ((4, 4),))]
    # (3,7) still has a capture of its own, but not while (5,5) is mid-sequence.
    assert Move((3, 7), (1, 5), ((2, 6),)) in legal_moves(after, WHITE)
    assert all(m.origin == (5, 5) for m in forced)


def test_forced_piece_without_capture_has_no_moves():
    board = make_board(man(WHITE, 5, 1), man(RED, 0, 0))
    assert legal_moves(board, WHITE, "white-5-1") == []
    assert legal_moves(board, WHITE) != []


def test_forced_piece_of_wrong_color_yields_nothing():
    board = one_vs_two_board()
    assert legal_moves(board, WHITE, "red-2-6") == []


def test_memoization_does_not_change_results():
    boards = [
        one_vs_two_board(),
        make_board(king(WHITE, 0, 0), man(RED, 2, 2), man(RED, 5, 3)),
        make_board(king(RED, 7, 7), man(WHITE, 5, 5), man(WHITE, 2, 4), man(WHITE, 2, 2), man(WHITE, 5, 1)),
    ]
    for board in boards:
        for color in (WHITE, RED):
            assert legal_moves(board, color, memoize=True) == legal_moves(board, color, memoize=False)


def test_memo_reuses_subsearches():
    board = make_board(king(RED, 7, 7), man(WHITE, 5, 5), man(WHITE, 2, 4), man(WHITE, 2, 2), man(WHITE, 5, 1))
    cached = CaptureAnalyzer(memoize=True)
    plain = CaptureAnalyzer(memoize=False)
    assert cached.best_captures(board, RED) == plain.best_captures(board, RED)
    assert cached.nodes_visited <= plain.nodes_visited


def test_missing_landed_piece_is_a_structural_violation():
    with pytest.raises(StructuralInvariantViolation):
        _landed(Board.empty(), Move((5, 5), (3, 3), ((4, 4),)))
