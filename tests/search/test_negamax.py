from __future__ import annotations

import pytest

from randomchess.engine.board import Board
from randomchess.eval import evaluate
from randomchess.search.service import NO_MOVES_SCORE, SearchService


# White rook on d1 can win the undefended queen on d5; nothing else captures
WIN_QUEEN = "4k3/8/8/3q4/8/8/8/3RK3 w - - 0 1"


def test_depth_zero_is_signed_material() -> None:
    svc = SearchService()
    white = Board.from_fen("4k3/8/8/8/8/8/8/3QK3 w")
    black = Board.from_fen("4k3/8/8/8/8/8/8/3QK3 b")
    assert svc.negamax(white, 0) == evaluate(white) == 900
    assert svc.negamax(black, 0) == -evaluate(black) == -900


def test_no_moves_scores_the_same_constant() -> None:
    svc = SearchService()
    # Black has no pieces at all
    bare = Board.from_fen("8/8/8/8/8/8/8/K7 b")
    # Black's only pawn is blocked
    blocked = Board.from_fen("8/8/8/8/8/8/p7/P7 b")
    assert svc.negamax(bare, 1) == NO_MOVES_SCORE
    assert svc.negamax(blocked, 3) == NO_MOVES_SCORE


def test_best_move_without_moves() -> None:
    assert SearchService().best_move(Board.from_fen("8/8/8/8/8/8/8/K7 b"), 3) == (None, None)


@pytest.mark.parametrize("depth", [1, 2, 3])
def test_best_move_takes_the_queen(depth: int) -> None:
    svc = SearchService()
    board = Board.from_fen(WIN_QUEEN)
    move, score = svc.best_move(board, depth)
    assert move is not None and move.to_uci() == "d1d5"
    assert score == 500
    # Deterministic on identical input
    again, _ = svc.best_move(Board.from_fen(WIN_QUEEN), depth)
    assert again == move


def test_ties_keep_first_generated_move() -> None:
    # Nothing can be captured within two plies from the start position
    svc = SearchService()
    for depth in (1, 2):
        move, score = svc.best_move(Board.startpos(), depth)
        assert move is not None and move.to_uci() == "b1a3"
        assert score == 0


def test_search_leaves_root_board_untouched() -> None:
    svc = SearchService()
    board = Board.from_fen(WIN_QUEEN)
    before = board.to_fen()
    svc.best_move(board, 3)
    assert board.to_fen() == before


def test_black_to_move_prefers_capture() -> None:
    svc = SearchService()
    board = Board.from_fen("4k3/8/8/8/3Q4/8/7K/3r4 b - - 0 1")
    move, score = svc.best_move(board, 2)
    assert move is not None and move.to_uci() == "d1d4"
    assert score == 500


@pytest.mark.parametrize("depth", [0, -1])
def test_best_move_rejects_depth_below_one(depth: int) -> None:
    svc = SearchService()
    with pytest.raises(ValueError):
        svc.best_move(Board.startpos(), depth)
    assert svc.nodes == 0
