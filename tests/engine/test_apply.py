from __future__ import annotations

import pytest

from randomchess.engine.board import Board, EMPTY, STARTPOS_FEN, WP
from randomchess.engine.move import Move, parse_uci, str_to_square


def _find(b: Board, uci: str) -> Move:
    return next(m for m in b.generate_moves() if m.to_uci() == uci)


def test_e2e4_updates_board_and_side() -> None:
    b = Board.startpos()
    b.make_move(_find(b, "e2e4"))

    assert b.piece_at(str_to_square("e2")) == EMPTY
    assert b.piece_at(str_to_square("e4")) == WP
    assert b.white_to_move is False
    assert b.to_fen() == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"


def test_en_passant_file_lives_for_one_move() -> None:
    b = Board.startpos()
    b.make_move(_find(b, "e2e4"))
    assert b.ep_file == 4

    b.make_move(_find(b, "g8f6"))
    assert b.ep_file is None
    assert b.white_to_move is True


def test_apply_returns_new_board_and_does_not_mutate() -> None:
    b = Board.startpos()
    b2 = b.apply(parse_uci("e2e4"))
    assert b.to_fen() == STARTPOS_FEN
    assert b2.piece_at(str_to_square("e4")) == WP


def test_apply_rejects_move_not_generated() -> None:
    b = Board.startpos()
    with pytest.raises(ValueError):
        b.apply(parse_uci("e2e5"))


def test_copy_shares_no_rows() -> None:
    b = Board.startpos()
    c = b.copy()
    c.make_move(_find(c, "e2e4"))
    assert b.to_fen() == STARTPOS_FEN
    assert all(r1 is not r2 for r1, r2 in zip(b.grid, c.grid))


def test_capture_replaces_target() -> None:
    b = Board.from_fen("4k3/8/8/3q4/8/8/8/3RK3 w - - 0 1")
    b.make_move(_find(b, "d1d5"))
    assert b.to_fen().split()[0] == "4k3/8/8/3R4/8/8/8/4K3"
