from __future__ import annotations

from randomchess.engine.board import Board
from randomchess.eval import evaluate


def test_startpos_is_balanced() -> None:
    assert evaluate(Board.startpos()) == 0


def test_material_sign_follows_colour() -> None:
    assert evaluate(Board.from_fen("4k3/8/8/8/8/8/8/3QK3 w")) == 900
    assert evaluate(Board.from_fen("3qk3/8/8/8/8/8/8/4K3 w")) == -900


def test_side_to_move_does_not_matter() -> None:
    fen = "r3k3/8/8/8/8/8/PPP5/1N2K3"
    assert evaluate(Board.from_fen(fen + " w")) == evaluate(Board.from_fen(fen + " b"))
    assert evaluate(Board.from_fen(fen + " w")) == 3 * 100 + 320 - 500


def test_kings_are_counted() -> None:
    assert evaluate(Board.from_fen("8/8/8/8/8/8/8/4K3 w")) == 20000
