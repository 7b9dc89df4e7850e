from __future__ import annotations

from randomchess.engine.board import Board


def moves_set(b: Board) -> set[str]:
    return {m.to_uci() for m in b.generate_moves()}


def test_startpos_has_twenty_moves() -> None:
    b = Board.startpos()
    moves = b.generate_moves()
    assert len(moves) == 20
    ms = moves_set(b)
    pawn_moves = {f"{f}2{f}3" for f in "abcdefgh"} | {f"{f}2{f}4" for f in "abcdefgh"}
    assert pawn_moves.issubset(ms)
    assert ms - pawn_moves == {"b1a3", "b1c3", "g1f3", "g1h3"}


def test_generation_order_is_row_major() -> None:
    ucis = [m.to_uci() for m in Board.startpos().generate_moves()]
    assert ucis[:6] == ["b1a3", "b1c3", "g1f3", "g1h3", "a2a3", "a2a4"]


def test_rook_rays_on_open_board() -> None:
    b = Board.from_fen("4k3/8/8/8/3R4/8/8/4K3 w - - 0 1")
    rook = {u for u in moves_set(b) if u.startswith("d4")}
    assert len(rook) == 14


def test_rook_stops_at_blockers() -> None:
    # Enemy pawn d6 is capturable, own pawn d3 blocks
    b = Board.from_fen("4k3/8/3p4/8/3R4/3P4/8/4K3 w - - 0 1")
    rook = {u for u in moves_set(b) if u.startswith("d4")}
    assert rook == {"d4d5", "d4d6", "d4c4", "d4b4", "d4a4", "d4e4", "d4f4", "d4g4", "d4h4"}


def test_bishop_basic_moves() -> None:
    b = Board.from_fen("4k3/8/8/8/8/8/8/2B1K3 w - - 0 1")
    bishop = {u for u in moves_set(b) if u.startswith("c1")}
    assert bishop == {"c1b2", "c1a3", "c1d2", "c1e3", "c1f4", "c1g5", "c1h6"}


def test_queen_is_bishop_then_rook() -> None:
    b = Board.from_fen("4k3/8/8/8/3Q4/8/8/4K3 w - - 0 1")
    queen = [m.to_uci() for m in b.generate_moves() if m.to_uci().startswith("d4")]
    assert len(queen) == 27
    # Diagonal rays are emitted before orthogonal ones
    assert queen[0] == "d4c3"
    assert queen[-1] == "d4h4"


def test_knight_in_corner() -> None:
    b = Board.from_fen("4k3/8/8/8/8/8/8/N3K3 w - - 0 1")
    knight = {u for u in moves_set(b) if u.startswith("a1")}
    assert knight == {"a1b3", "a1c2"}


def test_pawn_pushes_blocked() -> None:
    # e3 blocked: no pushes at all; d-pawn has only a single push
    b = Board.from_fen("4k3/8/8/8/3n4/4n3/3PP3/4K3 w - - 0 1")
    ms = moves_set(b)
    assert "e2e3" not in ms and "e2e4" not in ms
    assert "d2d3" in ms and "d2d4" not in ms
    assert "d2e3" in ms


def test_black_pawn_moves_down_the_board() -> None:
    b = Board.from_fen("4k3/4p3/8/8/8/8/8/4K3 b - - 0 1")
    assert moves_set(b) == {"e7e6", "e7e5", "e8d7", "e8f7", "e8d8", "e8f8"}


def test_king_may_step_into_attack() -> None:
    # Pseudo-legal only: e2 is covered by the black rook but still generated
    b = Board.from_fen("4k3/8/8/8/8/8/8/r3K3 w - - 0 1")
    ms = moves_set(b)
    assert "e1e2" in ms
    assert "e1d1" in ms
