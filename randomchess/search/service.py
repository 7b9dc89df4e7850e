from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional

from randomchess.engine.board import Board
from randomchess.engine.game import Game
from randomchess.engine.move import Move
from randomchess.eval import evaluate


logger = logging.getLogger(__name__)


DEFAULT_DEPTH = 3
# Returned when the side to move has no moves at all (mate and stalemate alike)
NO_MOVES_SCORE = -100_000
# Below any reachable score so the first child always replaces it
NEG_INF = -1_000_000


@dataclass
class SearchResult:
    best_move: Optional[Move]
    score: Optional[int]  # centipawns from the side to move's view
    nodes: int
    depth: int
    time_ms: int


class SearchService:
    """Fixed-depth negamax without pruning.

    Every child is searched on its own copy of the board; nothing is shared
    between sibling branches. Ties keep the first move in generation order,
    so results are fully deterministic.
    """

    def __init__(self) -> None:
        self.nodes = 0

    def negamax(self, board: Board, depth: int) -> int:
        """Score ``board`` from the side to move's perspective."""
        self.nodes += 1
        if depth == 0:
            score = evaluate(board)
            return score if board.white_to_move else -score

        moves = board.generate_moves()
        if not moves:
            return NO_MOVES_SCORE

        best = NEG_INF
        for mv in moves:
            child = board.copy()
            child.make_move(mv)
            score = -self.negamax(child, depth - 1)
            if score > best:
                best = score
        return best

    def best_move(self, board: Board, depth: int = DEFAULT_DEPTH) -> tuple[Optional[Move], Optional[int]]:
        """Pick the root move with the strictly highest negamax score.

        Returns:
            tuple: ``(move, score)``, or ``(None, None)`` when there are no
                moves to choose from.
        """
        if depth < 1:
            raise ValueError("depth must be >= 1")
        best_mv: Optional[Move] = None
        best_score = NEG_INF
        for mv in board.generate_moves():
            child = board.copy()
            child.make_move(mv)
            score = -self.negamax(child, depth - 1)
            if score > best_score:
                best_score = score
                best_mv = mv
        if best_mv is None:
            return None, None
        return best_mv, best_score

    def search(self, game: Game, depth: int = DEFAULT_DEPTH) -> SearchResult:
        if depth < 1:
            raise ValueError("depth must be >= 1")
        self.nodes = 0
        start = time.perf_counter()
        move, score = self.best_move(game.board, depth)
        time_ms = int((time.perf_counter() - start) * 1000)
        logger.debug(
            "search done depth=%d nodes=%d time_ms=%d best=%s",
            depth,
            self.nodes,
            time_ms,
            move.to_uci() if move else None,
        )
        return SearchResult(
            best_move=move,
            score=score,
            nodes=self.nodes,
            depth=depth,
            time_ms=time_ms,
        )
