from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .board import Board
from .move import Move


@dataclass
class Game:
    """Session value wrapping a board with move history.

    Responsibility: own the current board, apply moves, undo them. Protocol
    adapters replace the whole Game on reset instead of clearing it.
    """

    board: Board
    move_stack: List[Move] = field(default_factory=list)
    # Board before each move in move_stack, for undo
    _snapshots: List[Board] = field(default_factory=list, repr=False)

    @classmethod
    def new(cls) -> "Game":
        return cls(board=Board.startpos())

    @classmethod
    def from_fen(cls, fen: str) -> "Game":
        return cls(board=Board.from_fen(fen))

    def to_fen(self) -> str:
        return self.board.to_fen()

    def legal_moves(self) -> List[Move]:
        # Pseudo-legal: the engine never filters for king safety
        return self.board.generate_moves()

    def apply_move(self, move: Move) -> None:
        """Apply a generated move; raises ``ValueError`` for anything else."""
        child = self.board.apply(move)
        self._snapshots.append(self.board)
        self.move_stack.append(move)
        self.board = child

    def force_move(self, move: Move) -> None:
        """Apply ``move`` without checking it against generated moves."""
        self._snapshots.append(self.board.copy())
        self.board.make_move(move)
        self.move_stack.append(move)

    def undo_move(self) -> None:
        if not self.move_stack:
            raise ValueError("no moves to undo")
        self.move_stack.pop()
        self.board = self._snapshots.pop()

    def move_history_uci(self) -> List[str]:
        return [m.to_uci() for m in self.move_stack]
