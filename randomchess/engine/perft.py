from __future__ import annotations

from .board import Board


def perft(board: Board, depth: int) -> int:
    """Compute perft node count for `board` at `depth`.

    Definition:
    - depth == 0 returns 1 (the current node).
    - depth > 0 returns the sum over all pseudo-legal child positions'
      perft(depth-1).

    Children are full copies, the same way search expands the tree. Counts
    match standard legal perft only while no side can leave its king en prise.
    """
    if depth < 0:
        raise ValueError("depth must be >= 0")
    if depth == 0:
        return 1

    nodes = 0
    for m in board.generate_moves():
        child = board.copy()
        child.make_move(m)
        nodes += perft(child, depth - 1)
    return nodes
