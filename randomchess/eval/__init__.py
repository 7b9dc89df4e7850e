"""Material evaluation.

Pure, deterministic, and side-effect free.
"""

from __future__ import annotations

from typing import Dict, Final

from randomchess.engine.board import (
    Board,
    WP,
    WN,
    WB,
    WR,
    WQ,
    WK,
    BP,
    BN,
    BB,
    BR,
    BQ,
    BK,
)


# Material values in centipawns
P_VAL: Final = 100
N_VAL: Final = 320
B_VAL: Final = 330
R_VAL: Final = 500
Q_VAL: Final = 900
K_VAL: Final = 20000

# Signed value per piece code, positive for White
PIECE_VALUES: Final[Dict[int, int]] = {
    WP: P_VAL,
    WN: N_VAL,
    WB: B_VAL,
    WR: R_VAL,
    WQ: Q_VAL,
    WK: K_VAL,
    BP: -P_VAL,
    BN: -N_VAL,
    BB: -B_VAL,
    BR: -R_VAL,
    BQ: -Q_VAL,
    BK: -K_VAL,
}


def evaluate(board: Board) -> int:
    """Return the material balance in centipawns from White's perspective.

    The side to move does not change the result; search applies the sign.
    """
    score = 0
    for row in board.grid:
        for piece in row:
            score += PIECE_VALUES.get(piece, 0)
    return score
