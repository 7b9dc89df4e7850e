from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


# (row, col): row 0 is rank 1, col 0 is file a
Square = Tuple[int, int]


@dataclass(frozen=True)
class Move:
    """Engine-internal move representation.

    Attributes:
        from_sq (Square): Origin square as ``(row, col)``.
        to_sq (Square): Destination square as ``(row, col)``.

    Notes:
        There is no promotion payload; a pawn reaching the last rank always
        becomes a queen when the move is applied.
    """

    from_sq: Square
    to_sq: Square

    def to_uci(self) -> str:
        """Serialize the move into long algebraic UCI form.

        Returns:
            str: Move encoded like ``"e2e4"``.
        """
        return square_to_str(self.from_sq) + square_to_str(self.to_sq)


def parse_uci(uci: str) -> Move:
    """Parse a UCI move string.

    Only the first four characters are read; a trailing promotion letter is
    accepted and ignored.

    Args:
        uci (str): Move encoded in long algebraic notation (e.g. ``"e2e4"``).

    Returns:
        Move: Parsed move.

    Raises:
        ValueError: If the string is shorter than four characters or names a
            square off the board.
    """
    if len(uci) < 4:
        raise ValueError(f"invalid UCI move length: {uci!r}")
    return Move(str_to_square(uci[0:2]), str_to_square(uci[2:4]))


def str_to_square(s: str) -> Square:
    """Convert algebraic notation into a ``(row, col)`` square.

    Args:
        s (str): Square name such as ``"e4"``.

    Returns:
        Square: Zero-based ``(row, col)`` pair.

    Raises:
        ValueError: If ``s`` is not a valid square.
    """
    if len(s) != 2 or s[0] < "a" or s[0] > "h" or s[1] < "1" or s[1] > "8":
        raise ValueError(f"invalid square: {s!r}")
    return int(s[1]) - 1, ord(s[0]) - ord("a")


def square_to_str(sq: Square) -> str:
    """Convert a ``(row, col)`` square into algebraic notation.

    Raises:
        ValueError: If ``sq`` lies outside the board.
    """
    row, col = sq
    if not (0 <= row < 8 and 0 <= col < 8):
        raise ValueError(f"invalid square: {sq!r}")
    return chr(ord("a") + col) + str(row + 1)
