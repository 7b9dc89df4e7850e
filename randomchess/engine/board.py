from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .move import Move, Square, square_to_str


STARTPOS_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"


# Piece kinds (colour-independent)
PAWN, KNIGHT, BISHOP, ROOK, QUEEN, KING = range(1, 7)

# Piece codes stored in the grid; black codes are the white ones offset by 6
EMPTY = 0
WP, WN, WB, WR, WQ, WK, BP, BN, BB, BR, BQ, BK = range(1, 13)
BLACK_OFFSET = 6

PIECE_TO_CHAR = {
    WP: "P",
    WN: "N",
    WB: "B",
    WR: "R",
    WQ: "Q",
    WK: "K",
    BP: "p",
    BN: "n",
    BB: "b",
    BR: "r",
    BQ: "q",
    BK: "k",
}
CHAR_TO_PIECE = {v: k for k, v in PIECE_TO_CHAR.items()}

KNIGHT_OFFSETS = ((-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1))
BISHOP_DIRS = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS = ((-1, 0), (1, 0), (0, -1), (0, 1))
KING_OFFSETS = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))

ALL_CASTLING = "KQkq"


def is_white_piece(piece: int) -> bool:
    return WP <= piece <= WK


def is_black_piece(piece: int) -> bool:
    return BP <= piece <= BK


def piece_kind(piece: int) -> int:
    """Map a piece code to its colour-independent kind (``PAWN`` .. ``KING``)."""
    return piece - BLACK_OFFSET if piece > BLACK_OFFSET else piece


def _empty_grid() -> List[List[int]]:
    return [[EMPTY] * 8 for _ in range(8)]


@dataclass
class Board:
    """Board state on an 8x8 grid of piece codes.

    Notes:
    - ``grid[row][col]``: row 0 is rank 1, col 0 is file a.
    - ``castling`` holds the still-available rights as a subset of ``"KQkq"``.
      A right is dropped when its king or rook moves, never on capture.
    - ``ep_file`` is the column of a pawn that just advanced two squares and is
      valid for the next move only.
    - Move generation is pseudo-legal: king safety is never checked.
    """

    grid: List[List[int]]
    white_to_move: bool = True
    castling: str = ALL_CASTLING
    ep_file: Optional[int] = None

    @classmethod
    def startpos(cls) -> "Board":
        """Create a board initialized to the standard chess starting position."""
        grid = _empty_grid()
        back = (ROOK, KNIGHT, BISHOP, QUEEN, KING, BISHOP, KNIGHT, ROOK)
        for col in range(8):
            grid[0][col] = back[col]
            grid[1][col] = WP
            grid[6][col] = BP
            grid[7][col] = back[col] + BLACK_OFFSET
        return cls(grid=grid)

    @classmethod
    def from_fen(cls, fen: str) -> "Board":
        """Create a board from the placement and side-to-move fields of a FEN.

        Parsing is lenient and never raises. Digits skip empty squares, ``/``
        starts the next rank and unknown characters are skipped (they still
        consume a file). Writes that fall off the board are dropped. Any
        field after the side to move is ignored, so castling rights are all
        available and no en-passant file is set.

        Args:
            fen (str): FEN string, possibly truncated to its first field.

        Returns:
            Board: Board for ``fen``, or the start position if ``fen`` has no
                fields at all.
        """
        parts = fen.split()
        if not parts:
            return cls.startpos()

        grid = _empty_grid()
        row, col = 7, 0
        for ch in parts[0]:
            if ch == "/":
                row -= 1
                col = 0
            elif "1" <= ch <= "8":
                col += int(ch)
            else:
                piece = CHAR_TO_PIECE.get(ch, EMPTY)
                if piece != EMPTY and 0 <= row < 8 and 0 <= col < 8:
                    grid[row][col] = piece
                col += 1

        white_to_move = True
        if len(parts) > 1:
            white_to_move = parts[1] == "w"
        return cls(grid=grid, white_to_move=white_to_move)

    def to_fen(self) -> str:
        """Serialize the position into a FEN string.

        Move counters are not tracked and are always written as ``0 1``.
        """
        ranks: List[str] = []
        for row in range(7, -1, -1):
            run = 0
            out = []
            for col in range(8):
                piece = self.grid[row][col]
                if piece == EMPTY:
                    run += 1
                    continue
                if run:
                    out.append(str(run))
                    run = 0
                out.append(PIECE_TO_CHAR[piece])
            if run:
                out.append(str(run))
            ranks.append("".join(out))

        stm = "w" if self.white_to_move else "b"
        castling = self.castling or "-"
        ep = "-"
        if self.ep_file is not None:
            # Target square sits behind the pawn that just advanced
            ep = square_to_str((5 if self.white_to_move else 2, self.ep_file))
        return f"{'/'.join(ranks)} {stm} {castling} {ep} 0 1"

    def piece_at(self, sq: Square) -> int:
        return self.grid[sq[0]][sq[1]]

    def copy(self) -> "Board":
        """Return an independent copy; nothing is shared with the receiver."""
        return Board(
            grid=[list(r) for r in self.grid],
            white_to_move=self.white_to_move,
            castling=self.castling,
            ep_file=self.ep_file,
        )

    # --- Ownership helpers relative to the side to move ---
    def _is_own(self, piece: int) -> bool:
        return is_white_piece(piece) if self.white_to_move else is_black_piece(piece)

    def _is_enemy(self, piece: int) -> bool:
        return is_black_piece(piece) if self.white_to_move else is_white_piece(piece)

    def generate_moves(self) -> List[Move]:
        """Return pseudo-legal moves for the side to move.

        Squares are scanned row-major from a1; the resulting order is what
        search uses to break ties, so it must stay stable.
        """
        moves: List[Move] = []
        for row in range(8):
            for col in range(8):
                piece = self.grid[row][col]
                if piece == EMPTY or not self._is_own(piece):
                    continue
                kind = piece_kind(piece)
                if kind == PAWN:
                    self._pawn_moves(row, col, moves)
                elif kind == KNIGHT:
                    self._step_moves(row, col, KNIGHT_OFFSETS, moves)
                elif kind == BISHOP:
                    self._slide_moves(row, col, BISHOP_DIRS, moves)
                elif kind == ROOK:
                    self._slide_moves(row, col, ROOK_DIRS, moves)
                elif kind == QUEEN:
                    self._slide_moves(row, col, BISHOP_DIRS, moves)
                    self._slide_moves(row, col, ROOK_DIRS, moves)
                elif kind == KING:
                    self._step_moves(row, col, KING_OFFSETS, moves)
                    self._castling_moves(row, col, moves)
        return moves

    def _pawn_moves(self, row: int, col: int, moves: List[Move]) -> None:
        direction = 1 if self.white_to_move else -1
        start_row = 1 if self.white_to_move else 6
        ahead = row + direction
        if not (0 <= ahead < 8):
            return

        if self.grid[ahead][col] == EMPTY:
            moves.append(Move((row, col), (ahead, col)))
            if row == start_row and self.grid[row + 2 * direction][col] == EMPTY:
                moves.append(Move((row, col), (row + 2 * direction, col)))

        for dc in (-1, 1):
            tc = col + dc
            if not (0 <= tc < 8):
                continue
            target = self.grid[ahead][tc]
            if target != EMPTY and self._is_enemy(target):
                moves.append(Move((row, col), (ahead, tc)))
            if self.ep_file == tc and target == EMPTY:
                ep_row = 5 if self.white_to_move else 2
                if row == ep_row - direction:
                    moves.append(Move((row, col), (ep_row, tc)))

    def _step_moves(self, row: int, col: int, offsets, moves: List[Move]) -> None:
        for dr, dc in offsets:
            tr, tc = row + dr, col + dc
            if 0 <= tr < 8 and 0 <= tc < 8:
                target = self.grid[tr][tc]
                if target == EMPTY or self._is_enemy(target):
                    moves.append(Move((row, col), (tr, tc)))

    def _slide_moves(self, row: int, col: int, dirs, moves: List[Move]) -> None:
        for dr, dc in dirs:
            tr, tc = row, col
            while True:
                tr += dr
                tc += dc
                if not (0 <= tr < 8 and 0 <= tc < 8):
                    break
                target = self.grid[tr][tc]
                if target == EMPTY:
                    moves.append(Move((row, col), (tr, tc)))
                    continue
                if self._is_enemy(target):
                    moves.append(Move((row, col), (tr, tc)))
                break

    def _castling_moves(self, row: int, col: int, moves: List[Move]) -> None:
        # Squares the king passes through are not checked for attacks
        if self.white_to_move:
            home, rook, kingside, queenside = 0, WR, "K", "Q"
        else:
            home, rook, kingside, queenside = 7, BR, "k", "q"
        if (row, col) != (home, 4):
            return
        rank = self.grid[home]
        if kingside in self.castling and rank[5] == EMPTY and rank[6] == EMPTY and rank[7] == rook:
            moves.append(Move((home, 4), (home, 6)))
        if (
            queenside in self.castling
            and rank[1] == EMPTY
            and rank[2] == EMPTY
            and rank[3] == EMPTY
            and rank[0] == rook
        ):
            moves.append(Move((home, 4), (home, 2)))

    def make_move(self, move: Move) -> None:
        """Apply ``move`` to this board in place.

        The move is expected to come from :meth:`generate_moves`; anything else
        is applied blindly. Handles en passant, castling rook transfer,
        castling-right bookkeeping and automatic queen promotion.
        """
        (fr, fc), (tr, tc) = move.from_sq, move.to_sq
        grid = self.grid
        piece = grid[fr][fc]
        is_pawn = piece in (WP, BP)

        self.ep_file = None
        if is_pawn and abs(fr - tr) == 2:
            self.ep_file = fc

        # Diagonal pawn move onto an empty square can only be en passant
        if is_pawn and fc != tc and grid[tr][tc] == EMPTY:
            grid[fr][tc] = EMPTY

        if piece in (WK, BK):
            home = 0 if piece == WK else 7
            rook = WR if piece == WK else BR
            if (fr, fc) == (home, 4) and abs(tc - fc) == 2:
                if tc == 6:
                    grid[home][5] = rook
                    grid[home][7] = EMPTY
                else:
                    grid[home][3] = rook
                    grid[home][0] = EMPTY
            self._drop_castling("KQ" if piece == WK else "kq")
        elif piece == WR:
            if (fr, fc) == (0, 0):
                self._drop_castling("Q")
            elif (fr, fc) == (0, 7):
                self._drop_castling("K")
        elif piece == BR:
            if (fr, fc) == (7, 0):
                self._drop_castling("q")
            elif (fr, fc) == (7, 7):
                self._drop_castling("k")

        grid[tr][tc] = piece
        grid[fr][fc] = EMPTY

        if piece == WP and tr == 7:
            grid[tr][tc] = WQ
        elif piece == BP and tr == 0:
            grid[tr][tc] = BQ

        self.white_to_move = not self.white_to_move

    def apply(self, move: Move) -> "Board":
        """Return a new Board with ``move`` applied if it is generated here.

        Raises:
            ValueError: If ``move`` is not among :meth:`generate_moves`.
        """
        if move not in self.generate_moves():
            raise ValueError("illegal move")
        child = self.copy()
        child.make_move(move)
        return child

    def _drop_castling(self, rights: str) -> None:
        self.castling = "".join(c for c in self.castling if c not in rights)
