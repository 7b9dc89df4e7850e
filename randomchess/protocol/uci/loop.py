from __future__ import annotations

import logging
import sys
from typing import Callable, List, Optional, TextIO

from ...engine.game import Game
from ...engine.move import parse_uci
from ...search.service import DEFAULT_DEPTH, SearchService


logger = logging.getLogger(__name__)

Writer = Callable[[str], None]

MIN_DEPTH = 1
MAX_DEPTH = 6


class UCIEngine:
    """UCI protocol adapter around the core engine.

    Notes:
    - Core remains pure; I/O is isolated here.
    - Command set: uci, isready, ucinewgame, position, setoption, go, quit.
    - Malformed input never produces output; it is skipped.
    - ``go`` blocks until the fixed-depth search finishes.
    """

    def __init__(self, depth: int = DEFAULT_DEPTH) -> None:
        self.game: Game = Game.new()
        self.search = SearchService()
        self.depth: int = _clamp_depth(depth)

    # ---- Command handlers ----
    def cmd_uci(self, write: Writer) -> None:
        write("id name RandomChess")
        write("id author RandomChess Author")
        write("uciok")

    def cmd_isready(self, write: Writer) -> None:
        write("readyok")

    def cmd_ucinewgame(self) -> None:
        self.game = Game.new()

    def cmd_position(self, args: List[str]) -> None:
        # position [startpos | fen <FEN> ] [moves m1 m2 ...]
        if not args:
            return
        idx = 0
        if args[idx] == "startpos":
            self.game = Game.new()
            idx += 1
        elif args[idx] == "fen":
            idx += 1
            fen_tokens: List[str] = []
            while idx < len(args) and args[idx] != "moves":
                fen_tokens.append(args[idx])
                idx += 1
            self.game = Game.from_fen(" ".join(fen_tokens))
        else:
            return
        if idx < len(args) and args[idx] == "moves":
            for u in args[idx + 1 :]:
                try:
                    self.game.force_move(parse_uci(u))
                except ValueError:
                    logger.debug("skipping unparsable move %r", u)

    def cmd_setoption(self, args: List[str]) -> None:
        # setoption name <name> [value <value>]
        if not args:
            return
        i = 0
        if args[i] == "name":
            i += 1
        name_tokens: List[str] = []
        while i < len(args) and args[i] != "value":
            name_tokens.append(args[i])
            i += 1
        value = " ".join(args[i + 1 :]).strip() if i < len(args) else ""
        name = " ".join(name_tokens).strip().lower()
        if name == "depth":
            try:
                self.depth = _clamp_depth(int(value))
            except ValueError:
                pass

    def cmd_go(self, args: List[str], write: Writer) -> None:
        # Parameters (time controls, depth, ...) are accepted and ignored
        res = self.search.search(self.game, depth=self.depth)
        best = res.best_move.to_uci() if res.best_move else "0000"
        write(f"bestmove {best}")

    def handle_line(self, line: str, write: Writer) -> bool:
        """Dispatch one command line. Returns False when the loop should stop."""
        parts = line.split()
        if not parts:
            return True
        cmd, args = parts[0], parts[1:]

        if cmd == "uci":
            self.cmd_uci(write)
        elif cmd == "isready":
            self.cmd_isready(write)
        elif cmd == "setoption":
            self.cmd_setoption(args)
        elif cmd == "ucinewgame":
            self.cmd_ucinewgame()
        elif cmd == "position":
            self.cmd_position(args)
        elif cmd == "go":
            self.cmd_go(args, write)
        elif cmd == "quit":
            return False
        # Ignore unknown commands per UCI convention
        return True


def _clamp_depth(depth: int) -> int:
    return max(MIN_DEPTH, min(MAX_DEPTH, depth))


def _default_writer(line: str) -> None:
    # Ensure newline termination and immediate flush
    sys.stdout.write(line + "\n")
    sys.stdout.flush()


def run_uci(
    stream: Optional[TextIO] = None,
    write: Writer = _default_writer,
    depth: int = DEFAULT_DEPTH,
) -> None:
    eng = UCIEngine(depth=depth)
    for raw in stream if stream is not None else sys.stdin:
        if not eng.handle_line(raw.strip(), write):
            break
