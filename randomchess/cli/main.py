from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn

from ..protocol.uci.loop import run_uci
from ..search.service import DEFAULT_DEPTH


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="randomchess", description="RandomChess engine")
    parser.add_argument(
        "--log-level", type=str, default="WARNING", help="Logging level (default: WARNING)"
    )
    sub = parser.add_subparsers(dest="command")

    uci = sub.add_parser("uci", help="Speak UCI on stdin/stdout (default)")
    uci.add_argument(
        "--depth", type=int, default=DEFAULT_DEPTH, help=f"Search depth (default: {DEFAULT_DEPTH})"
    )

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", type=str, default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = _build_parser().parse_args(argv)
    # stdout carries UCI traffic, so logs always go to stderr
    logging.basicConfig(level=args.log_level.upper(), stream=sys.stderr)

    if args.command == "serve":
        uvicorn.run(
            "randomchess.protocol.http.app:create_app",
            factory=True,
            host=args.host,
            port=args.port,
        )
        return
    run_uci(depth=getattr(args, "depth", DEFAULT_DEPTH))


if __name__ == "__main__":
    main()
