from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Response
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from .error import (
    exception_handler,
    http_exception_handler,
    request_validation_exception_handler,
)
from .logging_middleware import RequestIDLoggingMiddleware
from .session import InMemorySessionStore
from ...engine.game import Game
from ...engine.move import parse_uci
from ...engine.perft import perft as perft_nodes
from ...eval import evaluate
from ...search.service import DEFAULT_DEPTH, SearchService


logger = logging.getLogger(__name__)

# Exhaustive search grows fast; keep HTTP callers to shallow trees
MAX_HTTP_DEPTH = 4


class CreateGameResponse(BaseModel):
    game_id: str
    fen: str


class SetPositionRequest(BaseModel):
    fen: Optional[str] = Field(default=None, description="FEN string; start position when omitted")
    moves: List[str] = Field(default_factory=list, description="UCI moves applied after the FEN")


class MoveRequest(BaseModel):
    move: str = Field(..., description="UCI move string, e.g., e2e4")


class SearchRequest(BaseModel):
    depth: Optional[int] = Field(default=None, ge=1, le=MAX_HTTP_DEPTH)


class PerftRequest(BaseModel):
    fen: Optional[str] = None
    depth: int = Field(default=1, ge=0, le=MAX_HTTP_DEPTH)


class GameState(BaseModel):
    game_id: str
    fen: str
    side_to_move: str
    moves: list[str]
    evaluation: int
    last_move: Optional[str]
    move_history: list[str]


def create_app() -> FastAPI:
    app = FastAPI(title="RandomChess API", version="0.1.0")

    # Basic logging setup
    logging.basicConfig(level=logging.INFO)

    app.add_middleware(RequestIDLoggingMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(Exception, exception_handler)

    store = InMemorySessionStore()

    @app.get("/healthz")
    async def healthz() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post("/api/games", response_model=CreateGameResponse)
    async def create_game() -> CreateGameResponse:
        game_id = store.create(Game.new())
        logger.info("game created", extra={"game_id": game_id})
        return CreateGameResponse(game_id=game_id, fen=_require_game(store, game_id).to_fen())

    @app.delete("/api/games/{game_id}", status_code=204)
    async def delete_game(game_id: str) -> Response:
        if not store.delete(game_id):
            raise HTTPException(status_code=404, detail="game not found")
        return Response(status_code=204)

    @app.get("/api/games/{game_id}/state", response_model=GameState)
    async def get_state(game_id: str) -> GameState:
        return _state(game_id, _require_game(store, game_id))

    @app.post("/api/games/{game_id}/position", response_model=GameState)
    async def set_position(game_id: str, req: SetPositionRequest) -> GameState:
        _require_game(store, game_id)
        game = Game.new() if req.fen is None else Game.from_fen(req.fen)
        for u in req.moves:
            try:
                game.apply_move(parse_uci(u))
            except ValueError as e:
                raise HTTPException(status_code=400, detail=f"{u}: {e}")
        store.set(game_id, game)
        return _state(game_id, game)

    @app.post("/api/games/{game_id}/move", response_model=GameState)
    async def make_move(game_id: str, req: MoveRequest) -> GameState:
        game = _require_game(store, game_id)
        try:
            move = parse_uci(req.move)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        try:
            game.apply_move(move)
        except ValueError:
            raise HTTPException(status_code=400, detail="illegal move")
        return _state(game_id, game)

    @app.post("/api/games/{game_id}/undo", response_model=GameState)
    async def undo(game_id: str) -> GameState:
        game = _require_game(store, game_id)
        try:
            game.undo_move()
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        return _state(game_id, game)

    @app.post("/api/games/{game_id}/search")
    async def search(game_id: str, req: SearchRequest) -> Dict[str, Any]:
        game = _require_game(store, game_id)
        res = SearchService().search(game, depth=req.depth or DEFAULT_DEPTH)
        return {
            "best_move": res.best_move.to_uci() if res.best_move else None,
            "score": res.score,
            "nodes": res.nodes,
            "depth": res.depth,
            "time_ms": res.time_ms,
        }

    @app.post("/api/perft")
    async def perft(req: PerftRequest) -> Dict[str, Any]:
        game = Game.new() if req.fen is None else Game.from_fen(req.fen)
        return {"nodes": perft_nodes(game.board, req.depth), "depth": req.depth}

    return app


def _require_game(store: InMemorySessionStore, game_id: str) -> Game:
    game = store.get(game_id)
    if game is None:
        raise HTTPException(status_code=404, detail="game not found")
    return game


def _state(game_id: str, game: Game) -> GameState:
    history = game.move_history_uci()
    return GameState(
        game_id=game_id,
        fen=game.to_fen(),
        side_to_move="w" if game.board.white_to_move else "b",
        moves=[m.to_uci() for m in game.legal_moves()],
        evaluation=evaluate(game.board),
        last_move=history[-1] if history else None,
        move_history=history,
    )
