import logging
import random

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from knightproof.analysis import (
    BoardState,
    Slot,
    analyze,
    analyze_coloring,
    analyze_position,
    legal_moves_for_turn,
    parse_square,
)
from knightproof.config import Settings
from knightproof.game import apply_move, place_piece, switch_turn
from knightproof.report import (
    board_from_dict,
    serialize_analysis,
    serialize_board,
    serialize_coloring,
    serialize_moves,
    serialize_report,
)
from knightproof.scenarios import ScenarioKind, generate_scenario

logger = logging.getLogger(__name__)

settings = Settings()

app = FastAPI(title="Two Knights Proof")


# --- Request/Response models ---

class BoardModel(BaseModel):
    white_king: str | None = None
    black_king: str | None = None
    knight1: str | None = None
    knight2: str | None = None
    turn: str = "white"


class MoveRequest(BaseModel):
    board: BoardModel
    from_square: str
    to_square: str


class PlaceRequest(BaseModel):
    board: BoardModel
    slot: str
    square: str


def _board(model: BoardModel) -> BoardState:
    try:
        return board_from_dict(model.model_dump())
    except ValueError as e:
        logger.info("Rejected board: %s", e)
        raise HTTPException(status_code=400, detail=f"Invalid board: {e}") from e


def _square(text: str):
    try:
        return parse_square(text)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=f"Invalid square: {text}") from e


# --- Endpoints ---

@app.get("/api/health")
async def health():
    return {"status": "ok"}


@app.get("/api/scenario/{kind}")
async def scenario(kind: str, seed: int | None = None):
    try:
        scenario_kind = ScenarioKind(kind)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown scenario: {kind}")
    if seed is None:
        seed = settings.scenario_seed
    rng = random.Random(seed)
    board = generate_scenario(scenario_kind, rng, settings.scenario_max_attempts)
    return serialize_board(board)


@app.post("/api/analysis")
async def analysis(req: BoardModel):
    return serialize_analysis(analyze(_board(req)))


@app.post("/api/analysis/position")
async def analysis_position(req: BoardModel):
    return serialize_report(analyze_position(_board(req)))


@app.post("/api/analysis/coloring")
async def analysis_coloring(req: BoardModel):
    return serialize_coloring(analyze_coloring(_board(req)))


@app.post("/api/moves")
async def moves(req: BoardModel):
    return serialize_moves(legal_moves_for_turn(_board(req)))


@app.post("/api/move")
async def move(req: MoveRequest):
    board = _board(req.board)
    try:
        moved = apply_move(board, _square(req.from_square), _square(req.to_square))
    except ValueError as e:
        logger.info("Rejected move %s-%s: %s", req.from_square, req.to_square, e)
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "board": serialize_board(moved),
        "analysis": serialize_analysis(analyze(moved)),
    }


@app.post("/api/place")
async def place(req: PlaceRequest):
    board = _board(req.board)
    try:
        slot = Slot(req.slot)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown slot: {req.slot}")
    try:
        placed = place_piece(board, slot, _square(req.square))
    except ValueError as e:
        logger.info("Rejected placement of %s on %s: %s", req.slot, req.square, e)
        raise HTTPException(status_code=400, detail=str(e))
    return serialize_board(placed)


@app.post("/api/turn")
async def turn(req: BoardModel):
    return serialize_board(switch_turn(_board(req)))
