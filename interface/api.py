"""FastAPI REST interface for the engine."""

import threading

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel
from typing import Optional

from ataxx.config import CONFIG
from ataxx.core.board import BLUE, Board, IllegalMoveError, RED
from ataxx.core.evaluator import Evaluator
from ataxx.core.move import PASS, Move
from ataxx.core.search import SearchEngine, SearchError

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

engine = SearchEngine(Evaluator(), depth=CONFIG.search.depth)
board = Board()
_board_lock = threading.Lock()


class LayoutRequest(BaseModel):
    layout: str


class MoveRequest(BaseModel):
    move: str  # e.g. "b2-c3" or "-"


class SearchRequest(BaseModel):
    depth: Optional[int] = None


def _winner_name(b: Board) -> Optional[str]:
    winner = b.winner()
    if winner is None:
        return None
    return "draw" if not winner.is_piece else winner.name.lower()


@app.get("/board")
def get_board():
    with _board_lock:
        color = board.color_to_move()
        moves = [str(m) for m in engine.legal_moves(board)]
        if not moves:
            moves = [str(PASS)]
        return {
            "layout": board.layout(),
            "turn": color.name.lower(),
            "legal_moves": moves,
            "red": board.piece_count(RED),
            "blue": board.piece_count(BLUE),
            "is_game_over": board.winner() is not None,
            "winner": _winner_name(board),
        }


@app.post("/position")
def set_position(req: LayoutRequest):
    with _board_lock:
        try:
            board.set_layout(req.layout)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=f"Invalid layout: {e}")
        return {"layout": board.layout()}


@app.post("/move")
def make_move(req: MoveRequest):
    with _board_lock:
        try:
            move = Move.parse(req.move)
        except ValueError:
            raise HTTPException(status_code=400, detail=f"Invalid move: {req.move}")
        if board.winner() is not None:
            raise HTTPException(status_code=400, detail="Game is already over")
        try:
            board.apply_move(move)
        except IllegalMoveError:
            raise HTTPException(status_code=400, detail=f"Illegal move: {req.move}")
        return {"layout": board.layout(), "move": str(move)}


@app.post("/search")
def search_move(req: SearchRequest = SearchRequest()):
    with _board_lock:
        if board.winner() is not None:
            raise HTTPException(status_code=400, detail="Game is already over")
        if req.depth is not None and req.depth < 0:
            raise HTTPException(status_code=400, detail="depth must be non-negative")
        color = board.color_to_move()
        search_board = board.copy()

    if not search_board.can_move(color):
        return {"best_move": str(PASS), "score": 0, "layout": search_board.layout()}

    depth = CONFIG.search.depth if req.depth is None else req.depth
    searcher = SearchEngine(engine.evaluator, depth=depth, use_pruning=engine.use_pruning)
    try:
        best, score = searcher.search_best_move(search_board, color)
    except SearchError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {
        "best_move": str(best) if best else None,
        "score": score,
        "layout": search_board.layout(),
    }


@app.post("/reset")
def reset_board():
    with _board_lock:
        board.reset()
        return {"layout": board.layout()}
