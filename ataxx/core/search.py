import logging
import random
import time
from typing import List, Optional, Tuple

from ataxx.config import CONFIG
from ataxx.core.board import Board, BLUE, PieceColor, RED
from ataxx.core.evaluator import Evaluator
from ataxx.core.move import COLS, ROWS, Move
from ataxx.core.utils import format_info

logger = logging.getLogger(__name__)

INF = 2**31 - 1
# Magnitude of a won position (positive for RED). The remaining depth is
# added on top so that quicker wins score higher.
WINNING_VALUE = INF - 20

_OFFSETS = [(dr, dc) for dr in range(-2, 3) for dc in range(-2, 3) if dr or dc]


class SearchError(RuntimeError):
    """Raised when a search is requested for a side that cannot move."""


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None, depth: Optional[int] = None,
                 seed: Optional[int] = None, use_pruning: Optional[bool] = None):
        self.evaluator = evaluator or Evaluator()
        self.max_depth = CONFIG.search.depth if depth is None else depth
        self.use_pruning = CONFIG.search.use_pruning if use_pruning is None else use_pruning
        # Not consumed by the search itself; identical seeds give identical play.
        self.rng = random.Random(CONFIG.search.seed if seed is None else seed)
        self.nodes = 0
        self._last_found_move: Optional[Move] = None

    def legal_moves(self, board: Board) -> List[Move]:
        """All non-pass moves for the side to move, in row-major source order."""
        mover = board.color_to_move()
        moves = []
        for row in ROWS:
            for col in COLS:
                if board.occupant(row, col) is not mover:
                    continue
                for dr, dc in _OFFSETS:
                    row1 = chr(ord(row) + dr)
                    col1 = chr(ord(col) + dc)
                    if board.is_legal_move(row, col, row1, col1):
                        moves.append(Move(row, col, row1, col1))
        return moves

    def search_best_move(self, board: Board, color: PieceColor) -> Tuple[Optional[Move], int]:
        """
        Search from BOARD for COLOR, which must be the side to move and have
        a legal move. Returns (best_move, value); best_move is None when the
        game is already decided or the depth is 0. BOARD is not modified.
        """
        if board is None:
            raise ValueError("board is required")
        if self.max_depth < 0:
            raise ValueError(f"search depth must be non-negative, got {self.max_depth}")
        if color not in (RED, BLUE):
            raise ValueError(f"{color} is not a playing colour")
        if board.color_to_move() is not color:
            raise SearchError(f"{color} is not to move")
        if not board.can_move(color):
            raise SearchError(f"{color} has no legal move; it must pass")

        search_board = board.copy()
        self._last_found_move = None
        self.nodes = 0
        sense = 1 if color is RED else -1

        start_time = time.time()
        value = self._minimax(search_board, self.max_depth, True, sense, -INF, INF)
        elapsed = (time.time() - start_time) * 1000

        logger.info(format_info(self.max_depth, value, self.nodes, elapsed,
                                self._last_found_move, WINNING_VALUE))
        return self._last_found_move, value

    def find_move(self, board: Board, color: PieceColor) -> Optional[Move]:
        """Return a move for COLOR from BOARD, assuming there is one."""
        return self.search_best_move(board, color)[0]

    # -------------------------
    # Minimax with alpha-beta bounds
    # -------------------------
    def _minimax(self, board: Board, depth: int, save_move: bool, sense: int,
                 alpha: int, beta: int) -> int:
        """
        Return the value of BOARD searched DEPTH plies deep, maximizing when
        SENSE is 1 and minimizing when it is -1. When SAVE_MOVE is set the
        move achieving the value is recorded in _last_found_move. Leaves and
        finished games get the static value, with WINNING_VALUE + depth as
        the win magnitude so that sooner wins (and later losses) are
        preferred.
        """
        self.nodes += 1
        if depth == 0 or board.winner() is not None:
            return self.evaluator.evaluate(board, WINNING_VALUE + depth)

        moves = self.legal_moves(board)
        if not moves:
            # Side to move is stuck but the game goes on: score it as a leaf.
            return self.evaluator.evaluate(board, WINNING_VALUE + depth)

        for move in moves:
            with board.applied(move):
                score = self._minimax(board, depth - 1, False, -sense, alpha, beta)

            if sense == 1:
                if score > alpha:
                    alpha = score
                    if save_move:
                        self._last_found_move = move
            elif score < beta:
                beta = score
                if save_move:
                    self._last_found_move = move

            if self.use_pruning and alpha >= beta:
                break

        return alpha if sense == 1 else beta


def choose_move(board: Board, color: PieceColor, seed: int = 0,
                max_depth: Optional[int] = None) -> Optional[Move]:
    """Pick a move for COLOR on BOARD; the caller checks can_move(color) first."""
    return SearchEngine(Evaluator(), depth=max_depth, seed=seed).find_move(board, color)
