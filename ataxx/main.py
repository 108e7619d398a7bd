import logging
from typing import List, Optional, Tuple

from ataxx.config import CONFIG
from ataxx.core.board import Board, BoardStateError, DRAW, IllegalMoveError, PieceColor
from ataxx.core.evaluator import Evaluator
from ataxx.core.move import PASS, Move
from ataxx.core.search import SearchEngine
from ataxx.player import AIPlayer

logger = logging.getLogger(__name__)


class Engine:
    def __init__(self, depth: int = None, seed: int = None, layout: str = None):
        if depth is not None and depth < 1:
            raise ValueError(f"playing depth must be at least 1, got {depth}")
        self.board = Board(layout)
        self.search = SearchEngine(Evaluator(), depth=depth, seed=seed)
        self.seed = CONFIG.search.seed if seed is None else seed
        self.reports: List[str] = []

    def get_best_move(self) -> Tuple[Optional[str], int]:
        """Best move for the side to move as text ('-' to pass) and its value."""
        color = self.board.color_to_move()
        if not self.board.can_move(color):
            return str(PASS), 0
        move, value = self.search.search_best_move(self.board, color)
        return (str(move) if move else None), value

    def make_move(self, move_str: str) -> bool:
        """Play a move such as 'b2-c3' or '-'. Returns True if legal."""
        if self.is_game_over():
            return False
        try:
            self.board.apply_move(Move.parse(move_str))
        except ValueError:
            # covers IllegalMoveError
            return False
        return True

    def play_ai_move(self) -> str:
        """Let an AIPlayer choose for the side to move and play its move."""
        if self.is_game_over():
            raise BoardStateError(f"game is over: {self.result()}")
        color = self.board.color_to_move()
        player = AIPlayer(self, color, seed=self.seed)
        move_str = player.get_move()
        if not self.make_move(move_str):
            raise IllegalMoveError(f"engine produced an unplayable move: {move_str}")
        return move_str

    def report_move(self, move: Move, color: PieceColor):
        if move.is_pass:
            msg = f"{color} passes."
        else:
            msg = f"{color} moves {move}."
        self.reports.append(msg)
        logger.info(msg)

    def is_game_over(self) -> bool:
        return self.board.winner() is not None

    def result(self) -> Optional[str]:
        winner = self.board.winner()
        if winner is None:
            return None
        if winner is DRAW:
            return "Draw."
        return f"{winner} wins."

    def print_board(self):
        print(self.board)
