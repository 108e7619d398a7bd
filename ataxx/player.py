"""Automated player that chooses its moves with the search engine."""

import logging
import time

from ataxx.core.board import PieceColor
from ataxx.core.move import PASS
from ataxx.core.search import SearchEngine, SearchError

logger = logging.getLogger(__name__)


class AIPlayer:
    def __init__(self, game, color: PieceColor, seed: int = 0, depth: int = None):
        """A player for GAME (an Engine) playing COLOR. Identical seeds give identical play."""
        self.game = game
        self.color = color
        if depth is None:
            depth = game.search.max_depth
        self.search = SearchEngine(game.search.evaluator, depth=depth, seed=seed)

    def is_auto(self) -> bool:
        return True

    def get_move(self) -> str:
        """Return the text of my next move, reporting it to the game.

        The board is never modified here; a side without legal moves
        reports a pass.
        """
        board = self.game.board
        if not board.can_move(self.color):
            self.game.report_move(PASS, self.color)
            return str(PASS)
        start = time.time()
        move = self.search.find_move(board, self.color)
        logger.info("%s searched %d nodes in %.3fs", self.color, self.search.nodes,
                    time.time() - start)
        if move is None:
            raise SearchError(f"search at depth {self.search.max_depth} found no move for {self.color}")
        self.game.report_move(move, self.color)
        return str(move)
