"""Core engine components: moves, board, evaluator and search."""

from .move import Move, PASS
from .board import Board, PieceColor
from .evaluator import Evaluator
from .search import SearchEngine, choose_move
