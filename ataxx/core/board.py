"""7x7 Ataxx board with move application and undo history."""

from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from ataxx.config import CONFIG
from ataxx.core.move import COLS, ROWS, Move

SIDE = 7

INITIAL_LAYOUT = "r-----b/-------/-------/-------/-------/-------/b-----r r"


class IllegalMoveError(ValueError):
    """Raised when applying a move the rules do not allow."""


class BoardStateError(RuntimeError):
    """Raised when the undo history is inconsistent with a request."""


class PieceColor(Enum):
    EMPTY = "-"
    RED = "r"
    BLUE = "b"
    BLOCKED = "X"

    def opposite(self) -> "PieceColor":
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    @property
    def is_piece(self) -> bool:
        return self in (PieceColor.RED, PieceColor.BLUE)

    def __str__(self) -> str:
        return self.name.capitalize()


EMPTY = PieceColor.EMPTY
RED = PieceColor.RED
BLUE = PieceColor.BLUE
BLOCKED = PieceColor.BLOCKED
# winner() reports a tie as EMPTY
DRAW = PieceColor.EMPTY

_NEIGHBORS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if dr or dc]


def _index(row: str, col: str) -> Optional[int]:
    """Cell index for (row, col), or None when off the board."""
    if not (isinstance(row, str) and isinstance(col, str)
            and len(row) == 1 and len(col) == 1):
        return None
    r = ord(row) - ord("a")
    c = ord(col) - ord("1")
    if 0 <= r < SIDE and 0 <= c < SIDE:
        return r * SIDE + c
    return None


@dataclass(frozen=True)
class _UndoRecord:
    move: Move
    mover: PieceColor
    flipped: Tuple[int, ...]
    prev_jumps: int


class Board:
    def __init__(self, layout: str = None, jump_limit: int = None):
        """Initialize from a layout string or the standard starting position."""
        self.jump_limit = CONFIG.board.jump_limit if jump_limit is None else jump_limit
        self._cells: List[PieceColor] = []
        self._to_move = RED
        self._num_jumps = 0
        self._history: List[_UndoRecord] = []
        self.set_layout(INITIAL_LAYOUT if layout is None else layout)

    # ------------------------------------------------------------------
    # Setup and serialisation
    # ------------------------------------------------------------------

    def set_layout(self, layout: str):
        """Replace the position with LAYOUT and clear the history.

        A layout is seven rows ('a' first) of seven cells each, separated by
        '/', followed by a space and the side to move ('r' or 'b').
        """
        try:
            rows_part, side_part = layout.split()
        except (AttributeError, ValueError):
            raise ValueError(f"malformed layout: {layout!r}")
        rows = rows_part.split("/")
        if len(rows) != SIDE or any(len(r) != SIDE for r in rows):
            raise ValueError(f"layout must have {SIDE} rows of {SIDE} cells")
        try:
            cells = [PieceColor(ch) for ch in "".join(rows)]
        except ValueError:
            raise ValueError(f"unknown cell symbol in layout: {layout!r}")
        if side_part not in (RED.value, BLUE.value):
            raise ValueError(f"side to move must be 'r' or 'b', got {side_part!r}")
        self._cells = cells
        self._to_move = PieceColor(side_part)
        self._num_jumps = 0
        self._history.clear()

    def layout(self) -> str:
        """Return the current position as a layout string."""
        rows = ["".join(c.value for c in self._cells[r * SIDE:(r + 1) * SIDE])
                for r in range(SIDE)]
        return "/".join(rows) + " " + self._to_move.value

    def reset(self):
        """Reset to the initial position."""
        self.set_layout(INITIAL_LAYOUT)

    def copy(self) -> "Board":
        """Return an independent board with the same position and history."""
        other = Board.__new__(Board)
        other.jump_limit = self.jump_limit
        other._cells = list(self._cells)
        other._to_move = self._to_move
        other._num_jumps = self._num_jumps
        other._history = list(self._history)
        return other

    def set_block(self, row: str, col: str):
        """Block (row, col) and its reflections across both centre lines."""
        if self._history:
            raise BoardStateError("blocks can only be placed before any move")
        idx = _index(row, col)
        if idx is None:
            raise ValueError(f"no such cell: {row}{col}")
        r, c = divmod(idx, SIDE)
        targets = {rr * SIDE + cc
                   for rr in (r, SIDE - 1 - r) for cc in (c, SIDE - 1 - c)}
        if any(self._cells[t] is not EMPTY for t in targets):
            raise ValueError(f"cannot block occupied cell near {row}{col}")
        for t in targets:
            self._cells[t] = BLOCKED

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def occupant(self, row: str, col: str) -> PieceColor:
        idx = _index(row, col)
        if idx is None:
            raise ValueError(f"no such cell: {row}{col}")
        return self._cells[idx]

    def color_to_move(self) -> PieceColor:
        return self._to_move

    @property
    def num_jumps(self) -> int:
        return self._num_jumps

    @property
    def history(self) -> Tuple[Move, ...]:
        return tuple(rec.move for rec in self._history)

    def piece_count(self, color: PieceColor) -> int:
        return self._cells.count(color)

    def is_legal_move(self, row0: str, col0: str, row1: str, col1: str) -> bool:
        """True iff the side to move may move a piece from (row0, col0) to (row1, col1)."""
        src = _index(row0, col0)
        dst = _index(row1, col1)
        if src is None or dst is None:
            return False
        if self._cells[src] is not self._to_move or self._cells[dst] is not EMPTY:
            return False
        dr = abs(ord(row1) - ord(row0))
        dc = abs(ord(col1) - ord(col0))
        return 1 <= max(dr, dc) <= 2

    def legal_move(self, move: Move) -> bool:
        if move.is_pass:
            return not self.can_move(self._to_move)
        return self.is_legal_move(move.row0, move.col0, move.row1, move.col1)

    def can_move(self, color: PieceColor) -> bool:
        """True iff COLOR has a non-pass move, whoever is to move."""
        for idx, cell in enumerate(self._cells):
            if cell is not color:
                continue
            r, c = divmod(idx, SIDE)
            for dr in range(-2, 3):
                for dc in range(-2, 3):
                    rr, cc = r + dr, c + dc
                    if (0 <= rr < SIDE and 0 <= cc < SIDE
                            and self._cells[rr * SIDE + cc] is EMPTY):
                        return True
        return False

    def winner(self) -> Optional[PieceColor]:
        """RED, BLUE or DRAW once the game is over, else None."""
        red = self.piece_count(RED)
        blue = self.piece_count(BLUE)
        over = (red == 0 or blue == 0
                or self._num_jumps >= self.jump_limit
                or (not self.can_move(RED) and not self.can_move(BLUE)))
        if not over:
            return None
        if red > blue:
            return RED
        if blue > red:
            return BLUE
        return DRAW

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def apply_move(self, move: Move):
        """Play MOVE for the side to move and push it onto the history."""
        if not self.legal_move(move):
            raise IllegalMoveError(f"illegal move for {self._to_move}: {move}")
        mover = self._to_move
        prev_jumps = self._num_jumps
        flipped = []
        if not move.is_pass:
            src = _index(move.row0, move.col0)
            dst = _index(move.row1, move.col1)
            self._cells[dst] = mover
            if move.is_jump:
                self._cells[src] = EMPTY
                self._num_jumps += 1
            else:
                self._num_jumps = 0
            r, c = divmod(dst, SIDE)
            opponent = mover.opposite()
            for dr, dc in _NEIGHBORS:
                rr, cc = r + dr, c + dc
                if 0 <= rr < SIDE and 0 <= cc < SIDE:
                    n = rr * SIDE + cc
                    if self._cells[n] is opponent:
                        self._cells[n] = mover
                        flipped.append(n)
        self._history.append(_UndoRecord(move, mover, tuple(flipped), prev_jumps))
        self._to_move = mover.opposite()

    def undo(self):
        """Reverse the most recently applied move."""
        if not self._history:
            raise BoardStateError("undo with empty history")
        rec = self._history.pop()
        move = rec.move
        if not move.is_pass:
            self._cells[_index(move.row1, move.col1)] = EMPTY
            if move.is_jump:
                self._cells[_index(move.row0, move.col0)] = rec.mover
            opponent = rec.mover.opposite()
            for n in rec.flipped:
                self._cells[n] = opponent
        self._num_jumps = rec.prev_jumps
        self._to_move = rec.mover

    @contextmanager
    def applied(self, move: Move) -> Iterator["Board"]:
        """Apply MOVE for the duration of a with-block, undoing it on exit."""
        self.apply_move(move)
        try:
            yield self
        finally:
            self.undo()

    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (self._cells == other._cells
                and self._to_move is other._to_move
                and self._num_jumps == other._num_jumps)

    def __str__(self) -> str:
        lines = ["  " + " ".join(COLS)]
        for r, row in enumerate(ROWS):
            cells = self._cells[r * SIDE:(r + 1) * SIDE]
            lines.append(row + " " + " ".join(c.value for c in cells))
        lines.append(f"{self._to_move} to move")
        return "\n".join(lines)
