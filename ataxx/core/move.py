"""Move values for a 7x7 Ataxx board."""

from dataclasses import dataclass
from typing import Optional

ROWS = "abcdefg"
COLS = "1234567"

PASS_TEXT = "-"


@dataclass(frozen=True)
class Move:
    """A piece moving from (row0, col0) to (row1, col1).

    Rows are the letters 'a'..'g', columns the digits '1'..'7'. The pass
    move is the module-level PASS sentinel, whose endpoints are all None.
    """
    row0: Optional[str]
    col0: Optional[str]
    row1: Optional[str]
    col1: Optional[str]

    @classmethod
    def parse(cls, text: str) -> "Move":
        """Parse 'b2-c3' style text, or '-' for a pass."""
        text = text.strip()
        if text == PASS_TEXT:
            return PASS
        if (len(text) != 5 or text[2] != "-"
                or text[0] not in ROWS or text[3] not in ROWS
                or text[1] not in COLS or text[4] not in COLS):
            raise ValueError(f"malformed move: {text!r}")
        return cls(text[0], text[1], text[3], text[4])

    @property
    def is_pass(self) -> bool:
        return self.row0 is None

    @property
    def row_offset(self) -> int:
        return ord(self.row1) - ord(self.row0)

    @property
    def col_offset(self) -> int:
        return ord(self.col1) - ord(self.col0)

    @property
    def distance(self) -> int:
        if self.is_pass:
            return 0
        return max(abs(self.row_offset), abs(self.col_offset))

    @property
    def is_extend(self) -> bool:
        return self.distance == 1

    @property
    def is_jump(self) -> bool:
        return self.distance == 2

    def __str__(self) -> str:
        if self.is_pass:
            return PASS_TEXT
        return f"{self.row0}{self.col0}-{self.row1}{self.col1}"


PASS = Move(None, None, None, None)
