"""Data models supporting the crossword grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .constants import BLACK_GLYPH, EMPTY_GLYPH, EMPTY_PLACEHOLDER, CellType
from .exceptions import InvalidPuzzleFormatError


@dataclass(frozen=True)
class Cell:
    """A single grid square: black, empty, or holding one letter."""

    type: CellType = CellType.EMPTY
    letter: Optional[str] = None

    @classmethod
    def of_letter(cls, letter: str) -> "Cell":
        if len(letter) != 1 or not letter.isalpha():
            raise ValueError(f"Not a single alphabetic character: {letter!r}")
        return cls(CellType.LETTER, letter)

    @classmethod
    def from_token(cls, token: str) -> "Cell":
        """Parse one whitespace-separated token of the puzzle file format."""

        if token == BLACK_GLYPH:
            return BLACK
        if token == EMPTY_GLYPH:
            return EMPTY
        if len(token) == 1 and token.isalpha():
            return cls(CellType.LETTER, token)
        raise InvalidPuzzleFormatError(f"unrecognized cell {token!r}")

    def is_black(self) -> bool:
        return self.type == CellType.BLACK

    def is_empty(self) -> bool:
        return self.type == CellType.EMPTY

    def is_letter(self) -> bool:
        return self.type == CellType.LETTER

    def to_token(self) -> str:
        if self.type == CellType.BLACK:
            return BLACK_GLYPH
        if self.type == CellType.EMPTY:
            return EMPTY_GLYPH
        return self.letter or ""

    def as_char(self) -> str:
        """Character used for this cell when it is read as part of a word."""

        if self.type == CellType.BLACK:
            raise ValueError("A black cell is not part of any word")
        if self.type == CellType.EMPTY:
            return EMPTY_PLACEHOLDER
        return self.letter or ""

    @staticmethod
    def as_string(cells: Iterable["Cell"]) -> str:
        return "".join(cell.as_char() for cell in cells)


BLACK = Cell(CellType.BLACK)
EMPTY = Cell(CellType.EMPTY)
