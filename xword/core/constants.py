"""Shared constants and enumerations for the crossword builder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


BLACK_GLYPH = "▩"
EMPTY_GLYPH = "▢"
# Stands in for an unfilled cell when a run of cells is read as a word.
EMPTY_PLACEHOLDER = "_"

PERCENT_BLACK = 16
MIN_WORD_LEN = 3
MAX_WORD_LEN = 30
MAX_GENERATION_SCANS = 10_000

DEFAULT_PUZZLE_DIR = "puzzles"
DEFAULT_DICTIONARY_FILE = "english3.txt"


class CellType(str, Enum):
    """All supported cell types in the grid."""

    BLACK = "BLACK"
    EMPTY = "EMPTY"
    LETTER = "LETTER"


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "across"
    DOWN = "down"


@dataclass(frozen=True)
class Bounds:
    """Row and column extent of a grid."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
