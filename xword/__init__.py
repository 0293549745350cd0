"""Builder and validator for American-style crossword grids.

This package exposes the public API surface via:

- ``xword.engine.puzzle.Puzzle``: owns a grid, extracts words, validates and
  generates symmetric black-square patterns.
- ``xword.data.dictionary.WordDictionary``: length-indexed word list.
- ``xword.data.sparse_word.SparseWord``: partial-word patterns for suggestions.
- ``xword.io.store.PuzzleStore``: saves and opens puzzle files.
"""

from .core.models import BLACK, EMPTY, Cell
from .data.dictionary import DictionaryConfig, WordDictionary
from .data.sparse_word import SparseWord
from .engine.grid import Grid
from .engine.puzzle import Puzzle
from .engine.validator import PuzzleValidator, ValidationResult
from .io.store import PuzzleStore

__all__ = [
    "BLACK",
    "EMPTY",
    "Cell",
    "DictionaryConfig",
    "Grid",
    "Puzzle",
    "PuzzleStore",
    "PuzzleValidator",
    "SparseWord",
    "ValidationResult",
    "WordDictionary",
]

__version__ = "0.1.0"
