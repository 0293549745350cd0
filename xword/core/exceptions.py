"""Custom exception hierarchy for crossword building and validation.

The rules for American crosswords checked by this package:

1. The pattern of black squares must be symmetrical: turned upside-down, the
   grid looks the same as it does right-side-up.
2. Black squares may not take up more than 16 percent of the grid.
3. The minimum word length is three letters.
4. No word may be repeated in the grid.
5. Every answer must be a real word (it appears in the dictionary).
"""

from __future__ import annotations

from typing import Sequence

from .constants import MIN_WORD_LEN


class CrosswordError(Exception):
    """Base exception for every recoverable failure."""


class GridError(CrosswordError):
    """Raised when a serialized grid cannot be parsed."""


class InvalidPuzzleFormatError(GridError):
    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        message = "Invalid puzzle file format"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NonUtf8Error(GridError):
    def __init__(self, cause: UnicodeDecodeError) -> None:
        self.cause = cause
        super().__init__(f"Puzzle file not in utf8: {cause}")


class PuzzleError(CrosswordError):
    """Raised when a puzzle breaks one of the construction rules."""


class NotSymmetricError(PuzzleError):
    def __init__(self) -> None:
        super().__init__("The black squares are not placed symmetrically")


class TooManyBlackSquaresError(PuzzleError):
    def __init__(self, limit: int) -> None:
        self.limit = limit
        super().__init__(f"More than {limit} percent of the puzzle squares are black")


class WordTooShortError(PuzzleError):
    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f'The word "{word}" is shorter than {MIN_WORD_LEN} letters')


class RepeatWordError(PuzzleError):
    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f'The word "{word}" is repeated')


class MadeUpWordError(PuzzleError):
    """Every word missing from the dictionary, reported together."""

    def __init__(self, words: Sequence[str]) -> None:
        self.words = list(words)
        super().__init__(f'"{self.joined}" are not in the dictionary')

    @property
    def joined(self) -> str:
        return ", ".join(self.words)


class FileCreationError(PuzzleError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Unable create the file '{path}'")


class FileOpenError(PuzzleError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Unable open the file '{path}'")


class ParseError(PuzzleError):
    def __init__(self, cause: GridError) -> None:
        self.cause = cause
        super().__init__(f'Unable to parse this puzzle due to: "{cause}"')


class DictionaryLoadError(CrosswordError):
    """Raised when the word list cannot be read."""


class GenerationError(CrosswordError):
    """Raised when the black-square generator cannot make progress."""
