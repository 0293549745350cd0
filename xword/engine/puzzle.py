"""Puzzle engine: word extraction, validation and random generation.

A :class:`Puzzle` keeps its grid together with a materialised transpose so
that down words can be read as rows. Both copies are private and every write
goes through :meth:`Puzzle._set`, which updates them together.
"""

from __future__ import annotations

import random
import string
from typing import Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from ..core.constants import (MAX_GENERATION_SCANS, MIN_WORD_LEN, PERCENT_BLACK,
                              Direction)
from ..core.exceptions import (GenerationError, MadeUpWordError, RepeatWordError,
                               WordTooShortError)
from ..core.models import BLACK, Cell
from ..data.dictionary import WordDictionary
from ..data.sparse_word import SparseWord
from ..utils.logger import get_logger
from .grid import Grid


LOGGER = get_logger(__name__)


def _spacing_ok(row: Sequence[Cell], col: Sequence[Cell], x: int, y: int) -> bool:
    """Check the runs left, right, above and below ``(x, y)``."""

    left = list(reversed(row[:x]))
    right = row[x + 1:]
    up = list(reversed(col[:y]))
    down = col[y + 1:]
    return all(Grid.ok_dist_to_black_or_edge(cells) for cells in (left, right, up, down))


class Puzzle:
    """A named square crossword grid."""

    def __init__(self, name: str, grid: Grid, rng: Optional[random.Random] = None) -> None:
        grid.is_square()
        self.name = name
        self.size = grid.size
        self._cells = grid.copy()
        self._transpose = self._cells.transpose()
        self.rng = rng or random.Random()

    @classmethod
    def new(cls, name: str, size: int, rng: Optional[random.Random] = None) -> "Puzzle":
        return cls(name, Grid.new(size), rng=rng)

    @classmethod
    def from_grid(cls, name: str, grid: Grid, rng: Optional[random.Random] = None) -> "Puzzle":
        return cls(name, grid, rng=rng)

    @classmethod
    def from_bytes(cls, name: str, buf: bytes, rng: Optional[random.Random] = None) -> "Puzzle":
        return cls(name, Grid.from_bytes(buf), rng=rng)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Puzzle):
            return NotImplemented
        return (self.name, self.size, self._cells) == (other.name, other.size, other._cells)

    def __repr__(self) -> str:
        return f"Puzzle(name={self.name!r}, size={self.size})"

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    @property
    def cells(self) -> Grid:
        return self._cells.copy()

    @property
    def transposed(self) -> Grid:
        return self._transpose.copy()

    def get(self, x: int, y: int) -> Cell:
        return self._cells.get(x, y)

    def _set(self, x: int, y: int, value: Cell) -> None:
        self._cells.set(x, y, value)
        self._transpose.set(y, x, value)

    def symmetric_positions(self, x: int, y: int) -> List[Tuple[int, int]]:
        """The four cells that map onto each other under quarter turns."""

        last = self.size - 1
        return [(x, y), (last - y, x), (last - x, last - y), (y, last - x)]

    def set_symmetric(self, x: int, y: int, value: Cell) -> None:
        for px, py in self.symmetric_positions(x, y):
            self._set(px, py, value)

    def to_text(self) -> str:
        return self._cells.to_text()

    # ------------------------------------------------------------------
    # Words
    # ------------------------------------------------------------------
    @staticmethod
    def _runs(rows: Iterable[Sequence[Cell]]) -> Iterator[List[Cell]]:
        for row in rows:
            run: List[Cell] = []
            for cell in row:
                if cell.is_black():
                    if run:
                        yield run
                    run = []
                else:
                    run.append(cell)
            if run:
                yield run

    def words_across(self) -> List[str]:
        return [Cell.as_string(run) for run in self._runs(self._cells.rows)]

    def words_down(self) -> List[str]:
        return [Cell.as_string(run) for run in self._runs(self._transpose.rows)]

    def all_words(self) -> List[str]:
        return self.words_across() + self.words_down()

    def _index_to_coords(self, index: int) -> Tuple[int, int]:
        if not 0 <= index < self.size * self.size:
            raise IndexError(f"Cell index {index} outside a {self.size}x{self.size} puzzle")
        return index // self.size, index % self.size

    @staticmethod
    def _take_word(cells: Sequence[Cell], start: int) -> Optional[SparseWord]:
        letters: List[Optional[str]] = []
        for cell in cells[start:]:
            if cell.is_black():
                break
            letters.append(cell.letter if cell.is_letter() else None)
        if not letters:
            return None
        return SparseWord(letters)

    def get_across_word(self, index: int) -> Optional[SparseWord]:
        """The across word starting at ``index``, counting cells row by row from the top left."""

        row, col = self._index_to_coords(index)
        return self._take_word(self._cells.row(row), col)

    def get_down_word(self, index: int) -> Optional[SparseWord]:
        """The down word starting at ``index``, counting cells row by row from the top left."""

        row, col = self._index_to_coords(index)
        return self._take_word(self._transpose.row(col), row)

    def get_word(self, index: int, direction: Direction) -> Optional[SparseWord]:
        if Direction(direction) == Direction.ACROSS:
            return self.get_across_word(index)
        return self.get_down_word(index)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def validate_base(self) -> None:
        """Check the black/white pattern, ignoring letters.

        1. The grid is square.
        2. Black squares are rotationally symmetric.
        3. Black squares stay under the density cap.
        4. All words are at least three cells long.
        """

        self._cells.is_square()
        self._cells.is_symmetric()
        self._cells.acceptable_black_square_count(PERCENT_BLACK)
        self._no_too_short_words()

    def validate_words(self, dictionary: WordDictionary) -> None:
        """Check the filled-in words.

        1. No word is repeated.
        2. All words are at least three letters long.
        3. Every word appears in ``dictionary``; all misses are reported together.
        """

        self._no_repeat_words()
        self._no_too_short_words()
        self._valid_words(dictionary)

    def _no_repeat_words(self) -> None:
        seen: Set[str] = set()
        for word in self.all_words():
            if word in seen:
                raise RepeatWordError(word)
            seen.add(word)

    def _no_too_short_words(self) -> None:
        for word in self.all_words():
            if len(word) < MIN_WORD_LEN:
                raise WordTooShortError(word)

    def _valid_words(self, dictionary: WordDictionary) -> None:
        invalid = [word for word in self.all_words() if not dictionary.is_valid(word.lower())]
        if invalid:
            raise MadeUpWordError(invalid)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    def valid_black_placement(self, x: int, y: int) -> bool:
        """Would a black square at ``(x, y)`` leave room for 3-letter words on every side?"""

        return _spacing_ok(self._cells.row(y), self._transpose.row(x), x, y)

    def _mirrors_keep_spacing(self, x: int, y: int) -> bool:
        # Cells on the quadrant diagonal share a row and a column with their
        # own mirrors, so the check has to see all four placed at once.
        trial = self._cells.copy()
        positions = self.symmetric_positions(x, y)
        for px, py in positions:
            trial.set(px, py, BLACK)
        return all(_spacing_ok(trial.row(py), trial.column(px), px, py) for px, py in positions)

    def _black_candidates(self, quadrant: int) -> Iterator[Tuple[int, int]]:
        for row in range(quadrant):
            for col in range(quadrant):
                if self.get(col, row).is_black():
                    continue
                if self.valid_black_placement(col, row) and self._mirrors_keep_spacing(col, row):
                    yield col, row

    def random_black(self, max_scans: int = MAX_GENERATION_SCANS) -> int:
        """Blacken random cells in symmetric groups of four.

        Returns the number of groups placed. Grids smaller than 5x5 are left
        alone since no symmetric pattern can keep every word 3 letters long.
        """

        if self.size < 5:
            LOGGER.debug("Skipping black squares for %sx%s puzzle", self.size, self.size)
            return 0

        quadrant = max(2, self.size // 2)
        upper_threshold = (self.size * self.size * PERCENT_BLACK) // 100
        target = upper_threshold // 4
        placed = 0
        scans = 0

        while placed < target:
            if scans >= max_scans:
                raise GenerationError(
                    f"Placed {placed}/{target} black square groups after {scans} scans"
                )
            scans += 1
            candidates = 0
            # Restart from the top after each placement since spacing changes.
            for col, row in self._black_candidates(quadrant):
                candidates += 1
                if self.rng.random() < 0.5:
                    self.set_symmetric(col, row, BLACK)
                    placed += 1
                    LOGGER.debug("Placed black squares around %s (%d/%d)", (col, row), placed, target)
                    break
            if candidates == 0:
                raise GenerationError(
                    f"No cell can take a black square; placed {placed}/{target} groups"
                )

        LOGGER.info(
            "Placed %d black squares in %s after %d scans",
            self._cells.black_count(),
            self.name,
            scans,
        )
        return placed

    def random_letters(self) -> int:
        """Fill every empty cell with a random capital letter; returns the count."""

        filled = 0
        for y in range(self.size):
            for x in range(self.size):
                if self.get(x, y).is_empty():
                    self._set(x, y, Cell.of_letter(self.rng.choice(string.ascii_uppercase)))
                    filled += 1
        LOGGER.info("Filled %d empty cells in %s with random letters", filled, self.name)
        return filled
