"""Grid representation and geometric checks."""

from __future__ import annotations

import re
from typing import Iterable, List, Sequence

from ..core.constants import PERCENT_BLACK, Bounds
from ..core.exceptions import (NonUtf8Error, NotSymmetricError,
                               TooManyBlackSquaresError)
from ..core.models import EMPTY, Cell


# Only ASCII whitespace separates cells; the glyphs themselves are non-ASCII.
_CELL_SEPARATOR = re.compile(r"[ \t\r\f]+")


class Grid:
    """A matrix of cells addressed as ``(x, y)`` = (column, row)."""

    def __init__(self, rows: Iterable[Sequence[Cell]]) -> None:
        self._rows: List[List[Cell]] = [list(row) for row in rows]

    @classmethod
    def new(cls, size: int) -> "Grid":
        return cls([[EMPTY] * size for _ in range(size)])

    @classmethod
    def from_bytes(cls, buf: bytes) -> "Grid":
        """Parse the puzzle file format.

        Rows are separated by ``\\n`` and cells by ASCII whitespace. Blank rows
        are skipped so trailing newlines and CRLF files load cleanly.
        """

        rows: List[List[Cell]] = []
        for raw_row in buf.split(b"\n"):
            try:
                text = raw_row.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise NonUtf8Error(exc) from exc
            tokens = [token for token in _CELL_SEPARATOR.split(text) if token]
            if not tokens:
                continue
            rows.append([Cell.from_token(token) for token in tokens])
        return cls(rows)

    @classmethod
    def from_text(cls, text: str) -> "Grid":
        return cls.from_bytes(text.encode("utf-8"))

    def to_text(self) -> str:
        return "".join(
            " ".join(cell.to_token() for cell in row) + "\n" for row in self._rows
        )

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return f"Grid(size={len(self._rows)})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._rows == other._rows

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------
    @property
    def size(self) -> int:
        return len(self._rows)

    @property
    def bounds(self) -> Bounds:
        return Bounds(len(self._rows), len(self._rows[0]) if self._rows else 0)

    @property
    def rows(self) -> List[List[Cell]]:
        return [list(row) for row in self._rows]

    def row(self, y: int) -> List[Cell]:
        if not 0 <= y < len(self._rows):
            raise IndexError(f"Row {y} outside grid of {len(self._rows)} rows")
        return list(self._rows[y])

    def column(self, x: int) -> List[Cell]:
        return [self.get(x, y) for y in range(len(self._rows))]

    def get(self, x: int, y: int) -> Cell:
        self._check_bounds(x, y)
        return self._rows[y][x]

    def set(self, x: int, y: int, value: Cell) -> None:
        self._check_bounds(x, y)
        self._rows[y][x] = value

    def _check_bounds(self, x: int, y: int) -> None:
        # Ragged rows are only possible before is_square has run.
        if not self.bounds.contains(y, x) or x >= len(self._rows[y]):
            raise IndexError(f"Cell {(x, y)} outside the grid")

    def copy(self) -> "Grid":
        return Grid(self._rows)

    def cells(self) -> Iterable[Cell]:
        """Row-major iteration over every cell."""

        for row in self._rows:
            yield from row

    def black_count(self) -> int:
        return sum(1 for cell in self.cells() if cell.is_black())

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    def transpose(self) -> "Grid":
        if not self._rows:
            raise ValueError("Cannot transpose an empty grid")
        width = len(self._rows[0])
        return Grid([[row[i] for row in self._rows] for i in range(width)])

    def rotate_180(self) -> "Grid":
        return Grid([list(reversed(row)) for row in reversed(self._rows)])

    def is_square(self) -> None:
        size = len(self._rows)
        for row in self._rows:
            if len(row) != size:
                raise NotSymmetricError()

    def _black_squares_match(self, other: "Grid") -> bool:
        size = len(self._rows)
        for y in range(size):
            for x in range(size):
                if self.get(x, y).is_black() != other.get(x, y).is_black():
                    return False
        return True

    def is_symmetric(self) -> None:
        """Black squares must sit in the same places after a 180° turn."""

        if not self._black_squares_match(self.rotate_180()):
            raise NotSymmetricError()

    def acceptable_black_square_count(self, percent: int = PERCENT_BLACK) -> None:
        size = len(self._rows)
        total = size * size
        if total and (self.black_count() * 100) // total > percent:
            raise TooManyBlackSquaresError(percent)

    @staticmethod
    def ok_dist_to_black_or_edge(cells: Sequence[Cell]) -> bool:
        """The run before the first black cell (or the end) is 0 or >= 3 long."""

        dist = 0
        for cell in cells:
            if cell.is_black():
                break
            dist += 1
        return dist == 0 or dist >= 3
