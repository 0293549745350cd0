"""File-backed puzzle store.

Each puzzle is saved as ``<store_dir>/<name>.txt`` in the plain-text grid
format: one line per row, cells separated by spaces.
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Optional

from ..core.constants import DEFAULT_PUZZLE_DIR
from ..core.exceptions import (FileCreationError, FileOpenError, GridError,
                               InvalidPuzzleFormatError, ParseError)
from ..engine.grid import Grid
from ..engine.puzzle import Puzzle
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class PuzzleStore:
    """Save and open puzzles by name."""

    def __init__(self, store_dir: Path | str = DEFAULT_PUZZLE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str) -> Path:
        return self.store_dir / f"{name}.txt"

    def save(self, puzzle: Puzzle) -> Path:
        path = self.path_for(puzzle.name)
        try:
            path.write_bytes(puzzle.to_text().encode("utf-8"))
        except OSError as exc:
            raise FileCreationError(str(path)) from exc
        LOGGER.info("Puzzle saved: %s", path)
        return path

    def open(self, name: str, rng: Optional[random.Random] = None) -> Puzzle:
        path = self.path_for(name)
        try:
            buffer = path.read_bytes()
        except OSError as exc:
            raise FileOpenError(str(path)) from exc

        try:
            grid = Grid.from_bytes(buffer)
        except GridError as exc:
            raise ParseError(exc) from exc
        if not grid.size:
            raise ParseError(InvalidPuzzleFormatError("no rows"))

        LOGGER.info("Puzzle opened: %s", path)
        return Puzzle.from_grid(name, grid, rng=rng)

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()
