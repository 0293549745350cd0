"""Pretty-print helpers for crossword grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:
    from ..data.sparse_word import SparseWord
    from ..engine.puzzle import Puzzle


def format_grid(puzzle: Puzzle) -> str:
    """Render the grid with column numbers and the cell index of each row start.

    The row labels are the linear indices taken by ``suggest``.
    """

    grid = puzzle.cells
    size = grid.size
    label_width = max(2, len(str(max(size * size - 1, 0))))
    pad = " " * label_width
    lines = [f"{pad}   " + " ".join(f"{c:>2}" for c in range(size))]
    lines.append(f"{pad}   " + "-" * (3 * size - 1))
    for y in range(size):
        row_render = " ".join(f"{cell.to_token():>2}" for cell in grid.row(y))
        lines.append(f"{y * size:>{label_width}} | {row_render}")
    return "\n".join(lines)


def format_stats(puzzle: Puzzle) -> List[str]:
    grid = puzzle.cells
    total = puzzle.size * puzzle.size
    black = grid.black_count()
    empty = sum(1 for cell in grid.cells() if cell.is_empty())
    words = puzzle.all_words()
    length_dist = Counter(len(word) for word in words)

    lines = [
        f"  Name:          {puzzle.name}",
        f"  Size:          {puzzle.size} x {puzzle.size} ({total} cells)",
        f"  Black squares: {black} ({black * 100 // total if total else 0}%)",
    ]
    if empty:
        lines.append(f"  Unfilled:      {empty}")
    lines.append(f"  Words:         {len(words)} ({len(puzzle.words_across())} across, "
                 f"{len(puzzle.words_down())} down)")
    if length_dist:
        dist_parts = [f"{length}:{count}" for length, count in sorted(length_dist.items())]
        lines.append(f"  Distribution:  {' '.join(dist_parts)}")
    return lines


def print_puzzle(puzzle: Puzzle, *, stats: bool = False, stream=None) -> None:
    """Print the crossword grid in a human-friendly format."""

    stream = stream or sys.stdout
    print(format_grid(puzzle), file=stream)
    if stats:
        print(file=stream)
        print("--- Puzzle ---", file=stream)
        for line in format_stats(puzzle):
            print(line, file=stream)


def print_suggestions(
    pattern: SparseWord,
    suggestions: Sequence[str],
    *,
    stream=None,
) -> None:
    stream = stream or sys.stdout
    print(f"Pattern {pattern.pattern.upper()}: {len(suggestions)} suggestion(s)", file=stream)
    for word in sorted(suggestions):
        print(f"  {word}", file=stream)
