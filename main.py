"""CLI entrypoint for building and checking crossword puzzles."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

from xword.core.constants import DEFAULT_DICTIONARY_FILE, DEFAULT_PUZZLE_DIR, Direction
from xword.core.exceptions import CrosswordError, GenerationError
from xword.data.dictionary import DictionaryConfig, WordDictionary
from xword.engine.puzzle import Puzzle
from xword.engine.validator import PuzzleValidator
from xword.io.store import PuzzleStore
from xword.utils.logger import configure_logging, get_logger
from xword.utils.pretty import print_puzzle, print_suggestions


LOGGER = get_logger("xword.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="A command line utility to help build crossword puzzles",
    )
    parser.add_argument("name", help="Puzzle name; stored as <puzzle-dir>/<name>.txt")
    parser.add_argument(
        "--puzzle-dir",
        type=Path,
        default=Path(DEFAULT_PUZZLE_DIR),
        help="Directory holding puzzle files",
    )
    parser.add_argument(
        "--dictionary",
        type=Path,
        default=Path(DEFAULT_DICTIONARY_FILE),
        help="Word list, one word per line",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    new = commands.add_parser("new", help="Generate a new crossword grid with random black squares")
    new.add_argument("size", type=int, nargs="?", default=3, help="Grid side length")
    commands.add_parser("random-fill", help="Fill a puzzle's empty cells with random letters")
    commands.add_parser("check-base", help="Validate the base grid of a puzzle")
    commands.add_parser("check-words", help="Validate the puzzle's words")
    commands.add_parser("display", help="Display the puzzle")
    suggest = commands.add_parser("suggest", help="Suggest dictionary words for a partial word")
    suggest.add_argument("index", type=int, help="Cell index, counted row by row from the top left")
    suggest.add_argument("direction", choices=[d.value for d in Direction])
    suggest.add_argument("count", type=int, nargs="?", default=5)
    return parser


def _load_dictionary(args: argparse.Namespace) -> WordDictionary:
    return WordDictionary.load(DictionaryConfig(path=args.dictionary))


def run(args: argparse.Namespace, store: PuzzleStore, rng: random.Random) -> int:
    if args.command == "new":
        if args.size < 1:
            print(f"Puzzle size must be positive, got {args.size}")
            return 1
        if store.exists(args.name):
            LOGGER.warning("Overwriting existing puzzle %s", args.name)
        puzzle = Puzzle.new(args.name, args.size, rng=rng)
        try:
            puzzle.random_black()
        except GenerationError as exc:
            # Groups already placed still form a valid base.
            LOGGER.warning("Keeping partial black squares for %s: %s", args.name, exc)
        print_puzzle(puzzle)
        store.save(puzzle)
        return 0

    puzzle = store.open(args.name, rng=rng)

    if args.command == "random-fill":
        puzzle.random_letters()
        print_puzzle(puzzle)
        store.save(puzzle)
        return 0

    if args.command == "display":
        print_puzzle(puzzle, stats=True)
        return 0

    if args.command == "check-base":
        result = PuzzleValidator().validate_base(puzzle)
        if result.ok:
            print("Puzzle base is valid")
            return 0
        print(f"Puzzle base is invalid: {result.messages[0]}")
        return 1

    if args.command == "check-words":
        result = PuzzleValidator(_load_dictionary(args)).validate_words(puzzle)
        if result.ok:
            print("Puzzle words are valid")
            return 0
        print(f"Puzzle words are invalid: {result.messages[0]}")
        return 1

    # suggest
    if not 0 <= args.index < puzzle.size * puzzle.size:
        print(f"Index {args.index} is outside the {puzzle.size}x{puzzle.size} puzzle")
        return 1
    partial_word = puzzle.get_word(args.index, Direction(args.direction))
    if partial_word is None:
        print(f"There is no {args.direction} word at index {args.index}")
        return 1
    suggestions = _load_dictionary(args).suggest_words(partial_word, args.count)
    print_suggestions(partial_word, suggestions)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    try:
        store = PuzzleStore(args.puzzle_dir)
    except OSError as exc:
        print(f"Error creating dir {args.puzzle_dir}: {exc}")
        return 1

    try:
        return run(args, store, random.Random(args.seed))
    except CrosswordError as exc:
        print(exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
