"""Rule validation reported as a result instead of an exception."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from ..core.exceptions import PuzzleError
from ..data.dictionary import WordDictionary
from ..utils.logger import get_logger
from .puzzle import Puzzle


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str] = field(default_factory=list)
    error: Optional[PuzzleError] = None


class PuzzleValidator:
    """Runs the base and word checks and collects the first failure."""

    def __init__(self, dictionary: Optional[WordDictionary] = None) -> None:
        self.dictionary = dictionary

    def validate_base(self, puzzle: Puzzle) -> ValidationResult:
        try:
            puzzle.validate_base()
        except PuzzleError as exc:
            LOGGER.info("Base of %s is invalid: %s", puzzle.name, exc)
            return ValidationResult(ok=False, messages=[str(exc)], error=exc)
        return ValidationResult(ok=True)

    def validate_words(self, puzzle: Puzzle) -> ValidationResult:
        if self.dictionary is None:
            raise ValueError("Word validation needs a dictionary")
        try:
            puzzle.validate_words(self.dictionary)
        except PuzzleError as exc:
            LOGGER.info("Words of %s are invalid: %s", puzzle.name, exc)
            return ValidationResult(ok=False, messages=[str(exc)], error=exc)
        return ValidationResult(ok=True)
