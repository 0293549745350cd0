"""Length-indexed word list used for validation and fill suggestions."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Set

from ..core.constants import DEFAULT_DICTIONARY_FILE, MAX_WORD_LEN
from ..core.exceptions import DictionaryLoadError
from ..utils.logger import get_logger
from .sparse_word import SparseWord


LOGGER = get_logger(__name__)


@dataclass
class DictionaryConfig:
    """Configuration for dictionary loading."""

    path: Path | str = DEFAULT_DICTIONARY_FILE
    max_length: int = MAX_WORD_LEN
    missing_ok: bool = True


class WordDictionary:
    """Words bucketed by length.

    Built once from a word list and only read afterwards. Words are stored
    exactly as given, so callers lower-case their queries to match a
    lower-case word list.
    """

    def __init__(self, max_length: int = MAX_WORD_LEN) -> None:
        self.max_length = max_length
        self._words_by_length: Dict[int, Set[str]] = defaultdict(set)

    @classmethod
    def from_words(cls, words: Iterable[str], max_length: int = MAX_WORD_LEN) -> "WordDictionary":
        dictionary = cls(max_length)
        for word in words:
            dictionary.insert(word)
        return dictionary

    @classmethod
    def load(cls, config: DictionaryConfig | None = None) -> "WordDictionary":
        config = config or DictionaryConfig()
        source = Path(config.path)
        dictionary = cls(config.max_length)
        LOGGER.info("Loading dictionary from %s", source)
        try:
            with source.open("rb") as handle:
                for raw_line in handle:
                    try:
                        word = raw_line.rstrip(b"\r\n").decode("utf-8")
                    except UnicodeDecodeError:
                        LOGGER.debug("Skipping undecodable line in %s", source)
                        continue
                    dictionary.insert(word)
        except FileNotFoundError as exc:
            if not config.missing_ok:
                raise DictionaryLoadError(f"Missing dictionary file: {source}") from exc
            LOGGER.warning("Dictionary file %s not found; continuing with no words", source)
            return dictionary
        except OSError as exc:
            raise DictionaryLoadError(f"Unable to read dictionary file {source}: {exc}") from exc
        LOGGER.info("Loaded %d words", len(dictionary))
        return dictionary

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def insert(self, word: str) -> bool:
        """Add ``word``; lengths outside ``1..max_length-1`` are dropped."""

        length = len(word)
        if length < 1 or length >= self.max_length:
            return False
        bucket = self._words_by_length[length]
        if word in bucket:
            return False
        bucket.add(word)
        return True

    def is_valid(self, word: str) -> bool:
        bucket = self._words_by_length.get(len(word))
        return bucket is not None and word in bucket

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.is_valid(word)

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._words_by_length.values())

    def iter_length(self, length: int) -> Iterable[str]:
        return self._words_by_length.get(length, ())

    def suggest_words(self, pattern: SparseWord, count: int) -> List[str]:
        """Return up to ``count`` words matching ``pattern``, in no particular order."""

        suggestions: List[str] = []
        if count <= 0:
            return suggestions
        for word in self.iter_length(len(pattern)):
            if pattern.matches(word):
                suggestions.append(word)
                if len(suggestions) >= count:
                    break
        return suggestions
