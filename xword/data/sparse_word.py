"""Fixed-length word patterns with optional letters."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

WILDCARD = "."


class SparseWord:
    """A word template such as ``a.t``: some positions fixed, the rest free.

    Fixed letters compare case-insensitively and a pattern only ever matches
    words of exactly its own length.
    """

    __slots__ = ("_letters",)

    def __init__(self, letters: Iterable[Optional[str]]) -> None:
        normalized = []
        for letter in letters:
            if letter is None:
                normalized.append(None)
                continue
            if len(letter) != 1:
                raise ValueError(f"Pattern positions hold one character, got {letter!r}")
            normalized.append(letter.lower())
        self._letters: Tuple[Optional[str], ...] = tuple(normalized)

    @classmethod
    def from_pattern(cls, pattern: str) -> "SparseWord":
        return cls(None if char == WILDCARD else char for char in pattern)

    @property
    def letters(self) -> Tuple[Optional[str], ...]:
        return self._letters

    @property
    def pattern(self) -> str:
        return "".join(WILDCARD if letter is None else letter for letter in self._letters)

    def matches(self, word: str) -> bool:
        if len(word) != len(self._letters):
            return False
        for expected, actual in zip(self._letters, word):
            if expected is not None and expected != actual.lower():
                return False
        return True

    def __len__(self) -> int:
        return len(self._letters)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseWord):
            return NotImplemented
        return self._letters == other._letters

    def __hash__(self) -> int:
        return hash(self._letters)

    def __repr__(self) -> str:
        return f"SparseWord({self.pattern!r})"
