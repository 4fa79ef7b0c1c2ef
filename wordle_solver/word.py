"""
Word Representation
===================

Fixed-width letter vectors for five-letter words.

Letters are stored as codes 0-25 (A-Z) so the numba kernels can index
letter-count tables directly.
"""

import numpy as np
from typing import Iterable, Tuple


SIZE = 5


class MalformedWordError(ValueError):
    """Raised when text is not exactly five ASCII letters."""


class Word:
    """
    Immutable five-letter word.

    Built from text that is exactly five ASCII letters (any case) and
    displayed in upper case.
    """

    __slots__ = ("_letters", "_vector")

    def __init__(self, value: str):
        if not isinstance(value, str):
            raise MalformedWordError(f"Expected a string, got {type(value).__name__}")
        if len(value) != SIZE or not (value.isascii() and value.isalpha()):
            raise MalformedWordError(f"'{value}' is not a {SIZE}-letter word")

        upper = value.upper()
        letters = tuple(ord(c) - ord('A') for c in upper)

        vector = np.array(letters, dtype=np.int32)
        vector.flags.writeable = False

        object.__setattr__(self, "_letters", letters)
        object.__setattr__(self, "_vector", vector)

    def __setattr__(self, name, value):
        raise AttributeError("Word is immutable")

    @property
    def letters(self) -> Tuple[int, ...]:
        return self._letters

    @property
    def vector(self) -> np.ndarray:
        """Read-only int32 array of shape (5,)."""
        return self._vector

    def value(self) -> str:
        return ''.join(chr(c + ord('A')) for c in self._letters)

    def __len__(self) -> int:
        return SIZE

    def __eq__(self, other) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self._letters == other._letters

    def __hash__(self) -> int:
        return hash(self._letters)

    def __str__(self) -> str:
        return self.value()

    def __repr__(self) -> str:
        return f"Word('{self.value()}')"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (Word, (self.value(),))


def words_to_chars(words: Iterable[Word]) -> np.ndarray:
    """Stack word vectors into an (n, 5) int32 array for numba."""
    words = list(words)
    arr = np.zeros((len(words), SIZE), dtype=np.int32)
    for i, w in enumerate(words):
        arr[i] = w.vector
    return arr
