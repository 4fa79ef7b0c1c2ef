"""
Guess Ranking Algorithms
========================

Each algorithm turns a candidate word and the histogram of feedback codes
it would produce against the remaining solutions into a comparable Guess.

Both Guess types order the best guess as the MINIMUM, so the solver picks
`min()` over every dictionary word:

- EntropyGuess: higher Shannon entropy first. Entropies within
  ENTROPY_EPSILON (absolute) of each other are treated as equal.
- MinimaxGuess: smaller largest bucket (worst case) first.

Ties on the primary metric go to a word that is itself still a possible
solution (its histogram has exactly one count in the all-green bucket).
"""

import enum
from abc import ABC, abstractmethod

import numpy as np
from numba import jit

from .scoring import MAX_SCORE, N_PATTERNS
from .word import Word


# Two entropies closer than this are the same entropy.
ENTROPY_EPSILON = 1e-9


@jit(nopython=True, cache=True)
def compute_entropy(histogram: np.ndarray, total: int) -> float:
    """Shannon entropy (bits) of a feedback-code histogram."""
    if total == 0:
        return 0.0

    entropy = 0.0
    for s in histogram:
        if s > 0:
            p = s / total
            entropy -= p * np.log2(p)

    return entropy


def _cmp_potential_soln(a: bool, b: bool) -> int:
    if a == b:
        return 0
    return -1 if a else 1


# ============================================================================
# GUESS VALUES
# ============================================================================

class Guess(ABC):
    """
    A ranked candidate guess.

    Subclasses implement compare(); every rich comparison derives from it.
    """

    __slots__ = ("word", "is_potential_soln")

    def __init__(self, word: Word, is_potential_soln: bool):
        self.word = word
        self.is_potential_soln = is_potential_soln

    @abstractmethod
    def compare(self, other: "Guess") -> int:
        """Return -1 if self is the better guess, 1 if other is, 0 if tied."""

    def _checked_compare(self, other) -> int:
        if type(other) is not type(self):
            raise TypeError(
                f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            )
        return self.compare(other)

    def __lt__(self, other) -> bool:
        return self._checked_compare(other) < 0

    def __le__(self, other) -> bool:
        return self._checked_compare(other) <= 0

    def __gt__(self, other) -> bool:
        return self._checked_compare(other) > 0

    def __ge__(self, other) -> bool:
        return self._checked_compare(other) >= 0

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.compare(other) == 0

    __hash__ = None


class EntropyGuess(Guess):
    __slots__ = ("entropy",)

    def __init__(self, word: Word, entropy: float, is_potential_soln: bool):
        super().__init__(word, is_potential_soln)
        self.entropy = entropy

    def compare(self, other: "EntropyGuess") -> int:
        if abs(self.entropy - other.entropy) > ENTROPY_EPSILON:
            # High entropy sorts low so the best guess is the minimum
            return -1 if self.entropy > other.entropy else 1
        return _cmp_potential_soln(self.is_potential_soln, other.is_potential_soln)

    def __repr__(self) -> str:
        return (f"EntropyGuess({self.word}, entropy={self.entropy:.4f}, "
                f"is_potential_soln={self.is_potential_soln})")


class MinimaxGuess(Guess):
    __slots__ = ("largest_bucket",)

    def __init__(self, word: Word, largest_bucket: int, is_potential_soln: bool):
        super().__init__(word, is_potential_soln)
        self.largest_bucket = largest_bucket

    def compare(self, other: "MinimaxGuess") -> int:
        if self.largest_bucket != other.largest_bucket:
            return -1 if self.largest_bucket < other.largest_bucket else 1
        return _cmp_potential_soln(self.is_potential_soln, other.is_potential_soln)

    def __repr__(self) -> str:
        return (f"MinimaxGuess({self.word}, largest_bucket={self.largest_bucket}, "
                f"is_potential_soln={self.is_potential_soln})")


# ============================================================================
# ALGORITHMS
# ============================================================================

class Algorithm(ABC):
    """Interface shared by the guess-ranking algorithms."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @abstractmethod
    def make_guess(self, word: Word, num_solns: int, histogram: np.ndarray) -> Guess:
        """
        Rank `word` given its feedback histogram.

        Args:
            word: Candidate guess
            num_solns: Number of remaining possible solutions
            histogram: 243 counts, histogram[c] = solutions giving code c

        Returns:
            Comparable Guess; the best guess compares as the minimum
        """


def _as_histogram(histogram) -> np.ndarray:
    histogram = np.asarray(histogram, dtype=np.int64)
    if histogram.shape != (N_PATTERNS,):
        raise ValueError(f"Histogram must have {N_PATTERNS} buckets, got shape {histogram.shape}")
    return histogram


class EntropyAlgorithm(Algorithm):

    @property
    def name(self) -> str:
        return "entropy"

    def make_guess(self, word: Word, num_solns: int, histogram: np.ndarray) -> EntropyGuess:
        histogram = _as_histogram(histogram)
        is_potential_soln = bool(histogram[MAX_SCORE] == 1)
        entropy = compute_entropy(histogram, num_solns)
        return EntropyGuess(word, float(entropy), is_potential_soln)


class MinimaxAlgorithm(Algorithm):

    @property
    def name(self) -> str:
        return "minimax"

    def make_guess(self, word: Word, num_solns: int, histogram: np.ndarray) -> MinimaxGuess:
        histogram = _as_histogram(histogram)
        is_potential_soln = bool(histogram[MAX_SCORE] == 1)
        largest_bucket = int(histogram.max())
        return MinimaxGuess(word, largest_bucket, is_potential_soln)


class AlgorithmType(enum.Enum):
    ENTROPY = "entropy"
    MINIMAX = "minimax"

    @classmethod
    def parse(cls, value: str) -> "AlgorithmType":
        """Case-insensitive lookup by name."""
        try:
            return cls(value.lower())
        except ValueError:
            choices = ", ".join(t.value for t in cls)
            raise ValueError(f"Unknown algorithm '{value}' (choose from {choices})") from None


def make_algorithm(kind: AlgorithmType) -> Algorithm:
    if kind is AlgorithmType.ENTROPY:
        return EntropyAlgorithm()
    if kind is AlgorithmType.MINIMAX:
        return MinimaxAlgorithm()
    raise ValueError(f"Unknown algorithm type: {kind!r}")
