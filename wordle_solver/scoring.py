"""
Feedback Scoring
================

Wordle feedback for a (guess, solution) pair, encoded as a base-3 integer.

Each letter position gets one of:
    0 = GREY  (letter absent, or all its occurrences already used up)
    1 = AMBER (letter present elsewhere in the solution)
    2 = GREEN (letter in the right position)

Digits are weighted [81, 27, 9, 3, 1], so the leftmost letter is the most
significant digit and an all-green score is 242.

Duplicate letters follow the game's rules: greens are matched first, then
ambers are handed out left to right, capped by the occurrences of that
letter in the solution that were not already matched green.
"""

import numpy as np
from numba import jit, prange

from .word import SIZE, Word


# ============================================================================
# CONSTANTS
# ============================================================================

GREY = 0
AMBER = 1
GREEN = 2

NUM_INDICATORS = 3
N_PATTERNS = NUM_INDICATORS ** SIZE  # 243
MAX_SCORE = N_PATTERNS - 1  # 242, all green


# ============================================================================
# NUMBA-ACCELERATED FEEDBACK COMPUTATION
# ============================================================================

@jit(nopython=True, cache=True)
def compute_feedback(guess: np.ndarray, soln: np.ndarray) -> int:
    """
    Compute Wordle feedback for a guess against a solution.

    Args:
        guess: shape (5,) array of letter codes (0-25)
        soln: shape (5,) array of letter codes

    Returns:
        Integer feedback code (0-242)
    """
    feedback = np.zeros(5, dtype=np.int32)
    soln_counts = np.zeros(26, dtype=np.int32)

    # First pass: greens consume their own slot
    for i in range(5):
        if guess[i] == soln[i]:
            feedback[i] = 2
        else:
            soln_counts[soln[i]] += 1

    # Second pass: ambers, left to right, while the letter budget lasts
    for i in range(5):
        if feedback[i] == 0:
            c = guess[i]
            if soln_counts[c] > 0:
                feedback[i] = 1
                soln_counts[c] -= 1

    return 81*feedback[0] + 27*feedback[1] + 9*feedback[2] + 3*feedback[3] + feedback[4]


@jit(nopython=True, cache=True)
def compute_feedback_row(guess: np.ndarray, soln_chars: np.ndarray) -> np.ndarray:
    """
    Compute feedback for one guess against every solution.

    Args:
        guess: shape (5,) array of letter codes
        soln_chars: shape (n_solns, 5) array of letter codes

    Returns:
        shape (n_solns,) uint8 feedback row
    """
    n_solns = soln_chars.shape[0]
    result = np.zeros(n_solns, dtype=np.uint8)
    for j in range(n_solns):
        result[j] = compute_feedback(guess, soln_chars[j])
    return result


@jit(nopython=True, parallel=True, cache=True)
def compute_feedback_matrix(guess_chars: np.ndarray, soln_chars: np.ndarray) -> np.ndarray:
    """
    Compute feedback for all guess/solution pairs in parallel.

    Args:
        guess_chars: shape (n_guesses, 5) array of letter codes
        soln_chars: shape (n_solns, 5) array of letter codes

    Returns:
        shape (n_guesses, n_solns) uint8 feedback matrix
    """
    n_guesses = guess_chars.shape[0]
    n_solns = soln_chars.shape[0]
    result = np.zeros((n_guesses, n_solns), dtype=np.uint8)

    for i in prange(n_guesses):
        for j in range(n_solns):
            result[i, j] = compute_feedback(guess_chars[i], soln_chars[j])

    return result


# ============================================================================
# PUBLIC API
# ============================================================================

def score(guess: Word, soln: Word) -> int:
    """Feedback code for playing `guess` when the answer is `soln`."""
    if not isinstance(guess, Word) or not isinstance(soln, Word):
        raise TypeError("score() expects two Word instances")
    return int(compute_feedback(guess.vector, soln.vector))


def score_to_str(code: int) -> str:
    """Render a feedback code as a zero-padded 5-digit ternary string."""
    if not 0 <= code <= MAX_SCORE:
        raise ValueError(f"Feedback code {code} out of range 0-{MAX_SCORE}")
    return np.base_repr(int(code), NUM_INDICATORS).zfill(SIZE)


def str_to_score(ternary: str) -> int:
    """Parse a 5-digit ternary string (e.g. '22220') back into a feedback code."""
    if len(ternary) != SIZE or any(c not in "012" for c in ternary):
        raise ValueError(f"'{ternary}' is not a {SIZE}-digit ternary feedback string")
    return int(ternary, NUM_INDICATORS)
