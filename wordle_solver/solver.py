"""
Wordle Solver
=============

Plays Wordle against a known solution until it is found or MAX_ITERS
guesses have been made.

Each step:
1. Score the current guess against the true solution
2. Keep only the candidate solutions that would have given the same score
3. Record the step on the scoreboard and report it
4. Rank every word in the full dictionary against the remaining
   candidates and play the best one

The feedback codes of every (dictionary word, possible solution) pair are
precomputed once per solver, so ranking a word is a histogram over one row
of that matrix.
"""

import time
from collections import Counter
from typing import Dict, Iterable, List, Optional

import numpy as np
from numba import jit
from tqdm import tqdm

from .boards import Scoreboard
from .dictionary import Dictionary
from .guess import Algorithm, Guess
from .reporting import Reporter
from .scoring import MAX_SCORE, N_PATTERNS, compute_feedback_matrix, compute_feedback_row, score
from .word import Word, words_to_chars


# ============================================================================
# CONSTANTS
# ============================================================================

MAX_ITERS = 20
DEFAULT_OPENING_GUESS = "SALET"


class EmptyCandidatesError(RuntimeError):
    """No possible solutions remain; the true solution is not in the dictionary."""


# ============================================================================
# NUMBA-ACCELERATED HISTOGRAM
# ============================================================================

@jit(nopython=True, cache=True)
def fill_histogram(feedback_row: np.ndarray, candidates: np.ndarray, histogram: np.ndarray):
    """
    Count how many candidates fall into each feedback code.

    Args:
        feedback_row: feedback codes for one guess against all solutions
        candidates: indices of the remaining solutions
        histogram: buffer of 243 counts, zeroed then filled in place
    """
    histogram[:] = 0
    for c in candidates:
        histogram[feedback_row[c]] += 1


# ============================================================================
# SOLVER CLASS
# ============================================================================

class Solver:
    """
    Solves one Wordle at a time with a pluggable guess-ranking algorithm.

    Uses two word lists from the dictionary:
    - all_words: every word that may be played
    - potential_solns: words that can be the answer
    """

    def __init__(self, algorithm: Algorithm, reporter: Reporter, dictionary: Dictionary,
                 verbose: bool = False):
        """
        Initialize solver and precompute the feedback matrix.

        Args:
            algorithm: Guess-ranking algorithm
            reporter: Receives the scoreboard after every step
            dictionary: Word lists
            verbose: Print timing and progress
        """
        self.algorithm = algorithm
        self.reporter = reporter
        self.dictionary = dictionary
        self.verbose = verbose

        self.all_words = dictionary.all_words
        self.potential_solns = dictionary.potential_solns

        self.soln_chars = words_to_chars(self.potential_solns)
        guess_chars = words_to_chars(self.all_words)

        if verbose:
            print(f"Precomputing feedback matrix "
                  f"({len(self.all_words)} words × {len(self.potential_solns)} solutions)...")
        start = time.time()
        self.feedback_matrix = compute_feedback_matrix(guess_chars, self.soln_chars)
        if verbose:
            print(f"Done in {time.time() - start:.1f}s")

        # Ranking buffer, zeroed per word by fill_histogram
        self._histogram = np.zeros(N_PATTERNS, dtype=np.int64)

    def solve(self, soln: Word, opening_guess: Word) -> Optional[Scoreboard]:
        """
        Solve for a given solution.

        Args:
            soln: The hidden word
            opening_guess: First word to play

        Returns:
            The scoreboard if solved within MAX_ITERS guesses, else None

        Raises:
            EmptyCandidatesError: `soln` is not among the possible solutions
        """
        if not isinstance(soln, Word) or not isinstance(opening_guess, Word):
            raise TypeError("solve() expects Word instances")

        if self.verbose:
            print(f"Begin solve for solution {soln} with {self.algorithm.name}...\n")
        start = time.time()

        candidates = np.arange(len(self.potential_solns), dtype=np.int64)
        scoreboard = Scoreboard()
        guess = opening_guess

        for _ in range(MAX_ITERS):
            observed = score(guess, soln)
            candidates = self.trim_solns(guess, observed, candidates)
            scoreboard.add_row(soln, guess, observed, len(candidates))
            self.reporter.print_tail(scoreboard)

            if scoreboard.is_solved():
                if self.verbose:
                    print(f"Elapsed: {time.time() - start:.2f}s\n")
                return scoreboard

            if len(candidates) == 0:
                raise EmptyCandidatesError(
                    f"No candidates remaining after {guess}: '{soln}' is not a possible solution"
                )

            guess = self.best_guess(candidates).word

        self.reporter.report_failure(scoreboard)
        return None

    run = solve

    def trim_solns(self, guess: Word, observed: int, candidates: np.ndarray) -> np.ndarray:
        """Keep the candidates that would have produced `observed` for `guess`."""
        feedback_row = compute_feedback_row(guess.vector, self.soln_chars)
        return candidates[feedback_row[candidates] == observed]

    def best_guess(self, candidates: np.ndarray) -> Guess:
        """
        Rank every dictionary word against the remaining candidates.

        With one or two candidates there is nothing to gain from ranking:
        play the first candidate, ranked against a placeholder histogram.
        """
        n_candidates = len(candidates)
        if n_candidates == 0:
            raise EmptyCandidatesError("No candidates remaining")

        if n_candidates > 2:
            best = None
            for guess in self.all_guesses(candidates):
                if best is None or guess < best:
                    best = guess
            return best

        histogram = np.zeros(N_PATTERNS, dtype=np.int64)
        histogram[MAX_SCORE] = 1
        if n_candidates == 2:
            histogram[0] = 1

        word = self.potential_solns[candidates[0]]
        return self.algorithm.make_guess(word, n_candidates, histogram)

    def all_guesses(self, candidates: np.ndarray) -> Iterable[Guess]:
        """Yield a ranked Guess for every dictionary word, in dictionary order."""
        n_candidates = len(candidates)
        histogram = self._histogram
        for guess_idx, word in enumerate(self.all_words):
            fill_histogram(self.feedback_matrix[guess_idx], candidates, histogram)
            yield self.algorithm.make_guess(word, n_candidates, histogram)


# ============================================================================
# UTILITY FUNCTIONS
# ============================================================================

def benchmark(solver: Solver, solns: List[Word] = None, opening_guess: Word = None,
              verbose: bool = True) -> Dict:
    """
    Benchmark solver on a list of solutions.

    Args:
        solver: Solver instance
        solns: Solutions to test (default: all potential solutions)
        opening_guess: First guess (default: SALET)
        verbose: Show a progress bar

    Returns:
        Dict with results
    """
    if solns is None:
        solns = list(solver.potential_solns)
    if opening_guess is None:
        opening_guess = Word(DEFAULT_OPENING_GUESS)

    results = []
    dist = Counter()
    failures = []

    start = time.time()
    for soln in tqdm(solns, desc=f"Benchmark ({solver.algorithm.name})", disable=not verbose):
        scoreboard = solver.solve(soln, opening_guess)
        if scoreboard is None:
            failures.append(soln.value())
            continue
        results.append(len(scoreboard))
        dist[len(scoreboard)] += 1

    elapsed = time.time() - start

    return {
        'total': len(solns),
        'average': sum(results) / len(results) if results else 0.0,
        'distribution': dict(sorted(dist.items())),
        'failures': len(failures),
        'failed_words': failures[:20],
        'time': elapsed,
        'rate': len(solns) / elapsed if elapsed > 0 else 0.0,
    }


def print_results(results: Dict):
    """Pretty print benchmark results."""
    total = results['total']
    print("\n" + "=" * 50)
    print("BENCHMARK RESULTS")
    print("=" * 50)
    print(f"Words tested: {total}")
    print(f"Average guesses: {results['average']:.4f}")
    if total:
        print(f"Failures: {results['failures']} ({100*results['failures']/total:.2f}%)")
    print(f"Time: {results['time']:.1f}s ({results['rate']:.1f} words/sec)")
    print("\nDistribution:")
    for n, count in results['distribution'].items():
        pct = 100 * count / total
        bar = "█" * int(pct / 2)
        print(f"  {n:2d}: {count:5d} ({pct:5.2f}%) {bar}")
    if results['failed_words']:
        print(f"\nFailed words: {results['failed_words']}")
    print("=" * 50)
