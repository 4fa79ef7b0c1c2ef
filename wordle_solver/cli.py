"""
cli.py

Solve one Wordle, or benchmark a solver over many solutions.

    wordle-solver --answer POWER
    wordle-solver --answer POWER --guess SOARE --solver minimax
    wordle-solver --benchmark 200 --solver entropy
"""

import argparse
import random
import sys

from .dictionary import ALL_WORDS, SOLUTIONS, load_dictionary
from .factory import get_solver
from .guess import AlgorithmType
from .solver import DEFAULT_OPENING_GUESS, EmptyCandidatesError, benchmark, print_results
from .word import MalformedWordError, Word


def _algorithm_type(value: str) -> AlgorithmType:
    try:
        return AlgorithmType.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="wordle-solver",
        description="Solve Wordle by entropy or minimax guess ranking.",
    )
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument(
        "-a", "--answer",
        help="The hidden solution to solve for.",
    )
    target.add_argument(
        "--benchmark",
        type=int,
        metavar="N",
        help="Solve N random solutions and print statistics (0 = all).",
    )
    parser.add_argument(
        "-g", "--guess",
        default=DEFAULT_OPENING_GUESS,
        help=f"Opening guess (default: {DEFAULT_OPENING_GUESS}).",
    )
    parser.add_argument(
        "-s", "--solver",
        type=_algorithm_type,
        default=AlgorithmType.ENTROPY,
        help="Guess ranking algorithm: entropy or minimax (default: entropy).",
    )
    parser.add_argument(
        "--all-words",
        default=ALL_WORDS,
        help="Word list of every valid guess (JSON array or one word per line).",
    )
    parser.add_argument(
        "--solutions",
        default=SOLUTIONS,
        help="Word list of possible solutions (JSON array or one word per line).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for --benchmark sampling (default: 42).",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Do not print the scoreboard or progress.",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        opening_guess = Word(args.guess)
        soln = Word(args.answer) if args.answer is not None else None
        dictionary = load_dictionary(args.all_words, args.solutions)
    except (MalformedWordError, OSError, ValueError) as exc:
        raise SystemExit(str(exc)) from exc

    verbose = not args.quiet

    if args.benchmark is not None:
        solver = get_solver(args.solver, dictionary, show_progress=False, verbose=verbose)
        solns = list(dictionary.potential_solns)
        if 0 < args.benchmark < len(solns):
            random.seed(args.seed)
            solns = random.sample(solns, args.benchmark)
        results = benchmark(solver, solns, opening_guess, verbose=verbose)
        print_results(results)
        return 0 if results['failures'] == 0 else 1

    solver = get_solver(args.solver, dictionary, show_progress=verbose, verbose=verbose)
    try:
        scoreboard = solver.solve(soln, opening_guess)
    except EmptyCandidatesError as exc:
        raise SystemExit(str(exc)) from exc

    if scoreboard is None:
        if args.quiet:
            print(f"No solution found for {soln}.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
