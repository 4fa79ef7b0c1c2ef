"""Wires an algorithm, a reporter and a dictionary into a Solver."""

from typing import Union

from .dictionary import Dictionary, load_dictionary
from .guess import AlgorithmType, make_algorithm
from .reporting import ConsoleReporter, NullReporter, Reporter
from .solver import Solver


def get_reporter(show_progress: bool) -> Reporter:
    if show_progress:
        return ConsoleReporter()
    return NullReporter()


def get_solver(kind: Union[AlgorithmType, str], dictionary: Dictionary = None,
               show_progress: bool = True, verbose: bool = False) -> Solver:
    """
    Build a solver.

    Args:
        kind: Algorithm to rank guesses with ('entropy' or 'minimax')
        dictionary: Word lists (default: the official dictionaries on disk)
        show_progress: Print the scoreboard as the solve runs
        verbose: Print timing and progress
    """
    if isinstance(kind, str):
        kind = AlgorithmType.parse(kind)

    if dictionary is None:
        if verbose:
            print("Loading dictionaries...")
        dictionary = load_dictionary()

    algorithm = make_algorithm(kind)
    reporter = get_reporter(show_progress)
    return Solver(algorithm, reporter, dictionary, verbose=verbose)
