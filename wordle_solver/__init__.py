"""
Wordle Solver
=============

Plays Wordle automatically, ranking guesses by information entropy or by
worst-case (minimax) remaining candidates.
"""

__version__ = "1.0.0"

from .boards import Scoreboard, ScoreboardRow
from .dictionary import Dictionary, load_dictionary
from .factory import get_reporter, get_solver
from .guess import AlgorithmType, EntropyAlgorithm, MinimaxAlgorithm, make_algorithm
from .reporting import ConsoleReporter, NullReporter, Reporter
from .scoring import MAX_SCORE, score, score_to_str, str_to_score
from .solver import EmptyCandidatesError, Solver, benchmark, print_results
from .word import MalformedWordError, Word
