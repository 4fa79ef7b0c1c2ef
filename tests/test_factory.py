import pytest

from wordle_solver.dictionary import Dictionary
from wordle_solver.factory import get_reporter, get_solver
from wordle_solver.guess import AlgorithmType, EntropyAlgorithm, MinimaxAlgorithm
from wordle_solver.reporting import ConsoleReporter, NullReporter
from wordle_solver.word import Word


@pytest.fixture
def dictionary():
    return Dictionary(
        all_words=[Word(w) for w in ["SALET", "SNAKE", "SOARE", "TOWER"]],
        potential_solns=[Word(w) for w in ["SNAKE", "TOWER"]],
    )


def test_get_reporter():
    assert isinstance(get_reporter(True), ConsoleReporter)
    assert isinstance(get_reporter(False), NullReporter)


@pytest.mark.parametrize(
    "kind, expected",
    [
        (AlgorithmType.MINIMAX, MinimaxAlgorithm),
        (AlgorithmType.ENTROPY, EntropyAlgorithm),
        ("Minimax", MinimaxAlgorithm),
        ("ENTROPY", EntropyAlgorithm),
    ],
)
def test_get_solver(dictionary, kind, expected):
    solver = get_solver(kind, dictionary, show_progress=False)
    assert isinstance(solver.algorithm, expected)

    soln = Word("SNAKE")
    scoreboard = solver.solve(soln, soln)
    assert len(scoreboard) == 1


def test_get_solver_unknown_algorithm(dictionary):
    with pytest.raises(ValueError):
        get_solver("random", dictionary)
