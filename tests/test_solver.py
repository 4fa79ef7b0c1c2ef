import numpy as np
import pytest

from recording_reporter import RecordingReporter
from wordle_solver.dictionary import Dictionary
from wordle_solver.guess import EntropyAlgorithm, MinimaxAlgorithm
from wordle_solver.reporting import NullReporter
from wordle_solver.scoring import MAX_SCORE, N_PATTERNS, score, score_to_str
from wordle_solver.solver import MAX_ITERS, EmptyCandidatesError, Solver, benchmark, fill_histogram
from wordle_solver.word import Word


def words(*values):
    return [Word(v) for v in values]


@pytest.fixture
def dictionary():
    return Dictionary(
        all_words=words("SALET", "TOWER", "SOARE", "ROWER", "POWER"),
        potential_solns=words("TOWER", "ROWER", "POWER"),
    )


@pytest.mark.parametrize("algorithm", [MinimaxAlgorithm(), EntropyAlgorithm()])
def test_solve_power_from_salet(dictionary, algorithm):
    reporter = RecordingReporter()
    solver = Solver(algorithm, reporter, dictionary)

    scoreboard = solver.solve(Word("POWER"), Word("SALET"))

    assert scoreboard is not None
    assert len(scoreboard) == 3
    assert scoreboard.is_solved()
    assert [row.guess.value() for row in scoreboard] == ["SALET", "ROWER", "POWER"]
    assert [score_to_str(row.score) for row in scoreboard] == ["00020", "02222", "22222"]
    assert [row.num_left for row in scoreboard] == [2, 1, 1]
    assert all(row.soln == Word("POWER") for row in scoreboard)
    assert reporter.tails == [1, 2, 3]
    assert reporter.failure is None


def test_solve_with_opening_guess_as_solution(dictionary):
    solver = Solver(MinimaxAlgorithm(), NullReporter(), dictionary)
    scoreboard = solver.run(Word("TOWER"), Word("TOWER"))
    assert len(scoreboard) == 1
    assert scoreboard.last_row.score == MAX_SCORE


def test_solve_exhausted_returns_none():
    # Every playable word scores all grey against every solution
    dictionary = Dictionary(
        all_words=words("QUICK"),
        potential_solns=words("ABBEY", "ADDER", "BAGEL"),
    )
    reporter = RecordingReporter()
    solver = Solver(EntropyAlgorithm(), reporter, dictionary)

    result = solver.solve(Word("BAGEL"), Word("QUICK"))

    assert result is None
    assert len(reporter.failure) == MAX_ITERS == 20
    assert not reporter.failure.is_solved()
    assert [row.n for row in reporter.failure] == list(range(1, 21))
    assert all(row.num_left == 3 for row in reporter.failure)


def test_solve_unknown_solution_raises(dictionary):
    dictionary = Dictionary(
        all_words=dictionary.all_words,
        potential_solns=words("TOWER", "ROWER"),
    )
    solver = Solver(MinimaxAlgorithm(), NullReporter(), dictionary)

    with pytest.raises(EmptyCandidatesError):
        solver.solve(Word("POWER"), Word("SALET"))


def test_solve_rejects_strings(dictionary):
    solver = Solver(MinimaxAlgorithm(), NullReporter(), dictionary)
    with pytest.raises(TypeError):
        solver.solve("POWER", Word("SALET"))


@pytest.mark.parametrize("algorithm", [MinimaxAlgorithm(), EntropyAlgorithm()])
def test_best_guess_prefers_potential_solution(dictionary, algorithm):
    # SALET splits the three candidates as well as TOWER does, but only TOWER can win outright
    solver = Solver(algorithm, NullReporter(), dictionary)
    best = solver.best_guess(np.arange(3))
    assert best.word == Word("TOWER")
    assert best.is_potential_soln


def test_best_guess_minimax_bucket(dictionary):
    solver = Solver(MinimaxAlgorithm(), NullReporter(), dictionary)
    guesses = {g.word.value(): g for g in solver.all_guesses(np.arange(3))}
    assert guesses["SOARE"].largest_bucket == 3
    assert guesses["SALET"].largest_bucket == 2
    assert not guesses["SALET"].is_potential_soln


@pytest.mark.parametrize("algorithm", [MinimaxAlgorithm(), EntropyAlgorithm()])
def test_best_guess_two_candidates_plays_first(dictionary, algorithm):
    solver = Solver(algorithm, NullReporter(), dictionary)
    best = solver.best_guess(np.array([2, 1]))
    assert best.word == Word("POWER")
    assert best.is_potential_soln


def test_best_guess_placeholder_values(dictionary):
    minimax = Solver(MinimaxAlgorithm(), NullReporter(), dictionary)
    assert minimax.best_guess(np.array([0, 1])).largest_bucket == 1
    assert minimax.best_guess(np.array([1])).word == Word("ROWER")

    entropy = Solver(EntropyAlgorithm(), NullReporter(), dictionary)
    assert entropy.best_guess(np.array([0, 1])).entropy == pytest.approx(1.0)
    assert entropy.best_guess(np.array([0])).entropy == 0.0


def test_best_guess_no_candidates_raises(dictionary):
    solver = Solver(EntropyAlgorithm(), NullReporter(), dictionary)
    with pytest.raises(EmptyCandidatesError):
        solver.best_guess(np.array([], dtype=np.int64))


def test_trim_solns_keeps_true_solution(dictionary):
    solver = Solver(EntropyAlgorithm(), NullReporter(), dictionary)
    everything = np.arange(len(dictionary.potential_solns))
    for guess in dictionary.all_words:
        for idx, soln in enumerate(dictionary.potential_solns):
            kept = solver.trim_solns(guess, score(guess, soln), everything)
            assert idx in kept
            for k in kept:
                assert score(guess, dictionary.potential_solns[k]) == score(guess, soln)


def test_fill_histogram_zeroes_buffer():
    feedback_row = np.array([0, 5, 5, MAX_SCORE], dtype=np.uint8)
    histogram = np.full(N_PATTERNS, 7, dtype=np.int64)

    fill_histogram(feedback_row, np.array([1, 2, 3], dtype=np.int64), histogram)

    assert histogram.sum() == 3
    assert histogram[5] == 2
    assert histogram[MAX_SCORE] == 1
    assert histogram[0] == 0


def test_benchmark(dictionary):
    solver = Solver(MinimaxAlgorithm(), NullReporter(), dictionary)
    results = benchmark(solver, opening_guess=Word("SALET"), verbose=False)

    assert results['total'] == 3
    assert results['failures'] == 0
    assert sum(results['distribution'].values()) == 3
    assert results['distribution'][3] >= 1
    assert 1 <= results['average'] <= 3
