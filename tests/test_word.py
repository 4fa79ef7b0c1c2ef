import copy
import pickle

import numpy as np
import pytest

from wordle_solver.word import SIZE, MalformedWordError, Word, words_to_chars


def test_word_lower_case_is_capitalised():
    word = Word("raise")
    assert len(word) == SIZE
    assert word.value() == "RAISE"
    assert str(word) == "RAISE"
    assert f"Word is: {Word('space')}" == "Word is: SPACE"


def test_word_letter_codes():
    word = Word("AZBYC")
    assert word.letters == (0, 25, 1, 24, 2)
    assert word.vector.dtype == np.int32
    assert word.vector.tolist() == [0, 25, 1, 24, 2]


@pytest.mark.parametrize("value", ["", "RAIS", "RAISES", "RA1SE", "RA SE", "ÉCLAT", "raisé"])
def test_word_malformed_raises(value):
    with pytest.raises(MalformedWordError):
        Word(value)


def test_word_non_string_raises():
    with pytest.raises(MalformedWordError):
        Word(12345)
    assert issubclass(MalformedWordError, ValueError)


def test_word_equality_and_hash():
    assert Word("power") == Word("POWER")
    assert Word("POWER") != Word("TOWER")
    assert len({Word("power"), Word("POWER"), Word("TOWER")}) == 2


def test_word_is_immutable():
    word = Word("POWER")
    with pytest.raises(AttributeError):
        word.foo = 1
    with pytest.raises(ValueError):
        word.vector[0] = 3
    assert copy.copy(word) is word
    assert pickle.loads(pickle.dumps(word)) == word


def test_words_to_chars():
    chars = words_to_chars([Word("SALET"), Word("POWER")])
    assert chars.shape == (2, SIZE)
    assert chars.dtype == np.int32
    assert chars[1].tolist() == Word("POWER").vector.tolist()
    assert words_to_chars([]).shape == (0, SIZE)
