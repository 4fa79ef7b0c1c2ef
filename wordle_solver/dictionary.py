"""
Word Lists
==========

Loads the two Wordle word lists:
- all words: every valid guess (a superset of the solutions)
- solutions: words that can be the daily answer

Files are either a JSON array of strings (``.json``) or plain text with one
word per line.
"""

import json
import os
from dataclasses import dataclass
from typing import List, Tuple

from .word import Word


BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DICTIONARY_DIR = os.path.join(BASE_DIR, "dictionaries")

ALL_WORDS = os.path.join(DICTIONARY_DIR, "dictionary-full-official.json")
SOLUTIONS = os.path.join(DICTIONARY_DIR, "dictionary-answers-official.json")


@dataclass(frozen=True)
class Dictionary:
    all_words: Tuple[Word, ...]
    potential_solns: Tuple[Word, ...]

    def __post_init__(self):
        object.__setattr__(self, "all_words", tuple(self.all_words))
        object.__setattr__(self, "potential_solns", tuple(self.potential_solns))


def load_words(filepath: str) -> List[str]:
    """Load an upper-cased word list from a JSON array or a text file."""
    with open(filepath, 'r') as f:
        if filepath.endswith(".json"):
            data = json.load(f)
            if not isinstance(data, list):
                raise ValueError(f"{filepath}: expected a JSON array of words")
            words = []
            for item in data:
                if not isinstance(item, str):
                    raise ValueError(f"{filepath}: {item!r} is not a string")
                words.append(item.strip().upper())
            return words
        return [line.strip().upper() for line in f if line.strip()]


def get_all_words(all_words_file: str = ALL_WORDS, solutions_file: str = SOLUTIONS) -> List[Word]:
    """Every guessable word, solutions included, deduplicated and sorted."""
    words = set(load_words(all_words_file)) | set(load_words(solutions_file))
    return [Word(w) for w in sorted(words)]


def get_soln_words(solutions_file: str = SOLUTIONS) -> List[Word]:
    """Possible solutions, deduplicated, in file order."""
    seen = set()
    solns = []
    for w in load_words(solutions_file):
        if w not in seen:
            seen.add(w)
            solns.append(Word(w))
    return solns


def load_dictionary(all_words_file: str = ALL_WORDS, solutions_file: str = SOLUTIONS) -> Dictionary:
    return Dictionary(
        all_words=get_all_words(all_words_file, solutions_file),
        potential_solns=get_soln_words(solutions_file),
    )
