"""Append-only record of a solve, one row per guess played."""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .scoring import MAX_SCORE
from .word import Word


@dataclass(frozen=True)
class ScoreboardRow:
    """
    One played iteration.

    Attributes:
        n: 1-based sequence number
        soln: The true solution (kept for reporting)
        guess: The word played
        score: Observed feedback code
        num_left: Remaining candidate solutions after filtering
    """

    n: int
    soln: Word
    guess: Word
    score: int
    num_left: int


class Scoreboard:
    """Ordered log of ScoreboardRows. Rows are never changed or removed."""

    def __init__(self):
        self._rows = []

    @property
    def rows(self) -> Tuple[ScoreboardRow, ...]:
        return tuple(self._rows)

    @property
    def last_row(self) -> Optional[ScoreboardRow]:
        return self._rows[-1] if self._rows else None

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[ScoreboardRow]:
        return iter(self.rows)

    def is_solved(self) -> bool:
        if not self._rows:
            return False
        return self._rows[-1].score == MAX_SCORE

    def add_row(self, soln: Word, guess: Word, score: int, num_left: int) -> ScoreboardRow:
        row = ScoreboardRow(
            n=len(self._rows) + 1,
            soln=soln,
            guess=guess,
            score=int(score),
            num_left=int(num_left),
        )
        self._rows.append(row)
        return row
