"""Scoreboard reporters: a console table and a silent no-op."""

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from .boards import Scoreboard, ScoreboardRow
from .scoring import MAX_SCORE, score_to_str


# ANSI styles
_RESET = "\x1b[0m"
_BOLD = "\x1b[1m"
_FG_YELLOW = "\x1b[33m"
_FG_GREEN = "\x1b[32m"

_STYLES = {
    '0': "",
    '1': _BOLD + _FG_YELLOW,
    '2': _BOLD + _FG_GREEN,
}

HEADER = ("| # | Soln. | Guess | Score | Poss. |\n"
          "|---|-------|-------|-------|-------|")


class Reporter(ABC):
    """Hooks the solver calls as a solve progresses."""

    @abstractmethod
    def print(self, scoreboard: Scoreboard) -> None:
        """Print the whole scoreboard."""

    @abstractmethod
    def print_tail(self, scoreboard: Scoreboard) -> None:
        """Print the latest row (called after every step)."""

    @abstractmethod
    def report_failure(self, scoreboard: Scoreboard) -> None:
        """Called once when the iteration cap is hit without a solve."""


class NullReporter(Reporter):

    def print(self, scoreboard: Scoreboard) -> None:
        pass

    def print_tail(self, scoreboard: Scoreboard) -> None:
        pass

    def report_failure(self, scoreboard: Scoreboard) -> None:
        pass


def prettify(text: str, mask: str, colour: bool = True) -> str:
    """Colour each character of `text` by the matching ternary digit in `mask`."""
    if not colour:
        return text

    parts = []
    for ch, m in zip(text, mask):
        if m not in _STYLES:
            raise ValueError(f"Unexpected character in ternary score: '{m}'")
        style = _STYLES[m]
        parts.append(f"{style}{ch}{_RESET}" if style else ch)
    return "".join(parts)


class ConsoleReporter(Reporter):
    """
    Markdown-style table, one row per guess:

        | # | Soln. | Guess | Score | Poss. |
        |---|-------|-------|-------|-------|
        | 1 | POWER | SALET | 00020 |     2 |
    """

    def __init__(self, stream: TextIO = None, colour: bool = True):
        self.stream = stream
        self.colour = colour

    def _write(self, line: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(line + "\n")
        stream.flush()

    def build_row_str(self, row: ScoreboardRow) -> str:
        ternary = score_to_str(row.score)
        remaining = "" if row.score == MAX_SCORE else str(row.num_left)

        guess = prettify(row.guess.value(), ternary, self.colour)
        score = prettify(ternary, ternary, self.colour)

        return f"| {row.n} | {row.soln} | {guess} | {score} | {remaining:>5} |"

    def print(self, scoreboard: Scoreboard) -> None:
        self._write(HEADER)
        for row in scoreboard.rows:
            self._write(self.build_row_str(row))

    def print_tail(self, scoreboard: Scoreboard) -> None:
        if len(scoreboard) == 0:
            return

        if len(scoreboard) == 1:
            self._write(HEADER)

        self._write(self.build_row_str(scoreboard.last_row))

    def report_failure(self, scoreboard: Scoreboard) -> None:
        self._write(f"Failed to converge after {len(scoreboard)} iterations.")
