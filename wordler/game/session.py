"""
Session state for one game.

A Session owns the dictionary, the secret word, the accepted guesses (in
turn order) and the set of letters known to be absent from the secret.
The game loop creates one Session and passes it around explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Set

from wordler.datasets import Dictionary
from wordler.engine import Mark, classify, absent_letters, render_guess
from wordler.settings import MAX_TRIES


class Outcome(Enum):
    ONGOING = "ongoing"
    WON = "won"
    LOST = "lost"


@dataclass
class Session:
    dictionary: Dictionary
    secret: str
    guesses: List[str] = field(default_factory=list)
    absent: Set[str] = field(default_factory=set)

    @property
    def tries(self) -> int:
        return len(self.guesses)

    def record_guess(self, guess: str) -> None:
        assert guess in self.dictionary, f"{guess} is not a dictionary word"
        if self.tries >= MAX_TRIES:
            raise ValueError(f"no tries left ({MAX_TRIES} used)")
        self.guesses.append(guess)

    def evaluate(self, guess: str) -> List[Mark]:
        """Classify `guess` and remember the letters it proved absent."""
        marks = classify(guess, self.secret)
        self.absent |= absent_letters(guess, marks)
        return marks

    def render_history(self, color: bool = True) -> List[str]:
        """
        One line per accepted guess, e.g. "1: CRANE" with colored letters.
        Evaluating the history also refreshes `absent`.
        """
        lines = []
        for n, guess in enumerate(self.guesses, start=1):
            marks = self.evaluate(guess)
            lines.append(f"{n}: {render_guess(guess, marks, color)}")
        return lines

    def absent_letters_summary(self) -> str:
        if not self.absent:
            return ""
        return "Letters not in the word: " + "".join(f"{c} " for c in sorted(self.absent))

    def outcome(self, guess: Optional[str] = None) -> Outcome:
        """Result after `guess` (defaults to the latest accepted guess)."""
        if guess is None and self.guesses:
            guess = self.guesses[-1]
        if guess == self.secret:
            return Outcome.WON
        if self.tries >= MAX_TRIES:
            return Outcome.LOST
        return Outcome.ONGOING
