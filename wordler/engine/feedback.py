"""
Per-letter feedback for a single (guess, secret) pair.

Conventions:
  - EXACT   ('G') : correct letter in the correct position
  - PRESENT ('Y') : letter occurs somewhere else in the secret
  - ABSENT  ('-') : letter does not occur in the secret at all

PRESENT uses the "appears anywhere" rule: every copy of a letter that occurs
in the secret is marked, no matter how many times the secret contains it.
  classify("LEVEL", "LEMON") -> G G - Y Y
  classify("EERIE", "CRANE") -> Y Y Y - G

Classification is pure. Accumulating the absent letters over a session is
done by the caller (see wordler.game.session).
"""

from enum import Enum
from typing import Iterable, List, Set


class Mark(str, Enum):
    EXACT = "G"
    PRESENT = "Y"
    ABSENT = "-"


def classify(guess: str, secret: str) -> List[Mark]:
    """
    Classify every letter of `guess` against `secret`.

    Preconditions:
      - both words are normalized (see engine.validation.normalize)
      - len(guess) == len(secret)
    """
    assert len(guess) == len(secret), "Guess and secret must be the same length"

    marks: List[Mark] = []
    for i, c in enumerate(guess):
        if secret[i] == c:
            marks.append(Mark.EXACT)
        elif c in secret:
            marks.append(Mark.PRESENT)
        else:
            marks.append(Mark.ABSENT)
    return marks


def pattern(marks: Iterable[Mark]) -> str:
    """Compact string form, e.g. "-GYYG"."""
    return "".join(m.value for m in marks)


def absent_letters(guess: str, marks: Iterable[Mark]) -> Set[str]:
    """Letters of `guess` that were classified ABSENT."""
    return {c for c, m in zip(guess, marks) if m is Mark.ABSENT}
