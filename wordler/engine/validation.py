"""
Guess normalization and validation.

A guess is accepted iff, after normalization, it
  - has exactly WORD_LENGTH letters
  - is a member of the dictionary

The same normalization is used when loading the word list, so a word typed
in any case, or with stray spaces or punctuation, matches its dictionary entry.
"""

from typing import Container

from wordler.errors import MalformedGuess, UnknownGuess
from wordler.settings import WORD_LENGTH


def normalize(raw: str) -> str:
    """
    Trim, uppercase and keep ASCII letters only.

    Idempotent: normalize(normalize(x)) == normalize(x).
    """
    return "".join(c for c in raw.strip().upper() if c.isascii() and c.isalpha())


def validate_guess(raw: str, dictionary: Container[str]) -> str:
    """
    Return the normalized guess, or raise a GuessError describing why it
    can't be played.

    Raises:
      MalformedGuess : wrong number of letters
      UnknownGuess   : not a dictionary word
    """
    guess = normalize(raw)

    if len(guess) != WORD_LENGTH:
        raise MalformedGuess(guess)

    if guess not in dictionary:
        raise UnknownGuess(guess)

    return guess
