"""
Exception hierarchy.

Guess errors are recoverable and never leave the read loop.
The rest are fatal and end the process with a diagnostic.
"""

from wordler.settings import WORD_LENGTH


class WordlerError(Exception):
    pass


class GuessError(WordlerError, ValueError):
    """A guess the player has to retype. Does not consume a try."""


class MalformedGuess(GuessError):
    def __init__(self, guess: str):
        self.guess = guess
        super().__init__(f"Your guess must be {WORD_LENGTH} letters.")


class UnknownGuess(GuessError):
    def __init__(self, guess: str):
        self.guess = guess
        super().__init__(f"{guess} isn't in the dictionary.")


class EmptyDictionaryError(WordlerError, ValueError):
    pass


class InputClosed(WordlerError, EOFError):
    """Standard input ended before the game reached a result."""
