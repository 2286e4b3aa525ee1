"""
Game constants.

Single source of truth for the rules; everything else imports from here.
"""

WORD_LENGTH = 5
MAX_TRIES = 6

# The embedded word list starts with metadata lines that are not words.
HEADER_LINES = 2
WORDS_RESOURCE = "words.txt"


def check_max_tries(max_tries: int) -> None:
    """Guardrail: prevent accidental games with a different try budget."""
    if max_tries != MAX_TRIES:
        raise ValueError(f"max_tries must be {MAX_TRIES}; got {max_tries}")
