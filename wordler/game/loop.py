"""
The interactive game loop.

Each turn:
  1) print the colored history of accepted guesses
  2) read lines until one is a valid guess (rejections cost nothing)
  3) stop on a win or when the try budget is spent

Input is any iterator of lines (sys.stdin in the CLI), output any text
stream, so the whole game can be driven from tests.
"""

from __future__ import annotations

import logging
import random
import sys
from typing import Dict, Iterator, Optional, TextIO

from wordler.datasets import Dictionary, load_dictionary
from wordler.engine import classify, pattern, paint, validate_guess
from wordler.engine.render import ERROR, LOSS, PROMPT
from wordler.errors import GuessError, InputClosed
from wordler.settings import MAX_TRIES, WORD_LENGTH, check_max_tries
from .secret import make_rng, pick_secret
from .session import Outcome, Session

logger = logging.getLogger(__name__)


def new_session(
        dictionary: Optional[Dictionary] = None,
        rng: Optional[random.Random] = None,
) -> Session:
    """Load the dictionary (if not given) and pick the secret word."""
    if dictionary is None:
        dictionary = load_dictionary()
    if rng is None:
        rng = make_rng()
    return Session(dictionary=dictionary, secret=pick_secret(dictionary, rng))


def ask_for_guess(
        session: Session,
        lines: Iterator[str],
        out: TextIO,
        color: bool = True,
) -> str:
    """
    Prompt, then consume lines until one validates. The accepted guess is
    recorded in the session and returned.

    Raises InputClosed if `lines` runs out first.
    """
    print(paint(f"Enter your word guess ({WORD_LENGTH} letters) and press ENTER", PROMPT, color), file=out)
    summary = session.absent_letters_summary()
    if summary:
        print(summary, file=out)

    for raw in lines:
        try:
            guess = validate_guess(raw, session.dictionary)
        except GuessError as e:
            logger.debug("rejected %r: %s", raw.rstrip("\r\n"), type(e).__name__)
            print(paint(str(e), ERROR, color), file=out)
            continue
        session.record_guess(guess)
        return guess

    raise InputClosed("input closed before the game finished")


def play(
        session: Session,
        lines: Iterator[str],
        out: Optional[TextIO] = None,
        *,
        color: bool = True,
        max_tries: int = MAX_TRIES,
) -> Dict:
    """
    Run the game to completion.

    Returns:
        dict with keys:
            outcome (Outcome.WON / Outcome.LOST), tries (int), secret (str),
            history (list[(guess, pattern)])
    """
    check_max_tries(max_tries)
    if out is None:
        out = sys.stdout

    while True:
        for line in session.render_history(color):
            print(line, file=out)

        ask_for_guess(session, lines, out, color)

        outcome = session.outcome()
        if outcome is Outcome.WON:
            print(f"Correct! You guessed the word in {session.tries} tries.", file=out)
            break
        if outcome is Outcome.LOST:
            print(paint(f"You ran out of tries! The word was {session.secret}", LOSS, color), file=out)
            break

    return {
        "outcome": outcome,
        "tries": session.tries,
        "secret": session.secret,
        "history": [(g, pattern(classify(g, session.secret))) for g in session.guesses],
    }
