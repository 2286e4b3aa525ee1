# apps/cli/play.py
"""
CLI entry point for a game of Wordler.

This script:
  1) Loads the embedded dictionary and picks the secret word.
  2) Runs the game on stdin/stdout until the player wins or runs out of tries.

Run with no arguments for a normal game. The flags only help when
developing: a fixed --seed, plain output, debug logging.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import colorama

from wordler.errors import EmptyDictionaryError, InputClosed
from wordler.game import make_rng, new_session, play

logger = logging.getLogger("wordler")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse CLI args, play one game, return the process exit status.
    """
    ap = argparse.ArgumentParser(description="Wordler: guess the five-letter word in six tries")
    ap.add_argument("--seed", type=int, help="RNG seed for the secret word (reproducible games)")
    ap.add_argument("--no-color", action="store_true", help="plain text output, no ANSI colors")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    colorama.just_fix_windows_console()

    try:
        session = new_session(rng=make_rng(args.seed))
        play(session, sys.stdin, sys.stdout, color=not args.no_color)
    except EmptyDictionaryError as e:
        logger.error("cannot start a game: %s", e)
        return 1
    except InputClosed:
        print("Input closed before the game finished.", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
