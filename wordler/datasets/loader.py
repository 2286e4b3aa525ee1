"""
Dictionary loading.

The word list is a plain text file: HEADER_LINES lines of metadata, then one
candidate word per line. Every candidate is normalized the same way guesses
are; whatever doesn't come out as exactly WORD_LENGTH letters is dropped.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Sequence

from wordler.engine.validation import normalize
from wordler.errors import EmptyDictionaryError
from wordler.settings import HEADER_LINES, WORD_LENGTH
from .io import read_embedded_lines
from .validator import wordlist_report, pretty_summary

logger = logging.getLogger(__name__)


class Dictionary:
    """Immutable, ordered collection of playable words."""

    __slots__ = ("_words", "_index")

    def __init__(self, words: Iterable[str]):
        self._words = tuple(words)
        self._index = frozenset(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __getitem__(self, i: int) -> str:
        return self._words[i]

    def __repr__(self) -> str:
        return f"Dictionary({len(self._words)} words)"


def words_list(lines: Iterable[str], header_lines: int = HEADER_LINES) -> List[str]:
    """
    Skip the header, normalize each line, keep 5-letter results.
    Order is preserved; duplicates are kept.
    """
    out: List[str] = []
    for i, line in enumerate(lines):
        if i < header_lines:
            continue
        w = normalize(line)
        if len(w) == WORD_LENGTH:
            out.append(w)
    return out


def load_dictionary(lines: Optional[Sequence[str]] = None) -> Dictionary:
    """
    Build the Dictionary from `lines`, or from the packaged word list.

    Raises EmptyDictionaryError when nothing usable is left, since no game
    can be played without a secret to pick.
    """
    if lines is None:
        lines = read_embedded_lines()

    rep = wordlist_report(lines)
    logger.debug("word list: %s", pretty_summary(rep))
    for issue in rep["issues"]:
        logger.debug("word list issue: %s", issue)

    words = words_list(lines)
    if not words:
        raise EmptyDictionaryError("word list contains no valid 5-letter words")
    return Dictionary(words)
