from __future__ import annotations

import logging
import random
from typing import Sequence

from wordler.errors import EmptyDictionaryError

logger = logging.getLogger(__name__)


def make_rng(seed: int | None = None) -> random.Random:
    """Randomness provider for secret selection; a fixed seed makes it reproducible."""
    logger.debug("secret rng seed=%s", seed)
    return random.Random(seed)


def pick_secret(dictionary: Sequence[str], rng: random.Random) -> str:
    """Pick one dictionary word uniformly at random."""
    if len(dictionary) == 0:
        raise EmptyDictionaryError("cannot pick a secret word from an empty dictionary")
    return dictionary[rng.randrange(len(dictionary))]
