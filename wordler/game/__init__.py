from .secret import make_rng, pick_secret
from .session import Outcome, Session
from .loop import new_session, ask_for_guess, play

__all__ = [
    "make_rng", "pick_secret", "Outcome", "Session",
    "new_session", "ask_for_guess", "play",
]
