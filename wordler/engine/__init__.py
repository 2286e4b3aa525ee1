from .feedback import Mark, classify, pattern, absent_letters
from .validation import normalize, validate_guess
from .render import render_guess, paint

__all__ = [
    "Mark", "classify", "pattern", "absent_letters",
    "normalize", "validate_guess", "render_guess", "paint",
]
