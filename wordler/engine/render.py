"""
Terminal rendering with ANSI colors (colorama).

Colors:
  EXACT -> bright green, PRESENT -> bright yellow, ABSENT -> red
  prompts -> cyan, errors -> red, loss message -> bright red
"""

from typing import Iterable

from colorama import Fore, Style

from .feedback import Mark

MARK_COLORS = {
    Mark.EXACT: Style.BRIGHT + Fore.GREEN,
    Mark.PRESENT: Style.BRIGHT + Fore.YELLOW,
    Mark.ABSENT: Fore.RED,
}

PROMPT = Fore.CYAN
ERROR = Fore.RED
LOSS = Style.BRIGHT + Fore.RED


def paint(text: str, color: str, enabled: bool = True) -> str:
    if not enabled:
        return text
    return color + text + Style.RESET_ALL


def render_guess(guess: str, marks: Iterable[Mark], enabled: bool = True) -> str:
    """One colored letter per position; plain letters when `enabled` is False."""
    return "".join(paint(c, MARK_COLORS[m], enabled) for c, m in zip(guess, marks))
