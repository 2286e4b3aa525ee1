"""Wordler: a terminal five-letter word-guessing game."""

__version__ = "1.0.0"
