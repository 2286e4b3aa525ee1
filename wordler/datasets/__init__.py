from .loader import Dictionary, words_list, load_dictionary
from .validator import wordlist_report, pretty_summary
from .io import read_lines, read_embedded_lines

__all__ = [
    "Dictionary", "words_list", "load_dictionary",
    "wordlist_report", "pretty_summary",
    "read_lines", "read_embedded_lines",
]
