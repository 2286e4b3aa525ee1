from __future__ import annotations
from importlib import resources
from pathlib import Path
from typing import List

from wordler.settings import WORDS_RESOURCE


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def read_embedded_text(name: str = WORDS_RESOURCE) -> str:
    """Raw text of a word list shipped inside the package (datasets/data/)."""
    return (resources.files("wordler.datasets") / "data" / name).read_text(encoding="utf-8")


def read_embedded_lines(name: str = WORDS_RESOURCE) -> List[str]:
    """Lines of a packaged word list. See read_lines."""
    return [ln.rstrip("\r\n") for ln in read_embedded_text(name).splitlines()]
