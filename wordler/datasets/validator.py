"""
Word list diagnostics.

What this module does:
- Count how many candidate lines of a word list survive normalization.
- Count dropped lines and duplicate words; compute SHA-256 of the raw text.
- Return a machine-readable dict and provide a pretty one-line summary.

The report never fails the load on its own; loader.load_dictionary decides
what is fatal (an empty result). Typical use:
    from wordler.datasets import wordlist_report, pretty_summary
    print(pretty_summary(wordlist_report(read_embedded_lines())))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Dict, List, Sequence
import hashlib

from wordler.engine.validation import normalize
from wordler.settings import HEADER_LINES, WORD_LENGTH


@dataclass
class WordlistReport:
    sha256: str          # SHA-256 of the raw text (lines joined with "\n")
    candidates: int      # lines after the header
    count: int           # words kept after normalization
    unique_count: int    # distinct words kept
    dropped_lines: int   # candidate lines that did not normalize to a word
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_text(lines: Sequence[str]) -> str:
    return hashlib.sha256("\n".join(lines).encode("utf-8")).hexdigest()


def wordlist_report(lines: Sequence[str], header_lines: int = HEADER_LINES) -> Dict:
    """
    Diagnose a raw word list.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport) where `passed`
        requires at least one word, no dropped lines and no duplicates.
    """
    issues: List[str] = []
    body = list(lines)[header_lines:]

    kept: List[str] = []
    dropped = 0
    for raw in body:
        w = normalize(raw)
        if len(w) == WORD_LENGTH:
            kept.append(w)
        else:
            dropped += 1

    unique = set(kept)

    if not kept:
        issues.append(f"word list contains 0 valid {WORD_LENGTH}-letter words")
    if dropped:
        issues.append(f"{dropped} line(s) dropped during normalization")
    if len(kept) != len(unique):
        issues.append(f"{len(kept) - len(unique)} duplicate word(s)")

    rep = WordlistReport(
        sha256=_sha256_text(lines),
        candidates=len(body),
        count=len(kept),
        unique_count=len(unique),
        dropped_lines=dropped,
        passed=bool(kept) and dropped == 0 and len(kept) == len(unique),
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact, human-friendly one-liner for logs.

    Example:
        words=312 (uniq=312, dropped=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"dropped={report['dropped_lines']}, sha={sha}) | {status}"
    )
