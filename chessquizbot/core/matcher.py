"""
Tolerant free-text answer matching.

Both sides are normalized (lowercase, only ``a-z0-9`` kept) and compared
position by position. The score is the number of differing positions over
the shared prefix plus the length difference. References longer than six
characters accept a score of 2, shorter ones a score of 1, so answers like
"64" or "fork" stay strict.
"""

from __future__ import annotations
import re
from typing import Iterable

_NON_ALNUM = re.compile(r"[^a-z0-9]")

LONG_REFERENCE_LEN = 6
LONG_TOLERANCE = 2
SHORT_TOLERANCE = 1


def normalize(text: str | None) -> str:
    return _NON_ALNUM.sub("", str(text or "").lower())


def is_match(answer: str | None, reference: str | None) -> bool:
    u = normalize(answer)
    a = normalize(reference)
    if not u or not a:
        return False
    if u == a:
        return True

    diff = sum(1 for x, y in zip(u, a) if x != y)
    diff += abs(len(u) - len(a))
    tolerance = LONG_TOLERANCE if len(a) > LONG_REFERENCE_LEN else SHORT_TOLERANCE
    return diff <= tolerance


def matches_any(answer: str | None, references: Iterable[str]) -> bool:
    return any(is_match(answer, ref) for ref in references)
