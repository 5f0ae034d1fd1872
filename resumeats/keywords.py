"""
Keyword coverage with diminishing returns.

70% of the score is the share of keywords present at all; 30% is density,
where each keyword earns 5 points per occurrence up to 15. The per-keyword
cap keeps a stuffed résumé from outscoring one with broad coverage.
"""

import re
from typing import List, Sequence

from .logger import get_logger
from .schema import KeywordScore

RATIO_WEIGHT = 70.0
DENSITY_WEIGHT = 30.0
POINTS_PER_OCCURRENCE = 5
MAX_POINTS_PER_KEYWORD = 15


def keyword_pattern(keyword: str) -> "re.Pattern[str]":
    # \b fails next to '+', '#' or '.', so bound on word characters instead
    return re.compile(rf"(?<!\w){re.escape(keyword.strip())}(?!\w)", re.IGNORECASE)


def count_occurrences(text: str, keyword: str) -> int:
    if not keyword.strip():
        return 0
    return len(keyword_pattern(keyword).findall(text))


def score(resume_text: str, keywords: Sequence[str]) -> KeywordScore:
    """
    Score keyword presence and frequency in the résumé text.

    ``matched`` and ``missing`` partition ``keywords`` in input order.
    An empty keyword list scores 0.
    """
    if not keywords:
        logger = get_logger()
        logger.record_degenerate_input("no_keywords")
        logger.warning("No keywords supplied; keyword score is 0")
        return KeywordScore(score=0.0)

    text = resume_text or ""
    matched: List[str] = []
    missing: List[str] = []
    density = 0
    for keyword in keywords:
        occurrences = count_occurrences(text, keyword)
        if occurrences:
            matched.append(keyword)
            density += min(occurrences * POINTS_PER_OCCURRENCE, MAX_POINTS_PER_KEYWORD)
        else:
            missing.append(keyword)

    ratio = len(matched) / len(keywords)
    value = min(100.0, ratio * RATIO_WEIGHT + density / len(keywords) * DENSITY_WEIGHT)
    return KeywordScore(score=value, matched=matched, missing=missing)
