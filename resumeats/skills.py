"""
Skill normalisation and fuzzy matching.

``matches`` tries the cheap checks first (equality, containment, synonym
table) and only computes an edit distance when those fail. The policy
favours recall: abbreviations and small typos match, but very short tokens
are kept out of the containment rule so "c" does not match "c++".
"""

import re
from typing import Iterable, List, Sequence

from rapidfuzz.distance import Levenshtein

from .normalize import collapse_whitespace
from .schema import SkillScore
from .vocab import SYNONYM_INDEX

_DISALLOWED = re.compile(r"[^a-z0-9 +#.]")

# Shorter token must be at least this long for the containment rule.
MIN_SUBSTRING_LEN = 3
SIMILARITY_THRESHOLD = 0.85

REQUIRED_WEIGHT = 80.0
PREFERRED_BONUS = 20.0


def normalize(skill: str) -> str:
    """Lower-case, trim, and keep only letters, digits, space, '+', '#', '.'."""
    return _DISALLOWED.sub("", collapse_whitespace(skill.lower())).strip()


def _contains(a: str, b: str) -> bool:
    shorter, longer = (a, b) if len(a) <= len(b) else (b, a)
    if len(shorter) < MIN_SUBSTRING_LEN:
        return False
    return shorter in longer


def _synonyms(a: str, b: str) -> bool:
    groups_a = SYNONYM_INDEX.get(a)
    groups_b = SYNONYM_INDEX.get(b)
    return bool(groups_a and groups_b and groups_a & groups_b)


def similarity(a: str, b: str) -> float:
    """1 - levenshtein(a, b) / max(len(a), len(b)) on normalised skills."""
    return Levenshtein.normalized_similarity(normalize(a), normalize(b))


def matches(a: str, b: str) -> bool:
    """True when two skill labels denote the same skill."""
    s1 = normalize(a)
    s2 = normalize(b)
    if not s1 or not s2:
        return False

    if s1 == s2:
        return True
    if _contains(s1, s2):
        return True
    if _synonyms(s1, s2):
        return True
    return Levenshtein.normalized_similarity(s1, s2) > SIMILARITY_THRESHOLD


def has_skill(candidate_skills: Iterable[str], skill: str) -> bool:
    return any(matches(candidate, skill) for candidate in candidate_skills)


def score_skills(
    resume_skills: Sequence[str],
    required: Sequence[str],
    preferred: Sequence[str] = (),
) -> SkillScore:
    """
    Score résumé skills against the job's required and preferred skills.

    Required skills are worth up to 80 points by match ratio; preferred
    skills add up to 20 bonus points. ``matched`` and ``missing`` partition
    ``required`` in input order.

    Returns:
        SkillScore with score in [0, 100]
    """
    matched: List[str] = []
    missing: List[str] = []
    for skill in required:
        if has_skill(resume_skills, skill):
            matched.append(skill)
        else:
            missing.append(skill)

    matched_preferred = [s for s in preferred if has_skill(resume_skills, s)]

    required_ratio = len(matched) / len(required) if required else 0.0
    preferred_bonus = (
        len(matched_preferred) / len(preferred) * PREFERRED_BONUS if preferred else 0.0
    )
    score = min(100.0, required_ratio * REQUIRED_WEIGHT + preferred_bonus)

    return SkillScore(
        score=score,
        matched=matched,
        missing=missing,
        matched_preferred=matched_preferred,
    )
