"""
Composite ATS score.

Runs the four component scorers, combines them under fixed weights and
turns their findings into an ordered list of suggestions.
"""

import math
from types import MappingProxyType
from typing import List, Mapping, Optional

from . import formatting, keywords, relevance
from .logger import get_logger
from .normalize import round_half_up
from .schema import (
    ATSScoreResult,
    FormattingScore,
    JobDescriptionInput,
    KeywordScore,
    ParsedResume,
    RelevanceScore,
    SkillScore,
)
from .skills import score_skills

WEIGHTS = MappingProxyType({
    "skills": 0.40,
    "experience": 0.30,
    "keywords": 0.20,
    "formatting": 0.10,
})
COMPONENTS = tuple(WEIGHTS)

MAX_SUGGESTIONS = 10
MAX_LISTED = 5

SKILLS_SUGGEST_BELOW = 70
EXPERIENCE_SUGGEST_BELOW = 60
KEYWORDS_SUGGEST_BELOW = 70
CONGRATULATE_AT = 80

EXPERIENCE_SUGGESTION = (
    "Expand your experience descriptions to include more relevant keywords "
    "and achievements"
)
CONGRATULATION = (
    "Excellent keyword optimization! Consider quantifying your achievements "
    "with metrics."
)


def check_weights(weights: Mapping[str, float]) -> Mapping[str, float]:
    """
    Validate a weight table: exactly the four components, each in [0, 1],
    summing to 1.0.

    Raises:
        ValueError: the table is malformed
    """
    names = set(weights)
    if names != set(COMPONENTS):
        raise ValueError(
            f"Weights must name exactly {', '.join(COMPONENTS)}; got {', '.join(sorted(names))}"
        )
    for name, value in weights.items():
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"Weight for {name} must be between 0 and 1, got {value}")
    total = math.fsum(weights.values())
    if not math.isclose(total, 1.0, rel_tol=0.0, abs_tol=1e-9):
        raise ValueError(f"Weights must sum to 1.0, got {total}")
    return weights


check_weights(WEIGHTS)


def combine(component_scores: Mapping[str, float], weights: Mapping[str, float] = WEIGHTS) -> int:
    """Weighted sum of unrounded component scores, rounded once."""
    total = math.fsum(component_scores[name] * weights[name] for name in COMPONENTS)
    return max(0, min(100, round_half_up(total)))


def suggestions_for(
    skills: SkillScore,
    experience: RelevanceScore,
    kw: KeywordScore,
    fmt: FormattingScore,
) -> List[str]:
    """Suggestions in priority order: skills, experience, keywords, formatting, general."""
    out: List[str] = []

    if skills.score < SKILLS_SUGGEST_BELOW and skills.missing:
        out.append(f"Add these critical skills: {', '.join(skills.missing[:MAX_LISTED])}")

    if experience.score < EXPERIENCE_SUGGEST_BELOW:
        out.append(EXPERIENCE_SUGGESTION)

    if kw.score < KEYWORDS_SUGGEST_BELOW and kw.missing:
        out.append(f"Include these important keywords: {', '.join(kw.missing[:MAX_LISTED])}")

    out.extend(f"Formatting: {issue}" for issue in fmt.issues)

    if skills.score >= CONGRATULATE_AT and kw.score >= CONGRATULATE_AT:
        out.append(CONGRATULATION)

    deduped = list(dict.fromkeys(out))
    return deduped[:MAX_SUGGESTIONS]


def calculate(
    resume: ParsedResume,
    job: JobDescriptionInput,
    weights: Optional[Mapping[str, float]] = None,
) -> ATSScoreResult:
    """
    Score a parsed résumé against a job description.

    Args:
        resume: Segmented résumé
        job: Target job description
        weights: Optional replacement for ``WEIGHTS``; validated on every call

    Returns:
        ATSScoreResult with integer scores in [0, 100]

    Raises:
        ValueError: ``weights`` is not a valid weight table
    """
    weights = check_weights(weights if weights is not None else WEIGHTS)

    skills = score_skills(resume.skills, job.required_skills, job.preferred_skills)
    experience = relevance.score(
        " ".join(resume.experience), job.description, content=resume.content
    )
    kw = keywords.score(resume.content, job.keywords)
    fmt = formatting.score(resume)

    components = {
        "skills": skills.score,
        "experience": experience.score,
        "keywords": kw.score,
        "formatting": fmt.score,
    }
    overall = combine(components, weights)

    result = ATSScoreResult(
        overall_score=overall,
        skills_score=round_half_up(skills.score),
        experience_score=round_half_up(experience.score),
        keyword_score=round_half_up(kw.score),
        formatting_score=round_half_up(fmt.score),
        matched_skills=skills.matched,
        missing_skills=skills.missing,
        matched_keywords=kw.matched,
        missing_keywords=kw.missing,
        suggestions=suggestions_for(skills, experience, kw, fmt),
    )

    logger = get_logger()
    logger.record_analysis()
    logger.info(
        "Calculated ATS score",
        overall=result.overall_score,
        skills=result.skills_score,
        experience=result.experience_score,
        keywords=result.keyword_score,
        formatting=result.formatting_score,
    )
    return result
