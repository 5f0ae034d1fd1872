"""
Heuristic writing-quality analysis.

Independent of the job description: looks at bullet structure, language
(passive voice, pronouns, clichés, tone) and quantifiable impact, then
combines those with the ATS score into strengths, weaknesses and a
prioritised improvement list. All checks are regex and lexicon based.
"""

import re
from typing import List

from .schema import (
    ATSScoreResult,
    BulletPointQuality,
    ImpactAnalysis,
    LanguageQuality,
    ParsedResume,
    QualityReport,
)
from .vocab import CLICHES, SENTIMENT_LEXICON, STRONG_ACTION_VERBS


def _words(*words: str) -> "re.Pattern[str]":
    return re.compile(r"\b(?:" + "|".join(words) + r")\b", re.IGNORECASE)


BULLET_LINE = re.compile(r"^[ \t]*[•\-*][ \t]+", re.MULTILINE)
ACTION_CUES = _words("developed", "created", "implemented", "designed", "built")
RESULT_CUES = _words("increased", "decreased", "improved", "reduced", "achieved")
CONTEXT_CUES = _words("led", "managed", "coordinated", "oversaw")

PASSIVE_VOICE = re.compile(r"\b(?:was|were|been|being)\s+\w+ed\b", re.IGNORECASE)
FIRST_PERSON = re.compile(r"\b(?:I|me|my|mine)\b", re.IGNORECASE)
SENTENCE_END = re.compile(r"[.!?]+")
COMPLEX_WORD = re.compile(r"\b\w{12,}\b")
TOKEN = re.compile(r"[a-z0-9]+")

_NUMBER = r"\d+(?:,\d{3})*(?:\.\d+)?"
METRIC_TEMPLATES = [
    # outcome verb ... number, to the end of the sentence or line
    re.compile(
        r"\b(?:increased|decreased|improved|reduced|grew|saved|generated|achieved)\b"
        rf"[^.\n]*?(?:{_NUMBER}%?|\$\d+[kmb]?)[^.\n]*",
        re.IGNORECASE,
    ),
    re.compile(
        rf"{_NUMBER}%\s+(?:increase|decrease|improvement|growth|reduction)\b",
        re.IGNORECASE,
    ),
    re.compile(
        rf"\${_NUMBER}[kmb]?\s+(?:revenue|sales|savings|budget)\b",
        re.IGNORECASE,
    ),
    re.compile(
        r"\b(?:team of|managed|led)\s+\d+\s+(?:people|developers|members|engineers)\b",
        re.IGNORECASE,
    ),
]

MIN_BULLETS = 3
LONG_BULLET = 150
SHORT_BULLET = 30
MAX_PASSIVE = 5
MAX_FIRST_PERSON = 3
COMPLEX_WORD_RATIO = 0.3
MAX_CLICHES = 2
NEGATIVE_TONE = -0.5
QUANTIFIED_AT = 2
ENOUGH_METRICS = 3
MAX_IMPROVEMENTS = 10

_STRONG_VERB = _words(*STRONG_ACTION_VERBS)

ADD_NUMBER_SUGGESTIONS = (
    'Add specific numbers: "Increased sales by 25%"',
    'Include time frames: "Reduced processing time from 2 hours to 30 minutes"',
    'Quantify team size: "Led a team of 5 developers"',
    'Show scale: "Managed database with 1M+ records"',
)
MORE_METRICS_SUGGESTION = "Add more quantifiable achievements throughout your experience"


def count_action_verbs(content: str) -> int:
    """Occurrences of strong action verbs, counted as whole words."""
    return len(_STRONG_VERB.findall(content or ""))


def extract_metrics(content: str) -> List[str]:
    """Quantifiable-result phrases in template order, duplicates removed."""
    found: List[str] = []
    for template in METRIC_TEMPLATES:
        found.extend(m.group(0).strip() for m in template.finditer(content or ""))
    return list(dict.fromkeys(found))


def sentiment(content: str) -> float:
    """Mean lexicon valence per token; 0.0 for text without tokens."""
    tokens = TOKEN.findall((content or "").lower())
    if not tokens:
        return 0.0
    return sum(SENTIMENT_LEXICON.get(token, 0) for token in tokens) / len(tokens)


def bullet_point_quality(resume: ParsedResume) -> BulletPointQuality:
    content = "\n".join(resume.experience)
    score = 100
    feedback = []

    if len(BULLET_LINE.findall(content)) < MIN_BULLETS:
        score -= 30
        feedback.append("Add bullet points to structure your experience")

    if not ACTION_CUES.search(content):
        score -= 25
        feedback.append("Include strong action verbs at the start of each bullet point")

    if not RESULT_CUES.search(content):
        score -= 25
        feedback.append("Add measurable results and outcomes to your accomplishments")

    if not CONTEXT_CUES.search(content):
        score -= 10
        feedback.append("Provide context about your role and responsibilities")

    bullets = [line for line in content.split("\n") if BULLET_LINE.match(line)]
    if any(len(line) > LONG_BULLET for line in bullets):
        score -= 10
        feedback.append("Some bullet points are too long - aim for 1-2 lines each")

    too_short = [line for line in bullets if len(line) < SHORT_BULLET]
    if len(too_short) > len(bullets) / 2:
        score -= 10
        feedback.append("Many bullet points lack detail - expand with specific achievements")

    return BulletPointQuality(score=max(0, score), feedback=feedback)


def language_quality(resume: ParsedResume) -> LanguageQuality:
    content = resume.content
    score = 100
    feedback = []

    if len(PASSIVE_VOICE.findall(content)) > MAX_PASSIVE:
        score -= 15
        feedback.append("Reduce passive voice - use active voice for stronger impact")

    if len(FIRST_PERSON.findall(content)) > MAX_FIRST_PERSON:
        score -= 10
        feedback.append("Minimize use of first-person pronouns (I, me, my)")

    sentences = len(SENTENCE_END.split(content))
    if len(COMPLEX_WORD.findall(content)) > sentences * COMPLEX_WORD_RATIO:
        score -= 10
        feedback.append("Simplify complex terminology where possible for better readability")

    lowered = content.lower()
    if sum(1 for cliche in CLICHES if cliche in lowered) > MAX_CLICHES:
        score -= 15
        feedback.append("Replace clichés with specific examples and achievements")

    if sentiment(content) < NEGATIVE_TONE:
        score -= 10
        feedback.append("Overall tone appears negative - frame experiences more positively")

    return LanguageQuality(score=max(0, score), feedback=feedback)


def impact_analysis(resume: ParsedResume) -> ImpactAnalysis:
    metrics = extract_metrics(resume.content)
    if not metrics:
        suggestions = list(ADD_NUMBER_SUGGESTIONS)
    elif len(metrics) < ENOUGH_METRICS:
        suggestions = [MORE_METRICS_SUGGESTION]
    else:
        suggestions = []

    return ImpactAnalysis(
        has_quantifiable_results=len(metrics) >= QUANTIFIED_AT,
        examples=metrics,
        suggestions=suggestions,
    )


def strengths(resume: ParsedResume, ats: ATSScoreResult) -> List[str]:
    out = []
    if len(resume.skills) >= 10:
        out.append(f"Strong skill set with {len(resume.skills)} identified skills")
    if ats.overall_score >= 80:
        out.append("Excellent ATS compatibility - highly likely to pass automated screening")
    if ats.skills_score >= 85:
        out.append("Strong skills alignment with job requirements")
    if ats.keyword_score >= 80:
        out.append("Excellent keyword optimization")
    if len(resume.experience) >= 3:
        out.append("Comprehensive work experience documentation")
    if len(resume.projects) >= 2:
        out.append("Strong project portfolio demonstrates practical experience")

    verbs = count_action_verbs(resume.content)
    if verbs >= 10:
        out.append(f"Effective use of {verbs} action verbs to demonstrate achievements")
    if len(extract_metrics(resume.content)) >= 3:
        out.append("Good use of quantifiable metrics and results")
    return out


def weaknesses(resume: ParsedResume, ats: ATSScoreResult) -> List[str]:
    out = []
    if ats.overall_score < 60:
        out.append("Low ATS score may result in automatic rejection")
    if ats.skills_score < 60:
        out.append("Insufficient skills match with job requirements")
    if ats.keyword_score < 50:
        out.append("Missing critical keywords from job description")

    if len(resume.skills) < 5:
        out.append("Limited skills listed - add more relevant technical and soft skills")
    if not resume.experience:
        out.append("No work experience section detected")
    if not resume.education:
        out.append("Missing education information")
    if not resume.projects:
        out.append("No projects section - consider adding relevant projects")

    if count_action_verbs(resume.content) < 5:
        out.append('Lacks strong action verbs - use words like "achieved", "led", "developed"')
    if len(extract_metrics(resume.content)) < 2:
        out.append("Few quantifiable achievements - add specific numbers, percentages, or metrics")

    if len(resume.content) < 800:
        out.append("Resume appears too brief - add more detail to experience and achievements")
    if len(resume.content) > 5000:
        out.append("Resume may be too lengthy - consider condensing to most relevant information")
    return out


def improvements(
    ats: ATSScoreResult,
    bullets: BulletPointQuality,
    language: LanguageQuality,
    impact: ImpactAnalysis,
) -> List[str]:
    """Prioritised to-do list, capped at ten entries."""
    out = []
    if ats.missing_skills:
        out.append(f"HIGH PRIORITY: Add these missing skills - {', '.join(ats.missing_skills[:3])}")
    if ats.missing_keywords:
        out.append(f"Add critical keywords: {', '.join(ats.missing_keywords[:3])}")
    if bullets.score < 70:
        out.extend(bullets.feedback[:2])
    if language.score < 70:
        out.extend(language.feedback[:2])
    if not impact.has_quantifiable_results:
        out.extend(impact.suggestions[:2])
    if ats.formatting_score < 80:
        out.append("Improve resume formatting for better ATS compatibility")
    return out[:MAX_IMPROVEMENTS]


def analyze(resume: ParsedResume, ats_score: ATSScoreResult) -> QualityReport:
    """
    Build the quality report for a résumé.

    Reads ``resume`` and ``ats_score`` only; both are frozen models.
    """
    bullets = bullet_point_quality(resume)
    language = language_quality(resume)
    impact = impact_analysis(resume)
    return QualityReport(
        bullet_point_quality=bullets,
        language_quality=language,
        impact_analysis=impact,
        strengths=strengths(resume, ats_score),
        weaknesses=weaknesses(resume, ats_score),
        improvements=improvements(ats_score, bullets, language, impact),
    )
