"""
ATS structure checks. Starts from 100 and subtracts a fixed penalty per
problem; every penalty also yields an issue string.
"""

import re

from .schema import FormattingScore, ParsedResume
from .vocab import FORMATTING_ACTION_VERBS

MIN_CONTENT_LEN = 500

_ACTION_VERB = re.compile(
    r"\b(?:" + "|".join(FORMATTING_ACTION_VERBS) + r")\b", re.IGNORECASE
)

# (penalty, issue); applied in this order
SHORT_CONTENT = (20, "Resume content is too short")
NO_SKILLS = (30, "Missing skills section")
NO_EXPERIENCE = (30, "Missing experience section")
NO_EDUCATION = (20, "Missing education section")
NO_ACTION_VERBS = (10, "Lacks strong action verbs")


def has_action_verbs(text: str) -> bool:
    return _ACTION_VERB.search(text or "") is not None


def score(resume: ParsedResume) -> FormattingScore:
    checks = [
        (len(resume.content) < MIN_CONTENT_LEN, SHORT_CONTENT),
        (not resume.skills, NO_SKILLS),
        (not resume.experience, NO_EXPERIENCE),
        (not resume.education, NO_EDUCATION),
        (not has_action_verbs(resume.content), NO_ACTION_VERBS),
    ]

    value = 100
    issues = []
    for failed, (penalty, issue) in checks:
        if failed:
            value -= penalty
            issues.append(issue)

    return FormattingScore(score=max(0, value), issues=issues)
