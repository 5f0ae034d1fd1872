"""
Rule-based résumé segmenter.

Splits raw résumé text into skills, experience, education, projects and
contact details. Header recognition is data-driven: ``SECTION_HEADERS`` is
an ordered list of (section, pattern) rules and every rule is applied on
its own, so a document with both "Skills" and "Technical Skills" gets both
blocks. Nothing here raises; unparseable text comes back as a mostly-empty
ParsedResume.
"""

import re
from typing import List, Optional

from .logger import get_logger
from .normalize import collapse_whitespace, normalize_document_text
from .schema import ContactInfo, ParsedResume
from .vocab import WELL_KNOWN_SKILLS

SKILLS = "skills"
EXPERIENCE = "experience"
EDUCATION = "education"
PROJECTS = "projects"
OTHER = "other"  # recognised only so captures stop there


def _header(phrase: str) -> "re.Pattern[str]":
    # The phrase alone on its line, or followed by a colon and inline content.
    return re.compile(
        rf"^\s*(?:[#*•\-]\s*)?(?:{phrase})\s*(?::\s*(?P<rest>.*?))?\s*$",
        re.IGNORECASE,
    )


SECTION_HEADERS = [
    (SKILLS, _header(r"skills?")),
    (SKILLS, _header(r"technical\s+skills?")),
    (SKILLS, _header(r"core\s+competencies")),
    (SKILLS, _header(r"key\s+skills")),
    (SKILLS, _header(r"technologies|tech\s+stack")),
    (EXPERIENCE, _header(r"(?:work\s+)?experience")),
    (EXPERIENCE, _header(r"professional\s+experience")),
    (EXPERIENCE, _header(r"employment\s+history")),
    (EXPERIENCE, _header(r"work\s+history|relevant\s+experience")),
    (EDUCATION, _header(r"education")),
    (EDUCATION, _header(r"academic\s+background")),
    (EDUCATION, _header(r"education\s*(?:&|and)\s*training")),
    (PROJECTS, _header(r"projects?")),
    (PROJECTS, _header(r"(?:key|personal|selected|academic)\s+projects?")),
    (OTHER, _header(r"(?:professional\s+)?summary|objective|profile|about\s+me")),
    (OTHER, _header(r"certifications?|licenses?|awards?|honou?rs")),
    (OTHER, _header(r"languages|interests|hobbies|publications|references")),
    (OTHER, _header(r"volunteer(?:ing)?(?:\s+experience)?|contact(?:\s+information)?")),
]

SKILL_DELIMITERS = re.compile(r"[,;•\n|]")
BULLET_PREFIX = re.compile(r"^[-•*]\s*")
SUB_LABEL = re.compile(r"^[ \t]*(?:[-•*][ \t]*)?[A-Za-z][\w &/+.-]{0,30}?:[ \t]*", re.MULTILINE)
JOB_ENTRY_SPLIT = re.compile(r"\n(?=[A-Z][a-z]+.*\b(?:19|20)\d{2}\b)")
PROJECT_SPLIT = re.compile(r"\n\s*\n|\n(?=[A-Z])")

EMAIL = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
PHONE = re.compile(r"(?<!\d)(?:\+\d{1,3}[-. ]?)?\(?\d{3}\)?[-. ]?\d{3}[-. ]?\d{4}(?!\d)")
LINKEDIN = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE)
GITHUB = re.compile(r"github\.com/[\w-]+", re.IGNORECASE)

_KNOWN_SKILL_PATTERNS = [
    (skill, re.compile(rf"(?<!\w){re.escape(skill)}(?!\w)", re.IGNORECASE))
    for skill in WELL_KNOWN_SKILLS
]

MIN_SKILL_LEN = 2
MAX_SKILL_LEN = 50
MIN_EXPERIENCE_LEN = 20
MIN_EDUCATION_LEN = 10
MIN_PROJECT_LEN = 20


def _is_bare_header(line: str) -> bool:
    # "Languages: Haskell, OCaml" under Skills is content, not a new section
    for _, pattern in SECTION_HEADERS:
        m = pattern.match(line)
        if m and not m.group("rest"):
            return True
    return False


def _capture(lines: List[str], pattern: "re.Pattern[str]") -> Optional[str]:
    """
    Text under the first header matching ``pattern``.

    A bare header ("Skills", "Skills:") captures every following line up to
    the next bare header. An inline header ("Skills: Python, SQL") captures
    only its own content.
    """
    for i, line in enumerate(lines):
        m = pattern.match(line)
        if not m:
            continue
        if m.group("rest"):
            return m.group("rest").strip()
        body = []
        for nxt in lines[i + 1:]:
            if _is_bare_header(nxt):
                break
            body.append(nxt)
        return "\n".join(body).strip()
    return None


def section_blocks(text: str, section: str) -> List[str]:
    """All captured blocks for one section type, one per matching rule."""
    lines = text.split("\n")
    blocks: List[str] = []
    for name, pattern in SECTION_HEADERS:
        if name != section:
            continue
        block = _capture(lines, pattern)
        if block and block not in blocks:
            blocks.append(block)
    return blocks


def _unique(items: List[str]) -> List[str]:
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def split_skill_block(block: str) -> List[str]:
    skills = []
    # "Frameworks: Phoenix, Yesod" contributes Phoenix and Yesod
    block = SUB_LABEL.sub("", block)
    for part in SKILL_DELIMITERS.split(block):
        cleaned = collapse_whitespace(BULLET_PREFIX.sub("", part.strip()))
        if MIN_SKILL_LEN <= len(cleaned) <= MAX_SKILL_LEN:
            skills.append(cleaned)
    return skills


def find_known_skills(text: str) -> List[str]:
    return [skill for skill, pattern in _KNOWN_SKILL_PATTERNS if pattern.search(text)]


def extract_skills(text: str) -> List[str]:
    found: List[str] = []
    for block in section_blocks(text, SKILLS):
        found.extend(split_skill_block(block))
    found.extend(find_known_skills(text))

    seen = set()
    skills = []
    for skill in found:
        key = skill.casefold()
        if key not in seen:
            seen.add(key)
            skills.append(skill)
    return skills


def extract_experience(text: str) -> List[str]:
    entries = []
    for block in section_blocks(text, EXPERIENCE):
        for job in JOB_ENTRY_SPLIT.split(block):
            cleaned = job.strip()
            if len(cleaned) >= MIN_EXPERIENCE_LEN:
                entries.append(cleaned)
    return _unique(entries)


def extract_education(text: str) -> List[str]:
    lines = []
    for block in section_blocks(text, EDUCATION):
        for line in block.split("\n"):
            cleaned = BULLET_PREFIX.sub("", line.strip())
            if len(cleaned) >= MIN_EDUCATION_LEN:
                lines.append(cleaned)
    return _unique(lines)


def extract_projects(text: str) -> List[str]:
    projects = []
    for block in section_blocks(text, PROJECTS):
        for project in PROJECT_SPLIT.split(block):
            cleaned = project.strip()
            if len(cleaned) >= MIN_PROJECT_LEN:
                projects.append(cleaned)
    return _unique(projects)


def extract_contact_info(text: str) -> ContactInfo:
    """First match for each contact field; absent when nothing matches."""
    fields = {}
    for name, pattern in (
        ("email", EMAIL),
        ("phone", PHONE),
        ("linkedin", LINKEDIN),
        ("github", GITHUB),
    ):
        m = pattern.search(text)
        if m:
            fields[name] = m.group(0).strip()
    return ContactInfo(**fields)


def segment(text: str) -> ParsedResume:
    """Split résumé text into a ParsedResume."""
    content = normalize_document_text(text or "")
    resume = ParsedResume(
        content=content,
        skills=extract_skills(content),
        experience=extract_experience(content),
        education=extract_education(content),
        projects=extract_projects(content),
        contact_info=extract_contact_info(content),
    )

    logger = get_logger()
    logger.debug(
        "Segmented resume",
        chars=len(content),
        skills=len(resume.skills),
        experience=len(resume.experience),
        education=len(resume.education),
        projects=len(resume.projects),
    )
    if resume.is_empty:
        logger.record_degenerate_input("empty_resume")
        logger.warning("No resume sections detected", chars=len(content))
    return resume
