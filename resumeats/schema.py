"""
Value types passed into and out of the analysis core.

Every model is frozen: a ParsedResume or a score result is created once
and never mutated afterwards. Attribute names are snake_case; JSON uses
the camelCase names callers already know (``overallScore``,
``requiredSkills`` ...).
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _Frozen(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def _as_tuple(v: Any) -> Any:
    if v is None:
        return ()
    return v


def _dedupe_casefold(items: Tuple[str, ...]) -> Tuple[str, ...]:
    seen = set()
    result = []
    for item in items:
        key = item.casefold()
        if key not in seen:
            seen.add(key)
            result.append(item)
    return tuple(result)


class ContactInfo(_Frozen):
    email: Optional[str] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None


class ParsedResume(_Frozen):
    """Structured view of one résumé, produced by the segmenter."""

    content: str = ""
    skills: Tuple[str, ...] = ()
    experience: Tuple[str, ...] = ()
    education: Tuple[str, ...] = ()
    projects: Tuple[str, ...] = ()
    contact_info: ContactInfo = Field(default_factory=ContactInfo)

    @field_validator("skills", "experience", "education", "projects", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return _as_tuple(v)

    @field_validator("skills", mode="after")
    @classmethod
    def unique_skills(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        return _dedupe_casefold(v)

    @property
    def is_empty(self) -> bool:
        """True when segmentation found no section at all."""
        return not (self.skills or self.experience or self.education or self.projects)


class JobDescriptionInput(_Frozen):
    description: str
    required_skills: Tuple[str, ...] = ()
    preferred_skills: Tuple[str, ...] = ()
    keywords: Tuple[str, ...] = ()
    experience_level: Optional[str] = None
    title: Optional[str] = None
    company: Optional[str] = None

    @field_validator("required_skills", "preferred_skills", "keywords", mode="before")
    @classmethod
    def none_as_empty(cls, v: Any) -> Any:
        return _as_tuple(v)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "JobDescriptionInput":
        return cls.model_validate(data)


class SkillScore(_Frozen):
    score: float = Field(ge=0, le=100)
    matched: Tuple[str, ...] = ()
    missing: Tuple[str, ...] = ()
    matched_preferred: Tuple[str, ...] = ()


class RelevanceScore(_Frozen):
    score: float = Field(ge=0, le=100)
    matched: Tuple[str, ...] = ()
    relevant_terms: Tuple[str, ...] = ()


class KeywordScore(_Frozen):
    score: float = Field(ge=0, le=100)
    matched: Tuple[str, ...] = ()
    missing: Tuple[str, ...] = ()


class FormattingScore(_Frozen):
    score: float = Field(ge=0, le=100)
    issues: Tuple[str, ...] = ()


class ATSScoreResult(_Frozen):
    overall_score: int = Field(ge=0, le=100)
    skills_score: int = Field(ge=0, le=100)
    experience_score: int = Field(ge=0, le=100)
    keyword_score: int = Field(ge=0, le=100)
    formatting_score: int = Field(ge=0, le=100)
    matched_skills: Tuple[str, ...] = ()
    missing_skills: Tuple[str, ...] = ()
    matched_keywords: Tuple[str, ...] = ()
    missing_keywords: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()


class BulletPointQuality(_Frozen):
    score: int = Field(ge=0, le=100)
    feedback: Tuple[str, ...] = ()


class LanguageQuality(_Frozen):
    score: int = Field(ge=0, le=100)
    feedback: Tuple[str, ...] = ()


class ImpactAnalysis(_Frozen):
    has_quantifiable_results: bool
    examples: Tuple[str, ...] = ()
    suggestions: Tuple[str, ...] = ()


class QualityReport(_Frozen):
    bullet_point_quality: BulletPointQuality
    language_quality: LanguageQuality
    impact_analysis: ImpactAnalysis
    strengths: Tuple[str, ...] = ()
    weaknesses: Tuple[str, ...] = ()
    improvements: Tuple[str, ...] = ()


class AnalysisResult(_Frozen):
    ats_score: ATSScoreResult
    quality: QualityReport


LIST_FIELDS = [
    ("requiredSkills", "required_skills"),
    ("preferredSkills", "preferred_skills"),
    ("keywords", "keywords"),
]
OPTIONAL_STR_FIELDS = [
    ("experienceLevel", "experience_level"),
    ("title", "title"),
    ("company", "company"),
]


def _is_non_empty_str(v: Any) -> bool:
    return isinstance(v, str) and v.strip() != ""


def _lookup(data: Dict[str, Any], camel: str, snake: str) -> Tuple[bool, Any]:
    if camel in data:
        return True, data[camel]
    if snake in data:
        return True, data[snake]
    return False, None


def validate_job_description(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    Accepts either camelCase or snake_case keys.
    """
    if not isinstance(data, dict):
        return ["Job description must be a JSON object"]

    errors: List[str] = []

    if "description" not in data:
        errors.append("Missing required field: description")
    elif not _is_non_empty_str(data["description"]):
        errors.append("Field 'description' must be a non-empty string")

    for camel, snake in LIST_FIELDS:
        present, value = _lookup(data, camel, snake)
        if not present or value is None:
            continue
        if not isinstance(value, list):
            errors.append(f"Field '{camel}' must be a list of strings")
        elif not all(isinstance(item, str) for item in value):
            errors.append(f"Field '{camel}' must contain only strings")

    for camel, snake in OPTIONAL_STR_FIELDS:
        present, value = _lookup(data, camel, snake)
        if present and value is not None and not isinstance(value, str):
            errors.append(f"Field '{camel}' must be a string if provided")

    return errors
