"""
Entry points used by callers: document ➜ ParsedResume, and
(ParsedResume, job) ➜ score plus quality report.
"""

from typing import Mapping, Optional, Union

from . import quality, scoring
from .extract import extract
from .schema import AnalysisResult, JobDescriptionInput, ParsedResume
from .segment import segment


def parse(document: Union[bytes, str], mime_type: Optional[str] = None) -> ParsedResume:
    """
    Extract and segment a résumé.

    Raises:
        UnsupportedFormat: ``mime_type`` is not PDF, DOCX or plain text
        ExtractionFailed: the document could not be turned into text
    """
    return segment(extract(document, mime_type))


def analyze(
    resume: ParsedResume,
    job: JobDescriptionInput,
    weights: Optional[Mapping[str, float]] = None,
) -> AnalysisResult:
    """Score ``resume`` against ``job``; the quality pass runs on the finished score."""
    ats_score = scoring.calculate(resume, job, weights=weights)
    return AnalysisResult(
        ats_score=ats_score,
        quality=quality.analyze(resume, ats_score),
    )
