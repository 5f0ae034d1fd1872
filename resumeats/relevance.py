"""
Experience relevance: TF-IDF weighted overlap with the job description.

A two-document model is fitted over {résumé experience, job description}.
The job description's highest-weighted terms are looked up in the résumé
and the score is the share of their combined weight that was found.
"""

from typing import List, Optional, Tuple

from sklearn.feature_extraction.text import CountVectorizer, TfidfVectorizer

from .logger import get_logger
from .schema import RelevanceScore

TOKEN_PATTERN = r"(?u)\b\w+\b"
MIN_TERM_LEN = 4  # terms of 3 characters or fewer are dropped
TOP_TERMS = 20
RELEVANT_TERMS_SHOWN = 10
KEYWORD_LIMIT = 30


def _vocabulary_is_empty(texts: List[str]) -> bool:
    return not any(text.strip() for text in texts)


def weighted_terms(experience_text: str, job_text: str) -> List[Tuple[str, float]]:
    """
    Job-description terms ordered by TF-IDF weight (highest first).

    Ties are broken alphabetically so the order is deterministic.
    """
    corpus = [experience_text or "", job_text or ""]
    if _vocabulary_is_empty(corpus):
        return []

    vectorizer = TfidfVectorizer(
        token_pattern=TOKEN_PATTERN,
        lowercase=True,
        norm=None,
        smooth_idf=True,
    )
    try:
        matrix = vectorizer.fit_transform(corpus)
    except ValueError:
        # empty vocabulary: nothing but punctuation or whitespace
        return []

    terms = vectorizer.get_feature_names_out()
    row = matrix[1].tocoo()
    ranked = [
        (str(terms[col]), float(weight))
        for col, weight in zip(row.col, row.data)
        if len(terms[col]) >= MIN_TERM_LEN and weight > 0
    ]
    ranked.sort(key=lambda item: (-item[1], item[0]))
    return ranked


def score(
    experience_text: str,
    job_text: str,
    content: Optional[str] = None,
) -> RelevanceScore:
    """
    Score how much of the job description's important vocabulary the résumé uses.

    Args:
        experience_text: Résumé experience narrative (builds the TF-IDF model)
        job_text: Job description text
        content: Full résumé text searched for each term (defaults to
            ``experience_text``)

    Returns:
        RelevanceScore; score is 0 when the job description has no usable terms
    """
    haystack = (content if content is not None else experience_text or "").lower()
    considered = weighted_terms(experience_text, job_text)[:TOP_TERMS]

    total_weight = 0.0
    matched_weight = 0.0
    matched: List[str] = []
    for term, weight in considered:
        total_weight += weight
        if term in haystack:
            matched_weight += weight
            matched.append(term)

    if total_weight <= 0:
        logger = get_logger()
        logger.record_degenerate_input("job_description")
        logger.warning("Job description has no usable terms", chars=len(job_text or ""))
        value = 0.0
    else:
        value = min(100.0, matched_weight / total_weight * 100)

    return RelevanceScore(
        score=value,
        matched=matched,
        relevant_terms=[term for term, _ in considered[:RELEVANT_TERMS_SHOWN]],
    )


def extract_keywords(text: str, limit: int = KEYWORD_LIMIT) -> List[str]:
    """
    Pull candidate keywords out of a job description.

    Keeps terms longer than 3 characters that occur more than once, most
    frequent first. Used by callers that have no pre-extracted keyword list.
    """
    if _vocabulary_is_empty([text or ""]):
        return []

    vectorizer = CountVectorizer(token_pattern=TOKEN_PATTERN, lowercase=True)
    try:
        counts = vectorizer.fit_transform([text])
    except ValueError:
        return []

    terms = vectorizer.get_feature_names_out()
    row = counts[0].tocoo()
    ranked = [
        (str(terms[col]), int(count))
        for col, count in zip(row.col, row.data)
        if len(terms[col]) >= MIN_TERM_LEN and count > 1
    ]
    ranked.sort(key=lambda item: (-item[1], item[0]))
    return [term for term, _ in ranked[:limit]]
