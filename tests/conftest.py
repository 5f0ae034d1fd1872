"""
Pytest configuration and shared fixtures.
"""

import pytest
from typing import Dict, Any

from resumeats.logger import get_logger, reset_logger
from resumeats.schema import JobDescriptionInput, ParsedResume
from resumeats.segment import segment


SAMPLE_RESUME = """Jane Doe
jane.doe@example.com | (555) 123-4567
linkedin.com/in/janedoe | github.com/janedoe

Summary
Backend engineer focused on reliable data platforms.

Skills
Python, Django, PostgreSQL; Docker | AWS
• Kubernetes

Experience
Senior Engineer, Acme Corp 2019 - 2023
- Developed payment APIs in Python and Django serving 2 million users
- Increased test coverage by 40% across core services
- Led a team of 4 engineers through a database migration
Software Engineer, Beta Labs 2016 - 2019
- Built data pipelines with PostgreSQL and Redis for analytics
- Reduced report generation time by 60% using caching

Education
B.S. Computer Science, State University, 2016

Projects
Open-source task queue written in Python with Redis backend
"""


@pytest.fixture(autouse=True)
def quiet_logger():
    """Fresh, console-free global logger for every test."""
    reset_logger()
    logger = get_logger(enable_console=False)
    yield logger
    reset_logger()


@pytest.fixture
def sample_resume_text() -> str:
    """Plain-text résumé with every section present."""
    return SAMPLE_RESUME


@pytest.fixture
def parsed_resume(sample_resume_text) -> ParsedResume:
    """The sample résumé, segmented."""
    return segment(sample_resume_text)


@pytest.fixture
def job_data() -> Dict[str, Any]:
    """Valid job description mapping, camelCase keys as posted by callers."""
    return {
        "description": (
            "We are hiring a backend engineer to build Python and Django services. "
            "The backend engineer will design PostgreSQL schemas, deploy services on "
            "AWS with Docker and Kubernetes, and mentor engineers. Experience with "
            "payment systems and data pipelines is a plus."
        ),
        "requiredSkills": ["Python", "Django", "AWS", "Terraform"],
        "preferredSkills": ["Docker", "GraphQL"],
        "keywords": ["python", "django", "postgresql", "microservices", "payment"],
        "experienceLevel": "senior",
        "title": "Backend Engineer",
        "company": "Acme",
    }


@pytest.fixture
def job(job_data) -> JobDescriptionInput:
    return JobDescriptionInput.from_dict(job_data)


@pytest.fixture
def invalid_job_data() -> Dict[str, Any]:
    """Job description missing its description and with a malformed list."""
    return {
        "requiredSkills": "Python",
        "title": "Engineer",
    }
