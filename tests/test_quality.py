"""
Tests for the heuristic quality analyzer.
"""

import pytest

from resumeats.quality import (
    ADD_NUMBER_SUGGESTIONS,
    MORE_METRICS_SUGGESTION,
    analyze,
    bullet_point_quality,
    count_action_verbs,
    extract_metrics,
    impact_analysis,
    language_quality,
    sentiment,
    strengths,
    weaknesses,
)
from resumeats.schema import ATSScoreResult, ParsedResume

METRIC_PHRASES = [
    "Increased conversion rate by 25% through A/B testing",
    "Reduced infrastructure costs by $40k per year",
    "Delivered a 30% improvement in page load times",
    "Oversaw $2m budget for the platform migration",
    "Mentored a team of 6 engineers across two time zones",
]

GOOD_BULLETS = [
    "- Developed a billing service used by forty thousand customers",
    "- Led the migration of legacy reports to a modern warehouse",
    "- Improved nightly batch reliability for the finance team",
]


def _ats(**overrides) -> ATSScoreResult:
    values = dict(
        overall_score=50,
        skills_score=50,
        experience_score=50,
        keyword_score=50,
        formatting_score=100,
    )
    values.update(overrides)
    return ATSScoreResult(**values)


class TestImpactAnalysis:
    """Quantifiable-result extraction."""

    def test_five_distinct_metrics(self):
        resume = ParsedResume(content="\n".join(METRIC_PHRASES))
        impact = impact_analysis(resume)
        assert impact.has_quantifiable_results is True
        assert len(impact.examples) == 5
        assert impact.suggestions == ()

    def test_examples_in_template_order(self):
        assert extract_metrics("\n".join(METRIC_PHRASES)) == [
            "Increased conversion rate by 25% through A/B testing",
            "Reduced infrastructure costs by $40k per year",
            "30% improvement",
            "$2m budget",
            "team of 6 engineers",
        ]

    def test_duplicates_removed(self):
        content = "\n".join([METRIC_PHRASES[0], METRIC_PHRASES[0]])
        assert extract_metrics(content) == [METRIC_PHRASES[0]]

    def test_no_line_spanning(self):
        """A verb on one line does not pick up a number on the next."""
        assert extract_metrics("Improved onboarding\nVersion 2 released") == []

    def test_verb_inside_word_ignored(self):
        assert extract_metrics("Regenerated 3 reports") == []

    def test_no_metrics(self):
        impact = impact_analysis(ParsedResume(content="Wrote code"))
        assert impact.has_quantifiable_results is False
        assert impact.examples == ()
        assert impact.suggestions == ADD_NUMBER_SUGGESTIONS

    def test_one_metric(self):
        impact = impact_analysis(ParsedResume(content=METRIC_PHRASES[4]))
        assert impact.has_quantifiable_results is False
        assert impact.suggestions == (MORE_METRICS_SUGGESTION,)

    def test_two_metrics_is_quantified(self):
        impact = impact_analysis(ParsedResume(content="\n".join(METRIC_PHRASES[:2])))
        assert impact.has_quantifiable_results is True
        assert impact.suggestions == (MORE_METRICS_SUGGESTION,)


class TestBulletPointQuality:
    def test_well_structured(self):
        resume = ParsedResume(experience=["Acme Corp 2020 - 2024\n" + "\n".join(GOOD_BULLETS)])
        result = bullet_point_quality(resume)
        assert result.score == 100
        assert result.feedback == ()

    def test_no_bullets_no_cues(self):
        resume = ParsedResume(experience=["Worked on various internal tools for the operations group"])
        result = bullet_point_quality(resume)
        assert result.score == 10
        assert result.feedback == (
            "Add bullet points to structure your experience",
            "Include strong action verbs at the start of each bullet point",
            "Add measurable results and outcomes to your accomplishments",
            "Provide context about your role and responsibilities",
        )

    def test_long_bullet(self):
        long_bullet = "- Developed " + "very " * 30 + "long bullet"
        resume = ParsedResume(experience=["\n".join(GOOD_BULLETS + [long_bullet])])
        result = bullet_point_quality(resume)
        assert result.score == 90
        assert "Some bullet points are too long - aim for 1-2 lines each" in result.feedback

    def test_short_bullets(self):
        short = ["• Led team", "• Built API", "• Improved"]
        resume = ParsedResume(experience=["\n".join(short + GOOD_BULLETS[:1])])
        result = bullet_point_quality(resume)
        assert "Many bullet points lack detail - expand with specific achievements" in result.feedback

    def test_bullet_markers(self):
        """Lines starting with '-', '•' or '*' and a space are bullets."""
        starred = [line.replace("- ", "* ", 1) for line in GOOD_BULLETS]
        resume = ParsedResume(experience=["\n".join(starred)])
        assert bullet_point_quality(resume).score == 100

    def test_marker_needs_following_space(self):
        """A hyphen glued to the text is not a bullet."""
        glued = [line.replace("- ", "-", 1) for line in GOOD_BULLETS]
        resume = ParsedResume(experience=["\n".join(glued)])
        result = bullet_point_quality(resume)
        assert result.feedback[0] == "Add bullet points to structure your experience"
        assert result.score == 70

    def test_floor_at_zero(self):
        short = ["* a", "* b", "* c"]
        long_line = "* " + "x" * 160
        resume = ParsedResume(experience=["\n".join(short + [long_line])])
        assert bullet_point_quality(resume).score >= 0


class TestLanguageQuality:
    def test_clean_text(self):
        result = language_quality(ParsedResume(content="Built services. Shipped features."))
        assert result.score == 100
        assert result.feedback == ()

    def test_passive_voice(self):
        content = (
            "Work was reviewed. Code was tested. Docs were updated. "
            "Bugs were fixed. Plans were approved. Specs were signed."
        )
        result = language_quality(ParsedResume(content=content))
        assert result.score == 85
        assert result.feedback == ("Reduce passive voice - use active voice for stronger impact",)

    def test_first_person(self):
        content = "I built it. My team shipped it. I led it. Ask me."
        result = language_quality(ParsedResume(content=content))
        assert "Minimize use of first-person pronouns (I, me, my)" in result.feedback

    def test_cliches(self):
        content = "Team player. Hard worker. Self-motivated. Results-driven."
        result = language_quality(ParsedResume(content=content))
        assert "Replace clichés with specific examples and achievements" in result.feedback

    def test_complex_words(self):
        content = "Internationalization and containerization orchestration."
        result = language_quality(ParsedResume(content=content))
        assert "Simplify complex terminology where possible for better readability" in result.feedback

    def test_negative_tone(self):
        result = language_quality(ParsedResume(content="Bad terrible awful"))
        assert result.score == 90
        assert result.feedback == ("Overall tone appears negative - frame experiences more positively",)

    def test_sentiment(self):
        assert sentiment("") == 0.0
        assert sentiment("great team") == pytest.approx(1.5)


class TestStrengthsAndWeaknesses:
    def test_weak_resume(self):
        found = weaknesses(ParsedResume(), _ats(overall_score=10, skills_score=0, keyword_score=0))
        assert found[:3] == [
            "Low ATS score may result in automatic rejection",
            "Insufficient skills match with job requirements",
            "Missing critical keywords from job description",
        ]
        assert "No work experience section detected" in found
        assert "Missing education information" in found
        assert "Resume appears too brief - add more detail to experience and achievements" in found

    def test_long_resume(self):
        found = weaknesses(ParsedResume(content="word " * 1100), _ats())
        assert "Resume may be too lengthy - consider condensing to most relevant information" in found

    def test_strong_resume(self):
        resume = ParsedResume(
            content="\n".join(METRIC_PHRASES + ["Led, managed, built, designed, developed."] * 2),
            skills=[f"Skill {i}" for i in range(12)],
            experience=["a" * 30, "b" * 30, "c" * 30],
            projects=["p" * 25, "q" * 25],
        )
        found = strengths(resume, _ats(overall_score=85, skills_score=90, keyword_score=80))
        assert found == [
            "Strong skill set with 12 identified skills",
            "Excellent ATS compatibility - highly likely to pass automated screening",
            "Strong skills alignment with job requirements",
            "Excellent keyword optimization",
            "Comprehensive work experience documentation",
            "Strong project portfolio demonstrates practical experience",
            "Effective use of 13 action verbs to demonstrate achievements",
            "Good use of quantifiable metrics and results",
        ]

    def test_count_action_verbs(self):
        assert count_action_verbs("Led and led; managed. ledger") == 3


class TestAnalyze:
    def test_report(self, parsed_resume):
        ats = _ats(missing_skills=["Terraform", "GraphQL"], missing_keywords=["kafka"], formatting_score=70)
        report = analyze(parsed_resume, ats)

        assert report.improvements[0] == "HIGH PRIORITY: Add these missing skills - Terraform, GraphQL"
        assert report.improvements[1] == "Add critical keywords: kafka"
        assert report.improvements[-1] == "Improve resume formatting for better ATS compatibility"
        assert len(report.improvements) <= 10
        assert 0 <= report.bullet_point_quality.score <= 100
        assert 0 <= report.language_quality.score <= 100

    def test_inputs_unchanged(self, parsed_resume):
        ats = _ats()
        before = (parsed_resume.model_dump(), ats.model_dump())
        analyze(parsed_resume, ats)
        assert (parsed_resume.model_dump(), ats.model_dump()) == before

    def test_empty_resume(self):
        report = analyze(ParsedResume(), _ats(overall_score=0))
        assert report.impact_analysis.has_quantifiable_results is False
        assert report.strengths == ()
        assert len(report.improvements) <= 10
