"""
Tests for the analysis and suggestion stages with a scripted generator.
"""

import pytest

from conftest import FakeGenerator
from models.analysis import AnalysisResult
from services.analyzer import analyze_resume_match
from services.exceptions import GenerationError
from services.suggestions import (
    NOTHING_MISSING_MESSAGE,
    build_gap_list,
    generate_bullet_points,
)


class TestAnalyzeResumeMatch:

    def test_verifies_ai_output(self, ai_analysis, resume_text, jd_text):
        generator = FakeGenerator(ai_analysis)

        analysis = analyze_resume_match(resume_text, jd_text, generator)

        assert analysis.overall_score == 51
        assert "Python" in analysis.keywords.matched
        assert analysis.skills.missing == ["Leadership"]

        call = generator.calls[0]
        assert call["max_tokens"] == 3000
        assert call["temperature"] == 0.1
        assert "Mentored 4 junior testers" in call["prompt"]
        assert "Senior QA Automation Engineer" in call["prompt"]

    def test_generation_error_propagates(self, resume_text, jd_text):
        generator = FakeGenerator(GenerationError("Rate limit exceeded on all models"))

        with pytest.raises(GenerationError):
            analyze_resume_match(resume_text, jd_text, generator)

    def test_empty_ai_output(self, resume_text, jd_text):
        analysis = analyze_resume_match(resume_text, jd_text, FakeGenerator({}))

        assert analysis.overall_score == 0
        assert analysis.keywords.score == 0

    def test_prompt_carries_resume_verbatim(self, jd_text):
        resume = "Built  machine  learning   pipelines\n\n\n\nin Python"
        generator = FakeGenerator({"keywords": {"missing": ["machine  learning"]}})

        analysis = analyze_resume_match(resume, jd_text, generator)

        assert resume in generator.calls[0]["prompt"]
        assert analysis.keywords.matched == ["machine  learning"]


class TestBuildGapList:

    def test_keywords_then_skills_deduplicated(self):
        analysis = AnalysisResult.from_llm({
            "keywords": {"missing": ["Kubernetes", "CI/CD"]},
            "skills": {"missing": ["kubernetes", "Leadership", " "]},
        })

        assert build_gap_list(analysis) == ["Kubernetes", "CI/CD", "Leadership"]

    def test_capped_at_fifteen(self):
        analysis = AnalysisResult.from_llm({
            "keywords": {"missing": [f"kw{i}" for i in range(10)]},
            "skills": {"missing": [f"skill{i}" for i in range(10)]},
        })

        gaps = build_gap_list(analysis)

        assert len(gaps) == 15
        assert gaps[-1] == "skill4"


class TestGenerateBulletPoints:

    @pytest.fixture
    def analysis(self):
        return AnalysisResult.from_llm({
            "keywords": {"missing": ["Kubernetes", "CI/CD"]},
            "industryDetected": "tech",
        })

    def test_nothing_missing_short_circuits(self, resume_text, jd_text):
        generator = FakeGenerator()

        result = generate_bullet_points(resume_text, jd_text, AnalysisResult(), generator)

        assert generator.calls == []
        assert result.to_response() == {"bulletPoints": [], "message": NOTHING_MISSING_MESSAGE}

    def test_verifies_suggestions(self, analysis, resume_text, jd_text):
        generator = FakeGenerator({
            "styleAnalysis": {"tone": "technical"},
            "bulletPoints": [
                {"text": "Deployed services to Kubernetes", "keywords": ["Kubernetes", "Docker"], "targetSection": "Experience"},
                {"text": "Wrote tests", "keywords": ["Testing"], "targetSection": "Experience"},
            ],
            "allKeywordsCovered": True,
            "keywordsNotCovered": [],
        })

        result = generate_bullet_points(resume_text, jd_text, analysis, generator)

        assert [b.keywords for b in result.bullet_points] == [["Kubernetes"]]
        assert result.keywords_not_covered == ["CI/CD"]
        assert result.all_keywords_covered is False

        call = generator.calls[0]
        assert call["max_tokens"] == 2000
        assert call["temperature"] == 0.3
        assert "Kubernetes, CI/CD" in call["prompt"]
        assert "tech" in call["prompt"]

    def test_generation_error_degrades(self, analysis, resume_text, jd_text):
        generator = FakeGenerator(GenerationError("Rate limit exceeded on all models"))

        result = generate_bullet_points(resume_text, jd_text, analysis, generator)

        assert result.to_response() == {
            "bulletPoints": [],
            "error": "Failed to generate suggestions: Rate limit exceeded on all models",
        }
