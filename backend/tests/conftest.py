"""
Shared fixtures: a scripted stand-in for the Groq generator and sample texts.
"""

import pytest

from services.llm import LLMConfig


class FakeGenerator:
    """Returns (or raises) the queued responses in order and records every call."""

    def __init__(self, *responses, config=None):
        self.responses = list(responses)
        self.calls = []
        self.config = config or LLMConfig(api_key="test-key")

    def generate_json(self, prompt, max_tokens=3000, temperature=0.1):
        self.calls.append({"prompt": prompt, "max_tokens": max_tokens, "temperature": temperature})
        if not self.responses:
            raise AssertionError("generate_json called more times than expected")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


SAMPLE_RESUME = """
Jane Doe
Senior QA Engineer

SKILLS
Python, Selenium, REST APIs, Docker containers, Agile

EXPERIENCE
QA Lead | Acme Corp | 2019-2024
- Built automated test suites in Python and Selenium
- Tested performance of REST APIs under load
- Mentored 4 junior testers
"""

SAMPLE_JD = """
Senior QA Automation Engineer

Requirements:
- 5+ years of QA experience
- Python, Selenium, Kubernetes, CI/CD
- Performance testing and REST API testing
- Bachelor's degree in Computer Science
"""


@pytest.fixture
def resume_text():
    return SAMPLE_RESUME


@pytest.fixture
def jd_text():
    return SAMPLE_JD


@pytest.fixture
def ai_analysis():
    """An over-cautious LLM analysis: it misses Python and Docker."""
    return {
        "overallScore": 42,
        "keywords": {
            "extracted": ["Python", "Selenium", "Kubernetes", "CI/CD", "performance testing"],
            "matched": ["Selenium"],
            "missing": ["Python", "Kubernetes", "CI/CD", "performance testing"],
            "score": 20,
        },
        "skills": {
            "required": ["Docker", "Agile", "Leadership"],
            "matched": ["Agile"],
            "missing": ["Docker", "Leadership"],
            "score": 33,
        },
        "experience": {"requiredYears": 5, "detectedYears": 5, "isRecent": True, "relevanceScore": 90, "score": 100},
        "education": {"required": "Bachelor's degree", "found": None, "matched": False, "score": 0},
        "jobTitle": {"targetTitle": "Senior QA Automation Engineer", "resumeTitles": ["QA Lead"], "matchType": "partial", "score": 50},
        "recommendations": [{"type": "critical", "text": "Add Kubernetes"}],
        "industryDetected": "tech",
    }
