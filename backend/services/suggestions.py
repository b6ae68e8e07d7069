"""
Bullet-point suggestions for the keywords the resume is missing.
"""

import logging

from models.analysis import AnalysisResult
from models.suggestions import SuggestionBlock
from services.bullet_verifier import verify_bullet_keywords
from services.exceptions import GenerationError
from services.llm import GroqJSONGenerator
from services.prompts import build_suggestion_prompt
from utils.text_utils import dedupe_ci

logger = logging.getLogger(__name__)

MAX_GAP_KEYWORDS = 15
NOTHING_MISSING_MESSAGE = "Your resume already covers the key requirements!"


def build_gap_list(analysis: AnalysisResult, limit: int = MAX_GAP_KEYWORDS) -> list[str]:
    """Verified missing keywords then skills, de-duplicated, capped at `limit`."""
    combined = [k for k in analysis.keywords.missing + analysis.skills.missing if k.strip()]
    return dedupe_ci(combined)[:limit]


def generate_bullet_points(
    resume: str,
    job_description: str,
    analysis: AnalysisResult,
    generator: GroqJSONGenerator,
) -> SuggestionBlock:
    """
    Asks the LLM for bullets covering the gap list and verifies them.

    Never fails the request: a GenerationError degrades to an empty
    suggestion block carrying the error message.
    """
    missing_keywords = build_gap_list(analysis)
    if not missing_keywords:
        return SuggestionBlock(bullet_points=[], message=NOTHING_MISSING_MESSAGE)

    prompt = build_suggestion_prompt(
        resume,
        job_description,
        missing_keywords,
        analysis.industry_detected,
    )

    try:
        raw = generator.generate_json(prompt, max_tokens=2000, temperature=0.3)
    except GenerationError as e:
        logger.error("Suggestions error: %s", e)
        return SuggestionBlock(bullet_points=[], error=f"Failed to generate suggestions: {e}")

    return verify_bullet_keywords(SuggestionBlock.from_llm(raw), missing_keywords)
