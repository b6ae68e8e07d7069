"""
Resume vs. job description match analysis.
The LLM does the extraction; ats_scorer decides what actually matched.
"""

import logging

from models.analysis import AnalysisResult
from services.ats_scorer import verify_analysis
from services.llm import GroqJSONGenerator
from services.prompts import build_analysis_prompt

logger = logging.getLogger(__name__)


def analyze_resume_match(
    resume: str, job_description: str, generator: GroqJSONGenerator
) -> AnalysisResult:
    """
    Runs the analysis prompt and verifies the result against the resume.

    GenerationError is not caught here: without an analysis there is
    nothing to return.
    """
    prompt = build_analysis_prompt(resume, job_description)
    raw = generator.generate_json(prompt, max_tokens=3000, temperature=0.1)

    analysis = AnalysisResult.from_llm(raw)
    reported = analysis.overall_score
    verify_analysis(analysis, resume)

    logger.info(
        "Analysis done: overall %d (model reported %d), %d keywords missing, %d skills missing",
        analysis.overall_score,
        reported,
        len(analysis.keywords.missing),
        len(analysis.skills.missing),
    )
    return analysis
