"""
FastAPI analyze router — the core pipeline endpoint.

POST /api/analyze
  - Accepts: {"resume": str, "jobDescription": str}
  - Returns: {"success": true, "analysis": {...}, "suggestions": {...}}

GET /api/health
  - Returns: service status and whether Groq is configured
"""

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from services.analyzer import analyze_resume_match
from services.exceptions import ValidationError
from services.llm import GroqJSONGenerator, LLMConfig
from services.suggestions import generate_bullet_points

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache
def get_generator() -> GroqJSONGenerator:
    return GroqJSONGenerator(LLMConfig.from_env())


def validate_request(payload: Any) -> tuple[str, str]:
    """
    Raises ValidationError unless the body is an object carrying a
    non-blank string for both resume and jobDescription.
    """
    if not isinstance(payload, dict):
        payload = {}
    resume = payload.get("resume")
    job_description = payload.get("jobDescription")
    if not isinstance(resume, str) or not isinstance(job_description, str):
        raise ValidationError("Both resume and jobDescription are required")
    if not resume.strip() or not job_description.strip():
        raise ValidationError("Both resume and jobDescription are required")
    return resume, job_description


def run_pipeline(resume: str, job_description: str, generator: GroqJSONGenerator) -> dict:
    """
    Main pipeline:
    1. Analyze + verify keyword matches (failure fails the request)
    2. Suggest bullets for the verified gaps (failure degrades gracefully)
    """
    analysis = analyze_resume_match(resume, job_description, generator)
    suggestions = generate_bullet_points(resume, job_description, analysis, generator)
    return {
        "success": True,
        "analysis": analysis.to_response(),
        "suggestions": suggestions.to_response(),
    }


@router.post("/analyze")
async def analyze(
    payload: Any = Body(None),
    generator: GroqJSONGenerator = Depends(get_generator),
):
    try:
        resume, job_description = validate_request(payload)
    except ValidationError as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    try:
        result = await run_in_threadpool(run_pipeline, resume, job_description, generator)
    except Exception as e:
        logger.exception("Analysis error")
        return JSONResponse({"error": "Analysis failed", "message": str(e)}, status_code=500)

    return JSONResponse(result)


@router.get("/health")
async def health(generator: GroqJSONGenerator = Depends(get_generator)):
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "groqConfigured": generator.config.configured,
        "models": list(generator.config.models),
    }
