"""
ATS Scoring Service
Re-validates the keyword/skill matches reported by the LLM against the literal
resume text and recomputes every derived score from the verified lists.

Matching is deliberately dumb, like a real ATS: case-insensitive substring
containment plus a naive plural/singular rule. No stemming, no synonyms.
"""

import logging

from models.analysis import AnalysisResult, KeywordBlock
from utils.text_utils import plural_variants, round_half_up

logger = logging.getLogger(__name__)

# Real ATS weighting: keywords, experience, qualifications, title, soft skills
SCORE_WEIGHTS = {
    "keywords": 0.35,
    "experience": 0.25,
    "education": 0.20,
    "job_title": 0.10,
    "skills": 0.10,
}


def is_present(keyword: str, resume_text: str, include_es_variants: bool = True) -> bool:
    """
    True if the keyword (or one of its naive plural/singular forms) appears
    anywhere in the resume text, ignoring case.
    """
    resume_lower = resume_text.lower()
    if keyword.lower() in resume_lower:
        return True
    return any(v in resume_lower for v in plural_variants(keyword, include_es_variants))


def block_score(matched_count: int, missing_count: int) -> int:
    total = matched_count + missing_count
    if total == 0:
        return 0
    return round_half_up((matched_count / total) * 100)


def verify_keyword_block(
    block: KeywordBlock, resume_text: str, include_es_variants: bool = True
) -> KeywordBlock:
    """
    Moves every AI-reported "missing" entry that is actually in the resume over
    to "matched", then recomputes the block score. Mutates and returns `block`.

    Args:
        block: keywords or skills block as parsed from the LLM response
        resume_text: raw resume text
        include_es_variants: also try "+es"/"-es" forms (keywords block only)
    """
    verified_matched = list(block.matched)
    matched_lower = {m.lower() for m in verified_matched}
    verified_missing = []
    corrected = 0

    for keyword in block.missing:
        if is_present(keyword, resume_text, include_es_variants):
            corrected += 1
            if keyword.lower() not in matched_lower:
                verified_matched.append(keyword)
                matched_lower.add(keyword.lower())
        else:
            verified_missing.append(keyword)

    # Listed as both matched and missing but absent from the resume: the literal check wins.
    missing_lower = {m.lower() for m in verified_missing}
    verified_matched = [m for m in verified_matched if m.lower() not in missing_lower]

    if corrected:
        logger.info("Verification moved %d false 'missing' entries to matched", corrected)

    block.matched = verified_matched
    block.missing = verified_missing
    block.score = block_score(len(verified_matched), len(verified_missing))
    return block


def reconcile_overall_score(analysis: AnalysisResult) -> int:
    """
    Weighted overall score from the sub-scores. The AI's self-reported
    overallScore is always overwritten.
    """
    weighted = (
        analysis.keywords.score * SCORE_WEIGHTS["keywords"]
        + analysis.experience.score * SCORE_WEIGHTS["experience"]
        + analysis.education.score * SCORE_WEIGHTS["education"]
        + analysis.job_title.score * SCORE_WEIGHTS["job_title"]
        + analysis.skills.score * SCORE_WEIGHTS["skills"]
    )
    analysis.overall_score = round_half_up(weighted)
    return analysis.overall_score


def verify_analysis(analysis: AnalysisResult, resume_text: str) -> AnalysisResult:
    """Runs both keyword passes and the score reconciliation in place."""
    verify_keyword_block(analysis.keywords, resume_text, include_es_variants=True)
    verify_keyword_block(analysis.skills, resume_text, include_es_variants=False)
    reconcile_overall_score(analysis)
    return analysis
