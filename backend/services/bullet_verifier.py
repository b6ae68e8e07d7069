"""
Keeps generated resume bullets honest: a bullet may only claim keywords that
came from the gap list it was asked to cover.
"""

import logging

from models.suggestions import SuggestionBlock

logger = logging.getLogger(__name__)


def _is_allowed(keyword: str, allowed_lower: list[str]) -> bool:
    # Loose both-ways containment so "CI/CD pipelines" survives for "CI/CD".
    keyword_lower = keyword.lower()
    return any(a in keyword_lower or keyword_lower in a for a in allowed_lower)


def verify_bullet_keywords(suggestions: SuggestionBlock, allowed_keywords: list[str]) -> SuggestionBlock:
    """
    Filters bullet keywords to the allowed gap list, drops bullets left with no
    keyword and recomputes the coverage fields. Mutates and returns `suggestions`.
    """
    allowed_lower = [k.lower() for k in allowed_keywords]

    surviving = []
    for bullet in suggestions.bullet_points:
        bullet.keywords = [k for k in bullet.keywords if _is_allowed(k, allowed_lower)]
        if bullet.keywords:
            surviving.append(bullet)

    dropped = len(suggestions.bullet_points) - len(surviving)
    if dropped:
        logger.info("Dropped %d suggested bullets with no valid gap keyword", dropped)
    suggestions.bullet_points = surviving

    covered = {k.lower() for bullet in surviving for k in bullet.keywords}
    suggestions.keywords_not_covered = [k for k in allowed_keywords if k.lower() not in covered]
    suggestions.all_keywords_covered = not suggestions.keywords_not_covered
    return suggestions
