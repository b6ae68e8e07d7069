"""
Text utility helpers for the ATS match checker.
"""

import math


def round_half_up(value: float) -> int:
    """Rounds .5 away from zero for positive values (Math.round semantics)."""
    return int(math.floor(value + 0.5))


def plural_variants(keyword: str, include_es: bool = True) -> list[str]:
    """
    Returns the lower-cased keyword plus its naive singular/plural forms.

    "skill" -> ["skill", "skills", "skilles"]
    "skills" -> ["skills", "skill", "skillses"]
    "boxes" -> ["boxes", "boxe", "box"]
    """
    word = keyword.lower()
    variants = [word, word[:-1] if word.endswith("s") else word + "s"]
    if include_es:
        variants.append(word[:-2] if word.endswith("es") else word + "es")
    return variants


def dedupe_ci(items: list[str]) -> list[str]:
    """Drops case-insensitive duplicates, keeping the first spelling."""
    seen = set()
    result = []
    for item in items:
        key = item.lower()
        if key not in seen:
            seen.add(key)
            result.append(item)
    return result
