"""
Pydantic models for the AI analysis payload.

Every field carries its own fallback so a partial or malformed LLM response
still parses: missing lists become [], missing scores become 0, unknown enum
values collapse to a neutral value. Unknown keys are kept and passed through.
"""

import math
from typing import Annotated, Any, Literal, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from utils.text_utils import round_half_up


def _to_str_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    result = []
    for item in value:
        if isinstance(item, str) and item not in result:
            result.append(item)
    return result


def _to_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _to_score(value: Any) -> int:
    number = _to_number(value)
    if number is None:
        return 0
    return min(100, max(0, round_half_up(number)))


def _to_optional_int(value: Any) -> Optional[int]:
    number = _to_number(value)
    return None if number is None else max(0, round_half_up(number))


def _to_years(value: Any) -> int:
    return _to_optional_int(value) or 0


def _to_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _to_str(value: Any) -> str:
    return _to_optional_str(value) or ""


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1")
    return bool(value)


def _to_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _to_dict_list(value: Any) -> list:
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, dict)]


StrList = Annotated[list[str], BeforeValidator(_to_str_list)]
Score = Annotated[int, BeforeValidator(_to_score)]
OptionalInt = Annotated[Optional[int], BeforeValidator(_to_optional_int)]
Years = Annotated[int, BeforeValidator(_to_years)]
OptionalStr = Annotated[Optional[str], BeforeValidator(_to_optional_str)]
Text = Annotated[str, BeforeValidator(_to_str)]
Flag = Annotated[bool, BeforeValidator(_to_bool)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True)


def _block(model_cls):
    """Builds a before-validator turning non-object input into an empty block."""

    def _coerce(value: Any):
        return value if isinstance(value, (dict, model_cls)) else {}

    return BeforeValidator(_coerce)


class KeywordBlock(CamelModel):
    extracted: StrList = Field(default_factory=list)
    matched: StrList = Field(default_factory=list)
    missing: StrList = Field(default_factory=list)
    score: Score = 0


class SkillBlock(KeywordBlock):
    required: StrList = Field(default_factory=list)


class Experience(CamelModel):
    required_years: OptionalInt = None
    detected_years: Years = 0
    is_recent: Flag = False
    relevance_score: Score = 0
    score: Score = 0


class Education(CamelModel):
    required: OptionalStr = None
    found: OptionalStr = None
    matched: Flag = False
    score: Score = 0


class Certifications(CamelModel):
    required: StrList = Field(default_factory=list)
    found: StrList = Field(default_factory=list)
    matched: StrList = Field(default_factory=list)
    missing: StrList = Field(default_factory=list)
    score: Score = 0


class JobTitle(CamelModel):
    target_title: Text = ""
    resume_titles: StrList = Field(default_factory=list)
    match_type: Literal["exact", "partial", "none"] = "none"
    score: Score = 0

    @field_validator("match_type", mode="before")
    @classmethod
    def _match_type(cls, value: Any) -> str:
        value = str(value).strip().lower() if value is not None else ""
        return value if value in ("exact", "partial", "none") else "none"


class Recommendation(CamelModel):
    type: Literal["critical", "important", "tip"] = "tip"
    text: Text = ""

    @field_validator("type", mode="before")
    @classmethod
    def _type(cls, value: Any) -> str:
        value = str(value).strip().lower() if value is not None else ""
        return value if value in ("critical", "important", "tip") else "tip"


class KnockoutFilters(CamelModel):
    passed: Annotated[list[dict], BeforeValidator(_to_dict_list)] = Field(default_factory=list)
    failed: Annotated[list[dict], BeforeValidator(_to_dict_list)] = Field(default_factory=list)
    warnings: Annotated[list[dict], BeforeValidator(_to_dict_list)] = Field(default_factory=list)


class AnalysisResult(CamelModel):
    overall_score: Score = 0
    knockout_filters: Annotated[KnockoutFilters, _block(KnockoutFilters)] = Field(
        default_factory=KnockoutFilters
    )
    keywords: Annotated[KeywordBlock, _block(KeywordBlock)] = Field(default_factory=KeywordBlock)
    skills: Annotated[SkillBlock, _block(SkillBlock)] = Field(default_factory=SkillBlock)
    experience: Annotated[Experience, _block(Experience)] = Field(default_factory=Experience)
    education: Annotated[Education, _block(Education)] = Field(default_factory=Education)
    certifications: Annotated[Certifications, _block(Certifications)] = Field(
        default_factory=Certifications
    )
    job_title: Annotated[JobTitle, _block(JobTitle)] = Field(default_factory=JobTitle)
    recommendations: list[Recommendation] = Field(default_factory=list)
    industry_detected: Text = ""

    @field_validator("recommendations", mode="before")
    @classmethod
    def _recommendations(cls, value: Any) -> list:
        return _to_dict_list(value)

    @classmethod
    def from_llm(cls, payload: Any) -> "AnalysisResult":
        return cls.model_validate(_to_dict(payload))
