"""
Pydantic models for the bullet-point suggestion payload.
"""

from typing import Any, Optional

from pydantic import Field, field_validator

from models.analysis import CamelModel, StrList, Text, _to_dict_list


class BulletPoint(CamelModel):
    text: Text = ""
    keywords: StrList = Field(default_factory=list)
    target_section: Text = ""


class SuggestionBlock(CamelModel):
    # Opaque: whatever the model sent is returned untouched.
    style_analysis: Any = None
    bullet_points: list[BulletPoint] = Field(default_factory=list)
    all_keywords_covered: Optional[bool] = None
    keywords_not_covered: Optional[list[str]] = None
    message: Optional[str] = None
    error: Optional[str] = None

    @field_validator("bullet_points", mode="before")
    @classmethod
    def _bullet_points(cls, value: Any) -> list:
        return _to_dict_list(value)

    @classmethod
    def from_llm(cls, payload: Any) -> "SuggestionBlock":
        # Coverage is recomputed by verification; message/error belong to the generator.
        payload = dict(payload) if isinstance(payload, dict) else {}
        for key in (
            "allKeywordsCovered", "all_keywords_covered",
            "keywordsNotCovered", "keywords_not_covered",
            "message", "error",
        ):
            payload.pop(key, None)
        return cls.model_validate(payload)

    def to_response(self) -> dict:
        # Short-circuit and degraded blocks carry only bulletPoints plus message/error.
        return self.model_dump(by_alias=True, exclude_none=True)
