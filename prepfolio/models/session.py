"""
Session models for Prepfolio

A session is one rehearsal attempt for a single project. These models
describe what the aggregator consumes and what it produces.
"""

import json
import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ScoredResponse(BaseModel):
    """
    One stored answer of a session, as far as aggregation cares.

    Storage rows carry more (question, answer, feedback, ...); those
    extra keys are kept but never read here.
    """

    model_config = ConfigDict(extra="allow")

    scores: dict[str, float] = Field(default_factory=dict)

    @field_validator("scores", mode="before")
    @classmethod
    def _drop_non_numeric(cls, value: Any) -> dict[str, float]:
        # Storage rows keep scores as a JSON string
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError:
                return {}
        if isinstance(value, BaseModel):
            value = value.model_dump(by_alias=True)
        if not isinstance(value, dict):
            return {}

        scores = {}
        for key, score in value.items():
            if isinstance(score, bool):
                continue
            try:
                number = float(score)
            except (TypeError, ValueError):
                continue
            if math.isfinite(number):
                scores[_camel_key(key)] = number
        return scores


def _camel_key(key: Any) -> Any:
    """``interview_ready`` -> ``interviewReady``; camelCase keys pass through."""
    return to_camel(key) if isinstance(key, str) and "_" in key else key


class SessionSummary(BaseModel):
    """Aggregated result of a finished session."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    questions_answered: int = Field(..., ge=0)
    average_scores: dict[str, float] = Field(default_factory=dict)
    overall_score: float = 0
    strengths: list[str] = Field(default_factory=list)
    areas_for_improvement: list[str] = Field(default_factory=list)
    recommendation: str
