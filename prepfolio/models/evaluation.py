"""
Evaluation models for Prepfolio

Defines the rubric and scoring structures for evaluating rehearsal answers.
"""

from decimal import Decimal, ROUND_HALF_UP

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


# Wire names of the five rubric dimensions, in display order
RUBRIC_DIMENSIONS = ("completeness", "accuracy", "clarity", "depth", "interviewReady")

MIN_SCORE = 1
MAX_SCORE = 5


def round_score(value: float) -> float:
    """Round half-up to one decimal place (2.25 -> 2.3)."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class RubricScores(BaseModel):
    """Scores on the five rubric dimensions, each 1-5."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    completeness: int = Field(
        ..., ge=MIN_SCORE, le=MAX_SCORE,
        description="Did the answer fully address the question"
    )
    accuracy: int = Field(
        ..., ge=MIN_SCORE, le=MAX_SCORE,
        description="Is the content grounded in the actual project"
    )
    clarity: int = Field(
        ..., ge=MIN_SCORE, le=MAX_SCORE,
        description="Is the answer reasoned and easy to follow"
    )
    depth: int = Field(
        ..., ge=MIN_SCORE, le=MAX_SCORE,
        description="Does it show implementation-level understanding"
    )
    interview_ready: int = Field(
        ..., ge=MIN_SCORE, le=MAX_SCORE,
        description="Would this answer land well in a real interview"
    )

    @classmethod
    def uniform(cls, value: int) -> "RubricScores":
        """All five dimensions set to the same score."""
        return cls(**{dimension: value for dimension in RUBRIC_DIMENSIONS})

    def as_dict(self) -> dict[str, int]:
        """Scores keyed by wire name."""
        return self.model_dump(by_alias=True)

    @property
    def mean(self) -> float:
        """Mean of the five scores, rounded to one decimal."""
        values = list(self.as_dict().values())
        return round_score(sum(values) / len(values))


class Evaluation(BaseModel):
    """Complete evaluation of a single answer."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    scores: RubricScores
    feedback: str
    follow_up: str
    covered_points: list[str] = Field(default_factory=list)
    missed_points: list[str] = Field(default_factory=list)

    @computed_field(alias="overallScore")
    @property
    def overall_score(self) -> float:
        return self.scores.mean
