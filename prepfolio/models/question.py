"""
Question models for Prepfolio
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, computed_field


class QuestionCategory(str, Enum):
    """High-level question categories."""

    OVERVIEW = "overview"
    TECHNICAL = "technical"
    ARCHITECTURE = "architecture"
    CHALLENGE = "challenge"
    TRADEOFFS = "tradeoffs"
    IMPROVEMENTS = "improvements"


class QuestionDifficulty(str, Enum):
    """Question difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def for_category(cls, category: QuestionCategory) -> "QuestionDifficulty":
        """Difficulty is fixed by category."""
        if category == QuestionCategory.OVERVIEW:
            return cls.EASY
        if category in (QuestionCategory.TRADEOFFS, QuestionCategory.ARCHITECTURE):
            return cls.HARD
        return cls.MEDIUM


class GeneratedQuestion(BaseModel):
    """A single rehearsal question with its category-derived difficulty."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    question: str
    category: QuestionCategory

    @computed_field
    @property
    def difficulty(self) -> QuestionDifficulty:
        return QuestionDifficulty.for_category(self.category)
