"""
Data models and schemas for Prepfolio

Contains Pydantic models for:
- Project context
- Generated questions
- Answer evaluations
- Session summaries
"""

from prepfolio.models.project import ProjectContext
from prepfolio.models.question import (
    GeneratedQuestion,
    QuestionCategory,
    QuestionDifficulty,
)
from prepfolio.models.evaluation import (
    RUBRIC_DIMENSIONS,
    Evaluation,
    RubricScores,
    round_score,
)
from prepfolio.models.session import ScoredResponse, SessionSummary

__all__ = [
    # Project
    "ProjectContext",
    # Question
    "GeneratedQuestion",
    "QuestionCategory",
    "QuestionDifficulty",
    # Evaluation
    "RUBRIC_DIMENSIONS",
    "Evaluation",
    "RubricScores",
    "round_score",
    # Session
    "ScoredResponse",
    "SessionSummary",
]
