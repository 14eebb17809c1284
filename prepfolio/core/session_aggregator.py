"""
Session Aggregator for Prepfolio

Reduces the scored answers of one session into averaged rubric
scores, strengths, weaknesses and a recommendation.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel

from prepfolio.models.evaluation import RUBRIC_DIMENSIONS, Evaluation, round_score
from prepfolio.models.session import ScoredResponse, SessionSummary

logger = logging.getLogger(__name__)


STRENGTH_THRESHOLD = 4
WEAKNESS_THRESHOLD = 3

DEFAULT_STRENGTH = "Completed the session"
DEFAULT_IMPROVEMENT = "Keep practicing"

EMPTY_SESSION_IMPROVEMENT = "Complete the session first"
EMPTY_SESSION_RECOMMENDATION = "Answer all questions to get feedback."

# (minimum overall score, recommendation), checked top-down
RECOMMENDATIONS = (
    (4, "You're well-prepared! Keep refining with more practice."),
    (3, "Good foundation. Focus on adding specific examples and explaining trade-offs."),
    (2, "Needs work. Practice explaining your project in depth - "
        "pretend you're teaching someone."),
    (0, "Start by writing out detailed answers to common questions. "
        "Focus on the 'why' behind your decisions."),
)


class SessionAggregator:
    """
    Aggregates per-answer evaluations into a session summary.

    Only means are taken, so the result does not depend on the order
    of the responses.
    """

    def generate_session_summary(
        self,
        responses: Iterable[ScoredResponse | Evaluation | Mapping[str, Any]]
    ) -> SessionSummary:
        """
        Generate the summary for a finished session.

        Args:
            responses: Scored answers; models or plain storage rows

        Returns:
            Complete SessionSummary
        """
        score_rows = [_scores_of(response) for response in responses]

        if not score_rows:
            return SessionSummary(
                questions_answered=0,
                average_scores={},
                overall_score=0,
                strengths=[],
                areas_for_improvement=[EMPTY_SESSION_IMPROVEMENT],
                recommendation=EMPTY_SESSION_RECOMMENDATION,
            )

        count = len(score_rows)
        average_scores = {
            dimension: round_score(sum(row.get(dimension, 0) for row in score_rows) / count)
            for dimension in RUBRIC_DIMENSIONS
        }
        mean = sum(average_scores.values()) / len(average_scores)
        overall = round_score(mean)

        strengths = [
            f"Strong {dimension_label(dimension)}"
            for dimension, value in average_scores.items()
            if value >= STRENGTH_THRESHOLD
        ]
        improvements = [
            f"Improve {dimension_label(dimension)}"
            for dimension, value in average_scores.items()
            if value < WEAKNESS_THRESHOLD
        ]

        logger.info(f"Summarized session | answers={count} overall={overall}")

        return SessionSummary(
            questions_answered=count,
            average_scores=average_scores,
            overall_score=overall,
            strengths=strengths or [DEFAULT_STRENGTH],
            areas_for_improvement=improvements or [DEFAULT_IMPROVEMENT],
            # Ladder reads the unrounded mean: 3.96 is not yet well-prepared
            recommendation=recommendation_for(mean),
        )


def recommendation_for(overall_score: float) -> str:
    for minimum, text in RECOMMENDATIONS:
        if overall_score >= minimum:
            return text
    return RECOMMENDATIONS[-1][1]


def dimension_label(dimension: str) -> str:
    """``interviewReady`` -> ``interview ready``."""
    return re.sub(r"([A-Z])", r" \1", dimension).lower()


def _scores_of(response: ScoredResponse | Evaluation | Mapping[str, Any]) -> dict[str, float]:
    if isinstance(response, Evaluation):
        return dict(response.scores.as_dict())
    if isinstance(response, BaseModel):
        response = response.model_dump(by_alias=True)
    return ScoredResponse.model_validate(dict(response)).scores
