"""
Provider interface for Prepfolio

A provider generates questions, evaluates answers and summarizes
sessions. The heuristic provider below is the rule-based
implementation; ``prepfolio.core.llm_provider`` holds the hosted one.
"""

import logging
import random
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any

from prepfolio.core.evaluation_engine import EvaluationEngine
from prepfolio.core.question_generator import QuestionGenerator
from prepfolio.core.session_aggregator import SessionAggregator
from prepfolio.models.evaluation import Evaluation
from prepfolio.models.project import ProjectContext
from prepfolio.models.question import GeneratedQuestion
from prepfolio.models.session import ScoredResponse, SessionSummary

logger = logging.getLogger(__name__)

Responses = Iterable[ScoredResponse | Evaluation | Mapping[str, Any]]


class InterviewProvider(ABC):
    """The capability every provider offers to the request handlers."""

    name: str = "base"

    @abstractmethod
    async def generate_questions(
        self,
        project: ProjectContext,
        count: int
    ) -> list[GeneratedQuestion]:
        """Generate exactly ``count`` questions about the project."""

    @abstractmethod
    async def evaluate_answer(
        self,
        project: ProjectContext,
        question: str,
        answer: str
    ) -> Evaluation:
        """Score one answer."""

    @abstractmethod
    async def generate_session_summary(self, responses: Responses) -> SessionSummary:
        """Summarize a finished session."""

    async def close(self):
        """Release any held resources."""


class HeuristicProvider(InterviewProvider):
    """
    Rule-based provider with no I/O.

    Every method completes synchronously inside its coroutine, so the
    same components can also be called directly as a fallback.
    """

    name = "heuristic"

    def __init__(self, rng: random.Random | None = None):
        """
        Initialize heuristic provider.

        Args:
            rng: Random source shared by question generation and
                follow-up selection
        """
        rng = rng or random.Random()
        self.question_generator = QuestionGenerator(rng)
        self.evaluation_engine = EvaluationEngine(rng)
        self.session_aggregator = SessionAggregator()

    async def generate_questions(
        self,
        project: ProjectContext,
        count: int
    ) -> list[GeneratedQuestion]:
        return self.question_generator.generate_questions(project, count)

    async def evaluate_answer(
        self,
        project: ProjectContext,
        question: str,
        answer: str
    ) -> Evaluation:
        return self.evaluation_engine.evaluate_answer(project, question, answer)

    async def generate_session_summary(self, responses: Responses) -> SessionSummary:
        return self.session_aggregator.generate_session_summary(responses)
