"""
Evaluation Engine for Prepfolio

Handles scoring and feedback generation for rehearsal answers.
Serves as the heuristic provider's evaluator and as the fallback
for the hosted model when it is unreachable or returns garbage.
"""

import logging
import random

from prepfolio.core.rubric import score_rubric
from prepfolio.core.signals import AnswerSignals, extract_signals
from prepfolio.models.evaluation import Evaluation
from prepfolio.models.project import ProjectContext

logger = logging.getLogger(__name__)


FOLLOW_UPS = (
    "What specific metrics did you use to measure success?",
    "Can you walk me through the code for that?",
    "What would happen if that component failed?",
    "How did you test this functionality?",
    "What alternatives did you consider?",
)

# (signal, text shown when the signal is missing)
MISSED_POINTS = (
    ("has_length", "Answer too brief - aim for 50+ words"),
    ("has_project_reference", "Mention your specific project or tech stack"),
    ("has_explanation", "Explain WHY you made your choices"),
    ("has_specifics", "Include specific implementation details"),
    ("has_example", "Give concrete examples"),
    ("not_generic", "Avoid generic phrases - be specific"),
)

# (signal, text shown when the signal is present)
COVERED_POINTS = (
    ("has_explanation", "Good use of reasoning"),
    ("has_specifics", "Mentioned implementation details"),
    ("has_example", "Included examples"),
    ("has_numbers", "Used concrete numbers/metrics"),
)

FEEDBACK_STRONG = (
    "Strong answer! You explained your reasoning clearly and included specific details."
)
FEEDBACK_DECENT = (
    "Decent answer. Add more specific implementation details and explain your reasoning."
)
FEEDBACK_TOO_SHORT = (
    "Your answer is too short. In real interviews, you need to elaborate. "
    "Aim for at least 50 words."
)
FEEDBACK_SHALLOW = (
    "This answer lacks depth. Don't just list keywords - explain your thought "
    "process and give specific examples."
)


class EvaluationEngine:
    """
    Rule-based evaluator for rehearsal answers.

    Responsibilities:
    - Extract signals from the answer
    - Score the five rubric dimensions
    - Pick feedback, a follow-up probe and covered/missed points

    Stateless apart from the random source used for follow-ups, so a
    single instance can serve concurrent requests.
    """

    def __init__(self, rng: random.Random | None = None):
        """
        Initialize evaluation engine.

        Args:
            rng: Random source for follow-up selection
        """
        self.rng = rng or random.Random()

    def evaluate_answer(
        self,
        project: ProjectContext,
        question: str,
        answer: str | None
    ) -> Evaluation:
        """
        Evaluate a single answer.

        Total over its inputs: any string, including an empty one,
        yields a complete Evaluation.

        Args:
            project: Project the question is about
            question: Question that was asked (not used by the rules)
            answer: Candidate's free-text answer

        Returns:
            Complete Evaluation
        """
        signals = extract_signals(project, answer)
        scores = score_rubric(signals)

        evaluation = Evaluation(
            scores=scores,
            feedback=self._select_feedback(scores.mean, signals),
            follow_up=self.rng.choice(FOLLOW_UPS),
            covered_points=[text for name, text in COVERED_POINTS if signals.checks[name]],
            missed_points=[text for name, text in MISSED_POINTS if not signals.checks[name]],
        )

        logger.debug(
            f"Heuristic evaluation | words={signals.word_count} "
            f"passed={signals.passed_checks}/8 overall={evaluation.overall_score}"
        )
        return evaluation

    def _select_feedback(self, overall_score: float, signals: AnswerSignals) -> str:
        """Threshold ladder on the overall score."""
        if overall_score >= 4:
            return FEEDBACK_STRONG
        elif overall_score >= 3:
            return FEEDBACK_DECENT
        elif signals.word_count < 15:
            return FEEDBACK_TOO_SHORT
        else:
            return FEEDBACK_SHALLOW
