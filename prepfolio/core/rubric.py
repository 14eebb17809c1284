"""
Rubric decision tables.

One pure function per rubric dimension. Each takes the extracted
signals and returns an integer score; none of them look at the raw
answer text.
"""

from prepfolio.core.signals import AnswerSignals
from prepfolio.models.evaluation import MIN_SCORE, RubricScores


def score_completeness(signals: AnswerSignals) -> int:
    if signals.has_length:
        return 4 if signals.has_explanation else 3
    return 2 if signals.word_count > 20 else 1


def score_accuracy(signals: AnswerSignals) -> int:
    if signals.has_project_reference:
        return 4 if signals.has_specifics else 3
    return 2


def score_clarity(signals: AnswerSignals) -> int:
    if signals.has_explanation:
        return 5 if signals.has_example else 4
    return 3 if signals.word_count > 30 else 2


def score_depth(signals: AnswerSignals) -> int:
    if signals.has_specifics:
        return 4 if signals.has_numbers else 3
    return 2


def score_interview_ready(signals: AnswerSignals) -> int:
    passed = signals.passed_checks
    if passed >= 6:
        return 4
    if passed >= 4:
        return 3
    return 2


def score_rubric(signals: AnswerSignals) -> RubricScores:
    """
    Apply every table, then the degenerate-answer floor.

    Short or gibberish answers get the minimum on every dimension no
    matter what the tables say.
    """
    if signals.is_degenerate:
        return RubricScores.uniform(MIN_SCORE)

    return RubricScores(
        completeness=score_completeness(signals),
        accuracy=score_accuracy(signals),
        clarity=score_clarity(signals),
        depth=score_depth(signals),
        interview_ready=score_interview_ready(signals),
    )
