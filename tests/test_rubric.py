"""Tests for signal extraction and the per-dimension rubric tables."""

import pytest

from prepfolio.core.rubric import (
    score_accuracy,
    score_clarity,
    score_completeness,
    score_depth,
    score_interview_ready,
    score_rubric,
)
from prepfolio.core.signals import AnswerSignals, extract_signals
from prepfolio.models.evaluation import RubricScores

from conftest import CHAT_APP_ANSWER


def make_signals(word_count: int = 40, **checks) -> AnswerSignals:
    values = {
        "has_length": False,
        "has_project_reference": False,
        "has_explanation": False,
        "has_specifics": False,
        "has_numbers": False,
        "has_example": False,
        "not_generic": True,
        "not_random": True,
    }
    values.update(checks)
    return AnswerSignals(word_count=word_count, **values)


# =========================================================================
# SIGNALS
# =========================================================================

def test_chat_app_answer_signals(chat_project):
    signals = extract_signals(chat_project, CHAT_APP_ANSWER)

    assert signals.word_count == 32
    assert signals.checks == {
        "has_length": False,
        "has_project_reference": True,
        "has_explanation": True,
        "has_specifics": True,
        "has_numbers": True,
        "has_example": True,
        "not_generic": True,
        "not_random": True,
    }
    assert signals.passed_checks == 7
    assert not signals.is_degenerate


@pytest.mark.parametrize("words, expected", [(49, False), (50, True)])
def test_length_boundary(chat_project, words, expected):
    answer = " ".join(["detail"] * words)

    assert extract_signals(chat_project, answer).has_length is expected


def test_project_reference_is_case_insensitive(chat_project):
    assert extract_signals(chat_project, "we shipped the CHAT APP last year").has_project_reference
    assert extract_signals(chat_project, "the react frontend talks to it").has_project_reference
    assert not extract_signals(chat_project, "a generic web service").has_project_reference


def test_empty_name_matches_any_answer(empty_project):
    assert extract_signals(empty_project, "totally unrelated words here").has_project_reference
    assert extract_signals(empty_project, "").has_project_reference


def test_generic_phrases_are_flagged(chat_project):
    assert not extract_signals(chat_project, "Honestly it works well").not_generic
    assert not extract_signals(chat_project, "I learned a lot").not_generic
    assert extract_signals(chat_project, "It scales to many users").not_generic


def test_not_random_needs_mostly_long_words(chat_project):
    assert not extract_signals(chat_project, "a b c d e").not_random
    assert not extract_signals(chat_project, "a bb ccc dddd eeee fff").not_random
    assert extract_signals(chat_project, "a bb cccc dddd eeee ffff").not_random


@pytest.mark.parametrize("answer", ["", None, "   \n\t "])
def test_empty_answers_extract_cleanly(chat_project, answer):
    signals = extract_signals(chat_project, answer)

    assert signals.word_count == 0
    assert signals.passed_checks == 1  # only not_generic
    assert signals.is_degenerate


# =========================================================================
# DECISION TABLES
# =========================================================================

@pytest.mark.parametrize("signals, expected", [
    (make_signals(has_length=True, has_explanation=True), 4),
    (make_signals(has_length=True), 3),
    (make_signals(word_count=21), 2),
    (make_signals(word_count=20), 1),
])
def test_completeness(signals, expected):
    assert score_completeness(signals) == expected


@pytest.mark.parametrize("signals, expected", [
    (make_signals(has_project_reference=True, has_specifics=True), 4),
    (make_signals(has_project_reference=True), 3),
    (make_signals(has_specifics=True), 2),
])
def test_accuracy(signals, expected):
    assert score_accuracy(signals) == expected


@pytest.mark.parametrize("signals, expected", [
    (make_signals(has_explanation=True, has_example=True), 5),
    (make_signals(has_explanation=True), 4),
    (make_signals(word_count=31, has_example=True), 3),
    (make_signals(word_count=30), 2),
])
def test_clarity(signals, expected):
    assert score_clarity(signals) == expected


@pytest.mark.parametrize("signals, expected", [
    (make_signals(has_specifics=True, has_numbers=True), 4),
    (make_signals(has_specifics=True), 3),
    (make_signals(has_numbers=True), 2),
])
def test_depth(signals, expected):
    assert score_depth(signals) == expected


@pytest.mark.parametrize("signals, expected", [
    # not_generic and not_random are on by default: 2 passed
    (make_signals(has_length=True, has_explanation=True, has_specifics=True, has_numbers=True), 4),
    (make_signals(has_length=True, has_explanation=True, has_specifics=True), 3),
    (make_signals(has_length=True, has_explanation=True), 3),
    (make_signals(has_length=True), 2),
    (make_signals(), 2),
])
def test_interview_ready(signals, expected):
    assert score_interview_ready(signals) == expected


def test_degenerate_override_floors_everything():
    signals = make_signals(
        word_count=10,
        has_project_reference=True,
        has_explanation=True,
        has_specifics=True,
        has_numbers=True,
        has_example=True,
    )

    assert score_rubric(signals) == RubricScores.uniform(1)


def test_gibberish_override_floors_everything():
    signals = make_signals(word_count=60, has_length=True, has_explanation=True, not_random=False)

    assert score_rubric(signals) == RubricScores.uniform(1)


def test_full_table_for_strong_signals():
    signals = make_signals(
        word_count=60,
        has_length=True,
        has_project_reference=True,
        has_explanation=True,
        has_specifics=True,
        has_numbers=True,
        has_example=True,
    )

    assert score_rubric(signals).as_dict() == {
        "completeness": 4,
        "accuracy": 4,
        "clarity": 5,
        "depth": 4,
        "interviewReady": 4,
    }
