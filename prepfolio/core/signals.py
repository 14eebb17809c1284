"""
Answer signal extraction for Prepfolio

Turns a free-text answer into a fixed set of boolean signals.
The rubric tables in ``prepfolio.core.rubric`` consume these.
"""

import re
from dataclasses import dataclass, fields

from prepfolio.models.project import ProjectContext


LENGTH_THRESHOLD = 50

EXPLANATION_PATTERN = re.compile(
    r"because|therefore|since|so that|in order to|the reason", re.IGNORECASE
)
SPECIFICS_PATTERN = re.compile(
    r"implemented|built|designed|created|used|configured|integrated|handled", re.IGNORECASE
)
EXAMPLE_PATTERN = re.compile(
    r"for example|such as|like when|instance|specifically", re.IGNORECASE
)
GENERIC_PATTERN = re.compile(
    r"it is good|it works well|it helps|its useful|i learned a lot", re.IGNORECASE
)
DIGIT_PATTERN = re.compile(r"\d")


@dataclass(frozen=True)
class AnswerSignals:
    """Boolean features of one answer, plus its word count."""

    word_count: int
    has_length: bool
    has_project_reference: bool
    has_explanation: bool
    has_specifics: bool
    has_numbers: bool
    has_example: bool
    not_generic: bool
    not_random: bool

    @property
    def checks(self) -> dict[str, bool]:
        """The eight named checks, in declaration order."""
        return {
            field.name: getattr(self, field.name)
            for field in fields(self)
            if field.name != "word_count"
        }

    @property
    def passed_checks(self) -> int:
        return sum(self.checks.values())

    @property
    def is_degenerate(self) -> bool:
        """Too short or too gibberish-like to score on content."""
        return self.word_count < 15 or not self.not_random


def extract_signals(project: ProjectContext, answer: str | None) -> AnswerSignals:
    """
    Compute every signal for an answer.

    Never raises: ``None`` and empty answers produce an all-false
    content profile (``not_generic`` is still true).
    """
    answer = answer or ""
    lowered = answer.lower()
    words = answer.split()
    word_count = len(words)
    long_words = sum(1 for word in words if len(word) > 3)

    return AnswerSignals(
        word_count=word_count,
        has_length=word_count >= LENGTH_THRESHOLD,
        has_project_reference=_mentions_project(project, lowered),
        has_explanation=bool(EXPLANATION_PATTERN.search(answer)),
        has_specifics=bool(SPECIFICS_PATTERN.search(answer)),
        has_numbers=bool(DIGIT_PATTERN.search(answer)),
        has_example=bool(EXAMPLE_PATTERN.search(answer)),
        not_generic=not GENERIC_PATTERN.search(answer),
        not_random=word_count > 5 and long_words > word_count * 0.5,
    )


def _mentions_project(project: ProjectContext, lowered_answer: str) -> bool:
    # Plain substring test: an unnamed project matches any answer
    terms = [project.name, *project.tech_stack]
    return any(term.lower() in lowered_answer for term in terms)
