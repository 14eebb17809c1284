"""
AI prompt templates for Prepfolio

Contains structured prompts for:
- Question generation
- Answer evaluation
"""

from prepfolio.prompts.interviewer import InterviewerPrompts
from prepfolio.prompts.evaluator import EvaluatorPrompts

__all__ = [
    "InterviewerPrompts",
    "EvaluatorPrompts",
]
