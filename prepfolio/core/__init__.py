"""
Core business logic modules for Prepfolio

Contains:
- Question Generator: Template-based rehearsal questions
- Signals and Rubric: Answer features and per-dimension score tables
- Evaluation Engine: Rule-based answer scoring and feedback
- Session Aggregator: Session summaries and recommendations
- Providers: Heuristic and hosted-model implementations, selection
"""

from prepfolio.core.question_generator import QuestionGenerator
from prepfolio.core.evaluation_engine import EvaluationEngine
from prepfolio.core.session_aggregator import SessionAggregator
from prepfolio.core.provider import HeuristicProvider, InterviewProvider
from prepfolio.core.llm_provider import HostedLLMProvider, LLMResponseError
from prepfolio.core.provider_factory import ProviderKind, select_provider

__all__ = [
    "QuestionGenerator",
    "EvaluationEngine",
    "SessionAggregator",
    "InterviewProvider",
    "HeuristicProvider",
    "HostedLLMProvider",
    "LLMResponseError",
    "ProviderKind",
    "select_provider",
]
