"""
Practice API endpoints

Exposes the provider capability over HTTP:
- Generating questions for a project
- Evaluating an answer
- Summarizing a session

No storage happens here; callers persist what they get back.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from prepfolio.config.settings import get_settings
from prepfolio.core.provider import InterviewProvider
from prepfolio.models.evaluation import Evaluation
from prepfolio.models.project import ProjectContext
from prepfolio.models.question import GeneratedQuestion
from prepfolio.models.session import SessionSummary
from prepfolio.api.dependencies import get_provider

router = APIRouter()


# ============================================================================
# REQUEST/RESPONSE MODELS
# ============================================================================

class QuestionsRequest(BaseModel):
    """Request model for question generation."""
    project: ProjectContext
    count: int | None = None


class QuestionsResponse(BaseModel):
    """Generated questions."""
    questions: list[GeneratedQuestion]


class EvaluateRequest(BaseModel):
    """Request model for answer evaluation."""
    project: ProjectContext
    question: str = ""
    answer: str = ""


class SummaryRequest(BaseModel):
    """Request model for a session summary."""
    responses: list[dict[str, Any]] = Field(default_factory=list)


class ProviderResponse(BaseModel):
    """Name of the active provider."""
    provider: str


# ============================================================================
# REST ENDPOINTS
# ============================================================================

@router.post("/questions", response_model=QuestionsResponse)
async def generate_questions(
    request: QuestionsRequest,
    provider: InterviewProvider = Depends(get_provider),
) -> QuestionsResponse:
    """
    Generate rehearsal questions for a project.

    The count defaults to the configured default and is clamped to
    ``[0, max_questions]``.
    """
    settings = get_settings()
    count = settings.default_question_count if request.count is None else request.count
    count = max(0, min(count, settings.max_questions))

    questions = await provider.generate_questions(request.project, count)
    return QuestionsResponse(questions=questions)


@router.post("/evaluate", response_model=Evaluation)
async def evaluate_answer(
    request: EvaluateRequest,
    provider: InterviewProvider = Depends(get_provider),
) -> Evaluation:
    """Score one answer to one question."""
    if not request.question.strip() or not request.answer.strip():
        raise HTTPException(status_code=400, detail="Question and answer are required")

    return await provider.evaluate_answer(request.project, request.question, request.answer)


@router.post("/summary", response_model=SessionSummary)
async def summarize_session(
    request: SummaryRequest,
    provider: InterviewProvider = Depends(get_provider),
) -> SessionSummary:
    """Summarize all scored answers of a session."""
    return await provider.generate_session_summary(request.responses)


@router.get("/provider", response_model=ProviderResponse)
async def active_provider(
    provider: InterviewProvider = Depends(get_provider),
) -> ProviderResponse:
    """Report which provider is serving requests."""
    return ProviderResponse(provider=provider.name)
