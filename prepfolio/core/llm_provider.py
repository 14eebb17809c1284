"""
Hosted LLM provider for Prepfolio

Calls an OpenAI-compatible chat-completions endpoint (Groq or OpenAI)
for question generation and answer evaluation. Any transport or
parsing failure falls back to the heuristic provider, so callers
always get a complete result.
"""

import json
import logging
from typing import Any

import httpx

from prepfolio.config.settings import Settings
from prepfolio.core.provider import HeuristicProvider, InterviewProvider, Responses
from prepfolio.models.evaluation import (
    MAX_SCORE,
    MIN_SCORE,
    RUBRIC_DIMENSIONS,
    Evaluation,
    RubricScores,
)
from prepfolio.models.project import ProjectContext
from prepfolio.models.question import GeneratedQuestion, QuestionCategory
from prepfolio.models.session import SessionSummary
from prepfolio.prompts.evaluator import EvaluatorPrompts
from prepfolio.prompts.interviewer import InterviewerPrompts

logger = logging.getLogger(__name__)


# Category names a model may use that are not ours
CATEGORY_ALIASES: dict[str, QuestionCategory] = {
    **{category.value: category for category in QuestionCategory},
    "design": QuestionCategory.ARCHITECTURE,
    "behavioral": QuestionCategory.CHALLENGE,
    "tradeoff": QuestionCategory.TRADEOFFS,
    "improvement": QuestionCategory.IMPROVEMENTS,
}

DEFAULT_SCORE = 2
DEFAULT_FEEDBACK = "Unable to evaluate properly."
DEFAULT_FOLLOW_UP = "Can you elaborate further?"
DEFAULT_MISSED_POINTS = ["More specific details needed"]


class LLMResponseError(Exception):
    """The hosted model answered, but not with anything usable."""


class HostedLLMProvider(InterviewProvider):
    """
    Provider backed by a hosted chat model.

    Session summaries never touch the network; they are aggregated
    locally exactly as the heuristic provider does.
    """

    def __init__(
        self,
        name: str,
        base_url: str,
        api_key: str,
        model: str,
        timeout: float = 30.0,
        temperature: float = 0.7,
        fallback: HeuristicProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize hosted provider.

        Args:
            name: Provider name used in logs and health output
            base_url: API root, e.g. ``https://api.openai.com/v1``
            api_key: Bearer token
            model: Chat model identifier
            timeout: Request timeout in seconds
            temperature: Sampling temperature
            fallback: Heuristic provider used on any failure
            transport: Optional httpx transport (tests use MockTransport)
        """
        self.name = name
        self.model = model
        self.temperature = temperature
        self.fallback = fallback or HeuristicProvider()

        self.client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

        self.interviewer_prompts = InterviewerPrompts()
        self.evaluator_prompts = EvaluatorPrompts()

    @classmethod
    def from_settings(
        cls,
        name: str,
        settings: Settings,
        fallback: HeuristicProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "HostedLLMProvider":
        """Build the ``groq`` or ``openai`` preset from settings."""
        presets = {
            "groq": (settings.groq_base_url, settings.groq_api_key, settings.groq_model),
            "openai": (settings.openai_base_url, settings.openai_api_key, settings.openai_model),
        }
        base_url, api_key, model = presets[name]
        return cls(
            name=name,
            base_url=base_url,
            api_key=api_key,
            model=model,
            timeout=settings.llm_timeout_seconds,
            temperature=settings.llm_temperature,
            fallback=fallback,
            transport=transport,
        )

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    # =========================================================================
    # TRANSPORT
    # =========================================================================

    async def _call_chat(self, prompt: str, user_message: str, max_tokens: int) -> str:
        """
        Send one chat-completion request.

        Returns:
            Message content of the first choice

        Raises:
            httpx.HTTPError: Transport failure or non-2xx status
            LLMResponseError: Body is not a chat-completion payload
        """
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": prompt},
                {"role": "user", "content": user_message},
            ],
            "max_tokens": max_tokens,
            "temperature": self.temperature,
        }

        try:
            response = await self.client.post("/chat/completions", json=payload)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"{self.name} API error: {e}")
            raise

        try:
            result = response.json()
        except ValueError as e:
            raise LLMResponseError(f"Response body is not JSON: {e}") from e

        return self._extract_content(result)

    def _extract_content(self, result: Any) -> str:
        """Extract text content from API response, handling list/dict formats."""
        if not isinstance(result, dict):
            raise LLMResponseError("Response is not a JSON object")

        choices = result.get("choices") or []
        if not choices or not isinstance(choices[0], dict):
            raise LLMResponseError("Response has no choices")

        content = (choices[0].get("message") or {}).get("content", "")

        # Handle case where content is a list (multi-part response)
        if isinstance(content, list):
            text_parts = []
            for part in content:
                if isinstance(part, str):
                    text_parts.append(part)
                elif isinstance(part, dict) and "text" in part:
                    text_parts.append(part["text"])
            content = "".join(text_parts)

        if not isinstance(content, str) or not content.strip():
            raise LLMResponseError("Response content is empty")
        return content

    # =========================================================================
    # QUESTION GENERATION
    # =========================================================================

    async def generate_questions(
        self,
        project: ProjectContext,
        count: int
    ) -> list[GeneratedQuestion]:
        """
        Generate questions with the hosted model.

        Returns exactly ``count`` questions: a short model answer is
        topped up from the template generator, a long one truncated.
        """
        if count <= 0:
            return []

        try:
            content = await self._call_chat(
                self.interviewer_prompts.generate_questions_prompt(project, count),
                "Generate the interview questions.",
                max_tokens=1000,
            )
            questions = self._parse_questions(content)[:count]
        except (httpx.HTTPError, LLMResponseError) as e:
            logger.warning(f"{self.name} question generation failed, using templates: {e}")
            return self.fallback.question_generator.generate_questions(project, count)

        if len(questions) < count:
            logger.info(
                f"{self.name} returned {len(questions)}/{count} questions, "
                f"topping up from templates"
            )
            questions.extend(
                self.fallback.question_generator.generate_questions(project, count - len(questions))
            )
        return questions

    def _parse_questions(self, content: str) -> list[GeneratedQuestion]:
        """Parse the JSON array of questions out of the model output."""
        data = _extract_json(content, "[", "]")
        if not isinstance(data, list):
            raise LLMResponseError("Expected a JSON array of questions")

        questions = []
        for item in data:
            if not isinstance(item, dict):
                continue
            text = str(item.get("question") or "").strip()
            if not text:
                continue
            category = CATEGORY_ALIASES.get(
                str(item.get("category") or "").strip().lower(),
                QuestionCategory.TECHNICAL
            )
            questions.append(GeneratedQuestion(question=text, category=category))

        if not questions:
            raise LLMResponseError("No usable questions in response")
        return questions

    # =========================================================================
    # ANSWER EVALUATION
    # =========================================================================

    async def evaluate_answer(
        self,
        project: ProjectContext,
        question: str,
        answer: str
    ) -> Evaluation:
        """Evaluate with the hosted model, falling back to the rules."""
        try:
            content = await self._call_chat(
                self.evaluator_prompts.generate_evaluation_prompt(project, question, answer),
                "Evaluate this answer.",
                max_tokens=800,
            )
            return self._parse_evaluation(content)
        except (httpx.HTTPError, LLMResponseError) as e:
            logger.warning(f"{self.name} evaluation failed, using heuristic fallback: {e}")
            return self.fallback.evaluation_engine.evaluate_answer(project, question, answer)

    def _parse_evaluation(self, content: str) -> Evaluation:
        """
        Parse the evaluation JSON, filling gaps with defaults.

        Scores are clamped into range and the overall score is always
        recomputed from them; the model's own overall score is ignored.
        """
        data = _extract_json(content, "{", "}")
        if not isinstance(data, dict):
            raise LLMResponseError("Expected a JSON object")

        raw_scores = data.get("scores")
        if not isinstance(raw_scores, dict):
            raw_scores = {}

        scores = RubricScores(**{
            dimension: _clamp_score(raw_scores.get(dimension, DEFAULT_SCORE))
            for dimension in RUBRIC_DIMENSIONS
        })

        return Evaluation(
            scores=scores,
            feedback=_text_or(data.get("feedback"), DEFAULT_FEEDBACK),
            follow_up=_text_or(data.get("followUp"), DEFAULT_FOLLOW_UP),
            covered_points=_string_list(data.get("coveredPoints"), []),
            missed_points=_string_list(data.get("missedPoints"), DEFAULT_MISSED_POINTS),
        )

    # =========================================================================
    # SESSION SUMMARY
    # =========================================================================

    async def generate_session_summary(self, responses: Responses) -> SessionSummary:
        return self.fallback.session_aggregator.generate_session_summary(responses)


def _extract_json(content: str, opener: str, closer: str) -> Any:
    """Parse the outermost ``opener ... closer`` span of the text."""
    start = content.find(opener)
    end = content.rfind(closer) + 1
    if start < 0 or end <= start:
        raise LLMResponseError(f"No JSON {opener}{closer} block in response")
    try:
        return json.loads(content[start:end])
    except json.JSONDecodeError as e:
        raise LLMResponseError(f"Invalid JSON in response: {e}") from e


def _clamp_score(value: Any) -> int:
    try:
        score = round(float(value))
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_SCORE
    return max(MIN_SCORE, min(MAX_SCORE, score))


def _text_or(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    return default


def _string_list(value: Any, default: list[str]) -> list[str]:
    if not isinstance(value, list):
        return list(default)
    return [str(item) for item in value if item is not None]
