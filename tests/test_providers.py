"""Tests for provider selection and the hosted provider's fallback paths."""

import asyncio
import json
import random

import httpx
import pytest

from prepfolio.core.llm_provider import HostedLLMProvider
from prepfolio.core.provider import HeuristicProvider
from prepfolio.core.provider_factory import ProviderKind, select_provider
from prepfolio.models.question import QuestionCategory, QuestionDifficulty

from conftest import CHAT_APP_ANSWER


def chat_completion(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def make_hosted(handler, rng=None) -> HostedLLMProvider:
    return HostedLLMProvider(
        name="openai",
        base_url="https://llm.test/v1",
        api_key="sk-test",
        model="test-model",
        fallback=HeuristicProvider(rng or random.Random(7)),
        transport=httpx.MockTransport(handler),
    )


def run(coro):
    return asyncio.run(coro)


# =========================================================================
# SELECTION
# =========================================================================

@pytest.mark.parametrize("setting, expected", [
    ("auto", ProviderKind.AUTO),
    ("GROQ", ProviderKind.GROQ),
    (" openai ", ProviderKind.OPENAI),
    ("mock", ProviderKind.HEURISTIC),
    ("heuristic", ProviderKind.HEURISTIC),
    ("something-else", ProviderKind.HEURISTIC),
    ("", ProviderKind.HEURISTIC),
])
def test_provider_kind_parse(setting, expected):
    assert ProviderKind.parse(setting) == expected


def test_auto_without_keys_selects_heuristic(make_settings):
    provider = select_provider(make_settings())

    assert isinstance(provider, HeuristicProvider)
    assert provider.name == "heuristic"


def test_auto_prefers_groq(make_settings):
    provider = select_provider(make_settings(groq_api_key="gk", openai_api_key="ok"))
    try:
        assert isinstance(provider, HostedLLMProvider)
        assert provider.name == "groq"
        assert provider.model == "llama-3.1-70b-versatile"
    finally:
        run(provider.close())


def test_auto_uses_openai_when_only_openai_key(make_settings):
    provider = select_provider(make_settings(openai_api_key="ok"))
    try:
        assert provider.name == "openai"
        assert str(provider.client.base_url).startswith("https://api.openai.com/v1")
    finally:
        run(provider.close())


def test_explicit_provider_without_key_degrades(make_settings):
    assert isinstance(select_provider(make_settings(ai_provider="groq")), HeuristicProvider)
    assert isinstance(select_provider(make_settings(ai_provider="openai")), HeuristicProvider)


def test_explicit_heuristic_ignores_keys(make_settings):
    provider = select_provider(make_settings(ai_provider="mock", groq_api_key="gk"))

    assert isinstance(provider, HeuristicProvider)


# =========================================================================
# HEURISTIC PROVIDER
# =========================================================================

def test_heuristic_provider_is_complete(chat_project, heuristic_provider):
    questions = run(heuristic_provider.generate_questions(chat_project, 4))
    evaluation = run(heuristic_provider.evaluate_answer(chat_project, "Why?", CHAT_APP_ANSWER))
    summary = run(heuristic_provider.generate_session_summary([evaluation]))

    assert len(questions) == 4
    assert evaluation.overall_score == 3.8
    assert summary.questions_answered == 1
    assert summary.overall_score == 3.8


# =========================================================================
# HOSTED PROVIDER
# =========================================================================

def test_hosted_evaluation_is_parsed_and_normalized(chat_project):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers["Authorization"]
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        content = "Here you go:\n" + json.dumps({
            "scores": {
                "completeness": 7,
                "accuracy": "3",
                "clarity": 0,
                "interviewReady": 4.4,
            },
            "overallScore": 9.9,
            "feedback": "Solid reasoning about concurrency.",
            "followUp": "How did you shard the socket servers?",
            "coveredPoints": ["non-blocking I/O"],
        })
        return httpx.Response(200, json=chat_completion(content))

    provider = make_hosted(handler)
    evaluation = run(provider.evaluate_answer(chat_project, "Why Node.js?", CHAT_APP_ANSWER))
    run(provider.close())

    assert seen["auth"] == "Bearer sk-test"
    assert seen["path"] == "/v1/chat/completions"
    assert seen["body"]["model"] == "test-model"
    assert "Chat App" in seen["body"]["messages"][0]["content"]

    assert evaluation.scores.as_dict() == {
        "completeness": 5,
        "accuracy": 3,
        "clarity": 1,
        "depth": 2,
        "interviewReady": 4,
    }
    assert evaluation.overall_score == 3.0
    assert evaluation.feedback == "Solid reasoning about concurrency."
    assert evaluation.follow_up == "How did you shard the socket servers?"
    assert evaluation.covered_points == ["non-blocking I/O"]
    assert evaluation.missed_points == ["More specific details needed"]


def test_hosted_list_content_is_joined(chat_project):
    def handler(request):
        payload = {"choices": [{"message": {"content": [
            {"type": "text", "text": '{"scores": {"completeness": 3, "accuracy": 3, '},
            {"type": "text", "text": '"clarity": 3, "depth": 3, "interviewReady": 3}}'},
        ]}}]}
        return httpx.Response(200, json=payload)

    provider = make_hosted(handler)
    evaluation = run(provider.evaluate_answer(chat_project, "Q", CHAT_APP_ANSWER))
    run(provider.close())

    assert evaluation.overall_score == 3.0
    assert evaluation.feedback == "Unable to evaluate properly."


@pytest.mark.parametrize("handler", [
    lambda request: httpx.Response(500, text="upstream exploded"),
    lambda request: httpx.Response(200, text="<html>not json</html>"),
    lambda request: httpx.Response(200, json={"choices": []}),
    lambda request: httpx.Response(200, json=chat_completion("I cannot grade this.")),
    lambda request: httpx.Response(200, json=chat_completion("{broken json")),
])
def test_hosted_evaluation_falls_back(chat_project, handler):
    provider = make_hosted(handler)
    evaluation = run(provider.evaluate_answer(chat_project, "Why Node.js?", CHAT_APP_ANSWER))
    run(provider.close())

    heuristic = HeuristicProvider().evaluation_engine.evaluate_answer(
        chat_project, "Why Node.js?", CHAT_APP_ANSWER
    )
    assert evaluation.scores == heuristic.scores
    assert evaluation.feedback == heuristic.feedback


def test_hosted_evaluation_falls_back_on_network_error(chat_project):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    provider = make_hosted(handler)
    evaluation = run(provider.evaluate_answer(chat_project, "Q", "it works well"))
    run(provider.close())

    assert evaluation.overall_score == 1.0


def test_hosted_questions_are_normalized_and_topped_up(chat_project):
    def handler(request):
        content = json.dumps([
            {"question": "How is Chat App deployed?", "category": "design", "difficulty": "easy"},
            {"question": "What broke first under load?", "category": "mystery"},
            {"question": "   ", "category": "overview"},
            "not an object",
        ])
        return httpx.Response(200, json=chat_completion(content))

    provider = make_hosted(handler)
    questions = run(provider.generate_questions(chat_project, 4))
    run(provider.close())

    assert len(questions) == 4
    assert questions[0].question == "How is Chat App deployed?"
    assert questions[0].category == QuestionCategory.ARCHITECTURE
    # difficulty always follows category, whatever the model said
    assert questions[0].difficulty == QuestionDifficulty.HARD
    assert questions[1].category == QuestionCategory.TECHNICAL
    for question in questions:
        assert question.difficulty == QuestionDifficulty.for_category(question.category)


def test_hosted_questions_are_truncated(chat_project):
    def handler(request):
        content = json.dumps([
            {"question": f"Question {index}?", "category": "challenge"} for index in range(8)
        ])
        return httpx.Response(200, json=chat_completion(content))

    provider = make_hosted(handler)
    questions = run(provider.generate_questions(chat_project, 3))
    run(provider.close())

    assert [q.question for q in questions] == ["Question 0?", "Question 1?", "Question 2?"]


def test_hosted_questions_fall_back_to_templates(chat_project):
    provider = make_hosted(lambda request: httpx.Response(503))
    questions = run(provider.generate_questions(chat_project, 5))
    run(provider.close())

    assert len(questions) == 5
    assert len({q.category for q in questions}) == 5


def test_hosted_zero_questions_skips_network(chat_project):
    def handler(request):
        raise AssertionError("no request expected")

    provider = make_hosted(handler)
    assert run(provider.generate_questions(chat_project, 0)) == []
    run(provider.close())


def test_hosted_summary_is_local():
    def handler(request):
        raise AssertionError("no request expected")

    provider = make_hosted(handler)
    summary = run(provider.generate_session_summary([]))
    run(provider.close())

    assert summary.questions_answered == 0
    assert summary.areas_for_improvement == ["Complete the session first"]
