"""Shared fixtures for the Prepfolio test suite."""

import random

import pytest

from prepfolio.config.settings import Settings
from prepfolio.core.provider import HeuristicProvider
from prepfolio.models.project import ProjectContext


class ScriptedRandom:
    """
    Random source whose ``choice`` follows a script of indices.

    Each call consumes the next index (modulo the sequence length);
    once the script runs out every call returns the first element.
    """

    def __init__(self, *indices: int):
        self.indices = list(indices)
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        if self.indices:
            return seq[self.indices.pop(0) % len(seq)]
        return seq[0]


CHAT_APP_ANSWER = (
    "I used Node.js because it enabled non-blocking I/O for handling many "
    "concurrent WebSocket connections, for example during load testing with 500 "
    "simulated clients, and it integrated well with our existing JavaScript codebase."
)


@pytest.fixture
def chat_project() -> ProjectContext:
    return ProjectContext(name="Chat App", tech_stack=["React", "Node.js"])


@pytest.fixture
def empty_project() -> ProjectContext:
    return ProjectContext()


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def heuristic_provider(seeded_rng) -> HeuristicProvider:
    return HeuristicProvider(seeded_rng)


@pytest.fixture
def make_settings():
    """Settings built only from keyword arguments, ignoring .env files."""

    def _make(**overrides) -> Settings:
        values = {"ai_provider": "auto", "groq_api_key": "", "openai_api_key": ""}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make
