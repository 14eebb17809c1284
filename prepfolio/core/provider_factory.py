"""
Provider selection for Prepfolio

Resolves ``AI_PROVIDER`` into a concrete provider once, at startup.
Priority in ``auto`` mode: Groq, then OpenAI, then heuristic.
"""

import logging
import random
from enum import Enum

import httpx

from prepfolio.config.settings import Settings, get_settings
from prepfolio.core.llm_provider import HostedLLMProvider
from prepfolio.core.provider import HeuristicProvider, InterviewProvider

logger = logging.getLogger(__name__)


class ProviderKind(str, Enum):
    """Values accepted by the ``AI_PROVIDER`` setting."""

    AUTO = "auto"
    HEURISTIC = "heuristic"
    GROQ = "groq"
    OPENAI = "openai"

    @classmethod
    def parse(cls, value: str) -> "ProviderKind":
        """Parse a setting value; ``mock`` is an alias for heuristic."""
        value = (value or "").strip().lower()
        if value == "mock":
            return cls.HEURISTIC
        try:
            return cls(value)
        except ValueError:
            logger.warning(f"Unknown AI provider '{value}', using heuristic provider")
            return cls.HEURISTIC


def select_provider(
    settings: Settings | None = None,
    rng: random.Random | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> InterviewProvider:
    """
    Select the provider for this process.

    A hosted provider whose API key is missing degrades to the
    heuristic provider with a warning instead of failing startup.

    Args:
        settings: Settings to read (defaults to the cached ones)
        rng: Random source for the heuristic components
        transport: Optional httpx transport for hosted providers

    Returns:
        The selected provider
    """
    settings = settings or get_settings()
    kind = ProviderKind.parse(settings.ai_provider)
    heuristic = HeuristicProvider(rng)

    keys = {
        ProviderKind.GROQ: settings.groq_api_key,
        ProviderKind.OPENAI: settings.openai_api_key,
    }

    if kind == ProviderKind.AUTO:
        for candidate in (ProviderKind.GROQ, ProviderKind.OPENAI):
            if keys[candidate]:
                kind = candidate
                break
        else:
            logger.info(
                "Using heuristic provider (set GROQ_API_KEY or OPENAI_API_KEY for a hosted model)"
            )
            return heuristic

    if kind == ProviderKind.HEURISTIC:
        logger.info("Using heuristic provider")
        return heuristic

    if not keys[kind]:
        logger.warning(
            f"{kind.value.upper()}_API_KEY not set, falling back to heuristic provider"
        )
        return heuristic

    provider = HostedLLMProvider.from_settings(
        kind.value, settings, fallback=heuristic, transport=transport
    )
    logger.info(f"Using {kind.value} provider ({provider.model})")
    return provider
