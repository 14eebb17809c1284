"""
API Dependencies

Provides dependency injection for API endpoints.
Holds the provider selected once at startup.
"""

import logging

from prepfolio.config.settings import Settings, get_settings
from prepfolio.core.provider import InterviewProvider
from prepfolio.core.provider_factory import select_provider

logger = logging.getLogger(__name__)


# ============================================================================
# SINGLETON INSTANCES
# ============================================================================

_provider: InterviewProvider | None = None


def init_provider(settings: Settings | None = None) -> InterviewProvider:
    """
    Select the provider for this process.

    Called from the application lifespan; later calls return the
    provider already selected.
    """
    global _provider

    if _provider is None:
        _provider = select_provider(settings or get_settings())

    return _provider


def get_provider() -> InterviewProvider:
    """Get the provider singleton."""
    return init_provider()


async def cleanup():
    """Cleanup resources on shutdown."""
    global _provider

    if _provider:
        await _provider.close()
        logger.info(f"Closed {_provider.name} provider")

    _provider = None
