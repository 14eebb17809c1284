"""
API layer for Prepfolio

Contains FastAPI routers for:
- Question generation
- Answer evaluation
- Session summaries
"""

from prepfolio.api.router import api_router

__all__ = ["api_router"]
