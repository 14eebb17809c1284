"""
Main API router for Prepfolio

Aggregates all API routes and provides the main application router.
"""

from fastapi import APIRouter

from prepfolio.api.endpoints import practice

api_router = APIRouter()

api_router.include_router(
    practice.router,
    prefix="/practice",
    tags=["Practice"]
)
