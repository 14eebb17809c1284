"""
API endpoint modules for Prepfolio
"""

from prepfolio.api.endpoints import practice

__all__ = ["practice"]
