"""
Prepfolio - Project Portfolio Interview Rehearsal

Generates interview questions about a candidate's own projects, scores
their answers against a fixed rubric and summarizes practice sessions.
"""

__version__ = "0.1.0"
