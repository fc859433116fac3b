"""Core types for fixturelink."""

from fixturelink.core.types import CandidateMatch, Fixture

__all__ = [
    "CandidateMatch",
    "Fixture",
]
