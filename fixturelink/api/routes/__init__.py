"""API route modules."""

from fixturelink.api.routes import health, matching

__all__ = ["health", "matching"]
