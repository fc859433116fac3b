"""Application configuration.

Single source of truth for configuration values.
Loads from environment variables with .env file support.

Matching thresholds are deliberately NOT configured here. They live as
module constants in fixturelink.consumers.matching.selector and require
owner sign-off to change.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# =============================================================================
# VERSION - Read from pyproject.toml (single source of truth)
# =============================================================================


def _get_version() -> str:
    """Read version - prefer pyproject.toml, fall back to installed metadata."""
    try:
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        if pyproject_path.exists():
            with open(pyproject_path, "rb") as f:
                data = tomllib.load(f)
                return data.get("project", {}).get("version", "0.0.0")
    except (OSError, KeyError, ValueError):
        pass

    # Fall back to installed package metadata (pip install without source)
    try:
        from importlib.metadata import PackageNotFoundError, version

        return version("fixturelink")
    except (ImportError, PackageNotFoundError):
        pass

    return "0.0.0"


VERSION = _get_version()

# Load .env file from project root
_PROJECT_ROOT = Path(__file__).parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"
load_dotenv(_ENV_FILE)

# Fixtures reconciled concurrently in a batch
DEFAULT_MATCH_WORKERS = 2


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class Config:
    """Application configuration.

    Values are read from the environment on access so tests and
    long-running processes see changes made after import.
    """

    @classmethod
    def match_workers(cls) -> int:
        """Worker count for batch reconciliation (env MATCH_WORKERS)."""
        workers = _int_from_env("MATCH_WORKERS", DEFAULT_MATCH_WORKERS)
        if workers < 1:
            raise ValueError(f"MATCH_WORKERS must be >= 1, got {workers}")
        return workers


def get_match_workers() -> int:
    """Get the configured batch reconciliation worker count."""
    return Config.match_workers()


__all__ = [
    "VERSION",
    "DEFAULT_MATCH_WORKERS",
    "Config",
    "get_match_workers",
]
