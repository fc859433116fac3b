"""Core record types exchanged with the schedule and event-detail providers.

Both records arrive already parsed by the provider clients. Every field is
optional because provider payloads are incomplete often enough that the
matcher must degrade rather than fail.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Fixture:
    """A fixture from the schedule provider (e.g. football-data.org)."""

    home_team_name: str | None = None
    away_team_name: str | None = None
    fixture_date: str | None = None  # "YYYY-MM-DD"
    id: int | None = None  # Schedule provider id, reporting only


@dataclass(frozen=True)
class CandidateMatch:
    """A match record from the event-detail provider (e.g. StatsBomb)."""

    id: int
    home_team_name: str | None = None
    away_team_name: str | None = None
    match_date: str | None = None  # "YYYY-MM-DD"
