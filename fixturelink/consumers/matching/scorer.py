"""Fixture-vs-candidate scoring in both home/away orientations.

Each candidate is evaluated twice: directly (candidate home vs fixture
home) and swapped (candidate home vs fixture away), because providers
occasionally disagree on which side is at home. The combined score of an
orientation is the sum of its two per-side scores, so it lies in [0, 2].
"""

from dataclasses import dataclass

from fixturelink.consumers.matching.team_matcher import match_teams
from fixturelink.core.types import CandidateMatch, Fixture
from fixturelink.utilities.dates import date_offset_days


@dataclass(frozen=True)
class EvaluatedOrientation:
    """One (candidate, orientation) pair with its ranking features."""

    candidate: CandidateMatch
    swapped: bool
    score: float
    exact_count: int  # 0, 1 or 2
    contains_count: int  # 0, 1 or 2
    min_component: float
    date_offset_days: float | None = None

    @property
    def candidate_id(self) -> int:
        return self.candidate.id


def evaluate_orientation(
    candidate: CandidateMatch,
    home_name: str | None,
    away_name: str | None,
    fixture_date: str | None = None,
    competition_code: str | None = None,
    swapped: bool = False,
) -> EvaluatedOrientation:
    """Score a candidate against a home/away name pair as given.

    The caller decides the orientation; `swapped` is only recorded.
    """
    home = match_teams(candidate.home_team_name, home_name, competition_code)
    away = match_teams(candidate.away_team_name, away_name, competition_code)

    return EvaluatedOrientation(
        candidate=candidate,
        swapped=swapped,
        score=home.score + away.score,
        exact_count=int(home.exact) + int(away.exact),
        contains_count=int(home.contains) + int(away.contains),
        min_component=min(home.score, away.score),
        date_offset_days=date_offset_days(fixture_date, candidate.match_date),
    )


def evaluate_candidate(
    fixture: Fixture,
    candidate: CandidateMatch,
    competition_code: str | None = None,
) -> tuple[EvaluatedOrientation, EvaluatedOrientation]:
    """Evaluate one candidate directly and swapped."""
    direct = evaluate_orientation(
        candidate,
        fixture.home_team_name,
        fixture.away_team_name,
        fixture.fixture_date,
        competition_code,
        swapped=False,
    )
    swapped = evaluate_orientation(
        candidate,
        fixture.away_team_name,
        fixture.home_team_name,
        fixture.fixture_date,
        competition_code,
        swapped=True,
    )
    return direct, swapped


def evaluate_fixture(
    fixture: Fixture,
    candidates: list[CandidateMatch],
    competition_code: str | None = None,
) -> list[EvaluatedOrientation]:
    """Evaluate every candidate in both orientations (2 entries per candidate)."""
    evaluated: list[EvaluatedOrientation] = []
    for candidate in candidates:
        evaluated.extend(evaluate_candidate(fixture, candidate, competition_code))
    return evaluated
