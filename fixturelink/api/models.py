"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, Field

from fixturelink.consumers.matching import MatchResult
from fixturelink.core.types import CandidateMatch, Fixture

# =============================================================================
# Records
# =============================================================================


class FixtureModel(BaseModel):
    """Schedule fixture as sent by the schedule collaborator."""

    id: int | None = None
    home_team_name: str | None = None
    away_team_name: str | None = None
    fixture_date: str | None = Field(None, description="YYYY-MM-DD")

    def to_fixture(self) -> Fixture:
        return Fixture(
            home_team_name=self.home_team_name,
            away_team_name=self.away_team_name,
            fixture_date=self.fixture_date,
            id=self.id,
        )


class CandidateModel(BaseModel):
    """Event-detail match record."""

    id: int
    home_team_name: str | None = None
    away_team_name: str | None = None
    match_date: str | None = Field(None, description="YYYY-MM-DD")

    def to_candidate(self) -> CandidateMatch:
        return CandidateMatch(
            id=self.id,
            home_team_name=self.home_team_name,
            away_team_name=self.away_team_name,
            match_date=self.match_date,
        )


# =============================================================================
# Reconciliation
# =============================================================================


class ReconcileRequest(BaseModel):
    """Reconcile one fixture against an already date-windowed pool."""

    competition_code: str | None = Field(None, description="Competition code (e.g. 'PL', 'BSA')")
    fixture: FixtureModel
    candidates: list[CandidateModel] = Field(default_factory=list)


class BatchReconcileRequest(BaseModel):
    """Reconcile a schedule against the full candidate pool of a season."""

    competition_code: str | None = None
    fixtures: list[FixtureModel]
    candidates: list[CandidateModel] = Field(default_factory=list)
    workers: int | None = Field(None, ge=1, le=32, description="Override MATCH_WORKERS")


class MatchResultResponse(BaseModel):
    """Serialized MatchResult."""

    candidate_id: int | None
    swapped: bool
    score: float
    confidence: str | None
    reason: str | None

    @classmethod
    def from_result(cls, result: MatchResult) -> "MatchResultResponse":
        return cls(**result.to_dict())
