"""Batch fixture reconciliation.

Links every fixture of a competition/season schedule to the event-detail
provider's match records:

1. Index the candidate pool by match date
2. For each fixture, take the candidates within one day of its date
3. Reconcile on a bounded worker pool, keeping rows in fixture order

Unlinked rows carry a fuzzy near-miss so operators can spot missing aliases.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime

from fixturelink.config import get_match_workers
from fixturelink.consumers.matching import (
    CandidateIndex,
    MatchConfidence,
    MatchReason,
    MatchResult,
    reconcile,
)
from fixturelink.core.types import CandidateMatch, Fixture
from fixturelink.utilities.concurrency import bounded_parallel_map
from fixturelink.utilities.constants import resolve_competition_tier
from fixturelink.utilities.fuzzy_match import NearMiss, closest_candidate

logger = logging.getLogger(__name__)


# =============================================================================
# TYPES
# =============================================================================


@dataclass
class ReconciliationRow:
    """Reconciliation outcome for one fixture."""

    fixture: Fixture
    result: MatchResult
    candidate_count: int = 0
    near_miss: NearMiss | None = None
    error: str | None = None

    @property
    def candidate_match_date(self) -> str | None:
        return self.result.candidate.match_date if self.result.candidate else None

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "fixture_id": self.fixture.id,
            "fixture_date": self.fixture.fixture_date,
            "home_team": self.fixture.home_team_name,
            "away_team": self.fixture.away_team_name,
            "candidate_count": self.candidate_count,
            "candidate_match_date": self.candidate_match_date,
            "match": self.result.to_dict(),
            "near_miss": self.near_miss.to_dict() if self.near_miss else None,
            "error": self.error,
        }


@dataclass
class BatchReconciliation:
    """Results from a batch reconciliation run."""

    competition_code: str | None = None
    competition_tier: str | None = None
    started_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None
    rows: list[ReconciliationRow] = field(default_factory=list)

    @property
    def summary(self) -> dict[str, int]:
        """Counts by outcome."""
        counts = {
            "total": len(self.rows),
            "matched": 0,
            "unmatched": 0,
            "strong": 0,
            "fallback": 0,
            "errors": 0,
        }
        for row in self.rows:
            if row.result.is_matched:
                counts["matched"] += 1
            else:
                counts["unmatched"] += 1
            if row.result.confidence == MatchConfidence.STRONG:
                counts["strong"] += 1
            elif row.result.confidence == MatchConfidence.FALLBACK:
                counts["fallback"] += 1
            if row.error:
                counts["errors"] += 1
        return counts

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "competition_code": self.competition_code,
            "competition_tier": self.competition_tier,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "summary": self.summary,
            "fixtures": [row.to_dict() for row in self.rows],
        }


# =============================================================================
# RECONCILER
# =============================================================================


def _reconcile_row(
    fixture: Fixture,
    index: CandidateIndex,
    competition_code: str | None,
) -> ReconciliationRow:
    candidates = index.candidates_for(fixture.fixture_date)
    try:
        result = reconcile(fixture, candidates, competition_code)
    except Exception as e:
        logger.exception(
            "[RECONCILE] Error reconciling fixture %s (%s vs %s)",
            fixture.id,
            fixture.home_team_name,
            fixture.away_team_name,
        )
        return ReconciliationRow(
            fixture=fixture,
            result=MatchResult.rejected(MatchReason.ERROR),
            candidate_count=len(candidates),
            error=str(e),
        )

    near_miss = None
    if not result.is_matched and candidates:
        near_miss = closest_candidate(fixture, candidates)

    return ReconciliationRow(
        fixture=fixture,
        result=result,
        candidate_count=len(candidates),
        near_miss=near_miss,
    )


def reconcile_fixtures(
    fixtures: list[Fixture],
    candidates: list[CandidateMatch],
    competition_code: str | None = None,
    workers: int | None = None,
) -> BatchReconciliation:
    """Reconcile a batch of fixtures against one candidate pool.

    Args:
        fixtures: Schedule fixtures, in the order rows should be returned
        candidates: Full event-detail pool for the competition/season
        competition_code: Competition code (scoped aliases, tier lookup)
        workers: Worker count override (default: MATCH_WORKERS config)

    Returns:
        BatchReconciliation with one row per fixture, in input order
    """
    batch = BatchReconciliation(
        competition_code=competition_code,
        competition_tier=resolve_competition_tier(competition_code),
    )
    index = CandidateIndex.from_candidates(candidates)
    num_workers = workers if workers is not None else get_match_workers()

    logger.info(
        "[RECONCILE] Reconciling %d fixtures against %d candidates (competition=%s, workers=%d)",
        len(fixtures),
        len(index),
        competition_code,
        num_workers,
    )

    batch.rows = bounded_parallel_map(
        lambda fixture, _index: _reconcile_row(fixture, index, competition_code),
        fixtures,
        num_workers,
    )
    batch.completed_at = datetime.now()

    summary = batch.summary
    logger.info(
        "[RECONCILE] Done: %d/%d matched (%d strong, %d fallback), %d errors",
        summary["matched"],
        summary["total"],
        summary["strong"],
        summary["fallback"],
        summary["errors"],
    )
    return batch
