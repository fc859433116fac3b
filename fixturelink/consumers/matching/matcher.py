"""Fixture reconciliation entry point.

Pure function of its inputs: no I/O, no shared mutable state, safe to call
from any number of worker threads at once.
"""

import logging

from fixturelink.consumers.matching.result import MatchResult
from fixturelink.consumers.matching.scorer import evaluate_fixture
from fixturelink.consumers.matching.selector import select_best_match
from fixturelink.core.types import CandidateMatch, Fixture

logger = logging.getLogger(__name__)


def reconcile(
    fixture: Fixture,
    candidates: list[CandidateMatch],
    competition_code: str | None = None,
) -> MatchResult:
    """Find the event-detail record describing the same match as `fixture`.

    Args:
        fixture: Schedule record (home, away, date)
        candidates: Event-detail pool, already date-windowed by the caller
        competition_code: Competition code selecting scoped aliases

    Returns:
        MatchResult. Never raises on missing names or dates.
    """
    evaluated = evaluate_fixture(fixture, candidates, competition_code)
    result = select_best_match(evaluated)

    logger.debug(
        "[MATCH] '%s' vs '%s' on %s: %d candidates -> %s",
        fixture.home_team_name,
        fixture.away_team_name,
        fixture.fixture_date,
        len(candidates),
        result.candidate_id if result.is_matched else result.reason.value,
    )
    return result
