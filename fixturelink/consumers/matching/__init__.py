"""Fixture matching module.

Links schedule fixtures to event-detail records that carry no shared key.

Main entry point:
    from fixturelink.consumers.matching import CandidateIndex, reconcile

    index = CandidateIndex.from_candidates(candidates)
    result = reconcile(fixture, index.candidates_for(fixture.fixture_date), "PD")
"""

from fixturelink.consumers.matching.candidate_index import (
    CandidateIndex,
    candidates_near_date,
)
from fixturelink.consumers.matching.matcher import reconcile
from fixturelink.consumers.matching.normalizer import (
    CanonicalName,
    normalize_team_name,
)
from fixturelink.consumers.matching.result import (
    MatchConfidence,
    MatchReason,
    MatchResult,
)
from fixturelink.consumers.matching.scorer import (
    EvaluatedOrientation,
    evaluate_candidate,
    evaluate_fixture,
)
from fixturelink.consumers.matching.selector import (
    FALLBACK_THRESHOLD,
    STRONG_THRESHOLD,
    select_best_match,
)
from fixturelink.consumers.matching.team_matcher import (
    TeamMatchDetails,
    match_teams,
    team_match_score,
)

__all__ = [
    # Main entry point
    "reconcile",
    # Result types
    "MatchConfidence",
    "MatchReason",
    "MatchResult",
    # Normalizer
    "CanonicalName",
    "normalize_team_name",
    # Team matcher
    "TeamMatchDetails",
    "match_teams",
    "team_match_score",
    # Candidate index
    "CandidateIndex",
    "candidates_near_date",
    # Scoring and selection
    "EvaluatedOrientation",
    "evaluate_candidate",
    "evaluate_fixture",
    "select_best_match",
    "FALLBACK_THRESHOLD",
    "STRONG_THRESHOLD",
]
