"""Tests for orientation scoring and best-match selection."""

import pytest

from fixturelink.consumers.matching.result import MatchConfidence, MatchReason
from fixturelink.consumers.matching.scorer import (
    EvaluatedOrientation,
    evaluate_candidate,
    evaluate_fixture,
    evaluate_orientation,
)
from fixturelink.consumers.matching.selector import (
    classify_score,
    rank_orientations,
    select_best_match,
)
from fixturelink.core.types import CandidateMatch, Fixture


def _orientation(
    candidate_id: int,
    score: float,
    exact: int = 0,
    contains: int = 0,
    min_component: float | None = None,
    swapped: bool = False,
    offset: float | None = 0.0,
) -> EvaluatedOrientation:
    return EvaluatedOrientation(
        candidate=CandidateMatch(id=candidate_id),
        swapped=swapped,
        score=score,
        exact_count=exact,
        contains_count=contains,
        min_component=score / 2 if min_component is None else min_component,
        date_offset_days=offset,
    )


def _winner(*orientations: EvaluatedOrientation) -> int:
    return rank_orientations(list(orientations))[0].candidate_id


# =============================================================================
# SCORER
# =============================================================================


class TestScorer:
    def test_swapped_orientation_found(self):
        fixture = Fixture("Arsenal", "Chelsea", "2024-05-01")
        candidate = CandidateMatch(1, "Chelsea FC", "Arsenal FC", "2024-05-02")

        direct, swapped = evaluate_candidate(fixture, candidate)

        assert direct.swapped is False
        assert direct.score == 0.0
        assert swapped.swapped is True
        assert swapped.score == 2.0
        assert swapped.exact_count == 2
        assert swapped.contains_count == 0
        assert swapped.min_component == 1.0
        assert swapped.date_offset_days == 1.0

    def test_swap_symmetry(self):
        fixture = Fixture("Real Madrid", "Barcelona", "2024-05-01")
        flipped = Fixture("Barcelona", "Real Madrid", "2024-05-01")
        candidate = CandidateMatch(7, "Barcelona B", "Real Madrid CF", "2024-05-01")

        _, swapped = evaluate_candidate(fixture, candidate)
        direct_of_flipped, _ = evaluate_candidate(flipped, candidate)

        assert swapped.score == direct_of_flipped.score
        assert swapped.exact_count == direct_of_flipped.exact_count
        assert swapped.contains_count == direct_of_flipped.contains_count
        assert swapped.min_component == direct_of_flipped.min_component
        assert swapped.date_offset_days == direct_of_flipped.date_offset_days

    def test_contains_counted(self):
        candidate = CandidateMatch(1, "Leeds United", "Hull City")
        result = evaluate_orientation(candidate, "Leeds", "Hull")
        assert result.contains_count == 2
        assert result.exact_count == 0
        assert result.score == pytest.approx(1.8)

    def test_missing_fixture_date_gives_no_offset(self):
        direct, swapped = evaluate_candidate(
            Fixture("Arsenal", "Chelsea"), CandidateMatch(1, "Arsenal", "Chelsea", "2024-05-01")
        )
        assert direct.date_offset_days is None
        assert swapped.date_offset_days is None

    def test_two_orientations_per_candidate(self):
        candidates = [CandidateMatch(i, "A", "B") for i in range(3)]
        evaluated = evaluate_fixture(Fixture("A", "B"), candidates)
        assert len(evaluated) == 6
        assert [e.swapped for e in evaluated] == [False, True] * 3

    def test_combined_score_range(self):
        candidate = CandidateMatch(1, "Arsenal", "Arsenal")
        for e in evaluate_candidate(Fixture("Arsenal", "Arsenal"), candidate):
            assert 0.0 <= e.score <= 2.0


# =============================================================================
# TIE-BREAKING
# =============================================================================


class TestRanking:
    def test_higher_score_wins_beyond_tolerance(self):
        assert _winner(_orientation(1, 1.80, exact=2), _orientation(2, 1.82)) == 2

    def test_scores_within_tolerance_fall_through_to_exact_count(self):
        assert _winner(_orientation(1, 1.805, exact=1), _orientation(2, 1.80, exact=2)) == 2

    def test_contains_count(self):
        assert _winner(_orientation(1, 1.5, contains=0), _orientation(2, 1.5, contains=1)) == 2

    def test_min_component(self):
        assert (
            _winner(
                _orientation(1, 1.4, min_component=0.5),
                _orientation(2, 1.4, min_component=0.7),
            )
            == 2
        )

    def test_min_component_within_tolerance_ignored(self):
        assert (
            _winner(
                _orientation(2, 1.4, min_component=0.705),
                _orientation(1, 1.4, min_component=0.7),
            )
            == 1
        )

    def test_direct_preferred_over_swapped(self):
        assert _winner(_orientation(1, 1.5, swapped=True), _orientation(2, 1.5, swapped=False)) == 2

    def test_closer_date_wins(self):
        assert _winner(_orientation(1, 1.5, offset=1.0), _orientation(2, 1.5, offset=0.0)) == 2

    def test_missing_date_least_preferred(self):
        assert _winner(_orientation(1, 1.5, offset=None), _orientation(2, 1.5, offset=1.0)) == 2

    def test_lowest_candidate_id_final_tiebreak(self):
        assert _winner(_orientation(9, 1.5), _orientation(3, 1.5)) == 3

    def test_ranking_is_order_independent(self):
        items = [_orientation(i, 1.5, offset=float(i % 2)) for i in range(6)]
        assert rank_orientations(items) == rank_orientations(list(reversed(items)))


# =============================================================================
# THRESHOLDS
# =============================================================================


class TestSelectBestMatch:
    def test_no_candidates(self):
        result = select_best_match([])
        assert result.candidate_id is None
        assert result.swapped is False
        assert result.score == 0.0
        assert result.confidence is None
        assert result.reason == MatchReason.NO_CANDIDATES

    def test_below_fallback_rejected_with_score(self):
        result = select_best_match([_orientation(1, 0.94)])
        assert result.candidate_id is None
        assert result.confidence is None
        assert result.reason == MatchReason.LOW_SCORE
        assert result.score == 0.94

    def test_fallback_boundary_accepted(self):
        result = select_best_match([_orientation(1, 0.95)])
        assert result.candidate_id == 1
        assert result.confidence == MatchConfidence.FALLBACK
        assert result.reason is None

    def test_strong_boundary(self):
        assert select_best_match([_orientation(1, 1.15)]).confidence == MatchConfidence.STRONG
        assert select_best_match([_orientation(1, 1.149)]).confidence == MatchConfidence.FALLBACK
        assert select_best_match([_orientation(1, 2.0)]).confidence == MatchConfidence.STRONG

    def test_swapped_flag_reported(self):
        evaluated = [_orientation(4, 2.0, exact=2, swapped=True), _orientation(4, 0.0)]
        result = select_best_match(evaluated)
        assert result.candidate_id == 4
        assert result.swapped is True

    def test_classify_score(self):
        assert classify_score(0.0) is None
        assert classify_score(1.0) == MatchConfidence.FALLBACK
        assert classify_score(1.9) == MatchConfidence.STRONG

    def test_to_dict(self):
        assert select_best_match([_orientation(1, 0.5)]).to_dict() == {
            "candidate_id": None,
            "swapped": False,
            "score": 0.5,
            "confidence": None,
            "reason": "low_score",
        }
