"""Best-match selection over evaluated orientations.

Orientations are totally ordered (best first) by:

1. score, descending (differences <= SCORE_TOLERANCE are ties)
2. exact_count, descending
3. contains_count, descending
4. min_component, descending (same tolerance)
5. direct orientation before swapped
6. date offset, ascending (unknown offset counts as MISSING_DATE_OFFSET)
7. candidate id, ascending

The winner is then banded against two thresholds.

The constants below were tuned empirically against live provider data.
Changing any of them changes which fixtures get linked: get owner sign-off.
"""

import logging
from functools import cmp_to_key

from fixturelink.consumers.matching.result import MatchConfidence, MatchReason, MatchResult
from fixturelink.consumers.matching.scorer import EvaluatedOrientation

logger = logging.getLogger(__name__)

SCORE_TOLERANCE = 0.01
FALLBACK_THRESHOLD = 0.95
STRONG_THRESHOLD = 1.15
MISSING_DATE_OFFSET = 999.0


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def compare_orientations(a: EvaluatedOrientation, b: EvaluatedOrientation) -> int:
    """Comparator: negative when `a` ranks ahead of `b`."""
    score_diff = b.score - a.score
    if abs(score_diff) > SCORE_TOLERANCE:
        return _sign(score_diff)

    if a.exact_count != b.exact_count:
        return b.exact_count - a.exact_count

    if a.contains_count != b.contains_count:
        return b.contains_count - a.contains_count

    min_diff = b.min_component - a.min_component
    if abs(min_diff) > SCORE_TOLERANCE:
        return _sign(min_diff)

    if a.swapped != b.swapped:
        return 1 if a.swapped else -1

    a_offset = MISSING_DATE_OFFSET if a.date_offset_days is None else a.date_offset_days
    b_offset = MISSING_DATE_OFFSET if b.date_offset_days is None else b.date_offset_days
    if a_offset != b_offset:
        return _sign(a_offset - b_offset)

    return _sign(a.candidate_id - b.candidate_id)


def rank_orientations(evaluated: list[EvaluatedOrientation]) -> list[EvaluatedOrientation]:
    """Return orientations sorted best first."""
    return sorted(evaluated, key=cmp_to_key(compare_orientations))


def classify_score(score: float) -> MatchConfidence | None:
    """Confidence band for a combined score, or None when below the fallback threshold."""
    if score < FALLBACK_THRESHOLD:
        return None
    if score >= STRONG_THRESHOLD:
        return MatchConfidence.STRONG
    return MatchConfidence.FALLBACK


def select_best_match(evaluated: list[EvaluatedOrientation]) -> MatchResult:
    """Pick the top-ranked orientation and band it.

    Args:
        evaluated: All orientations for one fixture, across all candidates

    Returns:
        MatchResult linking the winner, or a rejection with its reason.
        Rejections for low scores still report the best score seen.
    """
    if not evaluated:
        return MatchResult.rejected(MatchReason.NO_CANDIDATES)

    best = rank_orientations(evaluated)[0]
    confidence = classify_score(best.score)

    if confidence is None:
        logger.debug(
            "[SELECT] Rejected best candidate %s: score %.3f < %.2f",
            best.candidate_id,
            best.score,
            FALLBACK_THRESHOLD,
        )
        return MatchResult.rejected(MatchReason.LOW_SCORE, score=best.score)

    logger.debug(
        "[SELECT] Candidate %s (swapped=%s, score=%.3f, %s)",
        best.candidate_id,
        best.swapped,
        best.score,
        confidence.value,
    )
    return MatchResult.matched(best.candidate, best.swapped, best.score, confidence)
