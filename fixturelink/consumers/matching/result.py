"""Match result types for fixture reconciliation.

A result either links a candidate (with a confidence band) or explains
why nothing was linked:

- STRONG:   best combined score >= 1.15
- FALLBACK: best combined score in [0.95, 1.15)
- rejected: NO_CANDIDATES (empty pool) or LOW_SCORE (best < 0.95)

Only `candidate_id` drives downstream behaviour. `confidence` and `score`
are diagnostics surfaced in API responses.
"""

from dataclasses import dataclass
from enum import Enum

from fixturelink.core.types import CandidateMatch


class MatchConfidence(Enum):
    """Confidence band of an accepted match."""

    STRONG = "strong"
    FALLBACK = "fallback"


class MatchReason(Enum):
    """Why no candidate was linked."""

    NO_CANDIDATES = "no_candidates"  # Empty pool after date windowing
    LOW_SCORE = "low_score"  # Best orientation below the fallback threshold
    ERROR = "error"  # Evaluation raised (batch reconciliation only)


@dataclass(frozen=True)
class MatchResult:
    """Outcome of reconciling one fixture.

    Use the factory methods:
        MatchResult.matched(candidate, swapped=False, score=1.9, confidence=MatchConfidence.STRONG)
        MatchResult.rejected(MatchReason.LOW_SCORE, score=0.5)
    """

    candidate_id: int | None = None
    swapped: bool = False
    score: float = 0.0
    confidence: MatchConfidence | None = None
    reason: MatchReason | None = None
    candidate: CandidateMatch | None = None

    @property
    def is_matched(self) -> bool:
        return self.candidate_id is not None

    @classmethod
    def matched(
        cls,
        candidate: CandidateMatch,
        swapped: bool,
        score: float,
        confidence: MatchConfidence,
    ) -> "MatchResult":
        return cls(
            candidate_id=candidate.id,
            swapped=swapped,
            score=score,
            confidence=confidence,
            candidate=candidate,
        )

    @classmethod
    def rejected(cls, reason: MatchReason, score: float = 0.0) -> "MatchResult":
        return cls(score=score, reason=reason)

    def to_dict(self) -> dict:
        """Convert to dict for JSON serialization."""
        return {
            "candidate_id": self.candidate_id,
            "swapped": self.swapped,
            "score": self.score,
            "confidence": self.confidence.value if self.confidence else None,
            "reason": self.reason.value if self.reason else None,
        }
