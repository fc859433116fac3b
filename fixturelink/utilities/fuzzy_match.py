"""Fuzzy near-miss diagnostics for unlinked fixtures.

When reconciliation rejects every candidate, operators still want to know
which record came closest so they can add an alias. This uses rapidfuzz
token_set_ratio on "Home vs Away" display strings, which is order
independent and tolerant of extra words.

Diagnostics only: nothing here feeds back into MatchResult.
"""

from dataclasses import dataclass

from rapidfuzz import fuzz

from fixturelink.consumers.matching.normalizer import clean_name
from fixturelink.core.types import CandidateMatch, Fixture


@dataclass(frozen=True)
class NearMiss:
    """Closest candidate by fuzzy event-name similarity."""

    candidate_id: int
    similarity: float  # 0-100
    event_name: str

    def to_dict(self) -> dict:
        return {
            "candidate_id": self.candidate_id,
            "similarity": self.similarity,
            "event_name": self.event_name,
        }


def event_display_name(home: str | None, away: str | None) -> str:
    return f"{home or '?'} vs {away or '?'}"


def event_name_similarity(fixture: Fixture, candidate: CandidateMatch) -> float:
    """Fuzzy similarity (0-100) between fixture and candidate team names."""
    candidate_text = clean_name(
        f"{candidate.home_team_name or ''} {candidate.away_team_name or ''}"
    )
    fixture_text = clean_name(f"{fixture.home_team_name or ''} {fixture.away_team_name or ''}")
    if not candidate_text or not fixture_text:
        return 0.0

    # Token-based ratios ignore word order, so home/away orientation is irrelevant
    return max(
        fuzz.token_set_ratio(fixture_text, candidate_text),
        fuzz.token_sort_ratio(fixture_text, candidate_text),
    )


def closest_candidate(
    fixture: Fixture,
    candidates: list[CandidateMatch],
) -> NearMiss | None:
    """Return the most similar candidate, or None for an empty pool.

    Ties go to the lowest candidate id.
    """
    best: NearMiss | None = None
    for candidate in sorted(candidates, key=lambda c: c.id):
        similarity = event_name_similarity(fixture, candidate)
        if best is None or similarity > best.similarity:
            best = NearMiss(
                candidate_id=candidate.id,
                similarity=similarity,
                event_name=event_display_name(candidate.home_team_name, candidate.away_team_name),
            )
    return best
