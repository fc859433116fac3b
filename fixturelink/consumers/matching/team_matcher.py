"""Pairwise team name similarity.

Scores two raw team names on a 0..1 scale with three tiers:

    exact key match       -> 1.0
    key substring match   -> 0.9   ("realmadrid" in "realmadridcastilla")
    token overlap         -> Jaccard similarity, capped at 0.85

The cap keeps names that merely share a generic word ("Real Madrid" vs
"Real Sociedad") below the substring tier.
"""

from dataclasses import dataclass

from fixturelink.consumers.matching.normalizer import normalize_team_name

EXACT_SCORE = 1.0
CONTAINS_SCORE = 0.9
TOKEN_SCORE_CAP = 0.85


@dataclass(frozen=True)
class TeamMatchDetails:
    """Similarity of two team names."""

    score: float
    exact: bool
    contains: bool
    token_score: float


NO_MATCH = TeamMatchDetails(score=0.0, exact=False, contains=False, token_score=0.0)


def jaccard_similarity(a: frozenset[str] | set[str], b: frozenset[str] | set[str]) -> float:
    """|A ∩ B| / |A ∪ B|, or 0 when either set is empty."""
    if not a or not b:
        return 0.0
    union = len(a | b)
    if union == 0:
        return 0.0
    return len(a & b) / union


def match_teams(
    a: str | None,
    b: str | None,
    competition_code: str | None = None,
) -> TeamMatchDetails:
    """Compare two raw team names.

    Args:
        a: First team name (either provider)
        b: Second team name
        competition_code: Selects competition-scoped aliases

    Returns:
        TeamMatchDetails; all-zero when either name is blank
    """
    a_norm = normalize_team_name(a, competition_code)
    b_norm = normalize_team_name(b, competition_code)
    if not a_norm.key or not b_norm.key:
        return NO_MATCH

    exact = a_norm.key == b_norm.key
    contains = not exact and (a_norm.key in b_norm.key or b_norm.key in a_norm.key)
    token_score = jaccard_similarity(a_norm.tokens, b_norm.tokens)

    if exact:
        score = EXACT_SCORE
    elif contains:
        score = CONTAINS_SCORE
    else:
        score = min(TOKEN_SCORE_CAP, token_score)

    return TeamMatchDetails(score=score, exact=exact, contains=contains, token_score=token_score)


def team_match_score(a: str | None, b: str | None, competition_code: str | None = None) -> float:
    """Similarity score (0..1) of two team names."""
    return match_teams(a, b, competition_code).score
