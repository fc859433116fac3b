"""Date-bucketed index of event-detail candidates.

Fixtures are only compared against candidates dated the same day or one
day either side. This bounds the comparison work per fixture and absorbs
the off-by-one dates providers produce around midnight UTC.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from fixturelink.core.types import CandidateMatch
from fixturelink.utilities.dates import shift_date

logger = logging.getLogger(__name__)

# Days either side of the lookup date that are still considered
DATE_WINDOW_DAYS = 1


def candidates_near_date(
    by_date: Mapping[str, list[CandidateMatch]],
    lookup_date: str | None,
) -> list[CandidateMatch]:
    """Candidates keyed at lookup_date and its neighbouring days.

    The result is de-duplicated (by identity) and ordered: exact day first,
    then the day before, then the day after. An absent lookup date yields
    no candidates; dates are never inferred.
    """
    if not lookup_date:
        return []

    keys = [lookup_date]
    for offset in range(1, DATE_WINDOW_DAYS + 1):
        keys.extend((shift_date(lookup_date, -offset), shift_date(lookup_date, offset)))

    seen: set[int] = set()
    candidates: list[CandidateMatch] = []
    for key in keys:
        for candidate in by_date.get(key, ()):
            if id(candidate) in seen:
                continue
            seen.add(id(candidate))
            candidates.append(candidate)
    return candidates


class CandidateIndex:
    """Read-only date -> candidates map.

    Usage:
        index = CandidateIndex.from_candidates(statsbomb_matches)
        pool = index.candidates_for("2024-05-01")
    """

    def __init__(self, by_date: Mapping[str, list[CandidateMatch]]):
        self._by_date = MappingProxyType({day: list(items) for day, items in by_date.items()})

    @classmethod
    def from_candidates(cls, candidates: Iterable[CandidateMatch]) -> "CandidateIndex":
        """Bucket a flat candidate pool by match date.

        Candidates without a match date can never be windowed and are skipped.
        """
        by_date: dict[str, list[CandidateMatch]] = defaultdict(list)
        skipped = 0
        for candidate in candidates:
            if not candidate.match_date:
                skipped += 1
                continue
            by_date[candidate.match_date].append(candidate)

        if skipped:
            logger.debug("[INDEX] Skipped %d candidates without match date", skipped)

        return cls(by_date)

    @property
    def dates(self) -> list[str]:
        return sorted(self._by_date)

    def __len__(self) -> int:
        return sum(len(items) for items in self._by_date.values())

    def candidates_for(self, lookup_date: str | None) -> list[CandidateMatch]:
        """Candidates within one day of lookup_date."""
        return candidates_near_date(self._by_date, lookup_date)
