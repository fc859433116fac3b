"""Static matching tables for team-name reconciliation.

Contains hardcoded aliases that token overlap alone can't resolve
("Man Utd" shares no token with "Manchester United"). All tables are
read-only and shared by every worker; extend them here, never at runtime.

Keys and values are already-normalized strings: lowercase ASCII, no
punctuation. Name alias keys/values are canonical keys (tokens joined
with no separator).
"""

from types import MappingProxyType

# =============================================================================
# STOP TOKENS
# Generic club-type words dropped before key construction.
# "Real Madrid CF" and "Real Madrid" must produce the same tokens.
# =============================================================================

STOP_TOKENS: frozenset[str] = frozenset(
    {
        "fc",
        "cf",
        "ac",
        "sc",
        "afc",
        "club",
        "cd",
        "ud",
        "sd",
        "fk",
        "ec",
        "sv",
        "the",
    }
)

# =============================================================================
# TOKEN ALIASES
# Applied per token before stop-token filtering.
# =============================================================================

TOKEN_ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        "utd": "united",
        "st": "saint",
        "sp": "sporting",
    }
)

# =============================================================================
# NAME ALIASES (global)
# Format: canonical key -> preferred canonical key
# Values must never appear as keys (resolution is single-step).
# =============================================================================

NAME_ALIASES: MappingProxyType[str, str] = MappingProxyType(
    {
        # England
        "manunited": "manchesterunited",
        "manutd": "manchesterunited",
        "manchesterutd": "manchesterunited",
        "mancity": "manchestercity",
        "mcfc": "manchestercity",
        "spurs": "tottenhamhotspur",
        "tottenham": "tottenhamhotspur",
        "wolves": "wolverhamptonwanderers",
        # France
        "psg": "parissaintgermain",
        "paris": "parissaintgermain",
        # Italy
        "intermilan": "internazionale",
        "inter": "internazionale",
        "acmilan": "milan",
        # Spain
        "barca": "barcelona",
        "fcbarcelona": "barcelona",
        "athleticbilbao": "athleticclub",
        "athletic": "athleticclub",
        "atletico": "atleticomadrid",
        "atletimadrid": "atleticomadrid",
        # Germany
        "bvb": "borussiadortmund",
        "dortmund": "borussiadortmund",
        "bayern": "bayernmunich",
        "leipzig": "rbleipzig",
        # Netherlands / Portugal
        "psv": "psveindhoven",
        "sporting": "sportingcp",
        "porto": "fcporto",
    }
)

# =============================================================================
# COMPETITION-SCOPED NAME ALIASES
# Format: competition code (uppercase) -> {canonical key -> canonical key}
# Checked before NAME_ALIASES. Use for short names that mean a different
# club depending on the league ("Inter" in Brazil is Internacional).
# =============================================================================

COMPETITION_NAME_ALIASES: MappingProxyType[str, MappingProxyType[str, str]] = MappingProxyType(
    {
        # Campeonato Brasileiro Serie A
        "BSA": MappingProxyType(
            {
                "inter": "internacional",
                "atletico": "atleticomineiro",
                "atleticomg": "atleticomineiro",
                "athletico": "athleticoparanaense",
            }
        ),
    }
)

# =============================================================================
# COMPETITION TIERS
# football-data.org competition codes (best-effort mapping).
# Diagnostic metadata only, never used for matching.
# =============================================================================

COMPETITION_TIERS: MappingProxyType[str, str] = MappingProxyType(
    {
        "PL": "A",  # Premier League
        "CL": "A",  # Champions League
        "PD": "B",  # La Liga
        "BL1": "B",  # Bundesliga
        "SA": "B",  # Serie A
        "EL": "B",  # Europa League
        "ECL": "C",  # Europa Conference League
        "FL1": "C",  # Ligue 1
        "UNL": "C",  # Nations League
        "DED": "C",  # Eredivisie
        "PPL": "C",  # Primeira Liga
    }
)


def resolve_competition_tier(competition_code: str | None) -> str | None:
    """Look up the tier ("A", "B", "C") for a football-data.org competition code."""
    if not competition_code:
        return None
    return COMPETITION_TIERS.get(competition_code.strip().upper())
