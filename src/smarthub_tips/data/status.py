"""Map provider status codes onto the canonical match status.

Unknown codes fall back to ``scheduled``: a stale badge is preferable to a
failed page.
"""

from typing import Optional

from .models import MatchStatus, SportType

FOOTBALL_LIVE_STATUSES = frozenset({"1H", "2H", "HT", "ET", "P", "LIVE"})
FOOTBALL_FINISHED_STATUSES = frozenset({"FT", "AET", "PEN", "PST", "CANC", "ABD", "AWD", "WO"})

BASKETBALL_LIVE_STATUSES = frozenset({"Q1", "Q2", "Q3", "Q4", "OT", "BT", "HT", "LIVE"})
BASKETBALL_FINISHED_STATUSES = frozenset({"FT", "AOT", "CANC", "POST"})


def normalize_football_status(code: Optional[str]) -> MatchStatus:
    """Normalize an API-Football ``fixture.status.short`` code."""
    if code in FOOTBALL_LIVE_STATUSES:
        return MatchStatus.LIVE
    if code in FOOTBALL_FINISHED_STATUSES:
        return MatchStatus.FINISHED
    return MatchStatus.SCHEDULED


def normalize_basketball_status(code: Optional[str]) -> MatchStatus:
    """Normalize an API-Basketball ``status.short`` code."""
    if code in BASKETBALL_LIVE_STATUSES:
        return MatchStatus.LIVE
    if code in BASKETBALL_FINISHED_STATUSES:
        return MatchStatus.FINISHED
    return MatchStatus.SCHEDULED


def normalize_status(sport: SportType, code: Optional[str]) -> MatchStatus:
    """Normalize a status code for the given sport."""
    if SportType(sport) == SportType.FOOTBALL:
        return normalize_football_status(code)
    return normalize_basketball_status(code)
