"""Match data collection and normalization."""

from .collectors import BasketballCollector, FootballCollector
from .fetcher import MatchDataFetcher
from .models import GameData, MatchStatus, SportType
from .status import (
    normalize_basketball_status,
    normalize_football_status,
    normalize_status,
)

__all__ = [
    "BasketballCollector",
    "FootballCollector",
    "GameData",
    "MatchDataFetcher",
    "MatchStatus",
    "SportType",
    "normalize_basketball_status",
    "normalize_football_status",
    "normalize_status",
]
