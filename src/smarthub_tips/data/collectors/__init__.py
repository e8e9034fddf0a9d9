"""Data collector modules."""

from .api_sports import APISportsCollector
from .basketball_api import BasketballCollector, map_basketball_game
from .football_api import FootballCollector, map_football_fixture

__all__ = [
    "APISportsCollector",
    "BasketballCollector",
    "FootballCollector",
    "map_basketball_game",
    "map_football_fixture",
]
