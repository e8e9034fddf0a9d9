"""Sport-agnostic access to live match data.

Usage:
    from smarthub_tips.data import MatchDataFetcher, SportType

    fetcher = MatchDataFetcher()
    games = fetcher.fetch_matches_for_date(SportType.FOOTBALL)
    game = fetcher.fetch_match_by_id(SportType.NBA, "12345")
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ..config import Settings, get_settings
from .collectors import BasketballCollector, FootballCollector
from .models import GameData, SportType

logger = logging.getLogger(__name__)


def _as_dict(value: Any) -> Dict:
    return value if isinstance(value, dict) else {}


def _stat_block(entry: Dict) -> Dict[str, Any]:
    """Flatten one per-team statistics entry into ``{stat: value}``."""
    statistics = entry.get("statistics")
    if isinstance(statistics, list):
        return {
            stat.get("type"): stat.get("value")
            for stat in statistics
            if isinstance(stat, dict) and stat.get("type")
        }
    return {key: value for key, value in entry.items() if key not in ("team", "game")}


class MatchDataFetcher:
    """Fetch matches from the sport's provider and return GameData records.

    None of the operations raise: provider problems degrade to an empty list
    or ``None``.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        football: Optional[FootballCollector] = None,
        basketball: Optional[BasketballCollector] = None,
    ):
        self.settings = settings or get_settings()
        self.collectors = {
            SportType.FOOTBALL: football or FootballCollector(self.settings),
            SportType.NBA: basketball or BasketballCollector(self.settings),
        }

    def _collector(self, sport: SportType):
        return self.collectors[SportType(sport)]

    def _map_items(self, collector, items: List[Dict]) -> List[GameData]:
        games = []
        for item in items:
            try:
                games.append(collector.map_game(item))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                logger.warning(f"Skipping malformed {collector.name} item: {e}")
        return games

    def fetch_matches_for_date(
        self, sport: SportType, date: Optional[str] = None
    ) -> List[GameData]:
        """All matches for a calendar date (YYYY-MM-DD, default today UTC)."""
        collector = self._collector(sport)
        target_date = date or datetime.now(timezone.utc).strftime("%Y-%m-%d")

        items = collector.get_games_by_date(target_date)
        if not items:
            return []

        games = self._map_items(collector, items)
        logger.info(f"Fetched {len(games)} {SportType(sport).value} matches for {target_date}")
        return games

    def fetch_match_by_id(
        self,
        sport: SportType,
        game_id: str,
        include_statistics: bool = False,
    ) -> Optional[GameData]:
        """A single match, or None when the provider has nothing for the id."""
        collector = self._collector(sport)

        items = collector.get_game(str(game_id))
        if not items:
            logger.debug(f"No {collector.name} match found for id {game_id}")
            return None

        games = self._map_items(collector, items[:1])
        if not games:
            return None

        game = games[0]
        if include_statistics:
            self._attach_statistics(game, items[0])
        return game

    def fetch_match_statistics(self, sport: SportType, game_id: str) -> List[Dict]:
        """Raw per-team statistics entries for a match."""
        return self._collector(sport).get_statistics(str(game_id)) or []

    def _attach_statistics(self, game: GameData, item: Dict) -> None:
        entries = self.fetch_match_statistics(game.sport_type, game.game_id)
        if not entries:
            return

        teams = _as_dict(item.get("teams"))
        home_id = _as_dict(teams.get("home")).get("id")
        away_id = _as_dict(teams.get("away")).get("id")

        for entry in entries:
            if not isinstance(entry, dict):
                logger.warning(f"Skipping malformed statistics entry for match {game.game_id}")
                continue
            team_id = _as_dict(entry.get("team")).get("id")
            if team_id is not None and team_id == home_id:
                game.additional_data["home_team_stats"] = _stat_block(entry)
            elif team_id is not None and team_id == away_id:
                game.additional_data["away_team_stats"] = _stat_block(entry)
