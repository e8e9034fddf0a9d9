"""API-Basketball collector (v1.basketball.api-sports.io)."""

from typing import Dict, List, Optional

from ...config import Settings, get_settings
from ..models import GameData, SportType
from ..status import normalize_basketball_status
from .api_sports import APISportsCollector

DEFAULT_ARENA = "Arena not specified"


def _current_quarter(home_scores: Dict) -> int:
    """Latest quarter with a recorded home score (1 when none yet)."""
    for quarter in (4, 3, 2):
        if home_scores.get(f"quarter_{quarter}"):
            return quarter
    return 1


def map_basketball_game(item: Dict) -> GameData:
    """Convert one API-Basketball game into a GameData record.

    Raises KeyError/TypeError/AttributeError when required fields are
    missing or a nested block is not an object.
    """
    teams = item["teams"]
    league = item.get("league") or {}
    scores = item.get("scores") or {}
    home_scores = scores.get("home") or {}
    away_scores = scores.get("away") or {}
    arena = item.get("arena") or {}
    status = item.get("status") or {}

    return GameData(
        game_id=str(item["id"]),
        home_team=teams["home"]["name"],
        away_team=teams["away"]["name"],
        home_score=home_scores.get("total"),
        away_score=away_scores.get("total"),
        competition=league.get("name") or "",
        date=item.get("date") or "",
        venue=arena.get("name") or DEFAULT_ARENA,
        status=normalize_basketball_status(status.get("short")),
        sport_type=SportType.NBA,
        additional_data={
            "home_team_logo": teams["home"].get("logo"),
            "away_team_logo": teams["away"].get("logo"),
            "league_logo": league.get("logo"),
            "season": league.get("season"),
            "quarter": _current_quarter(home_scores),
        },
    )


class BasketballCollector(APISportsCollector):
    """Collector for API-Basketball games and statistics."""

    name = "API-Basketball"
    sport_type = SportType.NBA

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        super().__init__(settings.api_basketball_key, settings.basketball_api_url, settings)
        self.league_id = settings.basketball_league_id
        self.season = settings.basketball_season

    def get_games_by_date(self, date: str) -> Optional[List[Dict]]:
        """League games for a calendar date (YYYY-MM-DD)."""
        params = {"date": date, "league": self.league_id, "season": self.season}
        return self._get_response_items("games", params)

    def get_game(self, game_id: str) -> Optional[List[Dict]]:
        return self._get_response_items("games", {"id": game_id})

    def get_statistics(self, game_id: str) -> Optional[List[Dict]]:
        """Per-team statistics for a game."""
        return self._get_response_items("games/statistics", {"id": game_id})

    map_game = staticmethod(map_basketball_game)
