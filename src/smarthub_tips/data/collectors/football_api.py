"""API-Football collector (v3.football.api-sports.io)."""

from typing import Dict, List, Optional

from ...config import Settings, get_settings
from ..models import GameData, SportType
from ..status import normalize_football_status
from .api_sports import APISportsCollector


def map_football_fixture(item: Dict) -> GameData:
    """Convert one API-Football fixture into a GameData record.

    Raises KeyError/TypeError/AttributeError when required fields are
    missing or a nested block is not an object.
    """
    fixture = item["fixture"]
    teams = item["teams"]
    league = item.get("league") or {}
    goals = item.get("goals") or {}
    venue = fixture.get("venue") or {}
    status = fixture.get("status") or {}

    return GameData(
        game_id=str(fixture["id"]),
        home_team=teams["home"]["name"],
        away_team=teams["away"]["name"],
        home_score=goals.get("home"),
        away_score=goals.get("away"),
        competition=league.get("name") or "",
        date=fixture.get("date") or "",
        venue=venue.get("name") or "",
        status=normalize_football_status(status.get("short")),
        sport_type=SportType.FOOTBALL,
        additional_data={
            "home_team_logo": teams["home"].get("logo"),
            "away_team_logo": teams["away"].get("logo"),
            "league_logo": league.get("logo"),
            "season": league.get("season"),
            "round": league.get("round"),
            "referee": fixture.get("referee"),
        },
    )


class FootballCollector(APISportsCollector):
    """Collector for API-Football fixtures and statistics."""

    name = "API-Football"
    sport_type = SportType.FOOTBALL

    def __init__(self, settings: Optional[Settings] = None):
        settings = settings or get_settings()
        super().__init__(settings.api_football_key, settings.football_api_url, settings)

    def get_fixtures_by_date(self, date: str) -> Optional[List[Dict]]:
        """Fixtures for a calendar date (YYYY-MM-DD)."""
        return self._get_response_items("fixtures", {"date": date})

    def get_fixture(self, fixture_id: str) -> Optional[List[Dict]]:
        return self._get_response_items("fixtures", {"id": fixture_id})

    def get_statistics(self, fixture_id: str) -> Optional[List[Dict]]:
        """Per-team statistics for a fixture."""
        return self._get_response_items("fixtures/statistics", {"fixture": fixture_id})

    # Common interface used by MatchDataFetcher
    get_games_by_date = get_fixtures_by_date
    get_game = get_fixture
    map_game = staticmethod(map_football_fixture)
