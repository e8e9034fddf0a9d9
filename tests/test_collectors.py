"""Tests for the api-sports collectors and payload mapping."""

from unittest.mock import MagicMock

import pytest
import requests

from smarthub_tips.data import MatchStatus, SportType
from smarthub_tips.data.collectors import (
    BasketballCollector,
    FootballCollector,
    map_basketball_game,
    map_football_fixture,
)


def mock_response(payload=None, status_code=200, json_error=None):
    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(f"{status_code} Error")
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class TestFootballMapping:
    """Tests for map_football_fixture."""

    def test_maps_fixture_fields(self, sample_fixture_item):
        game = map_football_fixture(sample_fixture_item)

        assert game.game_id == "1035045"
        assert game.home_team == "Manchester United"
        assert game.away_team == "Fulham"
        assert game.home_score == 1
        assert game.away_score == 0
        assert game.competition == "Premier League"
        assert game.venue == "Old Trafford"
        assert game.status == MatchStatus.LIVE
        assert game.sport_type == SportType.FOOTBALL
        assert game.additional_data["round"] == "Regular Season - 1"
        assert game.additional_data["referee"] == "R. Jones"
        assert game.additional_data["season"] == 2024

    def test_scheduled_fixture_has_no_scores(self, sample_fixture_item):
        sample_fixture_item["fixture"]["status"]["short"] = "NS"
        sample_fixture_item["goals"] = {"home": 0, "away": 0}

        game = map_football_fixture(sample_fixture_item)

        assert game.status == MatchStatus.SCHEDULED
        assert game.home_score is None
        assert game.away_score is None

    def test_missing_teams_raises(self, sample_fixture_item):
        del sample_fixture_item["teams"]
        with pytest.raises(KeyError):
            map_football_fixture(sample_fixture_item)


class TestBasketballMapping:
    """Tests for map_basketball_game."""

    def test_maps_game_fields(self, sample_basketball_item):
        game = map_basketball_game(sample_basketball_item)

        assert game.game_id == "414330"
        assert game.home_team == "Boston Celtics"
        assert game.home_score == 82
        assert game.away_score == 71
        assert game.competition == "NBA"
        assert game.venue == "TD Garden"
        assert game.status == MatchStatus.LIVE
        assert game.sport_type == SportType.NBA
        assert game.additional_data["quarter"] == 3

    def test_missing_arena_uses_default(self, sample_basketball_item):
        sample_basketball_item["arena"] = None
        assert map_basketball_game(sample_basketball_item).venue == "Arena not specified"

    def test_quarter_defaults_to_first(self, sample_basketball_item):
        sample_basketball_item["scores"]["home"] = {"quarter_1": None, "total": None}
        sample_basketball_item["status"]["short"] = "NS"

        game = map_basketball_game(sample_basketball_item)

        assert game.additional_data["quarter"] == 1
        assert game.home_score is None


class TestAPISportsRequests:
    """Tests for the fail-open request layer."""

    def test_sends_api_sports_headers(self, settings, sample_fixture_item):
        collector = FootballCollector(settings)
        collector.session = MagicMock()
        collector.session.get.return_value = mock_response({"response": [sample_fixture_item]})

        items = collector.get_fixtures_by_date("2024-08-16")

        assert items == [sample_fixture_item]
        args, kwargs = collector.session.get.call_args
        assert args[0] == "https://v3.football.api-sports.io/fixtures"
        assert kwargs["params"] == {"date": "2024-08-16"}
        assert kwargs["headers"] == {
            "x-rapidapi-key": "test-football-key",
            "x-rapidapi-host": "v3.football.api-sports.io",
        }
        assert kwargs["timeout"] == settings.request_timeout

    def test_basketball_date_query_includes_league_and_season(self, settings):
        collector = BasketballCollector(settings)
        collector.session = MagicMock()
        collector.session.get.return_value = mock_response({"response": []})

        assert collector.get_games_by_date("2024-10-22") == []

        args, kwargs = collector.session.get.call_args
        assert args[0] == "https://v1.basketball.api-sports.io/games"
        assert kwargs["params"] == {"date": "2024-10-22", "league": 12, "season": "2024-2025"}
        assert kwargs["headers"]["x-rapidapi-host"] == "v1.basketball.api-sports.io"

    def test_statistics_endpoints(self, settings):
        football = FootballCollector(settings)
        football.session = MagicMock()
        football.session.get.return_value = mock_response({"response": []})
        football.get_statistics("99")
        assert football.session.get.call_args[0][0].endswith("/fixtures/statistics")
        assert football.session.get.call_args[1]["params"] == {"fixture": "99"}

        basketball = BasketballCollector(settings)
        basketball.session = MagicMock()
        basketball.session.get.return_value = mock_response({"response": []})
        basketball.get_statistics("77")
        assert basketball.session.get.call_args[0][0].endswith("/games/statistics")
        assert basketball.session.get.call_args[1]["params"] == {"id": "77"}

    def test_missing_key_skips_request(self, settings):
        settings.api_football_key = None
        collector = FootballCollector(settings)
        collector.session = MagicMock()

        assert collector.enabled is False
        assert collector.get_fixture("1") is None
        collector.session.get.assert_not_called()

    def test_http_error_returns_none(self, settings):
        collector = FootballCollector(settings)
        collector.session = MagicMock()
        collector.session.get.return_value = mock_response(status_code=500)

        assert collector.get_fixture("1") is None

    def test_connection_error_returns_none(self, settings):
        collector = BasketballCollector(settings)
        collector.session = MagicMock()
        collector.session.get.side_effect = requests.exceptions.ConnectionError("unreachable")

        assert collector.get_game("1") is None

    def test_invalid_json_returns_none(self, settings):
        collector = FootballCollector(settings)
        collector.session = MagicMock()
        collector.session.get.return_value = mock_response(json_error=ValueError("bad json"))

        assert collector.get_fixture("1") is None

    def test_payload_without_response_list_is_empty(self, settings):
        collector = FootballCollector(settings)
        collector.session = MagicMock()
        collector.session.get.return_value = mock_response({"errors": {"token": "invalid"}})

        assert collector.get_fixture("1") == []
