"""Tests for GameData and tip domain types."""

from datetime import datetime

from smarthub_tips.analysis import RiskLevel
from smarthub_tips.data import GameData, MatchStatus, SportType
from smarthub_tips.database import Tip
from smarthub_tips.tips import BettingTip, MatchDetails, TipAnalysis


class TestGameData:
    """Tests for the canonical match record."""

    def test_scheduled_game_drops_scores(self):
        game = GameData(
            game_id="1",
            home_team="A",
            away_team="B",
            competition="League",
            date="2024-01-01T00:00:00",
            venue="Ground",
            status="scheduled",
            sport_type="football",
            home_score=0,
            away_score=0,
        )

        assert game.status == MatchStatus.SCHEDULED
        assert game.sport_type == SportType.FOOTBALL
        assert game.home_score is None
        assert game.away_score is None
        assert game.has_started is False

    def test_dict_round_trip_keeps_enums(self, football_game):
        data = football_game.to_dict()

        assert data["status"] == "live"
        assert data["sport_type"] == "football"
        assert GameData.from_dict(data) == football_game


class TestBettingTip:
    """Tests for building tips from stored rows."""

    def test_from_record(self, football_game):
        now = datetime(2024, 1, 1, 12, 0)
        record = Tip(
            id="abc",
            match_id="1035045",
            sport_type="football",
            tip_type="Home Win",
            confidence_score=0.75,
            analysis={
                "reasoning": "Form",
                "key_stats": ["x"],
                "risk_level": "low",
                "match_details": {"home_team": "Manchester United"},
            },
            odds=None,
            game_data=football_game.to_dict(),
            created_at=now,
            updated_at=now,
        )

        tip = BettingTip.from_record(record)

        assert tip.sport_type == SportType.FOOTBALL
        assert tip.analysis.risk_level == RiskLevel.LOW
        assert tip.analysis.match_details == MatchDetails(home_team="Manchester United")
        assert tip.game_data == football_game
        assert tip.odds is None

    def test_to_dict_is_json_friendly(self):
        now = datetime(2024, 1, 1, 12, 0)
        tip = BettingTip(
            id="abc",
            match_id="1",
            sport_type="nba",
            tip_type="Over Total Points",
            confidence_score=0.68,
            analysis=TipAnalysis(reasoning="Pace", risk_level="medium"),
            created_at=now,
            updated_at=now,
        )

        data = tip.to_dict()

        assert data["sport_type"] == "nba"
        assert data["analysis"]["risk_level"] == "medium"
        assert data["analysis"]["match_details"] is None
        assert data["game_data"] is None
        assert data["created_at"] == "2024-01-01T12:00:00"
