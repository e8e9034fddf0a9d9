"""Pytest fixtures for the tips dashboard test suite."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from smarthub_tips.config import Settings
from smarthub_tips.data import GameData, MatchDataFetcher, MatchStatus, SportType
from smarthub_tips.database import Tip, init_db


@pytest.fixture
def settings(tmp_path):
    """Settings with both provider keys and paths inside tmp_path."""
    return Settings(
        database_url="sqlite://",
        api_football_key="test-football-key",
        api_basketball_key="test-basketball-key",
        basketball_season="2024-2025",
        data_dir=tmp_path / "data",
        logs_dir=tmp_path / "logs",
        log_to_file=False,
    )


@pytest.fixture
def session_factory():
    """Session factory bound to a fresh in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def fetcher():
    """MatchDataFetcher stand-in; configure return values per test."""
    mock = MagicMock(spec=MatchDataFetcher)
    mock.fetch_match_by_id.return_value = None
    mock.fetch_matches_for_date.return_value = []
    return mock


@pytest.fixture
def football_game():
    return GameData(
        game_id="1035045",
        home_team="Manchester United",
        away_team="Fulham",
        home_score=1,
        away_score=0,
        competition="Premier League",
        date="2024-08-16T19:00:00+00:00",
        venue="Old Trafford",
        status=MatchStatus.LIVE,
        sport_type=SportType.FOOTBALL,
        additional_data={"round": "Regular Season - 1"},
    )


@pytest.fixture
def nba_game():
    return GameData(
        game_id="414330",
        home_team="Boston Celtics",
        away_team="New York Knicks",
        competition="NBA",
        date="2024-10-22T23:30:00+00:00",
        venue="TD Garden",
        status=MatchStatus.SCHEDULED,
        sport_type=SportType.NBA,
    )


@pytest.fixture
def add_tip(session_factory):
    """Insert a raw tip row and return its id."""

    def _add(match_id, sport="football", created_at=None, game_data=None, tip_type="Home Win"):
        created_at = created_at or datetime(2024, 1, 1, 12, 0, 0)
        with session_factory() as session:
            record = Tip(
                match_id=match_id,
                sport_type=sport,
                tip_type=tip_type,
                confidence_score=0.7,
                analysis={
                    "reasoning": "Stored tip",
                    "key_stats": ["a", "b"],
                    "risk_level": "medium",
                    "match_details": {
                        "home_team": "Stored Home",
                        "away_team": "Stored Away",
                        "competition": "Stored League",
                        "date": "2024-01-01T12:00:00",
                        "venue": "Stored Venue",
                    },
                },
                odds=1.9,
                game_data=game_data,
                created_at=created_at,
                updated_at=created_at,
            )
            session.add(record)
            session.commit()
            return record.id

    return _add


@pytest.fixture
def sample_fixture_item():
    """One item of an API-Football /fixtures response."""
    return {
        "fixture": {
            "id": 1035045,
            "referee": "R. Jones",
            "date": "2024-08-16T19:00:00+00:00",
            "venue": {"id": 556, "name": "Old Trafford", "city": "Manchester"},
            "status": {"long": "Second Half", "short": "2H", "elapsed": 67},
        },
        "league": {
            "id": 39,
            "name": "Premier League",
            "logo": "https://media.api-sports.io/football/leagues/39.png",
            "season": 2024,
            "round": "Regular Season - 1",
        },
        "teams": {
            "home": {"id": 33, "name": "Manchester United", "logo": "https://media.api-sports.io/football/teams/33.png"},
            "away": {"id": 36, "name": "Fulham", "logo": "https://media.api-sports.io/football/teams/36.png"},
        },
        "goals": {"home": 1, "away": 0},
    }


@pytest.fixture
def sample_basketball_item():
    """One item of an API-Basketball /games response."""
    return {
        "id": 414330,
        "date": "2024-10-22T23:30:00+00:00",
        "status": {"long": "Quarter 3", "short": "Q3"},
        "league": {
            "id": 12,
            "name": "NBA",
            "season": "2024-2025",
            "logo": "https://media.api-sports.io/basketball/leagues/12.png",
        },
        "teams": {
            "home": {"id": 133, "name": "Boston Celtics", "logo": "https://media.api-sports.io/basketball/teams/133.png"},
            "away": {"id": 152, "name": "New York Knicks", "logo": "https://media.api-sports.io/basketball/teams/152.png"},
        },
        "scores": {
            "home": {"quarter_1": 32, "quarter_2": 30, "quarter_3": 20, "quarter_4": None, "total": 82},
            "away": {"quarter_1": 25, "quarter_2": 28, "quarter_3": 18, "quarter_4": None, "total": 71},
        },
        "arena": {"name": "TD Garden"},
    }
