"""Illustrative tips shown when the store has none for a sport."""

from datetime import datetime, timezone
from typing import Dict, List

from ..analysis import RiskLevel
from ..data.models import GameData, MatchStatus, SportType
from ..tips.models import BettingTip, MatchDetails, TipAnalysis

FOOTBALL_LOGO_URL = "https://media.api-sports.io/football"
BASKETBALL_LOGO_URL = "https://media.api-sports.io/basketball"

_SAMPLES: Dict[SportType, List[dict]] = {
    SportType.FOOTBALL: [
        {
            "tip_type": "Home Win",
            "confidence": 0.85,
            "odds": 1.75,
            "risk": RiskLevel.LOW,
            "reasoning": "Home side has won four in a row and five of their last five at home",
            "key_stats": ["80% home win rate", "15 goals scored in the last 5 games", "Solid defence"],
            "match": ("Flamengo", "Corinthians", "Brasileirão Série A", "2024-01-20T19:00:00", "Maracanã"),
            "logos": (127, 131, 71),
        },
        {
            "tip_type": "Over 2.5 Goals",
            "confidence": 0.72,
            "odds": 2.10,
            "risk": RiskLevel.MEDIUM,
            "reasoning": "Head-to-head meetings average 3.5 goals per game",
            "key_stats": ["2.8 goals per game on average", "Both teams scored in 70% of games", "Leaky defences"],
            "match": ("Palmeiras", "São Paulo", "Brasileirão Série A", "2024-01-20T20:00:00", "Allianz Parque"),
            "logos": (126, 130, 71),
        },
        {
            "tip_type": "Both Teams to Score",
            "confidence": 0.68,
            "odds": 1.90,
            "risk": RiskLevel.MEDIUM,
            "reasoning": "Productive attacks on both sides and unsettled defences",
            "key_stats": ["Home: 12 goals in 5 games", "Away: 10 goals in 5 games", "Both scored in the last 4 games"],
            "match": ("Atlético-MG", "Internacional", "Brasileirão Série A", "2024-01-20T18:00:00", "Arena MRV"),
            "logos": (128, 129, 71),
        },
    ],
    SportType.NBA: [
        {
            "tip_type": "Over 220.5 Points",
            "confidence": 0.85,
            "odds": 1.75,
            "risk": RiskLevel.LOW,
            "reasoning": "Both teams average over 115 points in recent games",
            "key_stats": ["118 points per game", "Efficient offense (52% FG)", "Fast pace"],
            "match": ("Los Angeles Lakers", "Golden State Warriors", "NBA Regular Season",
                      "2024-01-20T22:00:00", "Crypto.com Arena"),
            "logos": (145, 144, 12),
        },
        {
            "tip_type": "Home Win",
            "confidence": 0.72,
            "odds": 2.10,
            "risk": RiskLevel.MEDIUM,
            "reasoning": "Home team unbeaten in their last 8 home games",
            "key_stats": ["85% home win rate", "Strong defense (98 points allowed)", "Home-court advantage"],
            "match": ("Boston Celtics", "Miami Heat", "NBA Regular Season", "2024-01-20T19:30:00", "TD Garden"),
            "logos": (138, 149, 12),
        },
        {
            "tip_type": "Under 215.5 Points",
            "confidence": 0.68,
            "odds": 1.90,
            "risk": RiskLevel.MEDIUM,
            "reasoning": "Two solid defenses playing at a controlled pace",
            "key_stats": ["102 points allowed on average", "Slow pace (95 possessions)", "Top 5 defenses"],
            "match": ("Milwaukee Bucks", "Indiana Pacers", "NBA Regular Season", "2024-01-20T20:00:00", "Fiserv Forum"),
            "logos": (142, 141, 12),
        },
    ],
}


def sample_tips(sport: SportType) -> List[BettingTip]:
    """Demo tips for a sport, marked with ``sample-N`` ids."""
    sport = SportType(sport)
    logo_url = FOOTBALL_LOGO_URL if sport == SportType.FOOTBALL else BASKETBALL_LOGO_URL
    now = datetime.now(timezone.utc).replace(tzinfo=None)

    tips = []
    for index, sample in enumerate(_SAMPLES[sport], start=1):
        home, away, competition, date, venue = sample["match"]
        home_logo, away_logo, league_logo = sample["logos"]
        match_id = f"sample-{index}"

        details = MatchDetails(
            home_team=home, away_team=away, competition=competition, date=date, venue=venue
        )
        game = GameData(
            game_id=match_id,
            home_team=home,
            away_team=away,
            competition=competition,
            date=date,
            venue=venue,
            status=MatchStatus.SCHEDULED,
            sport_type=sport,
            additional_data={
                "home_team_logo": f"{logo_url}/teams/{home_logo}.png",
                "away_team_logo": f"{logo_url}/teams/{away_logo}.png",
                "league_logo": f"{logo_url}/leagues/{league_logo}.png",
            },
        )
        tips.append(BettingTip(
            id=match_id,
            match_id=match_id,
            sport_type=sport,
            tip_type=sample["tip_type"],
            confidence_score=sample["confidence"],
            analysis=TipAnalysis(
                reasoning=sample["reasoning"],
                key_stats=list(sample["key_stats"]),
                risk_level=sample["risk"],
                match_details=details,
            ),
            odds=sample["odds"],
            game_data=game,
            created_at=now,
            updated_at=now,
        ))

    return tips
