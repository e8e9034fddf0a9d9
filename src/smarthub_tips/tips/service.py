"""Tip generation workflow on top of the repository and classifier."""

import logging
from typing import Any, Dict, List, Optional, Union

from ..analysis import MatchStatistics, RiskLevel, classify_match
from ..data import GameData, MatchDataFetcher, SportType
from .models import BettingTip, MatchDetails, TipAnalysis
from .repository import TipRepository

logger = logging.getLogger(__name__)

SAMPLE_TIP_TYPE = "Home Win"
SAMPLE_CONFIDENCE = 0.75
SAMPLE_ODDS = 1.85


class TipService:
    """Create tips from match statistics and keep game lists in sync."""

    def __init__(self, repository: TipRepository, fetcher: Optional[MatchDataFetcher] = None):
        self.repository = repository
        self.fetcher = fetcher or repository.fetcher

    def generate_tip(
        self,
        match_id: str,
        sport: SportType,
        statistics: Union[MatchStatistics, Dict[str, Any], None],
        odds: Optional[float] = None,
    ) -> Optional[BettingTip]:
        """Classify a match and persist the resulting tip."""
        sport = SportType(sport)
        game = self.fetcher.fetch_match_by_id(sport, match_id)
        if game is None:
            logger.warning(f"Match {match_id} not found, tip will have no match details")

        result = classify_match(sport, statistics)
        analysis = TipAnalysis(
            reasoning=result.reasoning,
            key_stats=result.key_stats,
            risk_level=result.risk_level,
            match_details=MatchDetails.from_game(game) if game else None,
        )

        return self.repository.create(
            match_id,
            sport,
            result.tip_type,
            result.confidence_score,
            analysis,
            odds=odds,
            game_data=game,
        )

    def create_sample_tip(self, game_id: str, sport: SportType) -> Optional[BettingTip]:
        """Create an illustrative tip for a real game. Requires the game to exist."""
        sport = SportType(sport)
        game = self.fetcher.fetch_match_by_id(sport, game_id)
        if game is None:
            logger.error(f"Game {game_id} not found, sample tip not created")
            return None

        if sport == SportType.FOOTBALL:
            reasoning = (
                f"{game.home_team} are in good form at home, with a statistical edge over {game.away_team}"
            )
        else:
            reasoning = f"{game.home_team} have home-court advantage against {game.away_team}"

        analysis = TipAnalysis(
            reasoning=reasoning,
            key_stats=["Favourable head-to-head", "Good recent form", "Home advantage"],
            risk_level=RiskLevel.MEDIUM,
            match_details=MatchDetails.from_game(game),
        )

        return self.repository.create(
            game_id,
            sport,
            SAMPLE_TIP_TYPE,
            SAMPLE_CONFIDENCE,
            analysis,
            odds=SAMPLE_ODDS,
            game_data=game,
        )

    def sync_today_games(self, sport: SportType) -> List[GameData]:
        """Today's games for a sport from the provider."""
        games = self.fetcher.fetch_matches_for_date(sport)
        logger.info(f"{len(games)} {SportType(sport).value} games found for today")
        return games
