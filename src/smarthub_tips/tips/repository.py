"""CRUD access to persisted tips plus match-data refresh.

The store handle (a session factory) and the match fetcher are injected so a
single configured instance can be shared by every caller.

Usage:
    from smarthub_tips.tips import TipRepository

    repository = TipRepository()
    tips = repository.list(SportType.FOOTBALL, limit=10)
    refreshed = repository.refresh_batch(SportType.FOOTBALL)
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import Settings, get_settings
from ..data import GameData, MatchDataFetcher, SportType
from ..database import Tip, get_session, get_session_factory
from .models import BettingTip, TipAnalysis

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    """Naive UTC timestamp, as stored in the tips table."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TipRepository:
    """Create, read, refresh and delete betting tips."""

    def __init__(
        self,
        session_factory: Optional[Callable[[], Session]] = None,
        fetcher: Optional[MatchDataFetcher] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.session_factory = session_factory or get_session_factory()
        self.fetcher = fetcher or MatchDataFetcher(self.settings)

    def create(
        self,
        match_id: str,
        sport: SportType,
        tip_type: str,
        confidence: float,
        analysis: TipAnalysis,
        odds: Optional[float] = None,
        game_data: Optional[GameData] = None,
    ) -> Optional[BettingTip]:
        """Persist a new tip with the current match snapshot.

        A missing match snapshot does not block creation. Returns the stored
        tip, or None when the input is invalid or the store write fails.
        """
        sport = SportType(sport)

        if not 0 <= confidence <= 1:
            logger.error(f"Refusing tip for match {match_id}: confidence {confidence} outside [0, 1]")
            return None
        if odds is not None and odds <= 0:
            logger.error(f"Refusing tip for match {match_id}: odds must be positive, got {odds}")
            return None

        if game_data is None:
            game_data = self.fetcher.fetch_match_by_id(sport, match_id)
            if game_data is None:
                logger.warning(f"Could not fetch match data for {match_id}, storing tip without it")

        now = _utcnow()
        record = Tip(
            match_id=str(match_id),
            sport_type=sport.value,
            tip_type=tip_type,
            confidence_score=confidence,
            analysis=analysis.to_dict(),
            odds=odds,
            game_data=game_data.to_dict() if game_data else None,
            created_at=now,
            updated_at=now,
        )

        try:
            with get_session(self.session_factory) as session:
                session.add(record)
                session.flush()
                tip = BettingTip.from_record(record)
        except SQLAlchemyError as e:
            logger.error(f"Failed to store tip for match {match_id}: {e}")
            return None

        logger.info(f"Created {sport.value} tip {tip.id} ({tip_type}) for match {match_id}")
        return tip

    def get(self, tip_id: str) -> Optional[BettingTip]:
        """A single tip by id, or None when missing or unreadable."""
        try:
            with get_session(self.session_factory) as session:
                record = session.get(Tip, tip_id)
                return BettingTip.from_record(record) if record else None
        except SQLAlchemyError as e:
            logger.error(f"Failed to read tip {tip_id}: {e}")
            return None

    def list(self, sport: SportType, limit: Optional[int] = None) -> List[BettingTip]:
        """Newest tips for a sport; empty on store error or when none exist."""
        sport = SportType(sport)
        if limit is None:
            limit = self.settings.default_tip_limit

        query = (
            select(Tip)
            .where(Tip.sport_type == sport.value)
            .order_by(Tip.created_at.desc())
            .limit(limit)
        )
        tips = self._read(query)
        if not tips:
            logger.info(f"No tips found for {sport.value}")
        return tips

    def list_all(self, limit: int = 20) -> List[BettingTip]:
        """Newest tips across all sports."""
        query = select(Tip).order_by(Tip.created_at.desc()).limit(limit)
        return self._read(query)

    def _read(self, query) -> List[BettingTip]:
        try:
            with get_session(self.session_factory) as session:
                return [BettingTip.from_record(record) for record in session.scalars(query)]
        except SQLAlchemyError as e:
            logger.error(f"Failed to read tips: {e}")
            return []

    def refresh_one(self, tip_id: str) -> bool:
        """Re-attach current match data to one tip.

        The stored tip is left untouched when the fetch yields nothing.
        """
        tip = self.get(tip_id)
        if tip is None:
            logger.error(f"Tip {tip_id} not found for refresh")
            return False

        game_data = self.fetcher.fetch_match_by_id(tip.sport_type, tip.match_id)
        if game_data is None:
            logger.warning(f"Could not refresh match data for {tip.match_id}")
            return False

        try:
            with get_session(self.session_factory) as session:
                record = session.get(Tip, tip_id)
                if record is None:
                    logger.error(f"Tip {tip_id} disappeared during refresh")
                    return False
                record.game_data = game_data.to_dict()
                record.updated_at = _utcnow()
        except SQLAlchemyError as e:
            logger.error(f"Failed to update tip {tip_id}: {e}")
            return False

        return True

    def refresh_batch(self, sport: SportType) -> int:
        """Refresh the most recent tips for a sport, one at a time.

        Returns the number of tips refreshed successfully; a failed tip does
        not stop the rest of the batch.
        """
        sport = SportType(sport)
        query = (
            select(Tip.id)
            .where(Tip.sport_type == sport.value)
            .order_by(Tip.created_at.desc())
            .limit(self.settings.refresh_batch_size)
        )

        try:
            with get_session(self.session_factory) as session:
                tip_ids = list(session.scalars(query))
        except SQLAlchemyError as e:
            logger.error(f"Failed to load {sport.value} tips for refresh: {e}")
            return 0

        updated = 0
        for tip_id in tip_ids:
            try:
                refreshed = self.refresh_one(tip_id)
            except Exception as e:
                logger.error(f"Refresh of tip {tip_id} failed: {e}", exc_info=True)
                continue
            if refreshed:
                updated += 1

        logger.info(f"Refreshed {updated}/{len(tip_ids)} {sport.value} tips")
        return updated

    def remove(self, tip_id: str) -> bool:
        """Delete a tip by id."""
        try:
            with get_session(self.session_factory) as session:
                record = session.get(Tip, tip_id)
                if record is None:
                    logger.warning(f"Tip {tip_id} not found, nothing deleted")
                    return False
                session.delete(record)
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete tip {tip_id}: {e}")
            return False

        logger.info(f"Deleted tip {tip_id}")
        return True
