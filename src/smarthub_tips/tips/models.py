"""Domain types for persisted betting tips."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..analysis import RiskLevel
from ..data.models import GameData, SportType

MATCH_DETAIL_FIELDS = ("home_team", "away_team", "competition", "date", "venue")


@dataclass
class MatchDetails:
    """Match snapshot captured when the tip was created."""

    home_team: Optional[str] = None
    away_team: Optional[str] = None
    competition: Optional[str] = None
    date: Optional[str] = None
    venue: Optional[str] = None

    @classmethod
    def from_game(cls, game: GameData) -> "MatchDetails":
        return cls(**{name: getattr(game, name) for name in MATCH_DETAIL_FIELDS})

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["MatchDetails"]:
        if not data:
            return None
        return cls(**{name: data.get(name) for name in MATCH_DETAIL_FIELDS})

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in MATCH_DETAIL_FIELDS}


@dataclass
class TipAnalysis:
    """Rationale attached to a tip."""

    reasoning: str
    key_stats: List[str] = field(default_factory=list)
    risk_level: RiskLevel = RiskLevel.MEDIUM
    match_details: Optional[MatchDetails] = None

    def __post_init__(self):
        self.risk_level = RiskLevel(self.risk_level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TipAnalysis":
        return cls(
            reasoning=data.get("reasoning") or "",
            key_stats=list(data.get("key_stats") or []),
            risk_level=data.get("risk_level") or RiskLevel.MEDIUM,
            match_details=MatchDetails.from_dict(data.get("match_details")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reasoning": self.reasoning,
            "key_stats": list(self.key_stats),
            "risk_level": self.risk_level.value,
            "match_details": self.match_details.to_dict() if self.match_details else None,
        }


@dataclass
class BettingTip:
    """A betting recommendation for one match."""

    id: str
    match_id: str
    sport_type: SportType
    tip_type: str
    confidence_score: float
    analysis: TipAnalysis
    created_at: datetime
    updated_at: datetime
    odds: Optional[float] = None
    game_data: Optional[GameData] = None

    def __post_init__(self):
        self.sport_type = SportType(self.sport_type)

    @classmethod
    def from_record(cls, record) -> "BettingTip":
        """Build from a ``database.models.Tip`` row."""
        return cls(
            id=record.id,
            match_id=record.match_id,
            sport_type=record.sport_type,
            tip_type=record.tip_type,
            confidence_score=record.confidence_score,
            analysis=TipAnalysis.from_dict(record.analysis or {}),
            odds=record.odds,
            game_data=GameData.from_dict(record.game_data) if record.game_data else None,
            created_at=record.created_at,
            updated_at=record.updated_at,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "match_id": self.match_id,
            "sport_type": self.sport_type.value,
            "tip_type": self.tip_type,
            "confidence_score": self.confidence_score,
            "analysis": self.analysis.to_dict(),
            "odds": self.odds,
            "game_data": self.game_data.to_dict() if self.game_data else None,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
