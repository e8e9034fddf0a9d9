"""Canonical match data shared by both sports providers."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class SportType(str, Enum):
    """Sports covered by the dashboard."""

    FOOTBALL = "football"
    NBA = "nba"


class MatchStatus(str, Enum):
    """Canonical three-state match status."""

    SCHEDULED = "scheduled"
    LIVE = "live"
    FINISHED = "finished"


@dataclass
class GameData:
    """One real-world match observation in provider-neutral form."""

    game_id: str
    home_team: str
    away_team: str
    competition: str
    date: str  # ISO-8601, as reported by the provider
    venue: str
    status: MatchStatus
    sport_type: SportType
    home_score: Optional[int] = None
    away_score: Optional[int] = None
    additional_data: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        self.status = MatchStatus(self.status)
        self.sport_type = SportType(self.sport_type)
        # Scores only exist once play has started
        if self.status == MatchStatus.SCHEDULED:
            self.home_score = None
            self.away_score = None

    @property
    def has_started(self) -> bool:
        return self.status != MatchStatus.SCHEDULED

    def to_dict(self) -> Dict[str, Any]:
        """JSON-safe representation used when storing the snapshot."""
        return {
            "game_id": self.game_id,
            "home_team": self.home_team,
            "away_team": self.away_team,
            "home_score": self.home_score,
            "away_score": self.away_score,
            "competition": self.competition,
            "date": self.date,
            "venue": self.venue,
            "status": self.status.value,
            "sport_type": self.sport_type.value,
            "additional_data": dict(self.additional_data),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameData":
        return cls(
            game_id=str(data["game_id"]),
            home_team=data.get("home_team") or "",
            away_team=data.get("away_team") or "",
            home_score=data.get("home_score"),
            away_score=data.get("away_score"),
            competition=data.get("competition") or "",
            date=data.get("date") or "",
            venue=data.get("venue") or "",
            status=data.get("status") or MatchStatus.SCHEDULED,
            sport_type=data["sport_type"],
            additional_data=dict(data.get("additional_data") or {}),
        )
