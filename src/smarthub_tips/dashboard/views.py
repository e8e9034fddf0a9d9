"""Display-ready views of betting tips."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional

from ..analysis import RiskLevel
from ..data.models import MatchStatus
from ..tips.models import BettingTip

PLACEHOLDERS = {
    "home_team": "Home Team",
    "away_team": "Away Team",
    "competition": "Competition",
    "venue": "Venue",
}

RISK_LABELS = {
    RiskLevel.LOW: "Low Risk",
    RiskLevel.MEDIUM: "Medium Risk",
    RiskLevel.HIGH: "High Risk",
}

RISK_STYLES = {
    RiskLevel.LOW: "green",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.HIGH: "red",
}

STATUS_LABELS = {
    MatchStatus.LIVE: "LIVE",
    MatchStatus.FINISHED: "Finished",
    MatchStatus.SCHEDULED: "Scheduled",
}

STATUS_STYLES = {
    MatchStatus.LIVE: "bold red",
    MatchStatus.FINISHED: "dim",
    MatchStatus.SCHEDULED: "blue",
}


def confidence_band(confidence: float) -> str:
    """Categorize a confidence score into high/medium/low."""
    if confidence >= 0.8:
        return "high"
    elif confidence >= 0.6:
        return "medium"
    else:
        return "low"


CONFIDENCE_STYLES = {
    "high": "bold green",
    "medium": "bold yellow",
    "low": "bold dark_orange",
}


def _pick(tip: BettingTip, name: str) -> Optional[str]:
    """Field from game_data, falling back to the creation-time snapshot."""
    if tip.game_data is not None:
        value = getattr(tip.game_data, name, None)
        if value:
            return value
    details = tip.analysis.match_details
    if details is not None:
        value = getattr(details, name, None)
        if value:
            return value
    return None


@dataclass
class TipView:
    """Everything the dashboard shows for one tip."""

    tip_id: str
    tip_type: str
    confidence_score: float
    home_team: str
    away_team: str
    competition: str
    venue: str
    date: str
    status: MatchStatus
    home_score: Optional[int]
    away_score: Optional[int]
    reasoning: str
    key_stats: List[str]
    risk_level: RiskLevel
    odds: Optional[float] = None

    @classmethod
    def from_tip(cls, tip: BettingTip) -> "TipView":
        """Resolve display fields, preferring live game data field by field."""
        game = tip.game_data
        status = game.status if game is not None else MatchStatus.SCHEDULED

        return cls(
            tip_id=tip.id,
            tip_type=tip.tip_type,
            confidence_score=tip.confidence_score,
            home_team=_pick(tip, "home_team") or PLACEHOLDERS["home_team"],
            away_team=_pick(tip, "away_team") or PLACEHOLDERS["away_team"],
            competition=_pick(tip, "competition") or PLACEHOLDERS["competition"],
            venue=_pick(tip, "venue") or PLACEHOLDERS["venue"],
            date=_pick(tip, "date") or datetime.now(timezone.utc).isoformat(),
            status=status,
            home_score=game.home_score if game is not None else None,
            away_score=game.away_score if game is not None else None,
            reasoning=tip.analysis.reasoning,
            key_stats=list(tip.analysis.key_stats),
            risk_level=tip.analysis.risk_level,
            odds=tip.odds,
        )

    @property
    def show_score(self) -> bool:
        return self.status in (MatchStatus.LIVE, MatchStatus.FINISHED)

    @property
    def scoreline(self) -> Optional[str]:
        """Score once play has started, missing scores shown as 0."""
        if not self.show_score:
            return None
        return f"{self.home_score or 0} - {self.away_score or 0}"

    @property
    def confidence_pct(self) -> int:
        return round(self.confidence_score * 100)

    @property
    def confidence_band(self) -> str:
        return confidence_band(self.confidence_score)

    @property
    def risk_label(self) -> str:
        return RISK_LABELS[self.risk_level]

    @property
    def status_label(self) -> str:
        return STATUS_LABELS[self.status]

    @property
    def kickoff(self) -> str:
        """Match date formatted for display; raw value if unparseable."""
        try:
            parsed = datetime.fromisoformat(self.date.replace("Z", "+00:00"))
        except ValueError:
            return self.date
        return parsed.strftime("%d/%m/%Y %H:%M")
