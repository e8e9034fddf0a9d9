"""Betting tip storage and generation."""

from .models import BettingTip, MatchDetails, TipAnalysis
from .repository import TipRepository
from .service import TipService

__all__ = [
    "BettingTip",
    "MatchDetails",
    "TipAnalysis",
    "TipRepository",
    "TipService",
]
