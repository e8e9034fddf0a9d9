"""Match analysis and tip classification."""

from .tip_classifier import (
    MatchStatistics,
    RiskLevel,
    TeamStats,
    TipClassification,
    classify_match,
)

__all__ = [
    "MatchStatistics",
    "RiskLevel",
    "TeamStats",
    "TipClassification",
    "classify_match",
]
