"""Tip presentation: view models, demo content and terminal rendering."""

from .render import DashboardData, TipDashboard
from .samples import sample_tips
from .views import TipView, confidence_band

__all__ = [
    "DashboardData",
    "TipDashboard",
    "TipView",
    "confidence_band",
    "sample_tips",
]
