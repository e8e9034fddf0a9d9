"""Database models for the tips store."""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import (
    DateTime,
    Float,
    JSON,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

Base = declarative_base()


def _new_tip_id() -> str:
    return str(uuid.uuid4())


class Tip(Base):
    """A persisted betting tip for one match."""

    __tablename__ = "tips"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_new_tip_id)
    match_id: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    sport_type: Mapped[str] = mapped_column(String(20), nullable=False, index=True)  # football/nba
    tip_type: Mapped[str] = mapped_column(Text, nullable=False)
    confidence_score: Mapped[float] = mapped_column(Float, nullable=False)
    analysis: Mapped[dict] = mapped_column(JSON, nullable=False)  # reasoning, key_stats, risk_level, match_details
    odds: Mapped[Optional[float]] = mapped_column(Float)
    game_data: Mapped[Optional[dict]] = mapped_column(JSON)  # GameData snapshot
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
