"""Database models and operations."""

from .models import Base, Tip
from .session import get_engine, get_session, get_session_factory, init_db

__all__ = [
    "Base",
    "Tip",
    "get_engine",
    "get_session",
    "get_session_factory",
    "init_db",
]
