"""Utility modules for the tips dashboard."""

from .logging import setup_logging

__all__ = [
    "setup_logging",
]
