"""Configuration module.

Usage:
    from smarthub_tips.config import get_settings

    settings = get_settings()
    print(settings.api_football_key)
    print(settings.refresh_batch_size)
"""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
