"""Core infrastructure module"""

from .config import get_settings


settings = get_settings()

__all__ = [
    "settings",
    "get_settings",
]
