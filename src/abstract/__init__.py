"""Base classes for entities, repositories, and services."""

from .entity import Entity
from .entity import TimeStampMixin
from .repository import Repository
from .service import Service


__all__ = [
    "Entity",
    "Repository",
    "Service",
    "TimeStampMixin",
]
