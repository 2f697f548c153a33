"""Database adapter package."""

from .manager import DatabaseManager
from .repository import ChampionRepository, UserRepository, DuplicateRecordError

__all__ = [
    "DatabaseManager",
    "ChampionRepository",
    "UserRepository",
    "DuplicateRecordError",
]
