"""Application layer for the Champion Catalog.

This layer contains the services that orchestrate domain rules, storage and
persistence for each API operation.
"""

from .auth_service import AuthService
from .champion_service import ChampionService

__all__ = [
    "AuthService",
    "ChampionService",
]
