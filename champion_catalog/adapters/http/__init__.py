"""HTTP adapter package."""

from .routes import ChampionCatalogAPI, error_response

__all__ = [
    "ChampionCatalogAPI",
    "error_response",
]
