"""Domain errors raised by the champion catalog services."""

from typing import Any, Dict, Optional


class ChampionCatalogError(Exception):
    """Base exception for champion catalog errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidInputError(ChampionCatalogError):
    """The caller supplied a missing or malformed value."""

    pass


class RejectedFileError(InvalidInputError):
    """An uploaded file has an unsupported type or is too large."""

    pass


class NotFoundError(ChampionCatalogError):
    """The requested record does not exist."""

    pass


class UnauthorizedError(ChampionCatalogError):
    """Credentials were rejected."""

    pass
