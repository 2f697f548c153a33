"""Core layer for the champion catalog.

This module provides the domain entities, the role enum and the validation
rules shared by the application services.
"""

from .entities import Champion, ChampionPage, UploadedFile, User
from .enums import Role, parse_roles
from .errors import (
    ChampionCatalogError,
    InvalidInputError,
    NotFoundError,
    RejectedFileError,
    UnauthorizedError,
)
from .validation import (
    ACCEPTED_IMAGE_TYPES,
    MAX_IMAGE_BYTES,
    MAX_LIMIT,
    MAX_PAGE,
    coerce_positive_int,
    normalize_champion_name,
    validate_image,
)

__all__ = [
    "Champion",
    "ChampionPage",
    "UploadedFile",
    "User",
    "Role",
    "parse_roles",
    "ChampionCatalogError",
    "InvalidInputError",
    "NotFoundError",
    "RejectedFileError",
    "UnauthorizedError",
    "ACCEPTED_IMAGE_TYPES",
    "MAX_IMAGE_BYTES",
    "MAX_LIMIT",
    "MAX_PAGE",
    "coerce_positive_int",
    "normalize_champion_name",
    "validate_image",
]
