"""Core entities for the champion catalog."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .enums import Role


@dataclass
class Champion:
    """A catalog champion with its role tags and stored image."""

    name: str
    role: List[Role]
    image_path: str

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Database ID
    id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON shape served by the API."""
        return {
            "id": self.id,
            "name": self.name,
            "role": [role.value for role in self.role],
            "imagePath": self.image_path,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __str__(self) -> str:
        return f"Champion({self.name})"


@dataclass
class User:
    """A registered API user. ``password_hash`` never leaves the service."""

    email: str
    password_hash: str = field(repr=False)

    created_at: Optional[datetime] = None

    # Database ID
    id: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass
class UploadedFile:
    """An image received from a client, held in memory."""

    filename: str
    content_type: str
    data: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class ChampionPage:
    """One page of the champion listing."""

    page: int
    limit: int
    total_pages: int
    total_champions: int
    champions: List[Champion]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "limit": self.limit,
            "totalPages": self.total_pages,
            "totalChampions": self.total_champions,
            "champions": [champion.to_dict() for champion in self.champions],
        }
