"""Champion lifecycle service.

Orchestrates image validation, role validation, blob storage and
persistence for the list, get, create, update and delete operations. The
service is the only component that keeps a champion's stored image and its
``image_path`` in step; the repository and blob store know nothing of each
other.
"""

import logging
import math
from typing import Any, Optional

from ..core.entities import Champion, ChampionPage, UploadedFile
from ..core.enums import parse_roles
from ..core.errors import InvalidInputError, NotFoundError
from ..core.validation import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    MAX_PAGE,
    coerce_positive_int,
    normalize_champion_name,
    validate_image,
)
from ..adapters.database.repository import ChampionRepository
from ..adapters.storage.client import S3BlobStore, generate_object_key


logger = logging.getLogger(__name__)


class ChampionService:
    """Champion resource lifecycle with its paired object-storage side effect."""

    def __init__(self, repository: ChampionRepository, blob_store: S3BlobStore):
        """Initialize the champion service.

        Args:
            repository: Champion persistence
            blob_store: Object store holding champion images
        """
        self.repository = repository
        self.blob_store = blob_store

    async def list_champions(self, page: Any = None, limit: Any = None) -> ChampionPage:
        """Get one page of champions.

        ``page`` and ``limit`` may be raw query values; anything missing,
        non-numeric or below 1 falls back to the defaults, and values above
        ``MAX_PAGE`` or ``MAX_LIMIT`` are clamped.
        """
        page = coerce_positive_int(page, DEFAULT_PAGE, MAX_PAGE)
        limit = coerce_positive_int(limit, DEFAULT_LIMIT, MAX_LIMIT)
        offset = (page - 1) * limit

        champions = await self.repository.find_page(offset, limit)
        total = await self.repository.count()

        return ChampionPage(
            page=page,
            limit=limit,
            total_pages=math.ceil(total / limit),
            total_champions=total,
            champions=champions,
        )

    async def get_champion(self, name: str) -> Champion:
        """Get a champion by name, matching any capitalization.

        Raises:
            NotFoundError: If no champion has that name
        """
        lookup_name = normalize_champion_name(name)
        champion = await self.repository.find_by_name(lookup_name)
        if champion is None:
            raise NotFoundError("Champion not found", details={"name": lookup_name})
        return champion

    async def create_champion(
        self,
        name: Optional[str],
        role_csv: Optional[str],
        image: Optional[UploadedFile],
    ) -> Champion:
        """Create a champion and store its image.

        Everything is validated before the upload, so a rejected request
        never leaves an image behind.

        Raises:
            InvalidInputError: Missing image, bad roles or missing name
            RejectedFileError: Unsupported image type or image too large
        """
        image = validate_image(image)
        roles = parse_roles(role_csv)
        if not name or not name.strip():
            raise InvalidInputError("Name is required")
        name = normalize_champion_name(name)

        key = generate_object_key(image.filename, image.content_type)
        image_url = await self.blob_store.put(key, image.data, image.content_type)

        try:
            champion = await self.repository.create(name, roles, image_url)
        except Exception:
            # The uploaded image has no record pointing at it now
            logger.error(f"Failed to save champion {name}; image {key} left orphaned")
            raise

        logger.info(f"Created champion {champion.name} with image {key}")
        return champion

    async def update_champion(
        self,
        name: str,
        new_name: Optional[str] = None,
        role_csv: Optional[str] = None,
        image: Optional[UploadedFile] = None,
    ) -> Champion:
        """Update a champion's name, roles and/or image.

        Empty or missing fields keep their current values. A new image
        replaces the stored one: the old object is deleted before the new one
        is uploaded.

        Raises:
            NotFoundError: If no champion has that name
            InvalidInputError: Bad roles
            RejectedFileError: Unsupported image type or image too large
        """
        champion = await self.get_champion(name)

        if image is not None:
            validate_image(image)
        roles = parse_roles(role_csv) if role_csv else None
        new_name = normalize_champion_name(new_name) if new_name and new_name.strip() else None

        image_url = None
        if image is not None:
            old_key = self.blob_store.key_from_url(champion.image_path)
            if old_key:
                await self.blob_store.delete(old_key)
            else:
                logger.warning(
                    f"Cannot derive object key from {champion.image_path}; old image kept"
                )

            key = generate_object_key(image.filename, image.content_type)
            image_url = await self.blob_store.put(key, image.data, image.content_type)

        updated = await self.repository.update(
            champion.name, new_name=new_name, roles=roles, image_path=image_url
        )
        if updated is None:
            # Deleted or renamed by a concurrent request since the lookup
            raise NotFoundError("Champion not found", details={"name": champion.name})

        logger.info(f"Updated champion {champion.name}")
        return updated

    async def delete_champion(self, name: str) -> None:
        """Delete a champion and its stored image.

        The image is deleted first; if that fails the record is left alone.

        Raises:
            NotFoundError: If no champion has that name
        """
        champion = await self.get_champion(name)

        key = self.blob_store.key_from_url(champion.image_path)
        if key:
            await self.blob_store.delete(key)
        else:
            logger.warning(f"Cannot derive object key from {champion.image_path}; image kept")

        await self.repository.delete(champion.id)
        logger.info(f"Deleted champion {champion.name}")
