"""Pure validation and normalization rules for champion requests."""

from typing import Any, Optional

from .entities import UploadedFile
from .errors import InvalidInputError, RejectedFileError

ACCEPTED_IMAGE_TYPES = frozenset({"image/png", "image/jpg", "image/jpeg", "image/webp"})
MAX_IMAGE_BYTES = 5 * 1024 * 1024  # 5 MiB

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

# Keeps (page - 1) * limit well inside a PostgreSQL bigint OFFSET
MAX_PAGE = 1_000_000
MAX_LIMIT = 1_000


def normalize_champion_name(name: str) -> str:
    """Return the canonical lookup key for a champion name.

    The first character is upper-cased and the remainder lower-cased, so
    "aHRI", "ahri" and " Ahri " all map to "Ahri".
    """
    name = name.strip()
    return name[:1].upper() + name[1:].lower()


def coerce_positive_int(value: Any, default: int, maximum: Optional[int] = None) -> int:
    """Coerce a query parameter to a positive int, falling back to ``default``.

    Values above ``maximum`` are clamped to it.
    """
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if number < 1:
        return default
    if maximum is not None and number > maximum:
        return maximum
    return number


def validate_image(image: Optional[UploadedFile]) -> UploadedFile:
    """Check that an image is present, of an accepted type and small enough.

    Checks run in that order and the first failure wins.
    """
    if image is None:
        raise InvalidInputError("Image is required")

    if image.content_type not in ACCEPTED_IMAGE_TYPES:
        raise RejectedFileError(
            "Invalid file type", details={"content_type": image.content_type}
        )

    if image.size > MAX_IMAGE_BYTES:
        raise RejectedFileError(
            "File is too large", details={"size": image.size, "max_size": MAX_IMAGE_BYTES}
        )

    return image
