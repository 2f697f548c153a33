"""Object storage adapter package.

This package contains the S3 blob store used for champion images.
"""

from .client import BlobStoreError, S3BlobStore, generate_object_key

__all__ = [
    "BlobStoreError",
    "S3BlobStore",
    "generate_object_key",
]
