"""S3 blob store for champion images."""

import asyncio
import secrets
from typing import Any, Optional

import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from ...config import Config

logger = structlog.get_logger()


class BlobStoreError(Exception):
    """Base exception for object store failures."""

    pass


def generate_object_key(original_filename: str, content_type: str) -> str:
    """Build a fresh object key like ``ahri-<32 hex chars>.png``.

    The stem is the original filename up to its first dot and the extension
    is the MIME subtype, so "ahri.final.PNG" sent as image/webp becomes
    "ahri-....webp". 16 random bytes make collisions negligible.
    """
    stem = original_filename.split(".")[0]
    extension = content_type.split("/")[-1]
    return f"{stem}-{secrets.token_hex(16)}.{extension}"


class S3BlobStore:
    """Stores blobs in one S3 bucket and hands out their public URLs.

    boto3 is synchronous, so every call runs in a worker thread.
    """

    def __init__(self, client: Any, bucket: str, region: str):
        """Initialize the blob store.

        Args:
            client: boto3 S3 client
            bucket: Bucket that holds the images
            region: Region of the bucket, used to build public URLs
        """
        self.client = client
        self.bucket = bucket
        self.region = region

    @classmethod
    def from_config(cls, config: Config) -> "S3BlobStore":
        """Create a blob store with a boto3 client built from configuration.

        Empty credentials fall back to boto3's default credential chain.
        """
        client = boto3.client(
            "s3",
            region_name=config.aws_bucket_region,
            aws_access_key_id=config.aws_access_key or None,
            aws_secret_access_key=config.aws_secret_access_key or None,
            endpoint_url=config.aws_endpoint_url or None,
        )
        return cls(client, config.aws_bucket_name, config.aws_bucket_region)

    @property
    def url_prefix(self) -> str:
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/"

    def public_url(self, key: str) -> str:
        """Get the canonical public URL for ``key``."""
        return f"{self.url_prefix}{key}"

    def key_from_url(self, url: str) -> Optional[str]:
        """Recover the object key from a URL produced by ``public_url``.

        URLs written for another bucket or region are still understood as
        long as they point at amazonaws.com. Returns None otherwise.
        """
        if url.startswith(self.url_prefix):
            return url[len(self.url_prefix):]
        _, sep, key = url.partition("amazonaws.com/")
        return key if sep and key else None

    async def put(self, key: str, data: bytes, content_type: str) -> str:
        """Upload ``data`` under ``key`` and return its public URL.

        Raises:
            BlobStoreError: If the upload fails
        """
        try:
            await asyncio.to_thread(
                self.client.put_object,
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
                ContentLength=len(data),
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Failed to upload object", bucket=self.bucket, key=key, error=str(e))
            raise BlobStoreError(f"Failed to upload {key}: {e}") from e

        logger.info("Uploaded object", bucket=self.bucket, key=key, size=len(data))
        return self.public_url(key)

    async def delete(self, key: str) -> None:
        """Delete the object under ``key``. Deleting a missing key is not an error.

        Raises:
            BlobStoreError: If the delete fails for any other reason
        """
        try:
            await asyncio.to_thread(self.client.delete_object, Bucket=self.bucket, Key=key)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") in ("NoSuchKey", "404"):
                logger.info("Object already absent", bucket=self.bucket, key=key)
                return
            logger.error("Failed to delete object", bucket=self.bucket, key=key, error=str(e))
            raise BlobStoreError(f"Failed to delete {key}: {e}") from e
        except BotoCoreError as e:
            logger.error("Failed to delete object", bucket=self.bucket, key=key, error=str(e))
            raise BlobStoreError(f"Failed to delete {key}: {e}") from e

        logger.info("Deleted object", bucket=self.bucket, key=key)
