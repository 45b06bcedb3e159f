# =============================================================================
# lib/storage.py - Media Object Storage
# =============================================================================
# Put/delete of user media in the S3-compatible bucket.
#
# Keys follow temp/media/{uid}/{epoch_ms}_{random}.{ext}. Media objects are
# not tracked in the database; the key returned at upload time is the only
# handle to them.
#
# S3 DeleteObject answers 204 whether or not the key exists, so deleting an
# unknown key is a successful no-op.
# =============================================================================

import logging
import time
import uuid

from botocore.exceptions import BotoCoreError, ClientError

from app.exceptions import StorageError
from lib.clients import ServiceContext

logger = logging.getLogger(__name__)

MEDIA_PREFIX = "temp/media"

DEFAULT_EXTENSION = "bin"

DEFAULT_CONTENT_TYPE = "application/octet-stream"


def file_extension(filename: str | None) -> str:
    """
    Extension of an uploaded filename, without the dot.

    Example:
        file_extension("clip.final.mp4")  # "mp4"
        file_extension("README")          # "bin"
    """
    if not filename or "." not in filename:
        return DEFAULT_EXTENSION
    extension = filename.rsplit(".", 1)[1].strip()
    return extension or DEFAULT_EXTENSION


class MediaStorage:
    """Gateway over the S3 client and bucket held by a ServiceContext."""

    def __init__(self, context: ServiceContext):
        self._context = context

    @staticmethod
    def build_key(uid: str, filename: str | None) -> str:
        """Build a fresh object key for a user's upload."""
        timestamp = int(time.time() * 1000)
        suffix = uuid.uuid4().hex[:7]
        return f"{MEDIA_PREFIX}/{uid}/{timestamp}_{suffix}.{file_extension(filename)}"

    def public_url(self, key: str) -> str:
        """Public URL of an object: {endpoint}/{bucket}/{key}."""
        return f"{self._context.storage_endpoint}/{self._context.bucket}/{key}"

    def put(self, key: str, body: bytes, content_type: str | None = None) -> None:
        """
        Upload an object.

        Raises:
            StorageError: If the upload fails
        """
        client = self._context.s3
        bucket = self._context.bucket

        try:
            client.put_object(
                Bucket=bucket,
                Key=key,
                Body=body,
                ContentType=content_type or DEFAULT_CONTENT_TYPE,
            )
            logger.info(f"Uploaded object to storage: {bucket}/{key}")
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Storage upload failed: {e}")
            raise StorageError(f"Failed to upload file: {e}", stage="put object", key=key)

    def delete(self, key: str) -> None:
        """
        Delete an object. Deleting a key that doesn't exist is not an error.

        Raises:
            StorageError: If the storage backend rejects the request
        """
        client = self._context.s3
        bucket = self._context.bucket

        try:
            client.delete_object(Bucket=bucket, Key=key)
            logger.info(f"Deleted object from storage: {bucket}/{key}")
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Storage delete failed: {e}")
            raise StorageError(f"Failed to delete file: {e}", stage="delete object", key=key)
