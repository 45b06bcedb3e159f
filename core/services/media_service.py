# =============================================================================
# core/services/media_service.py - Editor Media Uploads
# =============================================================================
# Uploads and deletes user media in the S3-compatible bucket.
# =============================================================================

import logging

from core.models.media import MediaObject
from lib.clients import ServiceContext
from lib.events import LoggingEvents, OperationEvents
from lib.operation import operation
from lib.result import Result, fail, ok
from lib.storage import MediaStorage
from lib.utils import require_text

logger = logging.getLogger(__name__)


class MediaService:
    """
    Service for media objects used in the video editor.

    Handles uploading raw files and deleting them by key.
    """

    def __init__(
        self,
        context: ServiceContext,
        events: OperationEvents | None = None,
        storage: MediaStorage | None = None,
    ):
        self.context = context
        self.events = events or LoggingEvents()
        self.storage = storage or MediaStorage(context)

    @operation("upload_media", "uid", "filename")
    def upload_media(
        self,
        *,
        content: bytes | None,
        uid: str,
        filename: str | None = None,
        content_type: str | None = None,
    ) -> Result:
        """
        Store a file under temp/media/{uid}/.

        Args:
            content: File bytes
            uid: Owning user
            filename: Original filename (only its extension is kept)
            content_type: MIME type; defaults to application/octet-stream

        Returns:
            Success with `url` and `key`, or Failure
        """
        if content is None:
            return fail("No file provided", code="VALIDATION_ERROR")
        uid = require_text(uid, "User UUID cannot be empty", field="uid")

        key = self.storage.build_key(uid, filename)
        self.storage.put(key, content, content_type)

        media = MediaObject(key=key, url=self.storage.public_url(key))
        logger.info(f"Uploaded media for user {uid}: {media.key}")
        return ok(**media.model_dump())

    @operation("delete_media", "key")
    def delete_media(self, *, key: str) -> Result:
        """
        Delete an uploaded file by its key.

        Succeeds when the key doesn't exist.

        Returns:
            Success with no payload, or Failure
        """
        key = require_text(key, "Storage key cannot be empty", field="key")
        self.storage.delete(key)
        return ok()
