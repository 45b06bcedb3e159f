# =============================================================================
# core/models/media.py - Media Object Schemas
# =============================================================================

from pydantic import BaseModel, Field


class MediaObject(BaseModel):
    """
    An uploaded media file.

    Not stored in the database; the key is the only handle.
    """

    key: str = Field(..., description="Object key: temp/media/{uid}/{timestamp}_{random}.{ext}")
    url: str = Field(..., description="Public URL: {endpoint}/{bucket}/{key}")


class DeleteMediaRequest(BaseModel):
    """Input for deleting an uploaded media file."""

    key: str | None = Field(default=None, description="Object key returned by the upload")
