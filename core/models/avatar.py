# =============================================================================
# core/models/avatar.py - Photo Avatar Schemas
# =============================================================================
# A photo avatar row lives in the photo_avatars table. It is created by the
# generation pipeline (not by this API) and can be renamed or deleted here.
#
# An avatar can be addressed by its row id, its HeyGen group id, or the
# storage key of its source image.
#
# Request fields are all optional at the schema level: a missing or blank
# input is reported by the service in the envelope rather than as a 422.
# =============================================================================

from pydantic import BaseModel, Field


class DeleteAvatarRequest(BaseModel):
    """
    Input for deleting a photo avatar.

    At least one of record_id, group_id or image_key must be set. When
    several are set, record_id wins over group_id, which wins over image_key.
    """

    uid: str | None = Field(default=None, description="Owning user")
    record_id: str | None = Field(default=None, description="Row id in photo_avatars")
    group_id: str | None = Field(default=None, description="HeyGen photo avatar group id")
    image_key: str | None = Field(default=None, description="Storage key of the source image")


class RenameAvatarRequest(BaseModel):
    """Input for renaming a photo avatar."""

    uid: str | None = Field(default=None, description="Owning user")
    record_id: str | None = Field(default=None, description="Row id in photo_avatars")
    new_name: str | None = Field(default=None, description="New display name (trimmed)")
