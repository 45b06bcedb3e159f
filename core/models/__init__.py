# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - avatar.py: Photo avatar rows and requests
# - voice.py: Cloned voice rows and requests
# - video.py: Video drafts, jobs and statuses
# - media.py: Uploaded media objects
#
# These models define the "contract" between API and clients.
# =============================================================================

from .avatar import DeleteAvatarRequest, RenameAvatarRequest
from .media import DeleteMediaRequest, MediaObject
from .video import (
    CreateVideoDraftRequest,
    CreateVideoRequest,
    SweepVideosRequest,
    VideoStatus,
)
from .voice import DeleteVoiceRequest, UpdateVoiceRequest

__all__ = [
    # Avatar
    "DeleteAvatarRequest",
    "RenameAvatarRequest",
    # Media
    "DeleteMediaRequest",
    "MediaObject",
    # Video
    "CreateVideoDraftRequest",
    "CreateVideoRequest",
    "SweepVideosRequest",
    "VideoStatus",
    # Voice
    "DeleteVoiceRequest",
    "UpdateVoiceRequest",
]
