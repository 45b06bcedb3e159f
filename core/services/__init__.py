# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .avatar_service import AvatarService
from .media_service import MediaService
from .video_service import STALE_VIDEO_WINDOW, VideoService
from .voice_service import VoiceService

__all__ = [
    "AvatarService",
    "MediaService",
    "STALE_VIDEO_WINDOW",
    "VideoService",
    "VoiceService",
]
