# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
#
# One ServiceContext exists per process; services are cheap wrappers built
# per request around it.
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.config import get_settings
from core.services import AvatarService, MediaService, VideoService, VoiceService
from lib.clients import ServiceContext
from lib.events import LoggingEvents


@lru_cache
def get_context() -> ServiceContext:
    """
    Get the process-wide client context.

    Clients inside it are built lazily, so this never fails on missing
    configuration.
    """
    return ServiceContext(get_settings())


@lru_cache
def get_events() -> LoggingEvents:
    """Get the shared operation event sink."""
    return LoggingEvents()


ContextDep = Annotated[ServiceContext, Depends(get_context)]
EventsDep = Annotated[LoggingEvents, Depends(get_events)]


def get_avatar_service(context: ContextDep, events: EventsDep) -> AvatarService:
    return AvatarService(context, events)


def get_voice_service(context: ContextDep, events: EventsDep) -> VoiceService:
    return VoiceService(context, events)


def get_video_service(context: ContextDep, events: EventsDep) -> VideoService:
    return VideoService(context, events)


def get_media_service(context: ContextDep, events: EventsDep) -> MediaService:
    return MediaService(context, events)


# Type aliases for dependency injection
AvatarServiceDep = Annotated[AvatarService, Depends(get_avatar_service)]
VoiceServiceDep = Annotated[VoiceService, Depends(get_voice_service)]
VideoServiceDep = Annotated[VideoService, Depends(get_video_service)]
MediaServiceDep = Annotated[MediaService, Depends(get_media_service)]
