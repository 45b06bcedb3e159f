# =============================================================================
# app/routers/videos.py - Video Draft and Job Endpoints
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Query

from app.dependencies import VideoServiceDep
from core.models import (
    CreateVideoDraftRequest,
    CreateVideoRequest,
    SweepVideosRequest,
)

router = APIRouter()


@router.get("")
def list_videos(
    service: VideoServiceDep,
    uid: Annotated[str | None, Query(description="Owning user")] = None,
):
    """
    List the user's videos, newest first.

    Jobs stuck in "generate" for more than three hours are marked as
    "error" before the list is read.
    """
    result = service.list_videos(uid=uid)
    return result.to_envelope()


@router.post("")
def create_video(request: CreateVideoRequest, service: VideoServiceDep):
    """Start a generation job. Returns the new job id."""
    result = service.create_video(uid=request.uid, title=request.title)
    return result.to_envelope()


@router.post("/drafts")
def create_video_draft(request: CreateVideoDraftRequest, service: VideoServiceDep):
    """Save an editor canvas as a draft. Returns the draft id."""
    result = service.create_video_draft(
        title=request.title,
        canvas_info=request.canvas_info,
        uid=request.uid,
    )
    return result.to_envelope()


@router.post("/sweep")
def sweep_stale_videos(request: SweepVideosRequest, service: VideoServiceDep):
    """Mark the user's abandoned jobs as failed."""
    result = service.sweep_stale_videos(uid=request.uid)
    return result.to_envelope()
