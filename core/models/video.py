# =============================================================================
# core/models/video.py - Video Job Schemas
# =============================================================================
# These models cover two tables:
# - video_temp: editor drafts holding the raw canvas payload
# - videos: generation jobs shown in the user's library
#
# A job starts in "generate". The pipeline fills `url` when the render is
# done; a job still in "generate" with no url after the staleness window
# is moved to "error".
# =============================================================================

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class VideoStatus(str, Enum):
    """
    Stored status of a video job.

    - generate: render requested, pipeline still working
    - error: render failed or was abandoned

    Completion isn't a status value; it is a non-null `url`.
    """
    GENERATE = "generate"
    ERROR = "error"


class CreateVideoDraftRequest(BaseModel):
    """Input for saving an editor draft."""

    title: str | None = Field(default=None, description="Video title")
    canvas_info: Any = Field(default=None, description="Editor canvas payload, stored as JSON")
    uid: str | None = Field(default=None, description="Owning user")


class CreateVideoRequest(BaseModel):
    """Input for starting a generation job."""

    uid: str | None = Field(default=None, description="Owning user")
    title: str | None = Field(default=None, description="Video title")


class SweepVideosRequest(BaseModel):
    """Input for marking a user's abandoned jobs as failed."""

    uid: str | None = Field(default=None, description="Owning user")
