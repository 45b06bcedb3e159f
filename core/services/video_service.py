# =============================================================================
# core/services/video_service.py - Video Draft and Job Operations
# =============================================================================
# Handles:
# - Editor drafts (video_temp)
# - Generation jobs (videos)
# - The library listing, which first fails jobs that were abandoned
#
# Abandoned jobs: status "generate", no url, created more than
# STALE_VIDEO_WINDOW ago. The sweep runs for the requesting user only.
# =============================================================================

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable

from app.exceptions import DatabaseError
from core.models.video import VideoStatus
from lib.clients import ServiceContext
from lib.database import Database
from lib.events import LoggingEvents, OperationEvents
from lib.filters import eq, is_null, lt
from lib.operation import operation
from lib.result import Result, fail, ok
from lib.utils import require_text

logger = logging.getLogger(__name__)

DRAFTS_TABLE = "video_temp"

VIDEOS_TABLE = "videos"

STALE_VIDEO_WINDOW = timedelta(hours=3)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class VideoService:
    """
    Service for video drafts and generation jobs.

    `clock` returns the current UTC time; the sweep measures staleness
    against it.
    """

    def __init__(
        self,
        context: ServiceContext,
        events: OperationEvents | None = None,
        database: Database | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.context = context
        self.events = events or LoggingEvents()
        self.db = database or Database(context)
        self.clock = clock

    # -------------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------------

    @operation("create_video_draft", "uid", "title")
    def create_video_draft(self, *, title: str, canvas_info: Any, uid: str) -> Result:
        """
        Save the editor canvas as a draft.

        Returns:
            Success with `id` of the new video_temp row, or Failure
        """
        title = require_text(title, "Video title cannot be empty", field="title")
        uid = require_text(uid, "User UUID cannot be empty", field="uid")
        if not canvas_info:
            return fail("Canvas data cannot be empty", code="VALIDATION_ERROR")

        row = self.db.insert(
            DRAFTS_TABLE,
            {"video_title": title, "canvas_info": canvas_info, "uid": uid},
            stage=f"insert {DRAFTS_TABLE}",
        )
        return ok(id=_inserted_id(row, DRAFTS_TABLE))

    @operation("create_video", "uid", "title")
    def create_video(self, *, uid: str, title: str) -> Result:
        """
        Register a generation job in the "generate" state.

        Returns:
            Success with `id` of the new videos row, or Failure
        """
        uid = require_text(uid, "User UUID cannot be empty", field="uid")
        title = require_text(title, "Video title cannot be empty", field="title")

        row = self.db.insert(
            VIDEOS_TABLE,
            {"uid": uid, "video_title": title, "status": VideoStatus.GENERATE.value},
            stage=f"insert {VIDEOS_TABLE}",
        )
        return ok(id=_inserted_id(row, VIDEOS_TABLE))

    # -------------------------------------------------------------------------
    # Library
    # -------------------------------------------------------------------------

    @operation("sweep_stale_videos", "uid")
    def sweep_stale_videos(self, *, uid: str) -> Result:
        """
        Move the user's abandoned jobs to "error".

        Returns:
            Success with no payload, or Failure
        """
        uid = require_text(uid, "User UUID cannot be empty", field="uid")
        cutoff = self.clock() - STALE_VIDEO_WINDOW

        updated = self.db.update(
            VIDEOS_TABLE,
            {"status": VideoStatus.ERROR.value},
            uid=uid,
            filters=[
                eq("status", VideoStatus.GENERATE.value),
                is_null("url"),
                lt("created_at", cutoff.isoformat()),
            ],
            stage="update statuses",
        )
        if updated:
            logger.info(f"Marked {len(updated)} stale videos as error for user {uid}")
        return ok()

    @operation("list_videos", "uid")
    def list_videos(self, *, uid: str) -> Result:
        """
        List the user's videos, newest first.

        Abandoned jobs are swept first. A failed sweep is logged and the
        listing proceeds with whatever is stored.

        Returns:
            Success with `videos` (list of rows), or Failure
        """
        uid = require_text(uid, "User UUID cannot be empty", field="uid")

        sweep = self.sweep_stale_videos(uid=uid)
        if not sweep.success:
            logger.warning(f"Could not update stale video statuses for {uid}: {sweep.error}")

        videos = self.db.select(
            VIDEOS_TABLE,
            uid=uid,
            order_by="created_at",
            descending=True,
            stage=f"select {VIDEOS_TABLE}",
        )
        return ok(videos=videos)


def _inserted_id(row: dict[str, Any] | None, table: str) -> str:
    """Id of an inserted row; a missing id is its own database failure."""
    if not row or not row.get("id"):
        raise DatabaseError("Could not get the ID of the created record", stage=f"insert {table}", table=table)
    return str(row["id"])
