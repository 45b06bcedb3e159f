# =============================================================================
# core/services/avatar_service.py - Photo Avatar Operations
# =============================================================================
# Rename and delete photo avatars.
#
# Deleting an avatar that has a HeyGen group removes it from HeyGen first.
# If HeyGen can't confirm (anything other than 2xx or 404), the row is kept
# so the vendor resource never loses its local reference.
# =============================================================================

import logging

from lib.clients import ServiceContext
from lib.database import Database
from lib.events import LoggingEvents, OperationEvents
from lib.filters import eq, first_candidate
from lib.operation import operation
from lib.result import Result, fail, ok
from lib.utils import clean_text, require_text
from lib.vendors import HeygenClient

logger = logging.getLogger(__name__)

TABLE = "photo_avatars"


class AvatarService:
    """
    Service for photo avatar operations.

    Provides a clean interface between API routes and the database/vendor.
    """

    def __init__(
        self,
        context: ServiceContext,
        events: OperationEvents | None = None,
        database: Database | None = None,
        heygen: HeygenClient | None = None,
    ):
        self.context = context
        self.events = events or LoggingEvents()
        self.db = database or Database(context)
        self.heygen = heygen or HeygenClient(context)

    @operation("delete_avatar", "uid", "record_id", "group_id", "image_key")
    def delete_avatar(
        self,
        *,
        uid: str,
        record_id: str | None = None,
        group_id: str | None = None,
        image_key: str | None = None,
    ) -> Result:
        """
        Delete a photo avatar owned by `uid`.

        The row is matched by exactly one identifier, in precedence order:
        record_id, then group_id, then image_key.

        Deleting an avatar that is already gone succeeds: HeyGen's 404 is
        accepted and a delete that matches no rows is not an error.

        Returns:
            Success with no payload, or Failure
        """
        uid = require_text(uid, "User not found", field="uid")
        target = first_candidate([
            ("id", record_id),
            ("group_id", group_id),
            ("image_key", image_key),
        ])
        if target is None:
            return fail("No avatar identifier provided", code="VALIDATION_ERROR")

        group_id = clean_text(group_id)
        if group_id:
            response = self.heygen.delete_photo_avatar_group(group_id)
            if not response.tolerated_on_delete:
                return fail(
                    f"Failed to delete avatar in HeyGen: {response.message}",
                    code="VENDOR_ERROR",
                    stage="delete heygen group",
                )

        deleted = self.db.delete(TABLE, uid=uid, filters=[target], stage=f"delete {TABLE}")
        logger.info(f"Deleted {len(deleted)} avatar rows by {target.column} for user {uid}")
        return ok()

    @operation("rename_avatar", "uid", "record_id")
    def rename_avatar(self, *, uid: str, record_id: str, new_name: str) -> Result:
        """
        Set the display name of a photo avatar.

        Returns:
            Success with no payload, or Failure
        """
        uid = require_text(uid, "User not found", field="uid")
        record_id = require_text(record_id, "Record ID is required", field="record_id")
        name = require_text(new_name, "Name cannot be empty", field="new_name")

        self.db.update(
            TABLE,
            {"name": name},
            uid=uid,
            filters=[eq("id", record_id)],
            stage=f"update {TABLE}",
        )
        return ok()
