# =============================================================================
# core/services/voice_service.py - Cloned Voice Operations
# =============================================================================
# Rename and delete cloned voices.
#
# A voice is deleted in three steps:
#   1. read the row to get the vendor voice_id
#   2. notify the voice webhook
#   3. delete the row
# Any failure stops the sequence, so a row is only removed after the vendor
# side has been told.
# =============================================================================

import logging

from lib.clients import ServiceContext
from lib.database import Database
from lib.events import LoggingEvents, OperationEvents
from lib.filters import eq
from lib.operation import operation
from lib.result import Result, fail, ok
from lib.utils import clean_text, require_text
from lib.vendors import VoiceWebhookClient

logger = logging.getLogger(__name__)

TABLE = "voices"


class VoiceService:
    """Service for cloned voice operations."""

    def __init__(
        self,
        context: ServiceContext,
        events: OperationEvents | None = None,
        database: Database | None = None,
        webhook: VoiceWebhookClient | None = None,
    ):
        self.context = context
        self.events = events or LoggingEvents()
        self.db = database or Database(context)
        self.webhook = webhook or VoiceWebhookClient(context)

    @operation("delete_voice", "uid", "voice_id")
    def delete_voice(self, *, uid: str, voice_id: str) -> Result:
        """
        Delete a cloned voice owned by `uid`.

        Args:
            uid: Owning user
            voice_id: Row id in the voices table (not the vendor id)

        Returns:
            Success with no payload, or Failure
        """
        uid = require_text(uid, "User not found", field="uid")
        voice_id = require_text(voice_id, "Voice ID is required", field="voice_id")
        by_id = [eq("id", voice_id)]

        voice = self.db.select_one(
            TABLE,
            uid=uid,
            columns="voice_id, name",
            filters=by_id,
            stage="fetch voice",
        )
        if not voice:
            return fail("Voice not found", code="DATABASE_ERROR", stage="fetch voice")

        vendor_voice_id = clean_text(voice.get("voice_id"))
        if not vendor_voice_id:
            return fail("No vendor voice_id found for this voice", code="DATABASE_ERROR", stage="fetch voice")

        response = self.webhook.notify_voice_deleted(vendor_voice_id, voice.get("name"), uid)
        if not response.ok:
            return fail(
                f"Failed to send webhook: {response.message}",
                code="VENDOR_ERROR",
                stage="webhook",
            )

        self.db.delete(TABLE, uid=uid, filters=by_id, stage="delete voice record")
        logger.info(f"Deleted voice {voice_id} ({vendor_voice_id}) for user {uid}")
        return ok()

    @operation("update_voice", "uid", "voice_id")
    def update_voice(
        self,
        *,
        uid: str,
        voice_id: str,
        name: str,
        description: str | None = None,
    ) -> Result:
        """
        Rename a voice and set its description.

        A blank description is stored as null.

        Returns:
            Success with no payload, or Failure
        """
        uid = require_text(uid, "User not found", field="uid")
        voice_id = require_text(voice_id, "Voice ID is required", field="voice_id")
        name = require_text(name, "Name cannot be empty", field="name")

        self.db.update(
            TABLE,
            {"name": name, "description": clean_text(description)},
            uid=uid,
            filters=[eq("id", voice_id)],
            stage="update voice record",
        )
        return ok()
