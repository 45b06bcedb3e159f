# =============================================================================
# lib/vendors.py - Vendor HTTP Clients
# =============================================================================
# Calls to the avatar/voice vendor:
# - HeygenClient: deletes photo avatar groups
# - VoiceWebhookClient: tells the voice pipeline a cloned voice was removed
#
# Both return the raw status and body as a VendorResponse; deciding whether
# a status is acceptable is up to the calling service. Transport failures
# (DNS, connection refused, timeouts) raise VendorError. No retries.
# =============================================================================

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from app.exceptions import VendorError
from lib.clients import ServiceContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VendorResponse:
    """Status and body of a vendor call."""

    status_code: int
    text: str = ""
    reason: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def tolerated_on_delete(self) -> bool:
        """A delete of something already gone (404) counts as done."""
        return self.ok or self.status_code == 404

    @property
    def message(self) -> str:
        """Body text, falling back to the HTTP reason phrase."""
        return self.text.strip() or self.reason or f"HTTP {self.status_code}"

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> VendorResponse:
        return cls(
            status_code=response.status_code,
            text=response.text,
            reason=response.reason_phrase,
        )


class HeygenClient:
    """HeyGen REST API (photo avatars)."""

    def __init__(self, context: ServiceContext):
        self._context = context

    def delete_photo_avatar_group(self, group_id: str) -> VendorResponse:
        """
        DELETE /v2/photo_avatar_group/{group_id}.

        Raises:
            ConfigurationError: If HEYGEN_API_KEY is missing
            VendorError: If the request could not be sent
        """
        api_key = self._context.heygen_api_key
        base_url = self._context.settings.HEYGEN_API_URL.rstrip("/")
        url = f"{base_url}/v2/photo_avatar_group/{group_id}"

        try:
            response = self._context.http.delete(url, headers={"X-Api-Key": api_key})
        except httpx.HTTPError as e:
            logger.error(f"HeyGen delete request failed for group {group_id}: {e}")
            raise VendorError(f"Could not reach HeyGen: {e}", stage="delete heygen group")

        logger.info(f"HeyGen delete for group {group_id} returned {response.status_code}")
        return VendorResponse.from_httpx(response)


class VoiceWebhookClient:
    """Webhook notified when a user deletes a cloned voice."""

    def __init__(self, context: ServiceContext):
        self._context = context

    def notify_voice_deleted(
        self,
        voice_id: str,
        voice_name: str | None,
        uid: str,
    ) -> VendorResponse:
        """
        POST {voice_id, voice_name, uuid} to the voice webhook.

        Raises:
            VendorError: If the request could not be sent
        """
        url = self._context.settings.VOICE_WEBHOOK_URL
        payload = {
            "voice_id": voice_id,
            "voice_name": voice_name or None,
            "uuid": uid,
        }

        try:
            response = self._context.http.post(url, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Voice webhook request failed for {voice_id}: {e}")
            raise VendorError(f"Could not reach voice webhook: {e}", stage="webhook")

        logger.info(f"Voice webhook for {voice_id} returned {response.status_code}")
        return VendorResponse.from_httpx(response)
