# =============================================================================
# core/models/voice.py - Cloned Voice Schemas
# =============================================================================

from pydantic import BaseModel, Field


class DeleteVoiceRequest(BaseModel):
    """Input for deleting a cloned voice."""

    uid: str | None = Field(default=None, description="Owning user")
    voice_id: str | None = Field(default=None, description="Row id in voices")


class UpdateVoiceRequest(BaseModel):
    """Input for renaming a voice and setting its description."""

    uid: str | None = Field(default=None, description="Owning user")
    voice_id: str | None = Field(default=None, description="Row id in voices")
    name: str | None = Field(default=None, description="New display name (trimmed)")
    description: str | None = Field(
        default=None,
        description="New description; blank clears it"
    )
