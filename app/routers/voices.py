# =============================================================================
# app/routers/voices.py - Cloned Voice Endpoints
# =============================================================================

from fastapi import APIRouter

from app.dependencies import VoiceServiceDep
from core.models import DeleteVoiceRequest, UpdateVoiceRequest

router = APIRouter()


@router.post("/delete")
def delete_voice(request: DeleteVoiceRequest, service: VoiceServiceDep):
    """
    Delete a cloned voice.

    The voice webhook is notified before the row is removed.
    """
    result = service.delete_voice(uid=request.uid, voice_id=request.voice_id)
    return result.to_envelope()


@router.post("/update")
def update_voice(request: UpdateVoiceRequest, service: VoiceServiceDep):
    """Rename a voice and set its description."""
    result = service.update_voice(
        uid=request.uid,
        voice_id=request.voice_id,
        name=request.name,
        description=request.description,
    )
    return result.to_envelope()
