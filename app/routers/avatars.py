# =============================================================================
# app/routers/avatars.py - Photo Avatar Endpoints
# =============================================================================
# Every endpoint answers 200 with the operation envelope.
# =============================================================================

from fastapi import APIRouter

from app.dependencies import AvatarServiceDep
from core.models import DeleteAvatarRequest, RenameAvatarRequest

router = APIRouter()


@router.post("/delete")
def delete_avatar(request: DeleteAvatarRequest, service: AvatarServiceDep):
    """
    Delete a photo avatar.

    Removes the HeyGen group first when `group_id` is given, then the row.
    Deleting an avatar that no longer exists succeeds.
    """
    result = service.delete_avatar(
        uid=request.uid,
        record_id=request.record_id,
        group_id=request.group_id,
        image_key=request.image_key,
    )
    return result.to_envelope()


@router.post("/rename")
def rename_avatar(request: RenameAvatarRequest, service: AvatarServiceDep):
    """Rename a photo avatar."""
    result = service.rename_avatar(
        uid=request.uid,
        record_id=request.record_id,
        new_name=request.new_name,
    )
    return result.to_envelope()
