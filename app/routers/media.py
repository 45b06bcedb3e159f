# =============================================================================
# app/routers/media.py - Editor Media Endpoints
# =============================================================================
# Upload and delete files used by the video editor.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, File, Form, UploadFile

from app.dependencies import MediaServiceDep
from core.models import DeleteMediaRequest

router = APIRouter()


@router.post("/upload")
def upload_media(
    service: MediaServiceDep,
    uid: Annotated[str | None, Form(description="Owning user")] = None,
    file: Annotated[UploadFile | None, File(description="Media file to upload")] = None,
):
    """
    Upload a media file.

    Returns the public `url` and the storage `key`; the key is needed to
    delete the file later.
    """
    content = file.file.read() if file is not None else None
    result = service.upload_media(
        content=content,
        uid=uid,
        filename=file.filename if file is not None else None,
        content_type=file.content_type if file is not None else None,
    )
    return result.to_envelope()


@router.post("/delete")
def delete_media(request: DeleteMediaRequest, service: MediaServiceDep):
    """Delete an uploaded media file by key."""
    result = service.delete_media(key=request.key)
    return result.to_envelope()
