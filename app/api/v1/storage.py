"""Presigned upload URLs so the admin UI can upload images straight to the bucket."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.deps import get_storage_service
from app.api.v1.auth import get_current_user
from app.schemas.storage import UploadTokenRequest, UploadTokenResponse
from app.services.storage import StorageService

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post("/upload-token", response_model=UploadTokenResponse)
def generate_upload_token(
    body: UploadTokenRequest,
    storage: Annotated[StorageService, Depends(get_storage_service)],
) -> UploadTokenResponse:
    """
    Return a presigned PUT URL for an image file plus the URL it will be served from.
    503 when object storage is not configured.
    """
    upload = storage.generate_presigned_upload_url(body.filename, body.content_type)
    return UploadTokenResponse(
        upload_url=upload.upload_url,
        file_url=upload.file_url,
        object_key=upload.object_key,
        expires_in=upload.expires_in,
    )
