"""Request/response schemas for presigned uploads."""

from pydantic import Field

from app.schemas.common import CamelModel


class UploadTokenRequest(CamelModel):
    """Body for POST /storage/upload-token."""

    filename: str = Field(..., min_length=1, max_length=255)
    content_type: str = Field(default="", max_length=255)


class UploadTokenResponse(CamelModel):
    """Presigned PUT URL plus the public URL the object will have once uploaded."""

    upload_url: str
    file_url: str
    object_key: str
    expires_in: int = Field(..., ge=1, description="Seconds until upload_url expires")
