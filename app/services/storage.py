"""Presigned upload URLs for photo files on S3-compatible object storage (MinIO/OSS)."""

from __future__ import annotations

import logging
import os
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from minio import Minio
from minio.error import MinioException

from app.core.errors import AppError, ErrorKind

if TYPE_CHECKING:
    from app.core.config import Settings

ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp"})
INVALID_EXTENSION_MESSAGE = (
    "Invalid file extension. Only images are allowed (jpg, png, gif, webp, bmp)"
)
OBJECT_KEY_PREFIX = "photos"


@dataclass(frozen=True)
class PresignedUpload:
    upload_url: str
    file_url: str
    object_key: str
    expires_in: int


def is_valid_image_extension(ext: str) -> bool:
    return ext.lower() in ALLOWED_IMAGE_EXTENSIONS


def build_object_key(filename: str, now: datetime | None = None) -> str:
    """photos/YYYY/MM/<uuid4><ext>; raises BAD_REQUEST for non-image extensions."""
    ext = os.path.splitext(filename)[1].lower()
    if not is_valid_image_extension(ext):
        raise AppError(ErrorKind.BAD_REQUEST, INVALID_EXTENSION_MESSAGE)
    month = (now or datetime.now(UTC)).strftime("%Y/%m")
    return f"{OBJECT_KEY_PREFIX}/{month}/{uuid.uuid4()}{ext}"


class StorageService:
    """Issues presigned PUT URLs; the browser uploads straight to the bucket."""

    def __init__(
        self,
        client: Minio,
        bucket: str,
        endpoint: str,
        use_ssl: bool,
        logger: logging.Logger,
        expires: timedelta = timedelta(minutes=15),
    ) -> None:
        self.client = client
        self.bucket = bucket
        self.endpoint = endpoint
        self.use_ssl = use_ssl
        self.logger = logger
        self.expires = expires

    def generate_presigned_upload_url(
        self, filename: str, content_type: str = ""
    ) -> PresignedUpload:
        if content_type and not content_type.lower().startswith("image/"):
            raise AppError(ErrorKind.BAD_REQUEST, "Content type must be an image type")
        object_key = build_object_key(filename)
        try:
            upload_url = self.client.presigned_put_object(
                bucket_name=self.bucket,
                object_name=object_key,
                expires=self.expires,
            )
        except (MinioException, ValueError) as e:
            self.logger.exception("Failed to presign upload: key=%s", object_key)
            raise AppError(ErrorKind.INTERNAL) from e

        self.logger.info("Presigned upload issued: key=%s", object_key)
        return PresignedUpload(
            upload_url=upload_url,
            file_url=self.public_url(object_key),
            object_key=object_key,
            expires_in=int(self.expires.total_seconds()),
        )

    def public_url(self, object_key: str) -> str:
        scheme = "https" if self.use_ssl else "http"
        return f"{scheme}://{self.endpoint}/{self.bucket}/{object_key}"


def build_storage_service(settings: Settings, logger: logging.Logger) -> StorageService | None:
    """
    Create the storage service from OSS_* settings, or None when storage is not
    configured or the bucket cannot be reached. Uploads are then unavailable.
    """
    if not settings.storage_configured:
        logger.warning("Storage not configured (OSS_ENDPOINT/OSS_BUCKET unset); uploads disabled")
        return None

    secret = settings.OSS_ACCESS_KEY_SECRET
    client = Minio(
        endpoint=settings.OSS_ENDPOINT,
        access_key=settings.OSS_ACCESS_KEY_ID,
        secret_key=secret.get_secret_value() if secret is not None else None,
        secure=settings.OSS_USE_SSL,
        region=settings.OSS_REGION,
    )
    try:
        exists = client.bucket_exists(bucket_name=settings.OSS_BUCKET)
    except Exception as e:
        logger.warning("Storage unavailable: bucket check failed: %s", e)
        return None
    if not exists:
        logger.warning("Storage unavailable: bucket %s does not exist", settings.OSS_BUCKET)
        return None

    return StorageService(
        client=client,
        bucket=settings.OSS_BUCKET,
        endpoint=settings.OSS_ENDPOINT,
        use_ssl=settings.OSS_USE_SSL,
        logger=logger,
        expires=timedelta(minutes=settings.UPLOAD_URL_EXPIRE_MINUTES),
    )
