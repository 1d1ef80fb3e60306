"""
Profile image storage on Cloudflare R2.
Handles validation, upload and disposal of staff images.
"""

import hashlib
import logging
from datetime import datetime, timezone
from typing import Optional, Tuple

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from .config import (
    MAX_IMAGE_SIZE,
    R2_ACCESS_KEY_ID,
    R2_ACCOUNT_ID,
    R2_BUCKET_NAME,
    R2_SECRET_ACCESS_KEY,
)

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_TYPES = [
    "image/png",
    "image/jpeg",
    "image/jpg",
    "image/webp",
    "image/gif",
]
ALLOWED_IMAGE_EXTENSIONS = ["png", "jpg", "jpeg", "webp", "gif"]


def get_r2_client():
    """Get configured boto3 client for Cloudflare R2"""
    return boto3.client(
        "s3",
        endpoint_url=f"https://{R2_ACCOUNT_ID}.r2.cloudflarestorage.com",
        aws_access_key_id=R2_ACCESS_KEY_ID,
        aws_secret_access_key=R2_SECRET_ACCESS_KEY,
        config=Config(signature_version="s3v4"),
        region_name="auto",
    )


def validate_image_file(filename: str, size_bytes: int, mime_type: Optional[str]) -> Tuple[bool, Optional[str]]:
    """
    Validate an image before upload.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if size_bytes == 0:
        return False, "Image file is empty"

    if size_bytes > MAX_IMAGE_SIZE:
        return False, f"Image size exceeds maximum of {MAX_IMAGE_SIZE / (1024 * 1024):.0f}MB"

    if mime_type not in ALLOWED_IMAGE_TYPES:
        return False, "Invalid file type. Only PNG, JPEG, WebP and GIF images are allowed."

    ext = filename.lower().rsplit(".", 1)[-1] if "." in filename else ""
    if ext not in ALLOWED_IMAGE_EXTENSIONS:
        return False, f"File extension not allowed. Use: {', '.join(ALLOWED_IMAGE_EXTENSIONS)}"

    return True, None


def generate_image_key(staff_id: int, filename: str) -> str:
    """
    Generate a unique R2 key for a staff image.

    Format: staff-images/{staff_id}/{timestamp}_{hash}_{filename}
    """
    timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S")
    file_hash = hashlib.md5(f"{staff_id}{timestamp}{filename}".encode()).hexdigest()[:8]
    safe_filename = "".join(c for c in filename if c.isalnum() or c in "._-")[:100]

    return f"staff-images/{staff_id}/{timestamp}_{file_hash}_{safe_filename}"


class ImageStorage:
    """Private bucket holding staff profile images"""

    def __init__(self, client=None, bucket: str = R2_BUCKET_NAME):
        self._client = client
        self.bucket = bucket

    @property
    def client(self):
        if self._client is None:
            self._client = get_r2_client()
        return self._client

    def upload(self, staff_id: int, filename: str, content: bytes, mime_type: str) -> str:
        """Upload an image and return its key. Raises on storage errors."""
        key = generate_image_key(staff_id, filename)
        self.client.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=content,
            ContentType=mime_type,
        )
        logger.info(f"✅ Uploaded staff image: {key}")
        return key

    def delete(self, key: str) -> bool:
        """Delete an image. Failures are logged, never raised."""
        try:
            self.client.delete_object(Bucket=self.bucket, Key=key)
            logger.info(f"🗑️ Deleted staff image: {key}")
            return True
        except (ClientError, BotoCoreError) as e:
            logger.error(f"❌ Failed to delete staff image {key}: {e}")
            return False


def get_image_storage() -> ImageStorage:
    """FastAPI dependency for image storage"""
    return ImageStorage()
