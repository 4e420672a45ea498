"""
Storage for uploaded photos.

When STORAGE_BUCKET is configured, files go to a Google Cloud Storage bucket
and callers get the blob's public URL back. Otherwise files are written to
the local upload directory and served by the API under /uploads/.
"""

import os
import logging
import random
import re
from datetime import datetime
from io import BytesIO
from typing import Optional, Tuple

from kcssc.core.config import get_cached_settings
from kcssc.core.exceptions import StorageError, UploadTooLargeError, ValidationError
from kcssc.schemas.upload import UploadResponse

logger = logging.getLogger(__name__)

STORAGE_AVAILABLE = False
gcs_client = None
storage_bucket = None
storage_init_error = None
last_upload_error: Optional[str] = None

_settings = get_cached_settings()
UPLOAD_DIR = _settings.upload_dir
MAX_UPLOAD_SIZE = _settings.max_upload_size
UPLOAD_URL_PREFIX = "/uploads/"
STORAGE_PREFIX = "photos/"

ALLOWED_MIME_TYPES = {'image/jpeg', 'image/jpg', 'image/png', 'image/gif', 'image/webp'}

CONTENT_TYPES = {
    '.jpg': 'image/jpeg',
    '.jpeg': 'image/jpeg',
    '.png': 'image/png',
    '.gif': 'image/gif',
    '.webp': 'image/webp',
}


def init_gcs_storage(bucket_name: Optional[str]) -> bool:
    """Initializes the Google Cloud Storage bucket using application default credentials."""
    global gcs_client, storage_bucket, STORAGE_AVAILABLE, storage_init_error

    if not bucket_name:
        storage_init_error = "STORAGE_BUCKET not set"
        logger.info("STORAGE_BUCKET not set - uploads are stored on the local filesystem")
        return False

    try:
        from google.cloud import storage as gcs

        gcs_client = gcs.Client()
        storage_bucket = gcs_client.bucket(bucket_name)
        STORAGE_AVAILABLE = True
        storage_init_error = None
        logger.info(f"GCS storage initialized with bucket: {bucket_name}")
        return True
    except Exception as e:
        storage_init_error = str(e)
        gcs_client = None
        storage_bucket = None
        STORAGE_AVAILABLE = False
        logger.warning(f"Failed to initialize GCS, using local filesystem: {e}")
        return False


def is_storage_available() -> bool:
    return STORAGE_AVAILABLE and storage_bucket is not None


def get_storage_key(filename: str) -> str:
    return f"{STORAGE_PREFIX}{filename}"


def get_content_type(filename: str) -> str:
    ext = os.path.splitext(filename)[1].lower()
    return CONTENT_TYPES.get(ext, 'application/octet-stream')


def upload_file(file_content: bytes, filename: str, content_type: Optional[str] = None) -> Tuple[bool, str]:
    """
    Stores an uploaded image.

    Args:
        file_content: File bytes
        filename: Already sanitized, unique file name
        content_type: MIME type reported by the client

    Returns:
        Tuple[bool, str]: (success, public URL / local path or error message)
    """
    global last_upload_error

    if storage_bucket is not None:
        storage_key = get_storage_key(filename)
        try:
            blob = storage_bucket.blob(storage_key)
            blob.upload_from_string(file_content, content_type=content_type or get_content_type(filename))
            logger.info(f"File '{storage_key}' uploaded to GCS")
            last_upload_error = None
            return True, blob.public_url
        except Exception as e:
            error_msg = f"GCS upload failed: {str(e)}"
            logger.error(error_msg)
            last_upload_error = error_msg
            return False, error_msg

    return _upload_local_fallback(file_content, filename)


def _upload_local_fallback(file_content: bytes, filename: str) -> Tuple[bool, str]:
    global last_upload_error
    try:
        os.makedirs(UPLOAD_DIR, exist_ok=True)
        file_path = os.path.join(UPLOAD_DIR, filename)
        with open(file_path, "wb") as f:
            f.write(file_content)
        logger.info(f"File '{filename}' saved locally at '{file_path}'")
        last_upload_error = None
        return True, f"{UPLOAD_URL_PREFIX}{filename}"
    except OSError as e:
        error_msg = f"Failed to save file locally: {e}"
        logger.error(error_msg)
        last_upload_error = error_msg
        return False, error_msg


def build_upload_filename(original_name: str) -> str:
    """My Photo!.JPG -> My-Photo--1737820800000-123456789.JPG"""
    stem, ext = os.path.splitext(os.path.basename(original_name))
    sanitized = re.sub(r"[^a-zA-Z0-9]", "-", stem) or "photo"
    unique_suffix = f"{int(datetime.now().timestamp() * 1000)}-{random.randint(0, 10**9 - 1)}"
    ext = ext.lstrip(".") or "jpg"
    return f"{sanitized}-{unique_suffix}.{ext}"


def extract_image_metadata(file_content: bytes) -> dict:
    """Reads width/height using Pillow; empty dict when the bytes aren't decodable"""
    try:
        from PIL import Image

        img = Image.open(BytesIO(file_content))
        return {"width": img.width, "height": img.height}
    except Exception as e:
        logger.info(f"Could not read image dimensions: {e}")
        return {}


def store_photo(file_content: bytes, original_name: str, content_type: Optional[str]) -> UploadResponse:
    """
    Validates and stores an uploaded image.

    Raises:
        ValidationError: missing name or unsupported type
        UploadTooLargeError: more than MAX_UPLOAD_SIZE bytes
        StorageError: neither the bucket nor the local directory accepted the file
    """
    if not original_name:
        raise ValidationError("No file uploaded")

    if content_type not in ALLOWED_MIME_TYPES:
        raise ValidationError("Invalid file type. Only JPEG, PNG, GIF, and WebP images are allowed.")

    if len(file_content) > MAX_UPLOAD_SIZE:
        raise UploadTooLargeError(f"File too large. Maximum size is {MAX_UPLOAD_SIZE // (1024 * 1024)} MB")

    filename = build_upload_filename(original_name)
    success, file_path = upload_file(file_content, filename, content_type)
    if not success:
        raise StorageError(f"Failed to upload file: {file_path}")

    return UploadResponse(
        file_path=file_path,
        filename=filename,
        original_name=original_name,
        size=len(file_content),
        **extract_image_metadata(file_content)
    )


def _filename_from_path(path: str) -> str:
    return os.path.basename(path.split("?")[0])


def get_local_file_path(path: str) -> Optional[str]:
    """Local file behind an /uploads/... path, or None when it isn't stored locally."""
    if not path.startswith(UPLOAD_URL_PREFIX):
        return None
    local_path = os.path.join(UPLOAD_DIR, _filename_from_path(path))
    return local_path if os.path.exists(local_path) else None


def delete_file(path: str) -> bool:
    """
    Deletes a stored upload given the path/URL returned by upload_file.
    Paths that don't point to an upload (e.g. static site images) are left alone.
    """
    local_path = get_local_file_path(path)
    if local_path:
        try:
            os.remove(local_path)
            logger.info(f"File '{local_path}' deleted from local storage")
            return True
        except OSError as e:
            logger.error(f"Error deleting local file '{local_path}': {e}")
            return False

    if storage_bucket is not None and storage_bucket.name in path:
        storage_key = get_storage_key(_filename_from_path(path))
        try:
            storage_bucket.blob(storage_key).delete()
            logger.info(f"File '{storage_key}' deleted from GCS")
            return True
        except Exception as e:
            logger.warning(f"Error deleting from GCS: {e}")
            return False

    return False


def file_exists(path: str) -> bool:
    if get_local_file_path(path):
        return True
    if storage_bucket is not None and storage_bucket.name in path:
        try:
            return storage_bucket.blob(get_storage_key(_filename_from_path(path))).exists()
        except Exception as e:
            logger.warning(f"Error checking GCS for '{path}': {e}")
    return False


def get_storage_status() -> dict:
    return {
        "object_storage_available": is_storage_available(),
        "fallback_mode": not is_storage_available(),
        "storage_type": "gcs" if storage_bucket is not None else "local_filesystem",
        "bucket": storage_bucket.name if storage_bucket is not None else None,
        "upload_dir": None if storage_bucket is not None else UPLOAD_DIR,
        "initialization_error": storage_init_error,
        "last_upload_error": last_upload_error,
    }


init_gcs_storage(_settings.storage_bucket)
