# car_search/media/upload.py
"""
Upload preconditions, checked before anything is sent to the vision model:
- an artifact must be supplied
- media type must be image/*
- size must not exceed MAX_UPLOAD_BYTES (5 MiB, inclusive)
"""

from typing import Optional

from ..errors import InvalidMediaType, MissingInput, PayloadTooLarge
from ..types import UploadArtifact

MAX_UPLOAD_BYTES = 5 * 1024 * 1024

def validate_upload(artifact: Optional[UploadArtifact], max_bytes: int = MAX_UPLOAD_BYTES) -> None:
    """Raise an UploadError subclass if the artifact cannot be processed."""
    if artifact is None:
        raise MissingInput("No file provided")

    if not artifact.media_type or not artifact.media_type.startswith("image/"):
        raise InvalidMediaType("Invalid file type. Please upload an image file.")

    if artifact.byte_size > max_bytes:
        limit_mb = max_bytes // (1024 * 1024)
        raise PayloadTooLarge(f"File size too large. Please upload an image smaller than {limit_mb}MB.")
