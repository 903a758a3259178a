from .upload import MAX_UPLOAD_BYTES, validate_upload
from .vision import encode_image

__all__ = ["MAX_UPLOAD_BYTES", "validate_upload", "encode_image"]
