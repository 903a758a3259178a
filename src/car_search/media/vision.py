# car_search/media/vision.py
"""
Image transcoding for the vision model: reads the whole upload into memory
and returns it base64-encoded together with its media type.
"""

import base64

from ..types import EncodedPayload, UploadArtifact

def encode_image(artifact: UploadArtifact) -> EncodedPayload:
    """Return the transport form of the artifact. I/O errors propagate."""
    raw = artifact.read_bytes()
    return EncodedPayload(
        data=base64.b64encode(raw).decode("ascii"),
        mime_type=artifact.media_type,
    )
