"""
Image search package: vehicle photo → make / body type / color / confidence.
"""

from .errors import (
    CarSearchError, ConfigurationError, ImageSearchFailed, InferenceFailure,
    InvalidMediaType, MalformedResponse, MissingInput, PayloadTooLarge, UploadError,
)
from .types import EncodedPayload, ExtractedAttributes, PipelineOutcome, State, UploadArtifact
from .pipeline import ExtractionPipeline, process_image_search

__all__ = [
    "CarSearchError", "ConfigurationError", "ImageSearchFailed", "InferenceFailure",
    "InvalidMediaType", "MalformedResponse", "MissingInput", "PayloadTooLarge", "UploadError",
    "EncodedPayload", "ExtractedAttributes", "PipelineOutcome", "State", "UploadArtifact",
    "ExtractionPipeline", "process_image_search",
]
