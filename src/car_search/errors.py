"""
Error types for the image search pipeline.

Upload, configuration and inference errors are hard failures: the pipeline
raises them wrapped in ImageSearchFailed. MalformedResponse is the only soft
failure and is turned into a returned PipelineOutcome.
"""

from typing import Optional


class CarSearchError(Exception):
    """Base class for image search errors."""


class UploadError(CarSearchError):
    """The uploaded artifact failed a precondition."""


class MissingInput(UploadError):
    pass


class InvalidMediaType(UploadError):
    pass


class PayloadTooLarge(UploadError):
    pass


class ConfigurationError(CarSearchError):
    """Required configuration (API credential) is missing."""


class InferenceFailure(CarSearchError):
    """The vision model call failed."""


class MalformedResponse(CarSearchError):
    """The model reply could not be parsed into attributes."""


class ImageSearchFailed(CarSearchError):
    """Hard failure surfaced by the pipeline; wraps the original error."""

    PREFIX = "Image search failed: "

    def __init__(self, cause: Exception, message: Optional[str] = None):
        self.cause = cause
        super().__init__(self.PREFIX + (message if message is not None else str(cause)))

    @property
    def kind(self) -> str:
        return type(self.cause).__name__
