"""
Type definitions and state management for the image search pipeline.
"""

import base64
import math
import mimetypes
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypedDict


class UploadArtifact(BaseModel):
    """Raw upload as received from the caller. Consumed once, never stored."""

    byte_size: int
    media_type: Optional[str] = None
    content: Union[bytes, Path]

    @classmethod
    def from_bytes(cls, data: bytes, media_type: Optional[str]) -> "UploadArtifact":
        return cls(byte_size=len(data), media_type=media_type, content=data)

    @classmethod
    def from_path(cls, path: Union[str, Path], media_type: Optional[str] = None) -> "UploadArtifact":
        """Describe a file on disk. Content is read later, by the transcoder."""
        p = Path(path)
        if media_type is None:
            media_type, _ = mimetypes.guess_type(p.name)
        return cls(byte_size=p.stat().st_size, media_type=media_type, content=p)

    def read_bytes(self) -> bytes:
        if isinstance(self.content, Path):
            return self.content.read_bytes()
        return self.content


class EncodedPayload(BaseModel):
    """Base64 image plus its media type, as sent to the vision model."""

    model_config = ConfigDict(frozen=True)

    data: str
    mime_type: str

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"

    def as_request(self) -> Dict[str, str]:
        return {"image": self.data, "mimeType": self.mime_type}

    def decode(self) -> bytes:
        return base64.b64decode(self.data)


def _coalesce_text(value: Any) -> str:
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"expected text, got {value!r}")
        return str(value)
    raise ValueError(f"expected text, got {type(value).__name__}")


def _coalesce_number(value: Any) -> float:
    if not value:
        return 0.0
    if isinstance(value, bool):
        raise ValueError("expected a number, got bool")
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"expected a number, got {value!r}") from None
    if not math.isfinite(number):
        raise ValueError(f"expected a finite number, got {value!r}")
    return number


class ExtractedAttributes(BaseModel):
    """Canonical search attributes. Every field is always present."""

    model_config = ConfigDict(populate_by_name=True)

    make: str = ""
    body_type: str = Field("", alias="bodyType")
    color: str = ""
    confidence: float = 0.0

    @classmethod
    def from_model_output(cls, data: Dict[str, Any]) -> "ExtractedAttributes":
        """Build from a decoded model reply, coalescing missing/falsy fields to defaults.

        Raises ValueError when a present field has the wrong shape.
        """
        return cls(
            make=_coalesce_text(data.get("make")),
            body_type=_coalesce_text(data.get("bodyType")),
            color=_coalesce_text(data.get("color")),
            confidence=_coalesce_number(data.get("confidence")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class PipelineOutcome(BaseModel):
    """Returned result: either data (success) or a user-facing error."""

    success: bool
    data: Optional[ExtractedAttributes] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: ExtractedAttributes) -> "PipelineOutcome":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "PipelineOutcome":
        return cls(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True, "data": self.data.to_dict()}
        return {"success": False, "error": self.error}


class State(TypedDict, total=False):
    """State definition for the LangGraph extraction workflow."""
    artifact: UploadArtifact
    payload: Optional[EncodedPayload]     # base64 image for the model
    prompt: Optional[str]
    raw_response: Optional[str]           # free text returned by the model
    attributes: Optional[ExtractedAttributes]
    error: Optional[str]                  # parse error detail
    outcome: Optional[PipelineOutcome]
