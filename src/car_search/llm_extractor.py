"""
Parsing of the vision model reply into ExtractedAttributes.

The model is asked for a bare JSON object but sometimes wraps it in a
markdown code fence. Fences are stripped, then the text must parse as a JSON
object; anything else is a MalformedResponse.
"""

import json
import re
from typing import Optional

from .errors import MalformedResponse
from .types import ExtractedAttributes

_CODE_FENCE = re.compile(r"```(?:json)?\n?")

def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")

def strip_code_fences(text: Optional[str]) -> str:
    """Remove ```/```json fence markers and surrounding whitespace."""
    return _CODE_FENCE.sub("", text or "").strip()

def parse_model_response(raw: Optional[str]) -> ExtractedAttributes:
    """Parse raw model text into canonical attributes.

    Missing or falsy fields default to "" / 0. Raises MalformedResponse if the
    text is not a JSON object or a field has an unusable value.
    """
    cleaned = strip_code_fences(raw)
    try:
        data = json.loads(cleaned, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise MalformedResponse(f"Invalid JSON in AI response: {e}") from e

    if not isinstance(data, dict):
        raise MalformedResponse("Invalid AI response format")

    try:
        attrs = ExtractedAttributes.from_model_output(data)
    except ValueError as e:
        raise MalformedResponse(f"Invalid AI response field: {e}") from e

    if not 0.0 <= attrs.confidence <= 1.0:
        print(f"⚠️ Confidence outside [0, 1] passed through: {attrs.confidence}")
    return attrs
