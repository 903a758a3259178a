"""
Prompt for vehicle attribute extraction.

The JSON keys named here are what llm_extractor reads back; change both
together.
"""

from typing import Tuple

EXTRACTION_FIELDS: Tuple[str, ...] = ("make", "bodyType", "color", "confidence")

EXTRACTION_PROMPT = (
    "Analyze this car image and extract the following information for a search query:\n"
    "1. Make (manufacturer)\n"
    "2. Body type (SUV, Sedan, Hatchback, etc.)\n"
    "3. Color\n"
    "\n"
    "Format your response as a clean JSON object with these fields:\n"
    "{\n"
    '  "make": "",\n'
    '  "bodyType": "",\n'
    '  "color": "",\n'
    '  "confidence": 0.0\n'
    "}\n"
    "\n"
    "For confidence, provide a value between 0 and 1 representing how confident "
    "you are in your overall identification.\n"
    "Only respond with the JSON object, nothing else."
)

def build_extraction_prompt() -> str:
    """Return the fixed extraction prompt (no per-call parameters)."""
    return EXTRACTION_PROMPT
