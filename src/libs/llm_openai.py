# llm_openai.py
from __future__ import annotations
import os
from typing import Any, Optional
from openai import AsyncOpenAI
from dotenv import load_dotenv
load_dotenv()  # picks up OPENAI_API_KEY / OPENAI_VISION_MODEL from .env

from src.car_search.errors import ConfigurationError, InferenceFailure
from src.car_search.types import EncodedPayload

MODEL = os.getenv("OPENAI_VISION_MODEL", "gpt-4o-mini")


class VisionClient:
    """Single-shot adapter over the OpenAI Responses API for image + prompt input.

    No retries: one call per infer(), failures are wrapped in InferenceFailure.
    """

    def __init__(self, api_key: Optional[str], model: str = MODEL, client: Any = None):
        if not api_key:
            raise ConfigurationError("OpenAI API key is not configured")
        self.model = model
        self._client = client if client is not None else AsyncOpenAI(api_key=api_key)

    async def infer(self, payload: EncodedPayload, prompt: str) -> str:
        """Send image + prompt, return the model's free-text reply."""
        try:
            resp = await self._client.responses.create(
                model=self.model,
                input=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "input_image", "image_url": payload.data_url},
                            {"type": "input_text", "text": prompt},
                        ],
                    },
                ],
            )
        except Exception as e:
            print(f"❌ OpenAI vision API error: {e}")
            raise InferenceFailure(f"Failed to analyze image with AI: {e}") from e
        return getattr(resp, "output_text", "") or ""


def get_vision_client(api_key: Optional[str] = None, model: Optional[str] = None) -> VisionClient:
    """Build a VisionClient from explicit arguments, falling back to the environment."""
    key = api_key if api_key is not None else os.getenv("OPENAI_API_KEY")
    return VisionClient(key, model=model or MODEL)
