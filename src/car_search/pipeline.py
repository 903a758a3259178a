"""
Image search pipeline: upload → validation → base64 → vision model → parsed
attributes.

Errors take two channels. Upload, configuration and inference errors are
raised as ImageSearchFailed ("Image search failed: ..."). A reply that cannot
be parsed is returned as PipelineOutcome(success=False) so the caller can ask
the user for a clearer image.
"""

from typing import Optional

from src.libs import llm_openai

from .errors import ImageSearchFailed
from .graph import compile_graph
from .media.upload import MAX_UPLOAD_BYTES, validate_upload
from .types import PipelineOutcome, UploadArtifact

_graph = compile_graph()

class ExtractionPipeline:
    """Runs one extraction per call; holds no per-request state."""

    def __init__(
        self,
        client: Optional["llm_openai.VisionClient"] = None,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        max_bytes: int = MAX_UPLOAD_BYTES,
    ):
        self._client = client
        self._api_key = api_key
        self._model = model
        self.max_bytes = max_bytes

    def _resolve_client(self) -> "llm_openai.VisionClient":
        if self._client is not None:
            return self._client
        # resolved per call: a missing key fails the request, not the import
        return llm_openai.get_vision_client(api_key=self._api_key, model=self._model)

    async def run(self, artifact: Optional[UploadArtifact]) -> PipelineOutcome:
        try:
            validate_upload(artifact, self.max_bytes)
            client = self._resolve_client()
            out = await _graph.ainvoke(
                {"artifact": artifact},
                {"configurable": {"vision_client": client}},
            )
        except Exception as e:
            print(f"❌ Image search error: {e}")
            raise ImageSearchFailed(e) from e
        return out["outcome"]

async def process_image_search(artifact: Optional[UploadArtifact], client: Optional["llm_openai.VisionClient"] = None) -> PipelineOutcome:
    """Convenience wrapper: run a fresh pipeline configured from the environment."""
    return await ExtractionPipeline(client=client).run(artifact)
