from __future__ import annotations
import os
from typing import Any, Dict

from fastapi import Depends, FastAPI, File, HTTPException, UploadFile

from src.car_search import (
    ExtractionPipeline, ImageSearchFailed, InferenceFailure,
    PayloadTooLarge, UploadArtifact, UploadError,
)
from src.services.dealership_sqlite import DealershipServiceSQL

app = FastAPI(title="Car Image Search API")

_pipeline = ExtractionPipeline()

def get_pipeline() -> ExtractionPipeline:
    return _pipeline

def get_service() -> DealershipServiceSQL:
    return DealershipServiceSQL(os.getenv("DEALERSHIP_DB", "src/data/mock.db"))

def _status_for(err: ImageSearchFailed) -> int:
    """HTTP status for a hard pipeline failure, based on the wrapped error."""
    cause = err.cause
    if isinstance(cause, PayloadTooLarge):
        return 413
    if isinstance(cause, UploadError):
        return 400
    if isinstance(cause, InferenceFailure):
        return 502
    return 500  # configuration and anything unexpected

async def read_upload(file: UploadFile, max_bytes: int) -> UploadArtifact:
    """Read at most max_bytes + 1 bytes; enough for the size check to reject larger uploads."""
    data = await file.read(max_bytes + 1)
    declared = getattr(file, "size", None)
    size = max(declared or 0, len(data))
    return UploadArtifact(byte_size=size, media_type=file.content_type, content=data)

async def _run(pipeline: ExtractionPipeline, file: UploadFile):
    artifact = await read_upload(file, pipeline.max_bytes)
    try:
        return await pipeline.run(artifact)
    except ImageSearchFailed as e:
        raise HTTPException(_status_for(e), str(e))

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/image-search")
async def image_search(file: UploadFile = File(...), pipeline: ExtractionPipeline = Depends(get_pipeline)) -> Dict[str, Any]:
    outcome = await _run(pipeline, file)
    return outcome.to_dict()

@app.post("/image-search/cars")
async def image_search_cars(
    file: UploadFile = File(...),
    pipeline: ExtractionPipeline = Depends(get_pipeline),
    svc: DealershipServiceSQL = Depends(get_service),
) -> Dict[str, Any]:
    """Extract attributes from the photo and return matching available cars."""
    outcome = await _run(pipeline, file)
    body = outcome.to_dict()
    if outcome.success:
        attrs = outcome.data
        body["cars"] = svc.search_cars(make=attrs.make, body_type=attrs.body_type, color=attrs.color)
    return body
