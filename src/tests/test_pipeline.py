"""
End-to-end tests for ExtractionPipeline with a fake OpenAI client.
"""

import pytest

from src.car_search import (
    ConfigurationError, ExtractionPipeline, ImageSearchFailed, InferenceFailure,
    InvalidMediaType, MissingInput, PayloadTooLarge, PipelineOutcome, UploadArtifact,
    process_image_search,
)
from src.car_search.nodes import PARSE_FAILED_MESSAGE
from src.car_search.routing import route_from_parse
from src.car_search.types import ExtractedAttributes


@pytest.fixture
def artifact(png_bytes):
    return UploadArtifact.from_bytes(png_bytes, "image/png")


@pytest.mark.asyncio
async def test_success(make_client, artifact):
    client, fake = make_client()
    outcome = await ExtractionPipeline(client=client).run(artifact)

    assert isinstance(outcome, PipelineOutcome)
    assert outcome.to_dict() == {
        "success": True,
        "data": {"make": "Toyota", "bodyType": "SUV", "color": "Red", "confidence": 0.9},
    }
    assert len(fake.responses.calls) == 1


@pytest.mark.asyncio
async def test_unparseable_reply_is_returned_not_raised(make_client, artifact):
    client, _ = make_client(text="not json at all")
    outcome = await ExtractionPipeline(client=client).run(artifact)

    assert outcome.to_dict() == {"success": False, "error": PARSE_FAILED_MESSAGE}
    assert "clearer image" in outcome.error


@pytest.mark.asyncio
async def test_empty_object_reply_defaults(make_client, artifact):
    client, _ = make_client(text="{}")
    outcome = await ExtractionPipeline(client=client).run(artifact)
    assert outcome.success
    assert outcome.data == ExtractedAttributes()


@pytest.mark.asyncio
async def test_missing_credential_raises(monkeypatch, artifact):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    with pytest.raises(ImageSearchFailed, match="Image search failed: OpenAI API key is not configured") as exc:
        await ExtractionPipeline().run(artifact)
    assert isinstance(exc.value.cause, ConfigurationError)
    assert exc.value.kind == "ConfigurationError"


@pytest.mark.asyncio
async def test_non_image_raises_before_inference(make_client, png_bytes):
    client, fake = make_client()
    pdf = UploadArtifact.from_bytes(b"%PDF-1.7", "application/pdf")
    with pytest.raises(ImageSearchFailed, match="Invalid file type") as exc:
        await ExtractionPipeline(client=client).run(pdf)
    assert isinstance(exc.value.cause, InvalidMediaType)
    assert fake.responses.calls == []


@pytest.mark.asyncio
async def test_validation_runs_before_credential_check(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    pdf = UploadArtifact.from_bytes(b"%PDF-1.7", "application/pdf")
    with pytest.raises(ImageSearchFailed) as exc:
        await ExtractionPipeline().run(pdf)
    assert isinstance(exc.value.cause, InvalidMediaType)


@pytest.mark.asyncio
async def test_missing_input_raises(make_client):
    client, fake = make_client()
    with pytest.raises(ImageSearchFailed, match="No file provided") as exc:
        await ExtractionPipeline(client=client).run(None)
    assert isinstance(exc.value.cause, MissingInput)
    assert fake.responses.calls == []


@pytest.mark.asyncio
async def test_oversized_upload_raises(make_client):
    client, fake = make_client()
    big = UploadArtifact(byte_size=5 * 1024 * 1024 + 1, media_type="image/jpeg", content=b"\xff\xd8")
    with pytest.raises(ImageSearchFailed) as exc:
        await ExtractionPipeline(client=client).run(big)
    assert isinstance(exc.value.cause, PayloadTooLarge)
    assert fake.responses.calls == []


@pytest.mark.asyncio
async def test_inference_failure_raises(make_client, artifact):
    client, _ = make_client(error=ConnectionError("network down"))
    with pytest.raises(ImageSearchFailed, match="Image search failed: Failed to analyze image with AI: network down") as exc:
        await ExtractionPipeline(client=client).run(artifact)
    assert isinstance(exc.value.cause, InferenceFailure)


@pytest.mark.asyncio
async def test_transcoding_failure_raises(make_client, tmp_path, png_bytes):
    client, fake = make_client()
    p = tmp_path / "car.png"
    p.write_bytes(png_bytes)
    artifact = UploadArtifact.from_path(p)
    p.unlink()
    with pytest.raises(ImageSearchFailed) as exc:
        await ExtractionPipeline(client=client).run(artifact)
    assert isinstance(exc.value.cause, FileNotFoundError)
    assert fake.responses.calls == []


@pytest.mark.asyncio
async def test_runs_are_independent(make_client, artifact):
    pipeline_a = ExtractionPipeline(client=make_client(text='{"make": "Audi"}')[0])
    pipeline_b = ExtractionPipeline(client=make_client(text='{"make": "Fiat"}')[0])
    a = await pipeline_a.run(artifact)
    b = await pipeline_b.run(artifact)
    again = await pipeline_a.run(artifact)
    assert (a.data.make, b.data.make, again.data.make) == ("Audi", "Fiat", "Audi")


@pytest.mark.asyncio
async def test_process_image_search_wrapper(make_client, artifact):
    client, _ = make_client()
    outcome = await process_image_search(artifact, client=client)
    assert outcome.data.make == "Toyota"


def test_route_from_parse():
    assert route_from_parse({"attributes": ExtractedAttributes(), "error": None}) == "accept"
    assert route_from_parse({"attributes": None, "error": "bad json"}) == "reject"
    assert route_from_parse({}) == "reject"


@pytest.mark.asyncio
@pytest.mark.parametrize("reply", [
    '{"make": "Kia", "confidence": Infinity}',
    "[" * 100000 + "]" * 100000,
    '{"confidence": ' + "9" * 5000 + "}",
])
async def test_pathological_replies_are_soft_failures(make_client, artifact, reply):
    client, _ = make_client(text=reply)
    outcome = await ExtractionPipeline(client=client).run(artifact)
    assert outcome.to_dict() == {"success": False, "error": PARSE_FAILED_MESSAGE}
