from types import SimpleNamespace

import pytest

from src.data.seed import seed
from src.libs.llm_openai import VisionClient

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(32))

TOYOTA_REPLY = '```json\n{"make":"Toyota","bodyType":"SUV","color":"Red","confidence":0.9}\n```'


class FakeResponses:
    """Stands in for AsyncOpenAI().responses; records every create() call."""

    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(output_text=self.text)


class FakeOpenAI:
    def __init__(self, text=None, error=None):
        self.responses = FakeResponses(text=text, error=error)


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def make_client():
    """Factory: VisionClient backed by a fake OpenAI client returning `text`."""
    def _make(text=TOYOTA_REPLY, error=None):
        fake = FakeOpenAI(text=text, error=error)
        return VisionClient("test-key", model="test-model", client=fake), fake
    return _make


@pytest.fixture
def seeded_db(tmp_path):
    db = tmp_path / "dealership.db"
    seed(db.as_posix())
    return db.as_posix()
