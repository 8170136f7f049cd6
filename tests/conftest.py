from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

_TMP_DIR = Path(tempfile.mkdtemp(prefix="careercoach-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'careercoach.db'}"
os.environ["DATA_DIR"] = str(_TMP_DIR / "data")
os.environ["APP_ENV"] = "test"
os.environ["GEMINI_API_KEY"] = "test-key"
os.environ["EXPOSE_ERROR_DETAIL"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from careercoach.api.app import create_app  # noqa: E402
from careercoach.api.deps import get_generator  # noqa: E402
from careercoach.db.base import Base  # noqa: E402
from careercoach.db.seed import seed_demo_profile  # noqa: E402
from careercoach.db.session import SessionLocal, engine  # noqa: E402


def gemini_envelope(text: str) -> dict[str, Any]:
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": text}], "role": "model"},
                "finishReason": "STOP",
                "index": 0,
            }
        ]
    }


class FakeGenerator:
    """Records prompts and replays queued envelopes (or raises queued errors)."""

    def __init__(self) -> None:
        self.prompts: list[str] = []
        self._replies: list[Any] = []

    def reply_json(self, payload: dict[str, Any]) -> None:
        self._replies.append(gemini_envelope(json.dumps(payload)))

    def reply_text(self, text: str) -> None:
        self._replies.append(gemini_envelope(text))

    def reply_envelope(self, envelope: dict[str, Any]) -> None:
        self._replies.append(envelope)

    def fail_with(self, exc: Exception) -> None:
        self._replies.append(exc)

    def generate(self, prompt: str) -> dict[str, Any]:
        self.prompts.append(prompt)
        reply = self._replies.pop(0) if self._replies else gemini_envelope("{}")
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture(autouse=True)
def reset_db() -> None:
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    with SessionLocal() as session:
        seed_demo_profile(session)
    yield


@pytest.fixture
def envelope():
    return gemini_envelope


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator()


@pytest.fixture
def app(fake_generator: FakeGenerator):
    application = create_app()
    application.dependency_overrides[get_generator] = lambda: fake_generator
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
