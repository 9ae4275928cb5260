# tests/conftest.py
import json
import pathlib
import sys

import pytest
from fastapi.testclient import TestClient

# Add the repository root to sys.path so the flat modules import under pytest
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import Settings
from main import create_app
from slide_service import SlideProvider

ONE_SLIDE = {
    "slides": [
        {
            "title": "Introducción",
            "content": ["Qué es el proyecto", "Por qué importa"],
            "speakerNotes": "Empezamos con una visión general del proyecto.",
        }
    ]
}


class FakeProvider(SlideProvider):
    """Returns a canned answer and records every prompt it receives."""

    def __init__(self, answer=None, error=None):
        self.answer = json.dumps(ONE_SLIDE) if answer is None else answer
        self.error = error
        self.prompts = []

    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.answer


class FakeProviderFactory:
    def __init__(self, provider):
        self.provider = provider
        self.calls = 0

    def __call__(self, settings):
        self.calls += 1
        return self.provider


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def make_client():
    def _make(provider=None, api_key="test-key"):
        factory = FakeProviderFactory(provider or FakeProvider())
        app = create_app(
            provider_factory=factory,
            settings_loader=lambda: Settings(api_key=api_key),
        )
        return TestClient(app), factory

    return _make


@pytest.fixture
def make_provider():
    return FakeProvider


@pytest.fixture
def one_slide():
    return json.loads(json.dumps(ONE_SLIDE))
