import json
import os
import sys

import httpx
import pytest

# Ensure repo root is on sys.path for imports like 'src.*'
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from fastapi.testclient import TestClient  # noqa: E402

from src.app.main import app, get_anthropic_client  # noqa: E402
from src.inference.anthropic_client import AnthropicClient  # noqa: E402


def anthropic_body(text):
    return {
        "id": "msg_test",
        "type": "message",
        "role": "assistant",
        "content": [{"type": "text", "text": text}],
    }


class FakeAnthropic:
    """Records outbound calls and answers with a canned response."""

    def __init__(self):
        self.calls = []
        self.status_code = 200
        self.json_body = anthropic_body("{}")
        self.text_body = None

    def reply_text(self, text):
        self.status_code = 200
        self.json_body = anthropic_body(text)
        self.text_body = None

    def reply_error(self, status_code, text):
        self.status_code = status_code
        self.json_body = None
        self.text_body = text

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.json_body is not None:
            return httpx.Response(self.status_code, json=self.json_body)
        return httpx.Response(self.status_code, text=self.text_body)

    def last_payload(self):
        return json.loads(self.calls[-1].content)


@pytest.fixture
def upstream():
    return FakeAnthropic()


@pytest.fixture
def api_key():
    return "test-key"


@pytest.fixture
def client(upstream, api_key):
    def override():
        fake = AnthropicClient(api_key=api_key, transport=httpx.MockTransport(upstream.handler))
        try:
            yield fake
        finally:
            fake.close()

    app.dependency_overrides[get_anthropic_client] = override
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
