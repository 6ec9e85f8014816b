import json

import httpx
import pytest

from services import llm


def gemini_payload(text):
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


@pytest.fixture
def gemini(monkeypatch):
    """Route every outbound httpx call to a handler the test controls.

    Returns a dict: set "handler" to a callable(request) -> httpx.Response;
    sent requests accumulate under "requests".
    """
    state = {
        "handler": lambda request: httpx.Response(200, json=gemini_payload("Thanks, sounds good.")),
        "requests": [],
    }

    def dispatch(request):
        state["requests"].append(request)
        return state["handler"](request)

    transport = httpx.MockTransport(dispatch)
    real_client = httpx.AsyncClient
    monkeypatch.setattr(llm.httpx, "AsyncClient", lambda **kw: real_client(transport=transport, **kw))
    monkeypatch.setattr(llm, "GEMINI_API_URL", "https://gemini.test/v1beta/models/m:generateContent?key=")
    monkeypatch.setattr(llm, "GEMINI_API_KEY", "secret")
    return state


def sent_json(request):
    return json.loads(request.content)
