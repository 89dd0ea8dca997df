"""Tests for the explanation client (HTTP stubbed with monkeypatch)."""

import json

import pytest
import requests

from algorithms import get_algorithm
from services import FALLBACK_MESSAGE, ExplainClient, build_prompt
from services import explain as explain_module


class FakeResponse:
    def __init__(self, payload, status=200):
        self._payload = payload
        self.status_code = status

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


def completion(text):
    return {"choices": [{"message": {"role": "assistant", "content": text}}]}


@pytest.fixture
def calls(monkeypatch):
    """Records every requests.post call; tests set `calls.response`."""

    class Recorder(list):
        response = FakeResponse(completion("**BFS** uses a queue."))

    recorder = Recorder()

    def fake_post(url, headers=None, data=None, timeout=None):
        recorder.append({"url": url, "headers": headers, "body": json.loads(data), "timeout": timeout})
        if isinstance(recorder.response, Exception):
            raise recorder.response
        return recorder.response

    monkeypatch.setattr(explain_module.requests, "post", fake_post)
    return recorder


def test_build_prompt_mentions_algorithm_and_word_limit(standard):
    prompt = build_prompt("Breadth-First Search (BFS)", "Why a queue?", standard)
    assert "Breadth-First Search (BFS)" in prompt
    assert "Why a queue?" in prompt
    assert "Maximum 250 words" in prompt
    assert standard.title in prompt


def test_build_prompt_asks_for_accessible_search_theory():
    prompt = build_prompt("Depth-First Search (DFS)", "Is DFS complete?")
    assert "Technically accurate but accessible" in prompt
    for criterion in ("Completeness", "Optimality", "Complexity"):
        assert criterion in prompt
    assert "analogies" not in prompt


def test_ask_posts_chat_completion(calls, standard):
    client = ExplainClient(api_base="http://llm.test/v1/", model="m", timeout=7)
    answer = client.ask("Why a queue?", "bfs", standard)

    assert answer == "**BFS** uses a queue."
    assert len(calls) == 1
    call = calls[0]
    assert call["url"] == "http://llm.test/v1/chat/completions"
    assert call["timeout"] == 7
    assert call["body"]["model"] == "m"
    assert [m["role"] for m in call["body"]["messages"]] == ["system", "user"]
    assert "Authorization" not in call["headers"]


def test_api_key_sent_as_bearer(calls):
    ExplainClient(api_key="sekret").ask("topic", get_algorithm("ucs"))
    assert calls[0]["headers"]["Authorization"] == "Bearer sekret"


@pytest.mark.parametrize("response", [
    requests.ConnectionError("refused"),
    requests.Timeout("slow"),
    FakeResponse({}, status=500),
    FakeResponse({"choices": []}),
    FakeResponse({"unexpected": True}),
    FakeResponse(ValueError("not json")),
    FakeResponse(completion("   ")),
])
def test_failures_fall_back(calls, response):
    calls.response = response
    assert ExplainClient().ask("topic", "dfs") == FALLBACK_MESSAGE


def test_bad_input_raises_before_any_request(calls):
    client = ExplainClient()
    with pytest.raises(ValueError):
        client.ask("   ", "bfs")
    with pytest.raises(ValueError):
        client.ask("topic", "astar")
    assert calls == []


def test_from_settings(settings):
    client = ExplainClient.from_settings(settings)
    assert client.api_base == "http://llm.test/v1"
    assert client.model == "test-model"
    assert client.timeout == 5
