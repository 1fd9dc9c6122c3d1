from types import SimpleNamespace

import pytest
from openai import OpenAIError

from pagecraft.ai.client import (
    OpenAICompletionClient,
    client_from_config,
    get_completion_client,
    init_completion_client,
)
from pagecraft.domain.exceptions import ProviderFailure


class FakeCompletions:
    def __init__(self, result):
        self.result = result
        self.requests = []

    def create(self, **kwargs):
        self.requests.append(kwargs)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def _reply(text):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=text))])


def _client_with(result):
    client = OpenAICompletionClient(api_key="test-key", model="test-model", temperature=0.1)
    completions = FakeCompletions(result)
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return client, completions


def test_complete_sends_system_and_user_messages():
    client, completions = _client_with(_reply('{"ok": true}'))

    assert client.complete("Do the thing", system_prompt="You are helpful") == '{"ok": true}'

    request = completions.requests[0]
    assert request["model"] == "test-model"
    assert request["temperature"] == 0.1
    assert request["messages"] == [
        {"role": "system", "content": "You are helpful"},
        {"role": "user", "content": "Do the thing"},
    ]


def test_complete_without_system_prompt():
    client, completions = _client_with(_reply("hi"))

    client.complete("hello")

    assert [m["role"] for m in completions.requests[0]["messages"]] == ["user"]


def test_null_content_is_empty_text():
    client, _ = _client_with(_reply(None))
    assert client.complete("hello") == ""


def test_sdk_errors_become_provider_failures():
    client, _ = _client_with(OpenAIError("connection reset"))

    with pytest.raises(ProviderFailure) as excinfo:
        client.complete("hello")

    assert "connection reset" in str(excinfo.value)
    assert isinstance(excinfo.value.__cause__, OpenAIError)


def test_reply_without_choices_is_a_provider_failure():
    client, _ = _client_with(SimpleNamespace(choices=[]))

    with pytest.raises(ProviderFailure):
        client.complete("hello")


def test_missing_api_key():
    client = OpenAICompletionClient(api_key=None, model="test-model")

    with pytest.raises(ProviderFailure):
        client.complete("hello")


def test_sdk_is_built_lazily_with_base_url():
    client = OpenAICompletionClient(api_key="k", model="m", base_url="https://llm.example.test/v1")

    assert client._client is None
    sdk = client._sdk()

    assert str(sdk.base_url).startswith("https://llm.example.test/v1")
    assert client._sdk() is sdk


def test_client_from_config():
    client = client_from_config({
        "LLM_API_KEY": "k",
        "LLM_BASE_URL": "https://llm.example.test/v1",
        "LLM_MODEL": "some/model",
        "LLM_TEMPERATURE": "0.5",
    })

    assert client.model == "some/model"
    assert client._temperature == 0.5
    assert client._timeout == 30.0


def test_app_wiring(app, fake_llm):
    assert get_completion_client(app) is fake_llm
    assert get_completion_client() is fake_llm

    replacement = object()
    init_completion_client(app, replacement)
    assert get_completion_client(app) is replacement


def test_default_client_is_built_from_config(app):
    client = init_completion_client(app)

    assert isinstance(client, OpenAICompletionClient)
    assert client.model == app.config["LLM_MODEL"]
    with pytest.raises(ProviderFailure):
        client.complete("hello")
