"""Completion client used by template switching and section edits."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from openai import OpenAI, OpenAIError

from pagecraft.domain.exceptions import ProviderFailure

log = logging.getLogger(__name__)

EXTENSION_KEY = "pagecraft.completion_client"


class CompletionClient(Protocol):
    def complete(self, user_prompt: str, system_prompt: Optional[str] = None) -> str:
        ...


class OpenAICompletionClient:
    """
    Chat-completions client for any OpenAI-compatible endpoint.

    The SDK client is built on first use so the app can start without an
    API key configured.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str],
        model: str,
        base_url: Optional[str] = None,
        temperature: float = 0.3,
        timeout: float = 30.0,
    ) -> None:
        self._api_key = api_key
        self._base_url = base_url
        self._model = model
        self._temperature = temperature
        self._timeout = timeout
        self._client: Optional[OpenAI] = None

    @property
    def model(self) -> str:
        return self._model

    def _sdk(self) -> OpenAI:
        if self._client is None:
            if not self._api_key:
                raise ProviderFailure("No API key configured for the completion service")

            openai_kwargs = {"api_key": self._api_key, "timeout": self._timeout, "max_retries": 0}
            if self._base_url:
                openai_kwargs["base_url"] = self._base_url
            self._client = OpenAI(**openai_kwargs)
        return self._client

    def complete(self, user_prompt: str, system_prompt: Optional[str] = None) -> str:
        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})

        log.info("[llm] completion requested model=%s prompt_chars=%d", self._model, len(user_prompt))

        try:
            response = self._sdk().chat.completions.create(
                model=self._model,
                temperature=self._temperature,
                messages=messages,
            )
        except OpenAIError as exc:
            log.warning("[llm] completion failed model=%s: %s", self._model, exc)
            raise ProviderFailure(f"Completion service error: {exc}") from exc

        try:
            text = response.choices[0].message.content or ""
        except (AttributeError, IndexError) as exc:
            raise ProviderFailure("Completion response missing content") from exc

        log.debug("[llm] raw response (truncated): %s", text[:500])
        return text


def client_from_config(config) -> OpenAICompletionClient:
    return OpenAICompletionClient(
        api_key=config.get("LLM_API_KEY"),
        base_url=config.get("LLM_BASE_URL"),
        model=config.get("LLM_MODEL"),
        temperature=float(config.get("LLM_TEMPERATURE", 0.3)),
        timeout=float(config.get("LLM_TIMEOUT_SECONDS", 30)),
    )


def init_completion_client(app, client: Optional[CompletionClient] = None) -> CompletionClient:
    client = client or client_from_config(app.config)
    app.extensions[EXTENSION_KEY] = client
    return client


def get_completion_client(app=None) -> CompletionClient:
    if app is None:
        from flask import current_app

        app = current_app
    return app.extensions[EXTENSION_KEY]
