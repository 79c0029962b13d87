# strategy_advisor/agents/providers/openai_provider.py
"""OpenAI chat-completion provider."""

import logging
from typing import Optional

import openai
from openai import OpenAI

from strategy_advisor.agents.advisor_types import BackendConfig
from strategy_advisor.agents.providers.base import RemoteCompletionProvider
from strategy_advisor.errors import BackendError

logger = logging.getLogger(__name__)


def _status_error_message(error: "openai.APIStatusError") -> str:
    """Pull the server's error.message out of the response body, if any."""
    body = error.body
    if isinstance(body, dict):
        detail = body.get("error", body)
        if isinstance(detail, dict) and detail.get("message"):
            return str(detail["message"])
    return error.message


class OpenAIProvider(RemoteCompletionProvider):
    """OpenAI-based advisor provider."""

    default_model = "gpt-4.1-mini"

    def __init__(self, config: Optional[BackendConfig] = None, timeout: float = 60.0):
        super().__init__(config, timeout=timeout)
        self._client = OpenAI(api_key=self.api_key, timeout=timeout) if self.api_key else None

    @property
    def name(self) -> str:
        return "OpenAI GPT-4"

    def is_available(self) -> bool:
        return self._client is not None and bool(self.api_key)

    def get_cost(self) -> str:
        return "$$"

    def _complete(self, messages: list[dict]) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except openai.APIStatusError as e:
            message = _status_error_message(e)
            logger.error(f"OpenAI API error: {e.status_code} - {message}")
            raise BackendError(
                f"OpenAI API error: {e.status_code} - {message}",
                status_code=e.status_code,
                provider=self.name,
            ) from e
        except openai.APIError as e:
            logger.error(f"OpenAI request failed: {e}")
            raise BackendError(f"Failed to get AI response: {e}", provider=self.name) from e

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
