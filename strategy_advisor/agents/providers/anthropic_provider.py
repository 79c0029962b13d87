# strategy_advisor/agents/providers/anthropic_provider.py
"""Anthropic Claude provider."""

import logging
from typing import Optional

import anthropic
from anthropic import Anthropic

from strategy_advisor.agents.advisor_types import BackendConfig
from strategy_advisor.agents.providers.base import RemoteCompletionProvider
from strategy_advisor.errors import BackendError

logger = logging.getLogger(__name__)


class AnthropicProvider(RemoteCompletionProvider):
    """Anthropic Claude-based advisor provider."""

    default_model = "claude-haiku-4-5-20251001"

    def __init__(self, config: Optional[BackendConfig] = None, timeout: float = 60.0):
        super().__init__(config, timeout=timeout)
        self._client = Anthropic(api_key=self.api_key, timeout=timeout) if self.api_key else None

    @property
    def name(self) -> str:
        return "Anthropic Claude"

    def get_cost(self) -> str:
        return "$$"

    def _complete(self, messages: list[dict]) -> str:
        # Claude takes the system prompt as a separate argument
        system = "\n".join(m["content"] for m in messages if m["role"] == "system")
        turns = [m for m in messages if m["role"] != "system"]

        try:
            response = self._client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=system,
                messages=turns,
                temperature=self.temperature,
            )
        except anthropic.APIStatusError as e:
            logger.error(f"Anthropic API error: {e.status_code} - {e.message}")
            raise BackendError(
                f"Anthropic API error: {e.status_code} - {e.message}",
                status_code=e.status_code,
                provider=self.name,
            ) from e
        except anthropic.APIError as e:
            logger.error(f"Anthropic request failed: {e}")
            raise BackendError(f"Failed to get AI response: {e}", provider=self.name) from e

        # Thinking and tool-use blocks can precede the text block
        for block in response.content or []:
            if getattr(block, "type", None) == "text":
                return block.text or ""
        return ""
