# strategy_advisor/agents/providers/openrouter_provider.py
"""OpenRouter provider (OpenAI-compatible chat completions over plain HTTPS)."""

import logging
from typing import Optional

import httpx

from strategy_advisor.agents.advisor_types import BackendConfig
from strategy_advisor.agents.providers.base import RemoteCompletionProvider
from strategy_advisor.errors import BackendError

logger = logging.getLogger(__name__)

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


def _error_message(response: httpx.Response) -> str:
    """Server-supplied error.message, falling back to the reason phrase."""
    try:
        data = response.json()
    except ValueError:
        return response.reason_phrase
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return response.reason_phrase


class OpenRouterProvider(RemoteCompletionProvider):
    """OpenRouter-based advisor provider."""

    default_model = "deepseek/deepseek-r1-0528:free"

    def __init__(
        self,
        config: Optional[BackendConfig] = None,
        timeout: float = 60.0,
        site_url: str = "http://localhost:5173",
        site_title: str = "Strategic Business Advisor",
        base_url: str = OPENROUTER_BASE_URL,
        http_client: Optional[httpx.Client] = None,
    ):
        super().__init__(config, timeout=timeout)
        self.site_url = site_url
        self.site_title = site_title
        self.base_url = base_url.rstrip("/")
        self._http = http_client
        self._owns_http = http_client is None

    @property
    def name(self) -> str:
        return f"OpenRouter ({self.model})"

    def get_cost(self) -> str:
        model = self.model.lower()
        if "free" in model:
            return "Free"
        if "deepseek" in model:
            return "$"
        if "gpt-4" in model:
            return "$$"
        return "$"

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self.site_url,
            "X-Title": self.site_title,
        }

    def _get_http(self) -> httpx.Client:
        if self._http is None:
            self._http = httpx.Client(timeout=self.timeout)
            self._owns_http = True
        return self._http

    def close(self):
        """Close the HTTP client if this provider opened it."""
        if self._http is not None and self._owns_http:
            self._http.close()
            self._http = None

    def _complete(self, messages: list[dict]) -> str:
        payload = {
            "model": self.model,
            "messages": messages,
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
            "stream": False,
        }
        endpoint = f"{self.base_url}/chat/completions"

        try:
            response = self._get_http().post(endpoint, json=payload, headers=self.headers)
        except httpx.HTTPError as e:
            logger.error(f"OpenRouter request failed: {e}")
            raise BackendError(f"Failed to get AI response: {e}", provider=self.name) from e

        if not response.is_success:
            message = _error_message(response)
            logger.error(f"OpenRouter API error: {response.status_code} - {message}")
            raise BackendError(
                f"OpenRouter API error: {response.status_code} - {message}",
                status_code=response.status_code,
                provider=self.name,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise BackendError(
                "OpenRouter returned a non-JSON body",
                status_code=response.status_code,
                provider=self.name,
            ) from e

        try:
            return data["choices"][0]["message"]["content"] or ""
        except (KeyError, IndexError, TypeError):
            logger.warning("OpenRouter reply had no message content")
            return ""

    @staticmethod
    def list_models(
        api_key: str,
        site_url: str = "http://localhost:5173",
        base_url: str = OPENROUTER_BASE_URL,
        http_client: Optional[httpx.Client] = None,
    ) -> list[dict]:
        """
        List models available on OpenRouter.

        Returns:
            [{"id", "name", "cost"}], or [] if the listing could not be fetched
        """
        client = http_client or httpx.Client(timeout=30.0)
        try:
            response = client.get(
                f"{base_url.rstrip('/')}/models",
                headers={"Authorization": f"Bearer {api_key}", "HTTP-Referer": site_url},
            )
            response.raise_for_status()
            models = response.json().get("data") or []
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.error(f"Failed to fetch OpenRouter models: {e}")
            return []
        finally:
            if http_client is None:
                client.close()

        return [
            {
                "id": model["id"],
                "name": model.get("name") or model["id"],
                "cost": "$" if (model.get("pricing") or {}).get("prompt") else "$$",
            }
            for model in models
            if isinstance(model, dict) and model.get("id")
        ]
