# strategy_advisor/agents/providers/base.py
"""Abstract base classes for advisor providers."""

from abc import ABC, abstractmethod
from typing import Optional

from strategy_advisor.agents.advisor_types import AdvisorResponse, AnalysisContext, BackendConfig
from strategy_advisor.agents.normalizer import normalize_reply
from strategy_advisor.agents.prompts import render_prompt
from strategy_advisor.errors import ConfigurationError

DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1500
NOT_SPECIFIED = "Not specified"


class AdvisorProvider(ABC):
    """Abstract base class for advisor providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name, also stamped on every response."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """True when the provider can serve requests. Must not do I/O."""
        pass

    @abstractmethod
    def get_cost(self) -> str:
        """Cost tier label ("Free", "$", "$$")."""
        pass

    @abstractmethod
    def analyze(self, user_input: str, context: AnalysisContext) -> AdvisorResponse:
        """
        Analyze the user's need and recommend services.

        Args:
            user_input: Free text typed by the visitor
            context: Service catalog plus optional industry/budget/timeline

        Returns:
            AdvisorResponse

        Raises:
            ConfigurationError: Provider has no credential configured
            BackendError: The remote call failed
        """
        pass

    def close(self) -> None:
        """Release network resources held by the provider."""


class RemoteCompletionProvider(AdvisorProvider):
    """Shared prompt building and reply handling for chat-completion providers."""

    default_model: str = ""

    def __init__(self, config: Optional[BackendConfig] = None, timeout: float = 60.0):
        self.config = config or BackendConfig()
        self.api_key = self.config.api_key
        self.model = self.config.model or self.default_model
        self.temperature = (
            self.config.temperature if self.config.temperature is not None else DEFAULT_TEMPERATURE
        )
        self.max_tokens = self.config.max_tokens or DEFAULT_MAX_TOKENS
        self.timeout = timeout

    def is_available(self) -> bool:
        return bool(self.api_key)

    def build_prompt(self, user_input: str, context: AnalysisContext) -> str:
        """Render the user prompt with the catalog and business context."""
        services_list = "\n".join(
            f"- {service.title}: {service.description}" for service in context.services
        )
        return render_prompt(
            "advise",
            user_input=user_input,
            services_list=services_list,
            industry=context.user_industry or NOT_SPECIFIED,
            budget=context.user_budget or NOT_SPECIFIED,
            timeline=context.user_timeline or NOT_SPECIFIED,
        )

    def build_messages(self, user_input: str, context: AnalysisContext) -> list[dict]:
        return [
            {"role": "system", "content": render_prompt("system")},
            {"role": "user", "content": self.build_prompt(user_input, context)},
        ]

    def analyze(self, user_input: str, context: AnalysisContext) -> AdvisorResponse:
        if not self.api_key:
            raise ConfigurationError(f"{self.name} API key not configured", provider=self.name)

        content = self._complete(self.build_messages(user_input, context))
        return normalize_reply(content, provider=self.name, cost=self.get_cost())

    @abstractmethod
    def _complete(self, messages: list[dict]) -> str:
        """Send the chat messages and return the reply text."""
        pass
