"""Provider Factory - builds providers from configuration."""

import logging
import math
import os
from typing import Callable, Mapping, Optional

from strategy_advisor.agents.advisor_types import BackendConfig, ProviderType
from strategy_advisor.agents.providers.anthropic_provider import AnthropicProvider
from strategy_advisor.agents.providers.base import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    AdvisorProvider,
)
from strategy_advisor.agents.providers.openai_provider import OpenAIProvider
from strategy_advisor.agents.providers.openrouter_provider import OpenRouterProvider
from strategy_advisor.agents.providers.rule_based import RuleBasedProvider
from strategy_advisor.config import AdvisorConfig

logger = logging.getLogger(__name__)

ACTIVE_PROVIDER_ENV = "ADVISOR_PROVIDER"


def _build_openai(config: BackendConfig, settings: AdvisorConfig) -> AdvisorProvider:
    return OpenAIProvider(config, timeout=settings.request_timeout)


def _build_openrouter(config: BackendConfig, settings: AdvisorConfig) -> AdvisorProvider:
    return OpenRouterProvider(
        config,
        timeout=settings.request_timeout,
        site_url=settings.site_url,
        site_title=settings.site_title,
    )


def _build_anthropic(config: BackendConfig, settings: AdvisorConfig) -> AdvisorProvider:
    return AnthropicProvider(config, timeout=settings.request_timeout)


def _build_rule_based(config: BackendConfig, settings: AdvisorConfig) -> AdvisorProvider:
    return RuleBasedProvider(config, delay=settings.mock_delay)


ProviderBuilder = Callable[[BackendConfig, AdvisorConfig], AdvisorProvider]


class ProviderFactory:
    """Selects and builds advisor providers."""

    # Registration order is the order list_available() reports.
    PROVIDERS: dict[ProviderType, ProviderBuilder] = {
        ProviderType.OPENAI: _build_openai,
        ProviderType.OPENROUTER: _build_openrouter,
        ProviderType.ANTHROPIC: _build_anthropic,
        ProviderType.MOCK: _build_rule_based,
    }

    @classmethod
    def create_provider(
        cls,
        config: BackendConfig,
        settings: Optional[AdvisorConfig] = None,
    ) -> AdvisorProvider:
        """
        Build the provider named by config.type.

        Unknown types never fail the caller: they log a warning and get the
        rule-based provider.
        """
        settings = settings or AdvisorConfig()
        provider_type = ProviderType.from_string(config.type)
        builder = cls.PROVIDERS.get(provider_type) if provider_type is not None else None

        if builder is None:
            logger.warning(f"Provider type '{config.type}' not found, falling back to mock")
            return _build_rule_based(BackendConfig(type=ProviderType.MOCK.value), settings)

        return builder(config, settings)

    @classmethod
    def list_available(cls) -> list[dict]:
        """Describe every registered provider: [{"type", "name", "cost"}]."""
        settings = AdvisorConfig()
        available = []
        for provider_type, builder in cls.PROVIDERS.items():
            provider = builder(BackendConfig(type=provider_type.value), settings)
            available.append({
                "type": provider_type.value,
                "name": provider.name,
                "cost": provider.get_cost(),
            })
        return available

    @classmethod
    def resolve_default_config(cls, environ: Optional[Mapping[str, str]] = None) -> BackendConfig:
        """
        Read the active provider and its settings from the environment.

        ADVISOR_PROVIDER names the provider; its settings come from
        <PREFIX>_API_KEY, <PREFIX>_MODEL, <PREFIX>_TEMPERATURE and
        <PREFIX>_MAX_TOKENS. Unknown or missing providers resolve to mock.
        """
        env = os.environ if environ is None else environ
        provider_type = ProviderType.from_string(env.get(ACTIVE_PROVIDER_ENV))

        if provider_type is None or provider_type not in cls.PROVIDERS:
            return BackendConfig(type=ProviderType.MOCK.value)

        prefix = provider_type.value.upper()
        return BackendConfig(
            type=provider_type.value,
            api_key=env.get(f"{prefix}_API_KEY") or None,
            model=env.get(f"{prefix}_MODEL") or None,
            temperature=_parse_float(env.get(f"{prefix}_TEMPERATURE"), DEFAULT_TEMPERATURE),
            max_tokens=_parse_int(env.get(f"{prefix}_MAX_TOKENS"), DEFAULT_MAX_TOKENS),
        )


def _parse_float(value: Optional[str], default: float) -> float:
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    return parsed if math.isfinite(parsed) else default


def _parse_int(value: Optional[str], default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default
