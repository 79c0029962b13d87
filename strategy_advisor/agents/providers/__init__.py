# strategy_advisor/agents/providers/__init__.py
"""Advisor providers."""

from strategy_advisor.agents.providers.base import AdvisorProvider, RemoteCompletionProvider
from strategy_advisor.agents.providers.rule_based import RuleBasedProvider
from strategy_advisor.agents.providers.openai_provider import OpenAIProvider
from strategy_advisor.agents.providers.openrouter_provider import OpenRouterProvider
from strategy_advisor.agents.providers.anthropic_provider import AnthropicProvider

__all__ = [
    "AdvisorProvider",
    "RemoteCompletionProvider",
    "RuleBasedProvider",
    "OpenAIProvider",
    "OpenRouterProvider",
    "AnthropicProvider",
]
