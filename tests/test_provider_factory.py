# tests/test_provider_factory.py
"""Tests for the provider factory."""

import logging

import pytest


@pytest.mark.parametrize("provider_type,class_name", [
    ("openai", "OpenAIProvider"),
    ("openrouter", "OpenRouterProvider"),
    ("anthropic", "AnthropicProvider"),
    ("mock", "RuleBasedProvider"),
])
def test_create_provider_by_type(provider_type, class_name):
    from strategy_advisor.agents.advisor_types import BackendConfig
    from strategy_advisor.agents.factory import ProviderFactory

    provider = ProviderFactory.create_provider(BackendConfig(type=provider_type, api_key="k"))

    assert type(provider).__name__ == class_name


def test_create_provider_unknown_type_falls_back_to_mock(caplog):
    from strategy_advisor.agents.advisor_types import BackendConfig
    from strategy_advisor.agents.factory import ProviderFactory
    from strategy_advisor.agents.providers.rule_based import RuleBasedProvider

    with caplog.at_level(logging.WARNING, logger="strategy_advisor"):
        provider = ProviderFactory.create_provider(BackendConfig(type="gemini", api_key="k"))

    assert isinstance(provider, RuleBasedProvider)
    assert "Provider type 'gemini' not found, falling back to mock" in caplog.text


def test_create_provider_passes_settings():
    from strategy_advisor.agents.advisor_types import BackendConfig
    from strategy_advisor.agents.factory import ProviderFactory
    from strategy_advisor.config import AdvisorConfig

    settings = AdvisorConfig(site_url="https://example.com", site_title="Example", request_timeout=5.0)
    provider = ProviderFactory.create_provider(BackendConfig(type="openrouter", api_key="k"), settings)

    assert provider.site_url == "https://example.com"
    assert provider.site_title == "Example"
    assert provider.timeout == 5.0


def test_list_available_in_registration_order():
    from strategy_advisor.agents.factory import ProviderFactory

    available = ProviderFactory.list_available()

    assert [p["type"] for p in available] == ["openai", "openrouter", "anthropic", "mock"]
    assert available[0] == {"type": "openai", "name": "OpenAI GPT-4", "cost": "$$"}
    assert available[1]["cost"] == "Free"
    assert available[3] == {"type": "mock", "name": "Mock AI (Demo)", "cost": "Free"}


def test_resolve_default_config_without_env_is_mock():
    from strategy_advisor.agents.factory import ProviderFactory

    config = ProviderFactory.resolve_default_config({})

    assert config.type == "mock"
    assert config.api_key is None


def test_resolve_default_config_reads_prefixed_settings():
    from strategy_advisor.agents.factory import ProviderFactory

    config = ProviderFactory.resolve_default_config({
        "ADVISOR_PROVIDER": "OpenRouter",
        "OPENROUTER_API_KEY": "or-key",
        "OPENROUTER_MODEL": "openai/gpt-4o",
        "OPENROUTER_TEMPERATURE": "0.2",
        "OPENROUTER_MAX_TOKENS": "900",
        "OPENAI_API_KEY": "not-this-one",
    })

    assert config.type == "openrouter"
    assert config.api_key == "or-key"
    assert config.model == "openai/gpt-4o"
    assert config.temperature == 0.2
    assert config.max_tokens == 900


def test_resolve_default_config_bad_numbers_use_defaults():
    from strategy_advisor.agents.factory import ProviderFactory

    config = ProviderFactory.resolve_default_config({
        "ADVISOR_PROVIDER": "openai",
        "OPENAI_TEMPERATURE": "nan",
        "OPENAI_MAX_TOKENS": "lots",
    })

    assert config.temperature == 0.7
    assert config.max_tokens == 1500
    assert config.api_key is None


def test_resolve_default_config_unknown_provider_is_mock():
    from strategy_advisor.agents.factory import ProviderFactory

    assert ProviderFactory.resolve_default_config({"ADVISOR_PROVIDER": "gemini"}).type == "mock"


def test_resolve_default_config_reads_process_env(monkeypatch):
    from strategy_advisor.agents.factory import ProviderFactory

    monkeypatch.setenv("ADVISOR_PROVIDER", "anthropic")
    monkeypatch.setenv("ANTHROPIC_API_KEY", "ak")

    config = ProviderFactory.resolve_default_config()

    assert config.type == "anthropic"
    assert config.api_key == "ak"
